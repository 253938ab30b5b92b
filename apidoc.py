"""API documentation MCP server.

Serves the documentation queries of a tagged class as read-only tools.

    python apidoc.py mypackage.module:MyApi          # serve over HTTP
    python apidoc.py mypackage.module:MyApi --help   # print help text
"""
import argparse
import importlib
import logging
import sys
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

import autodoc
from specifier import (InvalidOperationError, MethodDescription, NotFoundError,
                       ParamDescription, Specifier)

logger = logging.getLogger(__name__)

READ_ONLY = {
    "readOnlyHint": True,
    "destructiveHint": False
}


def build_server(cls):
    """FastMCP server answering documentation queries about cls."""
    spec = Specifier(cls)
    mcp = FastMCP("apidoc", instructions=spec.get_api_description())

    @mcp.tool(annotations=READ_ONLY)
    def get_api_description() -> str | None:
        """Description of the API, if it has one."""
        return spec.get_api_description()

    @mcp.tool(annotations=READ_ONLY)
    def get_api_method_names() -> list[str]:
        """Names of the methods exposed by the API."""
        return spec.get_api_method_names()

    @mcp.tool(annotations=READ_ONLY)
    def get_api_method_description(
            method_name: Annotated[str, "Method name"]
        ) -> str | None:
        """Description of a method."""
        try:
            return spec.get_api_method_description(method_name)
        except NotFoundError as e:
            raise ToolError(str(e)) from e

    @mcp.tool(annotations=READ_ONLY)
    def get_api_method_param_names(
            method_name: Annotated[str, "Method name"]
        ) -> list[str]:
        """Parameter names of a method, in declaration order."""
        try:
            return spec.get_api_method_param_names(method_name)
        except (NotFoundError, InvalidOperationError) as e:
            raise ToolError(str(e)) from e

    @mcp.tool(annotations=READ_ONLY)
    def get_api_method_param_description(
            method_name: Annotated[str, "Method name"],
            param_name: Annotated[str, "Parameter name"]
        ) -> str | None:
        """Description of one parameter of a method."""
        return spec.get_api_method_param_description(method_name, param_name)

    @mcp.tool(annotations=READ_ONLY)
    def get_api_method_param_full_description(
            method_name: Annotated[str, "Method name"],
            param_name: Annotated[str, "Parameter name"]
        ) -> ParamDescription:
        """Description, integer bounds and requiredness of one parameter."""
        return spec.get_api_method_param_full_description(method_name, param_name)

    @mcp.tool(annotations=READ_ONLY)
    def get_api_method_full_description(
            method_name: Annotated[str, "Method name"]
        ) -> MethodDescription | None:
        """Full description of an API method: parameters and return value.

        Returns:
            null when the method does not exist or is not part of the API
        """
        return spec.get_api_method_full_description(method_name)

    return mcp


def load_target(target):
    """Resolve 'module:Class' to the class object."""
    mod_name, sep, attr = target.partition(':')
    if not sep or not mod_name or not attr:
        raise ValueError(f"Target must look like module:Class, got {target!r}")
    obj = importlib.import_module(mod_name)
    for part in attr.split('.'):
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        raise ValueError(f"{target} is not a class")
    return obj


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Serve the API documentation of a tagged class over MCP',
        add_help=False
    )
    parser.add_argument('target', nargs='?', help='Class to document, as module:Class')
    parser.add_argument('--help', action='store_true',
                        help='Print the help text of the class (or this usage) and exit')
    parser.add_argument('--host', default='0.0.0.0')
    parser.add_argument('--port', type=int, default=9028)
    parser.add_argument('--transport', choices=['http', 'stdio'], default='http')
    parser.add_argument('--log-level', default='INFO')
    args = parser.parse_args(argv)

    if args.target is None:
        if args.help:
            parser.print_help()
            return
        parser.error("the following arguments are required: target")

    try:
        cls = load_target(args.target)
    except (ImportError, AttributeError, ValueError) as e:
        parser.error(str(e))

    if args.help:
        autodoc.show_autodoc(cls)
        return

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    mcp = build_server(cls)
    if args.transport == 'http':
        logger.info("Serving %s on %s:%d", args.target, args.host, args.port)
        mcp.run(transport="http", host=args.host, port=args.port)
    else:
        logger.info("Serving %s over stdio", args.target)
        mcp.run(transport="stdio")


if __name__ == "__main__":
    sys.exit(main())
