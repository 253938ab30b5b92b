"""Runtime API documentation for a tagged class.

A Specifier is bound to one class and answers questions about it by reading
the tags from apitags on demand: the API description, which methods are
exposed, their parameters, and the assembled description of a method.
Missing metadata comes back as None; only a missing method (and a method
without a description, for get_api_method_param_names) is an error.
"""
import inspect
import logging
from dataclasses import dataclass
from typing import Annotated, Generic, TypeVar, get_args, get_origin

from apitags import (ApiDescription, ApiIntValidation, ApiMethod, ApiRequired,
                     annotation_tags, find_tag, tags_of)

logger = logging.getLogger(__name__)

T = TypeVar('T')


class NotFoundError(LookupError):
    """The bound class has no method of that name."""


class InvalidOperationError(Exception):
    """The method is not documented as an API method."""


@dataclass(frozen=True)
class CommonDescription:
    name: str
    description: str | None = None


@dataclass(frozen=True)
class ParamDescription:
    common: CommonDescription
    min_value: int | None = None
    max_value: int | None = None
    required: bool | None = None


@dataclass(frozen=True)
class MethodDescription:
    common: CommonDescription
    params: tuple[ParamDescription, ...] = ()
    return_description: ParamDescription | None = None


def _description(tags):
    tag = find_tag(tags, ApiDescription)
    return tag.text if tag else None


def _validation_fields(tags):
    """min_value/max_value/required for a parameter or return value."""
    fields = {}
    validation = find_tag(tags, ApiIntValidation)
    if validation:
        fields['min_value'] = validation.min_value
        fields['max_value'] = validation.max_value
    required = find_tag(tags, ApiRequired)
    if required:
        fields['required'] = required.required
    return fields


def _param_description(name, tags):
    return ParamDescription(common=CommonDescription(name, _description(tags)),
                            **_validation_fields(tags))


def _is_void(ann):
    if get_origin(ann) is Annotated:
        ann = get_args(ann)[0]
    if isinstance(ann, str):
        # left unresolved by _signature
        return ann == 'None'
    return ann is None or ann is type(None) or ann is inspect.Signature.empty


def _signature(method):
    try:
        return inspect.signature(method, eval_str=True)
    except (NameError, AttributeError):
        # string annotations that do not resolve stay strings and carry no tags
        logger.debug("Unresolved annotations on %r", method)
    except (TypeError, ValueError):
        # some builtin routines carry no signature metadata
        logger.debug("No signature available for %r", method)
        return None
    return inspect.signature(method)


class Specifier(Generic[T]):
    """Answers documentation queries about the class it was created for."""

    def __init__(self, cls: type[T]):
        self.cls = cls

    def _methods(self):
        return [(name, member) for name, member
                in inspect.getmembers(self.cls, inspect.isroutine)
                if not name.startswith('_')]

    def _method(self, method_name):
        return dict(self._methods()).get(method_name)

    def _require_method(self, method_name):
        method = self._method(method_name)
        if method is None:
            logger.debug("%s has no method %r", self.cls.__name__, method_name)
            raise NotFoundError(f"{self.cls.__name__} has no method {method_name!r}")
        return method

    def _parameters(self, method_name, method):
        sig = _signature(method)
        if sig is None:
            return []
        params = list(sig.parameters.values())
        # self is still in the signature of a routine that is not bound to the class
        static = isinstance(inspect.getattr_static(self.cls, method_name), staticmethod)
        if not static and getattr(method, '__self__', None) is None:
            params = params[1:]
        return params

    def _parameter(self, method_name, param_name):
        method = self._method(method_name)
        if method is None:
            return None
        for p in self._parameters(method_name, method):
            if p.name == param_name:
                return p
        return None

    def get_api_description(self) -> str | None:
        return _description(tags_of(self.cls))

    def get_api_method_names(self) -> list[str]:
        """Names of the methods marked with api_method, in name order."""
        return [name for name, member in self._methods()
                if find_tag(tags_of(member), ApiMethod)]

    def get_api_method_description(self, method_name: str) -> str | None:
        """Description of a method, whether or not it is marked as an API method.

        Raises:
            NotFoundError: no such method
        """
        return _description(tags_of(self._require_method(method_name)))

    def get_api_method_param_names(self, method_name: str) -> list[str]:
        """Parameter names of a method in declaration order.

        Raises:
            NotFoundError: no such method
            InvalidOperationError: the method has no description
        """
        method = self._require_method(method_name)
        if find_tag(tags_of(method), ApiDescription) is None:
            logger.debug("%s.%s has no description", self.cls.__name__, method_name)
            raise InvalidOperationError(f"{method_name} is not an ApiMethod")
        return [p.name for p in self._parameters(method_name, method)]

    def get_api_method_param_description(self, method_name: str,
                                         param_name: str) -> str | None:
        param = self._parameter(method_name, param_name)
        if param is None:
            return None
        return _description(annotation_tags(param.annotation))

    def get_api_method_param_full_description(self, method_name: str,
                                              param_name: str) -> ParamDescription:
        """Assemble bounds, requiredness and description of one parameter.

        An unknown method or parameter gives a record with every field None
        except the name.
        """
        param = self._parameter(method_name, param_name)
        tags = annotation_tags(param.annotation) if param is not None else ()
        return _param_description(param_name, tags)

    def get_api_method_full_description(self, method_name: str) -> MethodDescription | None:
        """Assemble the description tree of an API method.

        Returns None when the method does not exist or is not marked with
        api_method. The return value is described under the name 'return'
        and left out for methods returning None.
        """
        method = self._method(method_name)
        if method is None or find_tag(tags_of(method), ApiMethod) is None:
            return None

        params = tuple(self.get_api_method_param_full_description(method_name, p.name)
                       for p in self._parameters(method_name, method))
        sig = _signature(method)
        ret = sig.return_annotation if sig is not None else inspect.Signature.empty
        return MethodDescription(
            common=CommonDescription(method_name, _description(tags_of(method))),
            params=params,
            return_description=None if _is_void(ret)
            else _param_description('return', annotation_tags(ret)),
        )
