"""Command-line help text for a tagged API class.

Builds help from the description records of a Specifier instead of the
signature, so each parameter line carries what the tags declare:
- Integer bounds as [min..max]
- 'required' or 'optional' when an ApiRequired tag is present
- The parameter description as a trailing comment
Methods are formatted one parameter per line, like a signature.
"""
from specifier import Specifier


def _fmt_bounds(p):
    parts = []
    if p.min_value is not None:
        parts.append(f"[{p.min_value}..{p.max_value}]")
    if p.required is not None:
        parts.append('required' if p.required else 'optional')
    return ' '.join(parts)


def _fmt_param(p):
    bounds = _fmt_bounds(p)
    main_line = f"{p.common.name} {bounds}" if bounds else p.common.name
    desc = p.common.description

    if desc:
        full_line = f"{main_line}  # {desc}"
        if len(full_line) > 99:
            return [main_line, f"\t# {desc}"]
        return [full_line]
    return [main_line]


def fmt_method(m):
    """Help lines for one MethodDescription."""
    if m.params:
        p_lines = [f"\n\t{line}" for p in m.params for line in _fmt_param(p)]
        sig_fmt = f"({''.join(p_lines)}\n)"
    else:
        sig_fmt = "()"
    r = m.return_description
    if r is not None:
        sig_fmt += f" -> {_fmt_bounds(r) or 'value'}"
    lines = [f"\033[1m{m.common.name}\033[0m{sig_fmt}"]
    if m.common.description:
        lines.append(f"\t{m.common.description}")
    if r is not None and r.common.description:
        lines.append(f"\tReturns: {r.common.description}")
    return lines


def show_autodoc(cls):
    spec = Specifier(cls)
    d = spec.get_api_description()
    if d:
        print(d)
        print()
    for name in spec.get_api_method_names():
        print('\n'.join(fmt_method(spec.get_api_method_full_description(name))))
        print()
