"""Declarative tags for describing an API in place.

Classes and methods are tagged with decorators, parameters and return
values through Annotated metadata:

    @api_description("Arithmetic helpers")
    class Calculator:
        @api_method
        @api_description("Adds two numbers")
        def add(self,
                a: Annotated[int, ApiDescription("Left operand"), ApiRequired()],
                b: Annotated[int, "Right operand", ApiIntValidation(0, 100)]
                ) -> Annotated[int, ApiDescription("The sum")]:
            return a + b

A plain string in Annotated metadata is read as a description.
"""
from dataclasses import dataclass
from typing import Annotated, get_args, get_origin

TAGS_ATTR = '__api_tags__'


@dataclass(frozen=True)
class ApiDescription:
    text: str


@dataclass(frozen=True)
class ApiMethod:
    """Marks a method as part of the exposed API."""


@dataclass(frozen=True)
class ApiIntValidation:
    min_value: int
    max_value: int


@dataclass(frozen=True)
class ApiRequired:
    required: bool = True


def _target(obj):
    if isinstance(obj, (staticmethod, classmethod)):
        return obj.__func__
    return obj


def _attach(obj, tag):
    target = _target(obj)
    own = vars(target).get(TAGS_ATTR, ())
    setattr(target, TAGS_ATTR, own + (tag,))
    return obj


def api_description(text):
    """Attach an ApiDescription to a class or method."""
    def decorator(obj):
        return _attach(obj, ApiDescription(text))
    return decorator


def api_method(obj):
    """Attach the ApiMethod marker to a method."""
    return _attach(obj, ApiMethod())


def tags_of(obj):
    """Tags attached to a class or function by the decorators above."""
    return tuple(getattr(_target(obj), TAGS_ATTR, ()))


def annotation_tags(ann):
    """Tags carried by a parameter or return annotation."""
    if get_origin(ann) is not Annotated:
        return ()
    return tuple(ApiDescription(m) if isinstance(m, str) else m
                 for m in get_args(ann)[1:])


def find_tag(tags, kind):
    """First tag of the given kind, or None."""
    for tag in tags:
        if isinstance(tag, kind):
            return tag
    return None
