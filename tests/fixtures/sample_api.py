"""Tagged classes used by the tests."""
from typing import Annotated

from apitags import (ApiDescription, ApiIntValidation, ApiRequired,
                     api_description, api_method)


@api_description("Arithmetic helpers")
class Calculator:

    @api_method
    @api_description("Adds two numbers")
    def add(self,
            a: Annotated[int, ApiDescription("Left operand"), ApiIntValidation(1, 10), ApiRequired()],
            b: Annotated[int, "Right operand"] = 0
            ) -> Annotated[int, ApiDescription("The sum"), ApiIntValidation(0, 20), ApiRequired(False)]:
        return a + b

    @api_method
    @api_description("Does X")
    def reset(self, n) -> None:
        pass

    @api_description("Internal helper")
    def helper(self, x: int) -> int:
        return x

    @api_method
    def ping(self) -> str:
        return 'pong'

    def plain(self, y):
        return y

    @api_method
    @api_description("Builds a calculator")
    @classmethod
    def create(cls, seed: Annotated[int, ApiRequired()]) -> 'Calculator':
        return cls()

    @api_method
    @api_description("Squares a number")
    @staticmethod
    def square(x: Annotated[int, ApiIntValidation(-100, 100)]) -> int:
        return x * x

    @api_method
    @api_description("Hidden")
    def _private(self):
        pass


class ScientificCalculator(Calculator):

    @api_method
    @api_description("Raises to a power")
    def power(self, base: int, exp: Annotated[int, ApiIntValidation(0, 8)]) -> int:
        return base ** exp


class Bare:

    def run(self, a):
        return a


class Voids:

    @api_method
    def none_type(self) -> type(None):
        pass

    @api_method
    def annotated_none(self) -> Annotated[None, ApiDescription("Nothing")]:
        pass


class Number(int):
    pass
