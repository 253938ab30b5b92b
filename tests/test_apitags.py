"""Tests for the tag declarations."""
from typing import Annotated

from apitags import (ApiDescription, ApiIntValidation, ApiMethod, ApiRequired,
                     annotation_tags, api_description, api_method, find_tag,
                     tags_of)
from tests.fixtures.sample_api import Calculator, ScientificCalculator


class TestDecorators:

    def test_class_description(self):
        assert tags_of(Calculator) == (ApiDescription("Arithmetic helpers"),)

    def test_subclass_inherits_tags(self):
        assert tags_of(ScientificCalculator) == tags_of(Calculator)

    def test_method_tags_in_application_order(self):
        assert tags_of(Calculator.add) == (ApiDescription("Adds two numbers"), ApiMethod())

    def test_untagged_method(self):
        assert tags_of(Calculator.plain) == ()

    def test_static_and_class_methods_tag_the_function(self):
        assert find_tag(tags_of(Calculator.square), ApiMethod) == ApiMethod()
        assert find_tag(tags_of(Calculator.create), ApiDescription).text == "Builds a calculator"

    def test_decorators_return_the_object(self):
        def f():
            pass
        assert api_method(f) is f
        assert api_description("x")(f) is f


class TestAnnotationTags:

    def test_plain_annotation_has_no_tags(self):
        assert annotation_tags(int) == ()

    def test_string_metadata_is_a_description(self):
        assert annotation_tags(Annotated[int, "CPU number"]) == (ApiDescription("CPU number"),)

    def test_mixed_metadata(self):
        tags = annotation_tags(Annotated[int, ApiIntValidation(1, 2), ApiRequired()])
        assert find_tag(tags, ApiIntValidation) == ApiIntValidation(1, 2)
        assert find_tag(tags, ApiRequired).required is True
        assert find_tag(tags, ApiDescription) is None


def test_find_tag_first_match_wins():
    tags = (ApiDescription("first"), ApiDescription("second"))
    assert find_tag(tags, ApiDescription).text == "first"
