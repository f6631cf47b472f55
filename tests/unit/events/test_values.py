import datetime

import pytest

from stencil.events.property import LogEventProperty
from stencil.events.values import (
    DEPTH_EXCEEDED,
    MISSING,
    DictionaryValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)


def test_top_level_strings_unquoted_nested_quoted():
    assert ScalarValue("a").render() == "a"
    assert ScalarValue("a").render(nested=True) == '"a"'
    assert ScalarValue('say "hi"').render(nested=True) == '"say \\"hi\\""'


def test_literal_format_keeps_nested_strings_unquoted():
    assert SequenceValue((ScalarValue("a"),)).render("l") == "[a]"


def test_string_format_specifier_applied():
    assert ScalarValue("ab").render(">5") == "   ab"
    assert ScalarValue("ab").render("*^6") == "**ab**"
    assert ScalarValue("ab").render("d") == "ab"


def test_scalar_format():
    value = ScalarValue(datetime.date(2024, 1, 2))
    assert value.render("%Y/%m/%d") == "2024/01/02"


def test_structure_render():
    value = StructureValue(
        (
            LogEventProperty("Id", ScalarValue(1)),
            LogEventProperty("Name", ScalarValue("x")),
        ),
        "Order",
    )
    assert value.render() == 'Order { Id: 1, Name: "x" }'
    assert StructureValue(()).render() == "{ }"


def test_dictionary_render():
    value = DictionaryValue(((ScalarValue("k"), ScalarValue(2)),))
    assert value.render() == '{"k": 2}'


def test_markers():
    assert MISSING.render() == ""
    assert MISSING.to_primitive() is None
    assert DEPTH_EXCEEDED.render() == "..."
    assert repr(DEPTH_EXCEEDED) == "DEPTH_EXCEEDED"


def test_values_are_frozen():
    value = ScalarValue(1)
    with pytest.raises(AttributeError):
        value.value = 2


@pytest.mark.parametrize("name", ["", " ", None, 5])
def test_property_requires_name(name):
    with pytest.raises(ValueError):
        LogEventProperty(name, ScalarValue(1))
