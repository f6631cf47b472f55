import dataclasses
import datetime
import decimal
import enum
import io
import itertools
import uuid
from collections import namedtuple

import pytest
from pydantic import BaseModel

from stencil.capture.converter import PropertyValueConverter
from stencil.events.property import CaptureMode
from stencil.events.values import (
    DEPTH_EXCEEDED,
    DictionaryValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)


class Color(enum.Enum):
    RED = "red"


@dataclasses.dataclass
class Order:
    id: int
    lines: list


class Customer(BaseModel):
    name: str
    vip: bool = False


Point = namedtuple("Point", ["x", "y"])


class Plain:
    def __init__(self):
        self.visible = 1
        self._hidden = 2

    def __str__(self):
        return "Plain!"


class Node:
    def __init__(self):
        self.next = self


@pytest.fixture
def converter():
    return PropertyValueConverter()


@pytest.mark.parametrize(
    "value",
    [
        "text",
        42,
        1.5,
        True,
        decimal.Decimal("1.10"),
        datetime.datetime(2024, 1, 2, 3, 4, 5),
        datetime.date(2024, 1, 2),
        datetime.timedelta(seconds=3),
        uuid.UUID("12345678-1234-5678-1234-567812345678"),
        Color.RED,
        b"\x00\x01",
    ],
)
def test_scalars_captured_as_is(converter, value):
    assert converter.create_value(value) == ScalarValue(value)


def test_none_is_null_scalar(converter):
    captured = converter.create_value(None)
    assert captured == ScalarValue(None)
    assert captured.render() == "null"


def test_sequence_captured_elementwise(converter):
    assert converter.create_value([1, "a", (2, 3)]) == SequenceValue(
        (
            ScalarValue(1),
            ScalarValue("a"),
            SequenceValue((ScalarValue(2), ScalarValue(3))),
        )
    )


def test_generator_is_sequence(converter):
    assert converter.create_value(i * 2 for i in range(3)) == SequenceValue(
        (ScalarValue(0), ScalarValue(2), ScalarValue(4))
    )


def test_mapping_captured_as_dictionary(converter):
    captured = converter.create_value({"a": 1, 2: [3]})
    assert captured == DictionaryValue(
        (
            (ScalarValue("a"), ScalarValue(1)),
            (ScalarValue(2), SequenceValue((ScalarValue(3),))),
        )
    )
    assert captured.to_primitive() == {"a": 1, "2": [3]}


def test_composite_without_destructuring_is_stringified(converter):
    assert converter.create_value(Plain()) == ScalarValue("Plain!")
    order = Order(1, [])
    assert converter.create_value(order) == ScalarValue(str(order))


def test_pydantic_model_without_destructuring_is_stringified(converter):
    customer = Customer(name="Ada")
    captured = converter.create_value(customer)
    assert captured == ScalarValue(str(customer))


def test_stream_is_not_consumed(converter):
    stream = io.StringIO("line1\nline2\n")
    captured = converter.create_value(stream)
    assert isinstance(captured, ScalarValue)
    assert stream.read() == "line1\nline2\n"


def test_endless_iterator_is_stringified(converter):
    counter = itertools.count()
    assert converter.create_value(counter) == ScalarValue(repr(counter))
    assert next(counter) == 0


def test_stringify_hint(converter):
    assert converter.create_value([1, 2], CaptureMode.STRINGIFY) == ScalarValue("[1, 2]")


def test_destructure_dataclass(converter):
    captured = converter.create_value(Order(7, ["x"]), CaptureMode.DESTRUCTURE)
    assert isinstance(captured, StructureValue)
    assert captured.type_tag == "Order"
    assert captured.to_primitive() == {"_typeTag": "Order", "id": 7, "lines": ["x"]}
    assert captured.render() == 'Order { id: 7, lines: ["x"] }'


def test_destructure_pydantic_model(converter):
    captured = converter.create_value(Customer(name="Ann"), CaptureMode.DESTRUCTURE)
    assert captured.to_primitive() == {"_typeTag": "Customer", "name": "Ann", "vip": False}


def test_destructure_namedtuple(converter):
    captured = converter.create_value(Point(1, 2), CaptureMode.DESTRUCTURE)
    assert captured.to_primitive() == {"_typeTag": "Point", "x": 1, "y": 2}


def test_namedtuple_without_destructuring_is_sequence(converter):
    assert converter.create_value(Point(1, 2)) == SequenceValue(
        (ScalarValue(1), ScalarValue(2))
    )


def test_destructure_plain_object_skips_private(converter):
    captured = converter.create_value(Plain(), CaptureMode.DESTRUCTURE)
    assert captured.to_primitive() == {"_typeTag": "Plain", "visible": 1}


def test_destructure_nested_members_also_destructured(converter):
    captured = converter.create_value(
        Order(1, [Customer(name="Bo")]), CaptureMode.DESTRUCTURE
    )
    assert captured.to_primitive()["lines"] == [
        {"_typeTag": "Customer", "name": "Bo", "vip": False}
    ]


def test_failing_accessor_is_captured_as_message(converter):
    class WithSlots:
        __slots__ = ("a", "b")

        def __init__(self):
            self.a = 1

    captured = converter.create_value(WithSlots(), CaptureMode.DESTRUCTURE)
    primitive = captured.to_primitive()
    assert primitive["a"] == 1
    assert primitive["b"] == "The property accessor threw an exception: AttributeError"


def test_cyclic_value_terminates_at_max_depth():
    converter = PropertyValueConverter(maximum_destructuring_depth=3)
    captured = converter.create_value(Node(), CaptureMode.DESTRUCTURE)

    depth = 0
    value = captured
    while isinstance(value, StructureValue):
        depth += 1
        value = value.properties[0].value
    assert value is DEPTH_EXCEEDED
    assert depth == 4


def test_self_referencing_list_terminates():
    converter = PropertyValueConverter(maximum_destructuring_depth=2)
    items: list = []
    items.append(items)
    captured = converter.create_value(items)
    assert captured == SequenceValue((SequenceValue((SequenceValue((DEPTH_EXCEEDED,)),)),))


def test_string_truncation():
    converter = PropertyValueConverter(maximum_string_length=5)
    assert converter.create_value("abcdefgh") == ScalarValue("abcd…")
    assert converter.create_value("abcde") == ScalarValue("abcde")


def test_collection_truncation():
    converter = PropertyValueConverter(maximum_collection_count=2)
    assert converter.create_value([1, 2, 3]) == SequenceValue(
        (ScalarValue(1), ScalarValue(2))
    )
    assert len(converter.create_value({"a": 1, "b": 2, "c": 3}).elements) == 2


def test_invalid_depth_rejected():
    with pytest.raises(ValueError):
        PropertyValueConverter(maximum_destructuring_depth=0)


def test_create_property_records_capture_mode(converter):
    prop = converter.create_property("Order", Order(1, []), CaptureMode.DESTRUCTURE)
    assert prop.name == "Order"
    assert prop.capture is CaptureMode.DESTRUCTURE
    assert isinstance(prop.value, StructureValue)
