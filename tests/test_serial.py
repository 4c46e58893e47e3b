from dataclasses import dataclass

import pytest

from cobcsw import serial
from cobcsw.serial import (
    BOOL,
    BYTE,
    CHAR,
    DOUBLE,
    FLOAT,
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    Layout,
    Primitive,
    byte,
    deserialize,
    deserialize_from,
    is_trivially_serializable,
    serial_size,
    serialize,
    serialize_to,
    total_serial_size,
)


@dataclass
class S:
    u16: int = 0
    i32: int = 0


S_LAYOUT = Layout((("u16", UINT16), ("i32", INT32)), factory=S)


@pytest.mark.parametrize(
    "kind", [BYTE, CHAR, BOOL, INT8, UINT8, INT16, UINT16, INT32, UINT32, INT64, UINT64, FLOAT, DOUBLE]
)
def test_primitives_are_trivially_serializable(kind):
    assert is_trivially_serializable(kind) is True


@pytest.mark.parametrize("kind", [S_LAYOUT, Layout(()), [DOUBLE, DOUBLE, DOUBLE], "int", None])
def test_other_kinds_are_not_trivially_serializable(kind):
    assert is_trivially_serializable(kind) is False


def test_serialize_trivially_serializable_types():
    byte_buffer = serialize(0xAA, BYTE)
    int8_buffer = serialize(-4, INT8)
    uint16_buffer = serialize(11, UINT16)
    int32_buffer = serialize(-2, INT32)
    uint64_buffer = serialize(0x0102030405060708, UINT64)
    bool_buffer = serialize(True, BOOL)

    assert len(byte_buffer) == 1
    assert len(int8_buffer) == 1
    assert len(uint16_buffer) == 2
    assert len(int32_buffer) == 4
    assert len(uint64_buffer) == 8
    assert len(bool_buffer) == 1

    assert byte_buffer[0] == 0xAA
    assert int8_buffer[0] == 0xFC
    assert list(uint16_buffer) == [0x0B, 0x00]
    assert list(int32_buffer) == [0xFE, 0xFF, 0xFF, 0xFF]
    assert list(uint64_buffer) == [0x08, 0x07, 0x06, 0x05, 0x04, 0x03, 0x02, 0x01]


def test_deserialize_trivially_serializable_types():
    buffer = bytes([byte(0x01), byte(0x02), byte(0x03), byte(0x04)])
    int32 = deserialize(INT32, buffer)
    uint16 = deserialize(UINT16, buffer[:2])
    int8 = deserialize(INT8, buffer[2:3])

    assert int32 == (4 << 24) + (3 << 16) + (2 << 8) + 1
    assert uint16 == (2 << 8) + 1
    assert int8 == 3


def test_deserialize_is_inverse_of_serialize():
    assert deserialize(CHAR, serialize("x", CHAR)) == "x"
    assert deserialize(UINT8, serialize(56, UINT8)) == 56
    assert deserialize(INT16, serialize(-3333, INT16)) == -3333
    assert deserialize(UINT32, serialize(123456, UINT32)) == 123456
    assert deserialize(INT64, serialize(-999999, INT64)) == -999999
    assert deserialize(BOOL, serialize(True, BOOL)) is True


def test_serialize_user_defined_type():
    buffer = serialize(S(u16=0xABCD, i32=0x12345678), S_LAYOUT)
    assert len(buffer) == 2 + 4
    assert list(buffer) == [0xCD, 0xAB, 0x78, 0x56, 0x34, 0x12]

    s = deserialize(S_LAYOUT, buffer)
    assert s == S(u16=0xABCD, i32=0x12345678)


def test_layout_accepts_mappings_and_defaults_to_dict():
    layout = Layout((("a", UINT8), ("b", INT16)))
    buffer = serialize({"a": 7, "b": -2}, layout)
    assert deserialize(layout, buffer) == {"a": 7, "b": -2}


def test_serial_sizes():
    assert serial_size(UINT64) == 8
    assert serial_size(S_LAYOUT) == 6
    assert serial_size("nothing") == 0
    assert total_serial_size(CHAR, INT32, INT8, INT16) == 8
    assert total_serial_size() == 0


def test_serialize_to_rejects_overflow():
    buffer = bytearray(3)
    with pytest.raises(ValueError):
        serialize_to(buffer, 0, 1, INT32)


def test_deserialize_from_round_trip():
    buffer = bytearray(6)
    end = serialize_to(buffer, 0, -5, INT16)
    serialize_to(buffer, end, 99, UINT32)
    first, offset = deserialize_from(buffer, 0, INT16)
    second, offset = deserialize_from(buffer, offset, UINT32)
    assert (first, second, offset) == (-5, 99, 6)


def test_deserialize_from_rejects_short_data():
    with pytest.raises(ValueError):
        deserialize_from(b"\x00\x01", 1, UINT16)


def test_deserialize_rejects_wrong_length():
    with pytest.raises(ValueError):
        deserialize(INT32, b"\x00\x00\x00")


def test_serialize_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        serialize(256, UINT8)
    with pytest.raises(ValueError):
        serialize(-1, UINT16)


def test_unserializable_kinds_raise_type_error():
    with pytest.raises(TypeError):
        serialize({}, Layout(()))
    with pytest.raises(TypeError):
        deserialize("int", b"")


def test_primitive_methods_round_trip():
    kind = Primitive("uint16", "H")
    assert kind.deserialize(kind.serialize(0xBEEF)) == 0xBEEF


def test_float_round_trip():
    assert deserialize(DOUBLE, serialize(1.5, DOUBLE)) == 1.5
    assert deserialize(FLOAT, serialize(0.25, FLOAT)) == 0.25


def test_byte_keeps_lowest_bits_and_rejects_negative():
    assert byte(0xAC) == 0xAC
    assert byte(0x1AC) == 0xAC
    with pytest.raises(ValueError):
        byte(-1)


def test_module_exposes_layout_class():
    assert serial.Layout is Layout
    assert S_LAYOUT.size == 6