import doctest
import struct

import pytest

import read_primitives
import read_primitives.adapters.max_bytes
import read_primitives.encoding.bool
import read_primitives.encoding.char
import read_primitives.encoding.float
import read_primitives.encoding.int
import read_primitives.source
from read_primitives import ByteOrder, BytesDeserializer, OutOfDataError
from read_primitives.encoding import FLOAT_LENGTHS, INT_LENGTHS, decode_bool, decode_char, decode_float, decode_int


@pytest.mark.parametrize('module', [
    read_primitives,
    read_primitives.adapters.max_bytes,
    read_primitives.encoding.bool,
    read_primitives.encoding.char,
    read_primitives.encoding.float,
    read_primitives.encoding.int,
    read_primitives.source,
])
def test_docstring_examples(module: object) -> None:
    result = doctest.testmod(module, raise_on_error=False)  # type: ignore[arg-type]
    assert result.failed == 0


def test_supported_lengths() -> None:
    assert INT_LENGTHS == (1, 2, 4, 8, 16)
    assert FLOAT_LENGTHS == (4, 8)


@pytest.mark.parametrize('length', [0, 3, 5, 7, 32, -1])
def test_unsupported_int_length_reads_nothing(length: int) -> None:
    de = BytesDeserializer(bytes(64))
    with pytest.raises(ValueError):
        decode_int(de, length=length, signed=False, byteorder=ByteOrder.LITTLE)
    assert len(de) == 64


@pytest.mark.parametrize('length', [0, 1, 2, 16])
def test_unsupported_float_length_reads_nothing(length: int) -> None:
    de = BytesDeserializer(bytes(64))
    with pytest.raises(ValueError):
        decode_float(de, length=length, byteorder=ByteOrder.BIG)
    assert len(de) == 64


def test_invalid_byte_order_reads_nothing() -> None:
    de = BytesDeserializer(bytes(8))
    with pytest.raises(ValueError):
        decode_int(de, length=4, signed=False, byteorder='native')  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        decode_float(de, length=4, byteorder='network')  # type: ignore[arg-type]
    assert len(de) == 8


def test_byte_order_as_string() -> None:
    data = (1234567).to_bytes(4, 'little')
    assert decode_int(BytesDeserializer(data), length=4, signed=False, byteorder='little') == 1234567
    assert decode_int(BytesDeserializer(data), length=4, signed=False, byteorder=ByteOrder.LITTLE) == 1234567


def test_struct_prefix() -> None:
    assert ByteOrder.LITTLE.struct_prefix == '<'
    assert ByteOrder.BIG.struct_prefix == '>'


@pytest.mark.parametrize('length', INT_LENGTHS)
def test_two_complement_extremes(length: int) -> None:
    bits = 8 * length
    all_ones = b'\xff' * length
    sign_only = b'\x80' + b'\x00' * (length - 1)
    assert decode_int(BytesDeserializer(all_ones), length=length, signed=True, byteorder='big') == -1
    assert decode_int(BytesDeserializer(all_ones), length=length, signed=False, byteorder='big') == (1 << bits) - 1
    assert decode_int(BytesDeserializer(sign_only), length=length, signed=True, byteorder='big') == -(1 << (bits - 1))
    assert decode_int(BytesDeserializer(sign_only[::-1]), length=length, signed=True, byteorder='little') == \
        -(1 << (bits - 1))


def test_float_bit_patterns() -> None:
    assert decode_float(BytesDeserializer(bytes.fromhex('7f800000')), length=4, byteorder='big') == float('inf')
    assert decode_float(BytesDeserializer(bytes.fromhex('0000000000000080')), length=8, byteorder='little') == 0.0
    smallest = decode_float(BytesDeserializer(bytes.fromhex('0000000000000001')), length=8, byteorder='big')
    assert smallest == struct.unpack('>d', bytes.fromhex('0000000000000001'))[0] == 5e-324


def test_decode_bool() -> None:
    de = BytesDeserializer(b'\x00\x01\xff')
    assert [decode_bool(de), decode_bool(de), decode_bool(de)] == [False, True, True]
    with pytest.raises(OutOfDataError):
        decode_bool(de)


@pytest.mark.parametrize('code_point,expected', [
    (0x41, 'A'),
    (0x0, '\x00'),
    (0xD7FF, '\ud7ff'),
    (0xD800, None),
    (0xDFFF, None),
    (0xE000, '\ue000'),
    (0x10FFFF, '\U0010ffff'),
    (0x110000, None),
    (0xFFFFFFFF, None),
])
def test_decode_char(code_point: int, expected: object) -> None:
    for byteorder in ByteOrder:
        data = code_point.to_bytes(4, byteorder.value) + b'!'
        de = BytesDeserializer(data)
        assert decode_char(de, byteorder=byteorder) == expected
        assert len(de) == 1


def test_named_char_readers() -> None:
    de = BytesDeserializer(b'\x41\x00\x00\x00\x00\x00\x00\x42')
    assert de.read_le_char() == 'A'
    assert de.read_be_char() == 'B'
    de.finalize()
