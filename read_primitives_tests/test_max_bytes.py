import io

import pytest

from read_primitives import (
    Deserializer,
    MaxBytesDeserializer,
    MaxBytesExceededError,
    OutOfDataError,
    SerializationError,
    StreamDeserializer,
    reader_for,
)
from read_primitives.conf import ReaderSettings


def test_reads_within_limit() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00\x01\x00\x00\x00\x02').with_max_bytes(6)
    assert de.read_be_u16() == 1
    assert de.bytes_left == 4
    assert de.read_be_u32() == 2
    assert de.bytes_left == 0
    de.finalize()


def test_limit_exceeded_consumes_nothing() -> None:
    inner = Deserializer.build_bytes_deserializer(bytes(range(16)))
    de = inner.with_max_bytes(6)
    de.read_le_u32()
    with pytest.raises(MaxBytesExceededError):
        de.read_le_u32()
    assert de.bytes_left == 2
    assert len(inner) == 12
    assert de.read_be_u16() == 0x0405
    assert issubclass(MaxBytesExceededError, SerializationError)


def test_short_read_does_not_use_up_budget() -> None:
    de = reader_for(b'\x01\x02\x03', max_bytes=4)
    assert isinstance(de, MaxBytesDeserializer)
    with pytest.raises(OutOfDataError):
        de.read_le_u32()
    assert de.bytes_left == 4
    assert de.read_le_u16() == 0x0201
    assert de.bytes_left == 2
    assert de.read_u8() == 3
    assert de.bytes_left == 1


def test_short_stream_read_does_not_use_up_budget() -> None:
    de = StreamDeserializer(io.BytesIO(b'\x01\x02\x03')).with_max_bytes(8)
    with pytest.raises(OutOfDataError):
        de.read_be_u64()
    assert de.bytes_left == 8


def test_inexact_read_is_charged_what_it_returned() -> None:
    de = Deserializer.build_bytes_deserializer(b'abc').with_max_bytes(5)
    assert bytes(de.read_bytes(5, exact=False)) == b'abc'
    assert de.bytes_left == 2
    with pytest.raises(MaxBytesExceededError):
        de.read_bytes(3, exact=False)


def test_read_all_within_limit() -> None:
    de = reader_for(b'abc', max_bytes=3)
    assert isinstance(de, MaxBytesDeserializer)
    assert bytes(de.read_all()) == b'abc'
    assert de.bytes_left == 0

    de = Deserializer.build_bytes_deserializer(b'ab').with_max_bytes(3)
    assert bytes(de.read_all()) == b'ab'
    assert de.bytes_left == 1

    de = Deserializer.build_bytes_deserializer(b'abcd').with_max_bytes(3)
    with pytest.raises(MaxBytesExceededError):
        de.read_all()


def test_peek_is_not_charged() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02').with_max_bytes(2)
    assert de.peek_byte() == 1
    assert bytes(de.peek_bytes(2)) == b'\x01\x02'
    assert de.bytes_left == 2
    assert not de.is_empty()


def test_with_max_bytes_none() -> None:
    inner = Deserializer.build_bytes_deserializer(b'\x01')
    assert inner.with_max_bytes(None) is inner
    wrapped = inner.with_max_bytes(1)
    assert isinstance(wrapped, MaxBytesDeserializer)
    assert wrapped.inner is inner
    assert wrapped.read_u8() == 1
    assert wrapped.is_empty()
    wrapped.finalize()


def test_negative_limit() -> None:
    with pytest.raises(ValueError):
        Deserializer.build_bytes_deserializer(b'').with_max_bytes(-1)


def test_reader_for_applies_limits() -> None:
    de = reader_for(bytes(8), max_bytes=4)
    assert isinstance(de, MaxBytesDeserializer)
    de.read_le_u32()
    with pytest.raises(MaxBytesExceededError):
        de.read_u8()

    de = reader_for(bytes(8), settings=ReaderSettings(MAX_BYTES=2))
    assert isinstance(de, MaxBytesDeserializer)
    with pytest.raises(MaxBytesExceededError):
        de.read_le_u32()

    de = reader_for(bytes(8), max_bytes=None, settings=ReaderSettings(MAX_BYTES=2))
    assert not isinstance(de, MaxBytesDeserializer)
    assert de.read_le_u64() == 0


@pytest.mark.parametrize('max_bytes', ['4', 4.0, True, object()])
def test_reader_for_rejects_bad_limits(max_bytes: object) -> None:
    with pytest.raises(TypeError):
        reader_for(bytes(8), max_bytes=max_bytes)  # type: ignore[arg-type]


def test_reader_for_rejects_unknown_sources() -> None:
    with pytest.raises(TypeError):
        reader_for(1234)  # type: ignore[arg-type]
    de = Deserializer.build_bytes_deserializer(b'')
    assert reader_for(de) is de
