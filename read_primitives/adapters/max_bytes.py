# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import Generic, TypeVar

from typing_extensions import override

from read_primitives.deserializer import Deserializer
from read_primitives.exceptions import SerializationError

from ..types import Buffer

D = TypeVar('D', bound=Deserializer)


class MaxBytesExceededError(SerializationError):
    """ Raised when a read would take a MaxBytesDeserializer over its cap.

    The check happens before the inner deserializer is touched, so the read that raised consumed nothing.
    """


class MaxBytesDeserializer(Deserializer, Generic[D]):
    """ Caps how many bytes can be consumed from an inner deserializer.

    Only reads that succeed are charged: a read that fails with `OutOfDataError` (or a stream error) leaves the budget
    as it was, and a read with `exact=False` is charged what it returned. Peeking is free.

    >>> de = Deserializer.build_bytes_deserializer(b'\\x01\\x02\\x03').with_max_bytes(4)
    >>> try:
    ...     de.read_le_u32()
    ... except EOFError:
    ...     print(de.bytes_left)
    4
    >>> de.read_be_u16()
    258
    >>> de.bytes_left
    2
    """

    inner: D

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        if max_bytes < 0:
            raise ValueError('max_bytes cannot be negative')
        self.inner = deserializer
        self._bytes_left = max_bytes

    @property
    def bytes_left(self) -> int:
        return self._bytes_left

    def _ensure_fits(self, n: int) -> None:
        if n > self._bytes_left:
            raise MaxBytesExceededError(f'reading {n} bytes exceeds the {self._bytes_left} bytes left')

    def _charge(self, data: Buffer) -> Buffer:
        self._bytes_left -= len(memoryview(data))
        return data

    @override
    def finalize(self) -> None:
        self.inner.finalize()

    @override
    def is_empty(self) -> bool:
        return self.inner.is_empty()

    @override
    def peek_byte(self) -> int:
        return self.inner.peek_byte()

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        return self.inner.peek_bytes(n, exact=exact)

    @override
    def read_byte(self) -> int:
        self._ensure_fits(1)
        b = self.inner.read_byte()
        self._bytes_left -= 1
        return b

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if n < 0:
            raise ValueError('value cannot be negative')
        self._ensure_fits(n)
        return self._charge(self.inner.read_bytes(n, exact=exact))

    @override
    def read_all(self) -> Buffer:
        data = self._charge(self.inner.read_bytes(self._bytes_left, exact=False))
        if not self.inner.is_empty():
            raise MaxBytesExceededError(f'source holds more than the {len(memoryview(data))} bytes allowed')
        return data
