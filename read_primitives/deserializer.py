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

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional, Union, overload

from typing_extensions import Self

from .exceptions import OutOfDataError
from .reader import PrimitiveReader
from .types import Buffer, Readable

if TYPE_CHECKING:
    from .adapters import MaxBytesDeserializer
    from .bytes_deserializer import BytesDeserializer
    from .conf import ReaderSettings
    from .stream_deserializer import StreamDeserializer


class Deserializer(PrimitiveReader):
    """ A sequential byte source that every primitive reader works on.

    Implementations only have to hand out bytes: `read_byte`, `read_bytes`, the `peek_*` variants that don't consume,
    `is_empty` and `read_all`. All the `read_<order>_<kind><bits>` methods come from `PrimitiveReader` on top of that.

    A read with `exact=True` either returns all `n` bytes or raises `OutOfDataError`; how much a failed read consumed
    is up to the implementation (an in-memory source consumes nothing, a stream keeps whatever it already gave away).
    """

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    @staticmethod
    def build_stream_deserializer(stream: Readable, *, settings: Optional[ReaderSettings] = None) -> StreamDeserializer:
        from .stream_deserializer import StreamDeserializer
        return StreamDeserializer(stream, settings=settings)

    def finalize(self) -> None:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        raise TypeError(f'{type(self).__name__} does not support finalization')

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def peek_byte(self) -> int:
        """Return the next byte without consuming it."""
        raise NotImplementedError

    @abstractmethod
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Return up to n bytes without consuming them, exactly n when exact=True."""
        raise NotImplementedError

    @abstractmethod
    def read_byte(self) -> int:
        """Consume a single byte and return it as an unsigned int."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Consume up to n bytes, exactly n when exact=True.

        Sources that can only hand out one byte at a time may call this through `super()`.
        """
        if n < 0:
            raise ValueError('value cannot be negative')
        data = bytearray()
        while len(data) < n and not self.is_empty():
            data.append(self.read_byte())
        if exact and len(data) < n:
            raise OutOfDataError('not enough bytes to read', requested=n, received=len(data))
        return bytes(data)

    @abstractmethod
    def read_all(self) -> Buffer:
        """Consume everything left in the source.

        Sources that can only hand out one byte at a time may call this through `super()`.
        """
        data = bytearray()
        while not self.is_empty():
            data.append(self.read_byte())
        return bytes(data)

    @overload
    def with_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        ...

    def with_max_bytes(self, max_bytes: Optional[int]) -> Union[Self, MaxBytesDeserializer[Self]]:
        """Cap how many bytes can be consumed through the returned deserializer, `None` means no cap."""
        if max_bytes is None:
            return self
        from .adapters import MaxBytesDeserializer
        return MaxBytesDeserializer(self, max_bytes)
