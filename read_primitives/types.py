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

from typing import Optional, Protocol, Union

from typing_extensions import TypeAlias

Buffer: TypeAlias = Union[bytes, bytearray, memoryview]


class ByteSource(Protocol):
    """Anything the decoders can pull bytes from, every Deserializer satisfies this."""

    def read_byte(self) -> int:
        ...

    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        ...


class Readable(Protocol):
    """A binary file-like object: files opened with 'rb', `socket.makefile('rb')`, `io.BytesIO`, pipes, ..."""

    def read(self, size: int = -1, /) -> Optional[bytes]:
        ...
