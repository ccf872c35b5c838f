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

import io
from typing import Optional

from structlog import get_logger
from typing_extensions import override

from .conf import ReaderSettings, get_global_settings
from .deserializer import Deserializer
from .exceptions import OutOfDataError
from .types import Readable

logger = get_logger()


class StreamDeserializer(Deserializer):
    """Implementation of a Deserializer on top of a binary file-like object.

    Anything with a `read(n)` method works: files opened in binary mode, `socket.makefile('rb')`, pipes, `io.BytesIO`.
    Buffering is left to the stream. The stream is never closed here, it is owned by the caller.

    A read keeps calling `stream.read()` until it has the requested bytes or the stream signals EOF by returning
    `b''`. When that happens the bytes already read stay consumed and `OutOfDataError` is raised. Exceptions raised by
    the stream itself (`OSError` and subclasses) are not caught.

    Peeking uses `tell()/seek()` when the stream is seekable (and `ALLOW_SEEK_PEEK` is set), otherwise the stream's
    own `peek()` when it has one (like `io.BufferedReader`). An empty `peek()` means EOF, but a non-empty one shorter
    than requested only means the buffer holds less, so that case raises `io.UnsupportedOperation` instead of
    `OutOfDataError`. Streams with neither cannot peek, and so can't answer `is_empty()` either.
    """

    def __init__(self, stream: Readable, *, settings: Optional[ReaderSettings] = None) -> None:
        self._stream = stream
        self._settings = settings or get_global_settings()
        self.log = logger.new()

    @property
    def stream(self) -> Readable:
        return self._stream

    def _read(self, n: int, *, exact: bool) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        chunks: list[bytes] = []
        received = 0
        while received < n:
            chunk = self._stream.read(n - received)
            if chunk is None:
                raise BlockingIOError('stream has no data available without blocking')
            if not chunk:
                break
            chunks.append(chunk)
            received += len(chunk)
        data = b''.join(chunks)
        if exact and received < n:
            if self._settings.LOG_SHORT_READS:
                self.log.debug('stream ran out of data', requested=n, received=received)
            raise OutOfDataError('not enough bytes to read', requested=n, received=received)
        return data

    def _can_seek(self) -> bool:
        if not self._settings.ALLOW_SEEK_PEEK:
            return False
        seekable = getattr(self._stream, 'seekable', None)
        return seekable is not None and seekable()

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise ValueError('trailing data')

    @override
    def is_empty(self) -> bool:
        return not self.peek_bytes(1, exact=False)

    @override
    def peek_byte(self) -> int:
        return self.peek_bytes(1)[0]

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        if self._can_seek():
            pos = self._stream.tell()  # type: ignore[attr-defined]
            try:
                return self._read(n, exact=exact)
            finally:
                self._stream.seek(pos)  # type: ignore[attr-defined]
        peek = getattr(self._stream, 'peek', None)
        if peek is None:
            raise io.UnsupportedOperation('stream does not support peeking')
        self.log.debug('peeking through the stream buffer', requested=n)
        data = bytes(peek(n)[:n])
        if exact and len(data) < n:
            if n > 0 and not data:
                raise OutOfDataError('not enough bytes to read', requested=n, received=0)
            # peek() stops at what is buffered, the rest may still be on its way
            raise io.UnsupportedOperation(f'stream buffer holds {len(data)} of the {n} bytes requested')
        return data

    @override
    def read_byte(self) -> int:
        return self._read(1, exact=True)[0]

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> bytes:
        return self._read(n, exact=exact)

    @override
    def read_all(self) -> bytes:
        data = self._stream.read()
        if data is None:
            raise BlockingIOError('stream has no data available without blocking')
        return data
