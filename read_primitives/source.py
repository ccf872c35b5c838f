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

from enum import Enum
from typing import Literal, Optional, Union

from read_primitives.bytes_deserializer import BytesDeserializer
from read_primitives.conf import ReaderSettings, get_global_settings
from read_primitives.deserializer import Deserializer
from read_primitives.stream_deserializer import StreamDeserializer
from read_primitives.types import Readable

ByteSourceLike = Union[Deserializer, bytes, bytearray, memoryview, Readable]


class _Default(Enum):
    FROM_SETTINGS = 'from-settings'


FROM_SETTINGS = _Default.FROM_SETTINGS


def reader_for(
    source: ByteSourceLike,
    *,
    max_bytes: Union[int, None, Literal[_Default.FROM_SETTINGS]] = FROM_SETTINGS,
    settings: Optional[ReaderSettings] = None,
) -> Deserializer:
    """ Return a Deserializer that reads primitives from `source`.

    - a Deserializer is used as is;
    - a bytes-like object is wrapped in a BytesDeserializer;
    - anything with a `read` method is wrapped in a StreamDeserializer, the stream is not copied nor closed.

    When `max_bytes` is given (or `MAX_BYTES` is set in the settings) the result is also capped with a
    MaxBytesDeserializer. Passing `max_bytes=None` explicitly disables the cap.

    >>> reader_for(b'\\x00\\x01').read_be_u16()
    1
    >>> import io
    >>> reader_for(io.BytesIO(b'\\x00\\x01')).read_le_u16()
    256
    """
    settings = settings or get_global_settings()
    deserializer: Deserializer
    if isinstance(source, Deserializer):
        deserializer = source
    elif isinstance(source, (bytes, bytearray, memoryview)):
        deserializer = BytesDeserializer(source)
    elif callable(getattr(source, 'read', None)):
        deserializer = StreamDeserializer(source, settings=settings)
    else:
        raise TypeError(f'cannot read primitives from {type(source).__name__}')

    if max_bytes is FROM_SETTINGS:
        max_bytes = settings.MAX_BYTES
    elif max_bytes is not None and (not isinstance(max_bytes, int) or isinstance(max_bytes, bool)):
        raise TypeError(f'max_bytes must be an int or None, not {type(max_bytes).__name__}')
    return deserializer.with_max_bytes(max_bytes)
