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

"""
Read fixed-width primitive values (8 to 128-bit integers, IEEE-754 floats) from any byte source, in an explicitly
chosen byte order.

>>> from read_primitives import reader_for
>>> reader_for(bytes([24, 45, 68, 84, 251, 33, 9, 64])).read_le_f64()
3.141592653589793
"""

from .adapters import MaxBytesDeserializer, MaxBytesExceededError
from .byte_order import ByteOrder
from .bytes_deserializer import BytesDeserializer
from .deserializer import Deserializer
from .exceptions import OutOfDataError, SerializationError
from .reader import PrimitiveReader
from .source import reader_for
from .stream_deserializer import StreamDeserializer

__version__ = '0.1.0'

__all__ = [
    'ByteOrder',
    'BytesDeserializer',
    'Deserializer',
    'MaxBytesDeserializer',
    'MaxBytesExceededError',
    'OutOfDataError',
    'PrimitiveReader',
    'SerializationError',
    'StreamDeserializer',
    'reader_for',
]
