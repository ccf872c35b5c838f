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
This module holds the decoders for every primitive this package can read.

Each submodule `x` deals with a single kind of value and looks like this:

    def decode_x(deserializer: ByteSource, ...config params...) -> ValueType:
        ...

The "config params" are keyword-only and specific to each decoder, for example the byte-length, signedness and byte
order of an integer. Decoders read exactly the bytes the value needs and nothing else, and they never retain state
between calls.
"""

from .bool import decode_bool
from .char import decode_char
from .float import FLOAT_LENGTHS, decode_float
from .int import INT_LENGTHS, decode_int

__all__ = [
    'FLOAT_LENGTHS',
    'INT_LENGTHS',
    'decode_bool',
    'decode_char',
    'decode_float',
    'decode_int',
]
