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
This module implements decoding a character stored as a 32-bit unsigned code point.

Values that are not Unicode scalar values (surrogates or anything above U+10FFFF) decode to `None`, the 4 bytes are
consumed either way.

>>> from read_primitives import ByteOrder, Deserializer
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('41000000 0001f600 0000d800'))
>>> decode_char(de, byteorder=ByteOrder.LITTLE)
'A'
>>> decode_char(de, byteorder=ByteOrder.BIG) == '\\U0001f600'
True
>>> decode_char(de, byteorder=ByteOrder.BIG) is None
True
>>> de.finalize()
"""

from typing import Final, Optional

from read_primitives.byte_order import ByteOrderLike
from read_primitives.encoding.int import decode_int
from read_primitives.types import ByteSource

_SURROGATES: Final = range(0xD800, 0xE000)
_MAX_CODE_POINT: Final = 0x10FFFF


def decode_char(deserializer: ByteSource, *, byteorder: ByteOrderLike) -> Optional[str]:
    """ Decodes a single character from a 4-byte code point, `None` when it isn't a valid scalar value.
    """
    code_point = decode_int(deserializer, length=4, signed=False, byteorder=byteorder)
    if code_point > _MAX_CODE_POINT or code_point in _SURROGATES:
        return None
    return chr(code_point)
