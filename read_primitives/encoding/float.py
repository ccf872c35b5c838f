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
This module implements decoding of IEEE-754 floating point numbers, single (4 bytes) and double (8 bytes) precision.

The bytes are reinterpreted as-is: there is no range check and NaN payloads are not canonicalized beyond what the
conversion to a Python `float` does.

>>> import math
>>> from read_primitives import ByteOrder, Deserializer
>>> de = Deserializer.build_bytes_deserializer(bytes([24, 45, 68, 84, 251, 33, 9, 64]))
>>> decode_float(de, length=8, byteorder=ByteOrder.LITTLE) == math.pi
True
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3fc00000 0000c0bf'))
>>> decode_float(de, length=4, byteorder=ByteOrder.BIG)  # reads 3fc00000
1.5
>>> decode_float(de, length=4, byteorder=ByteOrder.LITTLE)  # reads 0000c0bf
-1.5
>>> de.finalize()
"""

import struct
from typing import Final

from read_primitives.byte_order import ByteOrder, ByteOrderLike
from read_primitives.types import ByteSource

_FLOAT_FORMATS: Final[dict[int, str]] = {
    4: 'f',
    8: 'd',
}

FLOAT_LENGTHS: Final[tuple[int, ...]] = tuple(_FLOAT_FORMATS)


def decode_float(deserializer: ByteSource, *, length: int, byteorder: ByteOrderLike) -> float:
    """ Decode a float using the given byte-length (4 or 8) and byte order.
    """
    fmt = _FLOAT_FORMATS.get(length)
    if fmt is None:
        raise ValueError(f'unsupported float length: {length}')
    order = ByteOrder(byteorder)
    data = deserializer.read_bytes(length)
    value, = struct.unpack(order.struct_prefix + fmt, data)
    return value
