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
This module implements decoding of integers with a fixed size, the size, signedness and byte order are parametrized.

Supported sizes are 1, 2, 4, 8 and 16 bytes (8 to 128 bits). Signed integers use two's complement. The byte order is
always chosen by the caller, there is no host-order default.

>>> from read_primitives import ByteOrder, Deserializer
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00ff04d2fb2e2e04'))
>>> decode_int(de, length=1, signed=True, byteorder=ByteOrder.BIG)  # reads 00
0
>>> decode_int(de, length=1, signed=False, byteorder=ByteOrder.BIG)  # reads ff
255
>>> decode_int(de, length=2, signed=True, byteorder=ByteOrder.BIG)  # reads 04d2
1234
>>> decode_int(de, length=2, signed=True, byteorder=ByteOrder.BIG)  # reads fb2e
-1234
>>> decode_int(de, length=2, signed=False, byteorder=ByteOrder.LITTLE)  # reads 2e04
1070
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\\x01\\x02\\x03')
>>> try:
...     decode_int(de, length=4, signed=False, byteorder='little')
... except EOFError as e:
...     print(type(e).__name__, *e.args)
OutOfDataError not enough bytes to read
>>> bytes(de.read_all())  # nothing was consumed
b'\\x01\\x02\\x03'
"""

from typing import Final

from read_primitives.byte_order import ByteOrder, ByteOrderLike
from read_primitives.types import ByteSource

INT_LENGTHS: Final[tuple[int, ...]] = (1, 2, 4, 8, 16)


def decode_int(deserializer: ByteSource, *, length: int, signed: bool, byteorder: ByteOrderLike) -> int:
    """ Decode an int using the given byte-length, signedness and byte order.

    This modules's docstring has more details and examples.
    """
    if length not in INT_LENGTHS:
        raise ValueError(f'unsupported int length: {length}')
    order = ByteOrder(byteorder)
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder=order.value, signed=signed)
