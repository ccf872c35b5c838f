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
The named surface of primitive reads: one method per (type, byte order) pair.

Every method is a thin wrapper over the parametrized decoders in `read_primitives.encoding`, so they all follow the
same rules: exactly `width / 8` bytes are consumed on success, `OutOfDataError` is raised before any value is assembled
when the source runs out, and errors from the underlying stream are not touched.

Methods are named after the value they produce, `read_<order>_<kind><bits>`, where the order is `le` or `be` and the
kind is `u` (unsigned int), `i` (signed int) or `f` (float). Single byte reads have no order.
"""

from abc import ABC, abstractmethod
from typing import Optional

from read_primitives.byte_order import ByteOrder
from read_primitives.encoding import decode_bool, decode_char, decode_float, decode_int
from read_primitives.types import Buffer

_LE = ByteOrder.LITTLE
_BE = ByteOrder.BIG


class PrimitiveReader(ABC):
    @abstractmethod
    def read_byte(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        raise NotImplementedError

    # 8 bits, byte order doesn't apply

    def read_u8(self) -> int:
        return decode_int(self, length=1, signed=False, byteorder=_BE)

    def read_i8(self) -> int:
        return decode_int(self, length=1, signed=True, byteorder=_BE)

    # 16 bits

    def read_le_u16(self) -> int:
        return decode_int(self, length=2, signed=False, byteorder=_LE)

    def read_be_u16(self) -> int:
        return decode_int(self, length=2, signed=False, byteorder=_BE)

    def read_le_i16(self) -> int:
        return decode_int(self, length=2, signed=True, byteorder=_LE)

    def read_be_i16(self) -> int:
        return decode_int(self, length=2, signed=True, byteorder=_BE)

    # 32 bits

    def read_le_u32(self) -> int:
        return decode_int(self, length=4, signed=False, byteorder=_LE)

    def read_be_u32(self) -> int:
        return decode_int(self, length=4, signed=False, byteorder=_BE)

    def read_le_i32(self) -> int:
        return decode_int(self, length=4, signed=True, byteorder=_LE)

    def read_be_i32(self) -> int:
        return decode_int(self, length=4, signed=True, byteorder=_BE)

    # 64 bits

    def read_le_u64(self) -> int:
        return decode_int(self, length=8, signed=False, byteorder=_LE)

    def read_be_u64(self) -> int:
        return decode_int(self, length=8, signed=False, byteorder=_BE)

    def read_le_i64(self) -> int:
        return decode_int(self, length=8, signed=True, byteorder=_LE)

    def read_be_i64(self) -> int:
        return decode_int(self, length=8, signed=True, byteorder=_BE)

    # 128 bits

    def read_le_u128(self) -> int:
        return decode_int(self, length=16, signed=False, byteorder=_LE)

    def read_be_u128(self) -> int:
        return decode_int(self, length=16, signed=False, byteorder=_BE)

    def read_le_i128(self) -> int:
        return decode_int(self, length=16, signed=True, byteorder=_LE)

    def read_be_i128(self) -> int:
        return decode_int(self, length=16, signed=True, byteorder=_BE)

    # IEEE-754

    def read_le_f32(self) -> float:
        return decode_float(self, length=4, byteorder=_LE)

    def read_be_f32(self) -> float:
        return decode_float(self, length=4, byteorder=_BE)

    def read_le_f64(self) -> float:
        return decode_float(self, length=8, byteorder=_LE)

    def read_be_f64(self) -> float:
        return decode_float(self, length=8, byteorder=_BE)

    # others

    def read_bool(self) -> bool:
        return decode_bool(self)

    def read_le_char(self) -> Optional[str]:
        return decode_char(self, byteorder=_LE)

    def read_be_char(self) -> Optional[str]:
        return decode_char(self, byteorder=_BE)
