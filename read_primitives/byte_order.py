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
from typing import Literal, Union

from typing_extensions import TypeAlias


class ByteOrder(Enum):
    """Byte order of a multi-byte value, there is intentionally no "native" member."""

    LITTLE = 'little'
    BIG = 'big'

    @property
    def struct_prefix(self) -> str:
        """Prefix used by the `struct` module for this byte order (standard sizes, no alignment)."""
        if self is ByteOrder.LITTLE:
            return '<'
        return '>'


ByteOrderLike: TypeAlias = Union[ByteOrder, Literal['little', 'big']]
