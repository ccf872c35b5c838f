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

r"""
This module implements decoding a boolean value from 1 byte.

A zero byte is `False`, any other byte value is `True`.

>>> from read_primitives import Deserializer
>>> de = Deserializer.build_bytes_deserializer(b'\x00\x01\x02test')
>>> decode_bool(de)
False
>>> decode_bool(de)
True
>>> decode_bool(de)
True
>>> bytes(de.read_all())
b'test'
"""

from read_primitives.types import ByteSource


def decode_bool(deserializer: ByteSource) -> bool:
    """ Decodes a boolean value from 1 byte.
    """
    return deserializer.read_byte() != 0
