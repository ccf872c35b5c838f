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

from typing import Optional


class SerializationError(Exception):
    pass


class OutOfDataError(SerializationError, EOFError):
    """ Raised when the byte source cannot supply the number of bytes a read requires.

    Faults of the underlying medium are not reported with this error, an `OSError` raised by a stream propagates
    unchanged. This way "ran out of data" and "the stream failed" can always be told apart.
    """

    def __init__(self, message: str, *, requested: Optional[int] = None, received: Optional[int] = None) -> None:
        super().__init__(message)
        self.requested = requested
        self.received = received
