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

from pydantic import Field

from read_primitives.utils.pydantic import BaseModel


class ReaderSettings(BaseModel):
    # Default cap on the bytes `reader_for` lets a caller consume, None means no cap.
    MAX_BYTES: Optional[int] = Field(default=None, ge=0)

    # Whether StreamDeserializer may peek on seekable streams using tell()/seek().
    ALLOW_SEEK_PEEK: bool = True

    # Whether StreamDeserializer emits a debug log line when a stream runs out of data mid-read.
    LOG_SHORT_READS: bool = True
