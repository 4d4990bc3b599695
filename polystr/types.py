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

from array import array
from typing import Sequence, TypeAlias

# Units are always addressed by offset, never by codepoint index.
Units: TypeAlias = Sequence[int]

NOT_FOUND = -1
NO_LIMIT = -1

UINT32_TYPECODE = 'I' if array('I').itemsize == 4 else 'L'

UNIT_TYPECODES: dict[int, str] = {
    1: 'B',
    2: 'H',
    4: UINT32_TYPECODE,
}
