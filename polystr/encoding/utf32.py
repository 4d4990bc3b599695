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
UTF-32 codec, native unit order. Every unit is a codepoint, surrogates and values above 0x10FFFF are rejected.
"""

from typing import TYPE_CHECKING, ClassVar, Optional

from typing_extensions import override

from polystr.encoding.codec import DecodeFailure, DecodeResult, ReversibleCodec
from polystr.encoding.tags import Encoding
from polystr.encoding.utf8 import MAX_CODEPOINT, is_surrogate
from polystr.types import Units
from polystr.utils.result import Err, Ok

if TYPE_CHECKING:
    from polystr.buffer import UnitWriter


class Utf32Codec(ReversibleCodec):
    encoding = Encoding.UTF32
    unit_width = 4
    multichar: ClassVar[bool] = False
    replacement = 0xFFFD

    @override
    def decode(self, units: Units, pos: int, end: Optional[int] = None) -> tuple[DecodeResult, int]:
        unit = units[pos]
        if unit > MAX_CODEPOINT or is_surrogate(unit):
            return Err(DecodeFailure(pos, 1, unit)), pos + 1
        return Ok(unit), pos + 1

    @override
    def encode(self, writer: 'UnitWriter', codepoint: int) -> bool:
        if codepoint < 0 or codepoint > MAX_CODEPOINT or is_surrogate(codepoint):
            return False
        writer.write_unit(codepoint)
        return True

    @override
    def advance(self, units: Units, pos: int, end: Optional[int] = None) -> int:
        return pos + 1

    @override
    def step_back(self, units: Units, pos: int, start: int = 0) -> int:
        return pos - 1
