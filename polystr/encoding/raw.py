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
Raw encodings store one codepoint per unit and never interpret it.

Decoding cannot fail: whatever value a unit holds is the codepoint. Encoding fails only when the codepoint does not
fit in a unit.

>>> from polystr.encoding import Encoding, get_codec
>>> codec = get_codec(Encoding.CHAR8)
>>> codec.decode([0xE9], 0)
(Ok(233), 1)
>>> writer = codec.new_writer()
>>> codec.encode(writer, 0x41), codec.encode(writer, 0x270F)
(True, False)
>>> list(writer.finalize())
[65]
"""

from typing import TYPE_CHECKING, ClassVar, Optional

from typing_extensions import override

from polystr.encoding.codec import DecodeResult, ReversibleCodec
from polystr.encoding.tags import Encoding
from polystr.types import Units
from polystr.utils.result import Ok

if TYPE_CHECKING:
    from polystr.buffer import UnitWriter


class RawCodec(ReversibleCodec):
    multichar: ClassVar[bool] = False
    max_unit: ClassVar[int]

    @override
    def decode(self, units: Units, pos: int, end: Optional[int] = None) -> tuple[DecodeResult, int]:
        return Ok(units[pos]), pos + 1

    @override
    def encode(self, writer: 'UnitWriter', codepoint: int) -> bool:
        if not 0 <= codepoint <= self.max_unit:
            return False
        writer.write_unit(codepoint)
        return True

    @override
    def advance(self, units: Units, pos: int, end: Optional[int] = None) -> int:
        return pos + 1

    @override
    def step_back(self, units: Units, pos: int, start: int = 0) -> int:
        return pos - 1


class Char8Codec(RawCodec):
    encoding = Encoding.CHAR8
    unit_width = 1
    max_unit = 0xFF
    replacement = ord('?')


class Char16Codec(RawCodec):
    encoding = Encoding.CHAR16
    unit_width = 2
    max_unit = 0xFFFF
    replacement = 0xFFFD


class Char32Codec(RawCodec):
    encoding = Encoding.CHAR32
    unit_width = 4
    max_unit = 0xFFFFFFFF
    replacement = 0xFFFD
