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
UTF-16 codec, native unit order.

>>> from polystr.encoding import Encoding, get_codec
>>> codec = get_codec(Encoding.UTF16)
>>> codec.decode([0xD83D, 0xDE00], 0)
(Ok(128512), 2)
>>> codec.decode([0xDE00, 0x41], 0)
(Err(DecodeFailure(position=0, length=1, unit=56832)), 1)
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


def is_high_surrogate(unit: int) -> bool:
    return 0xD800 <= unit < 0xDC00


def is_low_surrogate(unit: int) -> bool:
    return 0xDC00 <= unit < 0xE000


class Utf16Codec(ReversibleCodec):
    encoding = Encoding.UTF16
    unit_width = 2
    multichar: ClassVar[bool] = True
    replacement = 0xFFFD

    @override
    def decode(self, units: Units, pos: int, end: Optional[int] = None) -> tuple[DecodeResult, int]:
        if end is None:
            end = len(units)
        unit = units[pos]
        if is_high_surrogate(unit):
            if pos + 1 < end and is_low_surrogate(units[pos + 1]):
                codepoint = 0x10000 + ((unit - 0xD800) << 10) + (units[pos + 1] - 0xDC00)
                return Ok(codepoint), pos + 2
            return Err(DecodeFailure(pos, 1, unit)), pos + 1
        if is_low_surrogate(unit):
            return Err(DecodeFailure(pos, 1, unit)), pos + 1
        return Ok(unit), pos + 1

    @override
    def encode(self, writer: 'UnitWriter', codepoint: int) -> bool:
        if codepoint < 0 or codepoint > MAX_CODEPOINT or is_surrogate(codepoint):
            return False
        if codepoint < 0x10000:
            writer.write_unit(codepoint)
        else:
            codepoint -= 0x10000
            writer.write_units((0xD800 | (codepoint >> 10), 0xDC00 | (codepoint & 0x3FF)))
        return True

    @override
    def step_back(self, units: Units, pos: int, start: int = 0) -> int:
        prev = pos - 1
        if prev > start and is_low_surrogate(units[prev]) and is_high_surrogate(units[prev - 1]):
            return prev - 1
        return prev
