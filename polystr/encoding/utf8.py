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
UTF-8 codec.

A lead unit announces how many units its sequence takes. A sequence whose continuation units are all present is
consumed whole, even when the value it spells is rejected (overlong forms, surrogates, values above 0x10FFFF). A
sequence cut short by a non-continuation unit or by the end of the input fails on the lead unit alone, so decoding can
resume on the next unit.

>>> from polystr.encoding import Encoding, get_codec
>>> codec = get_codec(Encoding.UTF8)
>>> codec.decode(bytes.fromhex('e29c8f'), 0)
(Ok(9999), 3)
>>> codec.decode(bytes.fromhex('e08080'), 0)  # overlong
(Err(DecodeFailure(position=0, length=3, unit=224)), 3)
>>> codec.decode(bytes.fromhex('e241'), 0)  # truncated
(Err(DecodeFailure(position=0, length=1, unit=226)), 1)
>>> codec.step_back(bytes.fromhex('41e29c8f'), 4)
1
"""

from typing import TYPE_CHECKING, ClassVar, Optional

from typing_extensions import override

from polystr.encoding.codec import DecodeFailure, DecodeResult, ReversibleCodec
from polystr.encoding.tags import Encoding
from polystr.types import Units
from polystr.utils.result import Err, Ok

if TYPE_CHECKING:
    from polystr.buffer import UnitWriter

MAX_CODEPOINT = 0x10FFFF

# smallest codepoint that needs a sequence of the given length, anything below is overlong
_MIN_VALUE = {2: 0x80, 3: 0x800, 4: 0x10000}


def sequence_length(lead: int) -> int:
    """Number of units announced by a lead unit, 1 for ASCII, continuation and invalid units."""
    if 0xC0 <= lead < 0xE0:
        return 2
    if 0xE0 <= lead < 0xF0:
        return 3
    if 0xF0 <= lead < 0xF8:
        return 4
    return 1


def is_continuation(unit: int) -> bool:
    return 0x80 <= unit < 0xC0


def is_surrogate(codepoint: int) -> bool:
    return 0xD800 <= codepoint <= 0xDFFF


class Utf8Codec(ReversibleCodec):
    encoding = Encoding.UTF8
    unit_width = 1
    multichar: ClassVar[bool] = True
    replacement = 0xFFFD

    @override
    def decode(self, units: Units, pos: int, end: Optional[int] = None) -> tuple[DecodeResult, int]:
        if end is None:
            end = len(units)
        lead = units[pos]
        if lead < 0x80:
            return Ok(lead), pos + 1

        length = sequence_length(lead)
        if length == 1 or pos + length > end:
            return Err(DecodeFailure(pos, 1, lead)), pos + 1

        codepoint = lead & (0x7F >> length)
        for i in range(pos + 1, pos + length):
            unit = units[i]
            if not is_continuation(unit):
                return Err(DecodeFailure(pos, 1, lead)), pos + 1
            codepoint = (codepoint << 6) | (unit & 0x3F)

        if codepoint < _MIN_VALUE[length] or is_surrogate(codepoint) or codepoint > MAX_CODEPOINT:
            return Err(DecodeFailure(pos, length, lead)), pos + length
        return Ok(codepoint), pos + length

    @override
    def encode(self, writer: 'UnitWriter', codepoint: int) -> bool:
        if codepoint < 0 or codepoint > MAX_CODEPOINT or is_surrogate(codepoint):
            return False
        if codepoint < 0x80:
            writer.write_unit(codepoint)
        elif codepoint < 0x800:
            writer.write_units((
                0xC0 | (codepoint >> 6),
                0x80 | (codepoint & 0x3F),
            ))
        elif codepoint < 0x10000:
            writer.write_units((
                0xE0 | (codepoint >> 12),
                0x80 | ((codepoint >> 6) & 0x3F),
                0x80 | (codepoint & 0x3F),
            ))
        else:
            writer.write_units((
                0xF0 | (codepoint >> 18),
                0x80 | ((codepoint >> 12) & 0x3F),
                0x80 | ((codepoint >> 6) & 0x3F),
                0x80 | (codepoint & 0x3F),
            ))
        return True

    @override
    def step_back(self, units: Units, pos: int, start: int = 0) -> int:
        prev = pos - 1
        if not is_continuation(units[prev]):
            return prev
        for length in (2, 3, 4):
            lead_pos = pos - length
            if lead_pos < start:
                break
            unit = units[lead_pos]
            if not is_continuation(unit):
                # the walk stops at the first non-continuation unit, which is always a boundary
                return lead_pos if sequence_length(unit) == length else prev
        return prev
