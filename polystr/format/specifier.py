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
Format specifier parsing.

    spec := [[fill]align][sign]['#']['0'][width][',']['.' precision][type]

The fill is one codepoint of the template's encoding and may span several units. Parsing stops at the type character,
anything after it is kept in `other` for the renderer to reject. Without a type character trailing text is ignored.

>>> from polystr.encoding import Encoding, get_codec
>>> codec = get_codec(Encoding.UTF8)
>>> spec = Specifier.parse(codec, '😀^+06'.encode())
>>> bytes(spec.fill).decode(), spec.align, spec.sign, spec.width
('😀', '^', '+', 6)
>>> Specifier.parse(codec, b'#010b')
Specifier(fill=b'0', align='=', sign=None, alternate=True, comma=False, width=10, precision=None, type='b', other=b'')
"""

from dataclasses import dataclass
from typing import Optional

from polystr.algorithm.common import ZERO
from polystr.encoding import Codec
from polystr.types import Units

ALIGNS = frozenset(map(ord, '<>=^'))
SIGNS = frozenset(map(ord, '+- '))
HASH = ord('#')
COMMA = ord(',')
DOT = ord('.')
NINE = ord('9')


def is_digit_unit(unit: int) -> bool:
    return ZERO <= unit <= NINE


def is_alpha_unit(unit: int) -> bool:
    return 0x41 <= unit <= 0x5A or 0x61 <= unit <= 0x7A


@dataclass(frozen=True)
class Specifier:
    fill: Optional[Units] = None
    align: Optional[str] = None
    sign: Optional[str] = None
    alternate: bool = False
    comma: bool = False
    width: Optional[int] = None
    precision: Optional[int] = None
    type: Optional[str] = None
    other: Units = ()

    @classmethod
    def parse(cls, codec: Codec, units: Units) -> 'Specifier':
        size = len(units)
        if size == 0:
            return cls()

        fill: Optional[Units] = None
        align: Optional[str] = None
        sign: Optional[str] = None
        alternate = False
        comma = False
        width: Optional[int] = None
        precision: Optional[int] = None
        pos = 0

        second = codec.advance(units, 0, size)
        if second < size and units[second] in ALIGNS:
            fill = units[0:second]
            align = chr(units[second])
            pos = second + 1
        elif units[0] in ALIGNS:
            align = chr(units[0])
            pos = 1

        if pos < size and units[pos] in SIGNS:
            sign = chr(units[pos])
            pos += 1

        if pos < size and units[pos] == HASH:
            alternate = True
            pos += 1

        if pos < size and units[pos] == ZERO:
            if align is None:
                align = '='
            if fill is None:
                fill = units[pos:pos + 1]
            pos += 1

        width, pos = _parse_number(units, pos)

        if pos < size and units[pos] == COMMA:
            comma = True
            pos += 1

        if pos < size and units[pos] == DOT:
            precision, pos = _parse_number(units, pos + 1)
            if precision is None:
                precision = 0

        if pos < size and is_alpha_unit(units[pos]):
            return cls(fill, align, sign, alternate, comma, width, precision, chr(units[pos]), units[pos + 1:])

        return cls(fill, align, sign, alternate, comma, width, precision)


def _parse_number(units: Units, pos: int) -> tuple[Optional[int], int]:
    start = pos
    while pos < len(units) and is_digit_unit(units[pos]):
        pos += 1
    if pos == start:
        return None, pos
    return int(''.join(chr(unit) for unit in units[start:pos])), pos
