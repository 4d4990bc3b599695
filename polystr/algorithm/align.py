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
Padding and truncation, widths are counted in codepoints.

>>> from polystr.encoding import Encoding, get_codec
>>> codec = get_codec(Encoding.UTF8)
>>> writer = codec.new_writer()
>>> center(codec, writer, b'abc', 8, b'-')
>>> bytes(writer.finalize())
b'--abc---'
>>> bytes(truncate(codec, '✏✏✏'.encode(), 2)).decode()
'✏✏'
"""

from typing import Optional

from polystr.algorithm.common import MINUS, PLUS, SPACE, ZERO
from polystr.buffer import UnitWriter
from polystr.encoding import Codec
from polystr.exception import InvalidFillError
from polystr.types import Units


def check_fill(codec: Codec, fill: Optional[Units]) -> Units:
    """Return the fill units, a space when None, failing unless they hold exactly one codepoint."""
    if fill is None:
        return codec.encode_all((SPACE,))
    if len(fill) == 0:
        raise InvalidFillError('the fill character must be exactly one character long')
    result, end = codec.decode(fill, 0)
    if end != len(fill):
        raise InvalidFillError('the fill character must be exactly one character long')
    if result.is_err():
        raise InvalidFillError('the fill character is not a valid codepoint')
    return fill


def pad(writer: UnitWriter, fill: Units, count: int) -> None:
    for _ in range(count):
        writer.write_units(fill)


def ljust(codec: Codec, writer: UnitWriter, units: Units, width: int, fill: Optional[Units] = None) -> None:
    fill = check_fill(codec, fill)
    writer.write_units(units)
    pad(writer, fill, width - codec.length(units))


def rjust(codec: Codec, writer: UnitWriter, units: Units, width: int, fill: Optional[Units] = None) -> None:
    fill = check_fill(codec, fill)
    pad(writer, fill, width - codec.length(units))
    writer.write_units(units)


def center(codec: Codec, writer: UnitWriter, units: Units, width: int, fill: Optional[Units] = None) -> None:
    """Pad on both sides, the extra fill of an odd padding goes to the right."""
    fill = check_fill(codec, fill)
    diff = width - codec.length(units)
    left = max(diff, 0) // 2
    pad(writer, fill, left)
    writer.write_units(units)
    pad(writer, fill, diff - left)


def zfill(codec: Codec, writer: UnitWriter, units: Units, width: int) -> None:
    """Pad with zeros on the left, keeping a leading sign in front of the padding."""
    diff = width - codec.length(units)
    if diff <= 0:
        writer.write_units(units)
        return
    zero = codec.encode_all((ZERO,))
    if len(units) > 0 and units[0] in (PLUS, MINUS):
        writer.write_unit(units[0])
        pad(writer, zero, diff)
        writer.write_units(units[1:])
    else:
        pad(writer, zero, diff)
        writer.write_units(units)


def truncate(codec: Codec, units: Units, width: int) -> Units:
    """The first `width` codepoints of `units`."""
    if not codec.multichar:
        return units[:max(width, 0)]
    cur = codec.cursor(units)
    for _ in range(width):
        if cur.at_end():
            break
        cur.advance()
    return units[:cur.pos]


def justify(
    codec: Codec,
    writer: UnitWriter,
    units: Units,
    width: int,
    fill: Optional[Units],
    align: str,
) -> None:
    """Pad to `width` according to an alignment character of the format mini-language."""
    match align:
        case '<':
            ljust(codec, writer, units, width, fill)
        case '>':
            rjust(codec, writer, units, width, fill)
        case '^':
            center(codec, writer, units, width, fill)
        case _:
            raise ValueError(f'unsupported alignment: {align!r}')
