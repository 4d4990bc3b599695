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
Splitting and joining.

Results are slices of the input in left to right order, whichever direction the scan went.

>>> from polystr.encoding import Encoding, get_codec
>>> codec = get_codec(Encoding.UTF8)
>>> units = b'a b c d'
>>> split_whitespace(codec, units, 2)
[b'a', b'b', b'c d']
>>> rsplit_whitespace(codec, units, 2)
[b'a b', b'c', b'd']
>>> split_separator(codec, b'abc---def', b'--')
[b'abc', b'-def']
>>> rsplit_separator(codec, b'abc---def', b'--')
[b'abc-', b'def']
"""

from typing import Iterable

from polystr.algorithm.common import CR, LF, is_space_unit, matches_at
from polystr.algorithm.search import find, rfind
from polystr.buffer import UnitWriter
from polystr.encoding import Codec, require_reversible
from polystr.exception import EmptySeparatorError
from polystr.types import NO_LIMIT, NOT_FOUND, Units

LINE_BREAKS = frozenset((0x0A, 0x0B, 0x0C, 0x0D, 0x1C, 0x1D, 0x1E, 0x85, 0x2028, 0x2029))


def _check_separator(sep: Units) -> None:
    if len(sep) == 0:
        raise EmptySeparatorError('empty separator')


def split_whitespace(codec: Codec, units: Units, maxsplit: int = NO_LIMIT) -> list[Units]:
    """Split on runs of ASCII whitespace, leading and trailing whitespace never produce empty parts."""
    size = len(units)
    parts: list[Units] = []
    pos = 0
    while pos < size and is_space_unit(units[pos]):
        pos += 1
    while pos < size:
        if 0 <= maxsplit <= len(parts):
            parts.append(units[pos:size])
            break
        word_start = pos
        while pos < size and not is_space_unit(units[pos]):
            pos = codec.advance(units, pos, size)
        parts.append(units[word_start:pos])
        while pos < size and is_space_unit(units[pos]):
            pos += 1
    return parts


def rsplit_whitespace(codec: Codec, units: Units, maxsplit: int = NO_LIMIT) -> list[Units]:
    """Like split_whitespace but `maxsplit` counts from the end."""
    rcodec = require_reversible(codec, 'rsplit')
    parts: list[Units] = []
    end = len(units)
    while end > 0 and is_space_unit(units[end - 1]):
        end -= 1
    while end > 0:
        if 0 <= maxsplit <= len(parts):
            parts.append(units[0:end])
            break
        word_end = end
        while end > 0 and not is_space_unit(units[end - 1]):
            end = rcodec.step_back(units, end)
        parts.append(units[end:word_end])
        while end > 0 and is_space_unit(units[end - 1]):
            end -= 1
    parts.reverse()
    return parts


def split_separator(codec: Codec, units: Units, sep: Units, maxsplit: int = NO_LIMIT) -> list[Units]:
    """Split on exact non-overlapping occurrences of `sep`, scanning from the front."""
    _check_separator(sep)
    size = len(units)
    sep_size = len(sep)
    parts: list[Units] = []
    last = 0
    pos = 0
    while pos + sep_size <= size and not 0 <= maxsplit <= len(parts):
        if matches_at(units, pos, sep, size):
            parts.append(units[last:pos])
            pos += sep_size
            last = pos
        else:
            pos = codec.advance(units, pos, size)
    parts.append(units[last:size])
    return parts


def rsplit_separator(codec: Codec, units: Units, sep: Units, maxsplit: int = NO_LIMIT) -> list[Units]:
    """Split on exact non-overlapping occurrences of `sep`, scanning from the back."""
    _check_separator(sep)
    rcodec = require_reversible(codec, 'rsplit')
    sep_size = len(sep)
    parts: list[Units] = []
    last = len(units)
    # pos is where a candidate separator ends
    pos = last
    while pos - sep_size >= 0 and not 0 <= maxsplit <= len(parts):
        if matches_at(units, pos - sep_size, sep, last):
            parts.append(units[pos:last])
            pos -= sep_size
            last = pos
        else:
            pos = rcodec.step_back(units, pos)
    parts.append(units[0:last])
    parts.reverse()
    return parts


def splitlines(codec: Codec, units: Units, keepends: bool = False) -> list[Units]:
    """Split at line boundaries, a CR LF pair counts as one boundary."""
    size = len(units)
    lines: list[Units] = []
    line_start = 0
    pos = 0
    while pos < size:
        result, next_pos = codec.decode(units, pos, size)
        if result.ok() not in LINE_BREAKS:
            pos = next_pos
            continue
        eol = next_pos
        if units[pos] == CR and eol < size and units[eol] == LF:
            eol += 1
        lines.append(units[line_start:eol if keepends else pos])
        line_start = pos = eol
    if line_start < size:
        lines.append(units[line_start:size])
    return lines


def partition(codec: Codec, units: Units, sep: Units) -> tuple[Units, Units, Units]:
    _check_separator(sep)
    pos = find(codec, units, sep)
    if pos == NOT_FOUND:
        return units[:], units[0:0], units[0:0]
    return units[:pos], units[pos:pos + len(sep)], units[pos + len(sep):]


def rpartition(codec: Codec, units: Units, sep: Units) -> tuple[Units, Units, Units]:
    _check_separator(sep)
    pos = rfind(codec, units, sep)
    if pos == NOT_FOUND:
        return units[0:0], units[0:0], units[:]
    return units[:pos], units[pos:pos + len(sep)], units[pos + len(sep):]


def join(writer: UnitWriter, sep: Units, items: Iterable[Units]) -> None:
    for i, item in enumerate(items):
        if i:
            writer.write_units(sep)
        writer.write_units(item)
