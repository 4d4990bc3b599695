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
Searching.

Forward searches step from codepoint boundary to codepoint boundary and compare units, so a match never starts in the
middle of a multi-unit codepoint. Backward searches need a reversible codec.

>>> from polystr.encoding import Encoding, get_codec
>>> codec = get_codec(Encoding.UTF8)
>>> hay = codec.encode_all(map(ord, '✏✏✏😀😀😀'))
>>> find(codec, hay, codec.encode_all(map(ord, '😀😀😀')))
9
>>> rfind(codec, hay, codec.encode_all(map(ord, '✏')))
6
>>> count(codec, hay, codec.encode_all(map(ord, '😀')))
3
"""

from typing import Optional

from polystr.algorithm.common import adjust_bounds, matches_at
from polystr.encoding import Codec, require_reversible
from polystr.exception import SubstringNotFoundError
from polystr.types import NOT_FOUND, Units


def find(codec: Codec, units: Units, sub: Units, start: int = 0, end: Optional[int] = None) -> int:
    """Lowest offset of `sub` in `units[start:end]`, or NOT_FOUND."""
    start, end = adjust_bounds(len(units), start, end)
    if start > end:
        return NOT_FOUND
    size = len(sub)
    pos = start
    while pos + size <= end:
        if matches_at(units, pos, sub, end):
            return pos
        if pos >= end:
            break
        pos = codec.advance(units, pos, end)
    return NOT_FOUND


def rfind(codec: Codec, units: Units, sub: Units, start: int = 0, end: Optional[int] = None) -> int:
    """Highest offset of `sub` in `units[start:end]`, or NOT_FOUND."""
    rcodec = require_reversible(codec, 'rfind')
    start, end = adjust_bounds(len(units), start, end)
    if start > end:
        return NOT_FOUND
    size = len(sub)
    if size == 0:
        return end
    # pos is where a candidate match ends, always a codepoint boundary
    pos = end
    while pos - size >= start:
        if matches_at(units, pos - size, sub, end):
            return pos - size
        pos = rcodec.step_back(units, pos, start)
    return NOT_FOUND


def index(codec: Codec, units: Units, sub: Units, start: int = 0, end: Optional[int] = None) -> int:
    """Like find but raise SubstringNotFoundError when the substring is not present."""
    pos = find(codec, units, sub, start, end)
    if pos == NOT_FOUND:
        raise SubstringNotFoundError('substring not found')
    return pos


def rindex(codec: Codec, units: Units, sub: Units, start: int = 0, end: Optional[int] = None) -> int:
    """Like rfind but raise SubstringNotFoundError when the substring is not present."""
    pos = rfind(codec, units, sub, start, end)
    if pos == NOT_FOUND:
        raise SubstringNotFoundError('substring not found')
    return pos


def count(codec: Codec, units: Units, sub: Units, start: int = 0, end: Optional[int] = None) -> int:
    """Number of non-overlapping occurrences of `sub`, an empty `sub` matches at every codepoint boundary."""
    start, end = adjust_bounds(len(units), start, end)
    if start > end:
        return 0
    size = len(sub)
    if size == 0:
        return codec.length(units, start, end) + 1
    matches = 0
    pos = start
    while pos + size <= end:
        if matches_at(units, pos, sub, end):
            matches += 1
            pos += size
        else:
            pos = codec.advance(units, pos, end)
    return matches


def startswith(units: Units, prefix: Units, start: int = 0, end: Optional[int] = None) -> bool:
    start, end = adjust_bounds(len(units), start, end)
    if start > end:
        return False
    return matches_at(units, start, prefix, end)


def endswith(units: Units, suffix: Units, start: int = 0, end: Optional[int] = None) -> bool:
    start, end = adjust_bounds(len(units), start, end)
    if start > end or end - len(suffix) < start:
        return False
    return matches_at(units, end - len(suffix), suffix, end)
