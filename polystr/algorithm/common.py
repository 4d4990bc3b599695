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

from polystr.types import Units

ASCII_WHITESPACE = frozenset((0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20))

TAB = 0x09
LF = 0x0A
CR = 0x0D
SPACE = 0x20
PLUS = 0x2B
MINUS = 0x2D
ZERO = 0x30


def is_space_unit(unit: int) -> bool:
    return unit in ASCII_WHITESPACE


def adjust_bounds(length: int, start: int, end: Optional[int]) -> tuple[int, int]:
    """Normalize `start`/`end` the way slices do, `start` may end up past `end`."""
    if end is None:
        end = length
    elif end < 0:
        end = max(end + length, 0)
    else:
        end = min(end, length)
    if start < 0:
        start = max(start + length, 0)
    return start, end


def matches_at(units: Units, pos: int, sub: Units, end: Optional[int] = None) -> bool:
    """Whether `sub` occurs in `units` at exactly `pos` without crossing `end`."""
    size = len(sub)
    if end is None:
        end = len(units)
    if pos < 0 or pos + size > end:
        return False
    for i in range(size):
        if units[pos + i] != sub[i]:
            return False
    return True
