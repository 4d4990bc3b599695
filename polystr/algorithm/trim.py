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

from polystr.algorithm.common import ASCII_WHITESPACE
from polystr.algorithm.search import endswith, startswith
from polystr.encoding import Codec
from polystr.types import Units


def _strip_set(codec: Codec, chars: Optional[Units]) -> frozenset[int]:
    if chars is None:
        return ASCII_WHITESPACE
    return frozenset(codepoint for _, result in codec.iter_decode(chars) if (codepoint := result.ok()) is not None)


def lstrip(codec: Codec, units: Units, chars: Optional[Units] = None) -> Units:
    """Drop leading codepoints found in `chars`, ASCII whitespace by default."""
    strip_set = _strip_set(codec, chars)
    size = len(units)
    pos = 0
    while pos < size:
        result, next_pos = codec.decode(units, pos, size)
        if result.ok() not in strip_set:
            break
        pos = next_pos
    return units[pos:]


def rstrip(codec: Codec, units: Units, chars: Optional[Units] = None) -> Units:
    """Drop trailing codepoints found in `chars`, ASCII whitespace by default."""
    strip_set = _strip_set(codec, chars)
    size = len(units)
    keep = 0
    pos = 0
    while pos < size:
        result, pos = codec.decode(units, pos, size)
        if result.ok() not in strip_set:
            keep = pos
    return units[:keep]


def strip(codec: Codec, units: Units, chars: Optional[Units] = None) -> Units:
    return rstrip(codec, lstrip(codec, units, chars), chars)


def removeprefix(units: Units, prefix: Units) -> Units:
    if len(prefix) > 0 and startswith(units, prefix):
        return units[len(prefix):]
    return units[:]


def removesuffix(units: Units, suffix: Units) -> Units:
    if len(suffix) > 0 and endswith(units, suffix):
        return units[:len(units) - len(suffix)]
    return units[:]
