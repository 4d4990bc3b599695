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

import pytest

from polystr.algorithm import search
from polystr.encoding import Encoding, get_codec
from polystr.exception import IrreversibleEncodingError, SubstringNotFoundError
from polystr_tests.encoding.test_codecs import ESCAPE_CODEC
from polystr_tests.unittest import ENCODINGS, encode


@pytest.mark.parametrize('encoding', ENCODINGS)
@pytest.mark.parametrize('haystack, needle, first, last, occurrences', [
    ('abcabc', 'abc', 0, 3, 2),
    ('abc---', 'abc', 0, 0, 1),
    ('---abc', 'abc', 3, 3, 1),
    ('------', 'abc', -1, -1, 0),
    ('ab', 'abc', -1, -1, 0),
    ('😀😀😀😀😀😀', '😀😀😀', 0, 3, 2),
    ('😀😀😀✏✏✏', '😀😀😀', 0, 0, 1),
    ('✏✏✏😀😀😀', '😀😀😀', 3, 3, 1),
    ('✏✏✏✏✏✏', '😀😀😀', -1, -1, 0),
])
def test_find(encoding: Encoding, haystack: str, needle: str, first: int, last: int, occurrences: int) -> None:
    codec = get_codec(encoding)
    units, sub = encode(haystack, encoding), encode(needle, encoding)

    def offset(index: int) -> int:
        return -1 if index < 0 else len(encode(haystack[:index], encoding))

    assert search.find(codec, units, sub) == offset(first)
    assert search.rfind(codec, units, sub) == offset(last)
    assert search.count(codec, units, sub) == occurrences
    if first >= 0:
        assert search.index(codec, units, sub) == offset(first)
        assert search.rindex(codec, units, sub) == offset(last)


def test_utf8_offsets_are_units() -> None:
    codec = get_codec(Encoding.UTF8)
    units = encode('✏✏✏😀😀😀')
    assert search.find(codec, units, encode('😀😀😀')) == 9
    assert search.rfind(codec, encode('😀😀😀😀😀😀'), encode('😀😀😀')) == 12


def test_matches_only_on_codepoint_boundaries() -> None:
    codec = get_codec(Encoding.UTF16)
    # the low surrogate of the first pair equals the needle but sits inside a codepoint
    units = [0xD83D, 0xDE00, 0xDE00]
    assert search.find(codec, units, [0xDE00]) == 2
    assert search.count(codec, units, [0xDE00]) == 1


def test_index_raises() -> None:
    codec = get_codec(Encoding.UTF8)
    with pytest.raises(SubstringNotFoundError):
        search.index(codec, b'abc', b'x')
    with pytest.raises(SubstringNotFoundError):
        search.rindex(codec, b'abc', b'x')
    with pytest.raises(ValueError):
        search.index(codec, b'abc', b'x')


@pytest.mark.parametrize('start, end, expected', [
    (0, None, 0),
    (1, None, 3),
    (-3, None, 3),
    (1, 5, -1),
    (1, -1, -1),
    (4, 3, -1),
    (10, None, -1),
])
def test_find_bounds(start: int, end: int, expected: int) -> None:
    codec = get_codec(Encoding.UTF8)
    assert search.find(codec, b'abcabc', b'abc', start, end) == expected


def test_rfind_bounds() -> None:
    codec = get_codec(Encoding.UTF8)
    assert search.rfind(codec, b'abcabc', b'abc', 0, 5) == 0
    assert search.rfind(codec, b'abcabc', b'abc', 1) == 3
    assert search.rfind(codec, b'abcabc', b'abc', 1, 5) == -1


def test_empty_needle() -> None:
    codec = get_codec(Encoding.UTF8)
    units = encode('a✏b')
    assert search.find(codec, units, b'') == 0
    assert search.find(codec, units, b'', 2) == 2
    assert search.find(codec, units, b'', 6) == -1
    assert search.rfind(codec, units, b'') == 5
    assert search.count(codec, units, b'') == 4
    assert search.count(codec, b'', b'') == 1


def test_count_matches_repeated_find() -> None:
    codec = get_codec(Encoding.UTF8)
    units, sub = encode('aaaa-aa-a'), encode('aa')
    found = 0
    pos = search.find(codec, units, sub)
    while pos != -1:
        found += 1
        pos = search.find(codec, units, sub, pos + len(sub))
    assert found == search.count(codec, units, sub) == 3


def test_startswith_endswith() -> None:
    units = encode('✏abc😀')
    assert search.startswith(units, encode('✏a'))
    assert not search.startswith(units, encode('a'))
    assert search.startswith(units, encode('a'), 3)
    assert search.endswith(units, encode('c😀'))
    assert search.endswith(units, encode('abc'), 0, -4)
    assert not search.endswith(units, encode('✏abc😀!'))
    assert search.startswith(units, b'')
    assert not search.startswith(units, b'', 20)


def test_backward_search_needs_reversible_codec() -> None:
    units = [0x61, 0x1B, 0x05, 0x61]
    assert search.find(ESCAPE_CODEC, units, [0x61], 1) == 3
    with pytest.raises(IrreversibleEncodingError):
        search.rfind(ESCAPE_CODEC, units, [0x61])
    with pytest.raises(IrreversibleEncodingError):
        search.rindex(ESCAPE_CODEC, units, [0x61])
