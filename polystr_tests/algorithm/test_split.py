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

from polystr.algorithm import split
from polystr.encoding import Encoding, get_codec
from polystr.exception import EmptySeparatorError, IrreversibleEncodingError
from polystr_tests.encoding.test_codecs import ESCAPE_CODEC
from polystr_tests.unittest import ENCODINGS, decode, encode


def texts(parts, encoding: Encoding) -> list[str]:
    return [decode(part, encoding) for part in parts]


@pytest.mark.parametrize('encoding', ENCODINGS)
@pytest.mark.parametrize('text, maxsplit, expected', [
    ('abc \t\v\n\r\f def', -1, ['abc', 'def']),
    ('a b c d', -1, ['a', 'b', 'c', 'd']),
    ('a b c d', 2, ['a', 'b', 'c d']),
    ('a b c d', 1, ['a', 'b c d']),
    ('a b c d', 0, ['a b c d']),
    ('  a  b  ', -1, ['a', 'b']),
    ('  a  b  ', 1, ['a', 'b  ']),
    ('😀 ✏', -1, ['😀', '✏']),
    ('', -1, []),
    ('   ', -1, []),
])
def test_split_whitespace(encoding: Encoding, text: str, maxsplit: int, expected: list[str]) -> None:
    parts = split.split_whitespace(get_codec(encoding), encode(text, encoding), maxsplit)
    assert texts(parts, encoding) == expected == text.split(maxsplit=maxsplit)


@pytest.mark.parametrize('encoding', ENCODINGS)
@pytest.mark.parametrize('text, maxsplit, expected', [
    ('abc \t\v\n\r\f def', -1, ['abc', 'def']),
    ('a b c d', -1, ['a', 'b', 'c', 'd']),
    ('a b c d', 2, ['a b', 'c', 'd']),
    ('a b c d', 1, ['a b c', 'd']),
    ('a b c d', 0, ['a b c d']),
    ('  a  b  ', 1, ['  a', 'b']),
    ('😀 ✏', -1, ['😀', '✏']),
    ('', -1, []),
])
def test_rsplit_whitespace(encoding: Encoding, text: str, maxsplit: int, expected: list[str]) -> None:
    parts = split.rsplit_whitespace(get_codec(encoding), encode(text, encoding), maxsplit)
    assert texts(parts, encoding) == expected == text.rsplit(maxsplit=maxsplit)


@pytest.mark.parametrize('encoding', ENCODINGS)
@pytest.mark.parametrize('text, sep, maxsplit', [
    ('---abc---', 'abc', -1),
    ('abc---def', '---', -1),
    ('abc---def', '--', -1),
    ('a-b-c-d', '-', -1),
    ('a-b-c-d', '-', 2),
    ('a-b-c-d', '-', 1),
    ('a-b-c-d', '-', 0),
    ('a😀b😀c😀d', '😀', -1),
    ('😀😀', '😀', -1),
    ('', '-', -1),
])
def test_split_separator(encoding: Encoding, text: str, sep: str, maxsplit: int) -> None:
    codec = get_codec(encoding)
    units, sep_units = encode(text, encoding), encode(sep, encoding)
    assert texts(split.split_separator(codec, units, sep_units, maxsplit), encoding) == text.split(sep, maxsplit)
    assert texts(split.rsplit_separator(codec, units, sep_units, maxsplit), encoding) == text.rsplit(sep, maxsplit)


def test_rsplit_separator_overlap() -> None:
    codec = get_codec(Encoding.UTF8)
    assert split.rsplit_separator(codec, b'abc---def', b'--') == [b'abc-', b'def']
    assert split.split_separator(codec, b'abc---def', b'--') == [b'abc', b'-def']


@pytest.mark.parametrize('text', ['a-b--c', '-', '', '😀-✏-', 'no separator'])
def test_split_then_join_round_trip(text: str) -> None:
    codec = get_codec(Encoding.UTF16)
    sep = encode('-', Encoding.UTF16)
    writer = codec.new_writer()
    split.join(writer, sep, split.split_separator(codec, encode(text, Encoding.UTF16), sep))
    assert decode(writer.finalize(), Encoding.UTF16) == text


def test_empty_separator() -> None:
    codec = get_codec(Encoding.UTF8)
    for func in (split.split_separator, split.rsplit_separator, split.partition, split.rpartition):
        with pytest.raises(EmptySeparatorError):
            func(codec, b'abc', b'')


def test_backward_split_needs_reversible_codec() -> None:
    with pytest.raises(IrreversibleEncodingError):
        split.rsplit_whitespace(ESCAPE_CODEC, [0x61, 0x20, 0x62])
    with pytest.raises(IrreversibleEncodingError):
        split.rsplit_separator(ESCAPE_CODEC, [0x61, 0x20, 0x62], [0x20])
    with pytest.raises(IrreversibleEncodingError):
        split.rpartition(ESCAPE_CODEC, [0x61, 0x20, 0x62], [0x20])
    assert split.split_whitespace(ESCAPE_CODEC, [0x61, 0x20, 0x62]) == [[0x61], [0x62]]


@pytest.mark.parametrize('text', [
    'a\nb\r\nc',
    'a\rb\x0bc\x0cd\x1ce\x1df\x1eg\x85h\u2028i\u2029j',
    'trailing\n',
    '\n\nempty lines\n',
    '',
    'no breaks',
])
@pytest.mark.parametrize('keepends', [False, True])
def test_splitlines(text: str, keepends: bool) -> None:
    for encoding in ENCODINGS:
        lines = split.splitlines(get_codec(encoding), encode(text, encoding), keepends)
        assert texts(lines, encoding) == text.splitlines(keepends)


@pytest.mark.parametrize('text, sep', [
    ('a-b-c', '-'),
    ('abc', '-'),
    ('😀✏😀✏', '✏'),
    ('', '-'),
])
def test_partition(text: str, sep: str) -> None:
    codec = get_codec(Encoding.UTF8)
    units, sep_units = encode(text), encode(sep)
    assert tuple(texts(split.partition(codec, units, sep_units), Encoding.UTF8)) == text.partition(sep)
    assert tuple(texts(split.rpartition(codec, units, sep_units), Encoding.UTF8)) == text.rpartition(sep)


@pytest.mark.parametrize('sep, items, expected', [
    (' ', [], ''),
    (' ', ['a', 'b', 'c'], 'a b c'),
    ('abc', [], ''),
    ('abc', ['-', '-', '-'], '-abc-abc-'),
    ('😀', ['✏', '✏'], '✏😀✏'),
])
def test_join(sep: str, items: list[str], expected: str) -> None:
    codec = get_codec(Encoding.UTF32)
    writer = codec.new_writer()
    split.join(writer, encode(sep, Encoding.UTF32), (encode(item, Encoding.UTF32) for item in items))
    assert decode(writer.finalize(), Encoding.UTF32) == expected
