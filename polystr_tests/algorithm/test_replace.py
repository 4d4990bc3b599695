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

from polystr.algorithm.replace import DELETE, Translation, as_lookup, expandtabs, maketrans, replace, translate
from polystr.encoding import Encoding, ErrorPolicy, get_codec
from polystr.exception import DecodeError, EncodeError, TranslationTableError
from polystr_tests.unittest import ENCODINGS, decode, encode


def run_replace(encoding: Encoding, text: str, old: str, new: str, count: int = -1) -> tuple[str, int]:
    codec = get_codec(encoding)
    writer = codec.new_writer()
    replaced = replace(codec, writer, encode(text, encoding), encode(old, encoding), encode(new, encoding), count)
    return decode(writer.finalize(), encoding), replaced


@pytest.mark.parametrize('encoding', ENCODINGS)
@pytest.mark.parametrize('text, old, new, expected', [
    ('aaaaaaaaa', 'a', 'b', 'bbbbbbbbb'),
    ('aaaaaaaaa', 'aaa', 'bbb', 'bbbbbbbbb'),
    ('abc------', 'abc', 'def', 'def------'),
    ('---abc---', 'abc', 'def', '---def---'),
    ('------abc', 'abc', 'def', '------def'),
    ('aaa', 'a', 'abc', 'abcabcabc'),
    ('abcabcabc', 'abc', 'a', 'aaa'),
    ('aaa-aaa-aaa', 'aa', 'bb', 'bba-bba-bba'),
    ('😀✏😀', '😀', '', '✏'),
    ('a✏b', '', '-', '-a-✏-b-'),
])
def test_replace(encoding: Encoding, text: str, old: str, new: str, expected: str) -> None:
    result, replaced = run_replace(encoding, text, old, new)
    assert result == expected
    assert replaced == text.count(old)


def test_replace_with_count() -> None:
    assert run_replace(Encoding.UTF8, 'aaaa', 'a', 'b', 2) == ('bbaa', 2)
    assert run_replace(Encoding.UTF8, 'aaaa', 'a', 'b', 0) == ('aaaa', 0)
    assert run_replace(Encoding.UTF8, 'ab', '', '-', 2) == ('-a-b', 2)


def test_replace_is_idempotent_when_old_equals_new() -> None:
    once, _ = run_replace(Encoding.UTF16, 'a😀a😀', '😀', '😀')
    twice, _ = run_replace(Encoding.UTF16, once, '😀', '😀')
    assert once == twice == 'a😀a😀'


def test_translation_table() -> None:
    table = Translation.from_codepoints(map(ord, 'abc'), map(ord, 'xyz'), map(ord, 'd'))
    assert table(ord('a')) == ord('x')
    assert table(ord('q')) == ord('q')
    assert table(ord('d')) == DELETE
    assert len(table) == 4
    assert ord('b') in table
    assert ord('q') not in table
    with pytest.raises(TranslationTableError):
        Translation.from_codepoints([1, 2], [1])


def test_maketrans() -> None:
    codec = get_codec(Encoding.UTF8)
    table = maketrans(codec, encode('a✏'), encode('😀b'), encode('c'))
    assert table(ord('a')) == 0x1F600
    assert table(0x270F) == ord('b')
    assert table(ord('c')) == DELETE
    with pytest.raises(TranslationTableError):
        maketrans(codec, encode('ab'), encode('c'))
    with pytest.raises(DecodeError):
        maketrans(codec, b'\xff', b'a')


def test_as_lookup() -> None:
    mapping = as_lookup({ord('a'): ord('b'), ord('c'): None})
    assert mapping(ord('a')) == ord('b')
    assert mapping(ord('c')) == DELETE
    assert mapping(ord('z')) == ord('z')

    def shout(codepoint: int) -> int:
        return codepoint - 0x20

    assert as_lookup(shout) is shout


def run_translate(units: bytes, table, errors: ErrorPolicy) -> tuple[str, int]:
    codec = get_codec(Encoding.UTF8)
    writer = codec.new_writer()
    substituted = translate(codec, writer, units, table, errors)
    return bytes(writer.finalize()).decode(), substituted


@pytest.mark.parametrize('table, expected', [
    (lambda cp: ord('a'), 'aaaaaa'),
    (lambda cp: DELETE, ''),
    (lambda cp: cp - ord('a') + ord('A'), 'ABCDEF'),
    ({ord('a'): 0x1F600, ord('f'): None}, '😀bcde'),
])
def test_translate(table, expected: str) -> None:
    assert run_translate(b'abcdef', table, ErrorPolicy.STRICT) == (expected, 0)


@pytest.mark.parametrize('errors, expected', [
    (ErrorPolicy.IGNORE, ('AB', 1)),
    (ErrorPolicy.REPLACE, ('A\ufffdB', 1)),
])
def test_translate_decode_failures(errors: ErrorPolicy, expected: tuple[str, int]) -> None:
    upper = {ord('a'): ord('A'), ord('b'): ord('B')}
    assert run_translate(b'a\xffb', upper, errors) == expected


def test_translate_strict_decode_failure() -> None:
    with pytest.raises(DecodeError):
        run_translate(b'a\xffb', {}, ErrorPolicy.STRICT)


def test_translate_replacement_goes_through_table() -> None:
    assert run_translate(b'a\xff', {0xFFFD: ord('?')}, ErrorPolicy.REPLACE) == ('a?', 1)


@pytest.mark.parametrize('errors, expected', [
    (ErrorPolicy.IGNORE, ('b', 1)),
    (ErrorPolicy.REPLACE, ('\ufffdb', 1)),
])
def test_translate_encode_failures(errors: ErrorPolicy, expected: tuple[str, int]) -> None:
    assert run_translate(b'ab', {ord('a'): 0xD800}, errors) == expected


def test_translate_strict_encode_failure() -> None:
    with pytest.raises(EncodeError):
        run_translate(b'ab', {ord('a'): 0xD800}, ErrorPolicy.STRICT)


def run_expandtabs(text: str, tabsize: int, encoding: Encoding = Encoding.UTF8) -> str:
    codec = get_codec(encoding)
    writer = codec.new_writer()
    expandtabs(codec, writer, encode(text, encoding), tabsize)
    return decode(writer.finalize(), encoding)


@pytest.mark.parametrize('encoding', ENCODINGS)
@pytest.mark.parametrize('text, expected', [
    ('\t', '    '),
    ('\t\t', '        '),
    ('\t\t\t', '            '),
    ('a\ta\ta\t', 'a   a   a   '),
    ('aa\taa\taa\t', 'aa  aa  aa  '),
    ('aaa\taaa\taaa\t', 'aaa aaa aaa '),
    ('aaaa\taaaa\taaaa\t', 'aaaa    aaaa    aaaa    '),
    ('😀\t✏✏\t', '😀   ✏✏  '),
    ('ab\ncd\te', 'ab\ncd  e'),
    ('ab\r\tc', 'ab\r    c'),
])
def test_expandtabs(encoding: Encoding, text: str, expected: str) -> None:
    assert run_expandtabs(text, 4, encoding) == expected


@pytest.mark.parametrize('tabsize', [0, 1, 2, 8])
def test_expandtabs_sizes(tabsize: int) -> None:
    text = 'a\tbc\td\n\te'
    assert run_expandtabs(text, tabsize) == text.expandtabs(tabsize)


def test_translate_with_function() -> None:
    def drop_dashes(codepoint: int) -> int:
        return DELETE if codepoint == ord('-') else codepoint

    assert run_translate(b'a-b-c', drop_dashes, ErrorPolicy.STRICT) == ('abc', 0)
