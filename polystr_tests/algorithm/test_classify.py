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

from polystr.algorithm import classify
from polystr.algorithm.classify import ASCII_LOWER, ASCII_SWAPCASE, ASCII_UPPER, AsciiClassifier, UnicodeDataClassifier
from polystr.algorithm.replace import translate
from polystr.encoding import Encoding, get_codec
from polystr_tests.unittest import ENCODINGS, decode, encode

UNICODE = UnicodeDataClassifier()


def check(name: str, text: str, encoding: Encoding = Encoding.UTF8, **kwargs) -> bool:
    return getattr(classify, name)(get_codec(encoding), encode(text, encoding), **kwargs)


@pytest.mark.parametrize('encoding', ENCODINGS)
@pytest.mark.parametrize('name, text, expected', [
    ('isascii', '', True),
    ('isascii', 'abc\x7f', True),
    ('isascii', 'abé', False),
    ('isspace', ' \t\n\v\f\r', True),
    ('isspace', '', False),
    ('isspace', ' a ', False),
    ('isalpha', 'abcXYZ', True),
    ('isalpha', 'ab1', False),
    ('isalpha', '', False),
    ('isalnum', 'ab1', True),
    ('isalnum', 'ab_1', False),
    ('isdigit', '0123456789', True),
    ('isdigit', '12a', False),
    ('isidentifier', '_a1', True),
    ('isidentifier', 'abc', True),
    ('isidentifier', '1a', False),
    ('isidentifier', 'a-b', False),
    ('isidentifier', '', False),
    ('isprintable', '', True),
    ('isprintable', 'a b~', True),
    ('isprintable', 'a\n', False),
])
def test_ascii_predicates(encoding: Encoding, name: str, text: str, expected: bool) -> None:
    assert check(name, text, encoding) is expected
    assert getattr(text, name)() is expected


@pytest.mark.parametrize('name, text, ascii_expected, unicode_expected', [
    ('isspace', '\u3000', False, True),
    ('isalpha', 'é✏', False, False),
    ('isalpha', 'éß', False, True),
    ('isalnum', 'é٣', False, True),
    ('isdigit', '١٢', False, True),
    ('isidentifier', 'é_1', False, True),
    ('isidentifier', '_\u0301', False, True),
    ('isprintable', 'é', False, True),
    ('isprintable', '\u3000', False, False),
])
def test_classifiers(name: str, text: str, ascii_expected: bool, unicode_expected: bool) -> None:
    assert check(name, text) is ascii_expected
    assert check(name, text, classifier=AsciiClassifier()) is ascii_expected
    assert check(name, text, classifier=UNICODE) is unicode_expected


def test_malformed_units_fail_predicates() -> None:
    codec = get_codec(Encoding.UTF8)
    assert not classify.isascii(codec, b'a\xff')
    assert not classify.isalpha(codec, b'a\xff', UNICODE)
    assert not classify.isprintable(codec, b'\xff')


def test_unicode_classifier_outside_unicode() -> None:
    assert UNICODE.chartype(0x110000) == 'C'
    assert UNICODE.chartype(ord('a')) == 'L'


@pytest.mark.parametrize('encoding', ENCODINGS)
def test_ascii_case_mapping(encoding: Encoding) -> None:
    codec = get_codec(encoding)
    units = encode('Hello Wörld 😀', encoding)
    for table, expected in [
        (ASCII_UPPER, 'HELLO WöRLD 😀'),
        (ASCII_LOWER, 'hello wörld 😀'),
        (ASCII_SWAPCASE, 'hELLO wöRLD 😀'),
    ]:
        writer = codec.new_writer()
        assert translate(codec, writer, units, table) == 0
        assert decode(writer.finalize(), encoding) == expected
