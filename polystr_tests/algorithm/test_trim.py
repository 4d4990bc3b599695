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

import pytest

from polystr.algorithm.trim import lstrip, removeprefix, removesuffix, rstrip, strip
from polystr.encoding import Encoding, get_codec
from polystr_tests.unittest import ENCODINGS, decode, encode


@pytest.mark.parametrize('encoding', ENCODINGS)
@pytest.mark.parametrize('text, chars', [
    ('  abc  ', None),
    ('\t\n\v\f\r abc \r\n', None),
    ('   ', None),
    ('', None),
    ('abc', None),
    ('😀😀abc😀', '😀'),
    ('✏😀a✏b😀✏', '😀✏'),
    ('xyzabczyx', 'xyz'),
    ('abc', ''),
    ('😀😀', '😀'),
])
def test_strip(encoding: Encoding, text: str, chars: Optional[str]) -> None:
    codec = get_codec(encoding)
    units = encode(text, encoding)
    chars_units = None if chars is None else encode(chars, encoding)
    assert decode(strip(codec, units, chars_units), encoding) == text.strip(chars)
    assert decode(lstrip(codec, units, chars_units), encoding) == text.lstrip(chars)
    assert decode(rstrip(codec, units, chars_units), encoding) == text.rstrip(chars)


def test_rstrip_keeps_malformed_units() -> None:
    codec = get_codec(Encoding.UTF8)
    assert rstrip(codec, b'a\xff  ') == b'a\xff'
    assert lstrip(codec, b'  \xffa') == b'\xffa'


@pytest.mark.parametrize('encoding', ENCODINGS)
@pytest.mark.parametrize('text, affix', [
    ('😀abc😀', '😀'),
    ('abc', 'abc'),
    ('abc', 'x'),
    ('abc', ''),
    ('', 'a'),
    ('✏a✏', '✏a'),
])
def test_removeprefix_and_removesuffix(encoding: Encoding, text: str, affix: str) -> None:
    units, affix_units = encode(text, encoding), encode(affix, encoding)
    assert decode(removeprefix(units, affix_units), encoding) == text.removeprefix(affix)
    assert decode(removesuffix(units, affix_units), encoding) == text.removesuffix(affix)
