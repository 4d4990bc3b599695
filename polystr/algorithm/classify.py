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
Character predicates and ASCII case mapping.

Categories come from a `Classifier`, which only has to answer with the major Unicode category letter of a codepoint
('L' letter, 'M' mark, 'N' number, 'P' punctuation, 'S' symbol, 'Z' separator, 'C' other). The ASCII classifier is
the default, `UnicodeDataClassifier` delegates to the `unicodedata` module.
"""

import unicodedata
from typing import Callable, Optional, Protocol

from polystr.algorithm.common import ASCII_WHITESPACE
from polystr.algorithm.replace import Translation
from polystr.encoding import Codec
from polystr.types import Units

UNDERSCORE = 0x5F


class Classifier(Protocol):
    def chartype(self, codepoint: int) -> str:
        """Major category letter of `codepoint`."""
        ...


class AsciiClassifier:
    """Knows ASCII only, everything else is reported as 'C'."""

    def chartype(self, codepoint: int) -> str:
        if 0x41 <= codepoint <= 0x5A or 0x61 <= codepoint <= 0x7A:
            return 'L'
        if 0x30 <= codepoint <= 0x39:
            return 'N'
        if codepoint == 0x20:
            return 'Z'
        if 0x20 < codepoint < 0x7F:
            return 'P'
        return 'C'


class UnicodeDataClassifier:
    def chartype(self, codepoint: int) -> str:
        try:
            return unicodedata.category(chr(codepoint))[0]
        except (ValueError, OverflowError):
            return 'C'


DEFAULT_CLASSIFIER: Classifier = AsciiClassifier()

ASCII_UPPER = Translation({cp: cp - 0x20 for cp in range(0x61, 0x7B)})
ASCII_LOWER = Translation({cp: cp + 0x20 for cp in range(0x41, 0x5B)})
ASCII_SWAPCASE = Translation({
    **{cp: cp - 0x20 for cp in range(0x61, 0x7B)},
    **{cp: cp + 0x20 for cp in range(0x41, 0x5B)},
})


def _all(codec: Codec, units: Units, predicate: Callable[[int], bool]) -> bool:
    for _, result in codec.iter_decode(units):
        codepoint = result.ok()
        if codepoint is None or not predicate(codepoint):
            return False
    return True


def isascii(codec: Codec, units: Units) -> bool:
    return _all(codec, units, lambda cp: cp < 0x80)


def isspace(codec: Codec, units: Units, classifier: Optional[Classifier] = None) -> bool:
    classifier = classifier or DEFAULT_CLASSIFIER
    return len(units) > 0 and _all(codec, units, lambda cp: cp in ASCII_WHITESPACE or classifier.chartype(cp) == 'Z')


def isalpha(codec: Codec, units: Units, classifier: Optional[Classifier] = None) -> bool:
    classifier = classifier or DEFAULT_CLASSIFIER
    return len(units) > 0 and _all(codec, units, lambda cp: classifier.chartype(cp) == 'L')


def isalnum(codec: Codec, units: Units, classifier: Optional[Classifier] = None) -> bool:
    classifier = classifier or DEFAULT_CLASSIFIER
    return len(units) > 0 and _all(codec, units, lambda cp: classifier.chartype(cp) in ('L', 'N'))


def isdigit(codec: Codec, units: Units, classifier: Optional[Classifier] = None) -> bool:
    classifier = classifier or DEFAULT_CLASSIFIER
    return len(units) > 0 and _all(codec, units, lambda cp: classifier.chartype(cp) == 'N')


def isidentifier(codec: Codec, units: Units, classifier: Optional[Classifier] = None) -> bool:
    """A letter or underscore followed by letters, marks, numbers or underscores."""
    classifier = classifier or DEFAULT_CLASSIFIER
    if len(units) == 0:
        return False
    first, pos = codec.decode(units, 0)
    head = first.ok()
    if head is None or not (head == UNDERSCORE or classifier.chartype(head) == 'L'):
        return False
    return _all(
        codec,
        units[pos:],
        lambda cp: cp == UNDERSCORE or classifier.chartype(cp) in ('L', 'M', 'N'),
    )


def isprintable(codec: Codec, units: Units, classifier: Optional[Classifier] = None) -> bool:
    """No control or separator characters except the plain space, empty sequences are printable."""
    classifier = classifier or DEFAULT_CLASSIFIER
    return _all(codec, units, lambda cp: cp == 0x20 or classifier.chartype(cp) not in ('C', 'Z'))
