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

from enum import Enum, unique


@unique
class Encoding(Enum):
    """Encoding tags known to the built-in codec registry.

    The raw encodings store one codepoint per unit without interpreting it, the UTF encodings follow the Unicode
    standard. Values match the tags used by existing serialized data and must not change.
    """
    CHAR8 = 0
    CHAR16 = 1
    CHAR32 = 2
    UTF8 = 8
    UTF16 = 9
    UTF32 = 10


@unique
class ErrorPolicy(Enum):
    """What to do with a codepoint that cannot be decoded or encoded."""
    STRICT = 'strict'
    IGNORE = 'ignore'
    REPLACE = 'replace'
