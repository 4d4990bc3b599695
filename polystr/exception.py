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

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from polystr.encoding import Encoding


class PolystrError(Exception):
    """General error class"""


class CodecError(PolystrError, ValueError):
    """A unit sequence or a codepoint could not be converted"""


class DecodeError(CodecError):
    """The units at a position do not form a valid codepoint in the declared encoding"""

    def __init__(self, message: str, *, position: int, unit: int) -> None:
        super().__init__(message)
        self.position = position
        self.unit = unit


class EncodeError(CodecError):
    """A codepoint cannot be represented in the destination encoding"""

    def __init__(self, message: str, *, codepoint: int, encoding: Optional['Encoding'] = None) -> None:
        super().__init__(message)
        self.codepoint = codepoint
        self.encoding = encoding


class ArgumentError(PolystrError, ValueError):
    """A caller-supplied parameter violates a precondition"""


class InvalidFillError(ArgumentError):
    """Fill token does not decode to exactly one codepoint"""


class EmptySeparatorError(ArgumentError):
    """Separator must not be empty"""


class SubstringNotFoundError(ArgumentError):
    """Raised by index and rindex when the substring is not present"""


class TranslationTableError(ArgumentError):
    """Translation table sources have different lengths"""


class UnknownEncodingError(ArgumentError, LookupError):
    """No codec registered for an encoding tag"""


class UnsupportedTypeError(ArgumentError, TypeError):
    """No renderer registered for a value's type"""


class FormatError(ArgumentError):
    """Base class for template and specifier errors"""


class FormatSyntaxError(FormatError):
    """Malformed replacement field"""


class UnterminatedFieldError(FormatSyntaxError):
    """Template ended inside a replacement field"""


class SingleBraceError(FormatSyntaxError):
    """A lone '}' outside of a replacement field"""


class InvalidConversionError(FormatSyntaxError):
    """Conversion flag other than 'a', 'r' or 's'"""


class IndexingModeError(FormatError):
    """Automatic and manual field numbering mixed in one template"""


class FormatIndexError(FormatError, IndexError):
    """Field index refers to a missing argument"""


class FormatSpecError(FormatError):
    """Format specifier not accepted by the renderer"""


class NestingTooDeepError(FormatError):
    """Replacement fields nested deeper than allowed"""


class UnimplementedError(PolystrError, NotImplementedError):
    """Feature is recognized but not implemented"""


class IrreversibleEncodingError(PolystrError, TypeError):
    """Backward iteration requested on an encoding that does not support it"""


class OutputTooLongError(PolystrError):
    """Output buffer limit exceeded"""
