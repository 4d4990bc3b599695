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

from typing import Any, Optional

from pydantic import field_validator

from polystr.encoding.tags import Encoding, ErrorPolicy
from polystr.utils.pydantic import BaseModel


class PolystrSettings(BaseModel):
    # Encoding used when a PolyStr is built from a Python str without an explicit encoding.
    DEFAULT_ENCODING: Encoding = Encoding.UTF8

    # Default tab size of expandtabs.
    TABSIZE: int = 4

    # Default error policies, explicit arguments always win.
    TRANSLATE_ERRORS: ErrorPolicy = ErrorPolicy.REPLACE
    TRANSCODE_ERRORS: ErrorPolicy = ErrorPolicy.STRICT

    # Text used for booleans rendered as strings.
    BOOL_TRUE_NAME: str = 'true'
    BOOL_FALSE_NAME: str = 'false'

    # Width in bits of Unsigned values created without an explicit width.
    UNSIGNED_BITS: int = 64

    # Maximum depth of replacement fields nested inside a format specifier, None means unlimited.
    FORMAT_MAX_NESTING: Optional[int] = None

    # Maximum number of units a single format call may produce, None means unlimited.
    FORMAT_MAX_OUTPUT_UNITS: Optional[int] = None

    @classmethod
    def from_yaml(cls, *, filepath: str) -> 'PolystrSettings':
        """Validate the settings stored in a YAML file."""
        from polystr.utils.yaml import model_from_yaml
        return model_from_yaml(cls, filepath=filepath)

    @field_validator('DEFAULT_ENCODING', mode='before')
    @classmethod
    def _parse_encoding(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return Encoding[value.upper()]
            except KeyError:
                raise ValueError(f'unknown encoding: {value}') from None
        return value

    @field_validator('TRANSLATE_ERRORS', 'TRANSCODE_ERRORS', mode='before')
    @classmethod
    def _parse_error_policy(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator('TABSIZE')
    @classmethod
    def _validate_tabsize(cls, value: int) -> int:
        if value < 0:
            raise ValueError('TABSIZE must not be negative')
        return value

    @field_validator('UNSIGNED_BITS')
    @classmethod
    def _validate_unsigned_bits(cls, value: int) -> int:
        if value <= 0:
            raise ValueError('UNSIGNED_BITS must be positive')
        return value

    @field_validator('FORMAT_MAX_NESTING', 'FORMAT_MAX_OUTPUT_UNITS')
    @classmethod
    def _validate_optional_limit(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError('limits must not be negative')
        return value
