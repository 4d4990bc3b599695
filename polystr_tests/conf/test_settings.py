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

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from polystr.conf import UNITTESTS_SETTINGS_FILEPATH, PolystrSettings, get_global_settings
from polystr.conf.get_settings import (
    CONFIG_YAML_ENV_VAR,
    _load_settings,
    _load_settings_singleton,
    get_settings_source,
)
from polystr.encoding import Encoding, ErrorPolicy
from polystr_tests.unittest import TestCase

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


def test_valid_settings_from_yaml() -> None:
    settings = PolystrSettings.from_yaml(filepath=str(FIXTURES_DIR / 'valid_settings_fixture.yml'))
    assert settings == PolystrSettings(
        DEFAULT_ENCODING=Encoding.UTF16,
        TABSIZE=8,
        TRANSLATE_ERRORS=ErrorPolicy.IGNORE,
        TRANSCODE_ERRORS=ErrorPolicy.REPLACE,
        BOOL_TRUE_NAME='yes',
        BOOL_FALSE_NAME='no',
        UNSIGNED_BITS=16,
        FORMAT_MAX_NESTING=2,
    )
    assert settings.FORMAT_MAX_OUTPUT_UNITS is None


@pytest.mark.parametrize('filepath', [
    'invalid_encoding_fixture.yml',
    'invalid_tabsize_fixture.yml',
    'unknown_field_fixture.yml',
])
def test_invalid_settings_from_yaml(filepath: str) -> None:
    with pytest.raises(ValidationError):
        PolystrSettings.from_yaml(filepath=str(FIXTURES_DIR / filepath))


@pytest.mark.parametrize('field, value', [
    ('TABSIZE', -1),
    ('UNSIGNED_BITS', 0),
    ('FORMAT_MAX_NESTING', -1),
    ('FORMAT_MAX_OUTPUT_UNITS', -5),
    ('TRANSCODE_ERRORS', 'skip'),
])
def test_invalid_values(field: str, value: object) -> None:
    with pytest.raises(ValidationError):
        PolystrSettings(**{field: value})


def test_defaults() -> None:
    settings = _load_settings(None)
    assert settings.DEFAULT_ENCODING is Encoding.UTF8
    assert settings.TABSIZE == 4
    assert settings.TRANSLATE_ERRORS is ErrorPolicy.REPLACE
    assert settings.TRANSCODE_ERRORS is ErrorPolicy.STRICT
    assert settings.UNSIGNED_BITS == 64
    assert settings.FORMAT_MAX_NESTING is None


def test_settings_are_frozen() -> None:
    settings = PolystrSettings()
    with pytest.raises(ValidationError):
        settings.TABSIZE = 8  # type: ignore[misc]


class GlobalSettingsTest(TestCase):
    def test_loaded_from_env(self) -> None:
        self.assertEqual(get_settings_source(), os.environ[CONFIG_YAML_ENV_VAR])
        self.assertIs(get_global_settings(), self._settings)

    def test_unittests_file(self) -> None:
        settings = PolystrSettings.from_yaml(filepath=UNITTESTS_SETTINGS_FILEPATH)
        self.assertEqual(settings.UNSIGNED_BITS, 32)
        self.assertEqual(settings.FORMAT_MAX_NESTING, 8)

    def test_loading_another_source_fails(self) -> None:
        with self.assertRaises(Exception):
            _load_settings_singleton(str(FIXTURES_DIR / 'valid_settings_fixture.yml'))
        self.assertIs(_load_settings_singleton(get_settings_source()), self._settings)
