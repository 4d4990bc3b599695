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

from typing import Hashable
from unittest import TestCase as BaseTestCase

from structlog import get_logger

from polystr.conf.get_settings import get_global_settings
from polystr.encoding import Encoding, get_codec
from polystr.types import Units

logger = get_logger()

ENCODINGS = (Encoding.UTF8, Encoding.UTF16, Encoding.UTF32)


def encode(text: str, encoding: Hashable = Encoding.UTF8) -> Units:
    """Encode a Python str, failing on anything the encoding can't represent."""
    return get_codec(encoding).encode_all(map(ord, text))


def decode(units: Units, encoding: Hashable = Encoding.UTF8) -> str:
    """Decode units to a Python str, failing on malformed data."""
    codec = get_codec(encoding)
    return ''.join(chr(result.unwrap()) for _, result in codec.iter_decode(units))


class TestCase(BaseTestCase):
    """Base for tests that need the global settings, loaded from the unittests YAML in conftest."""

    def setUp(self) -> None:
        self.log = logger.new()
        self._settings = get_global_settings()
        self.log.debug('test settings', encoding=self._settings.DEFAULT_ENCODING.name)
