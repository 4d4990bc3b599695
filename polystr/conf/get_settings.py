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
from typing import NamedTuple, Optional

from structlog import get_logger

from polystr.conf.settings import PolystrSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'POLYSTR_CONFIG_YAML'


class _LoadedSettings(NamedTuple):
    source: Optional[str]
    settings: PolystrSettings


_loaded: Optional[_LoadedSettings] = None


def get_global_settings() -> PolystrSettings:
    """The process-wide settings, read once from the YAML named by POLYSTR_CONFIG_YAML or built from defaults."""
    return _load_settings_singleton(os.environ.get(CONFIG_YAML_ENV_VAR))


def get_settings_source() -> Optional[str]:
    """The YAML path the global settings came from, None for defaults. Only valid after get_global_settings()."""
    assert _loaded is not None, 'global settings were not loaded yet'
    return _loaded.source


def _load_settings_singleton(source: Optional[str]) -> PolystrSettings:
    global _loaded
    if _loaded is None:
        _loaded = _LoadedSettings(source, _load_settings(source))
    elif _loaded.source != source:
        raise Exception(f'global settings already loaded from {_loaded.source!r}, refusing {source!r}')
    return _loaded.settings


def _load_settings(source: Optional[str]) -> PolystrSettings:
    log = logger.new()
    if source is None:
        log.debug('using default settings')
        return PolystrSettings()
    log.info('loading settings', source=source)
    return PolystrSettings.from_yaml(filepath=source)
