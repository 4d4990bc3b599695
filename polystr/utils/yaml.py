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

from pathlib import Path
from typing import Any, TypeVar, Union

import yaml
from pydantic import BaseModel

ModelT = TypeVar('ModelT', bound=BaseModel)


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Load a YAML mapping, an empty document counts as an empty mapping."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f'no settings file at {str(path)!r}')
    with path.open('r') as stream:
        loaded = yaml.safe_load(stream)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f'{str(path)!r} holds a {type(loaded).__name__}, expected a mapping')
    return loaded


def model_from_yaml(model: type[ModelT], *, filepath: Union[Path, str]) -> ModelT:
    return model.model_validate(dict_from_yaml(filepath=filepath))
