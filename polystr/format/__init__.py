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

from polystr.format.engine import Formatter, format_units
from polystr.format.numeric import Unsigned
from polystr.format.render import Renderer, RendererTable, default_renderer_table
from polystr.format.specifier import Specifier

__all__ = [
    'Formatter',
    'Renderer',
    'RendererTable',
    'Specifier',
    'Unsigned',
    'default_renderer_table',
    'format_units',
]
