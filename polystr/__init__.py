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
Strings that carry their own encoding.

The main entry point is `PolyStr`, the other names are exported for callers that work on raw unit sequences or plug
in new encodings and renderers.
"""

from polystr.encoding import Codec, Encoding, ErrorPolicy, ReversibleCodec, get_codec, register_codec
from polystr.exception import (
    ArgumentError,
    CodecError,
    DecodeError,
    EncodeError,
    FormatError,
    IrreversibleEncodingError,
    PolystrError,
    UnimplementedError,
)
from polystr.format import Renderer, RendererTable, Unsigned, default_renderer_table
from polystr.string import PolyStr, format_str, to_ascii, to_repr, to_str
from polystr.version import __version__

__all__ = [
    '__version__',
    'Codec',
    'Encoding',
    'ErrorPolicy',
    'ReversibleCodec',
    'get_codec',
    'register_codec',
    'ArgumentError',
    'CodecError',
    'DecodeError',
    'EncodeError',
    'FormatError',
    'IrreversibleEncodingError',
    'PolystrError',
    'UnimplementedError',
    'Renderer',
    'RendererTable',
    'Unsigned',
    'default_renderer_table',
    'PolyStr',
    'format_str',
    'to_ascii',
    'to_repr',
    'to_str',
]
