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

from typing import Hashable, Union

from polystr.encoding.codec import Codec, DecodeFailure, DecodeResult, ReversibleCodec, require_reversible
from polystr.encoding.cursor import Cursor, ReversibleCursor
from polystr.encoding.tags import Encoding, ErrorPolicy
from polystr.exception import UnknownEncodingError

_registry: dict[Hashable, Codec] = {}


def _register_builtin_codecs() -> None:
    from polystr.encoding.raw import Char8Codec, Char16Codec, Char32Codec
    from polystr.encoding.utf8 import Utf8Codec
    from polystr.encoding.utf16 import Utf16Codec
    from polystr.encoding.utf32 import Utf32Codec

    for codec_class in (Char8Codec, Char16Codec, Char32Codec, Utf8Codec, Utf16Codec, Utf32Codec):
        register_codec(codec_class())


def register_codec(codec: Codec) -> None:
    """Make a codec available through `get_codec(codec.encoding)`."""
    if codec.encoding in _registry:
        raise ValueError(f'codec already registered for {codec.name}')
    _registry[codec.encoding] = codec


def get_codec(encoding: Union[Hashable, Codec]) -> Codec:
    """Return the codec for an encoding tag, or the codec itself when one is given."""
    if isinstance(encoding, Codec):
        return encoding
    if isinstance(encoding, str) and encoding.upper() in Encoding.__members__:
        encoding = Encoding[encoding.upper()]
    try:
        return _registry[encoding]
    except KeyError:
        raise UnknownEncodingError(f'unknown encoding: {encoding!r}') from None


_register_builtin_codecs()

__all__ = [
    'Codec',
    'Cursor',
    'DecodeFailure',
    'DecodeResult',
    'Encoding',
    'ErrorPolicy',
    'ReversibleCodec',
    'ReversibleCursor',
    'get_codec',
    'register_codec',
    'require_reversible',
]
