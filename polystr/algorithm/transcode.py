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
Conversion between encodings.

>>> from polystr.encoding import Encoding, ErrorPolicy, get_codec
>>> utf8, char8 = get_codec(Encoding.UTF8), get_codec(Encoding.CHAR8)
>>> writer = char8.new_writer()
>>> transcode(utf8, char8, writer, 'a✏b'.encode(), ErrorPolicy.REPLACE)
1
>>> bytes(writer.finalize())
b'a?b'
"""

from structlog import get_logger

from polystr.buffer import UnitWriter
from polystr.encoding import Codec, ErrorPolicy
from polystr.exception import EncodeError
from polystr.types import Units
from polystr.utils.result import Err, Ok

logger = get_logger()


def transcode(
    src: Codec,
    dst: Codec,
    writer: UnitWriter,
    units: Units,
    errors: ErrorPolicy = ErrorPolicy.STRICT,
) -> int:
    """Write `units` re-encoded from `src` to `dst`, return how many codepoints were replaced or dropped.

    Sequences already in the destination encoding are copied as they are. Under REPLACE both decode and encode
    failures become the destination's replacement codepoint.
    """
    if src.encoding == dst.encoding:
        writer.write_units(units)
        return 0

    substituted = 0
    for _, result in src.iter_decode(units):
        match result:
            case Ok(codepoint):
                if dst.encode(writer, codepoint):
                    continue
                if errors is ErrorPolicy.STRICT:
                    raise EncodeError(
                        f'cannot encode codepoint 0x{codepoint:x} as {dst.name}',
                        codepoint=codepoint,
                        encoding=dst.encoding,
                    )
            case Err(failure):
                if errors is ErrorPolicy.STRICT:
                    raise failure.to_exception()
        substituted += 1
        if errors is ErrorPolicy.REPLACE:
            dst.encode_strict(writer, dst.replacement)

    if substituted:
        log = logger.new()
        log.debug(
            'transcode substituted invalid data',
            count=substituted,
            source=src.name,
            target=dst.name,
            errors=errors.value,
        )
    return substituted
