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

r"""
Quoting for `repr` and `ascii` style output.

The result is always wrapped in double quotes. Quotes, backslashes and the usual control characters get a C style
escape, other control characters (and everything outside ASCII when `ascii_only` is set) are written as `\uXXXX` or
`\UXXXXXXXX` with lowercase hex digits.

>>> from polystr.encoding import Encoding, get_codec
>>> codec = get_codec(Encoding.UTF8)
>>> writer = codec.new_writer()
>>> quote(codec, codec, writer, '😀\n'.encode(), ascii_only=True)
>>> print(bytes(writer.finalize()).decode())
"\U0001f600\n"
"""

from polystr.buffer import UnitWriter
from polystr.encoding import Codec
from polystr.types import Units

_ESCAPES = {
    0x00: '\\0',
    0x07: '\\a',
    0x08: '\\b',
    0x09: '\\t',
    0x0A: '\\n',
    0x0B: '\\v',
    0x0C: '\\f',
    0x0D: '\\r',
    0x22: '\\"',
    0x27: "\\'",
    0x5C: '\\\\',
}

_UNICODE_LIMIT = 0x110000


def quote(src: Codec, dst: Codec, writer: UnitWriter, units: Units, *, ascii_only: bool = False) -> None:
    """Write `units` decoded with `src` as a quoted and escaped `dst` sequence."""
    writer.write_ascii(dst, '"')
    for _, result in src.iter_decode(units):
        codepoint = result.ok()
        if codepoint is None or codepoint >= _UNICODE_LIMIT:
            if ascii_only:
                writer.write_ascii(dst, '?')
            else:
                dst.encode_strict(writer, dst.replacement)
            continue

        escape = _ESCAPES.get(codepoint)
        if escape is not None:
            writer.write_ascii(dst, escape)
        elif codepoint < 0x20 or (ascii_only and codepoint >= 0x80):
            if codepoint < 0x10000:
                writer.write_ascii(dst, f'\\u{codepoint:04x}')
            else:
                writer.write_ascii(dst, f'\\U{codepoint:08x}')
        elif not dst.encode(writer, codepoint):
            dst.encode_strict(writer, dst.replacement)
    writer.write_ascii(dst, '"')
