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
Renderers for numbers and booleans.

Integers understand the bases `b`, `o`, `d`, `n`, `x`, `X` and `c` for a single character. Float presentation types
are recognized but not implemented. With `=` alignment the fill goes between the sign (and base prefix) and the
digits, any other alignment pads the whole number.
"""

from dataclasses import dataclass
from typing import Optional

from typing_extensions import override

from polystr.algorithm.align import check_fill, justify, pad
from polystr.buffer import UnitWriter
from polystr.conf import get_global_settings
from polystr.encoding import Codec
from polystr.exception import FormatSpecError, UnimplementedError
from polystr.format.render import Renderer
from polystr.format.specifier import Specifier
from polystr.format.text import as_text_spec, encode_text, format_text

FLOAT_TYPES = frozenset('eEfFgG%')

_DIGIT_FORMATS = {
    'b': 'b',
    'o': 'o',
    'x': 'x',
    'X': 'X',
}


@dataclass(frozen=True)
class Unsigned:
    """An integer rendered as an unsigned value of `bits` bits, negative values wrap around."""
    value: int
    bits: Optional[int] = None

    def normalized(self) -> int:
        bits = self.bits if self.bits is not None else get_global_settings().UNSIGNED_BITS
        return self.value % (1 << bits)


def write_number(codec: Codec, writer: UnitWriter, prefix: str, digits: str, spec: Specifier) -> None:
    if spec.width is None:
        writer.write_ascii(codec, prefix + digits)
        return
    align = spec.align or '>'
    if align == '=':
        fill = check_fill(codec, spec.fill)
        writer.write_ascii(codec, prefix)
        pad(writer, fill, spec.width - len(prefix) - len(digits))
        writer.write_ascii(codec, digits)
        return
    justify(codec, writer, codec.encode_all(map(ord, prefix + digits)), spec.width, spec.fill, align)


class IntRenderer(Renderer[int]):
    def to_int(self, value: int) -> int:
        return int(value)

    @override
    def render_str(self, codec: Codec, writer: UnitWriter, value: int) -> None:
        writer.write_ascii(codec, str(self.to_int(value)))

    @override
    def render_format(self, codec: Codec, writer: UnitWriter, value: int, spec: Specifier) -> None:
        number = self.to_int(value)

        if spec.type == 'c':
            char_writer = codec.new_writer()
            if not codec.encode(char_writer, number):
                codec.encode_strict(char_writer, codec.replacement)
            format_text(codec, writer, char_writer.finalize(), as_text_spec(spec))
            return

        if spec.type is not None and spec.type in FLOAT_TYPES:
            FloatRenderer().render_format(codec, writer, float(number), spec)
            return

        if spec.type not in (None, 'd', 'n') and spec.type not in _DIGIT_FORMATS:
            raise FormatSpecError(f"Unknown format code '{spec.type}' for integer")
        if spec.comma:
            raise FormatSpecError("',' is reserved and not supported")
        if spec.precision is not None:
            raise FormatSpecError('Precision not allowed in integer format specifier')
        if len(spec.other) > 0:
            raise FormatSpecError('Invalid format specifier')

        if number < 0:
            prefix = '-'
        elif spec.sign in ('+', ' '):
            prefix = spec.sign
        else:
            prefix = ''

        digit_format = _DIGIT_FORMATS.get(spec.type or 'd', 'd')
        if spec.alternate and digit_format != 'd':
            prefix += '0' + digit_format

        write_number(codec, writer, prefix, format(abs(number), digit_format), spec)


class UnsignedRenderer(IntRenderer):
    @override
    def to_int(self, value: Unsigned) -> int:  # type: ignore[override]
        return value.normalized()


class BoolRenderer(Renderer[bool]):
    """Booleans are text unless a presentation type asks for a number."""

    def name(self, value: bool) -> str:
        settings = get_global_settings()
        return settings.BOOL_TRUE_NAME if value else settings.BOOL_FALSE_NAME

    @override
    def render_str(self, codec: Codec, writer: UnitWriter, value: bool) -> None:
        writer.write_units(encode_text(codec, self.name(value)))

    @override
    def render_format(self, codec: Codec, writer: UnitWriter, value: bool, spec: Specifier) -> None:
        if spec.type is not None:
            IntRenderer().render_format(codec, writer, int(value), spec)
            return
        format_text(codec, writer, encode_text(codec, self.name(value)), spec)


class FloatRenderer(Renderer[float]):
    @override
    def render_str(self, codec: Codec, writer: UnitWriter, value: float) -> None:
        raise UnimplementedError('floating point formatting is not implemented')

    @override
    def render_format(self, codec: Codec, writer: UnitWriter, value: float, spec: Specifier) -> None:
        raise UnimplementedError('floating point formatting is not implemented')
