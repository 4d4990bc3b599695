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
Template formatting with `str.format` compatible replacement fields.

    field         := '{' [index] ['!' conversion] [':' spec] '}'
    literal brace := '{{' | '}}'

A template either numbers every field explicitly or none of them. Specifiers may contain nested replacement fields,
which are formatted first with the same arguments and the same numbering.

>>> from polystr.encoding import Encoding, get_codec
>>> codec = get_codec(Encoding.UTF8)
>>> bytes(format_units(codec, b'{2}{1}{0}', ['aaa', 'bbb', 'ccc']))
b'cccbbbaaa'
>>> bytes(format_units(codec, b'{:=+06}|{!r:>7}|{{}}', [42, 'ab']))
b'+00042|   "ab"|{}'
"""

from typing import Any, Optional, Sequence

from polystr.buffer import UnitWriter
from polystr.conf import PolystrSettings, get_global_settings
from polystr.encoding import Codec
from polystr.exception import (
    FormatIndexError,
    FormatSyntaxError,
    IndexingModeError,
    InvalidConversionError,
    NestingTooDeepError,
    SingleBraceError,
    UnimplementedError,
    UnterminatedFieldError,
)
from polystr.format.render import Renderer, RendererTable, default_renderer_table
from polystr.format.specifier import Specifier, is_digit_unit
from polystr.format.text import format_text
from polystr.types import Units

OPEN = ord('{')
CLOSE = ord('}')
COLON = ord(':')
BANG = ord('!')
LBRACKET = ord('[')
DOT = ord('.')
CONVERSIONS = frozenset(map(ord, 'ars'))

# field counter state once an explicit index was used
MANUAL = -1


class FieldCounter:
    """Hands out automatic field numbers and enforces that numbering styles are not mixed."""

    __slots__ = ('position',)

    def __init__(self) -> None:
        self.position = 0

    def automatic(self) -> int:
        if self.position == MANUAL:
            raise IndexingModeError('cannot switch from manual field specification to automatic field numbering')
        index = self.position
        self.position += 1
        return index

    def manual(self, index: int) -> int:
        if self.position > 0:
            raise IndexingModeError('cannot switch from automatic field numbering to manual field specification')
        self.position = MANUAL
        return index


class Formatter:
    """Formats templates of one codec against one argument list.

    The argument dispatch is resolved once when the formatter is built, the field counter lives as long as the
    formatter so each template needs a new one.
    """

    def __init__(
        self,
        codec: Codec,
        args: Sequence[Any],
        *,
        renderers: Optional[RendererTable] = None,
        settings: Optional[PolystrSettings] = None,
    ) -> None:
        self.codec = codec
        self.settings = settings or get_global_settings()
        self.entries: list[tuple[Any, Renderer[Any]]] = (renderers or default_renderer_table()).dispatch(args)
        self.counter = FieldCounter()

    def format(self, template: Units) -> Units:
        writer = self.codec.new_writer()
        self.format_into(writer.with_optional_max_units(self.settings.FORMAT_MAX_OUTPUT_UNITS), template)
        return writer.finalize()

    def format_into(self, writer: UnitWriter, template: Units, depth: int = 0) -> None:
        codec = self.codec
        size = len(template)
        literal_start = 0
        pos = 0
        while pos < size:
            unit = template[pos]
            if unit == OPEN:
                writer.write_units(template[literal_start:pos])
                if pos + 1 < size and template[pos + 1] == OPEN:
                    writer.write_unit(OPEN)
                    pos += 2
                else:
                    pos = self._field(writer, template, pos + 1, depth)
                literal_start = pos
            elif unit == CLOSE:
                writer.write_units(template[literal_start:pos])
                if pos + 1 < size and template[pos + 1] == CLOSE:
                    writer.write_unit(CLOSE)
                    pos += 2
                    literal_start = pos
                else:
                    raise SingleBraceError("Single '}' encountered in format string")
            else:
                pos = codec.advance(template, pos, size)
        writer.write_units(template[literal_start:size])

    def _field(self, writer: UnitWriter, template: Units, pos: int, depth: int) -> int:
        """Format the field whose body starts at `pos`, return the position after its closing brace."""
        size = len(template)

        digits_start = pos
        while pos < size and is_digit_unit(template[pos]):
            pos += 1
        if pos >= size:
            raise UnterminatedFieldError("expected '}' before end of string")
        if pos > digits_start:
            index = self.counter.manual(int(''.join(chr(unit) for unit in template[digits_start:pos])))
        else:
            index = self.counter.automatic()

        if template[pos] in (LBRACKET, DOT):
            raise UnimplementedError('attribute and element access in replacement fields is not implemented')

        conversion: Optional[str] = None
        if template[pos] == BANG:
            if pos + 1 >= size:
                raise UnterminatedFieldError('end of string while looking for conversion specifier')
            if template[pos + 1] not in CONVERSIONS:
                raise InvalidConversionError(f'Unknown conversion specifier {chr(template[pos + 1])}')
            conversion = chr(template[pos + 1])
            pos += 2
            if pos >= size:
                raise UnterminatedFieldError("expected '}' before end of string")

        spec_units: Units = template[0:0]
        if template[pos] == COLON:
            pos += 1
            spec_start = pos
            level = 0
            nested = False
            while pos < size:
                unit = template[pos]
                if unit == OPEN:
                    level += 1
                    nested = True
                elif unit == CLOSE:
                    if level == 0:
                        break
                    level -= 1
                pos = self.codec.advance(template, pos, size)
            if pos >= size:
                raise UnterminatedFieldError("expected '}' before end of string")
            spec_units = template[spec_start:pos]
            if nested:
                spec_units = self._resolve_nested(spec_units, depth + 1)

        if template[pos] != CLOSE:
            raise FormatSyntaxError("expected '}' after replacement field")

        if index >= len(self.entries):
            raise FormatIndexError(f'Replacement index {index} out of range for {len(self.entries)} arguments')
        value, renderer = self.entries[index]
        self._render(writer, value, renderer, conversion, spec_units)
        return pos + 1

    def _resolve_nested(self, spec_units: Units, depth: int) -> Units:
        max_nesting = self.settings.FORMAT_MAX_NESTING
        if max_nesting is not None and depth > max_nesting:
            raise NestingTooDeepError('Max string recursion exceeded')
        writer = self.codec.new_writer()
        self.format_into(writer, spec_units, depth)
        return writer.finalize()

    def _render(
        self,
        writer: UnitWriter,
        value: Any,
        renderer: Renderer[Any],
        conversion: Optional[str],
        spec_units: Units,
    ) -> None:
        codec = self.codec
        if conversion is None and len(spec_units) == 0:
            renderer.render_default(codec, writer, value)
            return
        spec = Specifier.parse(codec, spec_units)
        if conversion is None:
            renderer.render_format(codec, writer, value, spec)
            return
        format_text(codec, writer, renderer.to_units(codec, value, conversion), spec)


def format_units(
    codec: Codec,
    template: Units,
    args: Sequence[Any],
    *,
    renderers: Optional[RendererTable] = None,
    settings: Optional[PolystrSettings] = None,
) -> Units:
    """Format a template encoded with `codec`, the result uses the same codec."""
    return Formatter(codec, args, renderers=renderers, settings=settings).format(template)
