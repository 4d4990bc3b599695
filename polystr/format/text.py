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

from __future__ import annotations

from abc import abstractmethod
from dataclasses import replace as replace_fields
from typing import TYPE_CHECKING, TypeVar, Union

from typing_extensions import override

from polystr.algorithm.align import justify, truncate
from polystr.algorithm.quote import quote
from polystr.algorithm.transcode import transcode
from polystr.buffer import UnitWriter
from polystr.encoding import Codec, Encoding, ErrorPolicy, get_codec
from polystr.exception import FormatSpecError
from polystr.format.render import Renderer
from polystr.format.specifier import Specifier
from polystr.types import Units

if TYPE_CHECKING:
    from polystr.string import PolyStr

T = TypeVar('T')


def format_text(codec: Codec, writer: UnitWriter, units: Units, spec: Specifier) -> None:
    """Apply a specifier to text: precision truncates, width pads, numeric options are rejected."""
    if spec.type not in (None, 's'):
        raise FormatSpecError(f"Unknown format code '{spec.type}' for string")
    if spec.sign is not None:
        raise FormatSpecError('Sign not allowed in string format specifier')
    if spec.align == '=':
        raise FormatSpecError("'=' alignment not allowed in string format specifier")
    if spec.alternate:
        raise FormatSpecError('Alternate form (#) not allowed in string format specifier')
    if spec.comma:
        raise FormatSpecError("Cannot specify ',' with 's'")
    if len(spec.other) > 0:
        raise FormatSpecError('Invalid format specifier')

    if spec.precision is not None:
        units = truncate(codec, units, spec.precision)
    if spec.width is None:
        writer.write_units(units)
        return
    justify(codec, writer, units, spec.width, spec.fill, spec.align or '<')


def as_text_spec(spec: Specifier) -> Specifier:
    return replace_fields(spec, type='s')


class EncodedTextRenderer(Renderer[T]):
    """Base for values that already are text in some encoding."""

    @abstractmethod
    def source(self, value: T) -> tuple[Codec, Units]:
        """The codec and units the value holds."""
        raise NotImplementedError

    @override
    def render_str(self, codec: Codec, writer: UnitWriter, value: T) -> None:
        src, units = self.source(value)
        transcode(src, codec, writer, units, ErrorPolicy.REPLACE)

    @override
    def render_repr(self, codec: Codec, writer: UnitWriter, value: T) -> None:
        src, units = self.source(value)
        quote(src, codec, writer, units)

    @override
    def render_ascii(self, codec: Codec, writer: UnitWriter, value: T) -> None:
        src, units = self.source(value)
        quote(src, codec, writer, units, ascii_only=True)

    @override
    def render_format(self, codec: Codec, writer: UnitWriter, value: T, spec: Specifier) -> None:
        format_text(codec, writer, self.to_units(codec, value, 's'), spec)


class TextRenderer(EncodedTextRenderer[str]):
    """Python str values, seen as UTF-32 so lone surrogates count as invalid data."""

    @override
    def source(self, value: str) -> tuple[Codec, Units]:
        return get_codec(Encoding.UTF32), [ord(char) for char in value]


class BytesRenderer(EncodedTextRenderer[Union[bytes, bytearray]]):
    @override
    def source(self, value: Union[bytes, bytearray]) -> tuple[Codec, Units]:
        return get_codec(Encoding.CHAR8), value


class PolyStrRenderer(EncodedTextRenderer['PolyStr']):
    @override
    def source(self, value: PolyStr) -> tuple[Codec, Units]:
        return value.codec, value.units


def encode_text(codec: Codec, text: str) -> Units:
    """Encode a Python str with the REPLACE policy."""
    writer = codec.new_writer()
    TextRenderer().render_str(codec, writer, text)
    return writer.finalize()
