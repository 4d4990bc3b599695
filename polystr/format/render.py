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

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Optional, Sequence, TypeVar

from polystr.buffer import UnitWriter
from polystr.encoding import Codec
from polystr.exception import UnsupportedTypeError
from polystr.format.specifier import Specifier
from polystr.types import Units

T = TypeVar('T')


class Renderer(ABC, Generic[T]):
    """Turns values of one type into text of the output codec.

    Renderers are stateless. `render_str`, `render_repr` and `render_ascii` back the `!s`, `!r` and `!a` conversions,
    `render_format` applies a parsed specifier.
    """

    @abstractmethod
    def render_str(self, codec: Codec, writer: UnitWriter, value: T) -> None:
        raise NotImplementedError

    def render_repr(self, codec: Codec, writer: UnitWriter, value: T) -> None:
        self.render_str(codec, writer, value)

    def render_ascii(self, codec: Codec, writer: UnitWriter, value: T) -> None:
        self.render_repr(codec, writer, value)

    @abstractmethod
    def render_format(self, codec: Codec, writer: UnitWriter, value: T, spec: Specifier) -> None:
        raise NotImplementedError

    def render_default(self, codec: Codec, writer: UnitWriter, value: T) -> None:
        self.render_format(codec, writer, value, Specifier())

    def to_units(self, codec: Codec, value: T, conversion: str) -> Units:
        """Run one of the conversions into a fresh unit sequence."""
        writer = codec.new_writer()
        match conversion:
            case 's':
                self.render_str(codec, writer, value)
            case 'r':
                self.render_repr(codec, writer, value)
            case 'a':
                self.render_ascii(codec, writer, value)
            case _:
                raise ValueError(f'unknown conversion: {conversion!r}')
        return writer.finalize()


class RendererTable:
    """Maps argument types to renderers, a value uses the first match along its type's MRO."""

    def __init__(self, renderers: Optional[Mapping[type, Renderer[Any]]] = None) -> None:
        self._renderers: dict[type, Renderer[Any]] = dict(renderers or {})

    def register(self, type_: type[T], renderer: Renderer[T]) -> None:
        self._renderers[type_] = renderer

    def copy(self) -> RendererTable:
        return RendererTable(self._renderers)

    def lookup(self, value: Any) -> Renderer[Any]:
        for klass in type(value).__mro__:
            renderer = self._renderers.get(klass)
            if renderer is not None:
                return renderer
        raise UnsupportedTypeError(f'no renderer for type {type(value).__name__}')

    def dispatch(self, args: Sequence[Any]) -> list[tuple[Any, Renderer[Any]]]:
        """Pair every argument with its renderer, in argument order."""
        return [(value, self.lookup(value)) for value in args]


def default_renderer_table() -> RendererTable:
    """A new table with renderers for bool, int, Unsigned, float, str, bytes and PolyStr."""
    from polystr.format.numeric import BoolRenderer, FloatRenderer, IntRenderer, Unsigned, UnsignedRenderer
    from polystr.format.text import BytesRenderer, PolyStrRenderer, TextRenderer
    from polystr.string import PolyStr

    return RendererTable({
        bool: BoolRenderer(),
        int: IntRenderer(),
        Unsigned: UnsignedRenderer(),
        float: FloatRenderer(),
        str: TextRenderer(),
        bytes: BytesRenderer(),
        bytearray: BytesRenderer(),
        PolyStr: PolyStrRenderer(),
    })
