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
Cursors walk a unit sequence one codepoint at a time.

>>> from polystr.encoding import Encoding, get_codec
>>> codec = get_codec(Encoding.UTF8)
>>> units = codec.encode_all(map(ord, 'a✏😀'))
>>> cur = codec.cursor(units)
>>> cur.value(), cur.advance().pos, cur.advance().pos
(Ok(97), 1, 4)
>>> cur.value()
Ok(128512)
>>> cur.advance().at_end()
True
>>> cur.retreat().pos
4
>>> cur - codec.cursor(units)
2

Only reversible codecs hand out cursors with `retreat`. Positions are unit offsets and the cursor never reads outside
`[start, end)`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

from typing_extensions import Self

from polystr.types import Units

if TYPE_CHECKING:
    from polystr.encoding.codec import Codec, DecodeResult, ReversibleCodec


class Cursor:
    __slots__ = ('codec', 'units', 'pos', 'start', 'end')

    def __init__(
        self,
        codec: Codec,
        units: Units,
        pos: int = 0,
        end: Optional[int] = None,
        *,
        start: int = 0,
    ) -> None:
        self.codec = codec
        self.units = units
        self.pos = pos
        self.start = start
        self.end = len(units) if end is None else end

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.codec.name}, pos={self.pos})'

    def copy(self) -> Self:
        return type(self)(self.codec, self.units, self.pos, self.end, start=self.start)

    def at_end(self) -> bool:
        return self.pos >= self.end

    def value(self) -> DecodeResult:
        """Decode the codepoint under the cursor without moving."""
        if self.at_end():
            raise IndexError('cursor is at the end of the sequence')
        result, _ = self.codec.decode(self.units, self.pos, self.end)
        return result

    def advance(self) -> Self:
        if self.at_end():
            raise IndexError('cursor is at the end of the sequence')
        self.pos = self.codec.advance(self.units, self.pos, self.end)
        return self

    def __iter__(self) -> Iterator[DecodeResult]:
        while not self.at_end():
            result, self.pos = self.codec.decode(self.units, self.pos, self.end)
            yield result

    def __sub__(self, other: Cursor) -> int:
        """Number of codepoints from `other` up to this cursor."""
        if other.units is not self.units:
            raise ValueError('cursors over different sequences')
        if other.pos > self.pos:
            return -(other - self)
        return self.codec.length(self.units, other.pos, self.pos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.units is other.units and self.pos == other.pos

    def __lt__(self, other: Cursor) -> bool:
        return self.pos < other.pos

    def __le__(self, other: Cursor) -> bool:
        return self.pos <= other.pos


class ReversibleCursor(Cursor):
    __slots__ = ()

    codec: ReversibleCodec

    def at_start(self) -> bool:
        return self.pos <= self.start

    def retreat(self) -> Self:
        if self.at_start():
            raise IndexError('cursor is at the start of the sequence')
        self.pos = self.codec.step_back(self.units, self.pos, self.start)
        return self
