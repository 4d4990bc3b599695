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
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Hashable, Iterable, Iterator, Optional, TypeAlias

from polystr.exception import DecodeError, EncodeError, IrreversibleEncodingError
from polystr.types import UNIT_TYPECODES, Units
from polystr.utils.result import Err, Result

if TYPE_CHECKING:
    from polystr.buffer import ArrayUnitWriter, UnitWriter
    from polystr.encoding.cursor import Cursor, ReversibleCursor


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    """Where and why decoding failed.

    `length` is the number of units consumed by the failed step, `unit` is the first of them.
    """
    position: int
    length: int
    unit: int

    def to_exception(self) -> DecodeError:
        return DecodeError(
            f'cannot decode unit 0x{self.unit:x} at position {self.position}',
            position=self.position,
            unit=self.unit,
        )


DecodeResult: TypeAlias = Result[int, DecodeFailure]


class Codec(ABC):
    """Decode and encode rules for one encoding.

    A codec is stateless: every method takes the unit sequence it works on. Decoding never raises for malformed input,
    it returns `Err(DecodeFailure)` and the new position, which is always past the failing units.
    """

    encoding: ClassVar[Hashable]
    unit_width: ClassVar[int]
    multichar: ClassVar[bool]
    reversible: ClassVar[bool] = False
    replacement: ClassVar[int]

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self.name}>'

    @property
    def name(self) -> str:
        return getattr(self.encoding, 'name', str(self.encoding))

    @property
    def typecode(self) -> str:
        return UNIT_TYPECODES[self.unit_width]

    @abstractmethod
    def decode(self, units: Units, pos: int, end: Optional[int] = None) -> tuple[DecodeResult, int]:
        """Decode the codepoint starting at `pos`, return the result and the position right after it."""
        raise NotImplementedError

    @abstractmethod
    def encode(self, writer: UnitWriter, codepoint: int) -> bool:
        """Append the units for `codepoint` to `writer`, return False without writing when it can't be encoded."""
        raise NotImplementedError

    def advance(self, units: Units, pos: int, end: Optional[int] = None) -> int:
        _, pos = self.decode(units, pos, end)
        return pos

    def cursor(self, units: Units, pos: int = 0, end: Optional[int] = None, *, start: int = 0) -> Cursor:
        from polystr.encoding.cursor import Cursor
        return Cursor(self, units, pos, end, start=start)

    def new_writer(self) -> ArrayUnitWriter:
        from polystr.buffer import UnitWriter
        return UnitWriter.build_array_writer(self.typecode)

    def iter_decode(
        self,
        units: Units,
        start: int = 0,
        end: Optional[int] = None,
    ) -> Iterator[tuple[int, DecodeResult]]:
        """Yield `(position, result)` for every codepoint in `units[start:end]`."""
        if end is None:
            end = len(units)
        pos = start
        while pos < end:
            result, next_pos = self.decode(units, pos, end)
            yield pos, result
            pos = next_pos

    def length(self, units: Units, start: int = 0, end: Optional[int] = None) -> int:
        """Number of codepoints, counting each failed decode step as one."""
        if end is None:
            end = len(units)
        if not self.multichar:
            return max(end - start, 0)
        count = 0
        pos = start
        while pos < end:
            pos = self.advance(units, pos, end)
            count += 1
        return count

    def decode_strict(self, units: Units, pos: int, end: Optional[int] = None) -> tuple[int, int]:
        """Like decode but raise DecodeError on malformed input."""
        result, next_pos = self.decode(units, pos, end)
        if isinstance(result, Err):
            raise result.err().to_exception()
        return result.unwrap(), next_pos

    def encode_strict(self, writer: UnitWriter, codepoint: int) -> None:
        if not self.encode(writer, codepoint):
            raise EncodeError(
                f'cannot encode codepoint 0x{codepoint:x} as {self.name}',
                codepoint=codepoint,
                encoding=self.encoding,
            )

    def encode_all(self, codepoints: Iterable[int]) -> Units:
        """Encode a sequence of codepoints, raising EncodeError on the first failure."""
        writer = self.new_writer()
        for codepoint in codepoints:
            self.encode_strict(writer, codepoint)
        return writer.finalize()


class ReversibleCodec(Codec):
    """A codec whose codepoint boundaries can be found walking backwards."""

    reversible: ClassVar[bool] = True

    @abstractmethod
    def step_back(self, units: Units, pos: int, start: int = 0) -> int:
        """Return the position of the codepoint that ends at `pos`, never going before `start`."""
        raise NotImplementedError

    def cursor(self, units: Units, pos: int = 0, end: Optional[int] = None, *, start: int = 0) -> ReversibleCursor:
        from polystr.encoding.cursor import ReversibleCursor
        return ReversibleCursor(self, units, pos, end, start=start)


def require_reversible(codec: Codec, operation: str) -> ReversibleCodec:
    """Return the codec typed as reversible, or raise before any work is done."""
    if not isinstance(codec, ReversibleCodec):
        raise IrreversibleEncodingError(f'{operation} requires a reversible encoding, {codec.name} is not')
    return codec
