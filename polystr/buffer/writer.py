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
from typing import TYPE_CHECKING, Iterable, Optional, final

if TYPE_CHECKING:
    from polystr.buffer.adapters import MaxUnitsWriter
    from polystr.buffer.array_writer import ArrayUnitWriter
    from polystr.encoding import Codec
    from polystr.types import Units


class UnitWriter(ABC):
    """Output buffer every producing algorithm writes into.

    Writers only know about units, the codec passed to `write_codepoint` decides how a codepoint becomes units.
    """

    def finalize(self) -> Units:
        """The units written so far, for writers that own their storage."""
        raise TypeError('this writer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_unit(self, unit: int) -> None:
        """Write a single unit."""
        raise NotImplementedError

    def write_units(self, data: Iterable[int]) -> None:
        # unit by unit, subclasses with a bulk path override this
        for unit in data:
            self.write_unit(unit)

    @final
    def write_codepoint(self, codec: Codec, codepoint: int) -> bool:
        """Encode and write a codepoint, returning False when the codec can't represent it."""
        return codec.encode(self, codepoint)

    @final
    def write_ascii(self, codec: Codec, text: str) -> None:
        """Write ASCII text, which every built-in codec can represent."""
        for char in text:
            codec.encode_strict(self, ord(char))

    def with_max_units(self, max_units: int) -> MaxUnitsWriter:
        """This writer, failing once more than `max_units` units are written."""
        from polystr.buffer.adapters import MaxUnitsWriter
        return MaxUnitsWriter(self, max_units)

    def with_optional_max_units(self, max_units: Optional[int]) -> UnitWriter:
        """Like with_max_units, None means no limit."""
        if max_units is None:
            return self
        return self.with_max_units(max_units)

    @staticmethod
    def build_array_writer(typecode: str) -> ArrayUnitWriter:
        from polystr.buffer.array_writer import ArrayUnitWriter
        return ArrayUnitWriter(typecode)
