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

from array import array
from typing import Iterable

from typing_extensions import override

from polystr.buffer.writer import UnitWriter


class ArrayUnitWriter(UnitWriter):
    """Simple implementation of UnitWriter to write to memory.

    Units are stored in an `array.array` of the codec's unit width, so out of range units are rejected on write.
    """

    def __init__(self, typecode: str) -> None:
        self._units: array[int] = array(typecode)

    def finalize(self) -> array[int]:
        """Get the resulting unit sequence, the writer must not be used afterwards."""
        return self._units

    @override
    def cur_pos(self) -> int:
        return len(self._units)

    @override
    def write_unit(self, unit: int) -> None:
        self._units.append(unit)

    @override
    def write_units(self, data: Iterable[int]) -> None:
        self._units.extend(data)

    def resize(self, size: int) -> None:
        """Truncate to `size` units, or grow with zero units."""
        if size < 0:
            raise ValueError('size must not be negative')
        current = len(self._units)
        if size < current:
            del self._units[size:]
        else:
            self._units.extend([0] * (size - current))

    def set_unit(self, index: int, unit: int) -> None:
        self._units[index] = unit
