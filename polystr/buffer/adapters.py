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

from typing import Iterable

from typing_extensions import override

from polystr.buffer.writer import UnitWriter
from polystr.exception import OutputTooLongError
from polystr.types import Units


class MaxUnitsWriter(UnitWriter):
    """Adapter that fails once the wrapped writer would grow past `max_units` units from where it started."""

    def __init__(self, writer: UnitWriter, max_units: int) -> None:
        self._writer = writer
        self._max_units = max_units
        self._start = writer.cur_pos()

    def _check(self, extra: int) -> None:
        if self.cur_pos() - self._start + extra > self._max_units:
            raise OutputTooLongError(f'output exceeds {self._max_units} units')

    @override
    def finalize(self) -> Units:
        return self._writer.finalize()

    @override
    def cur_pos(self) -> int:
        return self._writer.cur_pos()

    @override
    def write_unit(self, unit: int) -> None:
        self._check(1)
        self._writer.write_unit(unit)

    @override
    def write_units(self, data: Iterable[int]) -> None:
        data = list(data)
        self._check(len(data))
        self._writer.write_units(data)
