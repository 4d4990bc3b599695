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
Replacement, transliteration and tab expansion.

>>> from polystr.encoding import Encoding, get_codec
>>> codec = get_codec(Encoding.UTF8)
>>> enc = lambda text: codec.encode_all(map(ord, text))
>>> writer = codec.new_writer()
>>> replace(codec, writer, enc('aaa'), enc('a'), enc('abc'))
3
>>> bytes(writer.finalize())
b'abcabcabc'
>>> table = maketrans(codec, enc('abc'), enc('xyz'), enc('d'))
>>> writer = codec.new_writer()
>>> translate(codec, writer, enc('abcd'), table)
0
>>> bytes(writer.finalize())
b'xyz'
"""

from typing import Callable, Iterable, Mapping, Optional, TypeAlias, Union

from structlog import get_logger

from polystr.algorithm.common import CR, LF, SPACE, TAB, matches_at
from polystr.buffer import UnitWriter
from polystr.encoding import Codec, ErrorPolicy
from polystr.exception import EncodeError, TranslationTableError
from polystr.types import NO_LIMIT, Units
from polystr.utils.result import Err, Ok

logger = get_logger()

DELETE = -1


class Translation:
    """Codepoint to codepoint mapping, unmapped codepoints translate to themselves and DELETE drops them."""

    __slots__ = ('_table',)

    def __init__(self, table: Optional[Mapping[int, int]] = None) -> None:
        self._table: dict[int, int] = dict(table or {})

    @classmethod
    def from_codepoints(
        cls,
        from_: Iterable[int],
        to: Iterable[int],
        delete: Iterable[int] = (),
    ) -> 'Translation':
        from_, to = list(from_), list(to)
        if len(from_) != len(to):
            raise TranslationTableError('translation sources must have the same length')
        table = dict(zip(from_, to))
        for codepoint in delete:
            table[codepoint] = DELETE
        return cls(table)

    def __call__(self, codepoint: int) -> int:
        return self._table.get(codepoint, codepoint)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, codepoint: object) -> bool:
        return codepoint in self._table

    def __repr__(self) -> str:
        return f'Translation({self._table!r})'


TranslationLike: TypeAlias = Union[Translation, Mapping[int, Optional[int]], Callable[[int], int]]


def as_lookup(table: TranslationLike) -> Callable[[int], int]:
    """Accept a Translation, a plain mapping (None deletes) or any callable."""
    if isinstance(table, Translation):
        return table
    if isinstance(table, Mapping):
        mapping = table

        def lookup(codepoint: int) -> int:
            mapped = mapping.get(codepoint, codepoint)
            return DELETE if mapped is None else mapped
        return lookup
    return table


def maketrans(codec: Codec, from_: Units, to: Units, delete: Optional[Units] = None) -> Translation:
    """Build a translation from encoded sequences, mapping the i-th codepoint of `from_` to the i-th of `to`."""
    def codepoints(units: Units) -> list[int]:
        result = []
        pos = 0
        while pos < len(units):
            codepoint, pos = codec.decode_strict(units, pos)
            result.append(codepoint)
        return result

    return Translation.from_codepoints(codepoints(from_), codepoints(to), codepoints(delete or ()))


def replace(
    codec: Codec,
    writer: UnitWriter,
    units: Units,
    old: Units,
    new: Units,
    count: int = NO_LIMIT,
) -> int:
    """Write `units` with up to `count` occurrences of `old` replaced by `new`, return how many were replaced.

    A negative `count` means no limit. An empty `old` matches at every codepoint boundary.
    """
    size = len(units)
    old_size = len(old)
    replaced = 0
    copied = 0
    pos = 0

    if old_size == 0:
        while count < 0 or replaced < count:
            writer.write_units(units[copied:pos])
            writer.write_units(new)
            copied = pos
            replaced += 1
            if pos >= size:
                break
            pos = codec.advance(units, pos, size)
        writer.write_units(units[copied:])
        return replaced

    while pos + old_size <= size and (count < 0 or replaced < count):
        if matches_at(units, pos, old, size):
            writer.write_units(units[copied:pos])
            writer.write_units(new)
            pos += old_size
            copied = pos
            replaced += 1
        else:
            pos = codec.advance(units, pos, size)
    writer.write_units(units[copied:])
    return replaced


def translate(
    codec: Codec,
    writer: UnitWriter,
    units: Units,
    table: TranslationLike,
    errors: ErrorPolicy = ErrorPolicy.STRICT,
) -> int:
    """Write every codepoint of `units` mapped through `table`, return how many failures were replaced or dropped.

    Decode failures and encode failures of mapped codepoints are both handled by `errors`. Under REPLACE a decode
    failure is looked up in the table as the codec's replacement codepoint.
    """
    lookup = as_lookup(table)
    substituted = 0
    for _, result in codec.iter_decode(units):
        match result:
            case Ok(codepoint):
                pass
            case Err(failure):
                if errors is ErrorPolicy.STRICT:
                    raise failure.to_exception()
                substituted += 1
                if errors is ErrorPolicy.IGNORE:
                    continue
                codepoint = codec.replacement

        mapped = lookup(codepoint)
        if mapped < 0:
            continue
        if codec.encode(writer, mapped):
            continue
        if errors is ErrorPolicy.STRICT:
            raise EncodeError(
                f'cannot encode codepoint 0x{mapped:x} as {codec.name}',
                codepoint=mapped,
                encoding=codec.encoding,
            )
        substituted += 1
        if errors is ErrorPolicy.REPLACE:
            codec.encode_strict(writer, codec.replacement)

    if substituted:
        log = logger.new()
        log.debug('translate substituted invalid data', count=substituted, encoding=codec.name, errors=errors.value)
    return substituted


def expandtabs(codec: Codec, writer: UnitWriter, units: Units, tabsize: int) -> None:
    """Replace each tab with spaces up to the next multiple of `tabsize` columns, CR and LF reset the column."""
    size = len(units)
    column = 0
    pos = 0
    while pos < size:
        unit = units[pos]
        if unit == TAB:
            if tabsize > 0:
                writer.write_units([SPACE] * (tabsize - column))
            column = 0
            pos += 1
            continue

        next_pos = codec.advance(units, pos, size)
        writer.write_units(units[pos:next_pos])
        pos = next_pos
        if unit == CR or unit == LF:
            column = 0
        else:
            column += 1
            if column == tabsize:
                column = 0
