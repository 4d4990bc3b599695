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
`PolyStr` is an immutable string value that knows its encoding.

Every method works on the encoded units directly. Positions (`find`, slicing, `len`) are unit offsets, widths and
lengths (`center`, `truncate`, `length`) are codepoint counts. Arguments can be `PolyStr` values in any encoding or
plain Python `str`, they are converted to the receiver's encoding first, failing with EncodeError when they can't be
represented.

>>> s = PolyStr('✏✏✏😀😀😀')
>>> len(s), s.length(), s.find('😀😀😀')
(21, 6, 9)
>>> s.center(8, '-') == '-✏✏✏😀😀😀-'
True
>>> PolyStr('{:😀^+06}').format(42) == '😀+42😀😀'
True
>>> str(to_ascii('😀'))
'"\\\\U0001f600"'
"""

from __future__ import annotations

import sys
from array import array
from typing import Any, Callable, Hashable, Iterable, Iterator, Literal, Optional, Union

from polystr.algorithm import align, classify, quote as quoting, replace as replacing, search, split as splitting, trim
from polystr.algorithm.classify import Classifier
from polystr.algorithm.replace import Translation, TranslationLike
from polystr.algorithm.transcode import transcode
from polystr.buffer import UnitWriter
from polystr.conf import get_global_settings
from polystr.encoding import Codec, Encoding, ErrorPolicy, get_codec
from polystr.types import NO_LIMIT, Units
from polystr.utils.result import Err, Ok

TextLike = Union['PolyStr', str]
EncodingLike = Union[Hashable, Codec]
Affixes = tuple[TextLike, ...]

_UTF32 = get_codec(Encoding.UTF32)


def _default_codec() -> Codec:
    return get_codec(get_global_settings().DEFAULT_ENCODING)


class PolyStr:
    __slots__ = ('_codec', '_units')

    _codec: Codec
    _units: array[int]

    def __init__(
        self,
        text: TextLike = '',
        encoding: Optional[EncodingLike] = None,
        errors: ErrorPolicy = ErrorPolicy.STRICT,
    ) -> None:
        codec = get_codec(encoding) if encoding is not None else _default_codec()
        writer = codec.new_writer()
        if isinstance(text, PolyStr):
            transcode(text._codec, codec, writer, text._units, errors)
        elif isinstance(text, str):
            transcode(_UTF32, codec, writer, [ord(char) for char in text], errors)
        else:
            raise TypeError(f'expected str or PolyStr, got {type(text).__name__}')
        self._codec = codec
        self._units = writer.finalize()

    @classmethod
    def _wrap(cls, codec: Codec, units: Units) -> PolyStr:
        obj = cls.__new__(cls)
        obj._codec = codec
        obj._units = units if isinstance(units, array) and units.typecode == codec.typecode else array(
            codec.typecode, units)
        return obj

    @classmethod
    def from_units(cls, units: Iterable[int], encoding: EncodingLike) -> PolyStr:
        """Wrap raw units without validating them, malformed data is kept as it is."""
        codec = get_codec(encoding)
        return cls._wrap(codec, array(codec.typecode, units))

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        encoding: EncodingLike,
        byteorder: Literal['little', 'big'] = sys.byteorder,
    ) -> PolyStr:
        codec = get_codec(encoding)
        if len(data) % codec.unit_width:
            raise ValueError(f'data length is not a multiple of {codec.unit_width}')
        units = array(codec.typecode)
        units.frombytes(data)
        if byteorder != sys.byteorder and codec.unit_width > 1:
            units.byteswap()
        return cls._wrap(codec, units)

    def to_bytes(self, byteorder: Literal['little', 'big'] = sys.byteorder) -> bytes:
        units = self._units
        if byteorder != sys.byteorder and self._codec.unit_width > 1:
            units = array(units.typecode, units)
            units.byteswap()
        return units.tobytes()

    @property
    def codec(self) -> Codec:
        return self._codec

    @property
    def encoding(self) -> Hashable:
        return self._codec.encoding

    @property
    def units(self) -> memoryview:
        return memoryview(self._units).toreadonly()

    def _new(self, units: Units) -> PolyStr:
        return self._wrap(self._codec, units)

    def _build(self, write: Callable[[UnitWriter], Any]) -> PolyStr:
        writer = self._codec.new_writer()
        write(writer)
        return self._new(writer.finalize())

    def _coerce(self, other: TextLike) -> Units:
        if isinstance(other, PolyStr):
            if other._codec.encoding == self._codec.encoding:
                return other._units
            return PolyStr(other, self._codec)._units
        if isinstance(other, str):
            return PolyStr(other, self._codec)._units
        raise TypeError(f'expected str or PolyStr, got {type(other).__name__}')

    def _coerce_optional(self, other: Optional[TextLike]) -> Optional[Units]:
        return None if other is None else self._coerce(other)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._units)

    def __getitem__(self, key: Union[int, slice]) -> Any:
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError('slices of encoded strings must be contiguous')
            return self._new(self._units[key])
        return self._units[key]

    def __contains__(self, sub: TextLike) -> bool:
        return self.find(sub) != -1

    def __add__(self, other: TextLike) -> PolyStr:
        if not isinstance(other, (PolyStr, str)):
            return NotImplemented
        return self._new(self._units + array(self._units.typecode, self._coerce(other)))

    def __radd__(self, other: str) -> PolyStr:
        if not isinstance(other, str):
            return NotImplemented
        return PolyStr(other, self._codec) + self

    def __mul__(self, count: int) -> PolyStr:
        return self._new(self._units * max(count, 0))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PolyStr):
            if other._codec.encoding == self._codec.encoding:
                return self._units == other._units
            text = self._valid_text()
            return text is not None and text == other._valid_text()
        if isinstance(other, str):
            writer = self._codec.new_writer()
            for char in other:
                if not self._codec.encode(writer, ord(char)):
                    return False
            return self._units == writer.finalize()
        return NotImplemented

    def __hash__(self) -> int:
        text = self._valid_text()
        if text is None:
            return hash((self._codec.encoding, self._units.tobytes()))
        return hash(text)

    def _valid_text(self) -> Optional[str]:
        """The decoded text, None when any unit sequence is malformed."""
        chars = []
        for _, result in self._codec.iter_decode(self._units):
            if isinstance(result, Err):
                return None
            chars.append(chr(result.unwrap()))
        return ''.join(chars)

    def __str__(self) -> str:
        writer = _UTF32.new_writer()
        transcode(self._codec, _UTF32, writer, self._units, ErrorPolicy.REPLACE)
        return ''.join(map(chr, writer.finalize()))

    def __repr__(self) -> str:
        return f'PolyStr({str(self)!r}, {self._codec.name})'

    def length(self) -> int:
        """Number of codepoints."""
        return self._codec.length(self._units)

    def codepoints(self, errors: ErrorPolicy = ErrorPolicy.STRICT) -> Iterator[int]:
        for _, result in self._codec.iter_decode(self._units):
            match result:
                case Ok(codepoint):
                    yield codepoint
                case Err(failure):
                    if errors is ErrorPolicy.STRICT:
                        raise failure.to_exception()
                    if errors is ErrorPolicy.REPLACE:
                        yield self._codec.replacement

    # Searching

    def find(self, sub: TextLike, start: int = 0, end: Optional[int] = None) -> int:
        return search.find(self._codec, self._units, self._coerce(sub), start, end)

    def rfind(self, sub: TextLike, start: int = 0, end: Optional[int] = None) -> int:
        return search.rfind(self._codec, self._units, self._coerce(sub), start, end)

    def index(self, sub: TextLike, start: int = 0, end: Optional[int] = None) -> int:
        return search.index(self._codec, self._units, self._coerce(sub), start, end)

    def rindex(self, sub: TextLike, start: int = 0, end: Optional[int] = None) -> int:
        return search.rindex(self._codec, self._units, self._coerce(sub), start, end)

    def count(self, sub: TextLike, start: int = 0, end: Optional[int] = None) -> int:
        return search.count(self._codec, self._units, self._coerce(sub), start, end)

    def startswith(self, prefix: Union[TextLike, Affixes], start: int = 0, end: Optional[int] = None) -> bool:
        prefixes = prefix if isinstance(prefix, tuple) else (prefix,)
        return any(search.startswith(self._units, self._coerce(p), start, end) for p in prefixes)

    def endswith(self, suffix: Union[TextLike, Affixes], start: int = 0, end: Optional[int] = None) -> bool:
        suffixes = suffix if isinstance(suffix, tuple) else (suffix,)
        return any(search.endswith(self._units, self._coerce(s), start, end) for s in suffixes)

    # Replacing

    def replace(self, old: TextLike, new: TextLike, count: int = NO_LIMIT) -> PolyStr:
        old_units, new_units = self._coerce(old), self._coerce(new)
        return self._build(lambda w: replacing.replace(self._codec, w, self._units, old_units, new_units, count))

    @staticmethod
    def maketrans(from_: TextLike, to: TextLike, delete: Optional[TextLike] = None) -> Translation:
        """Translation mapping the i-th character of `from_` to the i-th character of `to`."""
        def units(text: TextLike) -> Units:
            return PolyStr(text, _UTF32)._units

        return replacing.maketrans(_UTF32, units(from_), units(to), None if delete is None else units(delete))

    def translate(self, table: TranslationLike, errors: Optional[ErrorPolicy] = None) -> PolyStr:
        if errors is None:
            errors = get_global_settings().TRANSLATE_ERRORS
        return self._build(lambda w: replacing.translate(self._codec, w, self._units, table, errors))

    def expandtabs(self, tabsize: Optional[int] = None) -> PolyStr:
        if tabsize is None:
            tabsize = get_global_settings().TABSIZE
        return self._build(lambda w: replacing.expandtabs(self._codec, w, self._units, tabsize))

    def upper(self) -> PolyStr:
        """ASCII only upper case mapping."""
        return self.translate(classify.ASCII_UPPER)

    def lower(self) -> PolyStr:
        """ASCII only lower case mapping."""
        return self.translate(classify.ASCII_LOWER)

    def swapcase(self) -> PolyStr:
        """ASCII only case swap."""
        return self.translate(classify.ASCII_SWAPCASE)

    # Splitting

    def split(self, sep: Union[TextLike, int, None] = None, maxsplit: int = NO_LIMIT) -> list[PolyStr]:
        """Split on `sep`, or on whitespace runs when it is None. An int in place of `sep` is taken as `maxsplit`."""
        if isinstance(sep, int):
            sep, maxsplit = None, sep
        if sep is None:
            parts = splitting.split_whitespace(self._codec, self._units, maxsplit)
        else:
            parts = splitting.split_separator(self._codec, self._units, self._coerce(sep), maxsplit)
        return [self._new(part) for part in parts]

    def rsplit(self, sep: Union[TextLike, int, None] = None, maxsplit: int = NO_LIMIT) -> list[PolyStr]:
        if isinstance(sep, int):
            sep, maxsplit = None, sep
        if sep is None:
            parts = splitting.rsplit_whitespace(self._codec, self._units, maxsplit)
        else:
            parts = splitting.rsplit_separator(self._codec, self._units, self._coerce(sep), maxsplit)
        return [self._new(part) for part in parts]

    def splitlines(self, keepends: bool = False) -> list[PolyStr]:
        return [self._new(line) for line in splitting.splitlines(self._codec, self._units, keepends)]

    def partition(self, sep: TextLike) -> tuple[PolyStr, PolyStr, PolyStr]:
        head, found, tail = splitting.partition(self._codec, self._units, self._coerce(sep))
        return self._new(head), self._new(found), self._new(tail)

    def rpartition(self, sep: TextLike) -> tuple[PolyStr, PolyStr, PolyStr]:
        head, found, tail = splitting.rpartition(self._codec, self._units, self._coerce(sep))
        return self._new(head), self._new(found), self._new(tail)

    def join(self, items: Iterable[TextLike]) -> PolyStr:
        parts = [self._coerce(item) for item in items]
        return self._build(lambda w: splitting.join(w, self._units, parts))

    # Padding

    def center(self, width: int, fill: Optional[TextLike] = None) -> PolyStr:
        fill_units = self._coerce_optional(fill)
        return self._build(lambda w: align.center(self._codec, w, self._units, width, fill_units))

    def ljust(self, width: int, fill: Optional[TextLike] = None) -> PolyStr:
        fill_units = self._coerce_optional(fill)
        return self._build(lambda w: align.ljust(self._codec, w, self._units, width, fill_units))

    def rjust(self, width: int, fill: Optional[TextLike] = None) -> PolyStr:
        fill_units = self._coerce_optional(fill)
        return self._build(lambda w: align.rjust(self._codec, w, self._units, width, fill_units))

    def zfill(self, width: int) -> PolyStr:
        return self._build(lambda w: align.zfill(self._codec, w, self._units, width))

    def truncate(self, width: int) -> PolyStr:
        return self._new(align.truncate(self._codec, self._units, width))

    # Trimming

    def strip(self, chars: Optional[TextLike] = None) -> PolyStr:
        return self._new(trim.strip(self._codec, self._units, self._coerce_optional(chars)))

    def lstrip(self, chars: Optional[TextLike] = None) -> PolyStr:
        return self._new(trim.lstrip(self._codec, self._units, self._coerce_optional(chars)))

    def rstrip(self, chars: Optional[TextLike] = None) -> PolyStr:
        return self._new(trim.rstrip(self._codec, self._units, self._coerce_optional(chars)))

    def removeprefix(self, prefix: TextLike) -> PolyStr:
        return self._new(trim.removeprefix(self._units, self._coerce(prefix)))

    def removesuffix(self, suffix: TextLike) -> PolyStr:
        return self._new(trim.removesuffix(self._units, self._coerce(suffix)))

    # Predicates

    def isascii(self) -> bool:
        return classify.isascii(self._codec, self._units)

    def isspace(self, classifier: Optional[Classifier] = None) -> bool:
        return classify.isspace(self._codec, self._units, classifier)

    def isalpha(self, classifier: Optional[Classifier] = None) -> bool:
        return classify.isalpha(self._codec, self._units, classifier)

    def isalnum(self, classifier: Optional[Classifier] = None) -> bool:
        return classify.isalnum(self._codec, self._units, classifier)

    def isdigit(self, classifier: Optional[Classifier] = None) -> bool:
        return classify.isdigit(self._codec, self._units, classifier)

    def isidentifier(self, classifier: Optional[Classifier] = None) -> bool:
        return classify.isidentifier(self._codec, self._units, classifier)

    def isprintable(self, classifier: Optional[Classifier] = None) -> bool:
        return classify.isprintable(self._codec, self._units, classifier)

    # Conversion

    def transcode(self, encoding: EncodingLike, errors: Optional[ErrorPolicy] = None) -> PolyStr:
        if errors is None:
            errors = get_global_settings().TRANSCODE_ERRORS
        codec = get_codec(encoding)
        writer = codec.new_writer()
        transcode(self._codec, codec, writer, self._units, errors)
        return self._wrap(codec, writer.finalize())

    def decode(self, errors: Optional[ErrorPolicy] = None) -> PolyStr:
        """Transcode to the default encoding."""
        return self.transcode(_default_codec(), errors)

    def quote(self, ascii_only: bool = False) -> PolyStr:
        return self._build(lambda w: quoting.quote(self._codec, self._codec, w, self._units, ascii_only=ascii_only))

    def format(self, *args: Any, renderers: Optional[Any] = None) -> PolyStr:
        from polystr.format.engine import format_units
        return self._new(format_units(self._codec, self._units, args, renderers=renderers))


def _render(conversion: str, value: Any, encoding: Optional[EncodingLike], renderers: Optional[Any]) -> PolyStr:
    from polystr.format.render import default_renderer_table
    codec = get_codec(encoding) if encoding is not None else _default_codec()
    renderer = (renderers or default_renderer_table()).lookup(value)
    return PolyStr._wrap(codec, renderer.to_units(codec, value, conversion))


def to_str(value: Any, encoding: Optional[EncodingLike] = None, *, renderers: Optional[Any] = None) -> PolyStr:
    """Human readable text of `value`, strings are converted with the REPLACE policy."""
    return _render('s', value, encoding, renderers)


def to_repr(value: Any, encoding: Optional[EncodingLike] = None, *, renderers: Optional[Any] = None) -> PolyStr:
    """Like to_str but strings are quoted and escaped."""
    return _render('r', value, encoding, renderers)


def to_ascii(value: Any, encoding: Optional[EncodingLike] = None, *, renderers: Optional[Any] = None) -> PolyStr:
    """Like to_repr but everything outside ASCII is escaped too."""
    return _render('a', value, encoding, renderers)


def format_str(
    template: TextLike,
    *args: Any,
    encoding: Optional[EncodingLike] = None,
    renderers: Optional[Any] = None,
) -> PolyStr:
    """Format `template` converted to `encoding`, or kept in its own encoding when it is a PolyStr."""
    if not isinstance(template, PolyStr) or encoding is not None:
        template = PolyStr(template, encoding)
    return template.format(*args, renderers=renderers)
