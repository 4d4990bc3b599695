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
Two-armed return values for decoders: an `Ok` carries the decoded value, an `Err` carries the failure.

>>> Ok(97).unwrap()
97
>>> Err('bad').ok() is None
True
"""

from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

from typing_extensions import Self

T = TypeVar('T', covariant=True)
E = TypeVar('E', covariant=True)
U = TypeVar('U')


class UnwrapError(Exception):
    """Raised when the wrong arm of a result is unwrapped."""

    def __init__(self, result: 'Result[Any, Any]', message: str) -> None:
        super().__init__(message)
        self.result = result


class _Arm(Generic[T]):
    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._value!r})'

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self._value == other._value  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))


class Ok(_Arm[T]):
    __slots__ = ()

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def ok(self) -> T:
        return self._value

    def err(self) -> None:
        return None

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, f'expected an error, got {self!r}')

    def unwrap_or(self, default: object) -> T:
        return self._value

    def map(self, f: Callable[[T], U]) -> 'Ok[U]':
        return Ok(f(self._value))

    def map_err(self, f: Callable[[Any], Any]) -> Self:
        return self


class Err(_Arm[E]):
    __slots__ = ()

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def ok(self) -> None:
        return None

    def err(self) -> E:
        return self._value

    def unwrap(self) -> NoReturn:
        error = UnwrapError(self, f'expected a value, got {self!r}')
        if isinstance(self._value, BaseException):
            raise error from self._value
        raise error

    def unwrap_err(self) -> E:
        return self._value

    def unwrap_or(self, default: U) -> U:
        return default

    def map(self, f: Callable[[Any], Any]) -> Self:
        return self

    def map_err(self, f: Callable[[E], U]) -> 'Err[U]':
        return Err(f(self._value))


Result = Union[Ok[T], Err[E]]
