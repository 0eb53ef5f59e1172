from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic
from typing import TypeVar

from . import op as _op


T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True)
class Option(Generic[T]):
    """A method based wrapper around an `Op[T]`.

    Every method defers to the function of the same purpose in
    `narigama_option.op`, so the two can be mixed freely.
    """

    # inner value of this option, never access it directly, instead using Option.get_value() or Option.get_value_or()
    _value: _op.Op[T] = None

    def __repr__(self) -> str:
        return self.match("Option::Some({})".format, lambda: "Option::None")

    @classmethod
    def if_(cls, cond: bool, make_value: Callable[[], T]) -> "Option[T]":
        """Build an Option that only holds `make_value()` when `cond` is true."""
        return cls(_op.op_if(cond, make_value))

    def has_value(self) -> bool:
        """Check if the Option contains a value or not."""
        return _op.is_present(self._value)

    def get_value(self, get_error: Callable[[], BaseException] | None = None) -> T:
        """Attempt to get value, raises AbsentValueError (or `get_error()`) if missing."""
        return _op.or_throw(self._value, get_error)

    def get_value_or(self, get_default: Callable[[], T]) -> T:
        """Attempt to get a value, or call `get_default` for one."""
        return _op.or_default(self._value, get_default)

    def map_value(self, fn: Callable[[T], U]) -> "Option[U]":
        """Map Option[T] to Option[U] via the provided callable.

        This is eagerly evaluated and immediately applies the mapping."""
        return self.__class__(_op.map_present(self._value, fn))

    def for_each(self, action: Callable[[T], object]) -> None:
        """Call `action` with the value, but only if there is one."""
        _op.for_each_present(self._value, action)

    def match(self, if_present: Callable[[T], R], if_absent: Callable[[], R]) -> R:
        """Return `if_present(value)` or `if_absent()` depending on whether there is a value."""
        return _op.match(self._value, if_present, if_absent)

    def to_op(self) -> _op.Op[T]:
        """Unwrap back into a plain `Op[T]`, None when there is no value."""
        return self._value
