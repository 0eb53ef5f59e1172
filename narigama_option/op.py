"""
Helpers for values that might be `None`.

An `Op[T]` is just `T | None`, so any existing value can be passed straight in
without wrapping it. Use `or_default`, `or_throw` or `match` to turn an `Op[T]`
back into a `T`.

    >>> filter_map([1, 2, 3, 4], lambda n: op_if(n % 2 == 0, lambda: n // 2))
    [1, 2]
"""
from collections.abc import Callable
from collections.abc import Iterable
from typing import Optional
from typing import TypeGuard
from typing import TypeVar

from loguru import logger

from .problem import AbsentValueError


T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

# None is the only absence marker, so Op[Op[T]] collapses into Op[T]
Op = Optional[T]


def is_present(op: Op[T]) -> TypeGuard[T]:
    """Check if `op` holds a value. Falsy values such as 0 or "" still count."""
    return op is not None


def match(op: Op[T], if_present: Callable[[T], R], if_absent: Callable[[], R]) -> R:
    """Return a different result depending on whether `op` is present.

    Exactly one of the callables is invoked. Every other helper in this module
    can be written in terms of this one.

        match(1, lambda n: n + 1, lambda: 0) ==> 2
        match(None, lambda n: n + 1, lambda: 0) ==> 0
    """
    if is_present(op):
        return if_present(op)
    return if_absent()


def or_default(op: Op[T], get_default: Callable[[], T]) -> T:
    """Convert an `Op[T]` to `T` by replacing `None` with a default.

    `get_default` is only called when `op` is absent.

        or_default(1, lambda: 2) ==> 1
        or_default(None, lambda: 2) ==> 2
    """
    return match(op, lambda value: value, get_default)


def or_throw(op: Op[T], get_error: Callable[[], BaseException] | None = None) -> T:
    """Convert an `Op[T]` to `T`, raising if it's absent.

    Without `get_error` an AbsentValueError is raised, otherwise whatever
    `get_error()` returns is raised as-is.

        or_throw(1) ==> 1
        or_throw(None) ==> raises AbsentValueError
        or_throw(None, lambda: KeyError("boo")) ==> raises KeyError
    """
    if is_present(op):
        return op

    error = AbsentValueError() if get_error is None else get_error()
    logger.debug("Op was absent, raising {}", error.__class__.__name__)
    raise error


def op_if(cond: bool, make_value: Callable[[], T]) -> Op[T]:
    """Create an Op that only has a value if `cond` is true.

        def op_half(n: int) -> Op[int]:
            return op_if(n % 2 == 0, lambda: n // 2)

        op_half(4) ==> 2
        op_half(3) ==> None
    """
    return make_value() if cond else None


def for_each_present(op: Op[T], action: Callable[[T], object]) -> None:
    """Perform `action` on `op`, but only when it's present."""
    match(op, action, lambda: None)


def map_present(op: Op[T], mapper: Callable[[T], U]) -> Op[U]:
    """Map an Op to another Op, doing nothing for `None`.

        map_present(None, lambda n: n + 1) ==> None
        map_present(1, lambda n: n + 1) ==> 2
    """
    return match(op, mapper, lambda: None)


def filter_map(items: Iterable[T], op_mapper: Callable[[T], Op[U]]) -> list[U]:
    """Map each item to an Op, then drop the absent ones. Order is kept."""
    out: list[U] = []
    for item in items:
        for_each_present(op_mapper(item), out.append)
    return out
