"""Adapters that change the shape of a function's arguments.

None of them look at the wrapped function until the adapted function is
called, and none of them catch what the wrapped function raises."""

import functools
from typing import Any, Callable, Iterable, Tuple, TypeVar

from funcshape.arity import attach_arity

_T = TypeVar('_T')
_R = TypeVar('_R')


def identity(value: _T) -> _T:
    """v -- v"""
    return value


def constant(value: _T) -> Callable[..., _T]:
    """v -- (... -- v)"""

    def constantly(*args: object, **kwargs: object) -> _T:
        return value

    return attach_arity(constantly, 0)


def unary(fn: Callable[[_T], _R]) -> Callable[..., _R]:
    """Only let the first argument through.

    Handy for callbacks of iteration helpers that pass extra arguments, like
    an index, that fn would misread."""

    @functools.wraps(fn)
    def one_argument(arg: _T, *ignored_args: object, **ignored: object) -> _R:
        return fn(arg)

    return attach_arity(one_argument, 1)


def reverse_args(fn: Callable[..., _R]) -> Callable[..., _R]:
    """Reverse the positional arguments of each call before passing them on.

    Keyword arguments are passed through as they are."""

    @functools.wraps(fn)
    def reversed_arguments(*args: Any, **kwargs: Any) -> _R:
        return fn(*reversed(args), **kwargs)

    return reversed_arguments


def spread_args(fn: Callable[..., _R]) -> Callable[[Iterable[Any]], _R]:
    """fn(a, b, c) becomes a function of one sequence [a, b, c]."""

    def spread(args: Iterable[Any]) -> _R:
        return fn(*args)

    return attach_arity(spread, 1)


def gather_args(fn: Callable[[Tuple[Any, ...]], _R]) -> Callable[..., _R]:
    """fn([a, b, c]) becomes a function of positional arguments a, b, c.

    functools.reduce(gather_args(f), xs) lets f see each pair as one tuple.
    """

    def gathered(*args: Any) -> _R:
        return fn(args)

    return attach_arity(gathered, 0)


def complement(predicate: Callable[..., object]) -> Callable[..., bool]:
    @functools.wraps(predicate)
    def negated(*args: Any, **kwargs: Any) -> bool:
        return not predicate(*args, **kwargs)

    return negated


def when(
    predicate: Callable[..., object], fn: Callable[..., _R]
) -> Callable[..., Any]:
    """Call fn with the arguments only when predicate accepts them.

    Returns None when the predicate rejects the arguments."""

    @functools.wraps(fn)
    def conditional(*args: Any, **kwargs: Any) -> Any:
        if predicate(*args, **kwargs):
            return fn(*args, **kwargs)
        return None

    return conditional
