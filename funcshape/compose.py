"""Function composition.

compose and pipe walk their list of functions on every call. compose_lazy
does the walking once, when it is built, and produces a single nested
closure whose first stage may take any arguments.
"""

import functools
from typing import Any, Callable, Sequence

from funcshape.adapters import identity


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """compose(f, g)(x) == f(g(x)); the last function runs first."""
    stages = _check_stages(fns)

    def composed(value: Any) -> Any:
        for fn in reversed(stages):
            value = fn(value)
        return value

    return composed


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """pipe(f, g)(x) == g(f(x)); the first function runs first."""
    stages = _check_stages(fns)

    def piped(value: Any) -> Any:
        for fn in stages:
            value = fn(value)
        return value

    return piped


def compose_lazy(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose right to left, folding the functions together right away.

    The result passes all of its arguments to the last function; every
    other function gets the single result of the one after it.
    """
    stages = _check_stages(fns)
    if not stages:
        return identity
    return functools.reduce(_compose_two, reversed(stages))


def _compose_two(
    inner: Callable[..., Any], outer: Callable[[Any], Any]
) -> Callable[..., Any]:
    def composed(*args: Any, **kwargs: Any) -> Any:
        return outer(inner(*args, **kwargs))

    return composed


def _check_stages(fns: Sequence[object]) -> tuple:
    for i, fn in enumerate(fns):
        if not callable(fn):
            raise TypeError(
                f'stage {i} of a composition must be callable, got {fn!r}'
            )
    return tuple(fns)
