"""Positional currying.

A curried function is a chain of closures over an accumulator of the
arguments received so far. Each call pushes onto the accumulator it closed
over and either calls the original function, once enough arguments have
arrived, or returns a new curried function closing over the longer
accumulator. Accumulators are persistent linked lists, so a curried function
can be called any number of times, with different arguments each time, and
every call starts from the same arguments."""

from typing import Any, Callable, Optional

from funcshape.arity import attach_arity, resolve_arity
from funcshape.errors import InvalidArityError, format_nonpositive_arity_error
from funcshape.linked_list import LinkedList, empty_list
from funcshape.logging import get_logger

_logger = get_logger(__name__)


def curry_strict(fn: Callable[..., Any], arity: Optional[int] = None):
    """Curry fn so that every call takes exactly one argument.

    >>> curry_strict(lambda a, b, c: a + b + c)(1)(2)(3)
    6
    """
    arity = _curried_arity(fn, arity)
    name = _name_of(fn)

    def next_curried(prev_args: LinkedList[Any]):
        def curried(next_arg: Any) -> Any:
            args = prev_args.push(next_arg)
            if len(args) >= arity:
                _logger.debug(
                    'calling {} with {} curried arguments', name, len(args)
                )
                return fn(*args.in_order())
            return next_curried(args)

        curried.__qualname__ = curried.__name__ = f'curried_{name}'
        return attach_arity(curried, 1)

    return next_curried(empty_list)


def curry_loose(fn: Callable[..., Any], arity: Optional[int] = None):
    """Curry fn so that every call takes one or more arguments.

    All the arguments can be given at once, and the last call may supply
    more than are needed; the surplus is passed on to fn too.

    >>> curry_loose(lambda a, b, c: a + b + c)(1, 2)(3)
    6
    """
    arity = _curried_arity(fn, arity)
    name = _name_of(fn)

    def next_curried(prev_args: LinkedList[Any]):
        def curried(next_arg: Any, *more_args: Any) -> Any:
            args = prev_args.push(next_arg).push_all(more_args)
            if len(args) >= arity:
                _logger.debug(
                    'calling {} with {} curried arguments', name, len(args)
                )
                return fn(*args.in_order())
            return next_curried(args)

        curried.__qualname__ = curried.__name__ = f'loosely_curried_{name}'
        return attach_arity(curried, 1)

    return next_curried(empty_list)


def uncurry(curried: Callable[[Any], Any]) -> Callable[..., Any]:
    """Turn a one-argument-per-call chain back into an ordinary function.

    Each argument is fed to the chain in turn. Too few arguments leave a
    function waiting for the rest."""

    def uncurried(*args: Any) -> Any:
        ret = curried
        for arg in args:
            ret = ret(arg)
        return ret

    return uncurried


def _curried_arity(fn: Callable[..., Any], arity: Optional[int]) -> int:
    arity = resolve_arity(fn, arity)
    if arity <= 0:
        raise InvalidArityError(format_nonpositive_arity_error(arity), arity)
    return arity


def _name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, '__name__', type(fn).__name__)
