"""Working out how many positional arguments a function expects."""

import functools
import inspect
from typing import Callable, Optional, TypeVar

from funcshape.errors import (
    InvalidArityError,
    format_arity_type_error,
    format_negative_arity_error,
    format_uninspectable_error,
)

_F = TypeVar('_F', bound=Callable)

_ARITY_ATTRIBUTE = '__funcshape_arity__'

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def resolve_arity(fn: Callable, explicit: Optional[int] = None) -> int:
    """Return explicit if given, otherwise the declared arity of fn.

    The declared arity counts the leading positional parameters without a
    default value. It stops at the first defaulted parameter and at
    *args, so a variadic function has to be given an explicit arity."""
    if explicit is not None:
        return _check_arity(explicit)
    attached = getattr(fn, _ARITY_ATTRIBUTE, None)
    if attached is not None:
        return attached
    return _declared_arity(fn)


def with_arity(fn: _F, arity: int) -> _F:
    """Wrap fn so that resolve_arity reports arity for it."""
    arity = _check_arity(arity)

    @functools.wraps(fn)
    def with_declared_arity(*args, **kwargs):
        return fn(*args, **kwargs)

    setattr(with_declared_arity, _ARITY_ATTRIBUTE, arity)
    return with_declared_arity  # type: ignore


def _check_arity(arity: object) -> int:
    # bool is an int subclass, but True is not a sensible arity
    if isinstance(arity, bool) or not isinstance(arity, int):
        raise InvalidArityError(format_arity_type_error(arity), arity)
    if arity < 0:
        raise InvalidArityError(format_negative_arity_error(arity), arity)
    return arity


def _declared_arity(fn: Callable) -> int:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise InvalidArityError(format_uninspectable_error(fn)) from e
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind not in _POSITIONAL_KINDS:
            break
        if parameter.default is not inspect.Parameter.empty:
            break
        count += 1
    return count


def attach_arity(wrapper: _F, arity: int) -> _F:
    """Record arity on a wrapper this package created.

    functools.wraps copies the wrapped function's attributes and sets
    __wrapped__, which signature() follows, so wrappers that change the
    number of arguments have to say so explicitly."""
    setattr(wrapper, _ARITY_ATTRIBUTE, _check_arity(arity))
    return wrapper
