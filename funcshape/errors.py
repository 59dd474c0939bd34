from __future__ import annotations
import builtins
from typing import AbstractSet, Optional


class CombinatorError(Exception):
    """Base class of the errors raised by the combinators themselves.

    Errors raised by a wrapped function are never converted into one of
    these."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidArityError(CombinatorError, builtins.ValueError):
    def __init__(self, message: str, arity: object = None) -> None:
        super().__init__(message)
        self.arity = arity

    def __repr__(self) -> str:
        return f'InvalidArityError({self.message!r}, arity={self.arity!r})'


ArityError = InvalidArityError


class MultipleKeysError(CombinatorError, builtins.TypeError):
    def __init__(self, keys: AbstractSet[str]) -> None:
        super().__init__(format_multiple_keys_error(keys))
        self.keys = frozenset(keys)


class MissingKeyError(CombinatorError, builtins.KeyError):
    def __init__(
        self, key: str, available: Optional[AbstractSet[str]] = None
    ) -> None:
        super().__init__(format_missing_key_error(key, available))
        self.key = key
        self.available = frozenset(available or ())


class InvalidDescriptorError(CombinatorError, builtins.ValueError):
    pass


def format_arity_type_error(arity: object) -> str:
    return f'arity must be an int, got {arity!r} ({type(arity).__name__})'


def format_negative_arity_error(arity: int) -> str:
    return f'arity must be non-negative, got {arity}'


def format_nonpositive_arity_error(arity: int) -> str:
    return f'a curried function needs an arity of at least 1, got {arity}'


def format_uninspectable_error(fn: object) -> str:
    return (
        f'cannot determine the arity of {fn!r} from its signature; '
        'pass an explicit arity'
    )


def format_multiple_keys_error(keys: AbstractSet[str]) -> str:
    return (
        'a named-argument curried function takes exactly one key per call, '
        f'got {len(keys)}: {", ".join(sorted(keys))}'
    )


def format_missing_key_error(
    key: str, available: Optional[AbstractSet[str]]
) -> str:
    message = f'parameter {key!r} is missing from the argument bag'
    if available:
        message += f' (got {", ".join(sorted(available))})'
    return message


def format_not_an_identifier_error(name: object) -> str:
    return f'{name!r} is not usable as a parameter name'


def format_duplicate_name_error(name: str) -> str:
    return f'parameter {name!r} appears more than once in the order'


def format_unparsable_descriptor_error(descriptor: str, expected: str) -> str:
    return f'cannot read parameter order from {descriptor!r}: expected {expected}'
