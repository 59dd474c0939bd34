"""Named-argument ("property bag") currying and partial application.

A bag is a mapping from parameter names to values. Bag-based functions are
called with the bag as keyword arguments, so the order in which the values
were supplied never matters. spread_arg_props and gather_arg_props bridge
between bags and functions that only take positional arguments, lining the
two up with an explicit parameter order.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from funcshape.arity import resolve_arity
from funcshape.descriptor import Descriptor, parse_parameter_order
from funcshape.errors import (
    InvalidArityError,
    MissingKeyError,
    MultipleKeysError,
    format_nonpositive_arity_error,
)
from funcshape.logging import get_logger

_logger = get_logger(__name__)

_MISSING_KEY_POLICIES = ('raise', 'warn')


def partial_props(
    fn: Callable[..., Any], present_bag: Mapping[str, Any]
) -> Callable[..., Any]:
    """Bind some named arguments now; later ones win on conflict."""
    present_bag = dict(present_bag)

    def partially_applied(**later_bag: Any) -> Any:
        return fn(**{**present_bag, **later_bag})

    return partially_applied


def curry_props(fn: Callable[..., Any], arity: Optional[int] = None):
    """Curry fn over named arguments, one keyword argument per call.

    fn is called once arity distinct names have been supplied, in whatever
    order. Supplying a name again replaces its value without counting
    towards the arity.

    >>> f = curry_props(lambda x, y, z: f'{x}-{y}-{z}', 3)
    >>> f(y=2)(x=1)(z=3)
    '1-2-3'
    """
    arity = resolve_arity(fn, arity)
    if arity <= 0:
        raise InvalidArityError(format_nonpositive_arity_error(arity), arity)

    def next_curried(prev_bag: Mapping[str, Any]):
        def curried(**next_bag: Any) -> Any:
            if len(next_bag) > 1:
                raise MultipleKeysError(next_bag.keys())
            if not next_bag:
                raise TypeError(
                    'a named-argument curried function takes exactly one '
                    'keyword argument per call, got none'
                )
            all_bag = {**prev_bag, **next_bag}
            if len(all_bag) >= arity:
                _logger.debug(
                    'calling {} with curried names {}',
                    getattr(fn, '__name__', fn),
                    sorted(all_bag),
                )
                return fn(**all_bag)
            return next_curried(all_bag)

        return curried

    return next_curried({})


def spread_arg_props(
    fn: Callable[..., Any],
    parameter_order: Descriptor,
    *,
    on_missing: str = 'raise',
) -> Callable[..., Any]:
    """Let a positional-only function be called with a bag of names.

    parameter_order names fn's parameters in order; see
    funcshape.descriptor. Names in the bag that are not in the order are
    ignored. A name in the order that is missing from the bag raises
    MissingKeyError, unless on_missing is 'warn', in which case a warning is
    logged and None is passed in its place.
    """
    if on_missing not in _MISSING_KEY_POLICIES:
        raise ValueError(
            f'on_missing must be one of {", ".join(_MISSING_KEY_POLICIES)}, '
            f'got {on_missing!r}'
        )
    order = parse_parameter_order(parameter_order)

    def spread(**bag: Any) -> Any:
        args = []
        for key in order:
            if key in bag:
                args.append(bag[key])
            elif on_missing == 'raise':
                raise MissingKeyError(key, bag.keys())
            else:
                _logger.warning(
                    'parameter {!r} of {} missing from argument bag, '
                    'passing None',
                    key,
                    getattr(fn, '__name__', fn),
                )
                args.append(None)
        return fn(*args)

    return spread


def gather_arg_props(
    fn: Callable[..., Any], parameter_order: Descriptor
) -> Callable[..., Any]:
    """Let a bag-based function be called with positional arguments.

    Each positional argument is named by the corresponding entry of
    parameter_order. Giving fewer arguments than names leaves the remaining
    names out of the bag.
    """
    order = parse_parameter_order(parameter_order)

    def gathered(*args: Any) -> Any:
        if len(args) > len(order):
            raise TypeError(
                f'expected at most {len(order)} positional arguments '
                f'({", ".join(order)}), got {len(args)}'
            )
        bag: Dict[str, Any] = dict(zip(order, args))
        return fn(**bag)

    return gathered
