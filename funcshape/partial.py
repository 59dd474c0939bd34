"""Positional partial application from either end."""

from typing import Any, Callable

from funcshape.adapters import reverse_args


def partial(fn: Callable[..., Any], *present_args: Any) -> Callable[..., Any]:
    """Bind present_args as the leading arguments of fn.

    Keyword arguments given later are passed through to fn.
    """

    def partially_applied(*later_args: Any, **kwargs: Any) -> Any:
        return fn(*present_args, *later_args, **kwargs)

    return partially_applied


def partial_right(
    fn: Callable[..., Any], *present_args: Any
) -> Callable[..., Any]:
    """Bind present_args as the trailing arguments of fn.

    The bound values are only guaranteed to be the last arguments of the
    call, not to land on particular parameters: if more later arguments are
    given than there are parameters left, the bound values shift right.
    """
    return reverse_args(partial(reverse_args(fn), *reversed(present_args)))
