"""Combinators for reshaping the arity, order and shape of function arguments.

The submodules are meant to be imported directly:

    from funcshape.curry import curry_strict
    from funcshape.compose import pipe
"""

version = '0.1.0'
