from funcshape.errors import (
    InvalidArityError,
    InvalidDescriptorError,
    MissingKeyError,
    MultipleKeysError,
)
from funcshape.props import (
    curry_props,
    gather_arg_props,
    partial_props,
    spread_arg_props,
)
from hypothesis import given
import hypothesis.strategies as st
import logging
from typing import List
import unittest


def describe(x=None, y=None, z=None):
    return f'{x}-{y}-{z}'


def positional(x, y, z, /):
    return f'x: {x}, y: {y}, z: {z}'


class TestPartialProps(unittest.TestCase):
    def test_order_irrelevant(self) -> None:
        self.assertEqual('1-2-3', partial_props(describe, {'y': 2})(z=3, x=1))

    def test_later_keys_win(self) -> None:
        f = partial_props(describe, {'x': 1, 'y': 2})
        self.assertEqual('1-20-None', f(y=20))

    def test_bound_bag_copied(self) -> None:
        bag = {'x': 1}
        f = partial_props(describe, bag)
        bag['x'] = 100
        self.assertEqual('1-None-None', f())

    def test_reusable(self) -> None:
        f = partial_props(describe, {'y': 2})
        self.assertEqual('1-2-None', f(x=1))
        self.assertEqual('None-2-3', f(z=3))


class TestCurryProps(unittest.TestCase):
    def test_any_order(self) -> None:
        f = curry_props(lambda x, y, z: f'{x}-{y}-{z}', 3)
        self.assertEqual('1-2-3', f(y=2)(x=1)(z=3))

    @given(st.permutations(['x', 'y', 'z']))
    def test_every_order(self, order: List[str]) -> None:
        f = curry_props(describe, 3)
        values = {'x': 1, 'y': 2, 'z': 3}
        for key in order:
            f = f(**{key: values[key]})
        self.assertEqual('1-2-3', f)

    def test_inferred_arity(self) -> None:
        self.assertEqual(
            '1-2-3', curry_props(lambda x, y, z: f'{x}-{y}-{z}')(z=3)(x=1)(y=2)
        )

    def test_multiple_keys(self) -> None:
        f = curry_props(describe, 3)
        with self.assertRaises(MultipleKeysError) as cm:
            f(x=1, y=2)
        self.assertEqual(frozenset({'x', 'y'}), cm.exception.keys)

    def test_no_keys(self) -> None:
        with self.assertRaises(TypeError):
            curry_props(describe, 3)()

    def test_repeated_key_replaces(self) -> None:
        f = curry_props(describe, 2)(x=1)(x=5)
        self.assertEqual('5-2-None', f(y=2))

    def test_branches_are_independent(self) -> None:
        start = curry_props(describe, 2)(x=1)
        self.assertEqual('1-2-None', start(y=2))
        self.assertEqual('1-None-3', start(z=3))

    def test_nonpositive_arity(self) -> None:
        with self.assertRaises(InvalidArityError):
            curry_props(describe)
        with self.assertRaises(InvalidArityError):
            curry_props(describe, 0)


class TestSpreadArgProps(unittest.TestCase):
    def test_positional_only_function(self) -> None:
        f = spread_arg_props(positional, ['x', 'y', 'z'])
        self.assertEqual('x: 1, y: 2, z: 3', f(z=3, x=1, y=2))

    def test_string_descriptor(self) -> None:
        f = spread_arg_props(positional, 'x, y, z')
        self.assertEqual('x: 1, y: 2, z: 3', f(y=2, z=3, x=1))

    def test_with_curry_props(self) -> None:
        f = curry_props(spread_arg_props(positional, 'x y z'), 3)
        self.assertEqual('x: 1, y: 3, z: 3', f(y=3)(x=1)(z=3))

    def test_with_partial_props(self) -> None:
        f = partial_props(spread_arg_props(positional, 'x y z'), {'y': 2})
        self.assertEqual('x: 1, y: 2, z: 3', f(z=3, x=1))

    def test_extra_keys_ignored(self) -> None:
        f = spread_arg_props(lambda a, /: a, 'a')
        self.assertEqual(1, f(a=1, b=2))

    def test_missing_key_raises(self) -> None:
        f = spread_arg_props(positional, 'x y z')
        with self.assertRaises(MissingKeyError) as cm:
            f(x=1, z=3)
        self.assertEqual('y', cm.exception.key)
        self.assertEqual(frozenset({'x', 'z'}), cm.exception.available)
        self.assertIsInstance(cm.exception, KeyError)
        self.assertIn("'y'", str(cm.exception))

    def test_missing_key_warns(self) -> None:
        f = spread_arg_props(positional, 'x y z', on_missing='warn')
        with self.assertLogs('funcshape.props', logging.WARNING) as logs:
            result = f(x=1, z=3)
        self.assertEqual('x: 1, y: None, z: 3', result)
        self.assertIn("'y'", logs.output[0])

    def test_unknown_policy(self) -> None:
        with self.assertRaises(ValueError):
            spread_arg_props(positional, 'x y z', on_missing='ignore')

    def test_bad_descriptor(self) -> None:
        with self.assertRaises(InvalidDescriptorError):
            spread_arg_props(positional, 'x, x')


class TestGatherArgProps(unittest.TestCase):
    def test_names_positional_arguments(self) -> None:
        f = gather_arg_props(describe, 'z y x')
        self.assertEqual('3-2-1', f(1, 2, 3))

    def test_fewer_arguments(self) -> None:
        self.assertEqual('1-None-None', gather_arg_props(describe, 'x y')(1))

    def test_too_many_arguments(self) -> None:
        with self.assertRaises(TypeError):
            gather_arg_props(describe, 'x y')(1, 2, 3)

    def test_undoes_spread(self) -> None:
        f = gather_arg_props(spread_arg_props(positional, 'x y z'), 'x y z')
        self.assertEqual('x: 1, y: 2, z: 3', f(1, 2, 3))


class TestWrappedErrors(unittest.TestCase):
    class Boom(Exception):
        pass

    def explode(self, *args, **kwargs):
        raise self.Boom

    def test_partial_props(self) -> None:
        with self.assertRaises(self.Boom):
            partial_props(self.explode, {'x': 1})(y=2)

    def test_curry_props(self) -> None:
        with self.assertRaises(self.Boom):
            curry_props(self.explode, 2)(x=1)(y=2)

    def test_spread_arg_props(self) -> None:
        f = spread_arg_props(self.explode, 'x y')
        with self.assertRaises(self.Boom) as cm:
            f(x=1, y=2)
        self.assertNotIsInstance(cm.exception, MissingKeyError)

    def test_key_error_from_wrapped_function(self) -> None:
        def lookup(key, /):
            return {}[key]

        with self.assertRaises(KeyError) as cm:
            spread_arg_props(lookup, 'key')(key='x')
        self.assertNotIsInstance(cm.exception, MissingKeyError)
