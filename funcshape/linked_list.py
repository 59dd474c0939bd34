"""Persistent singly linked lists, used as curry accumulators.

Arguments are pushed onto the head, so the newest argument comes first.
Pushing never touches the list pushed onto: two calls on the same
partially-applied function share their common tail and nothing else."""

from typing import (
    Any,
    Iterable,
    Iterator,
    Optional,
    Reversible,
    Tuple,
    TypeVar,
)
from typing_extensions import Never

_T_co = TypeVar('_T_co', covariant=True)
_T = TypeVar('_T')


class LinkedList(Iterable[_T_co]):
    __slots__ = ('_val', '_length')

    def __init__(
        self, _val: Optional[Tuple[_T_co, 'LinkedList[_T_co]']]
    ) -> None:
        self._val = _val
        if _val is None:
            self._length = 0
        else:
            self._length = 1 + len(_val[1])

    @classmethod
    def from_iterable(cls, iterable: Reversible[_T]) -> 'LinkedList[_T]':
        """Build a list whose head is the first element of iterable."""
        if isinstance(iterable, cls):
            return iterable
        l: LinkedList[Any] = empty_list
        for el in reversed(iterable):
            l = cls((el, l))
        return l

    def push(self, value: _T) -> 'LinkedList[Any]':
        return LinkedList((value, self))

    def push_all(self, values: Iterable[_T]) -> 'LinkedList[Any]':
        """Push each value in turn, so the last one ends up at the head."""
        l: LinkedList[Any] = self
        for value in values:
            l = LinkedList((value, l))
        return l

    def in_order(self) -> Tuple[_T_co, ...]:
        """The elements oldest first, i.e. in the order they were pushed."""
        return tuple(reversed(self))

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._val is not None

    def __iter__(self) -> Iterator[_T_co]:
        while self._val is not None:
            yield self._val[0]
            self = self._val[1]

    def __reversed__(self) -> Iterator[_T_co]:
        return reversed(list(self))

    def __str__(self) -> str:
        return str(list(self))

    def __repr__(self) -> str:
        return f'LinkedList.from_iterable({list(self)!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        if len(self) != len(other):
            return False
        for a, b in zip(self, other):
            if a != b:
                return False
        return True


empty_list = LinkedList[Never](None)
