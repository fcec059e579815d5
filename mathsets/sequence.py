"""
Lazy, pull-based element sequences.

A LazySequence never computes anything until a consumer pulls, and it
pulls from its source exactly as far as the consumer asks. take(k)
returns after the k-th element without touching the (k+1)-th, which is
what makes filtering over infinite or expensive domains safe.

Two consumption styles:

    for x in seq: ...                    # Python iteration
    cursor = seq.iterator()
    while cursor.has_next():             # explicit has-more / next
        x = cursor.next()

Restartability: a sequence built from a re-iterable source (a set, a
generator function) starts over on every iteration; one built from a
one-shot iterator continues where the previous consumer stopped. Derived
sequences (filter, map, ...) inherit the flag from their source.
"""

from __future__ import annotations
from itertools import islice
from typing import Any, Callable, Generic, Iterable, Iterator, List, Set, Tuple, TypeVar

T = TypeVar('T')
R = TypeVar('R')

_NOTHING = object()


class Cursor(Generic[T]):
    """
    Forward-only cursor with has-more / next semantics.

    has_next() buffers at most the one element it had to pull to answer;
    next() hands that element out before pulling anything new.
    """

    def __init__(self, iterator: Iterator[T]):
        self._iterator = iterator
        self._buffer: Any = _NOTHING

    def has_next(self) -> bool:
        if self._buffer is _NOTHING:
            try:
                self._buffer = next(self._iterator)
            except StopIteration:
                return False
        return True

    def next(self) -> T:
        if self._buffer is not _NOTHING:
            value, self._buffer = self._buffer, _NOTHING
            return value
        return next(self._iterator)

    def __iter__(self) -> Cursor[T]:
        return self

    def __next__(self) -> T:
        return self.next()


class LazySequence(Generic[T]):
    """
    Possibly-infinite sequence produced on demand.

    Args:
        source: Zero-argument callable returning a fresh iterable
        restartable: Whether each iteration starts from the beginning
    """

    def __init__(self, source: Callable[[], Iterable[T]], restartable: bool = True):
        self._source = source
        self._restartable = restartable

    @classmethod
    def of(cls, iterable: Iterable[T]) -> LazySequence[T]:
        """Wrap an iterable; one-shot iterators yield a non-restartable sequence."""
        if iter(iterable) is iterable:
            return cls(lambda: iterable, restartable=False)
        return cls(lambda: iterable)

    @classmethod
    def empty(cls) -> LazySequence[T]:
        return cls(tuple)

    @property
    def restartable(self) -> bool:
        return self._restartable

    def __iter__(self) -> Iterator[T]:
        return iter(self._source())

    def iterator(self) -> Cursor[T]:
        """Explicit has_next()/next() view of a fresh pass."""
        return Cursor(iter(self))

    # -------------------------------------------------------------------------
    # Bounded consumption
    # -------------------------------------------------------------------------

    def take(self, k: int) -> List[T]:
        """
        First k elements (fewer if the sequence ends first).

        Pulls exactly min(k, length) elements from the source.
        """
        if k < 0:
            raise ValueError(f"take() needs k >= 0, got {k}")
        return list(islice(iter(self), k))

    def first(self, default: Any = _NOTHING) -> T:
        """First element; StopIteration (or default) when empty."""
        for value in self:
            return value
        if default is _NOTHING:
            raise StopIteration("first() on an empty sequence")
        return default

    # -------------------------------------------------------------------------
    # Lazy transformations
    # -------------------------------------------------------------------------

    def filter(self, predicate: Callable[[T], bool]) -> LazySequence[T]:
        return LazySequence(lambda: (x for x in self if predicate(x)), self._restartable)

    def map(self, f: Callable[[T], R]) -> LazySequence[R]:
        return LazySequence(lambda: (f(x) for x in self), self._restartable)

    def distinct(self) -> LazySequence[T]:
        """Drop repeats, keeping first occurrences."""
        def generate():
            seen: Set[T] = set()
            for x in self:
                if x not in seen:
                    seen.add(x)
                    yield x
        return LazySequence(generate, self._restartable)

    def interleave(self, other: LazySequence[T]) -> LazySequence[T]:
        """Alternate between both sequences until both are exhausted."""
        def generate():
            iterators = [iter(self), iter(other)]
            while iterators:
                for it in list(iterators):
                    try:
                        yield next(it)
                    except StopIteration:
                        iterators.remove(it)
        return LazySequence(generate, self._restartable and other._restartable)

    def __repr__(self) -> str:
        return f"LazySequence(restartable={self._restartable})"


class _Pulled(Generic[T]):
    """Elements pulled so far from one side; pulls only when an index is first needed."""

    def __init__(self, iterable: Iterable[T]):
        self._iterator = iter(iterable)
        self.items: List[T] = []
        self.exhausted = False

    def reaches(self, index: int) -> bool:
        while len(self.items) <= index and not self.exhausted:
            try:
                self.items.append(next(self._iterator))
            except StopIteration:
                self.exhausted = True
        return index < len(self.items)

    @property
    def empty(self) -> bool:
        return self.exhausted and not self.items


def diagonal_pairs(left: LazySequence[T], right: LazySequence[R]) -> Iterator[Tuple[T, R]]:
    """
    Cantor diagonal enumeration of left × right.

    Every pair (a_i, b_j) appears after finitely many steps even when both
    sides are infinite. a_i is pulled only when the first pair using it is
    about to be yielded, likewise b_j.
    """
    xs, ys = _Pulled(left), _Pulled(right)
    d = 0
    while True:
        for i in range(d + 1):
            j = d - i
            if xs.reaches(i) and ys.reaches(j):
                yield xs.items[i], ys.items[j]
            if xs.empty or ys.empty:
                return
        if xs.exhausted and ys.exhausted and d >= len(xs.items) + len(ys.items) - 2:
            return
        d += 1


__all__ = [
    'Cursor',
    'LazySequence',
    'diagonal_pairs',
]
