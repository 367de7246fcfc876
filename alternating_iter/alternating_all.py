"""
``alternating_iter.alternating_all``
====================================

Alternation which drains the longer side in one uninterrupted run.
"""
import enum
import typing as ty

from alternating_iter import _bounds
from alternating_iter.base import AlternatingAdapter, SizeHint, source_adapter

__all__ = ["AlternatingAll"]


T = ty.TypeVar("T")


class _Next(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()
    LEFT_ALWAYS = enum.auto()  # right exhausted
    RIGHT_ALWAYS = enum.auto()  # left exhausted
    DONE = enum.auto()


class AlternatingAll(AlternatingAdapter[T]):
    """Iterator over the items of two iterables in turn, starting with
    ``left``, followed by all remaining items of whichever outlasts the
    other.

    Parameters
    ----------
    left : iterable
        Source of the first item.
    right : iterable
        Source of the second item.

    Raises
    ------
    TypeError
        If either argument is not iterable.

    Notes
    -----
    This iterator is fused. After the first ``StopIteration`` neither
    source is pulled again, and every later call raises
    ``StopIteration``.

    Examples
    --------
    >>> list(AlternatingAll([1, 2], [3, 4, 5, 6]))
    [1, 3, 2, 4, 5, 6]
    """

    fused = True

    def __init__(self, left: ty.Iterable[T], right: ty.Iterable[T]) -> None:
        self._left = source_adapter(left)
        self._right = source_adapter(right)
        self._cursor = _Next.LEFT

    def _pull_always(self, source: ty.Iterator[T]) -> T:
        try:
            return next(source)
        except StopIteration:
            self._cursor = _Next.DONE
            raise

    def __next__(self) -> T:
        cursor = self._cursor
        if cursor is _Next.LEFT:
            try:
                item = next(self._left)
            except StopIteration:
                self._cursor = _Next.RIGHT_ALWAYS
                return self._pull_always(self._right)
            self._cursor = _Next.RIGHT
            return item
        if cursor is _Next.RIGHT:
            try:
                item = next(self._right)
            except StopIteration:
                self._cursor = _Next.LEFT_ALWAYS
                return self._pull_always(self._left)
            self._cursor = _Next.LEFT
            return item
        if cursor is _Next.LEFT_ALWAYS:
            return self._pull_always(self._left)
        if cursor is _Next.RIGHT_ALWAYS:
            return self._pull_always(self._right)
        raise StopIteration

    def size_hint(self) -> SizeHint:
        cursor = self._cursor
        if cursor is _Next.DONE:
            return 0, 0
        if cursor is _Next.LEFT_ALWAYS:
            return self._left.size_hint()  # type: ignore
        if cursor is _Next.RIGHT_ALWAYS:
            return self._right.size_hint()  # type: ignore
        left_lower, left_upper = self._left.size_hint()  # type: ignore
        right_lower, right_upper = self._right.size_hint()  # type: ignore
        return (
            _bounds.saturating_add(left_lower, right_lower),
            _bounds.checked_add(left_upper, right_upper),
        )
