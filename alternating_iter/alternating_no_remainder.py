"""
``alternating_iter.alternating_no_remainder``
=============================================

Alternation which stops as soon as either side runs out.
"""
import enum
import typing as ty

from alternating_iter import _bounds
from alternating_iter.base import AlternatingAdapter, SizeHint, source_adapter

__all__ = ["AlternatingNoRemainder"]


T = ty.TypeVar("T")


class _Turn(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()
    DONE = enum.auto()


class AlternatingNoRemainder(AlternatingAdapter[T]):
    """Iterator over the items of two iterables in turn, starting with
    ``left``, ending the first time the side whose turn it is has run
    out. The rest of the other side is discarded.

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
    The order of the sources matters. With a shorter ``left``, the
    iterator ends after ``2 * len(left)`` items. With a shorter
    ``right``, one more item is taken from ``left`` first::

        small: 1 2 -         big: 3 4 5
               |/|/               |/|/|
          big: 3 4          small: 1 2 -

    This iterator is fused, even over sources which are not.

    Examples
    --------
    >>> list(AlternatingNoRemainder([1, 2], [3, 4, 5]))
    [1, 3, 2, 4]
    >>> list(AlternatingNoRemainder([3, 4, 5], [1, 2]))
    [3, 1, 4, 2, 5]
    """

    fused = True

    def __init__(self, left: ty.Iterable[T], right: ty.Iterable[T]) -> None:
        self._left = source_adapter(left)
        self._right = source_adapter(right)
        self._cursor = _Turn.LEFT

    def __next__(self) -> T:
        if self._cursor is _Turn.DONE:
            raise StopIteration
        if self._cursor is _Turn.LEFT:
            source, then = self._left, _Turn.RIGHT
        else:
            source, then = self._right, _Turn.LEFT
        try:
            item = next(source)
        except StopIteration:
            self._cursor = _Turn.DONE
            raise
        self._cursor = then
        return item

    def size_hint(self) -> SizeHint:
        if self._cursor is _Turn.DONE:
            return 0, 0
        return _bounds.interleaved(
            self._left.size_hint(),  # type: ignore
            self._right.size_hint(),  # type: ignore
            last_was_left=self._cursor is _Turn.RIGHT,
        )
