"""
``alternating_iter.alternating``
================================

Alternation which keeps taking turns after one side runs out.
"""
import enum
import typing as ty

from alternating_iter import _bounds
from alternating_iter.base import AlternatingAdapter, SizeHint, source_adapter

__all__ = ["Alternating"]


T = ty.TypeVar("T")


class _Turn(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()


class Alternating(AlternatingAdapter[T]):
    """Iterator over the items of two iterables in turn, starting with
    ``left``.

    Turns keep alternating for as long as the iterator is pulled. Once
    one side is exhausted, its turns raise ``StopIteration`` while the
    other side still yields on its own turns, so the remainder of the
    longer side comes out on every other call.

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
    This iterator is not fused: ``StopIteration`` only reports that the
    side whose turn it was had nothing to give. A ``for`` loop stops at
    the first such signal, so only the items up to the first exhaustion
    are seen. Keep calling ``next()`` to drain the remainder::

        >>> alt = Alternating([1, 2], [3, 4, 5])
        >>> list(alt)
        [1, 3, 2, 4]
        >>> next(alt)
        5
    """

    def __init__(self, left: ty.Iterable[T], right: ty.Iterable[T]) -> None:
        self._left = source_adapter(left)
        self._right = source_adapter(right)
        self._cursor = _Turn.LEFT

    def __next__(self) -> T:
        if self._cursor is _Turn.LEFT:
            self._cursor = _Turn.RIGHT
            return next(self._left)
        self._cursor = _Turn.LEFT
        return next(self._right)

    def size_hint(self) -> SizeHint:
        """Bounds on the number of items until the next exhaustion
        signal.
        """
        return _bounds.interleaved(
            self._left.size_hint(),  # type: ignore
            self._right.size_hint(),  # type: ignore
            last_was_left=self._cursor is _Turn.RIGHT,
        )
