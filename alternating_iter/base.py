"""
``alternating_iter.base``
=========================

Interfaces shared by the alternating adapters, and the ``Source``
wrapper which gives arbitrary Python iterables a size hint.
"""
import collections.abc as cabc
import enum
import itertools as it
import operator as op
import typing as ty
import warnings
from abc import ABC, abstractmethod

from rich.console import Console
from rich.tree import Tree

from alternating_iter._bounds import USIZE_MAX
from alternating_iter.ext import AlternatingExt

__all__ = [
    "SizeHint",
    "AlternatingAdapter",
    "Source",
    "infer_size_hint",
    "source_adapter",
]


T = ty.TypeVar("T")
SizeHint = ty.Tuple[int, ty.Optional[int]]


def _capture_repr(renderable: ty.Any) -> str:
    console = Console(color_system=None)
    with console.capture() as capture:
        console.print(renderable)
    return capture.get().rstrip("\n")


class AlternatingAdapter(ABC, AlternatingExt, ty.Iterator[T]):
    """Adapter pattern interface for iterators pulling from two sources
    in turn.

    Attributes
    ----------
    fused : bool
        Whether exhaustion is sticky: once ``StopIteration`` has been
        raised, every later call to ``next()`` raises it again.
    """

    fused: ty.ClassVar[bool] = False
    _left: "ty.Iterator[T]"
    _right: "ty.Iterator[T]"
    _cursor: enum.Enum

    @abstractmethod
    def __next__(self) -> T:
        pass

    @abstractmethod
    def size_hint(self) -> SizeHint:
        """Bounds on the number of items remaining.

        Returns
        -------
        lower : int
            Minimum number of items before exhaustion is signalled.
        upper : int, optional
            Maximum number of items before exhaustion is signalled, or
            ``None`` if unbounded or larger than ``USIZE_MAX``.
        """

    def __iter__(self) -> "AlternatingAdapter[T]":
        return self

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def _label(self) -> str:
        name = self.__class__.__name__
        return (
            f"{name}(cursor=[yellow]{self._cursor.name}[default], "
            f"size_hint={self.size_hint()})"
        )

    def _fill_tree(self, tree: Tree) -> None:
        for side, source in (("left", self._left), ("right", self._right)):
            if isinstance(source, AlternatingAdapter):
                branch = tree.add(f"[blue]{side} [default]= {source._label()}")
                source._fill_tree(branch)
            else:
                tree.add(f"[blue]{side} [default]= {source}")

    def __rich__(self) -> Tree:
        tree = Tree(self._label())
        self._fill_tree(tree)
        return tree

    def __repr__(self) -> str:
        return _capture_repr(self)


def _range_size_hint(rng: range) -> SizeHint:
    if rng.step > 0:
        length = (rng.stop - rng.start + rng.step - 1) // rng.step
    else:
        length = (rng.start - rng.stop - rng.step - 1) // -rng.step
    length = max(length, 0)
    if length > USIZE_MAX:
        return USIZE_MAX, None
    return length, length


def infer_size_hint(iterable: ty.Iterable[ty.Any]) -> SizeHint:
    """Best known bounds on the length of an arbitrary iterable.

    Parameters
    ----------
    iterable : iterable
        Any Python iterable, which is not consumed.

    Returns
    -------
    size_hint : tuple[int, int | None]
        Exact bounds for sized collections, ``(USIZE_MAX, None)`` for
        collections longer than ``USIZE_MAX`` and for the infinite
        ``itertools.count`` and ``itertools.repeat`` producers, and
        ``(0, None)`` when nothing is known.
    """
    if isinstance(iterable, range):
        return _range_size_hint(iterable)
    if isinstance(iterable, cabc.Sized):
        try:
            length = len(iterable)
        except OverflowError:  # longer than USIZE_MAX
            return USIZE_MAX, None
        return length, length
    if isinstance(iterable, it.count):
        return USIZE_MAX, None
    if isinstance(iterable, it.repeat):
        remaining = op.length_hint(iterable, -1)
        if remaining < 0:  # repeat without ``times``
            return USIZE_MAX, None
        return remaining, remaining
    return 0, None


def _validate_size_hint(size_hint: SizeHint) -> SizeHint:
    lower, upper = size_hint
    if lower < 0:
        raise ValueError(f"Size hint lower bound must be >= 0, got {lower}.")
    if lower > USIZE_MAX:
        raise ValueError("Size hint lower bound must not exceed USIZE_MAX.")
    if upper is not None and not (lower <= upper <= USIZE_MAX):
        raise ValueError(
            f"Size hint upper bound {upper} must be None, or lie between "
            f"the lower bound {lower} and USIZE_MAX."
        )
    return lower, upper


class Source(AlternatingExt, ty.Iterator[T]):
    """Wraps an iterable into an iterator which keeps track of bounds
    on its remaining length.

    Parameters
    ----------
    iterable : iterable
        The underlying producer. ``iter()`` is called on it once.
    size_hint : tuple[int, int | None], optional
        Explicit ``(lower, upper)`` bounds on the number of items. If
        omitted, the bounds are inferred with ``infer_size_hint()``.

    Raises
    ------
    TypeError
        If ``iterable`` is not iterable.
    ValueError
        If ``size_hint`` is negative, or its upper bound is less than
        its lower bound or greater than ``USIZE_MAX``.

    Warns
    -----
    UserWarning
        If the underlying producer yields more items than the upper
        bound allowed. The upper bound is then dropped.
    """

    def __init__(
        self,
        iterable: ty.Iterable[T],
        size_hint: ty.Optional[SizeHint] = None,
    ) -> None:
        if size_hint is None:
            size_hint = infer_size_hint(iterable)
        else:
            size_hint = _validate_size_hint(size_hint)
        self._iterator = iter(iterable)
        self._lower, self._upper = size_hint

    def __iter__(self) -> "Source[T]":
        return self

    def __next__(self) -> T:
        try:
            item = next(self._iterator)
        except StopIteration:
            self._lower = self._upper = 0
            raise
        if self._upper is None and self._lower == USIZE_MAX:  # infinite
            return item
        self._lower = max(self._lower - 1, 0)
        if self._upper == 0:
            warnings.warn(
                "Source produced more items than its size hint allowed. "
                "Dropping its upper bound.",
                UserWarning,
            )
            self._upper = None
        elif self._upper is not None:
            self._upper = self._upper - 1
        return item

    def size_hint(self) -> SizeHint:
        return self._lower, self._upper

    def __length_hint__(self) -> int:
        return self._lower

    def __str__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(size_hint={self.size_hint()})"

    def __rich__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return str(self)


def source_adapter(
    iterable: ty.Iterable[T], size_hint: ty.Optional[SizeHint] = None
) -> ty.Iterator[T]:
    """Provides a consistent iterator interface, with a ``size_hint()``
    method, for the sources of an alternating adapter.

    Parameters
    ----------
    iterable : iterable
        Any iterable. Iterators which already provide ``size_hint()``,
        such as the adapters of this package, are returned unchanged.
    size_hint : tuple[int, int | None], optional
        Explicit bounds on the length of ``iterable``. Forces wrapping
        in a new ``Source``.

    Returns
    -------
    source : iterator
        Iterator over the items of ``iterable`` with a ``size_hint()``.
    """
    has_hint = callable(getattr(iterable, "size_hint", None))
    if size_hint is None and has_hint and isinstance(iterable, cabc.Iterator):
        return iterable
    return Source(iterable, size_hint)
