"""
``alternating_iter.ext``
========================

Method-chaining sugar over the adapter constructors. Every adapter and
every ``Source`` carries these methods, so alternations can be written
left to right::

    source_adapter(a).alternate_with(b).alternate_with_all(c)

The module level functions take both sides explicitly. None of them
add any logic to the constructors they forward to.
"""
import typing as ty

if ty.TYPE_CHECKING:
    from alternating_iter.alternating import Alternating
    from alternating_iter.alternating_all import AlternatingAll
    from alternating_iter.alternating_no_remainder import (
        AlternatingNoRemainder,
    )

__all__ = [
    "AlternatingExt",
    "alternate_with",
    "alternate_with_all",
    "alternate_with_no_remainder",
]


T = ty.TypeVar("T")


def alternate_with(
    left: ty.Iterable[T], right: ty.Iterable[T]
) -> "Alternating[T]":
    """Alternates between ``left`` and ``right``, starting with
    ``left``. See ``Alternating``.
    """
    from alternating_iter.alternating import Alternating

    return Alternating(left, right)


def alternate_with_all(
    left: ty.Iterable[T], right: ty.Iterable[T]
) -> "AlternatingAll[T]":
    """Alternates between ``left`` and ``right``, then drains whichever
    outlasts the other. See ``AlternatingAll``.
    """
    from alternating_iter.alternating_all import AlternatingAll

    return AlternatingAll(left, right)


def alternate_with_no_remainder(
    left: ty.Iterable[T], right: ty.Iterable[T]
) -> "AlternatingNoRemainder[T]":
    """Alternates between ``left`` and ``right``, stopping as soon as
    either runs out. See ``AlternatingNoRemainder``.
    """
    from alternating_iter.alternating_no_remainder import (
        AlternatingNoRemainder,
    )

    return AlternatingNoRemainder(left, right)


class AlternatingExt:
    """Mixin adding the alternation methods, taking ``self`` as the
    left side.
    """

    def alternate_with(self, other: ty.Iterable[ty.Any]) -> "Alternating":
        return alternate_with(self, other)  # type: ignore

    def alternate_with_all(
        self, other: ty.Iterable[ty.Any]
    ) -> "AlternatingAll":
        return alternate_with_all(self, other)  # type: ignore

    def alternate_with_no_remainder(
        self, other: ty.Iterable[ty.Any]
    ) -> "AlternatingNoRemainder":
        return alternate_with_no_remainder(self, other)  # type: ignore
