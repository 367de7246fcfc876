"""Overflow-safe arithmetic for combining the size hints of two sources.

Python integers never overflow, so the representable range is enforced
explicitly against ``USIZE_MAX``, the largest length CPython can report
through ``len()`` or ``__length_hint__``.
"""
import sys
import typing as ty

__all__ = [
    "USIZE_MAX",
    "pair_for",
    "saturating_double_plus_bonus",
    "checked_double_plus_bonus",
    "saturating_add",
    "checked_add",
    "interleaved",
]


USIZE_MAX: int = sys.maxsize


def pair_for(
    min_left: int, min_right: int, last_was_left: bool
) -> ty.Tuple[int, bool]:
    """Returns the length of the shorter side, and whether the longer
    side is due before the shorter side comes around again.

    The longest run without two consecutive items from the same side is
    twice the shorter length. One more item fits if the longer side is
    the one due next.
    """
    if min_left < min_right:
        return min_left, last_was_left
    if min_left == min_right:
        return min_left, False
    return min_right, not last_was_left


def saturating_double_plus_bonus(m: int, bonus: bool) -> int:
    """``2 * m + bonus``, clamped to ``USIZE_MAX``."""
    return min(2 * m + int(bonus), USIZE_MAX)


def checked_double_plus_bonus(m: int, bonus: bool) -> ty.Optional[int]:
    """``2 * m + bonus``, or ``None`` if it exceeds ``USIZE_MAX``."""
    value = 2 * m + int(bonus)
    if value > USIZE_MAX:
        return None
    return value


def saturating_add(a: int, b: int) -> int:
    return min(a + b, USIZE_MAX)


def checked_add(a: ty.Optional[int], b: ty.Optional[int]) -> ty.Optional[int]:
    """Sum of two upper bounds, ``None`` if either is unbounded or the
    sum is not representable.
    """
    if a is None or b is None:
        return None
    value = a + b
    if value > USIZE_MAX:
        return None
    return value


def interleaved(
    left: ty.Tuple[int, ty.Optional[int]],
    right: ty.Tuple[int, ty.Optional[int]],
    last_was_left: bool,
) -> ty.Tuple[int, ty.Optional[int]]:
    """Size hint of a strict alternation between two sources, counting
    up to the first time the side due has nothing to give.

    Parameters
    ----------
    left, right : tuple[int, int | None]
        ``(lower, upper)`` size hints of the two sources.
    last_was_left : bool
        Whether the most recent turn was taken by the left source, ie.
        the right source is due next.
    """
    left_lower, left_upper = left
    right_lower, right_upper = right
    lower = saturating_double_plus_bonus(
        *pair_for(left_lower, right_lower, last_was_left)
    )
    upper: ty.Optional[int]
    if left_upper is not None and right_upper is not None:
        upper = checked_double_plus_bonus(
            *pair_for(left_upper, right_upper, last_was_left)
        )
    elif left_upper is not None:
        upper = checked_double_plus_bonus(left_upper, last_was_left)
    elif right_upper is not None:
        upper = checked_double_plus_bonus(right_upper, not last_was_left)
    else:
        # neither side can run out, as far as the hints tell
        upper = None
    return lower, upper
