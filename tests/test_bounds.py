from hypothesis import given, strategies as st
import pytest

from alternating_iter import _bounds
from alternating_iter._bounds import USIZE_MAX


counts = st.integers(min_value=0, max_value=USIZE_MAX)


@pytest.mark.parametrize(
    "min_left, min_right, last_was_left, expected",
    [
        (2, 2, False, (2, False)),
        (2, 2, True, (2, False)),
        (2, 3, False, (2, False)),
        (2, 3, True, (2, True)),
        (3, 2, False, (2, True)),
        (3, 2, True, (2, False)),
        (0, 5, True, (0, True)),
    ],
)
def test_pair_for(min_left, min_right, last_was_left, expected) -> None:
    """The longer side earns a bonus turn only when it is due next."""
    assert _bounds.pair_for(min_left, min_right, last_was_left) == expected


def test_saturating_clamps() -> None:
    """Saturating doubling stops at the largest representable count."""
    assert _bounds.saturating_double_plus_bonus(3, True) == 7
    assert _bounds.saturating_double_plus_bonus(USIZE_MAX // 2, True) == USIZE_MAX
    assert _bounds.saturating_double_plus_bonus(USIZE_MAX // 2 + 1, False) == USIZE_MAX
    assert _bounds.saturating_double_plus_bonus(USIZE_MAX, True) == USIZE_MAX


def test_checked_overflow() -> None:
    """Checked doubling reports unrepresentable results as ``None``."""
    assert _bounds.checked_double_plus_bonus(3, False) == 6
    assert _bounds.checked_double_plus_bonus(USIZE_MAX // 2, True) == USIZE_MAX
    assert _bounds.checked_double_plus_bonus(USIZE_MAX // 2 + 1, False) is None
    assert _bounds.checked_double_plus_bonus(USIZE_MAX, True) is None


def test_add() -> None:
    assert _bounds.saturating_add(USIZE_MAX, 1) == USIZE_MAX
    assert _bounds.checked_add(USIZE_MAX, 0) == USIZE_MAX
    assert _bounds.checked_add(USIZE_MAX, 1) is None
    assert _bounds.checked_add(None, 1) is None
    assert _bounds.checked_add(2, 3) == 5


@given(counts, st.booleans())
def test_saturating_agrees_with_checked(m: int, bonus: bool) -> None:
    """Where the checked result exists, both helpers agree. Neither
    ever exceeds ``USIZE_MAX``.
    """
    saturated = _bounds.saturating_double_plus_bonus(m, bonus)
    checked = _bounds.checked_double_plus_bonus(m, bonus)
    assert saturated <= USIZE_MAX
    if checked is None:
        assert saturated == USIZE_MAX
    else:
        assert checked == saturated == 2 * m + bonus


@given(counts, counts)
def test_interleaved_both_unbounded(left: int, right: int) -> None:
    assert _bounds.interleaved((left, None), (right, None), False)[1] is None


def test_interleaved_one_side_bounded() -> None:
    """With only one bounded side, the bound doubles, plus one if the
    unbounded side is due next.
    """
    assert _bounds.interleaved((3, 3), (USIZE_MAX, None), False) == (6, 6)
    assert _bounds.interleaved((USIZE_MAX, None), (3, 3), False) == (7, 7)
    assert _bounds.interleaved((3, 3), (USIZE_MAX, None), True) == (7, 7)
