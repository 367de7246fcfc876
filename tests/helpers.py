"""Shared helpers for driving the adapters one call at a time."""
import typing as ty


END = object()
DEFAULT_ATTEMPT = 10


def pull(iterator: ty.Iterator[ty.Any], calls: int) -> ty.List[ty.Any]:
    """Calls ``next()`` repeatedly, recording ``END`` for each
    ``StopIteration``.
    """
    return [next(iterator, END) for _ in range(calls)]


def no_more(iterator: ty.Iterator[ty.Any], attempt: int = DEFAULT_ATTEMPT) -> None:
    """Asserts that the next ``attempt`` calls all signal exhaustion."""
    for i in range(attempt):
        result = next(iterator, END)
        assert result is END, f"Expected END, got {result!r} at call {i}"


def count(iterator: ty.Iterator[ty.Any]) -> int:
    """Number of items up to the next ``StopIteration``."""
    return sum(1 for _ in iterator)
