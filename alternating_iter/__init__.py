"""
``alternating_iter``
====================

Lazy adapters interleaving the items of two iterables, with three
policies for what happens once one of them runs out:

``Alternating``
    keeps taking turns, so the rest of the longer side comes out on
    every other call.
``AlternatingAll``
    drains the rest of the longer side in one run.
``AlternatingNoRemainder``
    stops, discarding the rest of the longer side.
"""
from ._version import __version__
from ._bounds import USIZE_MAX
from .alternating import Alternating
from .alternating_all import AlternatingAll
from .alternating_no_remainder import AlternatingNoRemainder
from .base import AlternatingAdapter, Source, source_adapter
from .ext import (
    alternate_with,
    alternate_with_all,
    alternate_with_no_remainder,
)


__all__ = [
    "__version__",
    "USIZE_MAX",
    "Alternating",
    "AlternatingAll",
    "AlternatingNoRemainder",
    "AlternatingAdapter",
    "Source",
    "source_adapter",
    "alternate_with",
    "alternate_with_all",
    "alternate_with_no_remainder",
]
