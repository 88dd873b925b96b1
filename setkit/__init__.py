"""
setkit — generic collection utilities.

Set algebra over a dedicated hash-set type and helpers over plain sequences.
Pure, synchronous, in-memory: no I/O, no persistence, no internal locking.
"""

from setkit.core import (
    EmptySequenceError,
    Set,
    contains_slice,
    filter_slice,
    first,
    foreach_slice,
    grouped_by_slice,
    last,
    map_set,
    map_slice,
    map_slice_to_set,
    new_set,
    slice_complement,
    slice_difference,
    slice_intersection,
    slice_to_set,
    slice_union,
)

__version__ = "1.0.0"

__all__ = [
    # Set
    "Set",
    "new_set",
    "map_set",
    # Sequence helpers
    "EmptySequenceError",
    "slice_to_set",
    "map_slice_to_set",
    "grouped_by_slice",
    "foreach_slice",
    "slice_union",
    "slice_intersection",
    "slice_complement",
    "slice_difference",
    "filter_slice",
    "map_slice",
    "first",
    "last",
    "contains_slice",
]
