"""
Core collection primitives для setkit

Set[T] и функции над последовательностями. Не зависят от внешних систем.
"""

# Set
from setkit.core.hashset import Set, map_set, new_set

# Sequence helpers
from setkit.core.sequences import (
    # Exceptions
    EmptySequenceError,
    # Set conversion
    map_slice_to_set,
    slice_to_set,
    # Grouping / iteration
    foreach_slice,
    grouped_by_slice,
    # Set algebra over sequences
    slice_complement,
    slice_difference,
    slice_intersection,
    slice_union,
    # Order-preserving transforms
    filter_slice,
    map_slice,
    # Access / search
    contains_slice,
    first,
    last,
)

__all__ = [
    # Set — Types
    "Set",
    # Set — Functions
    "map_set",
    "new_set",
    # Sequences — Exceptions
    "EmptySequenceError",
    # Sequences — Functions
    "contains_slice",
    "filter_slice",
    "first",
    "foreach_slice",
    "grouped_by_slice",
    "last",
    "map_slice",
    "map_slice_to_set",
    "slice_complement",
    "slice_difference",
    "slice_intersection",
    "slice_to_set",
    "slice_union",
]
