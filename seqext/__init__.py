"""
Kotlin-style convenience operations for python sequences.

The seqext package contains functions that extend the builtin
sequence toolbox (lists, tuples, generators, dict views...) with the
collection idioms popularized by Kotlin: grouping, association,
partitioning, indexed mapping and filtering, safe reductions...

Operations returning a sequence feature on-demand evaluation: they
return restartable views over the source which re-run the
transformation each time they are iterated. Operations returning a
dict, a pair or a single item are evaluated immediately.

Safe variants (`*_or_none`, `max_by`, `smax`, ...) return None on empty
input instead of raising.
"""

from .errors import EmptySequenceError, EvaluationError, seterr
from .filtering import filter_not, where_indexed, where_is_not_none, where_not, where_not_none
from .grouping import Pair, associate, associate_by, associate_with, group_by, partition
from .indexing import contains_all, first_or_none, for_each_indexed, is_none_or_empty, last_or_none
from .mapping import flat_map, map_indexed, map_indexed_not_none, map_not_none
from .reduction import (
    max_by,
    max_with,
    min_by,
    min_with,
    reduce_indexed,
    reduce_indexed_or_none,
    reduce_or_none,
    smax,
    smin,
)

__all__ = [
    "EvaluationError",
    "EmptySequenceError",
    "seterr",
    "Pair",
    "associate",
    "associate_by",
    "associate_with",
    "group_by",
    "partition",
    "contains_all",
    "first_or_none",
    "last_or_none",
    "is_none_or_empty",
    "for_each_indexed",
    "flat_map",
    "map_indexed",
    "map_indexed_not_none",
    "map_not_none",
    "where_indexed",
    "where_is_not_none",
    "where_not",
    "where_not_none",
    "filter_not",
    "reduce_or_none",
    "reduce_indexed",
    "reduce_indexed_or_none",
    "max_by",
    "max_with",
    "min_by",
    "min_with",
    "smax",
    "smin",
]
