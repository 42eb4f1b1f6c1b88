"""
A python library of everyday operations on sequences.

The seqops package contains functions to query and transform sequences
(anything that supports indexing such as lists, tuples or arrays).
Its objective is to replace the small hand-written loops that tend to
be rewritten in every project.

Unless otherwise specified, functions evaluate eagerly and return new
lists that do not share storage with their input. Functions from
:mod:`seqops.mutation` (and a few others such as :func:`pop_first` or
:func:`remove_where`) modify a mutable sequence in place and return it.

Empty inputs and out-of-range positions are reported with `None`
rather than exceptions, exceptions are reserved for misuse.
"""

from .errors import CapabilityError, SerializationError, seterr
from .grouping import (
    grouped_by,
    joined,
    joined_with_commas,
    pairs_to_dict,
    to_dict,
)
from .indexing import (
    first_index,
    last_index,
    pop_first,
    pop_last,
    random_element,
    safe_get,
    safe_insert,
)
from .mutation import (
    append_if_present,
    remove_all_occurrences,
    remove_all_where,
    remove_at,
    remove_first_n,
    remove_last_n,
    reverse_in_place,
    reverse_strings_in_place,
)
from .ordering import insertion_index, is_sorted
from .predicates import (
    Partition,
    all_satisfy,
    all_unique,
    any_satisfy,
    contains_all,
    count_where,
    partitioned,
    remove_where,
)
from .serialization import SequenceJSONEncoder, to_json, to_json_string
from .shape import (
    chunked,
    compacted,
    deep_flattened,
    inserting_every,
    interleaved,
    map_with_index,
    merged_avoiding_duplicates,
    removing_duplicates,
    rotated,
    rotated_left,
    rotated_right,
    split_into_two,
    transposed,
)
from .stats import (
    Extremes,
    MinMax,
    average,
    longest_and_shortest,
    median,
    min_max,
    mode,
    summed,
)

__all__ = [
    "CapabilityError",
    "SerializationError",
    "seterr",
    "safe_get",
    "safe_insert",
    "random_element",
    "pop_first",
    "pop_last",
    "first_index",
    "last_index",
    "removing_duplicates",
    "merged_avoiding_duplicates",
    "chunked",
    "rotated",
    "rotated_left",
    "rotated_right",
    "interleaved",
    "transposed",
    "deep_flattened",
    "split_into_two",
    "inserting_every",
    "compacted",
    "map_with_index",
    "Partition",
    "partitioned",
    "count_where",
    "any_satisfy",
    "all_satisfy",
    "remove_where",
    "contains_all",
    "all_unique",
    "MinMax",
    "Extremes",
    "summed",
    "average",
    "median",
    "mode",
    "min_max",
    "longest_and_shortest",
    "is_sorted",
    "insertion_index",
    "reverse_in_place",
    "remove_at",
    "remove_first_n",
    "remove_last_n",
    "append_if_present",
    "remove_all_occurrences",
    "remove_all_where",
    "reverse_strings_in_place",
    "grouped_by",
    "to_dict",
    "pairs_to_dict",
    "joined",
    "joined_with_commas",
    "SequenceJSONEncoder",
    "to_json",
    "to_json_string",
]
