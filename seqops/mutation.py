"""In-place modifications of mutable sequences.

All functions modify their argument and return it, so calls can be
chained. The caller must ensure no one else uses the sequence during
the call.
"""

from .predicates import remove_where
from .utils import isint, clip, require_mutable, replace_contents


def reverse_in_place(sequence):
    """Reverse the order of items by swapping them from both ends.

    Example:

        >>> arr = [1, 2, 3, 4]
        >>> seqops.reverse_in_place(arr)
        [4, 3, 2, 1]
    """
    require_mutable(sequence, "reverse_in_place")

    n = len(sequence)
    for i in range(n // 2):
        j = n - i - 1
        sequence[i], sequence[j] = sequence[j], sequence[i]

    return sequence


def remove_at(sequence, indices):
    """Remove the items at the given positions.

    Args:
        sequence (MutableSequence):
            The sequence to modify.
        indices (Iterable[int]):
            Positions in the unmodified sequence, out-of-range values
            (including negative ones) are ignored.

    Example:

        >>> arr = ['a', 'b', 'c', 'd', 'e']
        >>> seqops.remove_at(arr, {0, 2, 10})
        ['b', 'd', 'e']
    """
    require_mutable(sequence, "remove_at")

    indices = set(indices)
    return replace_contents(
        sequence,
        [item for i, item in enumerate(sequence) if i not in indices])


def remove_first_n(sequence, n):
    """Remove the `n` first items, or all of them if there are fewer."""
    require_mutable(sequence, "remove_first_n")
    if not isint(n):
        raise TypeError("n must be an integer")

    n = clip(n, 0, len(sequence))
    if n == 0:
        return sequence

    return replace_contents(sequence, list(sequence)[n:])


def remove_last_n(sequence, n):
    """Remove the `n` last items, or all of them if there are fewer."""
    require_mutable(sequence, "remove_last_n")
    if not isint(n):
        raise TypeError("n must be an integer")

    n = clip(n, 0, len(sequence))
    if n == 0:
        return sequence

    return replace_contents(sequence, list(sequence)[:len(sequence) - n])


def append_if_present(sequence, item):
    """Append `item` unless it is `None`."""
    require_mutable(sequence, "append_if_present")

    if item is not None:
        sequence.append(item)

    return sequence


def remove_all_occurrences(sequence, item):
    """Remove every item equal to `item`, survivors keep their order."""
    require_mutable(sequence, "remove_all_occurrences")

    return replace_contents(sequence, [x for x in sequence if x != item])


def remove_all_where(sequence, predicate):
    """Remove every item satisfying `predicate`.

    Alias for :func:`seqops.remove_where`.
    """
    return remove_where(sequence, predicate)


def reverse_strings_in_place(sequence):
    """Reverse the characters of each string item.

    Example:

        >>> arr = ['abc', 'de']
        >>> seqops.reverse_strings_in_place(arr)
        ['cba', 'ed']
    """
    require_mutable(sequence, "reverse_strings_in_place")

    for i in range(len(sequence)):
        sequence[i] = sequence[i][::-1]

    return sequence
