"""Element access that reports out-of-range positions as absence."""

import random

from .utils import isint, check_index, check_callable, require_mutable


def safe_get(sequence, index, default=None):
    """Return the item at `index`, or `default` if there is none.

    Unlike regular indexing, negative indices are not wrapped around,
    they are out of range like indices past the end.

    Example:

        >>> arr = ['a', 'b', 'c']
        >>> seqops.safe_get(arr, 1)
        'b'
        >>> print(seqops.safe_get(arr, 3))
        None
        >>> seqops.safe_get(arr, -1, default='?')
        '?'
    """
    check_index(index, "safe_get")

    if 0 <= index < len(sequence):
        return sequence[index]
    else:
        return default


def safe_insert(sequence, item, index, within_bounds_only=False):
    """Insert an item at a given position.

    Args:
        sequence (MutableSequence):
            The sequence to modify.
        item (Any):
            Value to insert.
        index (int):
            Position of the inserted item, must be within
            `[0, len(sequence)]`.
        within_bounds_only (bool):
            Silently skip the insertion when `index` is out of range
            instead of raising an error (default False).

    Return:
        MutableSequence: `sequence`, modified in place.

    Raises:
        IndexError: `index` is out of range and `within_bounds_only` is
            false.
    """
    require_mutable(sequence, "safe_insert")
    check_index(index, "safe_insert")

    if 0 <= index <= len(sequence):
        sequence.insert(index, item)
    elif not within_bounds_only:
        raise IndexError(
            "insertion index {} out of range [0, {}]".format(
                index, len(sequence)))

    return sequence


def random_element(sequence, rng=None):
    """Pick an item uniformly at random.

    Args:
        sequence (Sequence):
            The sequence to sample from.
        rng (Optional[Callable[[int], int]]):
            A function that takes the sequence length `n` and returns an
            integer in `[0, n)`, for example
            :meth:`numpy:numpy.random.Generator.integers`. Defaults to
            :func:`python:random.randrange`.

    Return:
        The selected item or `None` if the sequence is empty.
    """
    if rng is None:
        rng = random.randrange
    else:
        check_callable(rng, "rng")

    size = len(sequence)
    if size == 0:
        return None

    i = rng(size)
    if not isint(i) or not 0 <= i < size:
        raise ValueError(
            "rng returned {!r}, expected an integer in [0, {})".format(
                i, size))

    return sequence[int(i)]


def pop_first(sequence):
    """Remove and return the first item, `None` if empty."""
    require_mutable(sequence, "pop_first")

    if len(sequence) == 0:
        return None

    item = sequence[0]
    del sequence[0]
    return item


def pop_last(sequence):
    """Remove and return the last item, `None` if empty."""
    require_mutable(sequence, "pop_last")

    if len(sequence) == 0:
        return None

    item = sequence[-1]
    del sequence[-1]
    return item


def first_index(sequence, predicate):
    """Return the index of the first item matching `predicate` or `None`."""
    check_callable(predicate, "predicate")

    for i, item in enumerate(sequence):
        if predicate(item):
            return i

    return None


def last_index(sequence, item):
    """Return the index of the last item equal to `item` or `None`.

    The sequence is scanned backward so the search stops at the last
    occurrence.
    """
    for i in range(len(sequence) - 1, -1, -1):
        if sequence[i] == item:
            return i

    return None
