"""Operations that copy, reorder or regroup the items of sequences."""

import itertools

from .utils import isint, check_callable, is_hashable, require_hashable, \
    get_logger


logger = get_logger(__name__)


def removing_duplicates(sequence, strategy='auto'):
    """Return a copy where only the first occurrence of each item is kept.

    Args:
        sequence (Sequence):
            The input sequence.
        strategy (str):
            How to find previous occurrences:

            - `'scan'`: compare against every kept item, only requires
              the items to support equality but takes quadratic time.
            - `'hash'`: remember kept items in a set, requires hashable
              items.
            - `'auto'`: `'hash'` when all items are hashable, `'scan'`
              otherwise (default).

    Return:
        list: The deduplicated items in their original order.

    Example:

        >>> seqops.removing_duplicates([1, 2, 3, 2, 4, 1, 5, 3])
        [1, 2, 3, 4, 5]
        >>> seqops.removing_duplicates([[1], [2], [1]])
        [[1], [2]]
    """
    if strategy not in ('auto', 'scan', 'hash'):
        raise ValueError("strategy must be 'auto', 'scan' or 'hash'")

    items = list(sequence)

    if strategy == 'hash':
        require_hashable(items, "removing_duplicates")
    elif strategy == 'auto':
        if all(is_hashable(item) for item in items):
            strategy = 'hash'
        else:
            logger.debug(
                "unhashable items, removing_duplicates falls back to scan")
            strategy = 'scan'

    result = []

    if strategy == 'hash':
        seen = set()
        for item in items:
            if item not in seen:
                seen.add(item)
                result.append(item)

    else:
        for item in items:
            if item not in result:
                result.append(item)

    return result


def merged_avoiding_duplicates(sequence, other):
    """Append to a copy of `sequence` the items of `other` it lacks.

    Duplicates already inside `sequence` are kept, duplicates within
    `other` are added only once.

    Example:

        >>> seqops.merged_avoiding_duplicates([1, 2, 3], [3, 3, 4, 5])
        [1, 2, 3, 4, 5]
    """
    result = list(sequence)
    for item in other:
        if item not in result:
            result.append(item)

    return result


def chunked(sequence, size):
    """Split a sequence into consecutive lists of `size` items.

    Args:
        sequence (Sequence):
            The input sequence.
        size (int):
            Number of items by chunk. A null or negative size results
            in no chunk at all.

    Return:
        List[list]: The chunks, the last one may contain less than
        `size` items.

    Example:

        >>> seqops.chunked([1, 2, 3, 4, 5, 6, 7], 2)
        [[1, 2], [3, 4], [5, 6], [7]]
    """
    if not isint(size):
        raise TypeError("size must be an integer")

    if size <= 0:
        logger.warning("chunk size %d is not positive, no chunk returned", size)
        return []

    items = list(sequence)
    return [items[i:i + size] for i in range(0, len(items), size)]


def rotated_left(sequence, distance):
    """Return a copy with items shifted `distance` positions to the left.

    The distance is taken modulo the length of the sequence, negative
    values rotate to the right.

    Example:

        >>> seqops.rotated_left([1, 2, 3, 4, 5], 2)
        [3, 4, 5, 1, 2]
    """
    if not isint(distance):
        raise TypeError("distance must be an integer")

    items = list(sequence)
    if len(items) == 0:
        return items

    split_idx = distance % len(items)
    return items[split_idx:] + items[:split_idx]


def rotated_right(sequence, distance):
    """Return a copy with items shifted `distance` positions to the right.

    Equivalent to :code:`rotated_left(sequence, -distance)`.

    Example:

        >>> seqops.rotated_right([1, 2, 3, 4, 5], 2)
        [4, 5, 1, 2, 3]
    """
    if not isint(distance):
        raise TypeError("distance must be an integer")

    return rotated_left(sequence, -distance)


def rotated(sequence, distance):
    """Rotate left for positive distances and right for negative ones."""
    return rotated_left(sequence, distance)


def interleaved(sequence, other):
    """Alternate the items of two sequences.

    Items are taken pairwise starting with `sequence`, once the shortest
    input is exhausted the remaining items of the other one follow.

    Example:

        >>> seqops.interleaved([1, 2, 3, 4], ['a', 'b'])
        [1, 'a', 2, 'b', 3, 4]
    """
    result = []
    for i in range(max(len(sequence), len(other))):
        if i < len(sequence):
            result.append(sequence[i])
        if i < len(other):
            result.append(other[i])

    return result


def transposed(rows):
    """Swap the rows and columns of a matrix given as a sequence of rows.

    The number of columns is given by the first row, items past that
    length in other rows are ignored.

    Raises:
        ValueError: a row is shorter than the first one.

    Example:

        >>> seqops.transposed([[1, 2, 3],
        ...                    [4, 5, 6]])
        [[1, 4], [2, 5], [3, 6]]
    """
    if len(rows) == 0:
        return []

    n_cols = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) < n_cols:
            raise ValueError(
                "row {} has {} items, expected at least {}".format(
                    i, len(row), n_cols))

    return [[row[j] for row in rows] for j in range(n_cols)]


def deep_flattened(sequence):
    """Remove one level of nesting from a sequence of sequences.

    Example:

        >>> seqops.deep_flattened([[[1, 2], [3]], [[4]]])
        [[1, 2], [3], [4]]
    """
    return list(itertools.chain.from_iterable(sequence))


def split_into_two(sequence):
    """Split a sequence in two halves.

    When the length is odd, the first half is the smaller one.

    Return:
        Tuple[list, list]: The two halves.

    Example:

        >>> seqops.split_into_two([1, 2, 3, 4, 5])
        ([1, 2], [3, 4, 5])
    """
    items = list(sequence)
    mid = len(items) // 2
    return items[:mid], items[mid:]


def inserting_every(sequence, item, interval):
    """Return a copy with `item` inserted after every `interval` items.

    A null or negative interval returns an unmodified copy.

    Example:

        >>> seqops.inserting_every([1, 2, 3, 4, 5], 0, 2)
        [1, 2, 0, 3, 4, 0, 5]
    """
    if interval <= 0:
        return list(sequence)

    result = []
    for i, value in enumerate(sequence):
        result.append(value)
        if (i + 1) % interval == 0:
            result.append(item)

    return result


def compacted(sequence):
    """Return a copy without the `None` items."""
    return [item for item in sequence if item is not None]


def map_with_index(sequence, transform):
    """Return :code:`[transform(i, x) for i, x in enumerate(sequence)]`."""
    check_callable(transform, "transform")
    return [transform(i, item) for i, item in enumerate(sequence)]
