"""Queries and splits driven by caller-supplied predicates."""

from collections import namedtuple

from .utils import check_callable, require_hashable, require_mutable, \
    replace_contents


Partition = namedtuple('Partition', ['matching', 'non_matching'])


def partitioned(sequence, predicate):
    """Separate items that satisfy a predicate from those that don't.

    Args:
        sequence (Sequence):
            The input sequence.
        predicate (Callable[[Any], bool]):
            Evaluated once on each item, in order.

    Return:
        Partition: A named pair of lists `(matching, non_matching)`, both
        in the original order.

    Example:

        >>> evens, odds = seqops.partitioned([1, 2, 3, 4, 5, 6],
        ...                                  lambda x: x % 2 == 0)
        >>> evens
        [2, 4, 6]
        >>> odds
        [1, 3, 5]
    """
    check_callable(predicate, "predicate")

    matching = []
    non_matching = []
    for item in sequence:
        if predicate(item):
            matching.append(item)
        else:
            non_matching.append(item)

    return Partition(matching, non_matching)


def count_where(sequence, predicate):
    """Return the number of items satisfying `predicate`."""
    check_callable(predicate, "predicate")
    return sum(1 for item in sequence if predicate(item))


def any_satisfy(sequence, predicate):
    """Return wether at least one item satisfies `predicate`.

    Evaluation stops at the first match, an empty sequence gives
    `False`.
    """
    check_callable(predicate, "predicate")

    for item in sequence:
        if predicate(item):
            return True

    return False


def all_satisfy(sequence, predicate):
    """Return wether every item satisfies `predicate`.

    Evaluation stops at the first failure, an empty sequence gives
    `True`.
    """
    check_callable(predicate, "predicate")

    for item in sequence:
        if not predicate(item):
            return False

    return True


def remove_where(sequence, predicate):
    """Keep only the items for which `predicate` is false, in place.

    Return:
        MutableSequence: `sequence`, modified in place.

    Example:

        >>> arr = [1, 2, 3, 4, 5]
        >>> seqops.remove_where(arr, lambda x: x > 3)
        [1, 2, 3]
        >>> arr
        [1, 2, 3]
    """
    require_mutable(sequence, "remove_where")
    check_callable(predicate, "predicate")

    return replace_contents(
        sequence, [item for item in sequence if not predicate(item)])


def contains_all(sequence, items):
    """Return wether every value in `items` appears in `sequence`.

    A value repeated in `items` needs only one match.

    Example:

        >>> seqops.contains_all([1, 2, 3], [3, 1, 1])
        True
    """
    return all(item in sequence for item in items)


def all_unique(sequence):
    """Return wether no item occurs more than once (hashable items only)."""
    items = list(sequence)
    require_hashable(items, "all_unique")

    seen = set()
    for item in items:
        if item in seen:
            return False
        seen.add(item)

    return True
