"""Sortedness checks and binary search."""

import bisect

from .errors import CapabilityError
from .utils import check_callable


def is_sorted(sequence):
    """Return wether items are in non-decreasing order.

    Empty and single item sequences are sorted.

    Example:

        >>> seqops.is_sorted([1, 1, 2, 2, 3])
        True
        >>> seqops.is_sorted([1, 3, 2])
        False
    """
    try:
        for i in range(1, len(sequence)):
            if sequence[i] < sequence[i - 1]:
                return False

    except TypeError as error:
        raise CapabilityError("is_sorted requires comparable items") \
            from error

    return True


def insertion_index(sequence, value, ordered_by=None):
    """Find where to insert a value to keep a sequence ordered.

    The returned position is the leftmost one, before any item that
    compares equal to `value`.

    Args:
        sequence (Sequence):
            A sequence already ordered according to `ordered_by`, this
            precondition is not verified.
        value (Any):
            The value to place.
        ordered_by (Optional[Callable[[Any, Any], bool]]):
            A function returning wether its first argument must come
            strictly before its second argument. Defaults to the `<`
            operator.

    Return:
        int: An index within `[0, len(sequence)]`.

    Example:

        >>> seqops.insertion_index([1, 3, 5, 7], 4)
        2
        >>> seqops.insertion_index([7, 5, 3, 1], 4, lambda a, b: a > b)
        2
    """
    if ordered_by is None:
        try:
            return bisect.bisect_left(sequence, value)
        except TypeError as error:
            raise CapabilityError(
                "insertion_index requires comparable items") from error

    check_callable(ordered_by, "ordered_by")

    low, high = 0, len(sequence)
    while low < high:
        mid = (low + high) // 2
        if ordered_by(sequence[mid], value):
            low = mid + 1
        else:
            high = mid

    return low
