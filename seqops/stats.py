"""Aggregate values computed over sequences of numbers or comparables."""

import functools
import numbers
import operator
from collections import Counter, namedtuple

from .errors import CapabilityError
from .utils import require_hashable, require_numbers


MinMax = namedtuple('MinMax', ['min', 'max'])
Extremes = namedtuple('Extremes', ['longest', 'shortest'])


def summed(sequence, zero=0):
    """Add up all items, starting from `zero`.

    Args:
        sequence (Sequence[numbers.Number]):
            The values to add.
        zero (numbers.Number):
            Value returned for an empty sequence (default 0).

    Example:

        >>> seqops.summed([1, 2, 3])
        6
        >>> seqops.summed([])
        0
    """
    items = list(sequence)
    require_numbers(items, "summed")
    return functools.reduce(operator.add, items, zero)


def average(sequence):
    """Return the arithmetic mean as a float, or `None` if empty.

    Example:

        >>> seqops.average([2, 4, 6])
        4.0
        >>> print(seqops.average([]))
        None
    """
    items = list(sequence)
    if len(items) == 0:
        return None

    require_numbers(items, "average", numbers.Real)
    return float(functools.reduce(operator.add, items) / len(items))


def median(sequence):
    """Return the median as a float, or `None` if empty.

    For an even number of values, the two central ones are averaged.

    Example:

        >>> seqops.median([3, 1, 2])
        2.0
        >>> seqops.median([1, 2, 3, 4])
        2.5
    """
    items = list(sequence)
    if len(items) == 0:
        return None

    require_numbers(items, "median", numbers.Real)
    items.sort()
    middle = len(items) // 2

    if len(items) % 2 == 0:
        return float((items[middle - 1] + items[middle]) / 2)
    else:
        return float(items[middle])


def mode(sequence):
    """Return the most frequent item, or `None` if empty.

    Among equally frequent items, the one that appears first wins.

    Example:

        >>> seqops.mode([1, 2, 2, 3, 3, 3])
        3
        >>> seqops.mode(['b', 'a', 'a', 'b'])
        'b'
    """
    items = list(sequence)
    if len(items) == 0:
        return None

    require_hashable(items, "mode")
    counts = Counter(items)
    top = max(counts.values())
    # counts iterate in first-seen order
    return next(item for item, n in counts.items() if n == top)


def min_max(sequence):
    """Return the smallest and largest items in a single pass.

    Return:
        Optional[MinMax]: A named pair `(min, max)`, or `None` if the
        sequence is empty.

    Raises:
        CapabilityError: items cannot be ordered.
    """
    iterator = iter(sequence)
    try:
        first = next(iterator)
    except StopIteration:
        return None

    smallest = largest = first
    try:
        for item in iterator:
            if item < smallest:
                smallest = item
            elif item > largest:
                largest = item

    except TypeError as error:
        raise CapabilityError("min_max requires comparable items") from error

    return MinMax(smallest, largest)


def longest_and_shortest(sequence):
    """Return the longest and the shortest items, typically strings.

    When several items share the extreme length, the first of the
    longest and the last of the shortest are returned.

    Return:
        Extremes: A named pair `(longest, shortest)`, both `None` if the
        sequence is empty.

    Example:

        >>> seqops.longest_and_shortest(['kiwi', 'banana', 'fig'])
        Extremes(longest='banana', shortest='fig')
    """
    ordered = sorted(sequence, key=len, reverse=True)
    if len(ordered) == 0:
        return Extremes(None, None)

    return Extremes(ordered[0], ordered[-1])
