import bisect
from random import randint

import pytest

from seqops import is_sorted, insertion_index, CapabilityError


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1])
    assert is_sorted([1, 2, 3, 4, 5])
    assert is_sorted([1, 1, 2, 2, 3])
    assert not is_sorted([1, 3, 2])
    assert not is_sorted([1, 3, 2, 4, 5])
    assert is_sorted(["apple", "banana", "cherry"])
    assert not is_sorted(["banana", "apple", "cherry"])
    assert is_sorted(range(10))

    with pytest.raises(CapabilityError):
        is_sorted([1, "a"])


def test_insertion_index():
    assert insertion_index([1, 3, 5, 7], 4) == 2
    assert insertion_index([1, 3, 5, 7], 0) == 0
    assert insertion_index([1, 3, 5, 7], 8) == 4
    assert insertion_index([1, 3, 3, 3, 7], 3) == 1
    assert insertion_index([], 3) == 0

    assert insertion_index([1, 3, 5, 7], 4, lambda a, b: a < b) == 2
    assert insertion_index([7, 5, 3, 1], 4, lambda a, b: a > b) == 2
    assert insertion_index([1, 3, 3, 3, 7], 3, lambda a, b: a < b) == 1
    assert insertion_index([], 3, lambda a, b: a < b) == 0

    words = ["a", "bb", "cccc"]
    assert insertion_index(words, "xyz", lambda a, b: len(a) < len(b)) == 2

    for _ in range(50):
        arr = sorted(randint(0, 50) for _ in range(randint(0, 30)))
        value = randint(-5, 55)
        expected = bisect.bisect_left(arr, value)
        assert insertion_index(arr, value) == expected
        assert insertion_index(arr, value, lambda a, b: a < b) == expected

    with pytest.raises(TypeError):
        insertion_index([1], 1, ordered_by=1)


def test_insertion_index_incomparable():
    with pytest.raises(CapabilityError) as excinfo:
        insertion_index([1, 3, 5], "a")
    assert isinstance(excinfo.value.__cause__, TypeError)

    class Boom(Exception):
        pass

    def ordered_by(a, b):
        raise Boom

    # errors from caller-supplied comparators are not rewrapped
    with pytest.raises(Boom):
        insertion_index([1, 3, 5], 2, ordered_by)
