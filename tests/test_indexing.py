from collections import deque
from random import randint

import numpy as np
import pytest

from seqops import safe_get, safe_insert, random_element, pop_first, \
    pop_last, first_index, last_index, CapabilityError


def test_safe_get():
    arr = [randint(0, 1000) for _ in range(20)]

    assert [safe_get(arr, i) for i in range(len(arr))] == arr
    assert safe_get(arr, len(arr)) is None
    assert safe_get(arr, -1) is None
    assert safe_get(arr, 10 ** 12) is None
    assert safe_get([], 0) is None
    assert safe_get(arr, 25, default=-1) == -1
    assert safe_get((1, 2), 1) == 2
    assert safe_get("abc", 2) == "c"

    with pytest.raises(TypeError):
        safe_get(arr, 1.0)


def test_safe_insert():
    arr = [1, 2, 3]
    assert safe_insert(arr, 0, 0) is arr
    assert arr == [0, 1, 2, 3]
    safe_insert(arr, 4, 4)
    assert arr == [0, 1, 2, 3, 4]
    safe_insert(arr, -1, 2)
    assert arr == [0, 1, -1, 2, 3, 4]

    arr = [1, 2, 3]
    safe_insert(arr, 9, 4, within_bounds_only=True)
    safe_insert(arr, 9, -1, within_bounds_only=True)
    assert arr == [1, 2, 3]
    safe_insert(arr, 9, 3, within_bounds_only=True)
    assert arr == [1, 2, 3, 9]

    with pytest.raises(IndexError):
        safe_insert(arr, 9, 5)
    with pytest.raises(IndexError):
        safe_insert(arr, 9, -1)
    assert arr == [1, 2, 3, 9]

    with pytest.raises(CapabilityError):
        safe_insert((1, 2), 0, 0)

    d = deque([1, 3])
    safe_insert(d, 2, 1)
    assert list(d) == [1, 2, 3]


def test_random_element():
    assert random_element([]) is None
    assert random_element([], rng=lambda n: 0) is None

    arr = ['a', 'b', 'c', 'd']
    for _ in range(50):
        assert random_element(arr) in arr

    draws = iter([3, 0, 2])
    assert [random_element(arr, lambda n: next(draws)) for _ in range(3)] \
        == ['d', 'a', 'c']

    rng = np.random.default_rng(0)
    picks = {random_element(arr, rng.integers) for _ in range(200)}
    assert picks == set(arr)

    with pytest.raises(ValueError):
        random_element(arr, lambda n: n)
    with pytest.raises(ValueError):
        random_element(arr, lambda n: -1)
    with pytest.raises(TypeError):
        random_element(arr, rng=3)


def test_pop():
    arr = [1, 2, 3]
    assert pop_first(arr) == 1
    assert pop_last(arr) == 3
    assert arr == [2]
    assert pop_last(arr) == 2
    assert arr == []
    assert pop_first(arr) is None
    assert pop_last(arr) is None
    assert arr == []

    d = deque("xyz")
    assert pop_first(d) == "x"
    assert pop_last(d) == "z"
    assert list(d) == ["y"]

    with pytest.raises(CapabilityError):
        pop_first((1, 2))


def test_index_lookups():
    arr = [3, 8, 1, 8, 5]
    assert first_index(arr, lambda x: x > 4) == 1
    assert first_index(arr, lambda x: x > 10) is None
    assert first_index([], lambda x: True) is None
    assert last_index(arr, 8) == 3
    assert last_index(arr, 3) == 0
    assert last_index(arr, 42) is None
    assert last_index([], 42) is None
