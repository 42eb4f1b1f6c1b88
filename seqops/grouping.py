"""Conversions from sequences to dictionaries and strings."""

from .errors import CapabilityError
from .utils import check_callable, is_hashable


def grouped_by(sequence, key):
    """Group items by the value of a key function.

    Args:
        sequence (Sequence):
            The input sequence.
        key (Callable[[Any], Hashable]):
            Called exactly once per item.

    Return:
        Dict[Hashable, list]: Groups ordered by first appearance of
        their key, items keep their relative order within each group.

    Example:

        >>> seqops.grouped_by(['apple', 'avocado', 'banana'], lambda s: s[0])
        {'a': ['apple', 'avocado'], 'b': ['banana']}
    """
    check_callable(key, "key")

    groups = {}
    for item in sequence:
        k = key(item)
        if not is_hashable(k):
            raise CapabilityError(
                "grouped_by requires hashable keys, got a "
                + k.__class__.__name__)
        groups.setdefault(k, []).append(item)

    return groups


def to_dict(sequence, transform):
    """Build a dictionary from `(key, value)` pairs produced by `transform`.

    When several items produce the same key, the last one wins.

    Example:

        >>> seqops.to_dict(['a', 'bb', 'cc'], lambda s: (len(s), s))
        {1: 'a', 2: 'cc'}
    """
    check_callable(transform, "transform")

    result = {}
    for item in sequence:
        k, v = transform(item)
        result[k] = v

    return result


def _check_value(value, path):
    if value is None or isinstance(value, (str, bool, int, float)):
        return
    if isinstance(value, list):
        for i, v in enumerate(value):
            _check_value(v, "{}[{}]".format(path, i))
        return
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise CapabilityError(
                    "non-string key {!r} at {}".format(k, path))
            _check_value(v, "{}[{!r}]".format(path, k))
        return

    raise CapabilityError(
        "unsupported value type {} at {}".format(
            value.__class__.__name__, path))


def pairs_to_dict(pairs):
    """Convert `(name, value)` pairs into a dictionary of plain values.

    Values are restricted to strings, numbers, booleans, `None`, and
    lists or string-keyed dicts of those, so that the result can always
    be fed to :func:`seqops.to_json`. Later pairs overwrite earlier ones.

    Raises:
        CapabilityError: a name is not a string or a value has an
            unsupported type.

    Example:

        >>> seqops.pairs_to_dict([('name', 'ada'), ('tags', ['x']),
        ...                       ('name', 'grace')])
        {'name': 'grace', 'tags': ['x']}
    """
    result = {}
    for name, value in pairs:
        if not isinstance(name, str):
            raise CapabilityError(
                "pair names must be strings, got a "
                + name.__class__.__name__)
        _check_value(value, name)
        result[name] = value

    return result


def joined(sequence, separator):
    """Join the string representations of items with `separator`."""
    return separator.join(str(item) for item in sequence)


def joined_with_commas(sequence):
    """Join the string representations of items with `', '`.

    Example:

        >>> seqops.joined_with_commas([1, 'b', 3.0])
        '1, b, 3.0'
    """
    return joined(sequence, ", ")
