"""Miscellaneous tools for internal use."""

import logging
import numbers
from collections.abc import Hashable, MutableSequence
from logging import NullHandler

from .errors import CapabilityError


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def clip(x, a, b):
    """Clip value within specified range."""
    return max(a, min(x, b))


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def check_index(key, owner):
    if not isint(key):
        raise TypeError(
            owner + " indices must be integers, not "
            + key.__class__.__name__)


def check_callable(f, name):
    if not callable(f):
        raise TypeError(name + " must be callable")


def is_hashable(x):
    """Return wether `x` can be used as a set member or dict key."""
    if not isinstance(x, Hashable):
        return False

    try:
        hash(x)
    except TypeError:  # tuples containing unhashable items
        return False

    return True


def require_mutable(sequence, owner):
    if not isinstance(sequence, MutableSequence):
        raise CapabilityError(
            owner + " requires a mutable sequence, not "
            + sequence.__class__.__name__)


def require_hashable(items, owner):
    for i, item in enumerate(items):
        if not is_hashable(item):
            raise CapabilityError(
                "{} requires hashable items, item {} is a {}".format(
                    owner, i, item.__class__.__name__))


def require_numbers(items, owner, kind=numbers.Number):
    for i, item in enumerate(items):
        if not isinstance(item, kind):
            raise CapabilityError(
                "{} requires {} items, item {} is a {}".format(
                    owner, kind.__name__.lower(), i,
                    item.__class__.__name__))


def replace_contents(sequence, items):
    """Replace the content of a mutable sequence while keeping its identity.

    Args:
        sequence (MutableSequence): The sequence to overwrite.
        items (Iterable): The new content.

    Return:
        The same `sequence` object.
    """
    if isinstance(sequence, list):
        sequence[:] = items
    else:  # deque and other sequences without slice assignment
        items = list(items)
        sequence.clear()
        sequence.extend(items)

    return sequence
