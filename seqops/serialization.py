"""
JSON export of sequences.

Encoding is delegated to the standard :mod:`python:json` module, with an
encoder that also understands a few common containers:

- set, frozenset -> list
- tuple -> list
- numpy arrays and scalars -> list / number (anything with `tolist`)
- dataclass instances -> dict
"""

import dataclasses
import json

from .errors import SerializationError, seterr
from .utils import get_logger


logger = get_logger(__name__)


class SequenceJSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, (set, frozenset)):
            return list(o)
        if dataclasses.is_dataclass(o) and not isinstance(o, type):
            return dataclasses.asdict(o)
        if hasattr(o, "tolist"):
            return o.tolist()

        return super().default(o)


def _encode(sequence, options, as_bytes=False):
    options.setdefault("cls", SequenceJSONEncoder)
    options.setdefault("allow_nan", False)

    try:
        document = json.dumps(list(sequence), **options)
        return document.encode("utf-8") if as_bytes else document

    except (TypeError, ValueError, OverflowError, RecursionError) as error:
        if seterr() == 'raise':
            raise SerializationError(
                "failed to encode sequence as JSON") from error

        logger.debug("JSON encoding failed: %s", error)
        return None


def to_json_string(sequence, **options):
    """Encode a sequence as a JSON array.

    Args:
        sequence (Sequence):
            Items to encode.
        **options:
            Keyword arguments forwarded to :func:`python:json.dumps`
            (`indent`, `sort_keys`, ...).

    NaN and infinite floats are rejected unless `allow_nan=True` is
    passed, so the output is always standard JSON.

    Return:
        Optional[str]: The JSON document, or `None` if some item cannot
        be encoded (see :func:`seqops.seterr` to raise instead).

    Example:

        >>> seqops.to_json_string([1, 'a', None, (2, 3)])
        '[1, "a", null, [2, 3]]'
        >>> print(seqops.to_json_string([object()]))
        None
    """
    return _encode(sequence, options)


def to_json(sequence, **options):
    """Same as :func:`to_json_string` but return UTF-8 encoded bytes."""
    return _encode(sequence, options, as_bytes=True)
