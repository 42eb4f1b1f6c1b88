import threading


class CapabilityError(TypeError):
    """Raised when items or containers lack a capability an operation needs.

    For instance :func:`seqops.mode` on unhashable items or
    :func:`seqops.remove_where` on a tuple.
    """


class SerializationError(Exception):
    """Raised when JSON encoding fails and errors are set to `'raise'`."""


# Settings --------------------------------------------------------------------

def seterr(serialization=None):
    """Set how errors are handled.

    Args:
        serialization (str): how encoding failures in
            :func:`seqops.to_json` and :func:`seqops.to_json_string` are
            reported:

            - `'absent'`: return `None`, the failure is only logged.
            - `'raise'`: raise :class:`SerializationError` with the
              original error as its cause, might facilitate debugging.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if serialization == 'absent':
        error_config.raise_serialization = False
    elif serialization == 'raise':
        error_config.raise_serialization = True
    elif serialization is not None:
        raise ValueError("serialization must be 'absent' or 'raise'")

    return "raise" if error_config.raise_serialization else 'absent'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.raise_serialization = False


error_config = ErrorConfig()
