class InvalidArgument(ValueError):
    """Error raised when structurally malformed input is supplied, e.g.
        a wrong-length hash or an out-of-range signing threshold.
    """
    ...

class InvalidAddress(ValueError):
    """Error raised when an address fails format or checksum validation."""
    ...

class DecodeFailure(ValueError):
    """Error raised when encoded input (Base58 text, script byte code,
        serialized witnesses) cannot be decoded.
    """
    ...


def vert(condition: bool, message: str = '') -> None:
    """Replacement for assert preconditions. Raises InvalidArgument with
        the given message if the condition check fails.
    """
    if condition:
        return
    raise InvalidArgument(message)

def tert(condition: bool, message: str = '') -> None:
    """Replacement for assert preconditions. Raises TypeError with the
        given message if the condition check fails.
    """
    if condition:
        return
    raise TypeError(message)

def dert(condition: bool, message: str = '') -> None:
    """Replacement for assert preconditions. Raises DecodeFailure with
        the given message if the condition check fails.
    """
    if condition:
        return
    raise DecodeFailure(message)
