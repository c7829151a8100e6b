class UnsupportedOperation(RuntimeError):
    """Raised for operations an uncached SampleCache can't do, like copying"""


class EmptyCacheError(RuntimeError):
    """Raised when reading from a cache constructed with count == 0"""


class OracleCapacityError(ValueError):
    """Raised when a global draw doesn't fit in the shared buffer"""


class OracleMismatchError(RuntimeError):
    """Raised when processes disagree on the size of a global draw"""
