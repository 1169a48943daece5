from ._knot_error import KnotError


class NotMonotonicError(KnotError):
    """Raised when a sequence violates the requested monotonic order."""

    pass


class NotStrictlyIncreasingError(NotMonotonicError):
    """Raised when knots are not strictly increasing."""

    pass
