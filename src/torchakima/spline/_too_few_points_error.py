from ._knot_error import KnotError


class TooFewPointsError(KnotError):
    """Raised when there are fewer knots than the method requires."""

    pass
