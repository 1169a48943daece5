from ._spline_error import SplineError


class NullInputError(SplineError):
    """Raised when the knots or the values are missing (``None``)."""

    pass
