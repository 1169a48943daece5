from ._spline_error import SplineError


class SizeMismatchError(SplineError):
    """Raised when knots, values or derivatives differ in length."""

    pass
