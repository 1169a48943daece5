from ._spline_error import SplineError


class InternalInvariantError(SplineError):
    """Raised on a code path that valid usage cannot reach.

    Signals a defect in the library itself, never a problem with the
    caller's data.
    """

    pass
