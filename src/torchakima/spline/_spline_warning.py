class SplineWarning(UserWarning):
    """Warning for spline fits that may produce non-finite results."""

    pass
