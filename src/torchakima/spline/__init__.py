"""Differentiable Akima spline interpolation for PyTorch tensors.

Convenience Functions
---------------------
akima
    Create an Akima spline interpolator from data (fit + callable).

Akima Splines
-------------
akima_fit
    Fit an Akima spline to data points.
akima_evaluate
    Evaluate an Akima spline at query points.
akima_derivative
    Compute derivatives of an Akima spline.
akima_integral
    Compute definite integral of an Akima spline.
akima_slopes
    Estimate first derivatives at the knots.
three_point_derivative
    Differentiate the quadratic through three samples.

Building Blocks
---------------
hermite_coefficients
    Convert values and derivatives at knots to cubic coefficients.
polynomial_evaluate
    Evaluate a polynomial with Horner's method.
check_order
    Check monotonic order of a sequence.

Data Types
----------
AkimaSpline
    Piecewise cubic polynomial interpolant.
OrderDirection
    Direction of a monotonic order.

Exceptions
----------
SplineError
    Base exception for spline operations.
NullInputError
    Missing knots or values.
SizeMismatchError
    Knots and values differ in length.
KnotError
    Invalid knot vector.
TooFewPointsError
    Not enough knots for the method.
NotMonotonicError
    Sequence violates the requested order.
NotStrictlyIncreasingError
    Knots are not strictly increasing.
InternalInvariantError
    Unreachable code path was reached.

Warnings
--------
SplineWarning
    Fit received non-finite data.
"""

# Import base exception first
from ._spline_error import SplineError

# Import exception subclasses
from ._internal_invariant_error import InternalInvariantError
from ._knot_error import KnotError
from ._not_monotonic_error import (
    NotMonotonicError,
    NotStrictlyIncreasingError,
)
from ._null_input_error import NullInputError
from ._size_mismatch_error import SizeMismatchError
from ._spline_warning import SplineWarning
from ._too_few_points_error import TooFewPointsError

# Import spline implementations
from ._akima import (
    AkimaSpline,
    akima,
    akima_derivative,
    akima_evaluate,
    akima_fit,
    akima_integral,
    akima_slopes,
    three_point_derivative,
)
from ._check_order import OrderDirection, check_order
from ._hermite_coefficients import hermite_coefficients
from ._polynomial_evaluate import polynomial_evaluate

__all__ = [
    "AkimaSpline",
    "InternalInvariantError",
    "KnotError",
    "NotMonotonicError",
    "NotStrictlyIncreasingError",
    "NullInputError",
    "OrderDirection",
    "SizeMismatchError",
    "SplineError",
    "SplineWarning",
    "TooFewPointsError",
    "akima",
    "akima_derivative",
    "akima_evaluate",
    "akima_fit",
    "akima_integral",
    "akima_slopes",
    "check_order",
    "hermite_coefficients",
    "polynomial_evaluate",
    "three_point_derivative",
]
