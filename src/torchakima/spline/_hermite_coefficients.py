"""Conversion of cubic Hermite data to piecewise power-basis coefficients."""

import torch
from torch import Tensor

from ._size_mismatch_error import SizeMismatchError
from ._too_few_points_error import TooFewPointsError

HERMITE_MINIMUM_POINTS = 2


def hermite_coefficients(x: Tensor, y: Tensor, dydx: Tensor) -> Tensor:
    """
    Convert values and first derivatives at knots into cubic coefficients.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n_points,). Assumed strictly increasing.
    y : Tensor
        Values at knots, shape (n_points, *value_shape).
    dydx : Tensor
        First derivatives at knots, same shape as ``y``.

    Returns
    -------
    Tensor
        Coefficients, shape (n_points - 1, 4, *value_shape). For segment i
        the polynomial is
        ``c0 + c1*(t-x[i]) + c2*(t-x[i])^2 + c3*(t-x[i])^3``
        where ``coefficients[i] = [c0, c1, c2, c3]``.

    Raises
    ------
    SizeMismatchError
        If ``x``, ``y`` and ``dydx`` do not agree in length, or ``y`` and
        ``dydx`` differ in shape.
    TooFewPointsError
        If there are fewer than 2 points.

    Notes
    -----
    With ``w = x[i+1] - x[i]``:

    - c0 = y[i]
    - c1 = y'[i]
    - c2 = (3*(y[i+1] - y[i])/w - 2*y'[i] - y'[i+1]) / w
    - c3 = (2*(y[i] - y[i+1])/w + y'[i] + y'[i+1]) / w^2

    This is the cubic Hermite basis written in powers of ``t - x[i]``, so
    every segment matches the values and the derivatives at both of its
    ends. Each segment only depends on its own two knots.
    """
    n = x.shape[0]

    if y.shape[0] != n:
        raise SizeMismatchError(
            f"x and y have different sizes: x has {n} points "
            f"while y has {y.shape[0]}"
        )
    if dydx.shape != y.shape:
        raise SizeMismatchError(
            f"y and dydx must have same shape, got {tuple(y.shape)} "
            f"and {tuple(dydx.shape)}"
        )
    if n < HERMITE_MINIMUM_POINTS:
        raise TooFewPointsError(
            f"Need at least {HERMITE_MINIMUM_POINTS} points, got {n}"
        )

    # Interval widths broadcast against the value dimensions
    w = (x[1:] - x[:-1]).reshape(-1, *([1] * (y.dim() - 1)))
    w2 = w * w

    yv = y[:-1]
    yv_next = y[1:]
    fd = dydx[:-1]
    fd_next = dydx[1:]

    c0 = yv
    c1 = fd
    c2 = (3 * (yv_next - yv) / w - 2 * fd - fd_next) / w
    c3 = (2 * (yv - yv_next) / w + fd + fd_next) / w2

    return torch.stack([c0, c1, c2, c3], dim=1)
