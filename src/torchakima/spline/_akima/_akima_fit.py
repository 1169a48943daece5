"""Akima spline fitting."""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Optional

import torch
from torch import Tensor

from .._check_order import OrderDirection, check_order
from .._hermite_coefficients import hermite_coefficients
from .._null_input_error import NullInputError
from .._size_mismatch_error import SizeMismatchError
from .._spline_warning import SplineWarning
from .._too_few_points_error import TooFewPointsError
from ._akima_slopes import akima_slopes

if TYPE_CHECKING:
    from ._akima import AkimaSpline

AKIMA_MINIMUM_POINTS = 5


def _to_tensor(
    values,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Return a private floating-point copy of ``values``."""
    if isinstance(values, Tensor):
        if dtype is None:
            dtype = values.dtype if values.is_floating_point() else torch.float64
        return values.to(dtype=dtype, device=device).clone()
    return torch.tensor(
        values, dtype=torch.float64 if dtype is None else dtype, device=device
    )


def akima_fit(x: Tensor, y: Tensor) -> AkimaSpline:
    """
    Fit an Akima cubic spline to data points.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n_points,). Must be strictly increasing
        with ``n_points >= 5``. Sequences are converted to ``float64``.
    y : Tensor
        Values at knots, shape (n_points, *value_shape). Converted to the
        dtype and device of the knots.

    Returns
    -------
    AkimaSpline
        Fitted spline. It owns copies of the inputs, so later changes to
        ``x`` or ``y`` do not affect it.

    Raises
    ------
    NullInputError
        If ``x`` or ``y`` is None.
    SizeMismatchError
        If ``x`` and ``y`` have different lengths.
    TooFewPointsError
        If there are fewer than 5 points.
    NotStrictlyIncreasingError
        If ``x`` is not strictly increasing.
    ValueError
        If ``x`` is not one-dimensional or ``y`` is a scalar.

    Warns
    -----
    SplineWarning
        If the data contain NaN or infinite values.

    Notes
    -----
    The fit runs in three local steps and never solves a linear system:

    1. Validate the knots and values.
    2. Estimate the first derivative at every knot
       (see :func:`akima_slopes`).
    3. Convert values and derivatives to per-segment cubic coefficients
       (see :func:`hermite_coefficients`).
    """
    if x is None or y is None:
        raise NullInputError(
            f"x and y must not be None, got "
            f"{'None' if x is None else type(x).__name__} and "
            f"{'None' if y is None else type(y).__name__}"
        )

    knots = _to_tensor(x)
    values = _to_tensor(y, dtype=knots.dtype, device=knots.device)

    if knots.dim() != 1:
        raise ValueError(f"x must be 1-D, got shape {tuple(knots.shape)}")
    if values.dim() == 0:
        raise ValueError("y must have at least one dimension")

    n = knots.shape[0]

    if values.shape[0] != n:
        raise SizeMismatchError(
            f"x and y have different sizes: x has {n} points "
            f"while y has {values.shape[0]}"
        )
    if n < AKIMA_MINIMUM_POINTS:
        raise TooFewPointsError(
            f"Need at least {AKIMA_MINIMUM_POINTS} points, got {n}"
        )

    check_order(knots, OrderDirection.INCREASING, strict=True, abort=True)

    if not (torch.isfinite(knots).all() and torch.isfinite(values).all()):
        warnings.warn(
            "Akima fit received non-finite data; the spline may contain "
            "NaN or infinite coefficients.",
            SplineWarning,
            stacklevel=2,
        )

    slopes = akima_slopes(knots, values)
    coeffs = hermite_coefficients(knots, values, slopes)

    from ._akima import AkimaSpline

    return AkimaSpline(
        knots=knots,
        coefficients=coeffs,
        batch_size=[],
    )
