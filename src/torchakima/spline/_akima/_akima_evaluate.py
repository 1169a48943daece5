"""Akima spline evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._polynomial_evaluate import polynomial_evaluate

if TYPE_CHECKING:
    from ._akima import AkimaSpline


def akima_evaluate(
    spline: AkimaSpline,
    t: Tensor,
) -> Tensor:
    """
    Evaluate an Akima spline at query points.

    Parameters
    ----------
    spline : AkimaSpline
        Fitted Akima spline from akima_fit
    t : Tensor
        Query points, shape (*query_shape) or scalar. Numbers and
        sequences are converted to the dtype of the knots.

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape, *y_dim) where y_dim
        is the dimensionality of the original y values

    Notes
    -----
    A query equal to knot k uses segment k; the last knot uses the last
    segment. Any other query uses the segment starting at the closest knot
    to its left. Queries below the first knot extend the first segment's
    polynomial backwards and queries above the last knot extend the last
    segment's polynomial forwards, so evaluation never raises. NaN queries
    give NaN.
    """
    knots = spline.knots
    coeffs = spline.coefficients

    if not isinstance(t, Tensor):
        t = torch.as_tensor(t, dtype=knots.dtype, device=knots.device)
    else:
        t = t.to(dtype=knots.dtype, device=knots.device)

    # Check if t is scalar (0-d tensor)
    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    # Store original query shape
    query_shape = t.shape
    t_flat = t.flatten().contiguous()

    # Find segment indices using searchsorted
    segment_idx = torch.searchsorted(knots, t_flat, right=True) - 1

    # Clamp segment indices to valid range [0, n_segments-1]
    n_segments = len(knots) - 1
    segment_idx = torch.clamp(segment_idx, 0, n_segments - 1)

    # Compute dx = t - x_i
    dx = t_flat - knots[segment_idx]

    # (4, n_queries, *value_shape)
    segment_coeffs = coeffs[segment_idx].movedim(1, 0)

    value_shape = coeffs.shape[2:]
    if value_shape:
        dx = dx.view(-1, *([1] * len(value_shape)))

    y = polynomial_evaluate(segment_coeffs, dx)

    y = y.reshape(*query_shape, *value_shape)

    # Handle scalar input: return scalar output
    if is_scalar:
        y = y.squeeze(0)

    return y
