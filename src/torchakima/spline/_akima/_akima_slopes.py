"""First-derivative estimation at knots for the Akima spline."""

import torch
from torch import Tensor


def three_point_derivative(
    x: Tensor,
    y: Tensor,
    at: int,
    first: int,
    second: int,
    third: int,
) -> Tensor:
    """
    Differentiate the quadratic through three samples.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n_points,).
    y : Tensor
        Values at knots, shape (n_points, *value_shape).
    at : int
        Index of the knot where the derivative is taken. It does not have
        to be one of the three samples.
    first, second, third : int
        Indices of the three samples, in increasing order of ``x``.

    Returns
    -------
    Tensor
        Derivative of the interpolating quadratic at ``x[at]``, shape
        (*value_shape).

    Notes
    -----
    With offsets ``t1 = x[second] - x[first]`` and
    ``t2 = x[third] - x[first]``, the quadratic
    ``y0 + b*t + a*t^2`` through the samples has

    - a = (y2 - y0 - t2/t1*(y1 - y0)) / (t2^2 - t1*t2)
    - b = (y1 - y0 - a*t1^2) / t1

    and its derivative at offset ``t = x[at] - x[first]`` is ``2*a*t + b``.
    """
    y0 = y[first]
    y1 = y[second]
    y2 = y[third]

    t = x[at] - x[first]
    t1 = x[second] - x[first]
    t2 = x[third] - x[first]

    a = (y2 - y0 - (t2 / t1 * (y1 - y0))) / (t2 * t2 - t1 * t2)
    b = (y1 - y0 - a * t1 * t1) / t1

    return 2 * a * t + b


def akima_slopes(x: Tensor, y: Tensor) -> Tensor:
    """
    Estimate the first derivative at every knot with Akima's rule.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n_points,). Strictly increasing, at least 5
        points.
    y : Tensor
        Values at knots, shape (n_points, *value_shape).

    Returns
    -------
    Tensor
        First derivatives, shape (n_points, *value_shape).

    Notes
    -----
    1. Secants: diff[i] = (y[i+1] - y[i]) / (x[i+1] - x[i])
    2. Weights: weight[i] = |diff[i] - diff[i-1]| for i >= 1
    3. Interior knots i = 2..n-3, with wP = weight[i+1] and
       wM = weight[i-1]:

       - (wP*diff[i-1] + wM*diff[i]) / (wP + wM) in general
       - distance-weighted blend of diff[i-1] and diff[i] when both
         weights are below machine epsilon

    4. Knots 0, 1 and n-2, n-1 use :func:`three_point_derivative` on the
       three knots closest to their end of the domain.

    The flat-region test compares against the dtype's machine epsilon
    directly, not a tolerance scaled to the data.

    References
    ----------
    Akima, H. (1970). "A New Method of Interpolation and Smooth Curve
    Fitting Based on Local Procedures". Journal of the ACM. 17 (4):
    589-602.
    """
    n = x.shape[0]
    expand = (-1, *([1] * (y.dim() - 1)))

    h = (x[1:] - x[:-1]).reshape(expand)
    diff = (y[1:] - y[:-1]) / h  # (n-1, *value_shape)

    # weight[0] is never read
    weights = torch.cat(
        [torch.zeros_like(diff[:1]), torch.abs(diff[1:] - diff[:-1])]
    )

    # Interior knots 2..n-3
    w_plus = weights[3 : n - 1]
    w_minus = weights[1 : n - 3]
    diff_minus = diff[1 : n - 3]
    diff_here = diff[2 : n - 2]

    xv = x[2 : n - 2].reshape(expand)
    xv_plus = x[3 : n - 1].reshape(expand)
    xv_minus = x[1 : n - 3].reshape(expand)

    eps = torch.finfo(diff.dtype).eps
    flat = (torch.abs(w_plus) < eps) & (torch.abs(w_minus) < eps)

    linear = (
        (xv_plus - xv) * diff_minus + (xv - xv_minus) * diff_here
    ) / (xv_plus - xv_minus)

    # Keep the unused branch finite so NaN cannot leak through the gradient
    w_sum = torch.where(flat, torch.ones_like(w_plus), w_plus + w_minus)
    weighted = (w_plus * diff_minus + w_minus * diff_here) / w_sum

    interior = torch.where(flat, linear, weighted)

    low = [
        three_point_derivative(x, y, 0, 0, 1, 2),
        three_point_derivative(x, y, 1, 0, 1, 2),
    ]
    high = [
        three_point_derivative(x, y, n - 2, n - 3, n - 2, n - 1),
        three_point_derivative(x, y, n - 1, n - 3, n - 2, n - 1),
    ]

    return torch.cat([torch.stack(low), interior, torch.stack(high)])
