"""Akima cubic spline."""

from typing import Callable

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._akima_evaluate import akima_evaluate
from ._akima_fit import akima_fit


@tensorclass
class AkimaSpline:
    """Piecewise cubic interpolant with Akima's local slope estimate.

    Attributes
    ----------
    knots : Tensor
        Breakpoints, shape (n_knots,). Strictly increasing.
    coefficients : Tensor
        Polynomial coefficients, shape (n_segments, 4, *value_shape).
        For segment i, the polynomial is:
        a[i] + b[i]*(t-knots[i]) + c[i]*(t-knots[i])^2 + d[i]*(t-knots[i])^3
        where coefficients[i] = [a, b, c, d].
    """

    knots: Tensor
    coefficients: Tensor


def akima(
    x: torch.Tensor,
    y: torch.Tensor,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create an Akima spline interpolator from data.

    The fitted curve passes through all data points. Each segment only
    depends on the nearby points, so an outlier does not ripple through
    the whole curve the way it does for a global cubic spline.

    Parameters
    ----------
    x : Tensor
        Data x-coordinates. Must be strictly monotonically increasing,
        with at least 5 points.
    y : Tensor
        Data y-values, shape (n_points, *value_shape).

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given points. Queries outside
        the data domain extend the first or last segment polynomial.

    Examples
    --------
    >>> import torch
    >>> x = torch.linspace(0, 1, 10)
    >>> y = torch.sin(x * 2 * torch.pi)
    >>> f = akima(x, y)
    >>> f(torch.tensor([0.5]))  # Evaluate at x=0.5
    """
    fitted = akima_fit(x, y)
    return lambda t: akima_evaluate(fitted, t)
