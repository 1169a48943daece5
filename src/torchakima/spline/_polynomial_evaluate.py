"""Horner evaluation of polynomials in ascending coefficient order."""

import torch
from torch import Tensor


def polynomial_evaluate(coefficients: Tensor, t: Tensor) -> Tensor:
    """
    Evaluate a polynomial using Horner's method.

    Parameters
    ----------
    coefficients : Tensor
        Coefficients in ascending order along the first dimension, shape
        (n_coefficients, *batch). ``coefficients[k]`` multiplies ``t**k``.
    t : Tensor
        Evaluation points, broadcastable against ``coefficients[0]``.

    Returns
    -------
    Tensor
        Polynomial values, shape ``broadcast(coefficients[0], t)``. A
        polynomial without coefficients evaluates to zero.

    Notes
    -----
    For a cubic this is ``((c3*t + c2)*t + c1)*t + c0``, which uses the
    minimal number of multiplications.
    """
    n = coefficients.shape[0]
    if n == 0:
        shape = torch.broadcast_shapes(coefficients.shape[1:], t.shape)
        return torch.zeros(
            shape, dtype=coefficients.dtype, device=coefficients.device
        )

    result = coefficients[n - 1] + torch.zeros_like(t)
    for k in range(n - 2, -1, -1):
        result = result * t + coefficients[k]
    return result
