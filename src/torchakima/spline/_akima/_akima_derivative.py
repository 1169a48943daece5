"""Akima spline derivative computation."""

import torch

from ._akima import AkimaSpline


def akima_derivative(
    spline: AkimaSpline,
    order: int = 1,
) -> AkimaSpline:
    """
    Compute the derivative of an Akima spline.

    Parameters
    ----------
    spline : AkimaSpline
        Input Akima spline
    order : int
        Order of derivative (1, 2, or 3). Default is 1.

    Returns
    -------
    derivative : AkimaSpline
        A new AkimaSpline representing the derivative.
        First derivative is quadratic (degree 2), second is linear (degree 1),
        third is constant (degree 0).

    Raises
    ------
    ValueError
        If order is not 1, 2, or 3.

    Notes
    -----
    For cubic polynomial: y = a + b*dx + c*dx^2 + d*dx^3
    - First derivative: y' = b + 2c*dx + 3d*dx^2  (coefficients: [b, 2c, 3d, 0])
    - Second derivative: y'' = 2c + 6d*dx  (coefficients: [2c, 6d, 0, 0])
    - Third derivative: y''' = 6d  (coefficients: [6d, 0, 0, 0])

    The first derivative is continuous across knots; the second and third
    generally jump there.
    """
    if order < 1 or order > 3:
        raise ValueError(f"Derivative order must be 1, 2, or 3, got {order}")

    coeffs = spline.coefficients

    for _ in range(order):
        # Coefficient k of the derivative is (k+1) * c[k+1]
        powers = torch.arange(
            1, 4, dtype=coeffs.dtype, device=coeffs.device
        ).view(1, 3, *([1] * (coeffs.dim() - 2)))
        coeffs = torch.cat(
            [powers * coeffs[:, 1:], torch.zeros_like(coeffs[:, :1])], dim=1
        )

    return AkimaSpline(
        knots=spline.knots.clone(),
        coefficients=coeffs,
        batch_size=[],
    )
