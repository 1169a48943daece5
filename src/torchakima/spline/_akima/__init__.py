"""Akima cubic spline module."""

from ._akima import AkimaSpline, akima
from ._akima_derivative import akima_derivative
from ._akima_evaluate import akima_evaluate
from ._akima_fit import AKIMA_MINIMUM_POINTS, akima_fit
from ._akima_integral import akima_integral
from ._akima_slopes import akima_slopes, three_point_derivative

__all__ = [
    "AKIMA_MINIMUM_POINTS",
    "AkimaSpline",
    "akima",
    "akima_derivative",
    "akima_evaluate",
    "akima_fit",
    "akima_integral",
    "akima_slopes",
    "three_point_derivative",
]
