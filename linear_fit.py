#!/usr/bin/env python3
"""
linear_fit.py
-------------
No-intercept least-squares fit used to derive frequency and ZPE scalers.
"""

from collections import namedtuple

import numpy as np


FitResult = namedtuple("FitResult", ["slope", "r_squared"])


class RegressionError(ArithmeticError):
    """The fit is undefined for the given data."""


def no_intercept_linear_fit(x, y):
    """
    Fit y = slope * x through the origin.

    With Ex, Ey, Exx, Eyy, Exy the means of x, y, x^2, y^2 and x*y:
        slope     = Exy / Exx              (= sum(x*y) / sum(x^2))
        r_squared = Cov^2 / (Dx * Dy)
    where Dx = Exx - Ex^2, Dy = Eyy - Ey^2 and Cov = Exy - Ex*Ey.

    r_squared is the squared Pearson coefficient, i.e. the goodness of fit of
    an ordinary fit with intercept. It is only an indicator for the
    constrained model and is not clamped.

    Parameters:
    -----------
    x : sequence of float
        Computed values
    y : sequence of float
        Reference values

    Returns:
    --------
    FitResult

    Raises:
    -------
    RegressionError
        Mismatched or too short input, non-finite values, all-zero x
        (slope undefined) or constant x or y (r_squared undefined)
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    if x.ndim != 1 or x.shape != y.shape:
        raise RegressionError(f"x and y must be 1-D sequences of equal length, got {x.shape} and {y.shape}")
    if x.size < 2:
        raise RegressionError(f"at least 2 data points are required, got {x.size}")
    if not (np.isfinite(x).all() and np.isfinite(y).all()):
        raise RegressionError("input contains NaN or infinite values")

    # overflow is checked explicitly below
    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        ex = np.mean(x)
        ey = np.mean(y)
        exx = np.mean(x * x)
        eyy = np.mean(y * y)
        exy = np.mean(x * y)

    if exx == 0.0:
        raise RegressionError("slope is undefined: all computed values are zero")
    if not (np.isfinite(exx) and np.isfinite(eyy) and np.isfinite(exy)):
        raise RegressionError("values too large: squared means overflow")
    # Exx - Ex^2 can round to a tiny nonzero value for constant data
    if np.ptp(x) == 0.0 or np.ptp(y) == 0.0:
        raise RegressionError("r_squared is undefined: zero variance in computed or reference values")

    dx = exx - ex * ex
    dy = eyy - ey * ey
    cov = exy - ex * ey

    # below this the variance is rounding noise of Exx - Ex^2
    tol = 64 * x.size * np.finfo(float).eps
    if dx <= tol * exx or dy <= tol * eyy:
        raise RegressionError("r_squared is undefined: variance vanishes in floating point")

    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        slope = exy / exx
        r_squared = cov * cov / (dx * dy)

    if not (np.isfinite(slope) and np.isfinite(r_squared)):
        raise RegressionError("fit produced a non-finite slope or r_squared")

    return FitResult(float(slope), float(r_squared))
