"""
snapcurve/catenary1d.py
-----------------------
Closed-form math for the symmetric catenary y = a*cosh(x/a).
All functions work in the catenary's own frame, with the apex at (0, a).
Arc lengths are signed: negative on the x < 0 side of the apex.
"""
import numpy as np
from numpy.polynomial import Polynomial


def evaluate(x, a):
    ''' Returns the y coordinate of the catenary at x. '''
    return a * np.cosh(x / a)


def arc_length(x, a):
    ''' Arc length from the apex to x. Negative when x < 0. '''
    return a * np.sinh(x / a)


def x_by_arc_length(s, a):
    ''' Inverse of arc_length: the x coordinate reached after walking s from the apex. '''
    return a * np.arcsinh(s / a)


def derivative_by_arc_length(s, a, n=1):
    """
    Evaluates the n-th derivative of the catenary position with respect to
    arc length, at signed arc length s from the apex.

    Every derivative has the form (Nx(s), Ny(s)) / (a^2 + s^2)^((2n-1)/2).
    Orders 1..4 use the hand-derived numerators, anything higher is built
    from the numerator recurrence.

    Args:
        s (float): Arc length relative to the apex.
        a (float): Shape parameter of the catenary (a > 0).
        n (int): Derivative order. 0 returns the position.

    Returns:
        np.ndarray: (dx, dy) as a length 2 array.
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"Derivative order must be non-negative, got {n}.")

    if n == 0:
        x = x_by_arc_length(s, a)
        return np.array([x, evaluate(x, a)], dtype=np.float64)

    a_sq = a * a
    s_sq = s * s

    if n == 1:    # velocity
        x_num = a
        y_num = s
    elif n == 2:  # acceleration
        x_num = -a * s
        y_num = a_sq
    elif n == 3:  # jerk
        x_num = a * (-a_sq + 2 * s_sq)
        y_num = -3 * a_sq * s
    elif n == 4:
        x_num = 3 * s * a * (3 * a_sq - 2 * s_sq)
        y_num = 3 * a_sq * (-a_sq + 4 * s_sq)
    else:
        x_poly, y_poly = _derivative_numerators(a, n)
        x_num = x_poly(s)
        y_num = y_poly(s)

    den = (a_sq + s_sq) ** ((2 * n - 1) / 2.0)
    return np.array([x_num / den, y_num / den], dtype=np.float64)


def _derivative_numerators(a, n):
    """
    Numerator polynomials (in s) of the n-th derivative.

    If g(s) = N(s) * (a^2 + s^2)^(-k/2) then
    g'(s) = [N'(s) * (a^2 + s^2) - k * s * N(s)] * (a^2 + s^2)^(-(k+2)/2)
    which starts from the first derivative N = (a, s) with k = 1.
    """
    base = Polynomial([a * a, 0.0, 1.0])  # a^2 + s^2
    s_poly = Polynomial([0.0, 1.0])

    x_poly = Polynomial([a])
    y_poly = Polynomial([0.0, 1.0])
    k = 1
    for _ in range(n - 1):
        x_poly = x_poly.deriv() * base - k * s_poly * x_poly
        y_poly = y_poly.deriv() * base - k * s_poly * y_poly
        k += 2
    return x_poly, y_poly
