"""
Wet-bulb temperature from an adiabatic saturation energy balance.

The wet-bulb temperature is the saturation temperature at which the enthalpy
of the air, plus the enthalpy of the water evaporated (or sublimated) into it,
equals the enthalpy of saturated air. The balance is solved with a bracketed
root finder (Brent's method).

Reference: 2005 ASHRAE Handbook - Fundamentals (SI), Chapter 6 - Psychrometrics
"""

import logging
import math
import numpy as np
from typing import Any, Callable, Tuple

from .ps_constants import (
    P_STD, CP_WATER, H_FUSION_0, CP_ICE, T_WB_LOWER, T_WB_UPPER, XTOL, MAXITER
)
from .ps_core import ArrayLike, _as_array, _wrap_result, h_t_rh, w_t_rh
from .ps_errors import ConvergenceError

_EPS = np.finfo(float).eps


def h_evap(t: float) -> float:
    """Enthalpy of evaporation of water [kJ/kg] at temperature t [°C]."""
    return CP_WATER * t


def h_sub(t: float) -> float:
    """Enthalpy of sublimation of water [kJ/kg] at temperature t [°C]."""
    return H_FUSION_0 + CP_ICE * t


def find_root(f: Callable[..., float], lower: float, upper: float, args: Tuple[Any, ...] = (),
              xtol: float = XTOL, maxiter: int = MAXITER) -> float:
    """
    Find a root of a scalar function inside a bracket using Brent's method.

    Combines bisection, secant and inverse quadratic interpolation steps; the
    bracket always contains a sign change.

    Parameters
    ----------
    f : Callable[..., float]
        Function of one scalar, called as f(x, *args)
    lower : float
        Lower end of the bracket
    upper : float
        Upper end of the bracket
    args : Tuple[Any, ...], optional
        Extra arguments passed to f, by default ()
    xtol : float, optional
        Absolute tolerance on the root, by default eps ** 0.25
    maxiter : int, optional
        Maximum number of iterations, by default 1000

    Returns
    -------
    float
        Root of f

    Raises
    ------
    ConvergenceError
        If f has the same sign at both ends of the bracket, is not finite at
        either end, or the iteration limit is reached
    """
    a, b = float(lower), float(upper)
    fa, fb = f(a, *args), f(b, *args)

    if not (math.isfinite(fa) and math.isfinite(fb)):
        raise ConvergenceError(
            f"Function is not finite at the end points [{lower}, {upper}]",
            lower=lower, upper=upper
        )
    if fa == 0:
        return a
    if fb == 0:
        return b
    if (fa > 0) == (fb > 0):
        raise ConvergenceError(
            f"Function values at the end points [{lower}, {upper}] are not of opposite sign",
            lower=lower, upper=upper
        )

    c, fc = a, fa
    d = e = b - a
    for iteration in range(1, maxiter + 1):
        if (fb > 0) == (fc > 0):
            # Root lies between a and b, restart the bracket from a
            c, fc = a, fa
            d = e = b - a
        if abs(fc) < abs(fb):
            a, b, c = b, c, b
            fa, fb, fc = fb, fc, fb

        tol = 2 * _EPS * abs(b) + 0.5 * xtol
        xm = 0.5 * (c - b)
        if abs(xm) <= tol or fb == 0:
            logging.debug(f"find_root converged to {b} after {iteration} iterations")
            return b

        if abs(e) >= tol and abs(fa) > abs(fb):
            s = fb / fa
            if a == c:
                # Secant step
                p = 2 * xm * s
                q = 1 - s
            else:
                # Inverse quadratic interpolation
                q = fa / fc
                r = fb / fc
                p = s * (2 * xm * q * (q - r) - (b - a) * (r - 1))
                q = (q - 1) * (r - 1) * (s - 1)
            if p > 0:
                q = -q
            p = abs(p)
            if 2 * p < min(3 * xm * q - abs(tol * q), abs(e * q)):
                e = d
                d = p / q
            else:
                d = xm
                e = d
        else:
            # Bisection
            d = xm
            e = d

        a, fa = b, fb
        b += d if abs(d) > tol else math.copysign(tol, xm)
        fb = f(b, *args)

    raise ConvergenceError(
        f"No convergence in [{lower}, {upper}] after {maxiter} iterations",
        lower=lower, upper=upper, iterations=maxiter
    )


def wet_bulb_residual(t_sat: float, t: float, rh: float, p_atm: float = P_STD) -> float:
    """
    Energy balance error for a guessed wet-bulb (saturation) temperature.

    Parameters
    ----------
    t_sat : float or array-like
        Guess for the saturation temperature [°C]
    t : float or array-like
        Dry-bulb temperature [°C]
    rh : float or array-like
        Relative humidity [1]
    p_atm : float or array-like, optional
        Atmospheric pressure [Pa], by default 101325

    Returns
    -------
    float or array-like
        Enthalpy mismatch [kJ/kg], zero at the wet-bulb temperature
    """
    t_sat_arr = _as_array(t_sat)
    h = _as_array(h_t_rh(t, rh, p_atm))
    dw = _as_array(w_t_rh(t_sat_arr, 1, p_atm)) - _as_array(w_t_rh(t, rh, p_atm))
    # sublimation below freezing, evaporation above
    h_change = np.where(t_sat_arr < 0, h_sub(t_sat_arr), h_evap(t_sat_arr))
    h_sat = _as_array(h_t_rh(t_sat_arr, 1, p_atm))

    return _wrap_result(h + dw * h_change - h_sat, t_sat, t, rh, p_atm)


def t_wb_single(t: float, rh: float, p_atm: float = P_STD) -> float:
    """
    Wet-bulb temperature for a single set of conditions.

    Parameters
    ----------
    t : float
        Dry-bulb temperature [°C]
    rh : float
        Relative humidity [1]
    p_atm : float, optional
        Atmospheric pressure [Pa], by default 101325

    Returns
    -------
    float
        Wet-bulb temperature [°C], NaN if any input is missing
    """
    if np.any(np.isnan(_as_array([t, rh, p_atm]))):
        return np.nan

    return find_root(wet_bulb_residual, T_WB_LOWER, T_WB_UPPER, args=(float(t), float(rh), float(p_atm)))


def t_wb(t: ArrayLike, rh: ArrayLike, p_atm: ArrayLike = P_STD) -> ArrayLike:
    """
    Wet-bulb temperature for sets of temperature, relative humidity and pressure.

    Each set of conditions is solved independently.

    Parameters
    ----------
    t : float or array-like
        Dry-bulb temperature [°C]
    rh : float or array-like
        Relative humidity [1]
    p_atm : float or array-like, optional
        Atmospheric pressure [Pa], by default 101325

    Returns
    -------
    float or array-like
        Wet-bulb temperature [°C]

    Raises
    ------
    ConvergenceError
        If the energy balance has no root between -100 and 65 °C for any set
    """
    t_arr, rh_arr, p_arr = np.broadcast_arrays(_as_array(t), _as_array(rh), _as_array(p_atm))

    result = np.full(t_arr.shape, np.nan)
    for idx in np.ndindex(t_arr.shape):
        result[idx] = t_wb_single(t_arr[idx], rh_arr[idx], p_arr[idx])

    return _wrap_result(result, t, rh, p_atm)
