"""
Closed-form psychrometric relations for moist air.

Reference: 2005 ASHRAE Handbook - Fundamentals (SI), Chapter 6 - Psychrometrics

All functions accept scalars, sequences, numpy arrays or pandas Series and
apply elementwise. Missing values (None or NaN) give NaN at the same position.
"""

import logging
import numpy as np
import pandas as pd
from typing import Sequence, Union

from .ps_constants import (
    P_STD, T_KELVIN, Z_COEFF, Z_EXPONENT, T_SAT_MIN, T_SAT_MAX,
    CF_COLD, CF_WARM, EPSILON, CP_DRY_AIR, CP_VAPOR, H_FG_0
)
from .ps_errors import DomainError

ArrayLike = Union[float, Sequence[float], np.ndarray, pd.Series]


def _as_array(x) -> np.ndarray:
    """Convert an input to a float array, mapping None, NaN and pd.NA to NaN."""
    if isinstance(x, pd.Series):
        return x.to_numpy(dtype=float, na_value=np.nan)
    arr = np.asarray(x)
    if arr.dtype == object:
        flat = np.atleast_1d(arr)
        arr = np.where(pd.isna(flat), np.nan, flat).reshape(arr.shape)
    return arr.astype(float)


def _wrap_result(result: np.ndarray, *inputs) -> ArrayLike:
    """
    Return the result in the shape of the inputs.

    Parameters
    ----------
    result : np.ndarray
        Computed values
    *inputs
        Original inputs of the calculation

    Returns
    -------
    float, np.ndarray or pd.Series
        A float when every input was scalar, a Series indexed like the first
        Series input whose length matches the result, otherwise an array
    """
    for x in inputs:
        if isinstance(x, pd.Series) and (np.ndim(result) == 0 or np.shape(result) == x.shape):
            return pd.Series(np.array(np.broadcast_to(result, x.shape)), index=x.index)
    if np.ndim(result) == 0:
        return float(result)
    return result


def p_atm_z(z: ArrayLike, p_sl: ArrayLike = P_STD) -> ArrayLike:
    """
    Atmospheric pressure as function of elevation and sea-level pressure.

    Weather reports generally give the sea-level pressure; the pressure at the
    station depends on its height above sea level. ASHRAE ch.6 (3).

    Parameters
    ----------
    z : float or array-like
        Elevation [m]
    p_sl : float or array-like, optional
        Pressure at sea level [Pa], by default 101325

    Returns
    -------
    float or array-like
        Atmospheric pressure [Pa]
    """
    z_arr = _as_array(z)
    p_sl_arr = _as_array(p_sl)
    p_atm = p_sl_arr * (1 - Z_COEFF * z_arr) ** Z_EXPONENT
    return _wrap_result(p_atm, z, p_sl)


def _p_ws_c(t: np.ndarray, cf: Sequence[float]) -> np.ndarray:
    """Saturation pressure [Pa] from temperature [°C] for one coefficient set."""
    tk = t + T_KELVIN
    ln_p_ws = (cf[0] / tk
               + ((((cf[5] * tk) + cf[4]) * tk + cf[3]) * tk + cf[2]) * tk + cf[1]
               + cf[6] * np.log(tk))
    return np.exp(ln_p_ws)


def p_ws_t(t: ArrayLike) -> ArrayLike:
    """
    Saturation pressure of water in air as function of temperature.

    The saturation pressure is the vapor pressure at or above which water
    would condense from the air. Below 0 °C the pressure over ice is used,
    otherwise the pressure over liquid water. ASHRAE ch.6 (5), (6).

    Parameters
    ----------
    t : float or array-like
        Temperature, -100 <= t <= 200 [°C]

    Returns
    -------
    float or array-like
        Saturation pressure of water [Pa]

    Raises
    ------
    DomainError
        If any temperature lies outside [-100, 200] °C. The whole call fails,
        not only the offending elements.
    """
    t_arr = _as_array(t)

    # NaN compares False on both sides, so missing values pass through
    out_of_range = (t_arr < T_SAT_MIN) | (t_arr > T_SAT_MAX)
    if np.any(out_of_range):
        bad = np.atleast_1d(t_arr[out_of_range])
        logging.warning(f"{bad.size} temperature value(s) outside [{T_SAT_MIN}, {T_SAT_MAX}] °C")
        raise DomainError(
            f"Temperature out of range: {T_SAT_MIN} <= t <= {T_SAT_MAX}, got {bad.tolist()}",
            values=bad.tolist(), lower=T_SAT_MIN, upper=T_SAT_MAX
        )

    p_ws = np.where(t_arr < 0, _p_ws_c(t_arr, CF_COLD), _p_ws_c(t_arr, CF_WARM))
    return _wrap_result(p_ws, t)


def w_pw(p_w: ArrayLike, p_atm: ArrayLike = P_STD) -> ArrayLike:
    """
    Humidity ratio as function of vapor pressure and atmospheric pressure.

    The humidity ratio is the mass of water vapor per mass of dry air.
    ASHRAE ch.6 (22).

    Parameters
    ----------
    p_w : float or array-like
        Vapor pressure of water [Pa]
    p_atm : float or array-like, optional
        Atmospheric pressure [Pa], by default 101325

    Returns
    -------
    float or array-like
        Humidity ratio [1]; infinite where p_w equals p_atm
    """
    p_w_arr = _as_array(p_w)
    p_atm_arr = _as_array(p_atm)
    with np.errstate(divide='ignore', invalid='ignore'):
        w = EPSILON * p_w_arr / (p_atm_arr - p_w_arr)
    return _wrap_result(w, p_w, p_atm)


def p_w_w(w: ArrayLike, p_atm: ArrayLike = P_STD) -> ArrayLike:
    """
    Vapor pressure as function of humidity ratio and atmospheric pressure.

    Inverse of :func:`w_pw`.

    Parameters
    ----------
    w : float or array-like
        Humidity ratio [1]
    p_atm : float or array-like, optional
        Atmospheric pressure [Pa], by default 101325

    Returns
    -------
    float or array-like
        Vapor pressure of water [Pa]
    """
    w_arr = _as_array(w)
    p_atm_arr = _as_array(p_atm)
    with np.errstate(divide='ignore', invalid='ignore'):
        p_w = p_atm_arr * w_arr / (EPSILON + w_arr)
    return _wrap_result(p_w, w, p_atm)


def w_t_rh(t: ArrayLike, rh: ArrayLike, p_atm: ArrayLike = P_STD) -> ArrayLike:
    """
    Humidity ratio as function of dry-bulb temperature and relative humidity.

    Parameters
    ----------
    t : float or array-like
        Temperature [°C]
    rh : float or array-like
        Relative humidity [1]
    p_atm : float or array-like, optional
        Atmospheric pressure [Pa], by default 101325

    Returns
    -------
    float or array-like
        Humidity ratio [1]
    """
    # relative humidity is the ratio of vapor pressure to saturation pressure
    p_w = _as_array(rh) * _as_array(p_ws_t(t))
    w = _as_array(w_pw(p_w, p_atm))
    return _wrap_result(w, t, rh, p_atm)


def h_t_w(t: ArrayLike, w: ArrayLike) -> ArrayLike:
    """
    Enthalpy of moist air as function of temperature and humidity ratio.

    Enthalpy is 0 kJ/kg for zero-moisture air at 0 °C. ASHRAE ch.6 (32).

    Parameters
    ----------
    t : float or array-like
        Temperature [°C]
    w : float or array-like
        Humidity ratio [1]

    Returns
    -------
    float or array-like
        Enthalpy of moist air [kJ/kg]
    """
    t_arr = _as_array(t)
    w_arr = _as_array(w)
    h = CP_DRY_AIR * t_arr + w_arr * (H_FG_0 + CP_VAPOR * t_arr)
    return _wrap_result(h, t, w)


def h_t_rh(t: ArrayLike, rh: ArrayLike, p_atm: ArrayLike = P_STD) -> ArrayLike:
    """
    Enthalpy of moist air as function of temperature and relative humidity.

    Parameters
    ----------
    t : float or array-like
        Temperature [°C]
    rh : float or array-like
        Relative humidity [1]
    p_atm : float or array-like, optional
        Atmospheric pressure [Pa], by default 101325

    Returns
    -------
    float or array-like
        Enthalpy of moist air [kJ/kg]
    """
    w = _as_array(w_t_rh(t, rh, p_atm))
    h = _as_array(h_t_w(_as_array(t), w))
    return _wrap_result(h, t, rh, p_atm)
