"""
Psychrometric properties of moist air from weather station data.

Reference: 2005 ASHRAE Handbook - Fundamentals (SI), Chapter 6 - Psychrometrics
"""

from .psychro import (
    P_STD,
    p_atm_z,
    p_ws_t,
    w_pw,
    p_w_w,
    w_t_rh,
    h_t_w,
    h_t_rh,
    t_wb,
    PsychroError,
    DomainError,
    ConvergenceError
)
from .data.wd_base import WeatherData
from .data.wd_inferer import WeatherDataInferer
from .data.wd_stations import WeatherStation

__version__ = '0.1.0'

__all__ = [
    'P_STD',
    'p_atm_z',
    'p_ws_t',
    'w_pw',
    'p_w_w',
    'w_t_rh',
    'h_t_w',
    'h_t_rh',
    't_wb',
    'PsychroError',
    'DomainError',
    'ConvergenceError',
    'WeatherData',
    'WeatherDataInferer',
    'WeatherStation'
]
