"""
Module for psychrometric calculations of moist air.
"""

from .ps_constants import P_STD
from .ps_core import p_atm_z, p_ws_t, w_pw, p_w_w, w_t_rh, h_t_w, h_t_rh
from .ps_errors import PsychroError, DomainError, ConvergenceError
from .ps_solver import find_root, wet_bulb_residual, t_wb_single, t_wb

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
    't_wb_single',
    'wet_bulb_residual',
    'find_root',
    'PsychroError',
    'DomainError',
    'ConvergenceError'
]
