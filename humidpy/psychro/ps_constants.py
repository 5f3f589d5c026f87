"""
Constants for psychrometric calculations.

Reference: 2005 ASHRAE Handbook - Fundamentals (SI), Chapter 6 - Psychrometrics
"""

import numpy as np

# Standard atmospheric pressure at sea level [Pa]
P_STD = 101325.0

# Offset between Celsius and Kelvin
T_KELVIN = 273.15

# Elevation-pressure relation, ASHRAE ch.6 (3)
Z_COEFF = 2.25577e-5
Z_EXPONENT = 5.2559

# Valid temperature range for the saturation pressure correlation [°C]
T_SAT_MIN = -100.0
T_SAT_MAX = 200.0

# Saturation pressure coefficients over ice (-100 to 0 °C), ASHRAE ch.6 (5)
CF_COLD = (
    -5.6745359e+03,
    6.3925247e+00,
    -9.6778430e-03,
    6.2215701e-07,
    2.0747825e-09,
    -9.4840240e-13,
    4.1635019e+00,
)

# Saturation pressure coefficients over liquid water (0 to 200 °C), ASHRAE ch.6 (6)
CF_WARM = (
    -5.8002206e+03,
    1.3914993e+00,
    -4.8640239e-02,
    4.1764768e-05,
    -1.4452093e-08,
    0.0,
    6.5459673e+00,
)

# Ratio of molecular masses of water vapor and dry air
EPSILON = 0.62198

# Moist air enthalpy coefficients [kJ/kg]
CP_DRY_AIR = 1.006
CP_VAPOR = 1.86
H_FG_0 = 2501.0

# Enthalpy of phase change coefficients [kJ/kg]
CP_WATER = 4.186
H_FUSION_0 = -333.4
CP_ICE = 2.1

# Search bracket for the wet-bulb temperature [°C]
T_WB_LOWER = -100.0
T_WB_UPPER = 65.0

# Root finder defaults, matching R's uniroot
XTOL = np.finfo(float).eps ** 0.25
MAXITER = 1000
