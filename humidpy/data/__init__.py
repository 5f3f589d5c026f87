"""
Module for weather data handling.
"""

from .wd_base import WeatherData
from .wd_inferer import WeatherDataInferer
from .wd_stations import WeatherStation

__all__ = [
    'WeatherData',
    'WeatherDataInferer',
    'WeatherStation'
]
