"""
Module for weather station metadata.
"""

import pandas as pd
from typing import Any, Dict, Mapping, Union

class WeatherStation:
    """Class representing a single weather station."""

    def __init__(self, data: Union[pd.Series, Mapping[str, Any]]):
        """Initialize station with data."""
        data = pd.Series(data) if not isinstance(data, pd.Series) else data
        self._data = data
        self._id = str(data['Station ID'])
        self._name = str(data['Station Name'])
        self._country = str(data.get('Country', ''))
        self._state = str(data.get('State', ''))
        self._latitude = float(data['Latitude'])
        self._longitude = float(data['Longitude'])
        self._elevation = float(data['Elevation'])
        self._source = str(data.get('Source', ''))

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def country(self) -> str:
        return self._country

    @property
    def state(self) -> str:
        return self._state

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def elevation(self) -> float:
        return self._elevation

    @property
    def source(self) -> str:
        return self._source

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to dictionary."""
        return {
            'Station ID': self.id,
            'Station Name': self.name,
            'Country': self.country,
            'State': self.state,
            'Latitude': self.latitude,
            'Longitude': self.longitude,
            'Elevation': self.elevation,
            'Source': self.source
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WeatherStation':
        """Create a station from the dictionary produced by to_dict."""
        return cls(pd.Series(data))
