"""
Base class for weather data operations.
"""

import pandas as pd
import logging
from datetime import datetime
from typing import List, Dict, Any, Optional
from .wd_stations import WeatherStation

class WeatherData:
    """Base class for weather data operations."""

    def __init__(self, data: Optional[pd.DataFrame] = None, station: Optional[WeatherStation] = None):
        """
        Initialize with weather data.

        Parameters
        ----------
        data : pd.DataFrame, optional
            Weather data DataFrame, by default None
        station : Optional[WeatherStation], optional
            Weather station information, by default None
        """
        self._data = data.copy() if data is not None else pd.DataFrame()  # Store as protected attribute
        self._station = station

        # Initialize data-driven attributes
        self._shape = (0, 0)  # (rows, columns)
        self._columns = []

        # Initialize operation log
        self._operations_log = []
        self._log_operation("System", "Initialize", {"station_id": station.id if station else None})

        # Update all data-driven attributes
        self._update_data_attributes()

    def _update_data_attributes(self):
        """
        Update all data-driven attributes based on current data.

        When adding new data-driven attributes to the class, update them here.
        """
        self._shape = self._data.shape
        self._columns = list(self._data.columns)

    def _log_operation(self, operation_class, operation_method, inputs=None, outputs=None):
        """
        Log an operation performed on the weather data.

        Parameters
        ----------
        operation_class : str
            The main class that performed the operation (e.g., 'Inferer')
        operation_method : str
            The specific method/function used (e.g., 'infer_wet_bulb')
        inputs : dict, optional
            Input parameters used for the operation, by default None
        outputs : dict, optional
            Output results from the operation (shape, added columns, etc.), by default None
        """
        if inputs is None:
            inputs = {}
        if outputs is None:
            outputs = {}

        operation_log = {
            'timestamp': datetime.now().isoformat(),
            'class': operation_class,
            'method': operation_method,
            'inputs': inputs,
            'outputs': outputs
        }

        self._operations_log.append(operation_log)

    @property
    def operations_log(self) -> List[Dict[str, Any]]:
        """
        Get the operations log.

        Returns
        -------
        List[Dict[str, Any]]
            List of logged operations
        """
        return self._operations_log.copy()  # Return a copy to prevent modification

    @property
    def data(self) -> pd.DataFrame:
        """
        Get the weather data DataFrame.

        Returns
        -------
        pd.DataFrame
            Weather data
        """
        return self._data

    @data.setter
    def data(self, new_data: pd.DataFrame):
        """
        Set the weather data DataFrame and update related attributes.

        Parameters
        ----------
        new_data : pd.DataFrame
            New weather data DataFrame
        """
        self._data = new_data.copy()
        self._update_data_attributes()

    @property
    def station(self) -> Optional[WeatherStation]:
        """
        Get the weather station information.

        Returns
        -------
        Optional[WeatherStation]
            Weather station information
        """
        return self._station

    @property
    def row_count(self) -> int:
        return self._shape[0]

    @property
    def column_count(self) -> int:
        return self._shape[1]

    @property
    def columns(self) -> List[str]:
        return self._columns

    def get_station_info(self) -> Dict[str, Any]:
        """
        Get station information as a dictionary.

        Returns
        -------
        Dict[str, Any]
            Station information

        Raises
        ------
        ValueError
            If no station information is available
        """
        if self._station is None:
            raise ValueError("No station information is available")

        return self._station.to_dict()

    def infer_psychro(self, station_altitude: Optional[float] = None, progress: bool = False,
                      inplace: bool = True) -> 'WeatherData':
        """
        Add psychrometric properties to the data using WeatherDataInferer.

        Parameters
        ----------
        station_altitude : Optional[float], optional
            Station elevation in meters. If None, the station's elevation is used,
            or 0 when no station is set.
        progress : bool, optional
            Whether to show a progress bar while solving wet-bulb temperatures, by default False
        inplace : bool, optional
            If True, modify the data in place. Otherwise, return a new WeatherData object.

        Returns
        -------
        WeatherData
            The WeatherData object with inferred columns (self if inplace=True, otherwise a new object)
        """
        from .wd_inferer import WeatherDataInferer

        if station_altitude is None:
            station_altitude = self._station.elevation if self._station is not None else 0

        target = self if inplace else self.copy()

        inferer = WeatherDataInferer(target.data, station_altitude=station_altitude)
        inferer.weather_data = target
        target.data = inferer.infer_all(progress=progress)

        logging.info(f"Inferred psychrometric properties for {target.row_count} rows")
        return target

    def copy(self) -> 'WeatherData':
        """
        Create a copy of this WeatherData object, including its operations log.

        Returns
        -------
        WeatherData
            Independent copy
        """
        new_weather_data = WeatherData(data=self._data.copy(), station=self._station)
        new_weather_data._operations_log = self.operations_log
        return new_weather_data
