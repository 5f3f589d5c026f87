"""
Module for inferring weather data properties using psychrometric calculations.
"""

import pandas as pd
import numpy as np
import logging
from tqdm import tqdm
from typing import List

from ..psychro import p_atm_z, w_t_rh, h_t_w, t_wb_single, P_STD

class WeatherDataInferer:
    """Class for inferring weather data properties using psychrometric calculations."""

    def __init__(self, data: pd.DataFrame, station_altitude: float = 0):
        """
        Initialize the inferer with weather data.

        Parameters
        ----------
        data : pd.DataFrame
            Weather data DataFrame with columns:
            - DryBulbTemperature [°C]
            - RelativeHumidity [%]
            - SeaLevelPressure [hPa] (optional, standard pressure if absent)
        station_altitude : float, optional
            The elevation of the weather station in meters, by default 0
        """
        self.data = data.copy()
        self.station_altitude = station_altitude
        self.weather_data = None  # This will be set when used with a WeatherData object

    def _require(self, columns: List[str]):
        """Raise a KeyError naming the first required column that is missing."""
        for col in columns:
            if col not in self.data.columns:
                raise KeyError(f"Required column not found: {col}")

    def _log(self, operation_method: str, inputs: dict, added_columns: List[str]):
        """Log the operation if weather_data is available."""
        if self.weather_data is not None:
            self.weather_data._log_operation(
                operation_class="Inferer",
                operation_method=operation_method,
                inputs=inputs,
                outputs={"added_columns": added_columns,
                         "shape": self.data.shape}
            )

    def _station_pressure_pa(self) -> np.ndarray:
        """Station level pressure in Pa, inferring it first if needed."""
        if 'StationLevelPressure' not in self.data.columns:
            self.infer_station_pressure()
        return self.data['StationLevelPressure'].to_numpy(dtype=float) * 100  # Convert to Pa

    def _moisture_inputs(self):
        """Dry bulb temperature [°C] and relative humidity [1] as arrays."""
        self._require(['DryBulbTemperature', 'RelativeHumidity'])
        tdb = self.data['DryBulbTemperature'].to_numpy(dtype=float)
        rh = self.data['RelativeHumidity'].to_numpy(dtype=float) / 100  # Convert to fraction
        return tdb, rh

    def infer_station_pressure(self) -> pd.DataFrame:
        """
        Calculate station level pressure from sea level pressure and altitude.

        Returns
        -------
        pd.DataFrame
            DataFrame with added StationLevelPressure column [hPa]
        """
        if 'SeaLevelPressure' in self.data.columns:
            slp = self.data['SeaLevelPressure'].to_numpy(dtype=float) * 100  # Convert to Pa
        else:
            logging.info('\tNo SeaLevelPressure column, using standard pressure')
            slp = np.full(len(self.data), P_STD)

        logging.info('\tCalculating Station Level Pressure')
        stn_lvl_pres = p_atm_z(self.station_altitude, slp)
        self.data['StationLevelPressure'] = np.asarray(stn_lvl_pres) / 100

        self._log("infer_station_pressure", {"station_altitude": self.station_altitude},
                  ["StationLevelPressure"])
        return self.data

    def infer_humidity_ratio(self) -> pd.DataFrame:
        """
        Calculate the humidity ratio from dry bulb temperature and relative humidity.

        Returns
        -------
        pd.DataFrame
            DataFrame with added HumidityRatio column [kg/kg]
        """
        tdb, rh = self._moisture_inputs()
        stn_lvl_pres = self._station_pressure_pa()

        logging.info('\tCalculating Humidity Ratio from Relative Humidity')
        self.data['HumidityRatio'] = w_t_rh(tdb, rh, stn_lvl_pres)

        self._log("infer_humidity_ratio", {}, ["HumidityRatio"])
        return self.data

    def infer_enthalpy(self) -> pd.DataFrame:
        """
        Calculate the enthalpy of moist air.

        Returns
        -------
        pd.DataFrame
            DataFrame with added Enthalpy column [kJ/kg]
        """
        if 'HumidityRatio' not in self.data.columns:
            self.infer_humidity_ratio()
        self._require(['DryBulbTemperature'])

        logging.info('\tCalculating Enthalpy from Humidity Ratio')
        tdb = self.data['DryBulbTemperature'].to_numpy(dtype=float)
        w = self.data['HumidityRatio'].to_numpy(dtype=float)
        self.data['Enthalpy'] = h_t_w(tdb, w)

        self._log("infer_enthalpy", {}, ["Enthalpy"])
        return self.data

    def infer_wet_bulb(self, progress: bool = False) -> pd.DataFrame:
        """
        Calculate wet bulb temperature from dry bulb temperature and relative humidity.

        Rows with a missing input get NaN.

        Parameters
        ----------
        progress : bool, optional
            Whether to show a progress bar, by default False

        Returns
        -------
        pd.DataFrame
            DataFrame with added WetBulbTemperature column [°C]
        """
        tdb, rh = self._moisture_inputs()
        stn_lvl_pres = self._station_pressure_pa()

        logging.info('\tCalculating WB Temperature from Relative Humidity')
        rows = tqdm(zip(tdb, rh, stn_lvl_pres), total=len(tdb), desc='\tWet bulb', disable=not progress)
        self.data['WetBulbTemperature'] = [t_wb_single(t, r, p) for t, r, p in rows]

        missing = int(self.data['WetBulbTemperature'].isna().sum())
        if missing:
            logging.info(f'\t{missing} rows with missing inputs left without WB Temperature')

        self._log("infer_wet_bulb", {"progress": progress}, ["WetBulbTemperature"])
        return self.data

    def infer_all(self, progress: bool = False) -> pd.DataFrame:
        """
        Perform all available inference calculations.

        Parameters
        ----------
        progress : bool, optional
            Whether to show a progress bar for the wet bulb calculation, by default False

        Returns
        -------
        pd.DataFrame
            DataFrame with all inferred properties:
            - StationLevelPressure
            - HumidityRatio
            - Enthalpy
            - WetBulbTemperature
        """
        initial_columns = set(self.data.columns)
        self.infer_station_pressure()
        self.infer_humidity_ratio()
        self.infer_enthalpy()
        self.infer_wet_bulb(progress=progress)

        added_columns = sorted(set(self.data.columns) - initial_columns)
        self._log("infer_all", {"station_altitude": self.station_altitude}, added_columns)

        return self.data
