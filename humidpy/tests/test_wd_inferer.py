import unittest
import numpy as np
import pandas as pd
from humidpy.data.wd_base import WeatherData
from humidpy.data.wd_inferer import WeatherDataInferer
from humidpy.data.wd_stations import WeatherStation
from humidpy.psychro import DomainError, p_atm_z, w_t_rh, h_t_rh, t_wb

class TestWeatherDataInferer(unittest.TestCase):
    def setUp(self):
        # Saturated air at standard pressure, ASHRAE ch. 6, table 2
        self.data = pd.DataFrame({
            'DryBulbTemperature': [-10.0, 5.0, 20.0],
            'RelativeHumidity': [100.0, 100.0, 100.0],
            'SeaLevelPressure': [1013.25, 1013.25, 1013.25]
        }, index=pd.date_range('2024-01-01', periods=3))

    def test_station_pressure_at_sea_level(self):
        result = WeatherDataInferer(self.data).infer_station_pressure()
        np.testing.assert_allclose(result['StationLevelPressure'], 1013.25)

    def test_station_pressure_at_altitude(self):
        result = WeatherDataInferer(self.data, station_altitude=500).infer_station_pressure()
        np.testing.assert_allclose(result['StationLevelPressure'], p_atm_z(500) / 100)

    def test_station_pressure_without_sea_level_pressure(self):
        data = self.data.drop(columns=['SeaLevelPressure'])
        result = WeatherDataInferer(data).infer_station_pressure()
        np.testing.assert_allclose(result['StationLevelPressure'], 1013.25)

    def test_infer_all(self):
        result = WeatherDataInferer(self.data).infer_all()
        t = self.data['DryBulbTemperature'].to_numpy()

        for col in ['StationLevelPressure', 'HumidityRatio', 'Enthalpy', 'WetBulbTemperature']:
            self.assertIn(col, result.columns)
        np.testing.assert_allclose(result['HumidityRatio'], w_t_rh(t, 1), rtol=1e-12)
        np.testing.assert_allclose(result['Enthalpy'], h_t_rh(t, 1), rtol=1e-12)
        np.testing.assert_allclose(result['WetBulbTemperature'], t, atol=5e-3)

    def test_does_not_modify_input(self):
        WeatherDataInferer(self.data).infer_all()
        self.assertListEqual(list(self.data.columns),
                             ['DryBulbTemperature', 'RelativeHumidity', 'SeaLevelPressure'])

    def test_wet_bulb_matches_solver(self):
        data = pd.DataFrame({
            'DryBulbTemperature': [25.0, 22.8, 16.7],
            'RelativeHumidity': [54.0, 62.0, 96.0],
            'SeaLevelPressure': [1013.1, 1012.4, 1013.8]
        })
        result = WeatherDataInferer(data, station_altitude=265).infer_wet_bulb()
        expected = t_wb(data['DryBulbTemperature'], data['RelativeHumidity'] / 100,
                        p_atm_z(265, data['SeaLevelPressure'] * 100))
        np.testing.assert_allclose(result['WetBulbTemperature'], expected)
        self.assertTrue(np.all(result['WetBulbTemperature'] < data['DryBulbTemperature']))

    def test_missing_values(self):
        self.data.iloc[1, 1] = np.nan
        result = WeatherDataInferer(self.data).infer_all()
        self.assertTrue(np.isnan(result['WetBulbTemperature'].iloc[1]))
        self.assertTrue(np.isnan(result['HumidityRatio'].iloc[1]))
        self.assertFalse(result['WetBulbTemperature'].drop(result.index[1]).isna().any())

    def test_missing_column(self):
        data = self.data.drop(columns=['RelativeHumidity'])
        with self.assertRaises(KeyError):
            WeatherDataInferer(data).infer_wet_bulb()

    def test_out_of_range_temperature(self):
        self.data.iloc[2, 0] = 250.0
        with self.assertRaises(DomainError):
            WeatherDataInferer(self.data).infer_humidity_ratio()


class TestWeatherDataInferPsychro(unittest.TestCase):
    def setUp(self):
        self.station = WeatherStation({
            'Station ID': '000001',
            'Station Name': 'Test Station',
            'Latitude': -33.86,
            'Longitude': 151.21,
            'Elevation': 265
        })
        self.weather_data = WeatherData(pd.DataFrame({
            'DryBulbTemperature': [25.0, 25.0, 22.8, 21.1, 16.7],
            'RelativeHumidity': [54.0, 54.0, 62.0, 68.0, 96.0],
            'SeaLevelPressure': [1013.1, 1012.6, 1012.4, 1013.1, 1013.8]
        }), station=self.station)

    def test_uses_station_elevation(self):
        self.weather_data.infer_psychro()
        expected = p_atm_z(265, self.weather_data.data['SeaLevelPressure'] * 100) / 100
        np.testing.assert_allclose(self.weather_data.data['StationLevelPressure'], expected)
        self.assertEqual(self.weather_data.column_count, 7)
        self.assertEqual(self.weather_data.row_count, 5)
        self.assertIn('Enthalpy', self.weather_data.columns)
        self.assertIs(self.weather_data.station, self.station)

    def test_operations_logged(self):
        self.weather_data.infer_psychro()
        methods = [op['method'] for op in self.weather_data.operations_log if op['class'] == 'Inferer']
        self.assertListEqual(methods, ['infer_station_pressure', 'infer_humidity_ratio',
                                       'infer_enthalpy', 'infer_wet_bulb', 'infer_all'])

    def test_not_inplace(self):
        result = self.weather_data.infer_psychro(inplace=False)
        self.assertIsNot(result, self.weather_data)
        self.assertIn('WetBulbTemperature', result.columns)
        self.assertNotIn('WetBulbTemperature', self.weather_data.columns)
        self.assertEqual(len(self.weather_data.operations_log), 1)

    def test_station_info(self):
        self.assertEqual(self.weather_data.get_station_info()['Elevation'], 265)
        with self.assertRaises(ValueError):
            WeatherData(self.weather_data.data).get_station_info()

if __name__ == '__main__':
    unittest.main()
