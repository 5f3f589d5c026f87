"""
Basic examples of psychrometric calculations for weather station data.
"""

import sys
import logging
from pathlib import Path

import pandas as pd

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from humidpy import p_atm_z, w_t_rh, h_t_w, t_wb, WeatherData, WeatherStation

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

def main():
    # Example 1: A single observation
    print("\nExample 1: Single observation at 265 m")
    print("-" * 50)
    elevation = 265      # elevation (m)
    t_db = 16.7          # dry-bulb temperature (°C)
    rh = 0.96            # relative humidity (1)
    p_sl = 101380.0      # sea-level pressure (Pa)

    p_atm = p_atm_z(z=elevation, p_sl=p_sl)
    w = w_t_rh(t=t_db, rh=rh, p_atm=p_atm)
    h_moist = h_t_w(t=t_db, w=w)
    t_wet = t_wb(t=t_db, rh=rh, p_atm=p_atm)

    print(f"Atmospheric pressure: {p_atm:.1f} Pa")
    print(f"Humidity ratio: {w:.5f}")
    print(f"Enthalpy: {h_moist:.2f} kJ/kg")
    print(f"Wet-bulb temperature: {t_wet:.2f} °C")

    # Example 2: A day of observations, column by column
    print("\nExample 2: Column-wise calculation on a DataFrame")
    print("-" * 50)
    wx_today = pd.DataFrame({
        't_db': [25.0, 25.0, 22.8, 21.1, 16.7],
        'rh': [0.54, 0.54, 0.62, 0.68, 0.96],
        'p_sl': [101310.0, 101260.0, 101240.0, 101310.0, 101380.0]
    })
    wx_today['p_atm'] = p_atm_z(elevation, wx_today['p_sl'])
    wx_today['w'] = w_t_rh(wx_today['t_db'], wx_today['rh'], wx_today['p_atm'])
    wx_today['h_moist'] = h_t_w(wx_today['t_db'], wx_today['w'])
    wx_today['t_wb'] = t_wb(wx_today['t_db'], wx_today['rh'], wx_today['p_atm'])
    print(wx_today.round(4).to_string())

    # Example 3: Inferring properties for station data
    print("\nExample 3: Inferring properties with WeatherData")
    print("-" * 50)
    station = WeatherStation({
        'Station ID': '000001',
        'Station Name': 'Example Station',
        'Latitude': -33.86,
        'Longitude': 151.21,
        'Elevation': elevation
    })
    weather_data = WeatherData(pd.DataFrame({
        'DryBulbTemperature': wx_today['t_db'],
        'RelativeHumidity': wx_today['rh'] * 100,
        'SeaLevelPressure': wx_today['p_sl'] / 100
    }), station=station)
    weather_data.infer_psychro(progress=True)
    print(weather_data.data.round(4).to_string())

    print("\nOperations log:")
    for op in weather_data.operations_log:
        print(f"- {op['class']}.{op['method']}")

if __name__ == '__main__':
    main()
