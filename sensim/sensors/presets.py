"""
预置传感器
==========

常见传感器的快捷构造:
- GPS纬度 (绝对误差 2e-6°, 相对误差 4.5e-5°)
- 气压计 (绝对误差 100 Pa, 相对误差 12 Pa)
"""

from ..config.settings import Config
from ..core.constants import (
    ATMOSPHERIC_PRESSURE,
    BAROMETER_ABS_ERROR,
    BAROMETER_REL_ERROR,
    HOME_LATITUDE,
    GPS_HORIZ_ABS_ERROR,
    GPS_HORIZ_REL_ERROR
)
from .sensor_simulator import SensorSimulator


def create_gps_latitude_sensor(random_source,
                               latitude: float = HOME_LATITUDE) -> SensorSimulator:
    """GPS纬度传感器 (°)"""
    return SensorSimulator(latitude, GPS_HORIZ_ABS_ERROR, GPS_HORIZ_REL_ERROR,
                           random_source, name="gps_latitude")


def create_barometer(random_source,
                     pressure: float = ATMOSPHERIC_PRESSURE) -> SensorSimulator:
    """气压计 (Pa)"""
    return SensorSimulator(pressure, BAROMETER_ABS_ERROR, BAROMETER_REL_ERROR,
                           random_source, name="barometer")


def create_sensor(preset_name: str, random_source) -> SensorSimulator:
    """按配置中的预置名称创建传感器"""
    return SensorSimulator.from_profile(Config.get_preset(preset_name), random_source)
