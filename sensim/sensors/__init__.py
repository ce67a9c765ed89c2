"""
传感器仿真模块
==============

仿真传感器的误差特性:
- 绝对误差 (固定偏置)
- 相对误差 (高斯噪声)
- 常用传感器预置
"""

from .sensor_simulator import SensorSimulator
from .presets import create_gps_latitude_sensor, create_barometer, create_sensor

__all__ = [
    'SensorSimulator',
    'create_gps_latitude_sensor',
    'create_barometer',
    'create_sensor'
]
