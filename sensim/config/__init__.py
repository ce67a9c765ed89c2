"""
配置模块
========

- settings: 预置传感器、仿真与日志配置
"""
from .settings import (
    Config,
    SensorProfile,
    SimulationConfig,
    LoggingConfig,
    configure_logging
)

__all__ = [
    'Config',
    'SensorProfile',
    'SimulationConfig',
    'LoggingConfig',
    'configure_logging'
]
