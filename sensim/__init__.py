"""
传感器仿真器 (Sensor Simulator)
===============================

按准确度 (绝对误差) 与精密度 (相对误差) 产生仿真传感器读数，
用于在没有硬件的情况下测试依赖传感器的代码。

模块结构:
- core: 常数、随机源、高斯分布、配置验证
- sensors: 传感器仿真器与预置
- config: 全局配置参数
- analysis: 读数记录与统计分析
- cli: 命令行接口
"""

__version__ = "1.0.0"
__author__ = "SENSIM Team"

from .core.constants import MeasureVal, UNSET_READING
from .core.random_source import (
    RandomSource,
    RandomSourceError,
    NumpyRandomSource,
    PythonRandomSource,
    SequenceRandomSource
)
from .core.distribution import GaussianDistribution
from .sensors.sensor_simulator import SensorSimulator
from .config.settings import Config, SensorProfile

__all__ = [
    'MeasureVal',
    'UNSET_READING',
    'RandomSource',
    'RandomSourceError',
    'NumpyRandomSource',
    'PythonRandomSource',
    'SequenceRandomSource',
    'GaussianDistribution',
    'SensorSimulator',
    'Config',
    'SensorProfile'
]
