"""
仿真常数 (Simulation Constants)
===============================

定义传感器仿真中使用的基本常数:
- 测量值数值类型 (单精度浮点)
- 3σ 约定: 误差"范围"覆盖 ±3 个标准差
- 未测量哨兵值 (NaN)
- 典型传感器参考值
"""

from dataclasses import dataclass

import numpy as np


# 测量值类型 - 所有读数统一使用单精度
MeasureVal = np.float32


@dataclass(frozen=True)
class SimulationConstants:
    """
    仿真常数集合 (不可变)

    SIGMA_RANGE_FACTOR 是全部误差推导的基准，修改它会改变
    绝对误差与相对误差的全部语义。
    """
    # 3σ 约定: 满量程误差 ≈ 3 个标准差 (约99.7%概率质量)
    SIGMA_RANGE_FACTOR: float = 3.0

    # 标准大气压 (Pa)
    ATMOSPHERIC_PRESSURE: float = 101325.0
    # 气压计典型误差 (Pa)
    BAROMETER_ABS_ERROR: float = 100.0
    BAROMETER_REL_ERROR: float = 12.0

    # 伯克利纬度 (°)
    HOME_LATITUDE: float = 37.8716
    # 典型GPS水平误差 (°)
    GPS_HORIZ_ABS_ERROR: float = 2e-6
    GPS_HORIZ_REL_ERROR: float = 4.5e-5

    @classmethod
    def range_to_std_dev(cls, err_range: float) -> MeasureVal:
        """
        误差范围 -> 标准差

        Args:
            err_range: 误差范围 (已清洗为有限值)

        Returns:
            非负标准差 |range| / 3
        """
        return MeasureVal(abs(MeasureVal(err_range))) / MeasureVal(cls.SIGMA_RANGE_FACTOR)


# ==========================================
# 模块级常量（便捷访问）
# ==========================================
_constants = SimulationConstants()

SIGMA_RANGE_FACTOR = _constants.SIGMA_RANGE_FACTOR
UNSET_READING = MeasureVal(np.nan)

ATMOSPHERIC_PRESSURE = _constants.ATMOSPHERIC_PRESSURE
BAROMETER_ABS_ERROR = _constants.BAROMETER_ABS_ERROR
BAROMETER_REL_ERROR = _constants.BAROMETER_REL_ERROR

HOME_LATITUDE = _constants.HOME_LATITUDE
GPS_HORIZ_ABS_ERROR = _constants.GPS_HORIZ_ABS_ERROR
GPS_HORIZ_REL_ERROR = _constants.GPS_HORIZ_REL_ERROR

# 可复现示例使用的32字节种子
HAY_SEED = bytes([0xFE, 0xED, 0xAB, 0xBA, 0xDE, 0xAD, 0xBE, 0xEF] * 4)

# HAY_SEED + GPS纬度预置下的前两个读数 (PCG64 + numpy 正态采样)
HAY_SEED_FIRST_READING = MeasureVal(37.87159)
HAY_SEED_SECOND_READING = MeasureVal(37.87158)


__all__ = [
    'MeasureVal',
    'SimulationConstants',
    'SIGMA_RANGE_FACTOR',
    'UNSET_READING',
    'ATMOSPHERIC_PRESSURE',
    'BAROMETER_ABS_ERROR',
    'BAROMETER_REL_ERROR',
    'HOME_LATITUDE',
    'GPS_HORIZ_ABS_ERROR',
    'GPS_HORIZ_REL_ERROR',
    'HAY_SEED',
    'HAY_SEED_FIRST_READING',
    'HAY_SEED_SECOND_READING'
]
