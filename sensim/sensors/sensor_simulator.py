"""
传感器仿真器
============

按精度特性产生偏离真值的仿真读数:
- 绝对误差 (准确度): 每个仿真单元一次性抽取的固定偏置
- 相对误差 (精密度): 每次测量的高斯噪声
- 3σ 约定: 误差范围视为 ±3 个标准差

仿真器不提供内部锁，同一实例应由单一所有者使用。
"""

import logging
import math
from typing import Optional

import numpy as np

from ..core.constants import MeasureVal, SimulationConstants, UNSET_READING
from ..core.base_config import ConfigValidator
from ..core.distribution import GaussianDistribution
from ..core.random_source import RandomSource, as_random_source

logger = logging.getLogger('SENSIM.Simulator')


class SensorSimulator:
    """
    传感器仿真器

    特性:
    - 构造时抽取一次绝对误差偏置
    - 任一参数变化后立即重建噪声分布
    - measure() 独立同分布抽样，peek() 只读
    """

    def __init__(self, ideal_value: float, absolute_error_range: float,
                 relative_error: float, random_source,
                 name: str = "sensor"):
        """
        Parameters:
            ideal_value: 理想值 (无误差传感器的读数)
            absolute_error_range: 绝对误差范围 (准确度)
            relative_error: 相对误差 (精密度)
            random_source: 随机源 (RandomSource / numpy Generator / random.Random)
            name: 传感器名称
        """
        self.name = name
        self._random_source: RandomSource = as_random_source(random_source)

        self._ideal_value = self._to_measure(ideal_value)
        self._absolute_error_offset = MeasureVal(0)
        self._relative_error_std_dev = MeasureVal(0)
        self._effective_center = self._ideal_value
        self._distribution: Optional[GaussianDistribution] = None

        # 尚未测量
        self._last_measured_value = UNSET_READING
        self._measurement_count = 0

        self.set_relative_error(relative_error)
        self.set_absolute_error_range(absolute_error_range)

        logger.debug(
            "传感器 %s 已创建: 理想值=%s 偏置=%s 噪声σ=%s",
            self.name, self._ideal_value,
            self._absolute_error_offset, self._relative_error_std_dev
        )

    @classmethod
    def new_default(cls, random_source, name: str = "sensor") -> 'SensorSimulator':
        """零配置仿真器，之后通过 set_* 方法配置"""
        return cls(0.0, 0.0, 0.0, random_source, name=name)

    @classmethod
    def from_profile(cls, profile, random_source) -> 'SensorSimulator':
        """由 SensorProfile 创建"""
        return cls(
            profile.ideal_value,
            profile.absolute_error_range,
            profile.relative_error,
            random_source,
            name=profile.name
        )

    # ------------------------------------------------------------ 数值处理
    @staticmethod
    def _to_measure(value: float) -> MeasureVal:
        """转换为单精度；超出范围的值映射为带符号的无穷大"""
        try:
            # 非数值输入抛出 TypeError
            math.isfinite(value)
            with np.errstate(over='ignore'):
                return MeasureVal(value)
        except OverflowError:
            return MeasureVal(np.inf) if value > 0 else MeasureVal(-np.inf)

    def _sanitize_error(self, value: float, name: str) -> MeasureVal:
        """非有限误差输入按 0 处理 (包括转换为单精度后溢出的值)"""
        converted = self._to_measure(ConfigValidator.sanitize_finite(value))
        if not ConfigValidator.is_finite(value) or not np.isfinite(converted):
            logger.warning("传感器 %s 的 %s 非有限 (%s)，按 0 处理",
                           self.name, name, value)
            return MeasureVal(0)
        return converted

    def _rebuild_distribution(self):
        """重新计算有效中心并重建噪声分布"""
        with np.errstate(over='ignore'):
            self._effective_center = MeasureVal(
                self._ideal_value + self._absolute_error_offset
            )
        self._distribution = GaussianDistribution(
            self._effective_center, self._relative_error_std_dev
        )

    # ------------------------------------------------------------ 配置
    def set_absolute_error_range(self, err_range: float):
        """
        设置绝对误差范围 (准确度)

        以 N(0, range/3) 抽取一个样本，取绝对值作为固定偏置。
        每次调用都会重新抽样。
        """
        err_range = self._sanitize_error(err_range, "absolute_error_range")
        std_dev = SimulationConstants.range_to_std_dev(err_range)
        offset_dist = GaussianDistribution(0.0, std_dev)
        self.set_absolute_error_offset(offset_dist.sample(self._random_source))

    def set_absolute_error_offset(self, err_offset: float):
        """
        直接设置绝对误差偏置

        不使用随机源，主要用于确定性测试；一般应使用 set_absolute_error_range。
        """
        err_offset = self._sanitize_error(err_offset, "absolute_error_offset")
        self._absolute_error_offset = MeasureVal(abs(err_offset))
        self._rebuild_distribution()
        logger.debug("传感器 %s 偏置 -> %s", self.name, self._absolute_error_offset)

    def set_relative_error(self, err: float):
        """设置相对误差 (精密度): σ = |err| / 3"""
        err = self._sanitize_error(err, "relative_error")
        self._relative_error_std_dev = SimulationConstants.range_to_std_dev(err)
        self._rebuild_distribution()

    def set_ideal_value(self, value: float):
        """设置理想值，读数在此基础上叠加绝对与相对误差"""
        self._ideal_value = self._to_measure(value)
        self._rebuild_distribution()

    # ------------------------------------------------------------ 测量
    def measure(self) -> MeasureVal:
        """抽取一个仿真读数并记录为最近读数"""
        value = self._distribution.sample(self._random_source)
        self._last_measured_value = value
        self._measurement_count += 1
        return value

    def measure_many(self, count: int) -> np.ndarray:
        """连续测量 count 次"""
        if count < 0:
            raise ValueError(f"测量次数不能为负: {count}")
        return np.array([self.measure() for _ in range(count)], dtype=MeasureVal)

    def peek(self) -> MeasureVal:
        """返回最近读数，不抽样；尚未测量时返回 NaN"""
        return self._last_measured_value

    # ------------------------------------------------------------ 只读属性
    @property
    def ideal_value(self) -> MeasureVal:
        return self._ideal_value

    @property
    def absolute_error_offset(self) -> MeasureVal:
        return self._absolute_error_offset

    @property
    def relative_error_std_dev(self) -> MeasureVal:
        return self._relative_error_std_dev

    @property
    def effective_center(self) -> MeasureVal:
        return self._effective_center

    @property
    def noise_distribution(self) -> GaussianDistribution:
        return self._distribution

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    @property
    def measurement_count(self) -> int:
        return self._measurement_count

    @property
    def has_reading(self) -> bool:
        return self._measurement_count > 0

    def __repr__(self) -> str:
        return (f"SensorSimulator(name={self.name!r}, ideal_value={self._ideal_value}, "
                f"absolute_error_offset={self._absolute_error_offset}, "
                f"relative_error_std_dev={self._relative_error_std_dev})")
