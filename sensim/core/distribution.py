"""
高斯分布采样器
==============

给定均值与标准差，借助随机源产生单个正态样本。
"""

import math
from dataclasses import dataclass

import numpy as np

from .constants import MeasureVal
from .random_source import RandomSource, RandomSourceError


@dataclass(frozen=True)
class GaussianDistribution:
    """
    正态分布 N(mean, std_dev²)

    std_dev == 0 为合法的退化情形 (点质量)；均值不做限制，
    非有限均值会直接体现在样本中。
    """
    mean: float
    std_dev: float

    def __post_init__(self):
        if not math.isfinite(self.std_dev) or self.std_dev < 0:
            raise ValueError(f"标准差必须为非负有限值: {self.std_dev}")

    @property
    def is_point_mass(self) -> bool:
        return self.std_dev == 0

    def sample(self, source: RandomSource) -> MeasureVal:
        """
        抽取一个样本

        双精度计算后转换为单精度；恰好消耗一个标准正态样本。
        """
        z = source.standard_normal()
        if not math.isfinite(z):
            raise RandomSourceError(f"随机源产生非有限值: {z}")
        # 超出单精度范围时得到带符号的无穷大
        with np.errstate(over='ignore'):
            return MeasureVal(float(self.mean) + float(self.std_dev) * z)
