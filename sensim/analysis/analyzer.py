"""
读数分析器
==========

仿真读数的统计分析:
- 均值、标准差、偏差
- 误差带覆盖率
- 正态性检验
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from scipy import stats


@dataclass
class ReadingStatistics:
    """读数统计"""
    count: int = 0
    mean: float = float('nan')
    std_dev: float = float('nan')
    min_value: float = float('nan')
    max_value: float = float('nan')
    bias: float = float('nan')          # 均值 - 理想值


@dataclass
class NormalityResult:
    """正态性检验结果"""
    statistic: float
    p_value: float
    is_normal: bool                     # p_value >= alpha


class ReadingAnalyzer:
    """
    读数分析器

    误差带取 理想值 ± 2*(绝对误差范围 + 相对误差)。
    """

    # 正态性检验最少样本数 (scipy.stats.normaltest 的要求)
    MIN_NORMALITY_SAMPLES = 8

    def __init__(self, alpha: float = 0.01):
        """
        Parameters:
            alpha: 正态性检验显著性水平
        """
        self.alpha = alpha

    def summarize(self, values, ideal_value: float) -> ReadingStatistics:
        """计算读数统计"""
        values = np.asarray(values, dtype=np.float64)
        if values.size == 0:
            return ReadingStatistics()

        mean = float(np.mean(values))
        return ReadingStatistics(
            count=int(values.size),
            mean=mean,
            std_dev=float(np.std(values)),
            min_value=float(np.min(values)),
            max_value=float(np.max(values)),
            bias=mean - float(ideal_value)
        )

    @staticmethod
    def expected_band(ideal_value: float, absolute_error_range: float,
                      relative_error: float) -> Tuple[float, float]:
        """误差带上下限"""
        half_width = 2.0 * (abs(absolute_error_range) + abs(relative_error))
        return ideal_value - half_width, ideal_value + half_width

    def fraction_within(self, values, ideal_value: float,
                        absolute_error_range: float,
                        relative_error: float) -> float:
        """误差带内读数占比"""
        values = np.asarray(values, dtype=np.float64)
        if values.size == 0:
            return float('nan')

        low, high = self.expected_band(ideal_value, absolute_error_range, relative_error)
        inside = (values >= low) & (values <= high)
        return float(np.mean(inside))

    def normality_test(self, values) -> NormalityResult:
        """D'Agostino-Pearson 正态性检验"""
        values = np.asarray(values, dtype=np.float64)
        if values.size < self.MIN_NORMALITY_SAMPLES or np.ptp(values) == 0:
            return NormalityResult(statistic=float('nan'), p_value=float('nan'),
                                   is_normal=False)

        statistic, p_value = stats.normaltest(values)
        return NormalityResult(
            statistic=float(statistic),
            p_value=float(p_value),
            is_normal=bool(p_value >= self.alpha)
        )

    def compare_to_distribution(self, values, distribution) -> NormalityResult:
        """
        与噪声分布做 Kolmogorov-Smirnov 检验

        Parameters:
            values: 读数
            distribution: GaussianDistribution (需 std_dev > 0)
        """
        values = np.asarray(values, dtype=np.float64)
        if values.size == 0 or distribution.is_point_mass:
            return NormalityResult(statistic=float('nan'), p_value=float('nan'),
                                   is_normal=False)

        result = stats.kstest(values, 'norm',
                              args=(float(distribution.mean), float(distribution.std_dev)))
        return NormalityResult(
            statistic=float(result.statistic),
            p_value=float(result.pvalue),
            is_normal=bool(result.pvalue >= self.alpha)
        )
