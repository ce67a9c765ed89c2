"""
传感器仿真核心框架 (Core Framework)
===================================

核心组件:
---------
1. constants - 仿真常数与测量值类型
2. random_source - 随机源抽象与实现
3. distribution - 高斯分布采样器
4. base_config - 配置验证与数值清洗
"""

# ==========================================
# 常数
# ==========================================
from .constants import (
    MeasureVal,
    SimulationConstants,
    SIGMA_RANGE_FACTOR,
    UNSET_READING,
    HAY_SEED
)

# ==========================================
# 随机源
# ==========================================
from .random_source import (
    RandomSourceError,
    RandomSource,
    NumpyRandomSource,
    PythonRandomSource,
    SequenceRandomSource,
    as_random_source
)

# ==========================================
# 分布与验证
# ==========================================
from .distribution import GaussianDistribution
from .base_config import (
    ConfigValidator,
    ValidationResult,
    ValidationSeverity
)

__all__ = [
    'MeasureVal',
    'SimulationConstants',
    'SIGMA_RANGE_FACTOR',
    'UNSET_READING',
    'HAY_SEED',
    'RandomSourceError',
    'RandomSource',
    'NumpyRandomSource',
    'PythonRandomSource',
    'SequenceRandomSource',
    'as_random_source',
    'GaussianDistribution',
    'ConfigValidator',
    'ValidationResult',
    'ValidationSeverity'
]
