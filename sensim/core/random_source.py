"""
随机源 (Random Sources)
=======================

传感器仿真所依赖的外部随机能力:
- 产生 [0, 1) 均匀分布浮点数
- 产生标准正态分布样本 (默认 Box-Muller 变换)
- 可设定种子以保证可复现

随机源必须显式注入仿真器，不存在隐式的全局默认随机源。
一个随机源同一时刻只应被一个仿真器使用，交错抽样会破坏
固定种子下的可复现性。
"""

import math
import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Union

import numpy as np


class RandomSourceError(RuntimeError):
    """随机源无法产生有效样本 (耗尽或产生非有限值)"""


class RandomSource(ABC):
    """
    随机源基类

    子类只需实现 uniform()；拥有原生正态采样的子类可覆盖
    standard_normal()。
    """

    owns_generator: bool = True

    def __init__(self):
        self._spare_normal: Optional[float] = None

    @abstractmethod
    def uniform(self) -> float:
        """产生一个 [0, 1) 均匀分布样本"""

    def standard_normal(self) -> float:
        """
        Box-Muller 变换产生 N(0, 1) 样本

        每次变换得到两个独立样本，第二个缓存到下次调用。
        """
        if self._spare_normal is not None:
            z = self._spare_normal
            self._spare_normal = None
            return z

        # 1 - u 落在 (0, 1]，避免 log(0)
        u1 = 1.0 - self.uniform()
        u2 = self.uniform()
        radius = math.sqrt(-2.0 * math.log(u1))
        theta = 2.0 * math.pi * u2

        self._spare_normal = radius * math.sin(theta)
        return radius * math.cos(theta)

    def gaussian(self, mean: float, std_dev: float) -> float:
        """
        产生 N(mean, std_dev²) 样本

        std_dev == 0 时返回 mean (点质量)，但仍消耗一个标准正态样本，
        以保持随机流位置一致。
        """
        if std_dev < 0:
            raise ValueError(f"标准差不能为负: {std_dev}")
        z = self.standard_normal()
        return mean + std_dev * z


class NumpyRandomSource(RandomSource):
    """
    基于 numpy.random.Generator 的随机源

    - NumpyRandomSource(seed): 自建 PCG64 生成器 (拥有)
    - NumpyRandomSource(generator=g): 借用调用方的生成器
    """

    def __init__(self, seed: Optional[Union[int, Iterable[int]]] = None,
                 generator: Optional[np.random.Generator] = None):
        super().__init__()
        if generator is not None and seed is not None:
            raise ValueError("seed 与 generator 不能同时指定")

        if generator is not None:
            self._generator = generator
            self.owns_generator = False
        else:
            self._generator = np.random.default_rng(seed)
            self.owns_generator = True

    @classmethod
    def from_entropy(cls) -> 'NumpyRandomSource':
        """使用操作系统熵源创建 (不可预测)"""
        return cls()

    @classmethod
    def from_seed_bytes(cls, seed: Union[bytes, Iterable[int]]) -> 'NumpyRandomSource':
        """
        由字节种子创建 (如32字节种子)

        字节按小端序解释为整数种子。
        """
        seed = bytes(seed)
        if not seed:
            raise ValueError("种子字节不能为空")
        return cls(int.from_bytes(seed, 'little'))

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def uniform(self) -> float:
        return float(self._generator.random())

    def standard_normal(self) -> float:
        # numpy 原生 ziggurat 算法
        return float(self._generator.standard_normal())


class PythonRandomSource(RandomSource):
    """
    基于标准库 random.Random 的随机源

    正态样本由基类的 Box-Muller 变换产生。
    """

    def __init__(self, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        super().__init__()
        if rng is not None and seed is not None:
            raise ValueError("seed 与 rng 不能同时指定")

        if rng is not None:
            self._rng = rng
            self.owns_generator = False
        else:
            self._rng = random.Random(seed)
            self.owns_generator = True

    def uniform(self) -> float:
        return self._rng.random()


class SequenceRandomSource(RandomSource):
    """
    回放预先记录的均匀样本

    用于确定性回放；样本用尽后抛出 RandomSourceError。
    """

    def __init__(self, values: Iterable[float]):
        super().__init__()
        self._values: List[float] = [float(v) for v in values]
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"均匀样本必须位于 [0, 1): {v}")
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def uniform(self) -> float:
        if self._position >= len(self._values):
            raise RandomSourceError(
                f"随机序列已耗尽 (共 {len(self._values)} 个样本)"
            )
        value = self._values[self._position]
        self._position += 1
        return value


def as_random_source(source) -> RandomSource:
    """
    将调用方提供的对象转换为 RandomSource

    numpy Generator 与 random.Random 以借用方式包装。
    """
    if isinstance(source, RandomSource):
        return source
    if isinstance(source, np.random.Generator):
        return NumpyRandomSource(generator=source)
    if isinstance(source, random.Random):
        return PythonRandomSource(rng=source)
    raise TypeError(f"不支持的随机源类型: {type(source).__name__}")


__all__ = [
    'RandomSourceError',
    'RandomSource',
    'NumpyRandomSource',
    'PythonRandomSource',
    'SequenceRandomSource',
    'as_random_source'
]
