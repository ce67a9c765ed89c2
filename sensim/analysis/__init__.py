"""
数据分析模块
============

仿真读数的记录与统计分析:
- 读数记录器
- 误差带与正态性分析
"""

from .logger import ReadingLogger, ReadingPoint, RingBuffer
from .analyzer import ReadingAnalyzer, ReadingStatistics, NormalityResult

__all__ = [
    'ReadingLogger',
    'ReadingPoint',
    'RingBuffer',
    'ReadingAnalyzer',
    'ReadingStatistics',
    'NormalityResult'
]
