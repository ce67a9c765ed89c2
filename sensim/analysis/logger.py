"""
读数记录器
==========

仿真读数的内存记录:
- 多通道环形缓冲
- 通道统计
- JSON 导出/导入
"""

import json
import os
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np


@dataclass
class ReadingPoint:
    """单个读数"""
    index: int
    value: float
    timestamp: float


class RingBuffer:
    """环形缓冲区"""

    def __init__(self, capacity: int = 10000):
        if capacity <= 0:
            raise ValueError(f"缓冲区容量必须为正: {capacity}")
        self.capacity = capacity
        self.buffer: List = [None] * capacity
        self.head = 0
        self.tail = 0
        self.size = 0

    def append(self, item):
        """添加元素"""
        self.buffer[self.tail] = item
        self.tail = (self.tail + 1) % self.capacity

        if self.size < self.capacity:
            self.size += 1
        else:
            self.head = (self.head + 1) % self.capacity

    def get_all(self) -> List:
        """获取所有元素"""
        if self.size == 0:
            return []

        if self.head < self.tail:
            return self.buffer[self.head:self.tail]
        else:
            return self.buffer[self.head:] + self.buffer[:self.tail]

    def get_recent(self, n: int) -> List:
        """获取最近n个元素"""
        all_items = self.get_all()
        return all_items[-n:] if n < len(all_items) else all_items

    def clear(self):
        """清空"""
        self.buffer = [None] * self.capacity
        self.head = 0
        self.tail = 0
        self.size = 0


class ReadingLogger:
    """
    读数记录器

    每个通道对应一个仿真传感器 (默认以传感器名称为通道名)。
    """

    def __init__(self, buffer_size: int = 10000):
        """
        Parameters:
            buffer_size: 每通道缓冲区大小
        """
        self.buffer_size = buffer_size
        self.buffers: Dict[str, RingBuffer] = {}
        self.counters: Dict[str, int] = {}
        self.total_records = 0

    @property
    def channels(self) -> List[str]:
        return list(self.buffers.keys())

    def log_value(self, channel: str, value: float, timestamp: float = None):
        """记录一个读数"""
        if timestamp is None:
            timestamp = time.time()

        if channel not in self.buffers:
            self.buffers[channel] = RingBuffer(self.buffer_size)
            self.counters[channel] = 0

        self.buffers[channel].append(ReadingPoint(
            index=self.counters[channel],
            value=float(value),
            timestamp=timestamp
        ))
        self.counters[channel] += 1
        self.total_records += 1

    def record(self, simulator, channel: Optional[str] = None) -> float:
        """
        执行一次测量并记录

        Returns:
            测量值
        """
        value = simulator.measure()
        self.log_value(channel or simulator.name, value)
        return value

    def record_many(self, simulator, count: int,
                    channel: Optional[str] = None) -> np.ndarray:
        """连续测量并记录 count 次"""
        return np.array([self.record(simulator, channel) for _ in range(count)])

    def get_values(self, channel: str) -> np.ndarray:
        """获取通道读数序列"""
        if channel not in self.buffers:
            return np.array([])
        return np.array([p.value for p in self.buffers[channel].get_all()])

    def get_statistics(self) -> Dict:
        """获取记录统计"""
        channel_stats = {}
        for ch, buf in self.buffers.items():
            values = [p.value for p in buf.get_all()]
            if values:
                channel_stats[ch] = {
                    'count': len(values),
                    'mean': float(np.mean(values)),
                    'std': float(np.std(values)),
                    'min': float(np.min(values)),
                    'max': float(np.max(values))
                }

        return {
            'total_records': self.total_records,
            'channels': self.channels,
            'channel_stats': channel_stats
        }

    def save_to_file(self, filename: str):
        """保存到JSON文件"""
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)

        data = {
            'total_records': self.total_records,
            'channels': {
                ch: [
                    {'index': p.index, 'value': p.value, 'timestamp': p.timestamp}
                    for p in buf.get_all()
                ]
                for ch, buf in self.buffers.items()
            }
        }

        with open(filename, 'w') as f:
            json.dump(data, f, indent=2)

    def load_from_file(self, filename: str):
        """从JSON文件加载 (追加到当前记录)"""
        with open(filename, 'r') as f:
            data = json.load(f)

        for ch, points in data.get('channels', {}).items():
            for p in points:
                self.log_value(ch, p['value'], p.get('timestamp'))

    def clear(self):
        """清空所有记录"""
        self.buffers.clear()
        self.counters.clear()
        self.total_records = 0
