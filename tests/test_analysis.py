"""
分析模块测试
"""

import json
import math

import numpy as np
import pytest

from sensim.analysis.logger import ReadingLogger, RingBuffer
from sensim.analysis.analyzer import ReadingAnalyzer
from sensim.core.distribution import GaussianDistribution
from sensim.core.random_source import NumpyRandomSource
from sensim.sensors import SensorSimulator, create_barometer


class TestRingBuffer:
    """环形缓冲区测试"""

    def test_append(self):
        """测试添加"""
        buf = RingBuffer(capacity=5)

        for i in range(3):
            buf.append(i)

        assert buf.size == 3
        assert buf.get_all() == [0, 1, 2]

    def test_overflow(self):
        """测试溢出"""
        buf = RingBuffer(capacity=5)

        for i in range(10):
            buf.append(i)

        assert buf.size == 5
        assert buf.get_all() == [5, 6, 7, 8, 9]

    def test_get_recent(self):
        """测试获取最近"""
        buf = RingBuffer(capacity=10)

        for i in range(10):
            buf.append(i)

        recent = buf.get_recent(3)
        assert recent == [7, 8, 9]

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            RingBuffer(capacity=0)


class TestReadingLogger:
    """读数记录器测试"""

    def test_record(self):
        """测试测量并记录"""
        sensor = SensorSimulator(1.0, 0.1, 0.1, NumpyRandomSource(4), name="probe")
        recorder = ReadingLogger()

        value = recorder.record(sensor)

        assert value == sensor.peek()
        assert recorder.channels == ["probe"]
        assert recorder.get_values("probe")[0] == pytest.approx(float(value))

    def test_record_many_and_statistics(self):
        """测试批量记录与统计"""
        sensor = SensorSimulator(5.0, 0.0, 0.0, NumpyRandomSource(4), name="fixed")
        recorder = ReadingLogger()
        values = recorder.record_many(sensor, 20)

        assert len(values) == 20
        stats = recorder.get_statistics()
        assert stats['total_records'] == 20
        assert stats['channel_stats']['fixed']['mean'] == pytest.approx(5.0)
        assert stats['channel_stats']['fixed']['std'] == pytest.approx(0.0)

    def test_buffer_limit(self):
        """测试缓冲区容量"""
        recorder = ReadingLogger(buffer_size=10)
        for i in range(25):
            recorder.log_value("ch", float(i))

        assert recorder.total_records == 25
        assert list(recorder.get_values("ch")) == [float(i) for i in range(15, 25)]

    def test_unknown_channel(self):
        assert ReadingLogger().get_values("missing").size == 0

    def test_save_and_load(self, tmp_path):
        """测试文件保存与加载"""
        recorder = ReadingLogger()
        for i in range(5):
            recorder.log_value("a", i * 0.5, timestamp=float(i))

        path = tmp_path / "out" / "readings.json"
        recorder.save_to_file(str(path))

        with open(path) as f:
            data = json.load(f)
        assert len(data['channels']['a']) == 5

        loaded = ReadingLogger()
        loaded.load_from_file(str(path))
        assert list(loaded.get_values("a")) == [0.0, 0.5, 1.0, 1.5, 2.0]

    def test_clear(self):
        recorder = ReadingLogger()
        recorder.log_value("a", 1.0)
        recorder.clear()
        assert recorder.total_records == 0
        assert recorder.channels == []


class TestReadingAnalyzer:
    """读数分析器测试"""

    def test_summarize(self):
        """测试统计"""
        analyzer = ReadingAnalyzer()
        summary = analyzer.summarize([1.0, 2.0, 3.0], ideal_value=1.5)

        assert summary.count == 3
        assert summary.mean == pytest.approx(2.0)
        assert summary.min_value == 1.0
        assert summary.max_value == 3.0
        assert summary.bias == pytest.approx(0.5)

    def test_summarize_empty(self):
        summary = ReadingAnalyzer().summarize([], ideal_value=0.0)
        assert summary.count == 0
        assert math.isnan(summary.mean)

    def test_expected_band(self):
        low, high = ReadingAnalyzer.expected_band(100.0, 3.0, 1.0)
        assert (low, high) == (92.0, 108.0)

    def test_fraction_within(self):
        """测试误差带占比"""
        analyzer = ReadingAnalyzer()
        fraction = analyzer.fraction_within([99.0, 100.0, 107.0, 120.0], 100.0, 3.0, 1.0)
        assert fraction == pytest.approx(0.75)
        assert math.isnan(analyzer.fraction_within([], 100.0, 3.0, 1.0))

    def test_barometer_band(self):
        """测试气压计读数误差带覆盖率"""
        sensor = create_barometer(NumpyRandomSource(12))
        values = sensor.measure_many(5000)
        fraction = ReadingAnalyzer().fraction_within(values, 101325.0, 100.0, 12.0)
        assert fraction >= 0.95

    def test_normality_rejects_uniform(self):
        """测试均匀数据不通过正态性检验"""
        values = np.random.default_rng(0).uniform(size=5000)
        result = ReadingAnalyzer().normality_test(values)
        assert result.p_value < 0.01
        assert not result.is_normal

    def test_normality_p_value_range(self):
        sensor = create_barometer(NumpyRandomSource(12))
        result = ReadingAnalyzer().normality_test(sensor.measure_many(500))
        assert 0.0 <= result.p_value <= 1.0

    def test_normality_too_few_samples(self):
        result = ReadingAnalyzer().normality_test([1.0, 2.0])
        assert math.isnan(result.p_value)
        assert not result.is_normal

    def test_normality_constant_values(self):
        sensor = SensorSimulator(2.0, 0.0, 0.0, NumpyRandomSource(1))
        result = ReadingAnalyzer().normality_test(sensor.measure_many(50))
        assert math.isnan(result.p_value)

    def test_compare_to_shifted_distribution(self):
        """测试与偏移分布比较"""
        sensor = SensorSimulator(0.0, 0.0, 3.0, NumpyRandomSource(8))
        values = sensor.measure_many(2000)

        shifted = GaussianDistribution(10.0, 1.0)
        assert ReadingAnalyzer().compare_to_distribution(values, shifted).p_value < 0.01

    def test_compare_to_point_mass(self):
        result = ReadingAnalyzer().compare_to_distribution(
            [1.0, 1.0], GaussianDistribution(1.0, 0.0))
        assert math.isnan(result.p_value)
