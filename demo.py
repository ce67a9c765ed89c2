#!/usr/bin/env python3
"""
传感器仿真器演示
================

演示:
1. 系统熵源驱动的GPS纬度传感器
2. 固定种子的可复现读数
3. 借用调用方的 numpy 生成器
4. 气压计读数统计
"""

import numpy as np

from sensim import NumpyRandomSource, SensorSimulator
from sensim.analysis import ReadingAnalyzer, ReadingLogger
from sensim.core.constants import (
    HAY_SEED,
    HOME_LATITUDE,
    GPS_HORIZ_ABS_ERROR,
    GPS_HORIZ_REL_ERROR,
    ATMOSPHERIC_PRESSURE,
    BAROMETER_ABS_ERROR,
    BAROMETER_REL_ERROR
)
from sensim.sensors import create_barometer


def demo_entropy_source():
    """演示不可预测随机源"""
    print("\n" + "="*60)
    print("演示1: 系统熵源")
    print("="*60)

    fake_gps_lat = SensorSimulator(HOME_LATITUDE, GPS_HORIZ_ABS_ERROR,
                                   GPS_HORIZ_REL_ERROR,
                                   NumpyRandomSource.from_entropy())
    for _ in range(5):
        print(f"  new lat: {fake_gps_lat.measure()}")
        print(f"  old lat: {fake_gps_lat.peek()}")


def demo_seeded_source():
    """演示固定种子可复现"""
    print("\n" + "="*60)
    print("演示2: 固定种子")
    print("="*60)

    runs = []
    for _ in range(2):
        sensor = SensorSimulator(HOME_LATITUDE, GPS_HORIZ_ABS_ERROR,
                                 GPS_HORIZ_REL_ERROR,
                                 NumpyRandomSource.from_seed_bytes(HAY_SEED))
        runs.append((sensor.measure(), sensor.measure()))

    for i, (first_val, second_val) in enumerate(runs):
        print(f"  运行{i + 1}: first: {first_val} second: {second_val}")
    print(f"  结果一致: {runs[0] == runs[1]}")


def demo_borrowed_generator():
    """演示借用 numpy 生成器"""
    print("\n" + "="*60)
    print("演示3: 借用生成器")
    print("="*60)

    rng = np.random.default_rng(2018)
    sensor = SensorSimulator(ATMOSPHERIC_PRESSURE, BAROMETER_ABS_ERROR,
                             BAROMETER_REL_ERROR, rng, name="barometer")
    print(f"  拥有生成器: {sensor.random_source.owns_generator}")
    print(f"  读数: {sensor.measure_many(3)}")


def demo_statistics():
    """演示读数统计"""
    print("\n" + "="*60)
    print("演示4: 气压计统计")
    print("="*60)

    sensor = create_barometer(NumpyRandomSource(101325))
    recorder = ReadingLogger()
    values = recorder.record_many(sensor, 10000)

    analyzer = ReadingAnalyzer()
    summary = analyzer.summarize(values, ATMOSPHERIC_PRESSURE)
    fraction = analyzer.fraction_within(values, ATMOSPHERIC_PRESSURE,
                                        BAROMETER_ABS_ERROR, BAROMETER_REL_ERROR)
    print(f"  偏置: {sensor.absolute_error_offset:.3f} Pa")
    print(f"  均值: {summary.mean:.3f} Pa, 标准差: {summary.std_dev:.3f} Pa")
    print(f"  误差带内占比: {fraction:.4f}")


def main():
    """主函数"""
    print("\n" + "#"*60)
    print("#  传感器仿真器 - 演示")
    print("#"*60)

    demo_entropy_source()
    demo_seeded_source()
    demo_borrowed_generator()
    demo_statistics()

    print("\n" + "="*60)
    print("所有演示完成!")
    print("="*60)


if __name__ == '__main__':
    main()
