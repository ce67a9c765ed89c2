#!/usr/bin/env python3
"""
传感器仿真器命令行接口
======================

用法:
    python -m sensim.cli run [--preset PRESET] [--count N] [--seed SEED]
    python -m sensim.cli predict
    python -m sensim.cli analyze [--preset PRESET] [--count N] [--output FILE]
    python -m sensim.cli status
"""

import argparse
import logging
import sys

from .config.settings import Config, LoggingConfig, configure_logging

logger = logging.getLogger('SENSIM.CLI')


def _make_source(seed):
    from .core.random_source import NumpyRandomSource

    if seed is None:
        return NumpyRandomSource.from_entropy()
    return NumpyRandomSource(seed)


def cmd_run(args):
    """连续测量并显示新旧读数"""
    from .sensors.presets import create_sensor

    sensor = create_sensor(args.preset, _make_source(args.seed))
    profile = Config.get_preset(args.preset)
    logger.info("运行 %s: %d 次测量", sensor, args.count)

    for _ in range(args.count):
        # measure() 更新读数，peek() 只读最近读数
        print(f"new {profile.name}: {sensor.measure()} {profile.unit}")
        print(f"old {profile.name}: {sensor.peek()} {profile.unit}")

    return 0


def cmd_predict(args):
    """固定种子示例: 每次运行输出相同的前两个读数"""
    from .core.constants import (
        HAY_SEED,
        HAY_SEED_FIRST_READING,
        HAY_SEED_SECOND_READING
    )
    from .core.random_source import NumpyRandomSource
    from .sensors.presets import create_gps_latitude_sensor

    source = NumpyRandomSource.from_seed_bytes(HAY_SEED)
    sensor = create_gps_latitude_sensor(source)

    first_val = sensor.measure()
    second_val = sensor.measure()
    print(f"first: {first_val} second: {second_val}")

    if (first_val, second_val) != (HAY_SEED_FIRST_READING, HAY_SEED_SECOND_READING):
        logger.error("固定种子读数与预期不符: 预期 %s, %s",
                     HAY_SEED_FIRST_READING, HAY_SEED_SECOND_READING)
        return 1

    return 0


def cmd_analyze(args):
    """统计分析仿真读数"""
    from .analysis.analyzer import ReadingAnalyzer
    from .analysis.logger import ReadingLogger
    from .sensors.presets import create_sensor

    profile = Config.get_preset(args.preset)
    sensor = create_sensor(args.preset, _make_source(args.seed))

    recorder = ReadingLogger(buffer_size=max(args.count, 1))
    values = recorder.record_many(sensor, args.count)

    analyzer = ReadingAnalyzer()
    summary = analyzer.summarize(values, profile.ideal_value)
    fraction = analyzer.fraction_within(values, profile.ideal_value,
                                        profile.absolute_error_range,
                                        profile.relative_error)
    normality = analyzer.normality_test(values)

    print("=" * 50)
    print(f"传感器: {profile.name} ({profile.description})")
    print("=" * 50)
    print(f"理想值: {profile.ideal_value} {profile.unit}")
    print(f"偏置: {sensor.absolute_error_offset} {profile.unit}")
    print(f"噪声σ: {sensor.relative_error_std_dev} {profile.unit}")
    print(f"样本数: {summary.count}")
    print(f"均值: {summary.mean:.6f}")
    print(f"标准差: {summary.std_dev:.6g}")
    print(f"范围: [{summary.min_value:.6f}, {summary.max_value:.6f}]")
    print(f"偏差: {summary.bias:.6g}")
    print(f"误差带内占比: {fraction:.4f}")
    print(f"正态性检验 p值: {normality.p_value:.4f}")

    if args.output:
        recorder.save_to_file(args.output)
        print(f"\n读数已保存到: {args.output}")

    return 0


def cmd_status(args):
    """显示版本与模块状态"""
    from . import __version__

    print("传感器仿真器 (sensim)")
    print("=" * 40)
    print(f"版本: {__version__}")

    print("\n已安装模块:")
    modules = [
        ('core', '核心框架'),
        ('sensors', '传感器'),
        ('config', '配置模块'),
        ('analysis', '数据分析')
    ]

    for module, desc in modules:
        try:
            __import__(f'sensim.{module}')
            status = '✓'
        except ImportError:
            status = '✗'
        print(f"  [{status}] {module}: {desc}")

    print("\n传感器预置:")
    for name, profile in Config.presets.items():
        print(f"  {name}: {profile.ideal_value} {profile.unit} "
              f"(绝对误差 {profile.absolute_error_range}, 相对误差 {profile.relative_error})")

    return 0


def main(argv=None):
    """主入口"""
    parser = argparse.ArgumentParser(
        description='传感器仿真器命令行工具',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  sensim run --preset barometer --count 5
  sensim predict
  sensim analyze --count 10000 --output readings.json
  sensim status
"""
    )
    parser.add_argument('--log-level', type=str, default=None,
                        help='日志级别 (默认读取 SENSIM_LOG_LEVEL)')

    subparsers = parser.add_subparsers(dest='command', help='可用命令')
    presets = sorted(Config.presets)

    # run 命令
    run_parser = subparsers.add_parser('run', help='连续测量')
    run_parser.add_argument('--preset', type=str,
                            default=Config.simulation.default_preset,
                            choices=presets, help='传感器预置')
    run_parser.add_argument('--count', type=int, default=Config.simulation.count,
                            help='测量次数')
    run_parser.add_argument('--seed', type=int, default=Config.simulation.seed,
                            help='随机种子 (默认使用系统熵源)')
    run_parser.set_defaults(func=cmd_run)

    # predict 命令
    predict_parser = subparsers.add_parser('predict', help='固定种子示例')
    predict_parser.set_defaults(func=cmd_predict)

    # analyze 命令
    analyze_parser = subparsers.add_parser('analyze', help='统计分析读数')
    analyze_parser.add_argument('--preset', type=str,
                                default=Config.simulation.default_preset,
                                choices=presets, help='传感器预置')
    analyze_parser.add_argument('--count', type=int, default=10000,
                                help='测量次数')
    analyze_parser.add_argument('--seed', type=int, default=Config.simulation.seed,
                                help='随机种子')
    analyze_parser.add_argument('--output', '-o', type=str,
                                help='读数输出文件 (JSON)')
    analyze_parser.set_defaults(func=cmd_analyze)

    # status 命令
    status_parser = subparsers.add_parser('status', help='显示状态')
    status_parser.set_defaults(func=cmd_status)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    # 命令行级别只作用于本次运行，不修改全局配置
    configure_logging(LoggingConfig(level=args.log_level.upper()) if args.log_level else None)

    if getattr(args, 'count', 0) < 0:
        parser.error("--count 不能为负")
    if getattr(args, 'seed', None) is not None and args.seed < 0:
        parser.error("--seed 不能为负")

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
