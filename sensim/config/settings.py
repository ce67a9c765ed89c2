"""
全局配置参数
============

包含预置传感器参数、仿真运行配置与日志配置。
预置参数取自典型气压计与GPS接收机的误差规格。
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.base_config import ConfigValidator, ValidationResult, ValidationSeverity
from ..core.constants import (
    ATMOSPHERIC_PRESSURE,
    BAROMETER_ABS_ERROR,
    BAROMETER_REL_ERROR,
    HOME_LATITUDE,
    GPS_HORIZ_ABS_ERROR,
    GPS_HORIZ_REL_ERROR
)

logger = logging.getLogger('SENSIM.Config')


@dataclass
class SensorProfile:
    """传感器参数"""
    name: str
    ideal_value: float                # 理想值
    absolute_error_range: float       # 绝对误差范围 (准确度)
    relative_error: float             # 相对误差 (精密度)
    unit: str = ""
    description: str = ""

    def validate(self) -> List[ValidationResult]:
        """验证传感器参数，返回未通过的条目"""
        results = [
            ConfigValidator.validate_finite(self.ideal_value, "ideal_value"),
            ConfigValidator.validate_non_negative(
                self.absolute_error_range, "absolute_error_range"),
            ConfigValidator.validate_non_negative(
                self.relative_error, "relative_error"),
        ]
        return [r for r in results if not r.is_valid]


@dataclass
class SimulationConfig:
    """仿真运行配置"""
    count: int = 10                   # 默认测量次数
    seed: Optional[int] = None        # None = 使用系统熵源
    default_preset: str = "gps_latitude"


@dataclass
class LoggingConfig:
    """日志配置"""
    level: str = field(
        default_factory=lambda: os.getenv("SENSIM_LOG_LEVEL", "WARNING").upper())
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Config:
    """全局配置类"""

    # 预置传感器
    presets: Dict[str, SensorProfile] = {
        'gps_latitude': SensorProfile(
            name='gps_latitude',
            ideal_value=HOME_LATITUDE,
            absolute_error_range=GPS_HORIZ_ABS_ERROR,
            relative_error=GPS_HORIZ_REL_ERROR,
            unit='deg',
            description='GPS纬度 (伯克利)'
        ),
        'barometer': SensorProfile(
            name='barometer',
            ideal_value=ATMOSPHERIC_PRESSURE,
            absolute_error_range=BAROMETER_ABS_ERROR,
            relative_error=BAROMETER_REL_ERROR,
            unit='Pa',
            description='气压计 (标准大气压)'
        ),
    }

    # 运行配置
    simulation = SimulationConfig()
    logging_config = LoggingConfig()

    @classmethod
    def get_preset(cls, name: str) -> SensorProfile:
        """按名称获取预置参数"""
        try:
            return cls.presets[name]
        except KeyError:
            raise KeyError(
                f"未知的传感器预置: {name} (可用: {', '.join(sorted(cls.presets))})"
            ) from None

    @classmethod
    def register_preset(cls, profile: SensorProfile) -> List[ValidationResult]:
        """
        注册自定义预置

        参数校验失败时仍然注册 (非有限误差在构造仿真器时按 0 处理)，
        失败项记录到日志并返回。
        """
        failures = profile.validate()
        for result in failures:
            if result.severity == ValidationSeverity.ERROR:
                logger.error("预置 %s: %s", profile.name, result.message)
            else:
                logger.warning("预置 %s: %s", profile.name, result.message)

        cls.presets[profile.name] = profile
        return failures

    @classmethod
    def to_dict(cls) -> dict:
        """导出配置为字典"""
        return {
            'presets': {name: p.__dict__ for name, p in cls.presets.items()},
            'simulation': cls.simulation.__dict__,
            'logging': cls.logging_config.__dict__
        }


def configure_logging(config: Optional[LoggingConfig] = None):
    """配置日志系统 (仅供命令行入口调用)"""
    config = config or Config.logging_config
    level = getattr(logging, str(config.level).upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=[
            logging.StreamHandler(),
        ]
    )
    return logging.getLogger('SENSIM')
