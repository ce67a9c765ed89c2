"""
配置验证 (Configuration Validation)
===================================

提供传感器配置的验证规则与数值清洗:
- 非有限误差输入 (NaN/Inf) 清洗为 0，不作为错误处理
- 误差参数应为非负有限值
"""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class ValidationSeverity(Enum):
    """验证结果严重程度"""
    INFO = auto()       # 信息
    WARNING = auto()    # 警告
    ERROR = auto()      # 错误


@dataclass
class ValidationResult:
    """配置验证结果"""
    is_valid: bool                              # 是否通过验证
    severity: ValidationSeverity                # 严重程度
    message: str                                # 消息
    field_name: Optional[str] = None            # 相关字段名
    suggestion: Optional[str] = None            # 修复建议


class ConfigValidator:
    """
    配置验证器

    提供通用的配置验证规则
    """

    @staticmethod
    def is_finite(value: float) -> bool:
        """非数值输入抛出 TypeError；超出浮点范围的整数视为非有限"""
        try:
            return math.isfinite(value)
        except OverflowError:
            return False

    @staticmethod
    def sanitize_finite(value: float) -> float:
        """非有限值 -> 0.0，有限值原样返回"""
        if not ConfigValidator.is_finite(value):
            return 0.0
        return float(value)

    @staticmethod
    def validate_finite(value: float, name: str) -> ValidationResult:
        """验证有限值"""
        if not ConfigValidator.is_finite(value):
            return ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.ERROR,
                message=f"{name} 必须为有限值，当前值: {value}",
                field_name=name,
                suggestion=f"为 {name} 提供有限数值"
            )
        return ValidationResult(is_valid=True, severity=ValidationSeverity.INFO, message="OK")

    @staticmethod
    def validate_non_negative(value: float, name: str) -> ValidationResult:
        """验证非负误差参数; 负值与非有限值会被仿真器清洗，因此只给出警告"""
        if not ConfigValidator.is_finite(value):
            return ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.WARNING,
                message=f"{name} 非有限值 ({value})，将按 0 处理",
                field_name=name,
                suggestion=f"为 {name} 提供有限数值"
            )
        if value < 0:
            return ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.WARNING,
                message=f"{name} 为负值 ({value})，将取绝对值",
                field_name=name,
                suggestion=f"将 {name} 设置为非负值"
            )
        return ValidationResult(is_valid=True, severity=ValidationSeverity.INFO, message="OK")
