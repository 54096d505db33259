"""
Wire 值类型转换

Cognito 响应是松散类型的 JSON 树，这里把每一种转换写成独立函数：
- 字符串 / 整数: 类型不兼容时抛 CognitoDecodeError
- 布尔: 宽松解析 ("1", "true", "on", "yes" 为真，其他为假)
- 时间戳: epoch 秒 (小数部分精确到微秒)，格式错误返回 None
"""

from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from .models import CognitoDecodeError


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

TRUTHY = frozenset({"1", "true", "on", "yes"})


# ============ 存在性检查 ============

def is_set(data: Mapping, key: str) -> bool:
    """key 存在且值不为 None"""
    return data.get(key) is not None


def is_empty(data: Mapping, key: str) -> bool:
    """key 不存在、为 None 或为空值 ([], {}, "", 0, False)"""
    return not data.get(key)


def require(data: Mapping, key: str, context: str) -> Any:
    """
    取必填字段

    Raises:
        CognitoDecodeError: 字段缺失或为 None
    """
    value = data.get(key)
    if value is None:
        raise CognitoDecodeError(f"{context}: 缺少必填字段 {key}", field=key)
    return value


def as_mapping(value: Any, context: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise CognitoDecodeError(
            f"{context}: 期望 object，实际为 {type(value).__name__}", field=context
        )
    return value


def as_list(value: Any, context: str) -> list:
    if not isinstance(value, (list, tuple)):
        raise CognitoDecodeError(
            f"{context}: 期望 array，实际为 {type(value).__name__}", field=context
        )
    return list(value)


# ============ 标量转换 ============

def to_str(value: Any) -> str:
    """字符串转换 (None 为 ""，bool 按 "1" / "" 渲染)"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (Mapping, list, tuple)):
        raise CognitoDecodeError(f"无法将 {type(value).__name__} 转换为 string")
    return str(value)


def to_int(value: Any) -> int:
    """整数转换，支持 int / float / 数字字符串"""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, (float, str)):
        try:
            number = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            number = None
        # 指数过大会构造出超大整数
        if number is not None and number.is_finite() and number.adjusted() <= 18:
            return int(number)
    raise CognitoDecodeError(f"无法将 {value!r} 转换为 integer")


def to_bool(value: Any) -> bool:
    """
    宽松布尔解析

    >>> to_bool("true"), to_bool("0"), to_bool("yes")
    (True, False, True)
    """
    if isinstance(value, bool):
        return value
    # 1.0 按 "1" 处理
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip().lower() in TRUTHY


def to_datetime(value: Any) -> datetime | None:
    """
    epoch 秒 → UTC datetime

    先按 6 位小数渲染再拆成整秒和微秒，避免浮点误差：
    1700000000.123456 → 1700000000 秒 + 123456 微秒

    格式错误或超出范围时返回 None，不中断整个解析。
    """
    if isinstance(value, (bool, Mapping, list, tuple)) or value is None:
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite() or number.adjusted() > 18:
        return None

    rendered = f"{number:.6f}"

    sign = -1 if rendered.startswith("-") else 1
    seconds, _, fraction = rendered.lstrip("-").partition(".")
    try:
        delta = timedelta(seconds=int(seconds), microseconds=int(fraction or 0))
        return EPOCH + sign * delta
    except (OverflowError, ValueError):
        return None
