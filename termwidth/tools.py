"""
termwidth工具模块 - 日志记录器与运行时配置

这个模块提供了：
- 包级日志记录器
- 从环境变量与用户配置文件解析默认宽度模式
"""

import logging
import os
from typing import Optional

from termwidth.prefs import get_cached_width_prefs, parse_bool as _parse_bool

# 包级日志记录器，默认只输出警告及以上
termwidthLogger = logging.getLogger("termwidth")
termwidthLogger.setLevel(logging.WARNING)

# 为了兼容性，添加snake_case别名
termwidth_logger = termwidthLogger

# 环境变量名：选择双字节旧编码宽度模式
CJK_ENV_VAR = "TERMWIDTH_CJK"


def parseBool(value: str) -> bool:
    """
    解析环境变量中的布尔值。

    Args:
        value: 原始字符串

    Returns:
        bool: 解析结果

    Raises:
        ValueError: 无法识别的取值
    """
    return _parse_bool(value)


def getEnvCjk() -> Optional[bool]:
    """
    读取 TERMWIDTH_CJK 环境变量。

    Returns:
        Optional[bool]: 未设置或取值非法时返回 None
    """
    raw = os.environ.get(CJK_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        return parseBool(raw)
    except ValueError as e:
        termwidthLogger.warning(f"Ignoring {CJK_ENV_VAR}: {e}")
        return None


def getDefaultCjk() -> bool:
    """
    获取字符串辅助函数的默认宽度模式。

    优先级：环境变量 > 用户配置文件 > False
    配置文件每个进程只读取一次，不会创建配置目录。
    """
    env_value = getEnvCjk()
    if env_value is not None:
        return env_value
    return get_cached_width_prefs().cjk


def resolveCjk(cjk: Optional[bool]) -> bool:
    """显式参数优先，None 时使用默认模式"""
    if cjk is None:
        return getDefaultCjk()
    return bool(cjk)


# 为了兼容性，添加snake_case版本的函数名
def parse_bool(value: str) -> bool:
    """snake_case版本的parseBool"""
    return parseBool(value)


def get_default_cjk() -> bool:
    """snake_case版本的getDefaultCjk"""
    return getDefaultCjk()


def resolve_cjk(cjk: Optional[bool]) -> bool:
    """snake_case版本的resolveCjk"""
    return resolveCjk(cjk)


__all__ = [
    # 主要函数
    'parseBool',
    'getEnvCjk',
    'getDefaultCjk',
    'resolveCjk',

    # 兼容性别名 - snake_case风格
    'parse_bool',
    'get_default_cjk',
    'resolve_cjk',

    # 日志记录器
    'termwidthLogger',
    'termwidth_logger',

    # 常量
    'CJK_ENV_VAR',
]
