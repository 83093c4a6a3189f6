#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
termwidth版本定义
"""

from termwidth.interval_table import UNICODE_VERSION

# 版本号定义
TERMWIDTH_VERSION_MAJOR = 1
TERMWIDTH_VERSION_MINOR = 0
TERMWIDTH_VERSION_PATCH = 0

# 完整版本号
TERMWIDTH_VERSION = f"{TERMWIDTH_VERSION_MAJOR}.{TERMWIDTH_VERSION_MINOR}.{TERMWIDTH_VERSION_PATCH}"


def get_version() -> str:
    """
    获取termwidth版本号

    Returns:
        str: 版本号字符串
    """
    return TERMWIDTH_VERSION


def get_version_tuple() -> tuple:
    """
    获取版本号元组

    Returns:
        tuple: (major, minor, patch)
    """
    return (TERMWIDTH_VERSION_MAJOR, TERMWIDTH_VERSION_MINOR, TERMWIDTH_VERSION_PATCH)


def get_version_info() -> dict:
    """
    获取详细版本信息

    区间表的Unicode版本单独列出，依赖精确终端布局的调用方应检查它。
    """
    return {
        'major': TERMWIDTH_VERSION_MAJOR,
        'minor': TERMWIDTH_VERSION_MINOR,
        'patch': TERMWIDTH_VERSION_PATCH,
        'version': TERMWIDTH_VERSION,
        'name': 'termwidth',
        'unicode_version': UNICODE_VERSION,
        'license': 'Public Domain',
    }


# 版本比较函数
def version_check(major: int, minor: int, patch: int) -> int:
    """
    检查版本号

    Args:
        major: 主版本号
        minor: 次版本号
        patch: 补丁版本号

    Returns:
        int: 当前版本较新返回 1，较旧返回 -1，相同返回 0
    """
    current = get_version_tuple()
    target = (major, minor, patch)

    if current > target:
        return 1
    elif current < target:
        return -1
    else:
        return 0


__all__ = [
    'TERMWIDTH_VERSION_MAJOR',
    'TERMWIDTH_VERSION_MINOR',
    'TERMWIDTH_VERSION_PATCH',
    'TERMWIDTH_VERSION',
    'get_version',
    'get_version_tuple',
    'get_version_info',
    'version_check',
]
