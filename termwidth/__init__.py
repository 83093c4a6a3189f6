"""
termwidth - 终端字符显示宽度计算

提供单个码点与码点序列的终端列宽计算，以及双字节旧编码（DBCS）兼容模式。
"""

from .interval_table import (
    Interval,
    TableError,
    UNICODE_VERSION,
    ZERO_WIDTH_TABLE,
    WIDE_TABLE,
    validate_table,
    validate_tables,
)

from .wcwidth import (
    bisearch,
    wcwidth, wcwidth_cjk,
    wcswidth, wcswidth_cjk,
    string_width, is_wide_char, is_printable_char,
    truncate_string, pad_string,
)

from .prefs import (
    WidthPrefs,
    load_width_prefs,
    get_cached_width_prefs,
    save_width_prefs,
    get_width_prefs_path,
)

# 导入工具模块
from . import tools

from .termwidth_version import TERMWIDTH_VERSION as __version__

__all__ = [
    # 区间表
    "Interval", "TableError", "UNICODE_VERSION",
    "ZERO_WIDTH_TABLE", "WIDE_TABLE",
    "validate_table", "validate_tables",

    # 宽度计算
    "bisearch",
    "wcwidth", "wcwidth_cjk",
    "wcswidth", "wcswidth_cjk",
    "string_width", "is_wide_char", "is_printable_char",
    "truncate_string", "pad_string",

    # 配置
    "WidthPrefs", "load_width_prefs", "get_cached_width_prefs",
    "save_width_prefs", "get_width_prefs_path",
    "tools",

    "__version__",
]
