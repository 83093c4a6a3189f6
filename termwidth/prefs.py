import functools
import json
import logging
import os
from dataclasses import dataclass

import appdirs

# 应用名，决定配置目录
APP_NAME = "termwidth"

# 配置文件名
PREFS_FILE_NAME = "width.json"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")

logger = logging.getLogger(__name__)


@dataclass
class WidthPrefs:
    """
    宽度计算偏好设置。

    - cjk：字符串辅助函数默认是否使用双字节旧编码（DBCS）宽度规则。
    """

    cjk: bool = False


def parse_bool(value) -> bool:
    """
    解析配置中的布尔值。

    接受 bool 以及 "1"/"true"/"yes"/"on"、"0"/"false"/"no"/"off"（不区分大小写）。

    Raises:
        ValueError: 无法识别的取值
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def _get_config_directory(app_name: str, create: bool = False) -> str:
    """
    获取跨平台用户配置目录。

    - macOS: ~/Library/Application Support/<app_name>
    - Windows: %APPDATA%\\<app_name>
    - Linux: ~/.config/<app_name>

    只有 create 为 True 时才创建目录。
    """

    config_dir = appdirs.user_config_dir(app_name, appauthor=False)
    if create:
        os.makedirs(config_dir, exist_ok=True)
    return config_dir


def get_width_prefs_path(create: bool = False) -> str:
    """宽度配置文件路径，默认不创建配置目录"""

    return os.path.join(_get_config_directory(APP_NAME, create), PREFS_FILE_NAME)


def load_width_prefs() -> WidthPrefs:
    """
    读取 `width.json` 并构造 `WidthPrefs`。

    失败策略：
    - 文件不存在：返回默认值
    - 内容不合法或无法读取：记录日志并返回默认值
    """

    try:
        path = get_width_prefs_path()
        if not os.path.exists(path):
            return WidthPrefs()
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f) or {}
        return WidthPrefs(cjk=parse_bool(data.get("cjk", False)))
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.error(f"读取宽度配置失败: {e}")
        return WidthPrefs()


@functools.lru_cache(maxsize=1)
def get_cached_width_prefs() -> WidthPrefs:
    """
    进程内只读取一次的偏好设置。

    字符串辅助函数每次调用都会用到它；修改配置文件后调用
    `get_cached_width_prefs.cache_clear()` 重新读取。
    """

    return load_width_prefs()


def save_width_prefs(prefs: WidthPrefs) -> None:
    """
    保存 `WidthPrefs` 到 `width.json`，必要时创建配置目录。

    使用 `indent=2` 便于用户手工编辑。
    """

    try:
        path = get_width_prefs_path(create=True)
        data = {
            "cjk": prefs.cjk,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error(f"保存宽度配置失败: {e}")
    finally:
        get_cached_width_prefs.cache_clear()
