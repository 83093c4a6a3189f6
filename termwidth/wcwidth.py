"""
Unicode字符宽度计算模块

作者信息：
- Markus Kuhn -- 2007-05-26 -- public domain
- 区间表更新至 Unicode 8.0.0

宽度规则（按顺序判断，先命中者生效）：
- NUL (U+0000) 宽度为 0
- 其他 C0/C1 控制字符与 DEL 返回 -1
- U+0300 以下的其余字符宽度为 1（包括 SOFT HYPHEN U+00AD）
- 非间距/包围组合字符 (Mn, Me)、格式字符 (Cf) 与 ZERO WIDTH SPACE 宽度为 0
- U+1100 以下的其余字符宽度为 1
- 韩文字母中元音与终声 (U+1160-U+11FF) 宽度为 0
- East Asian Wide (W) 与 Fullwidth (F) 字符宽度为 2，其余宽度为 1

所有函数都是纯函数，只读访问两张常量区间表，可在任意线程中并发调用。
"""

from itertools import islice
from typing import Callable, Iterable, Optional, Sequence, Union

from termwidth.interval_table import Interval, WIDE_TABLE, ZERO_WIDTH_TABLE
from termwidth.tools import resolveCjk

# 单个码点或单个字符
CodePoint = Union[str, int]


def bisearch(ucs: int, table: Sequence[Interval]) -> bool:
    """
    在区间表中二分查找码点。

    Args:
        ucs: Unicode码点
        table: 已排序、互不重叠的非空区间表

    Returns:
        bool: 码点是否落在某个区间内
    """
    max_index = len(table) - 1
    if ucs < table[0].first or ucs > table[max_index].last:
        return False

    min_index = 0
    while max_index >= min_index:
        mid = (min_index + max_index) // 2
        if ucs > table[mid].last:
            min_index = mid + 1
        elif ucs < table[mid].first:
            max_index = mid - 1
        else:
            return True

    return False


def _to_codepoint(char: CodePoint) -> Optional[int]:
    # 字符串只取第一个字符，空字符串返回 None
    if isinstance(char, str):
        if len(char) == 0:
            return None
        return ord(char[0])
    return char


def wcwidth(char: CodePoint) -> int:
    """
    计算单个Unicode字符在终端中的显示宽度。

    Args:
        char: Unicode字符（字符串）或Unicode码点（整数）

    Returns:
        int: 字符宽度
            - 0: NUL、组合字符、格式字符
            - 1: 正常宽度字符
            - 2: 宽字符（如中文、日文等）
            - -1: 控制字符
    """
    ucs = _to_codepoint(char)
    if ucs is None:
        return 0

    # 8位控制字符与大部分ISO 8859字符的快速路径
    # 注意：这里覆盖了 U+00AD 的 Cf 分类
    if ucs < 0x0300:
        if ucs == 0:
            return 0
        if ucs < 32 or 0x7F <= ucs < 0xA0:
            return -1
        return 1

    if bisearch(ucs, ZERO_WIDTH_TABLE):
        return 0

    # 第一个宽字符是 U+1100
    if ucs < 0x1100:
        return 1

    # 韩文字母中元音与终声不属于 Mn/Me/Cf，但宽度为 0
    if 0x1160 <= ucs <= 0x11FF:
        return 0

    if bisearch(ucs, WIDE_TABLE):
        return 2
    return 1


def wcwidth_cjk(char: CodePoint) -> int:
    """
    双字节旧编码（DBCS）版本的 wcwidth()。

    用于从旧式双字节代码页转换而来的文本：除ASCII及其替代字符外，
    所有可打印字符都按双宽显示。WON SIGN (U+20A9) 保持单宽。
    不建议用于一般文本。
    """
    width = wcwidth(char)
    ucs = _to_codepoint(char)
    if width == 1 and 0x00A1 <= ucs < 0xFF61 and ucs != 0x20A9:
        return 2
    return width


def _sum_widths(pwcs: Iterable[CodePoint], n: Optional[int],
                char_width: Callable[[CodePoint], int]) -> int:
    if n is not None and n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    items = pwcs if n is None else islice(pwcs, n)
    width = 0
    for char in items:
        ucs = _to_codepoint(char)
        # 遇到 NUL 终止，终止符不计入 n
        if not ucs:
            break
        w = char_width(ucs)
        if w < 0:
            return -1
        width += w

    return width


def wcswidth(pwcs: Iterable[CodePoint], n: Optional[int] = None) -> int:
    """
    计算码点序列的显示宽度。

    Args:
        pwcs: 码点序列或字符串
        n: 最多检查的元素个数，None 表示不限

    Returns:
        int: 宽度之和；任何元素为不可打印字符时返回 -1（不返回部分和）

    Raises:
        ValueError: n 为负数
    """
    return _sum_widths(pwcs, n, wcwidth)


def wcswidth_cjk(pwcs: Iterable[CodePoint], n: Optional[int] = None) -> int:
    """wcswidth() 的双字节旧编码版本，逐个调用 wcwidth_cjk()"""
    return _sum_widths(pwcs, n, wcwidth_cjk)


def _width_function(cjk: Optional[bool]) -> Callable[[CodePoint], int]:
    return wcwidth_cjk if resolveCjk(cjk) else wcwidth


def string_width(text: str, cjk: Optional[bool] = None) -> int:
    """
    计算字符串在终端中的显示宽度。

    与 wcswidth() 不同，控制字符被跳过而不是使整个结果变为 -1。

    Args:
        text: 要计算宽度的字符串
        cjk: 是否使用双字节旧编码宽度规则，None 时读取默认配置

    Returns:
        int: 字符串的总显示宽度
    """
    if not text:
        return 0

    char_width = _width_function(cjk)
    total_width = 0
    for char in text:
        w = char_width(char)
        if w > 0:  # 只累加可见字符的宽度
            total_width += w

    return total_width


# 一些常用的宽度计算辅助函数

def is_wide_char(char: CodePoint, cjk: Optional[bool] = None) -> bool:
    """检查单个字符是否为宽字符（宽度为2）"""
    return _width_function(cjk)(char) == 2


def is_printable_char(char: CodePoint) -> bool:
    """
    检查字符是否为可打印字符。

    没有 cjk 参数：双字节旧编码规则只会把宽度 1 提升为 2，
    不会改变字符是否可打印。

    Args:
        char: 字符或码点

    Returns:
        bool: 是否为可打印字符（宽度 > 0）
    """
    return wcwidth(char) > 0


def truncate_string(text: str, max_width: int, ellipsis: str = "...",
                    cjk: Optional[bool] = None) -> str:
    """
    截断字符串到指定的显示宽度。

    Args:
        text: 要截断的字符串
        max_width: 最大显示宽度
        ellipsis: 省略号字符串
        cjk: 是否使用双字节旧编码宽度规则

    Returns:
        str: 截断后的字符串
    """
    cjk = resolveCjk(cjk)
    if string_width(text, cjk) <= max_width:
        return text

    ellipsis_width = string_width(ellipsis, cjk)
    if ellipsis_width >= max_width:
        return ellipsis[:max_width]

    char_width = _width_function(cjk)
    target_width = max_width - ellipsis_width
    current_width = 0
    result = []

    for char in text:
        w = char_width(char)
        if w > 0:  # 只处理可见字符，零宽字符跟随前一个字符
            if current_width + w > target_width:
                break
            current_width += w
        result.append(char)

    return ''.join(result) + ellipsis


def pad_string(text: str, width: int, align: str = 'left', fill_char: str = ' ',
               cjk: Optional[bool] = None) -> str:
    """
    填充字符串到指定的显示宽度。

    Args:
        text: 要填充的字符串
        width: 目标显示宽度
        align: 对齐方式 ('left', 'right', 'center')
        fill_char: 填充字符
        cjk: 是否使用双字节旧编码宽度规则

    Returns:
        str: 填充后的字符串

    Raises:
        ValueError: align 取值非法
    """
    if align not in ('left', 'right', 'center'):
        raise ValueError(f"Invalid align value: {align}. Must be 'left', 'right', or 'center'")

    cjk = resolveCjk(cjk)
    current_width = string_width(text, cjk)
    if current_width >= width:
        return text

    padding_needed = width - current_width
    fill_width = _width_function(cjk)(fill_char)

    if fill_width <= 0:
        fill_char = ' '
        fill_width = 1

    padding_chars = padding_needed // fill_width

    if align == 'left':
        return text + fill_char * padding_chars
    elif align == 'right':
        return fill_char * padding_chars + text
    left_padding = padding_chars // 2
    right_padding = padding_chars - left_padding
    return fill_char * left_padding + text + fill_char * right_padding


__all__ = [
    'bisearch',
    'wcwidth',
    'wcwidth_cjk',
    'wcswidth',
    'wcswidth_cjk',
    'string_width',
    'is_wide_char',
    'is_printable_char',
    'truncate_string',
    'pad_string',
]
