#!/usr/bin/env python3
"""
从Unicode字符数据库生成 termwidth/interval_table.py 中的两张区间表。

用法：
    generate_tables.py DerivedGeneralCategory.txt EastAsianWidth.txt [-o OUTPUT]

输出为 Python 源码片段（ZERO_WIDTH_TABLE 与 WIDE_TABLE），需手工粘贴到
interval_table.py 并同步更新 UNICODE_VERSION。
"""

import argparse
import logging
import sys
import unicodedata
from typing import Iterable, List, Tuple

logger = logging.getLogger("generate_tables")

# Mn: 非间距标记, Me: 包围标记, Cf: 格式字符
ZERO_WIDTH_CATEGORIES = ('Mn', 'Me', 'Cf')

# W: 宽字符, F: 全角字符
WIDE_CLASSES = ('W', 'F')

# ZERO WIDTH SPACE 属于 Zs，但按零宽处理
EXTRA_ZERO_WIDTH = [(0x200B, 0x200B)]


def _parse_line(line: str):
    """解析一行 `XXXX..YYYY ; value # comment`，注释行与空行返回 None"""
    line = line.strip()
    if not line or line.startswith('#'):
        return None

    ucs, details = line.split(';', maxsplit=1)
    ucs = ucs.strip()
    details = details.split('#', maxsplit=1)[0].strip()

    if '..' in ucs:
        start, stop = ucs.split('..')
    else:
        start, stop = ucs, ucs

    return int(start, 16), int(stop, 16), details


def merge_ranges(ranges: Iterable[Tuple[int, int]]) -> List[Tuple[int, int]]:
    """排序并合并相邻或重叠的区间"""
    merged: List[Tuple[int, int]] = []
    for start, stop in sorted(ranges):
        if merged and merged[-1][1] + 1 >= start:
            merged[-1] = merged[-1][0], max(merged[-1][1], stop)
        else:
            merged.append((start, stop))
    return merged


def parse_derived(lines: Iterable[str]) -> List[Tuple[int, int]]:
    """Returns a list of (start, stop) tuples of zero-width codepoints."""
    ranges = list(EXTRA_ZERO_WIDTH)
    for line in lines:
        parsed = _parse_line(line)
        if parsed is None:
            continue
        start, stop, category = parsed
        if category in ZERO_WIDTH_CATEGORIES:
            ranges.append((start, stop))
    return merge_ranges(ranges)


def parse_east_asian(lines: Iterable[str]) -> List[Tuple[int, int]]:
    """Returns a list of (start, stop) tuples of double-width codepoints."""
    ranges = []
    for line in lines:
        parsed = _parse_line(line)
        if parsed is None:
            continue
        start, stop, width_class = parsed
        if width_class in WIDE_CLASSES:
            ranges.append((start, stop))
    return merge_ranges(ranges)


def _char_name(ucs: int) -> str:
    return unicodedata.name(chr(ucs), f"U+{ucs:04X}")


def render_table(name: str, ranges: List[Tuple[int, int]]) -> str:
    """把区间列表渲染为 `NAME: Tuple[Interval, ...] = (...)` 源码"""
    out = [f"{name}: Tuple[Interval, ...] = ("]
    for start, stop in ranges:
        out.append(f"    Interval(0x{start:04x}, 0x{stop:04x}),"
                   f"  # {_char_name(start)} to {_char_name(stop)}")
    out.append(")")
    return '\n'.join(out) + '\n'


def main():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument('derived', type=argparse.FileType('r', encoding='utf-8'),
                        help='path to DerivedGeneralCategory.txt')
    parser.add_argument('east_asian', type=argparse.FileType('r', encoding='utf-8'),
                        help='path to EastAsianWidth.txt')
    parser.add_argument('-o', '--output', type=argparse.FileType('w', encoding='utf-8'),
                        default=sys.stdout, help='output file (default: stdout)')
    parser.add_argument('-v', '--verbose', action='store_true')
    opts = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if opts.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    zero_width = parse_derived(opts.derived)
    wide = parse_east_asian(opts.east_asian)
    logger.info(f"zero-width: {len(zero_width)} intervals, wide: {len(wide)} intervals")
    if unicodedata.unidata_version != '8.0.0':
        logger.warning(f"character names come from Unicode {unicodedata.unidata_version}")

    opts.output.write(render_table('ZERO_WIDTH_TABLE', zero_width))
    opts.output.write('\n')
    opts.output.write(render_table('WIDE_TABLE', wide))
    return 0


if __name__ == '__main__':
    sys.exit(main())
