DERIVED_SAMPLE = """\
# DerivedGeneralCategory-8.0.0.txt

# General_Category=Format
00AD          ; Cf #       SOFT HYPHEN

0300..036F    ; Mn # [112] COMBINING GRAVE ACCENT..COMBINING LATIN SMALL LETTER X
0370..0373    ; Lu #   [4] GREEK CAPITAL LETTER HETA..GREEK SMALL LETTER ARCHAIC SAMPI
0483..0487    ; Mn #   [5] COMBINING CYRILLIC TITLO..COMBINING CYRILLIC POKRYTIE
0488..0489    ; Me #   [2] COMBINING CYRILLIC HUNDRED THOUSANDS SIGN..COMBINING CYRILLIC MILLIONS SIGN
200C..200F    ; Cf #   [4] ZERO WIDTH NON-JOINER..RIGHT-TO-LEFT MARK
"""

EAST_ASIAN_SAMPLE = """\
# EastAsianWidth-8.0.0.txt
0041;Na          # LATIN CAPITAL LETTER A
00A1;A           # INVERTED EXCLAMATION MARK
1100..115F;W     # Lo    [96] HANGUL CHOSEONG KIYEOK..HANGUL CHOSEONG FILLER
3000;F           # Zs         IDEOGRAPHIC SPACE
3001..3003;W     # Po     [3] IDEOGRAPHIC COMMA..DITTO MARK
FF61;H           # Po         HALFWIDTH IDEOGRAPHIC FULL STOP
"""


def test_parse_derived(generate_tables):
    ranges = generate_tables.parse_derived(DERIVED_SAMPLE.splitlines())
    assert ranges == [
        (0x00AD, 0x00AD),
        (0x0300, 0x036F),
        (0x0483, 0x0489),
        (0x200B, 0x200F),
    ]


def test_parse_east_asian(generate_tables):
    ranges = generate_tables.parse_east_asian(EAST_ASIAN_SAMPLE.splitlines())
    assert ranges == [(0x1100, 0x115F), (0x3000, 0x3003)]


def test_merge_ranges(generate_tables):
    merged = generate_tables.merge_ranges([(5, 6), (1, 2), (3, 4), (10, 12), (11, 13), (20, 20)])
    assert merged == [(1, 6), (10, 13), (20, 20)]
    assert generate_tables.merge_ranges([]) == []


def test_render_table(generate_tables):
    source = generate_tables.render_table("ZERO_WIDTH_TABLE", [(0x0300, 0x036F), (0xE0100, 0xE01EF)])
    lines = source.splitlines()
    assert lines[0] == "ZERO_WIDTH_TABLE: Tuple[Interval, ...] = ("
    assert lines[1] == (
        "    Interval(0x0300, 0x036f),"
        "  # COMBINING GRAVE ACCENT to COMBINING LATIN SMALL LETTER X"
    )
    assert lines[2].startswith("    Interval(0xe0100, 0xe01ef),  # VARIATION SELECTOR-17 to")
    assert lines[-1] == ")"


def test_render_unnamed_code_point(generate_tables):
    source = generate_tables.render_table("WIDE_TABLE", [(0x3FFFD, 0x3FFFD)])
    assert "U+3FFFD to U+3FFFD" in source


def test_generated_source_matches_builtin_format(generate_tables):
    from typing import Tuple

    from termwidth.interval_table import Interval, WIDE_TABLE

    namespace = {"Interval": Interval, "Tuple": Tuple}
    ranges = [tuple(i) for i in WIDE_TABLE]
    exec(generate_tables.render_table("WIDE_TABLE", ranges), namespace)
    assert namespace["WIDE_TABLE"] == WIDE_TABLE
