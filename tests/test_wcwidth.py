import pytest

from termwidth.interval_table import WIDE_TABLE, ZERO_WIDTH_TABLE, table_contains
from termwidth.wcwidth import wcwidth, wcwidth_cjk

CONTROL_CODES = list(range(0x01, 0x20)) + list(range(0x7F, 0xA0))


def test_nul_has_zero_width():
    assert wcwidth(0) == 0
    assert wcwidth("\0") == 0


@pytest.mark.parametrize("ucs", CONTROL_CODES)
def test_control_characters_are_not_printable(ucs):
    assert wcwidth(ucs) == -1


def test_soft_hyphen_is_single_width():
    assert table_contains(ZERO_WIDTH_TABLE, 0x00AD)
    assert wcwidth(0x00AD) == 1


@pytest.mark.parametrize("ucs", [0x20, 0x41, 0x7E, 0xA0, 0xE9, 0xFF, 0x2FF])
def test_latin_fast_path(ucs):
    assert wcwidth(ucs) == 1


def test_combining_diacritical_marks():
    for ucs in range(0x0300, 0x0370):
        assert wcwidth(ucs) == 0


def test_every_zero_width_interval():
    for first, last in ZERO_WIDTH_TABLE:
        if first < 0x0300:
            continue
        for ucs in (first, (first + last) // 2, last):
            assert wcwidth(ucs) == 0, hex(ucs)


@pytest.mark.parametrize("ucs", [0x200B, 0x200D, 0x2060, 0xFEFF, 0xFE0F, 0xE0001])
def test_format_and_invisible_characters(ucs):
    assert wcwidth(ucs) == 0


def test_hangul_jamo_medial_and_final():
    for ucs in range(0x1160, 0x1200):
        assert wcwidth(ucs) == 0
    assert wcwidth(0x115F) == 2
    assert wcwidth(0x1200) == 1


def test_every_wide_interval():
    for first, last in WIDE_TABLE:
        for ucs in (first, (first + last) // 2, last):
            if table_contains(ZERO_WIDTH_TABLE, ucs):
                continue
            assert wcwidth(ucs) == 2, hex(ucs)


@pytest.mark.parametrize("ucs", [0x4E00, 0x4E2D, 0x6587, 0xA48C, 0xAC00, 0xD7A3, 0xFF01, 0x20000])
def test_wide_characters(ucs):
    assert wcwidth(ucs) == 2


def test_combining_voiced_sound_marks_stay_zero_width():
    # present in both tables; zero-width wins
    assert table_contains(WIDE_TABLE, 0x3099)
    assert wcwidth(0x3099) == 0
    assert wcwidth(0x309A) == 0
    assert wcwidth(0x309B) == 2


@pytest.mark.parametrize("ucs", [0x0370, 0x0410, 0x05D0, 0x1000, 0x10FF, 0x2500, 0x10000, 0x1F600, 0x40000, 0x10FFFF])
def test_other_characters_are_single_width(ucs):
    assert wcwidth(ucs) == 1


def test_classifier_is_total():
    samples = list(range(0, 0x3000)) + [0xFFFF, 0x10FFFF, 0x110000, 0x7FFFFFFF, 0xFFFFFFFF]
    for ucs in samples:
        assert wcwidth(ucs) in (-1, 0, 1, 2)


def test_string_arguments():
    assert wcwidth("") == 0
    assert wcwidth("a") == 1
    assert wcwidth("中") == 2
    assert wcwidth("\u0301") == 0
    assert wcwidth("\x07") == -1
    # only the first character counts
    assert wcwidth("中a") == 2


def test_cjk_won_sign_stays_single_width():
    assert wcwidth(0x20A9) == 1
    assert wcwidth_cjk(0x20A9) == 1


@pytest.mark.parametrize("ucs", [0x00A1, 0x00E9, 0x00D7, 0x0410, 0x03B1, 0x2018, 0x2500, 0x25A0, 0xFB00])
def test_cjk_promotes_single_width(ucs):
    assert wcwidth(ucs) == 1
    assert wcwidth_cjk(ucs) == 2


@pytest.mark.parametrize("ucs", [0x20, 0x41, 0x7E, 0xA0, 0xFF61, 0xFF9F, 0x10000])
def test_cjk_keeps_ascii_and_halfwidth(ucs):
    assert wcwidth_cjk(ucs) == wcwidth(ucs) == 1


def test_cjk_passes_through_other_widths():
    assert wcwidth_cjk(0) == 0
    assert wcwidth_cjk(0x85) == -1
    assert wcwidth_cjk(0x0300) == 0
    assert wcwidth_cjk(0x1160) == 0
    assert wcwidth_cjk(0x4E00) == 2
    assert wcwidth_cjk("") == 0


def test_cjk_refines_base_classification():
    for ucs in range(0, 0xFF62):
        base = wcwidth(ucs)
        expected = 2 if base == 1 and 0xA1 <= ucs < 0xFF61 and ucs != 0x20A9 else base
        assert wcwidth_cjk(ucs) == expected
