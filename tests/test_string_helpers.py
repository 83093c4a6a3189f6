import pytest

from termwidth.tools import CJK_ENV_VAR
from termwidth.wcwidth import (
    is_printable_char,
    is_wide_char,
    pad_string,
    string_width,
    truncate_string,
)

BASIC_WIDTH_CASES = [
    ('', 0, 'empty'),
    ('hello', 5, 'ASCII'),
    ('コンニチハ', 10, 'katakana'),
    ('cafe\u0301', 4, 'combining'),
    ('hello\x01world', 10, 'control skipped'),
    ('\u1100\u1161\u11a8', 2, 'conjoining jamo'),
]


@pytest.mark.parametrize('text,expected,name', BASIC_WIDTH_CASES)
def test_string_width(text, expected, name):
    assert string_width(text, cjk=False) == expected


def test_string_width_cjk():
    assert string_width('\u00e9t\u00e9', cjk=True) == 5
    assert string_width('₩100', cjk=True) == 4


def test_string_width_follows_environment(monkeypatch):
    assert string_width('\u00e9') == 1
    monkeypatch.setenv(CJK_ENV_VAR, '1')
    assert string_width('\u00e9') == 2
    assert string_width('\u00e9', cjk=False) == 1


def test_is_wide_char():
    assert is_wide_char('中', cjk=False)
    assert not is_wide_char('a', cjk=False)
    assert not is_wide_char('\u00e9', cjk=False)
    assert is_wide_char('\u00e9', cjk=True)
    assert is_wide_char(0xAC00, cjk=False)


def test_is_printable_char():
    assert is_printable_char('a')
    assert is_printable_char('中')
    assert not is_printable_char('\x07')
    assert not is_printable_char('\u0301')
    assert not is_printable_char(0)


def test_truncate_fits():
    assert truncate_string('hello', 5, cjk=False) == 'hello'


def test_truncate_ascii():
    assert truncate_string('hello world', 8, cjk=False) == 'hello...'


def test_truncate_wide():
    assert truncate_string('中文字符', 5, cjk=False) == '中...'
    assert truncate_string('中文字符', 6, cjk=False) == '中...'
    assert truncate_string('中文字符', 7, cjk=False) == '中文...'


def test_truncate_keeps_combining_marks_with_base():
    text = 'e\u0301' * 5
    assert truncate_string(text, 4, cjk=False) == 'e\u0301...'


def test_truncate_ellipsis_too_wide():
    assert truncate_string('abcdef', 2, cjk=False) == '..'


def test_truncate_custom_ellipsis():
    assert truncate_string('abcdef', 4, ellipsis='…', cjk=False) == 'abc…'
    # the ellipsis itself is double width in DBCS mode
    assert truncate_string('abcdef', 4, ellipsis='…', cjk=True) == 'ab…'


def test_pad_left_right_center():
    assert pad_string('中', 4, cjk=False) == '中  '
    assert pad_string('中', 4, align='right', cjk=False) == '  中'
    assert pad_string('ab', 6, align='center', cjk=False) == '  ab  '
    assert pad_string('ab', 5, align='center', cjk=False) == ' ab  '


def test_pad_no_change_when_wide_enough():
    assert pad_string('abcdef', 3, cjk=False) == 'abcdef'


def test_pad_wide_fill_char():
    assert pad_string('a', 5, fill_char='－', cjk=False) == 'a－－'


def test_pad_zero_width_fill_falls_back_to_space():
    assert pad_string('a', 3, fill_char='\u0301', cjk=False) == 'a  '


def test_pad_cjk():
    assert pad_string('\u00e9', 4, cjk=True) == '\u00e9  '


def test_pad_invalid_align():
    with pytest.raises(ValueError, match='align'):
        pad_string('a', 3, align='middle')
