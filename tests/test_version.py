import termwidth
from termwidth import termwidth_version


def test_version():
    assert termwidth.__version__ == termwidth_version.get_version() == "1.0.0"
    assert termwidth_version.get_version_tuple() == (1, 0, 0)


def test_version_info_reports_unicode_snapshot():
    info = termwidth_version.get_version_info()
    assert info["version"] == "1.0.0"
    assert info["unicode_version"] == termwidth.UNICODE_VERSION == "8.0.0"


def test_version_check():
    assert termwidth_version.version_check(1, 0, 0) == 0
    assert termwidth_version.version_check(0, 9, 9) == 1
    assert termwidth_version.version_check(1, 0, 1) == -1


def test_public_api():
    assert termwidth.wcwidth(0x4E2D) == 2
    assert termwidth.wcswidth([0x41, 0x42, 0x43], 3) == 3
    assert termwidth.wcwidth_cjk(0xE9) == 2
    assert termwidth.wcswidth_cjk([0xE9], 1) == 2
