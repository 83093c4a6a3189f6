import importlib.util
import os

import pytest

from termwidth import prefs
from termwidth.tools import CJK_ENV_VAR

SCRIPTS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "scripts")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the real user config directory and env."""
    config_root = tmp_path / "config"

    def user_config_dir(app_name, appauthor=None):
        return str(config_root / app_name)

    monkeypatch.setattr(prefs.appdirs, "user_config_dir", user_config_dir)
    monkeypatch.delenv(CJK_ENV_VAR, raising=False)
    prefs.get_cached_width_prefs.cache_clear()
    yield config_root
    prefs.get_cached_width_prefs.cache_clear()


@pytest.fixture
def generate_tables():
    """The table generator script, loaded as a module."""
    path = os.path.join(SCRIPTS_DIR, "generate_tables.py")
    spec = importlib.util.spec_from_file_location("generate_tables", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
