from __future__ import annotations

from pathlib import Path

from monitor_core import config


def test_log_dir_is_outside_the_installed_package() -> None:
    package_root = Path(config.__file__).resolve().parent.parent

    assert config.BASE_DIR.resolve() != package_root
    assert package_root not in config.BASE_DIR.resolve().parents
    assert config.LOG_FILE.parent == config.BASE_DIR
    assert config.BASE_DIR.is_dir()
