"""Tests for settings and logging configuration."""

import logging
from pathlib import Path

from catalog.infrastructure.config import Settings
from catalog.infrastructure.logging_setup import configure_logging


def test_settings_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("CATALOG_ASSET_DIR", raising=False)
    monkeypatch.setenv("CATALOG_LOG_LEVEL", " debug ")
    monkeypatch.delenv("CATALOG_ASSET_BASE_URL", raising=False)

    settings = Settings.from_env()

    assert settings.products_file == tmp_path / "products.json"
    assert settings.asset_dir == tmp_path / "assets"
    assert settings.asset_base_url is None
    assert settings.log_level == "DEBUG"


def test_explicit_asset_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_ASSET_DIR", str(tmp_path / "blobs"))
    assert Settings.from_env().asset_dir == Path(tmp_path / "blobs")


def test_configure_logging_sets_package_level():
    logger = logging.getLogger("catalog")
    previous = logger.level
    try:
        configure_logging("debug")
        assert logger.level == logging.DEBUG
        configure_logging("nonsense")
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(previous)


def test_default_data_dir_is_relative_to_working_directory(monkeypatch):
    monkeypatch.delenv("CATALOG_DATA_DIR", raising=False)
    monkeypatch.delenv("CATALOG_ASSET_DIR", raising=False)

    settings = Settings.from_env()

    assert settings.data_dir == Path("data")
    assert settings.asset_dir == Path("data") / "assets"
