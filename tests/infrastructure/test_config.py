"""Tests for application configuration."""

from pathlib import Path

from catalog.infrastructure.config import Settings


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.api_port == 3000
    assert settings.debug is False
    assert settings.default_page_size == 10
    assert settings.data_file.name == "products.json"


def test_settings_from_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CATALOG_API_PORT", "8080")
    monkeypatch.setenv("CATALOG_DATA_FILE", str(tmp_path / "catalog.json"))
    settings = Settings()
    assert settings.api_port == 8080
    assert settings.data_file == tmp_path / "catalog.json"
