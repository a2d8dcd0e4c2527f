"""
Tests for Settings loading.
"""

from bookshop.core.config import Settings


def make_settings(**overrides) -> Settings:
    values = {"database_url": "sqlite://", "jwt_secret_key": "secret", "_env_file": None}
    values.update(overrides)
    return Settings(**values)


def test_cors_origins_split_and_trimmed():
    settings = make_settings(allowed_origins=" https://shop.example.com , ,http://localhost:3000")
    assert settings.cors_origins == ["https://shop.example.com", "http://localhost:3000"]


def test_open_library_defaults():
    settings = make_settings()
    assert settings.openlibrary_base_url == "https://openlibrary.org"
    assert settings.openlibrary_timeout_seconds == 5.0


def test_only_used_settings_are_declared():
    fields = set(Settings.model_fields)
    assert "host" not in fields
    assert "port" not in fields
    assert not hasattr(Settings, "is_production")
