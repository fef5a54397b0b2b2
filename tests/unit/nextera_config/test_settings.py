"""Unit tests for settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from nextera_config import Settings, configure_logging, get_settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_loads_from_environment(self, monkeypatch):
        """Should read values from environment variables."""
        monkeypatch.setenv("JWT_SECRET_KEY", "env-secret")
        monkeypatch.setenv("JWT_AUDIENCE", "BILLING")
        monkeypatch.setenv("PASSWORD_HASHER", "bcrypt")

        settings = get_settings()

        assert settings.jwt_secret_key.get_secret_value() == "env-secret"
        assert settings.jwt_audience == "BILLING"
        assert settings.password_hasher == "bcrypt"

    def test_defaults(self):
        """Should apply defaults for optional values."""
        settings = Settings(jwt_secret_key="secret")

        assert settings.jwt_audience == "NEXTERA USER"
        assert settings.jwt_expire_seconds == 86400
        assert settings.jwt_leeway_seconds == 0
        assert settings.password_hasher == "argon2"
        assert settings.bcrypt_rounds == 12

    def test_secret_is_masked(self):
        """Should not expose the secret in its representation."""
        settings = Settings(jwt_secret_key="very-secret")

        assert "very-secret" not in repr(settings)

    def test_settings_are_cached(self, monkeypatch):
        """Should return the same instance until the cache is cleared."""
        monkeypatch.setenv("JWT_SECRET_KEY", "env-secret")

        assert get_settings() is get_settings()

    def test_rejects_unknown_hasher(self):
        """Should only accept supported hashing families."""
        with pytest.raises(ValidationError):
            Settings(jwt_secret_key="secret", password_hasher="md5")

    def test_rejects_non_positive_expiry(self):
        """Should require a positive token lifetime."""
        with pytest.raises(ValidationError):
            Settings(jwt_secret_key="secret", jwt_expire_seconds=0)

    def test_public_api_is_settings_and_logging_only(self):
        """Should not export the env-file lookup helper."""
        import nextera_config

        assert not hasattr(nextera_config, "get_config_dir")
        assert set(nextera_config.__all__) == {
            "Settings",
            "clear_settings_cache",
            "configure_logging",
            "get_settings",
        }


class TestConfigureLogging:
    """Tests for logging setup."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        """Restore root handlers and levels changed by configure_logging."""
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        package_level = logging.getLogger("nextera_utils").level
        yield
        for handler in root.handlers[:]:
            if handler not in handlers:
                root.removeHandler(handler)
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)
        logging.getLogger("nextera_utils").setLevel(package_level)
        logging.getLogger("nextera_config").setLevel(logging.NOTSET)

    def test_sets_package_level(self):
        """Should apply the configured level to the library logger."""
        level = configure_logging(Settings(jwt_secret_key="secret", log_level="debug"))

        assert level == logging.DEBUG
        assert logging.getLogger("nextera_utils").level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        """Should fall back to INFO for unknown level names."""
        level = configure_logging(Settings(jwt_secret_key="secret", log_level="chatty"))

        assert level == logging.INFO
