import logging

import pytest

from tiny_time.infrastructure.config import (
    BACKEND_ENV,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
    Backend,
    TinyTimeSettings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(BACKEND_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


class TestTinyTimeSettingsDefaults:
    def test_defaults(self) -> None:
        settings = TinyTimeSettings()

        assert settings.backend is Backend.AUTO
        assert settings.log_level == DEFAULT_LOG_LEVEL

    def test_from_env_without_variables(self) -> None:
        assert TinyTimeSettings.from_env() == TinyTimeSettings()

    def test_is_frozen(self) -> None:
        settings = TinyTimeSettings()

        with pytest.raises(AttributeError):
            settings.backend = Backend.JS  # type: ignore[misc]


class TestTinyTimeSettingsFromEnv:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("native", Backend.NATIVE), ("JS", Backend.JS), (" auto ", Backend.AUTO)],
    )
    def test_backend_override(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: Backend
    ) -> None:
        monkeypatch.setenv(BACKEND_ENV, raw)

        assert TinyTimeSettings.from_env().backend is expected

    def test_unknown_backend_falls_back_to_auto(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(BACKEND_ENV, "wasm")

        assert TinyTimeSettings.from_env().backend is Backend.AUTO

    def test_log_level_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

        settings = TinyTimeSettings.from_env()

        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG

    def test_unknown_log_level_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "LOUD")

        assert TinyTimeSettings.from_env().log_level == DEFAULT_LOG_LEVEL


class TestTinyTimeSettingsValidation:
    @pytest.mark.parametrize("raw", ["debug", "Debug", " DEBUG "])
    def test_normalises_log_level_name(self, raw: str) -> None:
        settings = TinyTimeSettings(log_level=raw)

        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG

    def test_rejects_raw_backend_string(self) -> None:
        with pytest.raises(ValueError, match="Backend"):
            TinyTimeSettings(backend="js")  # type: ignore[arg-type]

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValueError, match="log level"):
            TinyTimeSettings(log_level="LOUD")

    def test_rejects_non_string_log_level(self) -> None:
        with pytest.raises(ValueError, match="log level"):
            TinyTimeSettings(log_level=10)  # type: ignore[arg-type]
