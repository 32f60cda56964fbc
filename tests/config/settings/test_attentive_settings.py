"""Testes das settings de serviço e Attentive carregadas do ambiente."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    ATTENTIVE_API_BASE_URL,
    AttentiveSettings,
    ServiceSettings,
    get_attentive_settings,
    get_service_settings,
)


@pytest.fixture(autouse=True)
def _clear_caches() -> Iterator[None]:
    get_attentive_settings.cache_clear()
    get_service_settings.cache_clear()
    yield
    get_attentive_settings.cache_clear()
    get_service_settings.cache_clear()


class TestAttentiveSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "ATTENTIVE_API_KEY",
            "ATTENTIVE_API_BASE_URL",
            "ATTENTIVE_PAGE_SIZE",
            "ATTENTIVE_WEBHOOK_EVENTS",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = get_attentive_settings()

        assert settings.api_base_url == ATTENTIVE_API_BASE_URL
        assert settings.page_size == 100
        assert settings.max_page_iterations == 1000
        assert settings.webhook_events == ()
        assert settings.validate() == ["ATTENTIVE_API_KEY não configurado"]

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATTENTIVE_API_KEY", "secret-key")
        monkeypatch.setenv("ATTENTIVE_API_BASE_URL", "https://sandbox.example/v1/")
        monkeypatch.setenv("ATTENTIVE_WEBHOOK_EVENTS", "message.sent, ,message.failed")

        settings = get_attentive_settings()

        assert settings.api_key == "secret-key"
        assert settings.api_base_url == "https://sandbox.example/v1"
        assert settings.webhook_events == ("message.sent", "message.failed")
        assert settings.validate() == []

    def test_validate_ranges(self) -> None:
        errors = AttentiveSettings(
            api_key="k",
            api_base_url="ftp://x",
            request_timeout_seconds=0,
            page_size=500,
            max_page_iterations=0,
        ).validate()

        assert len(errors) == 4


class TestServiceSettings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGE", "staging"), ("whatever", "development")],
    )
    def test_environment_aliases(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)

        assert get_service_settings().environment == expected

    def test_flags(self) -> None:
        assert ServiceSettings(environment="production").is_production
        assert ServiceSettings(environment="staging").is_strict
        assert not ServiceSettings().is_strict
        assert ServiceSettings(service_name="").validate() == ["SERVICE_NAME não pode ser vazio"]

    def test_bind_and_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("DEBUG", "false")

        settings = get_service_settings()

        assert settings.port == 9000
        assert settings.effective_log_level == "WARNING"
        assert ServiceSettings(debug=True).effective_log_level == "DEBUG"
        assert ServiceSettings(port=0).validate() == ["PORT inválida: 0"]
