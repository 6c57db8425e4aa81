"""Testes das settings carregadas do ambiente e da validação de runtime."""

from __future__ import annotations

import pytest

from app.bootstrap import validate_runtime_settings
from config.settings import (
    DEFAULT_CHECK_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    BackendSettings,
    BaseSettings,
    ConnectivitySettings,
    SessionSettings,
    get_backend_settings,
    get_base_settings,
    get_connectivity_settings,
    get_session_settings,
)

ENV_VARS = (
    "ENVIRONMENT",
    "SERVICE_NAME",
    "DEBUG",
    "REDIS_URL",
    "USER_API_URL",
    "AFFILIATION_API_URL",
    "BACKEND_REQUEST_TIMEOUT_SECONDS",
    "BACKEND_VERIFY_SSL",
    "SESSION_STORE_BACKEND",
    "SESSION_KEY_PREFIX",
    "CONNECTIVITY_CHECK_URL",
    "CONNECTIVITY_TIMEOUT_SECONDS",
)

GETTERS = (
    get_base_settings,
    get_backend_settings,
    get_session_settings,
    get_connectivity_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    for getter in GETTERS:
        getter.cache_clear()
    yield
    for getter in GETTERS:
        getter.cache_clear()


class TestDefaults:
    def test_defaults_without_env(self) -> None:
        base = get_base_settings()
        backend = get_backend_settings()
        session = get_session_settings()
        connectivity = get_connectivity_settings()

        assert base.environment == "development"
        assert base.service_name == "coachlink"
        assert base.is_development is True
        assert backend.user_api_url == ""
        assert backend.is_configured is False
        assert backend.request_timeout_seconds == DEFAULT_REQUEST_TIMEOUT_SECONDS == 5.0
        assert backend.verify_ssl is True
        assert session.store_backend == "memory"
        assert session.key_prefix == "coachlink:"
        assert connectivity.check_url == DEFAULT_CHECK_URL

    def test_getters_are_cached(self) -> None:
        assert get_backend_settings() is get_backend_settings()


class TestFromEnv:
    def test_backend_urls_are_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("USER_API_URL", "https://host/api/User/")
        monkeypatch.setenv("AFFILIATION_API_URL", "https://host/api/Affiliation")
        monkeypatch.setenv("BACKEND_REQUEST_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("BACKEND_VERIFY_SSL", "false")

        backend = get_backend_settings()

        assert backend.user_api_url == "https://host/api/User"
        assert backend.request_timeout_seconds == 2.5
        assert backend.verify_ssl is False
        assert backend.validate() == []

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGING", "staging"), ("qualquer", "development")],
    )
    def test_environment_parsing(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)
        assert get_base_settings().environment == expected

    def test_unknown_session_backend_falls_back_to_memory(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SESSION_STORE_BACKEND", "sqlite")
        assert get_session_settings().store_backend == "memory"


class TestValidation:
    def test_backend_validation(self) -> None:
        errors = BackendSettings(
            user_api_url="ftp://host", request_timeout_seconds=0
        ).validate()

        assert "AFFILIATION_API_URL não configurado" in errors
        assert "USER_API_URL deve começar com http:// ou https://" in errors
        assert "BACKEND_REQUEST_TIMEOUT_SECONDS deve ser > 0" in errors

    def test_session_validation(self) -> None:
        production = BaseSettings(environment="production")
        development = BaseSettings(environment="development")

        assert SessionSettings("memory").validate(development) == []
        assert SessionSettings("memory").validate(production) == [
            "SESSION_STORE_BACKEND=memory proibido em staging/production"
        ]
        assert SessionSettings("redis").validate(development) == [
            "SESSION_STORE_BACKEND=redis requer REDIS_URL configurado"
        ]

    def test_connectivity_validation(self) -> None:
        assert ConnectivitySettings().validate() == []
        assert len(ConnectivitySettings(check_url="", timeout_seconds=0).validate()) == 2

    def test_runtime_validation_warns_in_development(self) -> None:
        # Backend não configurado: apenas alerta em development
        validate_runtime_settings()

    def test_runtime_validation_is_strict_in_production(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")

        with pytest.raises(RuntimeError, match="Configuração inválida para production"):
            validate_runtime_settings()

    def test_runtime_validation_passes_with_complete_config(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("USER_API_URL", "https://host/api/User")
        monkeypatch.setenv("AFFILIATION_API_URL", "https://host/api/Affiliation")
        monkeypatch.setenv("SESSION_STORE_BACKEND", "redis")
        monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")

        validate_runtime_settings()
