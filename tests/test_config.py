"""Tests for settings, client construction and logging setup."""

import io
import json
import logging

import httpx
import pytest

from testament_client import ValidationError, create_client
from testament_client.config import ClientSettings, configure_logging
from testament_client.config.settings import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


class TestClientSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TESTAMENT_BASE_URL", raising=False)
        monkeypatch.delenv("TESTAMENT_USER_AGENT", raising=False)
        monkeypatch.delenv("TESTAMENT_TIMEOUT_SECONDS", raising=False)

        settings = ClientSettings(_env_file=None)

        assert settings.base_url is None
        assert settings.user_agent == DEFAULT_USER_AGENT
        assert settings.timeout_seconds == DEFAULT_TIMEOUT

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TESTAMENT_BASE_URL", "http://example.test")
        monkeypatch.setenv("TESTAMENT_TIMEOUT_SECONDS", "5")

        settings = ClientSettings(_env_file=None)

        assert settings.base_url == "http://example.test"
        assert settings.timeout_seconds == 5.0

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError):
            ClientSettings(_env_file=None, timeout_seconds=0)


class TestCreateClient:
    def test_base_url_from_settings(self) -> None:
        client = create_client(settings=ClientSettings(_env_file=None, base_url="http://example.test"))

        assert client.base_url == "http://example.test"

    def test_explicit_base_url_wins(self) -> None:
        settings = ClientSettings(_env_file=None, base_url="http://example.test")

        assert create_client("http://other.test", settings=settings).base_url == "http://other.test"

    @pytest.mark.parametrize("base_url", [None, "", "/api", "localhost:8081"])
    def test_rejects_missing_or_relative_base_url(self, base_url) -> None:
        with pytest.raises(ValidationError):
            create_client(base_url, settings=ClientSettings(_env_file=None, base_url=None))

    def test_created_transport_uses_settings(self) -> None:
        settings = ClientSettings(_env_file=None, user_agent="ua/2", timeout_seconds=7)

        client = create_client("http://example.test", settings=settings)

        assert client.api.http.headers["User-Agent"] == "ua/2"
        assert client.api.http.timeout.read == 7

    def test_injected_transport_keeps_its_user_agent(self) -> None:
        http = httpx.AsyncClient(headers={"User-Agent": "mine"})

        client = create_client("http://example.test", http=http, settings=ClientSettings(_env_file=None))

        assert client.api.http is http
        assert http.headers["User-Agent"] == "mine"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_logging(self):
        root = logging.getLogger()
        client_logger = logging.getLogger("testament_client")
        root_handlers = root.handlers[:]
        saved = client_logger.handlers[:], client_logger.level, client_logger.propagate
        yield
        root.handlers[:] = root_handlers
        client_logger.handlers[:], client_logger.level, client_logger.propagate = saved

    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)

        assert logging.getLogger("testament_client").level == logging.DEBUG

    def test_quiet_by_default(self) -> None:
        configure_logging(log_json=True)

        assert logging.getLogger("testament_client").level == logging.WARNING

    def test_root_handlers_are_kept(self) -> None:
        root = logging.getLogger()
        app_handler = logging.NullHandler()
        root.addHandler(app_handler)
        root_level = root.level

        configure_logging(verbose=True)

        assert app_handler in root.handlers
        assert root.level == root_level
        assert logging.getLogger("testament_client").propagate is False

    def test_repeated_calls_replace_handler(self) -> None:
        first = configure_logging()
        second = configure_logging(verbose=True)

        handlers = logging.getLogger("testament_client").handlers
        assert second in handlers
        assert first not in handlers

    def test_json_lines_for_client_records(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)

        logging.getLogger("testament_client.core.client").debug("request %s %s", "GET", "http://host/api/apps")

        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["event"] == "request GET http://host/api/apps"
        assert record["level"] == "debug"
        assert record["logger"] == "testament_client.core.client"
