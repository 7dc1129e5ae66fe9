# ---------------------------------------------------------------------------
# Unit Tests: Settings, Logging Setup and Request Logging Middleware
#
# Covered behavior:
#   - Environment-driven Settings with safe fallbacks for bad integers
#   - LOG_LEVEL / LOG_FILE handling in setup_logger
#   - The ASGI request logger emits one summary line per request and can be
#     switched off with REQUEST_LOGGING=0
# ---------------------------------------------------------------------------
import logging

from fastapi.testclient import TestClient

from task_api.config import Settings, get_settings
from task_api.main import create_app
from task_api.utils.logging import get_logger, setup_logger


def test_settings_defaults(monkeypatch):
    for name in ("HOST", "PORT", "PUBLIC_URL", "ALLOWED_ORIGINS", "REQUEST_LOGGING"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.host == "0.0.0.0"
    assert s.port == 3000
    assert s.public_url == "http://localhost:3000"
    assert s.allowed_origins == ["*"]
    assert s.request_logging is True


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("REQUEST_LOGGING", "0")
    monkeypatch.delenv("PUBLIC_URL", raising=False)
    s = get_settings()
    assert s.port == 8080
    assert s.public_url == "http://localhost:8080"
    assert s.allowed_origins == ["http://a.test", "http://b.test"]
    assert s.request_logging is False


def test_settings_bad_port_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert get_settings().port == 3000


def test_logger_silent_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "0")
    monkeypatch.delenv("LOG_FILE", raising=False)
    logger = setup_logger()
    assert logger.handlers == []
    assert not logger.isEnabledFor(logging.CRITICAL)


def test_logger_debug_to_file(monkeypatch, tmp_path):
    log_file = tmp_path / "api.log"
    monkeypatch.setenv("LOG_LEVEL", "2")
    monkeypatch.setenv("LOG_FILE", str(log_file))
    logger = setup_logger()
    get_logger("store").debug("hello from the store")
    for h in logger.handlers:
        h.flush()
    assert "hello from the store" in log_file.read_text(encoding="utf-8")
    monkeypatch.setenv("LOG_LEVEL", "1")
    monkeypatch.delenv("LOG_FILE")
    setup_logger()


def test_logger_setup_is_idempotent(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "1")
    monkeypatch.delenv("LOG_FILE", raising=False)
    setup_logger()
    logger = setup_logger()
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_request_logger_summary_line(mocker, settings):
    mock_logger = mocker.patch("task_api.api.middleware.log_requests.logger")
    client = TestClient(create_app(settings=settings))

    client.post("/tasks", json={"title": "a"})

    args = mock_logger.info.call_args[0]
    assert args[2:5] == ("POST", "/tasks", 201)


def test_request_logger_can_be_disabled(mocker):
    mock_logger = mocker.patch("task_api.api.middleware.log_requests.logger")
    settings = Settings(
        host="127.0.0.1",
        port=3000,
        public_url="http://localhost:3000",
        allowed_origins=["*"],
        request_logging=False,
    )
    client = TestClient(create_app(settings=settings))

    client.get("/tasks")

    mock_logger.info.assert_not_called()


def test_logger_unwritable_file_falls_back_to_stderr(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_LEVEL", "1")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "missing-dir" / "api.log"))
    logger = setup_logger()
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0], logging.FileHandler)
    monkeypatch.delenv("LOG_FILE")
    setup_logger()


def test_logger_bad_level_defaults_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "loud")
    monkeypatch.delenv("LOG_FILE", raising=False)
    assert setup_logger().level == logging.INFO
