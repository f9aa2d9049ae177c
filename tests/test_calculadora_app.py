"""Pruebas de la configuración de registro del punto de entrada."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

pytest.importorskip("tkinter")

from calculadora_app import LOG_FILE, configure_logging, default_log_path  # noqa: E402


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("calculator")
    saved = logger.handlers[:]
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved


class TestDefaultLogPath:
    def test_env_directory(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CALC_LOG_DIR", str(tmp_path))
        assert default_log_path() == str(tmp_path / LOG_FILE)

    def test_user_state_directory(self, monkeypatch, tmp_path):
        monkeypatch.delenv("CALC_LOG_DIR", raising=False)
        monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path))
        assert default_log_path() == str(tmp_path / "calculadora" / LOG_FILE)


class TestConfigureLogging:
    def test_console_and_file(self, clean_logger, tmp_path):
        log_path = tmp_path / "estado" / "calc.log"
        logger = configure_logging("debug", str(log_path))
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        assert log_path.exists()

    def test_unwritable_log_falls_back_to_console(self, clean_logger, tmp_path, caplog):
        # Un archivo ocupa el lugar del directorio: makedirs falla incluso como root
        blocker = tmp_path / "bloqueo"
        blocker.write_text("")
        log_path = blocker / "calc.log"

        with caplog.at_level(logging.WARNING, logger="calculator"):
            logger = configure_logging("info", str(log_path))

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], RotatingFileHandler)
        assert "registro sólo en consola" in caplog.text

    def test_unknown_level_defaults_to_info(self, clean_logger, tmp_path):
        logger = configure_logging("verbose", str(tmp_path / "calc.log"))
        assert logger.level == logging.INFO

    def test_configures_once(self, clean_logger, tmp_path):
        logger = configure_logging("info", str(tmp_path / "calc.log"))
        handlers = logger.handlers[:]
        assert configure_logging("debug", str(tmp_path / "otro.log")).handlers == handlers
