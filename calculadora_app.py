"""Punto de entrada de la calculadora de escritorio."""

import logging
import os
import tkinter as tk
from logging.handlers import RotatingFileHandler

from calculator_engine import CalculatorEngine
from calculator_ui import CalculatorApp
from display_formatter import DisplayFormatter


WINDOW_GEOMETRY = "340x600"

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
LOG_FILE = "calculadora.log"
LOG_MAX_BYTES = 512_000
LOG_BACKUP_COUNT = 2


def default_log_path() -> str:
    """Ruta del registro: $CALC_LOG_DIR o el directorio de estado del usuario."""
    log_dir = os.getenv("CALC_LOG_DIR")
    if not log_dir:
        state_home = os.getenv("XDG_STATE_HOME") or os.path.join(
            os.path.expanduser("~"), ".local", "state"
        )
        log_dir = os.path.join(state_home, "calculadora")
    return os.path.join(log_dir, LOG_FILE)


def _open_log_file(path: str) -> RotatingFileHandler:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    return RotatingFileHandler(
        path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )


def configure_logging(level_name: str | None = None, log_path: str | None = None) -> logging.Logger:
    """Configura una sola vez el logger ``calculator``.

    Siempre registra en consola. Si el archivo de registro no se puede
    abrir, se sigue sólo con la consola y se avisa.
    """
    logger = logging.getLogger("calculator")
    if logger.handlers:
        return logger

    level_name = (level_name or os.getenv("CALC_LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, None)
    logger.setLevel(level if isinstance(level, int) else logging.INFO)

    log_path = log_path or default_log_path()
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    file_error = None
    try:
        handlers.append(_open_log_file(log_path))
    except OSError as exc:
        file_error = exc

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if file_error is not None:
        logger.warning("registro sólo en consola, no se pudo abrir %s: %s", log_path, file_error)

    return logger


def main():
    log = configure_logging()

    formatter = DisplayFormatter(os.getenv("CALC_LOCALE") or None)
    log.info("configuración regional: %s", formatter.locale)

    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    CalculatorApp(root, engine=CalculatorEngine(), formatter=formatter)
    root.mainloop()


if __name__ == "__main__":
    main()
