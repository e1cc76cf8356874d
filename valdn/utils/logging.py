import logging
import os
from pathlib import Path

_logging_configured = False
_log_file_path: Path | None = None


def setup_logging(level: str | None = None, log_file: str | Path | None = None):
    """
    Setup logging for the command line tool.

    Log levels:
    - CRITICAL
    - ERROR
    - WARNING
    - INFO
    - DEBUG
    - NOTSET

    The level defaults to `LOG_LEVEL` (WARNING when unset). Records go to
    `log_file` when given, and to the console when no file is given or when
    `ENV=debug`.
    """
    global _logging_configured, _log_file_path

    log_path = Path(log_file) if log_file else None

    # If already configured and path matches, skip reconfiguration
    if _logging_configured and _log_file_path == log_path:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel((level or os.getenv('LOG_LEVEL', 'WARNING')).upper())

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), mode='a')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        root_logger.addHandler(file_handler)

    if log_path is None or os.getenv('ENV') == 'debug':
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('%(levelname)s - %(name)s - %(message)s'))
        root_logger.addHandler(console_handler)

    _log_file_path = log_path
    _logging_configured = True
    logging.debug("Logging configured successfully")


def get_log_file_path() -> Path | None:
    return _log_file_path
