"""
Logging Configuration

Настройка логгера пространства имён 'src' (console + optional file).
"""

import logging
import sys
from typing import Optional

LOGGER_NAMESPACE = "src"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Настройка логгера пакета.

    Console handler пишет в stderr, чтобы не смешиваться с выводом
    цифр демо-программы в stdout.

    Args:
        level: Уровень логирования (logging.DEBUG, logging.INFO, ...)
        log_file: Путь к файлу логов (optional)

    Returns:
        Настроенный логгер пакета
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    # Повторная настройка не должна дублировать handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
