"""
Logging Configuration

Настройка логгера пространства имён 'sqmatrix'.
Диагностика преобразований (невалидные индексы) выводится на уровне WARNING.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Конфигурация логгера 'sqmatrix'.

    Args:
        level: Уровень логирования (logging.DEBUG, logging.INFO, ...)
        log_file: Опциональный путь для дублирования логов в файл

    Returns:
        Сконфигурированный логгер пакета
    """
    logger = logging.getLogger("sqmatrix")
    logger.setLevel(level)

    # Повторный вызов не должен дублировать handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

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
