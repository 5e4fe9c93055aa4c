"""
Модуль настройки логирования через loguru
Конфигурирует обработчики логов для плагина
"""

import sys
from pathlib import Path
from typing import Optional

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Настройка логгера модуля
logger = logger.bind(module="logging_config")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> | "
    "<level>{message}</level>"
)

# Для записей без привязанного модуля
FALLBACK_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | "
    "{level: <8} | "
    "{extra[module]} | "
    "{message}"
)


def _has_module(record) -> bool:
    return record["extra"].get("module") is not None


def _has_no_module(record) -> bool:
    return record["extra"].get("module") is None


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    log_rotation: str = "10 MB",
    log_retention: str = "30 days"
) -> None:
    """
    Настройка логирования через loguru

    Args:
        log_level: Уровень логирования
        log_file: Путь к файлу логов (None - только консоль)
        log_rotation: Размер файла для ротации
        log_retention: Время хранения логов
    """
    # Удаляем стандартный handler
    logger.remove()

    # Console handler с цветной подсветкой
    logger.add(
        sys.stderr,
        level=log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
        filter=_has_module
    )

    logger.add(
        sys.stderr,
        level=log_level,
        format=FALLBACK_CONSOLE_FORMAT,
        colorize=True,
        filter=_has_no_module
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # File handler для записей модулей плагина
        logger.add(
            log_path,
            level="DEBUG",
            format=FILE_FORMAT,
            rotation=log_rotation,
            retention=log_retention,
            compression="zip",
            encoding="utf-8",
            filter=_has_module
        )

    logger.debug("Уровень логирования: {}", log_level)
    if log_file:
        logger.debug("Файл логов: {} (ротация {}, хранение {})", log_file, log_rotation, log_retention)


def setup_logging_from_config() -> None:
    """Настройка логирования из конфигурации"""
    # Импортируем здесь чтобы избежать циклических импортов
    from retext_emoji.utils.config import get_config

    config = get_config()
    setup_logging(
        log_level=config.LOG_LEVEL,
        log_file=config.LOG_FILE,
        log_rotation=config.LOG_ROTATION,
        log_retention=config.LOG_RETENTION
    )


def get_module_logger(module_name: str):
    """
    Получить логгер для конкретного модуля

    Args:
        module_name: Имя модуля

    Returns:
        Настроенный логгер с привязкой к модулю
    """
    return logger.bind(module=module_name)
