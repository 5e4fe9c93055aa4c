"""
Модуль конфигурации
Опции плагина (pydantic) и настройки процесса из переменных окружения
"""

from typing import Literal, Optional
from pathlib import Path

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Сторонние библиотеки
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Локальные импорты
from retext_emoji.utils.exceptions import InvalidConfigValueError

# Настройка логгера модуля
logger = logger.bind(module="config")

VALID_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class EmojiOptions(BaseModel):
    """
    Опции экземпляра плагина

    Attributes:
        convert: Направление конвертации (encode - в unicode, decode - в шорткод)
    """

    model_config = ConfigDict(extra="allow", frozen=True, strict=True)

    convert: Literal["encode", "decode"]


class Config(BaseSettings):
    """Настройки процесса с валидацией"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "30 days"

    # Dataset (gemoji JSON); по умолчанию используется библиотека emoji
    EMOJI_DATASET_PATH: Optional[str] = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Валидация уровня логирования"""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL должен быть одним из: {', '.join(VALID_LOG_LEVELS)}")
        return v.upper()

    @field_validator("EMOJI_DATASET_PATH")
    @classmethod
    def validate_dataset_path(cls, v: Optional[str]) -> Optional[str]:
        """Пустая строка означает набор данных по умолчанию"""
        if v is not None and not v.strip():
            return None
        return v

    def get_dataset_path(self) -> Optional[Path]:
        """Получить путь к файлу набора данных"""
        if self.EMOJI_DATASET_PATH is None:
            return None
        return Path(self.EMOJI_DATASET_PATH)


# Глобальный экземпляр конфигурации
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Получить глобальный экземпляр конфигурации

    Raises:
        InvalidConfigValueError: Неверное значение переменной окружения
    """
    global _config
    if _config is None:
        try:
            _config = Config()
        except ValidationError as e:
            error = e.errors()[0]
            parameter = ".".join(str(part) for part in error["loc"])
            raise InvalidConfigValueError(parameter, error.get("input"), error["msg"]) from e
        logger.debug("Уровень логирования: {}", _config.LOG_LEVEL)
        logger.debug("Набор данных эмодзи: {}", _config.EMOJI_DATASET_PATH or "emoji")
    return _config


def reload_config() -> Config:
    """Перезагрузить конфигурацию"""
    global _config
    _config = None
    return get_config()
