"""
Модуль кастомных исключений плагина
Все ошибки возникают синхронно при создании плагина или загрузке словаря
"""

from typing import Optional, Any

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Настройка логгера модуля
logger = logger.bind(module="exceptions")


class RetextEmojiError(Exception):
    """Базовое исключение для всех ошибок плагина"""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

        # Логируем все исключения
        if details:
            logger.error("RetextEmojiError: {} | Детали: {}", message, details)
        else:
            logger.error("RetextEmojiError: {}", message)


# ==============================================
# ИСКЛЮЧЕНИЯ КОНФИГУРАЦИИ
# ==============================================

class ConfigurationError(RetextEmojiError):
    """Ошибки конфигурации плагина"""
    pass


class MissingConfigurationError(ConfigurationError):
    """Конфигурация не передана при создании плагина"""

    def __init__(self, options: Any = None):
        message = (
            f"Illegal invocation: `{options!r}` is not a valid value "
            f"for `options` in `create_emoji_plugin(options)`"
        )
        super().__init__(message)
        self.options = options


class IllegalInvocationError(ConfigurationError):
    """Фабрика вызвана процессором, а не пользователем"""

    def __init__(self, arguments_count: int):
        message = (
            "Illegal invocation: `create_emoji_plugin` was invoked by the "
            "processor, but should be invoked by the user"
        )
        super().__init__(message, f"Передано аргументов: {arguments_count}")
        self.arguments_count = arguments_count


class InvalidConfigValueError(ConfigurationError):
    """Неверное значение в конфигурации"""

    def __init__(self, parameter: str, value: Any, expected: str):
        message = f"Неверное значение параметра '{parameter}': {value!r}. Ожидается: {expected}"
        super().__init__(message)
        self.parameter = parameter
        self.value = value
        self.expected = expected


# ==============================================
# ИСКЛЮЧЕНИЯ СЛОВАРЯ ЭМОДЗИ
# ==============================================

class DatasetError(ConfigurationError):
    """Набор данных эмодзи отсутствует или поврежден"""

    def __init__(self, source: str, details: Optional[str] = None):
        message = f"Не удалось загрузить набор данных эмодзи: {source}"
        super().__init__(message, details)
        self.source = source
