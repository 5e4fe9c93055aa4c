"""
Плагин эмодзи для TextProcessor
Фабрика проверяет опции и создает экземпляр с фиксированным направлением
"""

from typing import Any, Mapping, Optional

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Сторонние библиотеки
from pydantic import ValidationError

# Локальные импорты
from retext_emoji.textom.nodes import NodeType
from retext_emoji.utils.config import EmojiOptions
from retext_emoji.utils.exceptions import (
    IllegalInvocationError,
    InvalidConfigValueError,
    MissingConfigurationError,
)
from .codec import EmojiCodec
from .dictionary import EmojiDictionary, get_emoji_dictionary
from .merger import EmojiMerger

# Настройка логгера модуля
logger = logger.bind(module="emoji_plugin")


class EmojiPlugin:
    """
    Экземпляр плагина с неизменяемым направлением конвертации

    attach() добавляет объединение эмодзи первым модификатором предложения
    и подписывает перекодировку на изменения текста SymbolNode.
    """

    def __init__(self, options: EmojiOptions, dictionary: EmojiDictionary):
        self.options = options
        self.dictionary = dictionary
        self.merger = EmojiMerger(dictionary)
        self.codec = EmojiCodec(dictionary, options.convert)

    @property
    def direction(self) -> str:
        return self.options.convert

    def attach(self, processor) -> None:
        """
        Подключить плагин к процессору

        Args:
            processor: Объект с parser.tokenize_sentence_modifiers и channel
        """
        modifiers = processor.parser.tokenize_sentence_modifiers

        if self.merger in modifiers:
            logger.warning("Плагин эмодзи уже подключен к процессору")
            return

        modifiers.insert(0, self.merger)
        processor.channel.on(NodeType.SYMBOL, self.codec)

        logger.debug("Плагин эмодзи подключен, направление: {}", self.direction)

    def __repr__(self) -> str:
        return f"EmojiPlugin(convert='{self.direction}')"


def _read_convert(options: Any) -> Any:
    if isinstance(options, Mapping):
        return options.get("convert")
    return getattr(options, "convert", None)


def create_emoji_plugin(*args: Any, dictionary: Optional[EmojiDictionary] = None) -> EmojiPlugin:
    """
    Создать плагин эмодзи

    Args:
        *args: Ровно один аргумент - опции с полем convert ("encode" или "decode")
        dictionary: Словарь эмодзи (по умолчанию общий для процесса)

    Returns:
        Экземпляр EmojiPlugin

    Raises:
        IllegalInvocationError: Фабрика вызвана с лишними аргументами
        MissingConfigurationError: Опции не переданы
        InvalidConfigValueError: Поле convert отсутствует или неверно
        DatasetError: Не удалось загрузить общий словарь
    """
    if len(args) > 1:
        raise IllegalInvocationError(len(args))

    options = args[0] if args else None
    if not options:
        raise MissingConfigurationError(options)

    if not isinstance(options, EmojiOptions):
        convert = _read_convert(options)
        try:
            options = EmojiOptions(convert=convert)
        except ValidationError as e:
            raise InvalidConfigValueError("convert", convert, "'encode' или 'decode'") from e

    if dictionary is None:
        dictionary = get_emoji_dictionary()

    return EmojiPlugin(options, dictionary)
