"""
Направленная перекодировка эмодзи в SymbolNode
encode: ":name:" -> unicode, decode: unicode -> ":name:"
"""

from typing import Optional

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from retext_emoji.textom.nodes import Node
from retext_emoji.utils.exceptions import InvalidConfigValueError
from .dictionary import EmojiDictionary

# Настройка логгера модуля
logger = logger.bind(module="emoji_codec")

ENCODE = "encode"
DECODE = "decode"
DIRECTIONS = (ENCODE, DECODE)


class EmojiCodec:
    """
    Обработчик изменения текста символа

    Переписывает текст не более одного раза за вызов. Результат перезаписи
    никогда не является ключом той же таблицы, поэтому повторное уведомление
    завершается без изменений.
    """

    def __init__(self, dictionary: EmojiDictionary, direction: str):
        if direction not in DIRECTIONS:
            raise InvalidConfigValueError("direction", direction, "'encode' или 'decode'")
        self.dictionary = dictionary
        self.direction = direction

    def convert(self, value: str) -> Optional[str]:
        """Каноническая форма текста или None, если текст не эмодзи"""
        if self.direction == ENCODE:
            return self.dictionary.to_unicode(value)
        return self.dictionary.to_shortcode(value)

    def __call__(self, node: Node) -> None:
        value = node.to_string()
        replacement = self.convert(value)

        if replacement:
            logger.debug("{}: '{}' -> '{}'", self.direction, value, replacement)
            node.from_string(replacement)

    def __repr__(self) -> str:
        return f"EmojiCodec(direction='{self.direction}')"
