"""
Объединение эмодзи, разбитых токенизатором на несколько токенов
Модификатор предложения: (token, index, parent) -> None | индекс продолжения
"""

from typing import List, Optional

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from retext_emoji.textom.nodes import Node, NodeType
from .dictionary import EmojiDictionary

# Настройка логгера модуля
logger = logger.bind(module="emoji_merger")

COLON = ":"

PUNCTUATION_TYPES = (NodeType.PUNCTUATION, NodeType.SYMBOL)


def is_colon(node: Node) -> bool:
    """Знак пунктуации или символ, равный ровно одному двоеточию"""
    return node.type in PUNCTUATION_TYPES and node.to_string() == COLON


class EmojiMerger:
    """
    Модификатор, собирающий эмодзи в один SymbolNode

    Порядок проверок (срабатывает первая):
        1. Слово, целиком являющееся unicode эмодзи
        2. Пунктуация/символ + слово, вместе дающие unicode эмодзи
        3. Закрывающее двоеточие шорткода ":name:"
    """

    def __init__(self, dictionary: EmojiDictionary):
        self.dictionary = dictionary

    def __call__(self, token: Node, index: int, parent: Node) -> Optional[int]:
        siblings = parent.children

        if token.type == NodeType.WORD:
            value = token.to_string()

            # Иногда unicode эмодзи размечен как слово
            if self.dictionary.has_unicode(value):
                token.type = NodeType.SYMBOL
                token.value = value
                logger.debug("Слово '{}' размечено как символ", value)
                return None

            # Иногда эмодзи разбит на пунктуацию и следующее за ней слово
            if index > 0:
                previous = siblings[index - 1]
                if previous.type in PUNCTUATION_TYPES:
                    merged = previous.to_string() + value
                    if self.dictionary.has_unicode(merged):
                        previous.type = NodeType.SYMBOL
                        previous.value = merged
                        del siblings[index]
                        logger.debug("Объединен разбитый эмодзи '{}'", merged)
                        return index - 1

        if not is_colon(token):
            return None

        return self._merge_shortcode(token, index, siblings)

    def _merge_shortcode(self, token: Node, index: int, siblings: List[Node]) -> Optional[int]:
        """
        Собрать шорткод, заканчивающийся на token

        Идет назад по соседям до открывающего двоеточия, накапливая текст.
        Без открывающего двоеточия или неизвестного шорткода ничего не меняет.
        """
        fragments: List[str] = []
        opening = index - 1

        while opening >= 0:
            node = siblings[opening]

            if node.children is not None:
                fragments.extend(child.to_string() for child in reversed(node.children))
            else:
                fragments.append(node.to_string())

            if is_colon(node):
                break

            opening -= 1

        if opening < 0:
            return None

        candidate = "".join(reversed(fragments)) + token.to_string()

        if not self.dictionary.has_shortcode(candidate):
            return None

        del siblings[opening:index]

        token.type = NodeType.SYMBOL
        token.value = candidate

        logger.debug("Собран шорткод '{}' из {} токенов", candidate, index - opening + 1)
        return opening
