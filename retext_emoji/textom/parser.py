"""
Обход токенов предложения модификаторами
Модификатор возвращает None (продолжить со следующего индекса) или индекс для продолжения
"""

from typing import Callable, List, Optional

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from .nodes import Node

# Настройка логгера модуля
logger = logger.bind(module="textom_parser")

Modifier = Callable[[Node, int, Node], Optional[int]]


def modify_children(modifier: Modifier, parent: Node) -> None:
    """
    Применить модификатор к каждому ребенку узла

    Список детей может меняться во время обхода, поэтому используется
    явный индекс, а не итератор.

    Args:
        modifier: Функция (token, index, parent) -> None | int
        parent: Узел, чьи дети обходятся
    """
    children = parent.children
    if children is None:
        return

    index = 0
    while index < len(children):
        result = modifier(children[index], index, parent)
        index = index + 1 if result is None else result


class SentenceParser:
    """
    Парсер с упорядоченным списком модификаторов предложения
    Модификаторы применяются к предложению по очереди
    """

    def __init__(self):
        self.tokenize_sentence_modifiers: List[Modifier] = []

    def modify_sentence(self, sentence: Node) -> Node:
        """Применить все модификаторы к токенам предложения"""
        for modifier in list(self.tokenize_sentence_modifiers):
            modify_children(modifier, sentence)
        return sentence
