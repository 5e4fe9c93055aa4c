"""
Процессор документов
Подключает плагины и прогоняет модификаторы по всем предложениям документа
"""

from typing import Any, List

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Локальные импорты
from .events import ChangeChannel
from .nodes import Document
from .parser import SentenceParser

# Настройка логгера модуля
logger = logger.bind(module="textom_processor")


class TextProcessor:
    """
    Хост для плагинов: парсер с модификаторами и канал уведомлений
    Каждый экземпляр имеет собственный канал, плагины не пересекаются
    """

    def __init__(self):
        self.parser = SentenceParser()
        self.channel = ChangeChannel()
        self.plugins: List[Any] = []

    def use(self, plugin: Any) -> "TextProcessor":
        """
        Подключить плагин

        Args:
            plugin: Объект с методом attach(processor)

        Returns:
            Этот же процессор (для цепочки вызовов)
        """
        plugin.attach(self)
        self.plugins.append(plugin)
        logger.debug("Подключен плагин {}", plugin)
        return self

    def run(self, document: Document) -> Document:
        """
        Обработать документ

        Args:
            document: Корень дерева токенов

        Returns:
            Тот же документ, измененный на месте
        """
        document.bind(self.channel)

        count = 0
        for sentence in document.sentences():
            self.parser.modify_sentence(sentence)
            count += 1

        logger.debug("Обработано предложений: {}", count)
        return document

    @staticmethod
    def stringify(document: Document) -> str:
        return document.to_string()
