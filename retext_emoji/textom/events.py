"""
Синхронный канал уведомлений об изменении текста узлов
"""

from typing import Any, Callable, Dict, List

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Настройка логгера модуля
logger = logger.bind(module="textom_events")

ChangeHandler = Callable[[Any], None]


class ChangeChannel:
    """
    Упорядоченные списки обработчиков по типу узла
    Обработчики вызываются синхронно в том же стеке, что и изменение
    """

    def __init__(self):
        self._handlers: Dict[str, List[ChangeHandler]] = {}

    def on(self, node_type: str, handler: ChangeHandler) -> None:
        """Подписать обработчик на изменения текста узлов типа node_type"""
        self._handlers.setdefault(node_type, []).append(handler)
        logger.debug("Подписан обработчик {} на {}", handler, node_type)

    def off(self, node_type: str, handler: ChangeHandler) -> None:
        """Отписать обработчик"""
        handlers = self._handlers.get(node_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def listeners(self, node_type: str) -> List[ChangeHandler]:
        """Копия списка обработчиков для типа узла"""
        return list(self._handlers.get(node_type, []))

    def emit(self, node) -> None:
        """Оповестить обработчики об изменении текста узла"""
        for handler in self.listeners(node.type):
            handler(node)
