"""
Минимальная объектная модель текста: узлы, обход, канал уведомлений
"""

from .events import ChangeChannel
from .nodes import (
    NodeType,
    Node,
    Document,
    text,
    word,
    punctuation,
    symbol,
    white_space,
    sentence,
    paragraph,
    document,
)
from .parser import SentenceParser, modify_children
from .processor import TextProcessor

__all__ = [
    "ChangeChannel",
    "NodeType",
    "Node",
    "Document",
    "text",
    "word",
    "punctuation",
    "symbol",
    "white_space",
    "sentence",
    "paragraph",
    "document",
    "SentenceParser",
    "modify_children",
    "TextProcessor",
]
