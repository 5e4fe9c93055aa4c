"""
retext-emoji
Объединение разбитых эмодзи в токенах предложения и перекодировка шорткодов
"""

from .emoji import EmojiDictionary, EmojiPlugin, create_emoji_plugin
from .textom import TextProcessor
from .utils.exceptions import ConfigurationError, DatasetError

__version__ = "1.0.0"

__all__ = [
    "EmojiDictionary",
    "EmojiPlugin",
    "create_emoji_plugin",
    "TextProcessor",
    "ConfigurationError",
    "DatasetError",
]
