"""
Модуль эмодзи: словарь, объединение токенов, перекодировка, плагин
"""

from .dictionary import (
    EmojiDictionary,
    get_emoji_dictionary,
    reload_emoji_dictionary,
    load_gemoji_file,
    emoji_library_records,
)
from .merger import EmojiMerger
from .codec import EmojiCodec, ENCODE, DECODE
from .plugin import EmojiPlugin, create_emoji_plugin

__all__ = [
    "EmojiDictionary",
    "get_emoji_dictionary",
    "reload_emoji_dictionary",
    "load_gemoji_file",
    "emoji_library_records",
    "EmojiMerger",
    "EmojiCodec",
    "ENCODE",
    "DECODE",
    "EmojiPlugin",
    "create_emoji_plugin",
]
