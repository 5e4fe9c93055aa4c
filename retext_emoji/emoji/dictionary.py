"""
Словарь эмодзи: шорткоды и unicode
Две неизменяемые таблицы, строятся один раз из набора данных
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

# Логирование (ОБЯЗАТЕЛЬНО loguru)
from loguru import logger

# Сторонние библиотеки
import emoji

# Локальные импорты
from retext_emoji.utils.config import get_config
from retext_emoji.utils.exceptions import DatasetError

# Настройка логгера модуля
logger = logger.bind(module="emoji_dictionary")

# Запись набора данных: (имя без двоеточий, unicode строка)
EmojiRecord = Tuple[str, str]


def to_shortcode(name: str) -> str:
    """Обернуть имя в двоеточия"""
    return f":{name}:"


class EmojiDictionary:
    """
    Таблицы поиска эмодзи

    shortcodes: ":name:" -> unicode
    unicode: unicode -> name (без двоеточий), первое имя из набора данных
    """

    def __init__(self, shortcodes: Mapping[str, str], unicode: Mapping[str, str], source: str = "records"):
        self.shortcodes: Mapping[str, str] = MappingProxyType(dict(shortcodes))
        self.unicode: Mapping[str, str] = MappingProxyType(dict(unicode))
        self.source = source

    @classmethod
    def from_records(cls, records: Iterable[EmojiRecord], source: str = "records") -> "EmojiDictionary":
        """
        Построить словарь из записей (name, unicode)

        Args:
            records: Пары имя/unicode, порядок задает приоритет имен
            source: Описание источника для логов и ошибок

        Returns:
            Готовый словарь

        Raises:
            DatasetError: Набор данных пуст или содержит невалидные записи
        """
        if records is None:
            raise DatasetError(source, "набор данных отсутствует")

        shortcodes: Dict[str, str] = {}
        unicode: Dict[str, str] = {}

        for record in records:
            try:
                name, value = record
            except (TypeError, ValueError):
                raise DatasetError(source, f"неверный формат записи: {record!r}")

            if not isinstance(name, str) or not name or ":" in name:
                raise DatasetError(source, f"неверное имя эмодзи: {name!r}")
            if not isinstance(value, str) or not value:
                raise DatasetError(source, f"пустое unicode значение для '{name}'")

            shortcodes.setdefault(to_shortcode(name), value)
            unicode.setdefault(value, name)

        if not shortcodes:
            raise DatasetError(source, "набор данных пуст")

        dictionary = cls(shortcodes, unicode, source=source)
        logger.info(
            "Загружено {} шорткодов и {} unicode эмодзи из {}",
            len(dictionary.shortcodes), len(dictionary.unicode), source
        )
        return dictionary

    def to_unicode(self, shortcode: str) -> Optional[str]:
        """Unicode для шорткода ":name:" или None"""
        return self.shortcodes.get(shortcode)

    def to_shortcode(self, value: str) -> Optional[str]:
        """Шорткод ":name:" для unicode эмодзи или None"""
        name = self.unicode.get(value)
        if name is None:
            return None
        return to_shortcode(name)

    def has_shortcode(self, shortcode: str) -> bool:
        return shortcode in self.shortcodes

    def has_unicode(self, value: str) -> bool:
        return value in self.unicode

    @property
    def count(self) -> int:
        """Количество шорткодов"""
        return len(self.shortcodes)

    def __repr__(self) -> str:
        return f"EmojiDictionary(source='{self.source}', shortcodes={len(self.shortcodes)})"


# ==============================================
# ИСТОЧНИКИ НАБОРА ДАННЫХ
# ==============================================

def emoji_library_records() -> List[EmojiRecord]:
    """
    Записи из библиотеки emoji

    Сначала GitHub-псевдонимы, затем английское имя CLDR.
    Полностью квалифицированные последовательности идут раньше остальных.
    """
    records: List[EmojiRecord] = []

    entries = sorted(emoji.EMOJI_DATA.items(), key=lambda item: item[1].get("status", 0))
    for value, data in entries:
        names = list(data.get("alias", []))
        if data.get("en"):
            names.append(data["en"])

        for name in names:
            records.append((name.strip(":"), value))

    return records


def load_gemoji_file(path: Union[str, Path]) -> EmojiDictionary:
    """
    Загрузить словарь из JSON файла в формате gemoji

    Формат: [{"emoji": "😀", "aliases": ["grinning"]}, ...]

    Args:
        path: Путь к файлу

    Returns:
        Словарь эмодзи

    Raises:
        DatasetError: Файл отсутствует или поврежден
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetError(str(path), "файл не найден")

    try:
        with path.open("r", encoding="utf-8") as f:
            entries = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DatasetError(str(path), str(e))

    if not isinstance(entries, list):
        raise DatasetError(str(path), "ожидается JSON массив")

    records: List[EmojiRecord] = []
    for entry in entries:
        if not isinstance(entry, dict) or "emoji" not in entry:
            raise DatasetError(str(path), f"неверная запись: {entry!r}")
        for alias in entry.get("aliases", []):
            records.append((alias, entry["emoji"]))

    return EmojiDictionary.from_records(records, source=str(path))


def load_emoji_dictionary() -> EmojiDictionary:
    """Построить словарь из источника, указанного в конфигурации"""
    dataset_path = get_config().get_dataset_path()
    if dataset_path is not None:
        return load_gemoji_file(dataset_path)
    return EmojiDictionary.from_records(emoji_library_records(), source="emoji")


# Глобальный экземпляр словаря
_emoji_dictionary: Optional[EmojiDictionary] = None


def get_emoji_dictionary() -> EmojiDictionary:
    """Получить экземпляр EmojiDictionary"""
    global _emoji_dictionary
    if _emoji_dictionary is None:
        _emoji_dictionary = load_emoji_dictionary()
    return _emoji_dictionary


def reload_emoji_dictionary() -> EmojiDictionary:
    """Перезагрузить словарь эмодзи"""
    global _emoji_dictionary
    _emoji_dictionary = None
    return get_emoji_dictionary()
