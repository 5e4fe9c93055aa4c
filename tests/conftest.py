import pytest

from retext_emoji.emoji.dictionary import EmojiDictionary
from retext_emoji.textom import TextProcessor

RECORDS = [
    ("grin", "😀"),
    ("grinning", "😀"),
    ("heart", "\u2764\ufe0f"),
    ("heart_on_fire", "\u2764\ufe0f\u200d\U0001f525"),
    ("+1", "👍"),
    ("thumbsup", "👍"),
    ("simple_smile", "🙂"),
    ("cat", "🐱"),
]


@pytest.fixture
def dictionary() -> EmojiDictionary:
    return EmojiDictionary.from_records(RECORDS, source="tests")


@pytest.fixture
def processor() -> TextProcessor:
    return TextProcessor()


@pytest.fixture
def log_messages():
    from loguru import logger

    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
