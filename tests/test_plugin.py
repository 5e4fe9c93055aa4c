from types import SimpleNamespace

import pytest

import retext_emoji.emoji.dictionary as dictionary_module
import retext_emoji.utils.config as config_module
from retext_emoji.emoji.plugin import EmojiPlugin, create_emoji_plugin
from retext_emoji.textom import (
    NodeType,
    TextProcessor,
    document,
    paragraph,
    punctuation,
    sentence,
    symbol,
    white_space,
    word,
)
from retext_emoji.utils.config import EmojiOptions
from retext_emoji.utils.exceptions import (
    ConfigurationError,
    DatasetError,
    IllegalInvocationError,
    InvalidConfigValueError,
    MissingConfigurationError,
)


def single_sentence(*tokens):
    tokens_sentence = sentence(*tokens)
    return document(paragraph(tokens_sentence)), tokens_sentence


def values(node):
    return [(child.type, child.to_string()) for child in node.children]


def test_missing_options(dictionary, processor):
    with pytest.raises(MissingConfigurationError):
        create_emoji_plugin(dictionary=dictionary)

    assert processor.parser.tokenize_sentence_modifiers == []
    assert processor.channel.listeners(NodeType.SYMBOL) == []


@pytest.mark.parametrize("options", [None, {}, "", 0])
def test_empty_options(dictionary, options):
    with pytest.raises(MissingConfigurationError):
        create_emoji_plugin(options, dictionary=dictionary)


@pytest.mark.parametrize("options", [
    {"convert": None},
    {"convert": ""},
    {"convert": "both"},
    {"convert": "Encode"},
    {"other": "encode"},
    SimpleNamespace(convert=1),
    SimpleNamespace(mode="encode"),
])
def test_invalid_convert(dictionary, options):
    with pytest.raises(InvalidConfigValueError) as exc_info:
        create_emoji_plugin(options, dictionary=dictionary)

    assert exc_info.value.parameter == "convert"


def test_implicit_invocation(dictionary, processor):
    with pytest.raises(IllegalInvocationError):
        create_emoji_plugin(processor, {"convert": "encode"}, dictionary=dictionary)


def test_errors_are_configuration_errors(dictionary):
    for args in [(), ({"convert": "x"},), ({"convert": "encode"}, None)]:
        with pytest.raises(ConfigurationError):
            create_emoji_plugin(*args, dictionary=dictionary)


def test_configuration_error_is_logged(dictionary, log_messages):
    with pytest.raises(ConfigurationError):
        create_emoji_plugin({"convert": "both"}, dictionary=dictionary)

    assert any("convert" in message for message in log_messages)


@pytest.mark.parametrize("options", [
    {"convert": "encode"},
    {"convert": "encode", "extra": True},
    SimpleNamespace(convert="encode"),
    EmojiOptions(convert="encode"),
])
def test_accepted_options(dictionary, options):
    plugin = create_emoji_plugin(options, dictionary=dictionary)

    assert isinstance(plugin, EmojiPlugin)
    assert plugin.direction == "encode"
    assert plugin.dictionary is dictionary


def test_attach_registers_merger_first(dictionary, processor):
    def other_modifier(token, index, parent):
        return None

    processor.parser.tokenize_sentence_modifiers.append(other_modifier)
    plugin = create_emoji_plugin({"convert": "decode"}, dictionary=dictionary)

    processor.use(plugin)

    assert processor.parser.tokenize_sentence_modifiers == [plugin.merger, other_modifier]
    assert processor.channel.listeners(NodeType.SYMBOL) == [plugin.codec]


def test_attach_twice_is_noop(dictionary, processor):
    plugin = create_emoji_plugin({"convert": "decode"}, dictionary=dictionary)

    plugin.attach(processor)
    plugin.attach(processor)

    assert processor.parser.tokenize_sentence_modifiers == [plugin.merger]
    assert processor.channel.listeners(NodeType.SYMBOL) == [plugin.codec]


def test_encode_shortcode(dictionary, processor):
    processor.use(create_emoji_plugin({"convert": "encode"}, dictionary=dictionary))
    doc, tokens = single_sentence(symbol(":"), word("grin"), symbol(":"))

    processor.run(doc)

    assert values(tokens) == [(NodeType.SYMBOL, "😀")]


def test_decode_word_emoji(dictionary, processor):
    processor.use(create_emoji_plugin({"convert": "decode"}, dictionary=dictionary))
    doc, tokens = single_sentence(word("😀"))

    processor.run(doc)

    assert values(tokens) == [(NodeType.SYMBOL, ":grin:")]


def test_decode_split_emoji(dictionary, processor):
    processor.use(create_emoji_plugin({"convert": "decode"}, dictionary=dictionary))
    doc, tokens = single_sentence(word("I"), white_space(), punctuation("\u2764"), word("\ufe0f"))

    processor.run(doc)

    assert processor.stringify(doc) == "I :heart:"
    assert tokens.children[-1].type == NodeType.SYMBOL


def test_encode_keeps_merged_unicode(dictionary, processor):
    processor.use(create_emoji_plugin({"convert": "encode"}, dictionary=dictionary))
    doc, tokens = single_sentence(punctuation("\u2764"), word("\ufe0f"))

    processor.run(doc)

    assert values(tokens) == [(NodeType.SYMBOL, "\u2764\ufe0f")]


def test_prose_colon_is_untouched(dictionary, processor):
    processor.use(create_emoji_plugin({"convert": "encode"}, dictionary=dictionary))
    doc, _ = single_sentence(word("Hi"), punctuation(":"), word("there"))
    before = doc.to_dict()

    processor.run(doc)

    assert doc.to_dict() == before


def test_instances_only_affect_their_processor(dictionary):
    encoder = TextProcessor().use(create_emoji_plugin({"convert": "encode"}, dictionary=dictionary))
    decoder = TextProcessor().use(create_emoji_plugin({"convert": "decode"}, dictionary=dictionary))

    encoded, _ = single_sentence(punctuation(":"), word("cat"), punctuation(":"), white_space(), word("🐱"))
    decoded, _ = single_sentence(punctuation(":"), word("cat"), punctuation(":"), white_space(), word("🐱"))

    encoder.run(encoded)
    decoder.run(decoded)

    assert encoder.stringify(encoded) == "🐱 🐱"
    assert decoder.stringify(decoded) == ":cat: :cat:"


def test_several_sentences(dictionary, processor):
    processor.use(create_emoji_plugin({"convert": "encode"}, dictionary=dictionary))
    first = sentence(word("Yes"), punctuation(":"), word("thumbsup"), punctuation(":"))
    second = sentence(punctuation(":"), word("cat"), punctuation(":"), punctuation("."))
    doc = document(paragraph(first, white_space(), second))

    processor.run(doc)

    assert processor.stringify(doc) == "Yes👍 🐱."


@pytest.fixture
def fresh_process_state(monkeypatch):
    """Сбросить общие конфигурацию и словарь, чтобы фабрика загрузила их заново"""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("EMOJI_DATASET_PATH", raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    monkeypatch.setattr(dictionary_module, "_emoji_dictionary", None)
    return monkeypatch


def test_invalid_process_setting_is_configuration_error(fresh_process_state, processor):
    fresh_process_state.setenv("LOG_LEVEL", "loud")

    with pytest.raises(InvalidConfigValueError) as exc_info:
        create_emoji_plugin({"convert": "encode"})

    assert isinstance(exc_info.value, ConfigurationError)
    assert exc_info.value.parameter == "LOG_LEVEL"
    assert exc_info.value.value == "loud"
    assert processor.parser.tokenize_sentence_modifiers == []
    assert processor.channel.listeners(NodeType.SYMBOL) == []


@pytest.mark.parametrize("content", [None, "{not json", '[{"aliases": ["grin"]}]'])
def test_dataset_failure_registers_nothing(fresh_process_state, processor, tmp_path, content):
    path = tmp_path / "emoji.json"
    if content is not None:
        path.write_text(content, encoding="utf-8")
    fresh_process_state.setenv("EMOJI_DATASET_PATH", str(path))

    with pytest.raises(DatasetError):
        processor.use(create_emoji_plugin({"convert": "decode"}))

    assert processor.plugins == []
    assert processor.parser.tokenize_sentence_modifiers == []
    assert processor.channel.listeners(NodeType.SYMBOL) == []
    assert dictionary_module._emoji_dictionary is None


def test_decode_rewrites_before_third_piece(dictionary, processor):
    processor.use(create_emoji_plugin({"convert": "decode"}, dictionary=dictionary))
    doc, tokens = single_sentence(symbol("\u2764"), word("\ufe0f"), word("\u200d\U0001f525"))

    processor.run(doc)

    assert values(tokens) == [
        (NodeType.SYMBOL, ":heart:"),
        (NodeType.WORD, "\u200d\U0001f525"),
    ]
