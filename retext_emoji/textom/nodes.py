"""
Дерево токенов предложения
Узлы с типом, текстом (лист) или дочерними узлами (составной узел)
"""

from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional

# Локальные импорты
from .events import ChangeChannel


class NodeType(str, Enum):
    """Типы узлов дерева"""
    ROOT = "RootNode"
    PARAGRAPH = "ParagraphNode"
    SENTENCE = "SentenceNode"
    WORD = "WordNode"
    PUNCTUATION = "PunctuationNode"
    SYMBOL = "SymbolNode"
    WHITE_SPACE = "WhiteSpaceNode"
    TEXT = "TextNode"


class Node:
    """
    Узел дерева токенов

    Листовой узел хранит value, составной - упорядоченный список children.
    Присваивание value делает узел листом и оповещает канал документа.
    """

    def __init__(
        self,
        node_type: str,
        value: Optional[str] = None,
        children: Optional[Iterable["Node"]] = None
    ):
        self.type = node_type
        self.parent: Optional["Node"] = None
        self.children: Optional[List["Node"]] = None
        self._value = value

        if children is not None:
            self.children = list(children)
            for child in self.children:
                child.parent = self

    @property
    def value(self) -> Optional[str]:
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        self._value = value
        self.children = None
        self._emit_change()

    def from_string(self, value: str) -> None:
        """Заменить текст узла"""
        self.value = value

    def to_string(self) -> str:
        """Текст узла: собственное значение или конкатенация детей"""
        if self.children is None:
            return self._value or ""
        return "".join(child.to_string() for child in self.children)

    @property
    def type_name(self) -> str:
        return self.type.value if isinstance(self.type, NodeType) else str(self.type)

    def root(self) -> "Node":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def _emit_change(self) -> None:
        channel = getattr(self.root(), "channel", None)
        if channel is not None:
            channel.emit(self)

    def to_dict(self) -> Dict[str, Any]:
        """Преобразование узла в словарь"""
        result: Dict[str, Any] = {"type": self.type_name}
        if self.children is None:
            result["value"] = self._value
        else:
            result["children"] = [child.to_dict() for child in self.children]
        return result

    def __repr__(self) -> str:
        if self.children is None:
            return f"{self.type_name}({self._value!r})"
        return f"{self.type_name}({self.children!r})"


class Document(Node):
    """Корневой узел, к которому привязан канал уведомлений"""

    def __init__(self, children: Optional[Iterable[Node]] = None):
        super().__init__(NodeType.ROOT, children=children or [])
        self.channel: Optional[ChangeChannel] = None

    def bind(self, channel: ChangeChannel) -> None:
        """Привязать канал уведомлений процессора"""
        self.channel = channel

    def sentences(self) -> Iterator[Node]:
        """Обход всех предложений документа по порядку"""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.type == NodeType.SENTENCE:
                yield node
            elif node.children:
                stack.extend(reversed(node.children))


# ==============================================
# ФАБРИЧНЫЕ ФУНКЦИИ
# ==============================================

def text(value: str) -> Node:
    return Node(NodeType.TEXT, value)


def word(*values: str) -> Node:
    """Слово из одного или нескольких текстовых узлов"""
    return Node(NodeType.WORD, children=[text(value) for value in values])


def punctuation(value: str) -> Node:
    return Node(NodeType.PUNCTUATION, value)


def symbol(value: str) -> Node:
    return Node(NodeType.SYMBOL, value)


def white_space(value: str = " ") -> Node:
    return Node(NodeType.WHITE_SPACE, value)


def sentence(*children: Node) -> Node:
    return Node(NodeType.SENTENCE, children=children)


def paragraph(*children: Node) -> Node:
    return Node(NodeType.PARAGRAPH, children=children)


def document(*children: Node) -> Document:
    return Document(children)
