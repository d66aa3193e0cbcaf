from abc import ABC, abstractmethod
from typing import Dict, Iterator, List

class MarkdownNode(ABC):
    """
    One node of the document tree. `kind` names the node in dumps and is
    unique per class.
    """

    kind = ''

    @abstractmethod
    def parse(self, source: str, pos: int, parse_child) -> int:
        pass

    @abstractmethod
    def get_text(self) -> str:
        pass

    @abstractmethod
    def generate(self, context) -> str:
        pass

    @abstractmethod
    def nested_repr(self, n: int):
        pass

    @abstractmethod
    def to_record(self):
        pass

    @classmethod
    @abstractmethod
    def from_record(cls, payload, load_node) -> 'MarkdownNode':
        pass

    def get_children(self) -> List['MarkdownNode']:
        return []

    def walk(self) -> Iterator['MarkdownNode']:
        """Yield this node and all of its descendants, parents first."""
        yield self
        for child in self.get_children():
            yield from child.walk()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.to_record() == other.to_record()

    def __repr__(self):
        return self.nested_repr(0)

class MarkdownNodeWithChildren(MarkdownNode):
    def __init__(self):
        self.children = []

    def get_children(self) -> List[MarkdownNode]:
        return self.children

    def get_text(self) -> str:
        return ''.join(map(lambda node: node.get_text(), self.children))

    def generate_children(self, context) -> str:
        return ''.join(map(lambda node: node.generate(context), self.children))

    def generate(self, context) -> str:
        return self.generate_children(context)

    def nested_repr(self, n: int):
        result =  ''
        for child in self.children:
            result += child.nested_repr(n + 1)
        return result

class ParserResult:
    """The document tree of one parse together with its front matter."""

    def __init__(self, root, metadata: Dict[str, str]):
        self.root = root
        self.metadata = metadata

    def __repr__(self):
        return f'ParserResult(metadata={self.metadata!r}):\n{self.root!r}'
