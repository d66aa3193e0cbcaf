from typing import List

from .errors import DumpFormatError, MalformedCodeFence
from .util import indent, generate_tag, peek, slice_until
from .node import MarkdownNode, MarkdownNodeWithChildren
from .inline_node import TextNode, MonoTextNode, LinkNode

FENCE = '```'

def load_children(records, load_node, allowed, parent: str) -> List[MarkdownNode]:
    """Load child records, rejecting kinds that cannot appear under `parent`."""
    children = [load_node(record) for record in records]
    for child in children:
        if not isinstance(child, allowed):
            raise DumpFormatError(f'{child.kind} node cannot appear inside {parent}')
    return children

class DocumentNode(MarkdownNodeWithChildren):
    kind = 'document'

    def parse(self, source: str, pos: int, parse_block) -> int:
        while pos < len(source):
            block, pos = parse_block(source, pos)
            if block is not None:
                self.children.append(block)
        return pos

    def generate(self, context) -> str:
        return '\n'.join(map(lambda node: node.generate(context), self.children))

    def nested_repr(self, n: int):
        result =  f'{indent(n)}Document:\n'
        result += super().nested_repr(n)
        return result

    def to_record(self):
        return {self.kind: {'children': [child.to_record() for child in self.children]}}

    @classmethod
    def from_record(cls, payload, load_node):
        node = cls()
        node.children.extend(
            load_children(payload['children'], load_node, BLOCK_TYPES, cls.kind)
        )
        return node

class HeadingNode(MarkdownNode):
    kind = 'heading'

    def __init__(self, level: int = 0, content: str = ''):
        self.level = level
        self.content = content

    def parse(self, source: str, pos: int, _parse_inline) -> int:
        while peek(source, pos) == '#':
            self.level += 1
            pos += 1
        if peek(source, pos) == ' ':
            pos += 1
        self.content = slice_until(source, pos, '\n')
        pos += len(self.content)
        if peek(source, pos) == '\n':
            pos += 1
        return pos

    def get_text(self):
        return self.content

    def generate(self, context) -> str:
        return generate_tag(f'h{self.level}', {}, [context.text(self.content)])

    def nested_repr(self, n: int):
        return f'{indent(n)}Heading(level={self.level}, {repr(self.content)})\n'

    def to_record(self):
        return {self.kind: {'level': self.level, 'content': self.content}}

    @classmethod
    def from_record(cls, payload, _load_node):
        return cls(payload['level'], payload['content'])

class ParagraphNode(MarkdownNodeWithChildren):
    """
    A single line of inline content. Also used for list items, which is why
    it renders its children without the `<p>` wrapper through
    `generate_children`.
    """

    kind = 'paragraph'

    def parse(self, source: str, pos: int, parse_inline) -> int:
        while pos < len(source):
            if source[pos] == '\n':
                return pos + 1
            child, pos = parse_inline(source, pos)
            self.children.append(child)
        return pos

    def generate(self, context) -> str:
        return generate_tag('p', {}, [self.generate_children(context)])

    def nested_repr(self, n: int):
        result =  f'{indent(n)}Paragraph:\n'
        result += super().nested_repr(n)
        return result

    def to_record(self):
        return {self.kind: [child.to_record() for child in self.children]}

    @classmethod
    def from_record(cls, payload, load_node):
        node = cls()
        node.children.extend(load_children(payload, load_node, INLINE_TYPES, cls.kind))
        return node

class ListNode(MarkdownNode):
    kind = 'list'

    def __init__(self, ordered: bool = False):
        self.ordered = ordered
        self.items: List[ParagraphNode] = []

    def parse(self, source: str, pos: int, parse_inline) -> int:
        while peek(source, pos) in ('-', '*'):
            pos += 1
            if peek(source, pos) == ' ':
                pos += 1
            item = ParagraphNode()
            pos = item.parse(source, pos, parse_inline)
            self.items.append(item)
        return pos

    def get_children(self) -> List[MarkdownNode]:
        return self.items

    def get_text(self):
        return '\n'.join(map(lambda item: item.get_text(), self.items))

    def generate(self, context):
        return generate_tag('ol' if self.ordered else 'ul', {}, [
            generate_tag('li', {}, [item.generate_children(context)])
            for item in self.items
        ])

    def nested_repr(self, n: int):
        result =  f'{indent(n)}List(ordered={self.ordered}):\n'
        for item in self.items:
            result += item.nested_repr(n + 1)
        return result

    def to_record(self):
        return {self.kind: {
            'ordered': self.ordered,
            'items': [item.to_record() for item in self.items],
        }}

    @classmethod
    def from_record(cls, payload, load_node):
        node = cls(payload['ordered'])
        node.items.extend(load_children(payload['items'], load_node, ParagraphNode, cls.kind))
        return node

class CodeBlockNode(MarkdownNode):
    kind = 'codeBlock'

    def __init__(self, code: str = ''):
        self.code = code

    def parse(self, source: str, pos: int, _parse_inline) -> int:
        start = pos
        if len(source) - pos > len(FENCE):
            if not source.startswith(FENCE, pos):
                raise MalformedCodeFence(start, 'expected three backticks')
            pos += len(FENCE)
            if source[pos] != '\n':
                raise MalformedCodeFence(start, 'expected a newline after the opening fence')
            pos += 1

        content = slice_until(source, pos, FENCE)
        if len(content) == 0 or content[-1] != '\n':
            raise MalformedCodeFence(start, 'expected a newline before the closing fence')

        self.code = content[:-1]
        return min(pos + len(content) + len(FENCE), len(source))

    def get_text(self):
        return self.code

    def generate(self, context) -> str:
        return generate_tag('pre', {}, [
            generate_tag('code', {}, [context.text(self.code)])
        ])

    def nested_repr(self, n):
        return f'{indent(n)}CodeBlock({repr(self.code)})\n'

    def to_record(self):
        return {self.kind: {'code': self.code}}

    @classmethod
    def from_record(cls, payload, _load_node):
        return cls(payload['code'])

BLOCK_TYPES = (HeadingNode, ParagraphNode, ListNode, CodeBlockNode)
INLINE_TYPES = (TextNode, MonoTextNode, LinkNode)
