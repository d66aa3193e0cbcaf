from .util import indent, generate_tag, peek, slice_until
from .node import MarkdownNode

class TextNode(MarkdownNode):
    kind = 'text'

    def __init__(self, content: str = ''):
        self.content = content

    def parse(self, source: str, pos: int, _parse_inline) -> int:
        start = pos
        while pos < len(source) and source[pos] not in '\n`[':
            pos += 1
        self.content = source[start:pos]
        return pos

    def get_text(self):
        return self.content

    def generate(self, context) -> str:
        return context.text(self.content)

    def nested_repr(self, n):
        return f'{indent(n)}Text({repr(self.content)})\n'

    def to_record(self):
        return {self.kind: self.content}

    @classmethod
    def from_record(cls, payload, _load_node):
        return cls(payload)

class MonoTextNode(MarkdownNode):
    kind = 'monotext'

    def __init__(self, content: str = ''):
        self.content = content

    def parse(self, source: str, pos: int, _parse_inline) -> int:
        pos += 1
        self.content = slice_until(source, pos, '`')
        pos += len(self.content)
        # An unterminated span just runs to the end of input.
        if peek(source, pos) == '`':
            pos += 1
        return pos

    def get_text(self):
        return self.content

    def generate(self, context) -> str:
        return generate_tag('code', {}, [context.text(self.content)])

    def nested_repr(self, n):
        return f'{indent(n)}MonoText({repr(self.content)})\n'

    def to_record(self):
        return {self.kind: self.content}

    @classmethod
    def from_record(cls, payload, _load_node):
        return cls(payload)

class LinkNode(MarkdownNode):
    kind = 'link'

    def __init__(self, content: str = '', address: str = ''):
        self.content = content
        self.address = address

    def parse(self, source: str, pos: int, _parse_inline) -> int:
        pos += 1
        self.content = slice_until(source, pos, ']')
        # Skips `]` and whatever follows it, normally `(`.
        pos = min(pos + len(self.content) + 2, len(source))
        self.address = slice_until(source, pos, ')')
        pos = min(pos + len(self.address) + 1, len(source))
        return pos

    def get_text(self):
        return self.content

    def generate(self, context) -> str:
        return generate_tag(
            'a',
            {'href': context.text(self.address)},
            [context.text(self.content)]
        )

    def nested_repr(self, n):
        return f'{indent(n)}Link({repr(self.content)}, address={repr(self.address)})\n'

    def to_record(self):
        return {self.kind: {'content': self.content, 'address': self.address}}

    @classmethod
    def from_record(cls, payload, _load_node):
        return cls(payload['content'], payload['address'])
