"""
tinymark: a small markdown dialect parsed into a typed tree and rendered to
HTML.

    >>> result = parse("# Hello\\n")
    >>> render_html(result.root)
    '<h1>Hello</h1>'
"""

from .errors import MarkdownError, MalformedCodeFence, DumpFormatError
from .node import MarkdownNode, ParserResult
from .block_node import DocumentNode, HeadingNode, ParagraphNode, ListNode, CodeBlockNode
from .inline_node import TextNode, MonoTextNode, LinkNode
from .front_matter import extract_front_matter
from .parser import parse, parse_block, parse_inline
from .context import RenderContext, render_html
from .dump import dump_nodes, dumps, load_node, load_nodes

__all__ = [
    'MarkdownError',
    'MalformedCodeFence',
    'DumpFormatError',
    'MarkdownNode',
    'ParserResult',
    'DocumentNode',
    'HeadingNode',
    'ParagraphNode',
    'ListNode',
    'CodeBlockNode',
    'TextNode',
    'MonoTextNode',
    'LinkNode',
    'extract_front_matter',
    'parse',
    'parse_block',
    'parse_inline',
    'RenderContext',
    'render_html',
    'dump_nodes',
    'dumps',
    'load_node',
    'load_nodes',
]
