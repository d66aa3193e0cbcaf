from typing import Optional, Tuple, Union

from .inline_node import TextNode, MonoTextNode, LinkNode
from .block_node import DocumentNode, HeadingNode, ParagraphNode, ListNode, CodeBlockNode
from .front_matter import extract_front_matter
from .node import MarkdownNode, ParserResult

def parse_inline(source: str, pos: int) -> Tuple[MarkdownNode, int]:
    if source[pos] == '[':
        result = LinkNode()
    elif source[pos] == '`':
        result = MonoTextNode()
    else:
        result = TextNode()

    pos = result.parse(source, pos, parse_inline)
    return result, pos

def parse_block(source: str, pos: int) -> Tuple[Optional[MarkdownNode], int]:
    if source[pos] == '\n':
        return None, pos + 1

    if source[pos] == '#':
        result = HeadingNode()
    elif source[pos] in '-*':
        result = ListNode()
    elif source[pos] == '`':
        result = CodeBlockNode()
    else:
        result = ParagraphNode()

    pos = result.parse(source, pos, parse_inline)
    return result, pos

def parse(source: Union[str, bytes]) -> ParserResult:
    """
    Parse a whole markdown source, front matter included.

    Bytes are decoded as UTF-8 first, with undecodable bytes replaced by
    U+FFFD so any byte content parses. Raises `MalformedCodeFence` when a code
    block is not fenced properly; nothing else about the input is validated.
    """
    if isinstance(source, bytes):
        source = source.decode('UTF-8', errors='replace')

    metadata, pos = extract_front_matter(source)

    document = DocumentNode()
    document.parse(source, pos, parse_block)
    return ParserResult(document, metadata)
