"""
Structural dump of a document tree.

Every node becomes a record keyed by its kind, for example
`{"heading": {"level": 1, "content": "Title"}}` or `{"text": "plain"}`.
Records contain only lists, dicts, strings, integers and booleans, so they
serialize to JSON or YAML as they are, and `load_nodes` rebuilds an equal
tree from them.
"""

import json
from typing import Iterable, List

import yaml

from .errors import DumpFormatError
from .block_node import DocumentNode, HeadingNode, ParagraphNode, ListNode, CodeBlockNode
from .inline_node import TextNode, MonoTextNode, LinkNode
from .node import MarkdownNode

NODE_TYPES = {
    cls.kind: cls
    for cls in (
        DocumentNode,
        HeadingNode,
        ParagraphNode,
        ListNode,
        CodeBlockNode,
        LinkNode,
        MonoTextNode,
        TextNode,
    )
}

FORMATS = ('json', 'yaml')


def dump_nodes(nodes: Iterable[MarkdownNode]) -> list:
    return [node.to_record() for node in nodes]


def dumps(nodes: Iterable[MarkdownNode], fmt: str = "json") -> str:
    """Serialize `nodes` as JSON or YAML, indented by two spaces."""
    records = dump_nodes(nodes)
    match fmt:
        case "json":
            return json.dumps(records, indent=2, ensure_ascii=False)
        case "yaml":
            return yaml.safe_dump(
                records, indent=2, allow_unicode=True, sort_keys=False
            )
    raise ValueError(f"unknown dump format {fmt!r}, expected one of {FORMATS}")


def load_node(record) -> MarkdownNode:
    if not isinstance(record, dict) or len(record) != 1:
        raise DumpFormatError(f"expected a single-key record, got {record!r}")

    ((kind, payload),) = record.items()
    if kind not in NODE_TYPES:
        raise DumpFormatError(f"unknown node kind {kind!r}")

    try:
        return NODE_TYPES[kind].from_record(payload, load_node)
    except (KeyError, TypeError) as e:
        raise DumpFormatError(f"malformed {kind} record: {payload!r}") from e


def load_nodes(records: Iterable) -> List[MarkdownNode]:
    return [load_node(record) for record in records]
