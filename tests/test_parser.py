import pytest

from tinymark import (
    CodeBlockNode,
    DocumentNode,
    HeadingNode,
    LinkNode,
    ListNode,
    MalformedCodeFence,
    MonoTextNode,
    ParagraphNode,
    TextNode,
    parse,
)


def _children(source):
    return parse(source).root.children


def test_parse_returns_document_root() -> None:
    result = parse("")
    assert isinstance(result.root, DocumentNode)
    assert result.root.children == []
    assert result.metadata == {}


def test_heading() -> None:
    (h,) = _children("### Hello world\n")
    assert isinstance(h, HeadingNode)
    assert h.level == 3
    assert h.content == "Hello world"


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6, 7, 12])
def test_heading_level_counts_hashes(level: int) -> None:
    (h,) = _children("#" * level + " Title\n")
    assert h.level == level
    assert h.content == "Title"


def test_heading_without_space_or_newline() -> None:
    (h,) = _children("##Tight")
    assert h.level == 2
    assert h.content == "Tight"


def test_heading_followed_by_paragraph() -> None:
    h, p = _children("### Hello world\nThis is a paragraph\n")
    assert isinstance(h, HeadingNode)
    assert isinstance(p, ParagraphNode)
    assert p.children == [TextNode("This is a paragraph")]


def test_plain_lines_become_one_paragraph_each() -> None:
    children = _children("first line\nsecond line\n\n\nthird line")
    assert [type(c) for c in children] == [ParagraphNode] * 3
    assert [c.get_text() for c in children] == ["first line", "second line", "third line"]


def test_blank_lines_produce_no_nodes() -> None:
    assert _children("\n\n\n") == []


def test_code_block() -> None:
    (cb,) = _children("```\nline1\n```")
    assert isinstance(cb, CodeBlockNode)
    assert cb.code == "line1"


def test_code_block_keeps_inner_lines_verbatim() -> None:
    (cb,) = _children("```\n# not a heading\n- not a list\n\n```\nafter\n")
    assert cb.code == "# not a heading\n- not a list\n"


def test_code_block_followed_by_paragraph() -> None:
    cb, p = _children("```\nprint hello world heh\n```\nafter\n")
    assert cb.code == "print hello world heh"
    assert p.get_text() == "after"


@pytest.mark.parametrize(
    "source",
    [
        "``\nfoo\n```",  # two backticks
        "```python\nfoo\n```",  # info string
        "```\nfoo```",  # no newline before the closing fence
        "```\n```",  # empty content
        "```",
        "``",
    ],
)
def test_malformed_code_fence(source: str) -> None:
    with pytest.raises(MalformedCodeFence) as exc_info:
        parse(source)
    assert exc_info.value.offset == 0


def test_malformed_code_fence_reports_offset() -> None:
    with pytest.raises(MalformedCodeFence) as exc_info:
        parse("text\n``x\n")
    assert exc_info.value.offset == 5


def test_unclosed_code_fence_runs_to_end() -> None:
    (cb,) = _children("```\nnever closed\n")
    assert cb.code == "never closed"


def test_short_tail_skips_opening_check() -> None:
    # With three or fewer characters left the opening is not checked, so the
    # whole tail becomes the code when it ends in a newline.
    p, cb = _children("x\n``\n")
    assert p.get_text() == "x"
    assert cb == CodeBlockNode("``")


def test_link_in_paragraph() -> None:
    (p,) = _children("This is a [link](https://example.com) in a paragraph\n")
    assert isinstance(p, ParagraphNode)
    assert len(p.children) == 3

    text1, link, text2 = p.children
    assert isinstance(text1, TextNode)
    assert text1.content == "This is a "
    assert isinstance(link, LinkNode)
    assert link.content == "link"
    assert link.address == "https://example.com"
    assert isinstance(text2, TextNode)
    assert text2.content == " in a paragraph"


def test_link_at_line_start() -> None:
    (p,) = _children("[home](/index.html)\n")
    assert p.children == [LinkNode("home", "/index.html")]


def test_link_does_not_check_opening_paren() -> None:
    (p,) = _children("[a]xhref)")
    assert p.children == [LinkNode("a", "href")]


def test_unmatched_bracket_degrades() -> None:
    (p,) = _children("see [this")
    assert p.children == [TextNode("see "), LinkNode("this", "")]


def test_monotext() -> None:
    (p,) = _children("run `make test` now\n")
    assert p.children == [TextNode("run "), MonoTextNode("make test"), TextNode(" now")]


def test_unterminated_monotext_runs_to_end() -> None:
    (p,) = _children("a `b")
    assert p.children == [TextNode("a "), MonoTextNode("b")]


def test_list() -> None:
    (lst,) = _children("- Item one\n- Item two\n- Item three\n")
    assert isinstance(lst, ListNode)
    assert lst.ordered is False
    assert len(lst.items) == 3
    for item, expected in zip(lst.items, ["Item one", "Item two", "Item three"]):
        assert isinstance(item, ParagraphNode)
        assert item.children == [TextNode(expected)]


def test_list_with_star_markers_and_inline_content() -> None:
    (lst,) = _children("* [docs](/docs)\n*`code`\n")
    assert lst.items[0].children == [LinkNode("docs", "/docs")]
    assert lst.items[1].children == [MonoTextNode("code")]


def test_list_ends_at_non_marker() -> None:
    lst, p = _children("- one\n- two\nafter\n")
    assert len(lst.items) == 2
    assert p.get_text() == "after"


def test_blank_line_splits_lists() -> None:
    first, second = _children("- one\n\n- two\n")
    assert isinstance(first, ListNode)
    assert isinstance(second, ListNode)


def test_accepts_bytes() -> None:
    (h,) = _children("# Grüße\n".encode("UTF-8"))
    assert h.content == "Grüße"


def test_parsing_is_idempotent() -> None:
    source = "---\ntitle: T\n---\n# A\ntext [l](u) `m`\n- x\n```\ncode\n```\n"
    first = parse(source)
    second = parse(source)
    assert first.root == second.root
    assert first.metadata == second.metadata
    assert first.root is not second.root


def test_front_matter_is_not_part_of_body() -> None:
    result = parse("---\ntitle: Hello\n---\n# Body\n")
    assert result.metadata == {"title": "Hello"}
    assert result.root.children == [HeadingNode(1, "Body")]


def test_undecodable_bytes_are_replaced() -> None:
    (h, p) = _children(b"# caf\xe9\nok\n")
    assert h.content == "caf\ufffd"
    assert p.get_text() == "ok"


def test_code_fence_offset_counts_characters() -> None:
    with pytest.raises(MalformedCodeFence) as exc_info:
        parse("Grüße\n``x\n".encode("UTF-8"))
    assert exc_info.value.offset == 6
