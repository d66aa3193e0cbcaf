"""tinymark exception hierarchy.

Parsing has exactly one failure mode (a malformed code fence). Everything
else degrades into a literal or truncated parse instead of raising.
"""


class MarkdownError(Exception):
    """Base exception for all tinymark errors."""


class MalformedCodeFence(MarkdownError):
    """
    Raised when a fenced code block does not open or close properly.

    `offset` is a character offset into the decoded source, not a byte offset.
    """

    def __init__(self, offset: int, reason: str):
        super().__init__(f"malformed code fence at offset {offset}: {reason}")
        self.offset = offset
        self.reason = reason


class DumpFormatError(MarkdownError):
    """Raised when a dump record does not describe a known node."""
