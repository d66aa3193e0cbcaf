"""Front matter: an optional `---` delimited block of `key: value` lines."""

from typing import Dict, Tuple

from .util import peek, slice_until

MARKER = '---'


def _skip_newline(source: str, pos: int) -> int:
    if peek(source, pos) == '\n':
        return pos + 1
    return pos


def extract_front_matter(source: str) -> Tuple[Dict[str, str], int]:
    """
    Read the metadata block at the start of `source`.

    Returns the metadata and the offset where the document body starts. When
    the source does not open with `---` the metadata is empty and the offset
    is 0. A block that is never closed swallows the rest of the input.
    """
    metadata = {}
    if not source.startswith(MARKER):
        return metadata, 0

    pos = _skip_newline(source, len(MARKER))
    while pos < len(source):
        if source.startswith(MARKER, pos):
            pos = _skip_newline(source, pos + len(MARKER))
            break

        line = slice_until(source, pos, '\n')
        pos = _skip_newline(source, pos + len(line))

        key, _, value = line.partition(':')
        if value.startswith(' '):
            value = value[1:]
        metadata[key] = value

    return metadata, pos
