def indent(n: int):
    return ' ' * (4 * n)

def generate_tag(tag: str, attrs: dict, children=()):
    attr_result = ''
    for key in attrs:
        attr_result += f' {key}="{attrs[key]}"'

    content = ''.join(children)
    return f'<{tag}{attr_result}>{content}</{tag}>'

def to_html_entities(text: str) -> str:
    return (
        text.replace('&', '&amp;')
        .replace('<', '&lt;')
        .replace('>', '&gt;')
        .replace('"', '&quot;')
    )

def peek(source: str, pos: int) -> str:
    """The character at `pos`, or an empty string past the end."""
    if pos < len(source):
        return source[pos]
    return ''

def slice_until(source: str, pos: int, delimiter: str) -> str:
    """
    Everything from `pos` up to (excluding) the next `delimiter`, which may be
    a single character or a longer marker. Runs to the end of input when the
    delimiter never shows up.
    """
    end = source.find(delimiter, pos)
    if end == -1:
        end = len(source)
    return source[pos:end]
