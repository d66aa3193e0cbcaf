from .util import to_html_entities

class RenderContext:
    """
    State shared by every node's `generate` during one rendering pass.

    Text goes out verbatim unless `escape` is set. Sources that may contain
    `<` or `&` meant literally should be rendered with `escape=True`.
    """

    def __init__(self, escape: bool = False):
        self.escape = escape

    def text(self, content: str) -> str:
        if self.escape:
            return to_html_entities(content)
        return content

def render_html(node, escape: bool = False) -> str:
    """Render `node` and everything below it into an HTML fragment."""
    return node.generate(RenderContext(escape))
