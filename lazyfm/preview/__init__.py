"""Content renderers for the preview pane."""

from .renderers import ContentRenderer, RenderedContent, RendererError
from .syntax import DEFAULT_SYNTAX_STYLE, highlight_code, read_text, sanitize_terminal_text

__all__ = [
    "ContentRenderer",
    "DEFAULT_SYNTAX_STYLE",
    "RenderedContent",
    "RendererError",
    "highlight_code",
    "read_text",
    "sanitize_terminal_text",
]
