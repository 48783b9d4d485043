"""Build preview payloads for the selected file.

The renderer picks one strategy per file:
- Markdown rendered through rich (when pretty markdown is enabled)
- raster images converted to half-block ANSI art with Pillow
- PDF text extracted with pypdf
- binary placeholders for anything with NUL bytes
- syntax-colored source text for everything else
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError
from pypdf import PdfReader
from pypdf.errors import PdfReadError
from rich.console import Console
from rich.markdown import Markdown

from .syntax import DEFAULT_SYNTAX_STYLE, highlight_code, read_text, sanitize_terminal_text

BINARY_PROBE_BYTES = 4_096
COLORIZE_MAX_FILE_BYTES = 256_000
MARKDOWN_EXTENSIONS = frozenset({".md", ".markdown"})
IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp"})
PDF_EXTENSIONS = frozenset({".pdf"})


class RendererError(Exception):
    """A renderer could not turn a file into displayable text."""


@dataclass(frozen=True)
class RenderedContent:
    """Displayable preview text plus the strategy that produced it."""

    kind: str
    text: str
    image_path: Path | None = None

    @classmethod
    def binary_file(cls, target: Path, file_size: int) -> RenderedContent:
        return cls(kind="binary", text=f"{target}\n\n<binary file: {file_size} bytes>")


class ContentRenderer:
    """Content collaborator: one call per preview, result returned by value."""

    def __init__(self, style: str = DEFAULT_SYNTAX_STYLE, pretty_markdown: bool = True) -> None:
        self.style = style
        self.pretty_markdown = pretty_markdown

    def highlight_code(self, content: str, path: Path, style: str | None = None) -> str:
        return highlight_code(content, path, style or self.style)

    def render_markdown(self, content: str, width: int) -> str:
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            force_terminal=True,
            color_system="256",
            width=max(20, width),
            legacy_windows=False,
        )
        # rich passes control bytes through untouched.
        console.print(Markdown(sanitize_terminal_text(content), code_theme=self.style))
        return buffer.getvalue()

    def image_to_string(self, path: Path, width: int) -> str:
        """Render an image as rows of ``▀`` cells, two pixels per cell.

        The upper pixel becomes the foreground color and the lower pixel the
        background, so ``width`` columns show ``width`` x ``2*rows`` pixels.
        """
        try:
            with Image.open(path) as source:
                image = source.convert("RGB")
        except (UnidentifiedImageError, OSError) as exc:
            raise RendererError(f"cannot decode image {path.name}: {exc}") from exc
        columns = max(1, min(width, image.width))
        pixel_rows = max(2, round(image.height * columns / image.width))
        pixel_rows += pixel_rows % 2
        image = image.resize((columns, pixel_rows))
        pixels = image.load()
        lines: list[str] = []
        for y in range(0, pixel_rows, 2):
            cells: list[str] = []
            for x in range(columns):
                top = pixels[x, y]
                bottom = pixels[x, y + 1]
                cells.append(
                    f"\033[38;2;{top[0]};{top[1]};{top[2]}m"
                    f"\033[48;2;{bottom[0]};{bottom[1]};{bottom[2]}m▀"
                )
            lines.append("".join(cells) + "\033[0m")
        return "\n".join(lines) + "\n"

    def extract_pdf_text(self, path: Path) -> str:
        try:
            reader = PdfReader(path)
            pages = [page.extract_text() or "" for page in reader.pages]
        except PdfReadError as exc:
            raise RendererError(f"cannot read pdf {path.name}: {exc}") from exc
        return sanitize_terminal_text("\n".join(pages))

    def render(self, path: Path, width: int) -> RenderedContent:
        """Pick a strategy by extension and content and render ``path``."""
        extension = path.suffix.lower()
        if extension in IMAGE_EXTENSIONS:
            return RenderedContent(kind="image", text=self.image_to_string(path, width), image_path=path)
        if extension in PDF_EXTENSIONS:
            return RenderedContent(kind="pdf", text=self.extract_pdf_text(path))

        with path.open("rb") as handle:
            sample = handle.read(BINARY_PROBE_BYTES)
        file_size = path.stat().st_size
        if b"\x00" in sample:
            return RenderedContent.binary_file(path, file_size)

        source = read_text(path)
        if extension in MARKDOWN_EXTENSIONS and self.pretty_markdown:
            return RenderedContent(kind="markdown", text=self.render_markdown(source, width))
        if file_size > COLORIZE_MAX_FILE_BYTES:
            return RenderedContent(kind="text", text=sanitize_terminal_text(source))
        return RenderedContent(kind="code", text=self.highlight_code(source, path))


__all__ = [
    "ContentRenderer",
    "IMAGE_EXTENSIONS",
    "RenderedContent",
    "RendererError",
]
