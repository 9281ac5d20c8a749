"""Pipeline wiring.

    extract_media_urls -> render -> normalize_text

``transform`` never raises: if any stage fails the caller gets its input
back unchanged.  Input without tags or character references (plain text or
Markdown this pipeline already produced) skips rendering, so a second pass
keeps paragraph breaks.
"""

import re
from dataclasses import dataclass
from typing import Any

from mailmark.convert.media import extract_media_urls
from mailmark.convert.renderer import render
from mailmark.text.normalize import normalize_text
from mailmark.utils.logger import get_logger

log = get_logger(__name__)

# A tag, comment, doctype or character reference
_MARKUP_RE = re.compile(r"<[A-Za-z!/?]|&(?:#[0-9]+|#[xX][0-9A-Fa-f]+|[A-Za-z][A-Za-z0-9]*);")


@dataclass
class TransformResult:
    """Outcome of a single HTML -> Markdown conversion."""

    markdown: str
    converted: bool  # False when the original input was passed through
    original_length: int
    markdown_length: int


def has_markup(text: str) -> bool:
    return _MARKUP_RE.search(text) is not None


def transform_html(html: str) -> TransformResult:
    """Run the full pipeline on *html* and report what happened."""
    try:
        if has_markup(html):
            markdown = render(extract_media_urls(html))
        else:
            log.debug("No markup found; normalizing text only")
            markdown = html
        markdown = normalize_text(markdown)
    except Exception as exc:
        log.warning("HTML conversion failed (%s); returning original input", type(exc).__name__)
        return TransformResult(
            markdown=html,
            converted=False,
            original_length=len(html),
            markdown_length=len(html),
        )

    log.debug("Converted %d chars of HTML to %d chars of Markdown", len(html), len(markdown))
    return TransformResult(
        markdown=markdown,
        converted=True,
        original_length=len(html),
        markdown_length=len(markdown),
    )


def transform(html: Any) -> Any:
    """Convert an HTML body to compact Markdown.

    Empty and non-string input is returned as is.
    """
    if not html or not isinstance(html, str):
        return html
    return transform_html(html).markdown
