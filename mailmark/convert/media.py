"""Media URL extraction -- keeps the address of embedded media before rendering.

markdownify has no conversion for ``<iframe>``, ``<object>``, ``<embed>``,
``<video>`` or ``<audio>`` and their inner content is usually empty, so the
address would be lost. Each such element is rewritten into ``<p>URL</p>``
before the HTML reaches the renderer.
"""

import re
from typing import List, Pattern

from mailmark.utils.logger import get_logger

log = get_logger(__name__)

# tag -> attribute holding the element's address
MEDIA_ADDRESS_ATTRS = {
    "object": "data",
    "iframe": "src",
    "video": "src",
    "audio": "src",
    "embed": "src",
}

# Matches the rest of an opening tag up to and including a quoted address
# attribute.  ``data-src`` / ``x-data`` must not count as the address.
_ATTR = r"""[^>]*?(?<![\w-]){attr}\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')"""


def _compile_patterns() -> List[Pattern[str]]:
    patterns: List[Pattern[str]] = []
    flags = re.IGNORECASE | re.DOTALL
    for tag, attr in MEDIA_ADDRESS_ATTRS.items():
        opening = rf"<{tag}\b" + _ATTR.format(attr=attr)
        # <tag ...>...</tag>; the body never runs past the next <tag so an
        # unclosed element costs one scan up to its successor, not the whole rest
        patterns.append(
            re.compile(opening + rf"[^>]*?(?<!/)>(?:(?!<{tag}\b).)*?</{tag}\s*>", flags)
        )
        # <tag .../>
        patterns.append(re.compile(opening + r"[^>]*?/>", flags))
    # <embed> is a void element and usually has no closing tag at all.
    patterns.append(re.compile(r"<embed\b" + _ATTR.format(attr="src") + r"[^>]*>", flags))
    return patterns


_PATTERNS = _compile_patterns()


def _to_paragraph(match: "re.Match[str]") -> str:
    url = match.group("dq")
    if url is None:
        url = match.group("sq")
    return f"<p>{url}</p>"


def extract_media_urls(html: str) -> str:
    """Replace media elements in *html* with paragraphs holding only their URL.

    Elements without a quoted address attribute are left as they are.
    """
    total = 0
    for pattern in _PATTERNS:
        html, count = pattern.subn(_to_paragraph, html)
        total += count
    if total:
        log.debug("Extracted %d media URL(s)", total)
    return html
