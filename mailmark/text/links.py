"""Unwrapping of Microsoft Safe Links.

Outlook rewrites every link as::

    https://na01.safelinks.protection.outlook.com/?url=ENCODED_URL&data=...&reserved=0

which costs tokens and hides the real destination.  The wrapper is replaced
with the decoded ``url`` parameter wherever it appears in the text.
"""

import re
from typing import Optional
from urllib.parse import unquote

SAFE_LINK_RE = re.compile(
    r"https?://[a-z0-9]+\.safelinks\.protection\.outlook\.com/\?url=([^&\s)\]>]+)(?:&[^\s)\]>]*)?",
    re.IGNORECASE,
)

# A "%" that does not start a two-digit hex escape
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_component(value: str) -> Optional[str]:
    """Percent-decode *value*; return None if the encoding is malformed."""
    if _BAD_ESCAPE_RE.search(value):
        return None
    try:
        return unquote(value, encoding="utf-8", errors="strict")
    except UnicodeDecodeError:
        return None


def _unwrap(match: "re.Match[str]") -> str:
    decoded = decode_component(match.group(1))
    return match.group(0) if decoded is None else decoded


def unwrap_safe_links(text: str) -> str:
    """Replace Safe Links wrappers in *text* with their destination URL."""
    return SAFE_LINK_RE.sub(_unwrap, text)
