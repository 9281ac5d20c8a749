"""Post-processing passes applied to rendered Markdown.

Each pass is a pure ``str -> str`` function.  :func:`normalize_text` runs them
in this order:

1. **Safe Links unwrapping** -- see :mod:`mailmark.text.links`.
2. **Invisible character removal** -- every Unicode format character
   (category ``Cf``: zero-width space/joiners, directional marks and
   embeddings, BOM, word joiner, soft hyphen, ...) plus U+034F COMBINING
   GRAPHEME JOINER, which is invisible but categorised ``Mn``.
3. **Whitespace normalization** -- every space separator (category ``Zs``:
   no-break, en, em, thin, hair, narrow no-break, ideographic, ...) becomes
   an ASCII space *before* any collapsing, so mixed runs collapse together.
   Lines are then collapsed and trimmed one by one, blank lines are limited to
   one in a row, and a last pass catches spaces that only became adjacent
   when the lines were joined back together.
"""

import re
import sys
import unicodedata
from functools import lru_cache
from typing import Dict, Pattern, Tuple

from mailmark.text.links import unwrap_safe_links
from mailmark.utils.config import settings

COMBINING_GRAPHEME_JOINER = "\u034f"

_SPACE_RUN_RE = re.compile(r"[ \t]+")
_MULTI_SPACE_RE = re.compile(r" {2,}")


@lru_cache(maxsize=None)
def _unicode_classes() -> Tuple[str, str]:
    """Return ``(format_chars, space_chars)`` for the whole code space.

    One scan over every code point, done once per process.
    """
    invisible = []
    spaces = []
    for ch in map(chr, range(sys.maxunicode + 1)):
        category = unicodedata.category(ch)
        if category == "Cf":
            invisible.append(ch)
        elif category == "Zs":
            spaces.append(ch)
    return "".join(invisible), "".join(spaces)


@lru_cache(maxsize=None)
def _invisible_re() -> Pattern[str]:
    chars = _unicode_classes()[0] + COMBINING_GRAPHEME_JOINER
    return re.compile("[" + re.escape(chars) + "]+")


@lru_cache(maxsize=None)
def _space_table() -> Dict[int, str]:
    return {ord(ch): " " for ch in _unicode_classes()[1]}


def remove_invisible_chars(text: str) -> str:
    """Strip zero-width and other format characters from *text*."""
    return _invisible_re().sub("", text)


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs and excess blank lines."""
    text = text.translate(_space_table())

    lines = []
    previous_blank = False
    for line in text.split("\n"):
        line = _SPACE_RUN_RE.sub(" ", line).strip()
        if not line:
            if previous_blank:
                continue
            previous_blank = True
        else:
            previous_blank = False
        lines.append(line)

    text = "\n".join(lines)
    text = _MULTI_SPACE_RE.sub(" ", text)
    return text.strip()


def normalize_text(text: str) -> str:
    """Run all post-processing passes over rendered Markdown."""
    if settings.unwrap_safe_links:
        text = unwrap_safe_links(text)
    text = remove_invisible_chars(text)
    return normalize_whitespace(text)
