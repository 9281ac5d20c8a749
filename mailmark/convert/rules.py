"""Rewrite rules for the Markdown renderer.

A rule pairs a filter with a replacement function.  The renderer walks
``RULES`` in order for every element and uses the first rule whose filter
matches; elements without a matching rule fall back to markdownify's own
conversion.

Filters are a tag name, a collection of tag names, or a predicate taking the
BeautifulSoup element.  Replacements receive the already-rendered inner
content and the element, and must return the same string for the same
attributes and content.
"""

import re
from dataclasses import dataclass
from typing import Callable, Collection, Tuple, Union

from bs4 import Tag

Filter = Union[str, Collection[str], Callable[[Tag], bool]]
Replacement = Callable[[str, Tag], str]

# Dropped together with everything inside them.
SUPPRESSED_TAGS = frozenset(
    {
        "script",
        "style",
        "noscript",
        "template",
        "canvas",
        "svg",
    }
)

LAYOUT_TABLE_TAGS = frozenset({"table", "thead", "tbody", "tfoot", "tr", "td", "th", "caption"})

_SCHEME_RE = re.compile(r"^https?://")


@dataclass(frozen=True)
class Rule:
    """A named (filter, replacement) pair."""

    name: str
    filter: Filter
    replacement: Replacement

    def matches(self, el: Tag) -> bool:
        name = (el.name or "").lower()
        if isinstance(self.filter, str):
            return name == self.filter
        if callable(self.filter):
            return bool(self.filter(el))
        return name in self.filter


# ---- Replacements --------------------------------------------------------


def remove(content: str, el: Tag) -> str:
    return ""


def single_newline(content: str, el: Tag) -> str:
    return "\n"


def simplify_link(content: str, el: Tag) -> str:
    """Emit a bare URL when the link text is empty or the URL, else ``[text](url)``."""
    href = el.get("href")
    if not href:
        return content

    text = content.strip()
    # Most Markdown renderers auto-link bare URLs
    if not text or text == href or text == _SCHEME_RE.sub("", href, count=1):
        return href
    return f"[{text}]({href})"


def flatten_table(content: str, el: Tag) -> str:
    """Render layout tables as plain lines of text."""
    name = el.name.lower()
    text = content.strip()
    if not text:
        return ""
    if name in ("td", "th"):
        return f" {text} "
    if name in ("tr", "caption"):
        return f"\n{text}\n"
    if name == "table":
        return f"\n\n{text}\n\n"
    # thead / tbody / tfoot
    return content


# Registration order matters: first match wins.
RULES: Tuple[Rule, ...] = (
    Rule("suppress_elements", SUPPRESSED_TAGS, remove),
    Rule("remove_images", "img", remove),
    Rule("simplify_breaks", "br", single_newline),
    Rule("optimize_links", "a", simplify_link),
    Rule("flatten_tables", LAYOUT_TABLE_TAGS, flatten_table),
)


def find_rule(el: Tag, rules: Tuple[Rule, ...] = RULES):
    """Return the first rule matching *el*, or None."""
    for rule in rules:
        if rule.matches(el):
            return rule
    return None
