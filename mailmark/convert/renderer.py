"""HTML to Markdown rendering with email-specific rewrite rules."""

from typing import Optional, Tuple

from bs4 import BeautifulSoup, Tag
from markdownify import ATX, MarkdownConverter

from mailmark.convert.rules import RULES, Rule, find_rule
from mailmark.utils.config import settings

# Blank elements of these kinds render to "" with no spacing at all.
BLOCK_TAGS = frozenset(
    {
        "[document]", "html", "body", "head",
        "address", "article", "aside", "blockquote", "center", "dd", "details",
        "dialog", "div", "dl", "dt", "fieldset", "figcaption", "figure",
        "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "header",
        "hgroup", "li", "main", "menu", "nav", "ol", "p", "pre", "section",
        "summary", "ul",
    }
)

# Void elements whose output does not come from their (empty) content.
MEANINGFUL_WHEN_BLANK = frozenset({"hr", "input"})


class EmailMarkdownConverter(MarkdownConverter):
    """markdownify converter driven by a rule table.

    For every element the first matching rule from ``rules`` decides the
    output.  Unmatched blank elements collapse to nothing; everything else
    is handed to markdownify's stock conversion (or passed through verbatim
    for tags markdownify does not know).
    """

    def __init__(self, rules: Tuple[Rule, ...] = RULES, **options):
        super().__init__(**options)
        self.rules = tuple(rules)

    def get_conv_fn(self, tag_name):
        fallback = super().get_conv_fn(tag_name)

        def convert(el, text, parent_tags=None):
            rule = find_rule(el, self.rules)
            if rule is not None:
                return rule.replacement(text, el)
            if _is_blank(el, text):
                return _blank_replacement(el, text)
            if fallback is None:
                return text
            return fallback(el, text, parent_tags=parent_tags)

        return convert


def _is_blank(el: Tag, text: str) -> bool:
    return (el.name or "").lower() not in MEANINGFUL_WHEN_BLANK and not text.strip()


def _blank_replacement(el: Tag, text: str) -> str:
    if (el.name or "").lower() in BLOCK_TAGS or not text:
        return ""
    # keep words on either side of an inline spacer apart
    return " "


# ---- Shared converter ----------------------------------------------------

_converter: Optional[EmailMarkdownConverter] = None


def _get_converter() -> EmailMarkdownConverter:
    global _converter
    if _converter is None:
        _converter = EmailMarkdownConverter(
            heading_style=ATX,
            bullets="-",
            escape_asterisks=False,
            escape_underscores=False,
            escape_misc=False,
        )
    return _converter


def render(html: str) -> str:
    """Convert an HTML string to Markdown.  Raises on parser failure."""
    soup = BeautifulSoup(html, settings.html_parser)
    return _get_converter().convert_soup(soup)
