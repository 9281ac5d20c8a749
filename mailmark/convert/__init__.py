"""Convert module -- media URL extraction and Markdown rendering."""

from mailmark.convert.media import extract_media_urls
from mailmark.convert.renderer import EmailMarkdownConverter, render
from mailmark.convert.rules import RULES, Rule

__all__ = ["extract_media_urls", "render", "EmailMarkdownConverter", "RULES", "Rule"]
