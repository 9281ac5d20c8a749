"""Text module -- post-processing passes over rendered Markdown."""

from mailmark.text.links import unwrap_safe_links
from mailmark.text.normalize import normalize_text, normalize_whitespace, remove_invisible_chars

__all__ = [
    "normalize_text",
    "normalize_whitespace",
    "remove_invisible_chars",
    "unwrap_safe_links",
]
