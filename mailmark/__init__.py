"""mailmark -- token-efficient Markdown from HTML email bodies."""

from mailmark.pipeline import TransformResult, transform, transform_html

__all__ = ["transform", "transform_html", "TransformResult"]
