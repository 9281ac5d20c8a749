"""Utils module -- config, logging."""

from mailmark.utils.config import settings
from mailmark.utils.logger import get_logger

__all__ = ["settings", "get_logger"]
