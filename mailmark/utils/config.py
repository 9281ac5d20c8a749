"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # --- Rendering ---------------------------------------------------------
    html_parser: str = field(
        default_factory=lambda: os.getenv("HTML_PARSER", "html.parser")
    )

    # --- Post-processing ---------------------------------------------------
    unwrap_safe_links: bool = field(
        default_factory=lambda: _env_flag("UNWRAP_SAFE_LINKS", "true")
    )


# Module-level singleton -- import this everywhere.
settings = Settings()
