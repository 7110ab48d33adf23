# src/report_kit/assemblers/config.py

from dataclasses import dataclass
from typing import Literal

from .theme import HtmlTheme

Format = Literal["html", "text"]


@dataclass(frozen=True)
class AssemblerConfig:
    """Configuration for report assemblers.

    Immutable. Explicit. No magic defaults from environment.
    """

    format: Format
    theme: HtmlTheme | None = None  # html only; falls back to DEFAULT_THEME
    bullet: str = "•"  # text only
    rule_width: int = 40  # text only
