# src/report_kit/assemblers/__init__.py

"""Presentation layer for parsed reports.

Turns the typed block sequence into output for a rendering surface.

Design principles:
- Order: blocks are rendered exactly in source order
- Styling only: themes decide classes, never structure
- Safe: report text is escaped before it reaches markup

Example:
    >>> from report_kit.assemblers import AssemblerConfig, create_assembler
    >>> from report_kit.parsers import MarkdownReportParser
    >>>
    >>> report = MarkdownReportParser().parse("# 연말정산 요약\\n예상 환급액은 **120,000원**입니다")
    >>> assembler = create_assembler(AssemblerConfig(format="html"))
    >>> print(assembler.assemble(report))
"""

from .base import Assembler
from .config import AssemblerConfig
from .factory import create_assembler
from .html import HtmlAssembler
from .text import PlainTextAssembler
from .theme import DEFAULT_THEME, THEME_SLOTS, HtmlTheme
from .theme_library import ThemeLibrary

__all__ = [
    # Factory
    "create_assembler",
    # Protocol
    "Assembler",
    # Config
    "AssemblerConfig",
    # Implementations
    "HtmlAssembler",
    "PlainTextAssembler",
    # Themes
    "DEFAULT_THEME",
    "THEME_SLOTS",
    "HtmlTheme",
    "ThemeLibrary",
]
