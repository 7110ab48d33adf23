"""Markdown-subset parsing for generated report text.

Example:
    >>> from report_kit.parsers import MarkdownReportParser
    >>>
    >>> report = MarkdownReportParser().parse("### 요약\\n- **절세** 가능\\n- 추가 공제")
    >>> [block.kind.value for block in report.blocks]
    ['heading', 'list']
"""

from .accumulator import ParseMode, ParseState, accumulate, finish, step
from .base import ReportParser
from .classifier import classify_line
from .markdown_parser import MarkdownReportParser
from .models import (
    BlankLine,
    Block,
    BlockKind,
    HeadingBlock,
    HeadingLine,
    LineKind,
    ListBlock,
    ListItemLine,
    ParagraphBlock,
    ParsedReport,
    RuleBlock,
    RuleLine,
    TableBlock,
    TableRowLine,
    TextLine,
)

__all__ = [
    # Entry points
    "MarkdownReportParser",
    "ReportParser",
    "classify_line",
    # Accumulator
    "ParseMode",
    "ParseState",
    "accumulate",
    "finish",
    "step",
    # Blocks
    "Block",
    "BlockKind",
    "HeadingBlock",
    "ListBlock",
    "ParagraphBlock",
    "ParsedReport",
    "RuleBlock",
    "TableBlock",
    # Line kinds
    "BlankLine",
    "HeadingLine",
    "LineKind",
    "ListItemLine",
    "RuleLine",
    "TableRowLine",
    "TextLine",
]
