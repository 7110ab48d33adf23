# Assemblers
from .assemblers import (
    DEFAULT_THEME,
    Assembler,
    AssemblerConfig,
    HtmlAssembler,
    HtmlTheme,
    PlainTextAssembler,
    ThemeLibrary,
    create_assembler,
)

# Formatting
from .formatting import EmphasizedRun, InlineRun, PlainRun, format_inline, plain_text

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    Block,
    BlockKind,
    HeadingBlock,
    ListBlock,
    MarkdownReportParser,
    ParagraphBlock,
    ParsedReport,
    ReportParser,
    RuleBlock,
    TableBlock,
    classify_line,
)

__all__ = [
    # Assemblers
    "DEFAULT_THEME",
    "Assembler",
    "AssemblerConfig",
    "HtmlAssembler",
    "HtmlTheme",
    "PlainTextAssembler",
    "ThemeLibrary",
    "create_assembler",
    # Formatting
    "EmphasizedRun",
    "InlineRun",
    "PlainRun",
    "format_inline",
    "plain_text",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "Block",
    "BlockKind",
    "HeadingBlock",
    "ListBlock",
    "MarkdownReportParser",
    "ParagraphBlock",
    "ParsedReport",
    "ReportParser",
    "RuleBlock",
    "TableBlock",
    "classify_line",
]
