# src/report_kit/assemblers/base.py

from collections.abc import Iterable
from typing import Protocol

from report_kit.observability.base import MetricsHook
from report_kit.parsers.models import Block, ParsedReport


class Assembler(Protocol):
    """Protocol for turning parsed blocks into presentation output.

    Design principles:
    - Order: blocks are rendered in the order given, never re-ordered
    - Styling only: no re-parsing, no re-classification of lines
    - Safe: literal text is escaped for the target format
    """

    metrics_hook: MetricsHook

    def assemble(self, report: ParsedReport | Iterable[Block]) -> str:
        """Render a parsed report (or a bare block sequence).

        Args:
            report: ParsedReport from a ReportParser, or its blocks.

        Returns:
            The rendered document as a single string.
        """
        ...


def blocks_of(report: ParsedReport | Iterable[Block]) -> tuple[Block, ...]:
    if isinstance(report, ParsedReport):
        return report.blocks
    return tuple(report)
