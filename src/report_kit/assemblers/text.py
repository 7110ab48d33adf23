# src/report_kit/assemblers/text.py

import logging
from collections.abc import Iterable
from time import monotonic

from report_kit.formatting.inline import InlineRun, plain_text
from report_kit.observability import names
from report_kit.observability.base import MetricsHook, NoOpMetricsHook
from report_kit.parsers.models import (
    Block,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
    ParsedReport,
    RuleBlock,
    TableBlock,
)

from .base import blocks_of

logger = logging.getLogger(__name__)


class PlainTextAssembler:
    """Renders blocks as plain text, e.g. for logs, e-mail or terminals.

    Emphasis markers are removed; blocks are separated by a blank line.
    """

    def __init__(
        self,
        bullet: str = "•",
        rule_width: int = 40,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if rule_width <= 0:
            raise ValueError("rule_width must be > 0")
        self.bullet = bullet
        self.rule_width = rule_width
        self.metrics_hook = metrics_hook

    def assemble(self, report: ParsedReport | Iterable[Block]) -> str:
        start = monotonic()
        blocks = blocks_of(report)

        output = "\n\n".join(self._render_block(block) for block in blocks)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.REPORT_ASSEMBLE_DURATION, elapsed_ms, labels={"format": "text"}
        )
        self.metrics_hook.increment(
            names.REPORT_ASSEMBLE_REQUESTS_TOTAL, labels={"format": "text"}
        )
        logger.debug("Assembled %d blocks as text", len(blocks))
        return output

    def _render_block(self, block: Block) -> str:
        if isinstance(block, HeadingBlock | ParagraphBlock):
            return plain_text(block.runs)

        if isinstance(block, ListBlock):
            return "\n".join(
                f"{self.bullet} {plain_text(runs)}" for runs in block.item_runs
            )

        if isinstance(block, TableBlock):
            lines = [self._row(block.header_runs)]
            lines.extend(self._row(row) for row in block.row_runs)
            return "\n".join(lines)

        if isinstance(block, RuleBlock):
            return "-" * self.rule_width

        raise TypeError(f"Unsupported block: {type(block).__name__}")

    @staticmethod
    def _row(cells: Iterable[tuple[InlineRun, ...]]) -> str:
        return " | ".join(plain_text(runs) for runs in cells)
