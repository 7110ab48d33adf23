# src/report_kit/assemblers/html.py

import html
import logging
from collections.abc import Iterable
from time import monotonic

from report_kit.formatting.inline import InlineRun
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
from .theme import DEFAULT_THEME, HtmlTheme

logger = logging.getLogger(__name__)


class HtmlAssembler:
    """Renders blocks to an HTML fragment styled by an HtmlTheme.

    All report text is escaped; the only markup in the output is the
    markup this class writes itself.
    """

    def __init__(
        self,
        theme: HtmlTheme = DEFAULT_THEME,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.theme = theme
        self.metrics_hook = metrics_hook

    def assemble(self, report: ParsedReport | Iterable[Block]) -> str:
        start = monotonic()
        blocks = blocks_of(report)

        body = "\n".join(self._render_block(block) for block in blocks)
        output = self._tag("div", "container", f"\n{body}\n" if body else "")

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.REPORT_ASSEMBLE_DURATION, elapsed_ms, labels={"format": "html"}
        )
        self.metrics_hook.increment(
            names.REPORT_ASSEMBLE_REQUESTS_TOTAL, labels={"format": "html"}
        )
        logger.debug(
            "Assembled %d blocks as html with theme %s", len(blocks), self.theme.name
        )
        return output

    def _render_block(self, block: Block) -> str:
        if isinstance(block, HeadingBlock):
            tag = f"h{block.level}"
            return self._tag(tag, tag, self._inline(block.runs))

        if isinstance(block, ParagraphBlock):
            return self._tag("p", "paragraph", self._inline(block.runs))

        if isinstance(block, ListBlock):
            items = "".join(
                self._tag("li", "list_item", self._inline(runs))
                for runs in block.item_runs
            )
            return self._tag("ul", "list", items)

        if isinstance(block, TableBlock):
            return self._render_table(block)

        if isinstance(block, RuleBlock):
            return f"<hr{self._class_attr('rule')}>"

        raise TypeError(f"Unsupported block: {type(block).__name__}")

    def _render_table(self, block: TableBlock) -> str:
        header_cells = "".join(
            self._tag("th", "header_cell", self._inline(runs))
            for runs in block.header_runs
        )
        head = self._tag("thead", "", self._tag("tr", "header_row", header_cells))

        body_rows = []
        for index, row in enumerate(block.row_runs):
            cells = "".join(self._tag("td", "cell", self._inline(runs)) for runs in row)
            stripe = "row_even" if index % 2 == 0 else "row_odd"
            body_rows.append(self._tag("tr", stripe, cells))
        body = self._tag("tbody", "", "".join(body_rows))

        table = self._tag("table", "table", head + body)
        return self._tag("div", "table_wrapper", table)

    def _inline(self, runs: Iterable[InlineRun]) -> str:
        parts = []
        for run in runs:
            text = html.escape(run.text)
            parts.append(self._tag("strong", "strong", text) if run.emphasized else text)
        return "".join(parts)

    def _tag(self, name: str, slot: str, inner: str) -> str:
        return f"<{name}{self._class_attr(slot)}>{inner}</{name}>"

    def _class_attr(self, slot: str) -> str:
        css = self.theme.class_for(slot) if slot else ""
        return f' class="{html.escape(css)}"' if css else ""
