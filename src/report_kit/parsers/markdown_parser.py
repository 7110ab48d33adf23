# parsers/markdown_parser.py

import logging
from collections import Counter
from time import monotonic

from report_kit.observability import names
from report_kit.observability.base import MetricsHook, NoOpMetricsHook

from .accumulator import accumulate
from .base import ReportParser
from .classifier import classify_line
from .models import Block, HeadingBlock, ParsedReport

logger = logging.getLogger(__name__)


class MarkdownReportParser(ReportParser):
    """
    Line-oriented parser for the Markdown subset used in generated reports.
    - Headings (1-4 ``#``), ``-``/``*`` lists, pipe tables, ``---`` rules
    - Contiguous list items and table rows collapse into one block
    - One pass, no state kept between calls
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, source: str | bytes | None) -> ParsedReport:
        start = monotonic()
        text = self._decode(source)
        lines = text.split("\n") if text else []

        blocks = tuple(accumulate(classify_line(line) for line in lines))

        elapsed_ms = 1000 * (monotonic() - start)
        self._record(blocks, len(lines), elapsed_ms)
        logger.debug(
            "Parsed report: lines=%d blocks=%d in %.2fms",
            len(lines),
            len(blocks),
            elapsed_ms,
        )

        return ParsedReport(
            title=self._extract_title(blocks),
            blocks=blocks,
            metadata={
                "source_type": "markdown",
                "line_count": len(lines),
                "block_count": len(blocks),
            },
        )

    def parse_blocks(self, source: str | bytes | None) -> list[Block]:
        return list(self.parse(source).blocks)

    def _decode(self, source: str | bytes | None) -> str:
        if source is None:
            return ""
        if isinstance(source, bytes):
            # Replacement characters rather than a UnicodeDecodeError.
            return source.decode("utf-8-sig", errors="replace")
        # str.strip() keeps U+FEFF, so a BOM would hide the first line's marker.
        return source.removeprefix("\ufeff")

    def _extract_title(self, blocks: tuple[Block, ...]) -> str | None:
        """
        Text of the first level-1 heading, if any.
        """
        for block in blocks:
            if isinstance(block, HeadingBlock) and block.level == 1:
                return block.text
        return None

    def _record(self, blocks: tuple[Block, ...], line_count: int, elapsed_ms: float) -> None:
        self.metrics_hook.record_latency(names.REPORT_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.REPORT_PARSE_REQUESTS_TOTAL)
        self.metrics_hook.record_gauge(names.REPORT_PARSE_LINE_COUNT, line_count)
        for kind, count in Counter(block.kind.value for block in blocks).items():
            self.metrics_hook.increment(
                names.REPORT_BLOCKS_EMITTED_TOTAL, count, labels={"kind": kind}
            )
