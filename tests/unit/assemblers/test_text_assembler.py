from unittest.mock import Mock

import pytest

from report_kit.assemblers.text import PlainTextAssembler
from report_kit.observability import names
from report_kit.parsers.markdown_parser import MarkdownReportParser
from report_kit.parsers.models import (
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
    RuleBlock,
    TableBlock,
)


@pytest.fixture
def assembler() -> PlainTextAssembler:
    return PlainTextAssembler()


def test_blocks_separated_by_blank_line(assembler: PlainTextAssembler) -> None:
    text = assembler.assemble(
        [HeadingBlock(level=2, text="제목"), ParagraphBlock(text="본문")]
    )

    assert text == "제목\n\n본문"


def test_emphasis_markers_are_removed(assembler: PlainTextAssembler) -> None:
    assert assembler.assemble([ParagraphBlock(text="**중요** 사항")]) == "중요 사항"


def test_list_items_use_bullet(assembler: PlainTextAssembler) -> None:
    assert assembler.assemble([ListBlock(items=("a", "**b**"))]) == "• a\n• b"


def test_custom_bullet() -> None:
    assembler = PlainTextAssembler(bullet="-")

    assert assembler.assemble([ListBlock(items=("a",))]) == "- a"


def test_table_rows_joined_with_pipes(assembler: PlainTextAssembler) -> None:
    text = assembler.assemble(
        [TableBlock(headers=("항목", "금액"), rows=(("의료비", "**30만원**"),))]
    )

    assert text == "항목 | 금액\n의료비 | 30만원"


def test_rule_width() -> None:
    assembler = PlainTextAssembler(rule_width=5)

    assert assembler.assemble([RuleBlock()]) == "-----"


def test_empty_input(assembler: PlainTextAssembler) -> None:
    assert assembler.assemble([]) == ""


def test_accepts_parsed_report(assembler: PlainTextAssembler) -> None:
    report = MarkdownReportParser().parse("# T\n- a\n- b")

    assert assembler.assemble(report) == "T\n\n• a\n• b"


@pytest.mark.parametrize("width", [0, -3])
def test_non_positive_rule_width_raises(width: int) -> None:
    with pytest.raises(ValueError, match="rule_width must be > 0"):
        PlainTextAssembler(rule_width=width)


def test_records_assemble_metrics() -> None:
    hook = Mock()

    PlainTextAssembler(metrics_hook=hook).assemble([RuleBlock()])

    assert hook.record_latency.call_args.args[0] == names.REPORT_ASSEMBLE_DURATION
    hook.increment.assert_called_once_with(
        names.REPORT_ASSEMBLE_REQUESTS_TOTAL, labels={"format": "text"}
    )
