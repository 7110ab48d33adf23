import pytest

from report_kit.parsers.classifier import classify_line
from report_kit.parsers.models import (
    BlankLine,
    HeadingLine,
    ListItemLine,
    RuleLine,
    TableRowLine,
    TextLine,
)


class TestHeadings:
    @pytest.mark.parametrize(
        ("line", "level", "text"),
        [
            ("# Title", 1, "Title"),
            ("## Title", 2, "Title"),
            ("### Title", 3, "Title"),
            ("#### Title", 4, "Title"),
        ],
    )
    def test_level_is_number_of_leading_hashes(
        self, line: str, level: int, text: str
    ) -> None:
        assert classify_line(line) == HeadingLine(level=level, text=text)

    def test_longest_marker_wins_beyond_four(self) -> None:
        """Five hashes is a level 4 heading keeping the extra hash."""
        assert classify_line("##### Deep") == HeadingLine(level=4, text="# Deep")

    def test_marker_without_space(self) -> None:
        assert classify_line("#요약") == HeadingLine(level=1, text="요약")

    def test_surrounding_whitespace_is_trimmed(self) -> None:
        assert classify_line("   ###   공제 항목  \r") == HeadingLine(
            level=3, text="공제 항목"
        )


class TestTableRows:
    def test_single_interior_pipe_with_two_cells(self) -> None:
        assert classify_line("A | B") == TableRowLine(cells=("A", "B"))

    def test_outer_pipes_are_dropped(self) -> None:
        assert classify_line("| 항목 | 금액 |") == TableRowLine(cells=("항목", "금액"))

    def test_single_cell_between_pipes(self) -> None:
        assert classify_line("| only |") == TableRowLine(cells=("only",))

    def test_row_without_cells(self) -> None:
        assert classify_line("| |") == TableRowLine(cells=())

    def test_separator_is_flagged(self) -> None:
        row = classify_line("---|---")

        assert isinstance(row, TableRowLine)
        assert row.separator is True
        assert row.cells == ("---", "---")

    def test_dashes_inside_a_cell_mark_a_separator(self) -> None:
        row = classify_line("| a --- b | c |")

        assert isinstance(row, TableRowLine)
        assert row.separator is True

    def test_table_row_takes_precedence_over_heading(self) -> None:
        assert classify_line("# Title | Extra") == TableRowLine(
            cells=("# Title", "Extra")
        )

    def test_table_row_takes_precedence_over_list_item(self) -> None:
        assert classify_line("- a | b") == TableRowLine(cells=("- a", "b"))

    def test_trailing_pipe_with_one_cell_is_text(self) -> None:
        assert classify_line("a |") == TextLine(text="a |")

    def test_lone_pipe_is_text(self) -> None:
        assert classify_line("|") == TextLine(text="|")


class TestListItems:
    def test_dash_marker(self) -> None:
        assert classify_line("- 의료비") == ListItemLine(text="의료비")

    def test_star_marker(self) -> None:
        assert classify_line("* 교육비") == ListItemLine(text="교육비")

    def test_bare_marker_has_empty_text(self) -> None:
        assert classify_line("-") == ListItemLine(text="")

    def test_marker_without_space(self) -> None:
        assert classify_line("-item") == ListItemLine(text="item")

    def test_leading_bold_is_read_as_star_marker(self) -> None:
        assert classify_line("**Note** text") == ListItemLine(text="*Note** text")


class TestRules:
    def test_three_dashes(self) -> None:
        assert classify_line("---") == RuleLine()

    def test_longer_rule(self) -> None:
        assert classify_line("----------") == RuleLine()

    def test_two_dashes_is_a_list_item(self) -> None:
        assert classify_line("--") == ListItemLine(text="-")


class TestBlankAndText:
    @pytest.mark.parametrize("line", ["", "   ", "\t", "\r"])
    def test_whitespace_only_is_blank(self, line: str) -> None:
        assert classify_line(line) == BlankLine()

    def test_plain_text_is_trimmed(self) -> None:
        assert classify_line("  총 급여액은 5,000만원입니다.  ") == TextLine(
            text="총 급여액은 5,000만원입니다."
        )

    def test_inline_bold_inside_text(self) -> None:
        assert classify_line("예상 **환급액**") == TextLine(text="예상 **환급액**")
