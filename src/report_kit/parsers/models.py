# parsers/models.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, TypeAlias

from report_kit.formatting.inline import InlineRun, format_inline, runs_to_dicts

# ── Line kinds ────────────────────────────────────────────────────────────
# Produced by the classifier, consumed by the accumulator, never returned.


@dataclass(frozen=True)
class TableRowLine:
    cells: tuple[str, ...]
    separator: bool = False


@dataclass(frozen=True)
class HeadingLine:
    level: int
    text: str


@dataclass(frozen=True)
class ListItemLine:
    text: str


@dataclass(frozen=True)
class RuleLine:
    pass


@dataclass(frozen=True)
class BlankLine:
    pass


@dataclass(frozen=True)
class TextLine:
    text: str


LineKind: TypeAlias = (
    TableRowLine | HeadingLine | ListItemLine | RuleLine | BlankLine | TextLine
)


# ── Blocks ────────────────────────────────────────────────────────────────


class BlockKind(str, Enum):
    """Kind tag carried by every block."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    TABLE = "table"
    RULE = "rule"


@dataclass(frozen=True)
class HeadingBlock:
    level: int
    text: str

    kind: ClassVar[BlockKind] = BlockKind.HEADING

    @property
    def runs(self) -> tuple[InlineRun, ...]:
        return format_inline(self.text)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "level": self.level,
            "text": self.text,
            "runs": runs_to_dicts(self.runs),
        }


@dataclass(frozen=True)
class ParagraphBlock:
    text: str

    kind: ClassVar[BlockKind] = BlockKind.PARAGRAPH

    @property
    def runs(self) -> tuple[InlineRun, ...]:
        return format_inline(self.text)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "text": self.text,
            "runs": runs_to_dicts(self.runs),
        }


@dataclass(frozen=True)
class ListBlock:
    """A maximal run of list-item lines, in source order."""

    items: tuple[str, ...]

    kind: ClassVar[BlockKind] = BlockKind.LIST

    @property
    def item_runs(self) -> tuple[tuple[InlineRun, ...], ...]:
        return tuple(format_inline(item) for item in self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "items": list(self.items),
            "item_runs": [runs_to_dicts(runs) for runs in self.item_runs],
        }


@dataclass(frozen=True)
class TableBlock:
    """A run of table-row lines.

    ``headers`` come from the first row of the run; separator rows are
    never part of ``rows``.
    """

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    kind: ClassVar[BlockKind] = BlockKind.TABLE

    @property
    def header_runs(self) -> tuple[tuple[InlineRun, ...], ...]:
        return tuple(format_inline(cell) for cell in self.headers)

    @property
    def row_runs(self) -> tuple[tuple[tuple[InlineRun, ...], ...], ...]:
        return tuple(
            tuple(format_inline(cell) for cell in row) for row in self.rows
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "headers": list(self.headers),
            "rows": [list(row) for row in self.rows],
            "header_runs": [runs_to_dicts(runs) for runs in self.header_runs],
            "row_runs": [
                [runs_to_dicts(runs) for runs in row] for row in self.row_runs
            ],
        }


@dataclass(frozen=True)
class RuleBlock:
    kind: ClassVar[BlockKind] = BlockKind.RULE

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value}


Block: TypeAlias = HeadingBlock | ParagraphBlock | ListBlock | TableBlock | RuleBlock


@dataclass(frozen=True)
class ParsedReport:
    title: str | None
    blocks: tuple[Block, ...]
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "metadata": dict(self.metadata),
            "blocks": [block.to_dict() for block in self.blocks],
        }
