# parsers/accumulator.py

"""Fold over classified lines that collapses list and table runs into blocks.

Each step takes the current ParseState and one LineKind and returns a new
state plus the blocks that line caused to be emitted. States are frozen,
so a state value is never shared between two parse calls.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from enum import Enum

from .models import (
    Block,
    HeadingBlock,
    HeadingLine,
    LineKind,
    ListBlock,
    ListItemLine,
    ParagraphBlock,
    RuleBlock,
    RuleLine,
    TableBlock,
    TableRowLine,
    TextLine,
)


class ParseMode(str, Enum):
    IDLE = "idle"
    IN_LIST = "in_list"
    IN_TABLE = "in_table"


@dataclass(frozen=True)
class ParseState:
    mode: ParseMode = ParseMode.IDLE
    list_items: tuple[str, ...] = ()
    table_headers: tuple[str, ...] = ()
    table_rows: tuple[tuple[str, ...], ...] = ()


IDLE = ParseState()


def step(state: ParseState, line: LineKind) -> tuple[ParseState, tuple[Block, ...]]:
    """Apply one line to *state*."""
    if isinstance(line, TableRowLine):
        return _step_table_row(state, line)

    emitted: tuple[Block, ...] = ()

    if state.mode is ParseMode.IN_TABLE:
        emitted = _flush_table(state)
        state = IDLE

    if isinstance(line, ListItemLine):
        items = state.list_items if state.mode is ParseMode.IN_LIST else ()
        if line.text:
            items = items + (line.text,)
        return ParseState(mode=ParseMode.IN_LIST, list_items=items), emitted

    if state.mode is ParseMode.IN_LIST:
        emitted = emitted + _flush_list(state)
        state = IDLE

    return state, emitted + _emit_idle(line)


def finish(state: ParseState) -> tuple[Block, ...]:
    """Flush whatever run is still open at end of input."""
    return _flush_list(state) + _flush_table(state)


def accumulate(lines: Iterable[LineKind]) -> Iterator[Block]:
    state = IDLE
    for line in lines:
        state, emitted = step(state, line)
        yield from emitted
    yield from finish(state)


def _step_table_row(
    state: ParseState, line: TableRowLine
) -> tuple[ParseState, tuple[Block, ...]]:
    discard = line.separator or not line.cells

    if state.mode is ParseMode.IN_TABLE:
        if discard:
            return state, ()
        return replace(state, table_rows=state.table_rows + (line.cells,)), ()

    emitted = _flush_list(state)
    if discard:
        # A separator with no open table has nothing to separate.
        return IDLE, emitted
    return ParseState(mode=ParseMode.IN_TABLE, table_headers=line.cells), emitted


def _flush_list(state: ParseState) -> tuple[Block, ...]:
    if state.mode is not ParseMode.IN_LIST or not state.list_items:
        return ()
    return (ListBlock(items=state.list_items),)


def _flush_table(state: ParseState) -> tuple[Block, ...]:
    if state.mode is not ParseMode.IN_TABLE:
        return ()
    return (TableBlock(headers=state.table_headers, rows=state.table_rows),)


def _emit_idle(line: LineKind) -> tuple[Block, ...]:
    if isinstance(line, HeadingLine):
        return (HeadingBlock(level=line.level, text=line.text),)
    if isinstance(line, RuleLine):
        return (RuleBlock(),)
    if isinstance(line, TextLine) and line.text:
        return (ParagraphBlock(text=line.text),)
    # BlankLine, empty text
    return ()
