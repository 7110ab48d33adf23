# parsers/classifier.py

from .models import (
    BlankLine,
    HeadingLine,
    LineKind,
    ListItemLine,
    RuleLine,
    TableRowLine,
    TextLine,
)

# Longest marker first so "####" is never read as "#" plus "###".
_HEADING_MARKERS = ("####", "###", "##", "#")
_LIST_MARKERS = ("-", "*")
_RULE_MARKER = "---"


def classify_line(line: str) -> LineKind:
    """Classify one raw line. First match wins:

    1. table row (checked before headings, so ``# A | B`` is a row)
    2. heading, 1-4 leading ``#``
    3. rule, ``---`` prefix
    4. list item, ``-`` or ``*`` prefix
    5. blank
    6. text
    """
    stripped = line.strip()

    row = _table_row(stripped)
    if row is not None:
        return row

    for marker in _HEADING_MARKERS:
        if stripped.startswith(marker):
            return HeadingLine(level=len(marker), text=stripped[len(marker) :].strip())

    if stripped.startswith(_RULE_MARKER):
        return RuleLine()

    if stripped.startswith(_LIST_MARKERS):
        # May be empty for a bare marker; the accumulator drops it.
        return ListItemLine(text=stripped[1:].strip())

    if not stripped:
        return BlankLine()

    return TextLine(text=stripped)


def _table_row(stripped: str) -> TableRowLine | None:
    if "|" not in stripped:
        return None

    pieces = stripped.split("|")
    cells = tuple(cell.strip() for cell in pieces if cell.strip())

    # "| a |" has an interior pipe; "A | B" has two cells.
    if len(pieces) <= 2 and len(cells) < 2:
        return None

    return TableRowLine(cells=cells, separator=_RULE_MARKER in stripped)
