# src/report_kit/formatting/inline.py

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, TypeAlias

# Non-greedy: each "**" pairs with the next one, spans never nest.
_EMPHASIS_RE = re.compile(r"\*\*(.*?)\*\*")


@dataclass(frozen=True)
class PlainRun:
    text: str

    emphasized: ClassVar[bool] = False


@dataclass(frozen=True)
class EmphasizedRun:
    text: str

    emphasized: ClassVar[bool] = True


InlineRun: TypeAlias = PlainRun | EmphasizedRun


def format_inline(text: str) -> tuple[InlineRun, ...]:
    """Split *text* into plain and emphasized runs.

    Every ``**...**`` pair becomes an EmphasizedRun holding the inner text.
    An unpaired ``**`` stays in the surrounding PlainRun as literal
    characters. Never raises.
    """
    runs: list[InlineRun] = []
    pos = 0

    for match in _EMPHASIS_RE.finditer(text):
        if match.start() > pos:
            runs.append(PlainRun(text[pos : match.start()]))
        runs.append(EmphasizedRun(match.group(1)))
        pos = match.end()

    if pos < len(text):
        runs.append(PlainRun(text[pos:]))

    return tuple(runs)


def plain_text(runs: Iterable[InlineRun]) -> str:
    """Concatenate run texts, dropping the emphasis markers."""
    return "".join(run.text for run in runs)


def runs_to_dicts(runs: Iterable[InlineRun]) -> list[dict[str, Any]]:
    return [{"text": run.text, "emphasized": run.emphasized} for run in runs]
