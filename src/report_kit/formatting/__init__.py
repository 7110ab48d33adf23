from .inline import (
    EmphasizedRun,
    InlineRun,
    PlainRun,
    format_inline,
    plain_text,
    runs_to_dicts,
)

__all__ = [
    "EmphasizedRun",
    "InlineRun",
    "PlainRun",
    "format_inline",
    "plain_text",
    "runs_to_dicts",
]
