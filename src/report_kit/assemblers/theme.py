from pydantic import BaseModel, field_validator

# Slots an HtmlAssembler asks a theme for.
THEME_SLOTS = (
    "container",
    "h1",
    "h2",
    "h3",
    "h4",
    "paragraph",
    "list",
    "list_item",
    "table_wrapper",
    "table",
    "header_row",
    "header_cell",
    "row_even",
    "row_odd",
    "cell",
    "rule",
    "strong",
)


class HtmlTheme(BaseModel):
    name: str
    version: str
    description: str = ""
    classes: dict[str, str] = {}

    class Config:
        extra = "forbid"

    @field_validator("classes")
    @classmethod
    def _known_slots(cls, classes: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(classes) - set(THEME_SLOTS))
        if unknown:
            raise ValueError(f"Unknown theme slots: {', '.join(unknown)}")
        return classes

    def class_for(self, slot: str) -> str:
        return self.classes.get(slot, "")


DEFAULT_THEME = HtmlTheme(
    name="default",
    version="1.0",
    description="Zinc palette utility classes with dark-mode variants",
    classes={
        "container": "markdown-content",
        "h1": "text-3xl font-bold text-zinc-900 dark:text-zinc-100 mt-8 mb-4",
        "h2": "text-2xl font-bold text-zinc-900 dark:text-zinc-100 mt-8 mb-4",
        "h3": "text-xl font-bold text-zinc-900 dark:text-zinc-100 mt-6 mb-3",
        "h4": "text-lg font-semibold text-zinc-900 dark:text-zinc-100 mt-4 mb-2",
        "paragraph": "text-zinc-700 dark:text-zinc-300 mb-3 leading-relaxed",
        "list": "list-disc list-inside mb-4 space-y-1 ml-4",
        "list_item": "text-zinc-700 dark:text-zinc-300",
        "table_wrapper": "overflow-x-auto mb-6",
        "table": (
            "min-w-full border-collapse border border-zinc-300 dark:border-zinc-700"
        ),
        "header_row": "bg-zinc-100 dark:bg-zinc-800",
        "header_cell": (
            "border border-zinc-300 dark:border-zinc-700 px-4 py-2 text-left "
            "font-semibold text-zinc-900 dark:text-zinc-100"
        ),
        "row_even": "bg-white dark:bg-zinc-900",
        "row_odd": "bg-zinc-50 dark:bg-zinc-800",
        "cell": (
            "border border-zinc-300 dark:border-zinc-700 px-4 py-2 "
            "text-zinc-700 dark:text-zinc-300"
        ),
        "rule": "my-6 border-zinc-300 dark:border-zinc-700",
    },
)
