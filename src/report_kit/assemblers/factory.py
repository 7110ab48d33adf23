# src/report_kit/assemblers/factory.py

from report_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import Assembler
from .config import AssemblerConfig
from .html import HtmlAssembler
from .text import PlainTextAssembler
from .theme import DEFAULT_THEME


def create_assembler(
    config: AssemblerConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Assembler:
    """Create an assembler from config.

    Args:
        config: Assembler configuration specifying format, theme, etc.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured Assembler implementation.

    Raises:
        ValueError: If format is unknown.

    Example:
        >>> config = AssemblerConfig(format="html")
        >>> assembler = create_assembler(config)
        >>> html = assembler.assemble(report)
    """
    if config.format == "html":
        return HtmlAssembler(
            theme=config.theme or DEFAULT_THEME,
            metrics_hook=metrics_hook,
        )

    if config.format == "text":
        return PlainTextAssembler(
            bullet=config.bullet,
            rule_width=config.rule_width,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown assembler format: {config.format}")
