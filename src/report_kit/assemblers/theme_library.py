import logging
from pathlib import Path

import yaml

from .theme import DEFAULT_THEME, HtmlTheme

logger = logging.getLogger(__name__)


class ThemeLibrary:
    """HTML themes loaded from ``*.yaml`` files, keyed by (name, version).

    The built-in default theme is always available unless a file in the
    directory overrides it.
    """

    def __init__(self, directory: str) -> None:
        self._themes: dict[tuple[str, str], HtmlTheme] = {
            (DEFAULT_THEME.name, DEFAULT_THEME.version): DEFAULT_THEME
        }
        logger.info("Initializing ThemeLibrary from directory: %s", directory)
        self._load_all(Path(directory))
        logger.info("Loaded %d themes", len(self._themes))

    def get(self, name: str, version: str) -> HtmlTheme:
        logger.debug("Getting theme: name=%s, version=%s", name, version)
        try:
            return self._themes[(name, version)]
        except KeyError:
            logger.error("Theme not found: name=%s, version=%s", name, version)
            raise KeyError(f"Theme '{name}' version '{version}' not found")

    def list(self) -> list[tuple[str, str]]:
        return list(self._themes.keys())

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            theme = self._load_theme(file_path)
            self._themes[(theme.name, theme.version)] = theme
            logger.debug(
                "Loaded theme: %s v%s from %s", theme.name, theme.version, file_path
            )

    def _load_theme(self, file_path: Path) -> HtmlTheme:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return HtmlTheme(**data)
