# parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedReport


class ReportParser(ABC):
    @abstractmethod
    def parse(self, source: str | bytes | None) -> ParsedReport:
        """
        Parse report text and return an ordered, typed block sequence.

        Requirements:
        - Deterministic output for same input
        - Block order equals source order
        - Never raises on malformed input
        """
        raise NotImplementedError
