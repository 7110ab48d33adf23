import logging
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for parser and assembler metrics.

    Durations are milliseconds. Implementations must not raise.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


class LoggingMetricsHook:
    """Forwards every metric to a logger.

    Handy in development where no metrics backend is wired up.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.DEBUG,
    ) -> None:
        self._logger = logger or logging.getLogger("report_kit.metrics")
        self._level = level

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.log(
            self._level, "latency %s=%.3fms labels=%s", name, value_ms, labels or {}
        )

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.log(
            self._level, "counter %s+=%d labels=%s", name, value, labels or {}
        )

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.log(
            self._level, "gauge %s=%s labels=%s", name, value, labels or {}
        )
