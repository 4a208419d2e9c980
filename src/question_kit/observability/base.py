from typing import Protocol


class MetricsHook(Protocol):
    """Receives the timings and counts emitted by question-kit.

    Segmentation and grouping report their duration in milliseconds and how
    many questions or RA groups they produced; intake counts requests,
    rejections (labelled by reason) and whole-text fallbacks. Metric names
    live in `question_kit.observability.names`.
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


class NoOpMetricsHook:
    """Default hook: every segmentation, grouping and intake metric is dropped."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass
