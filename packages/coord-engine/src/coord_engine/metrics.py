from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass


@dataclass(frozen=True)
class BatchDuration:
    source: str
    target: str
    duration_ms: float


class InMemoryConversionMetricsCollector:
    def __init__(self) -> None:
        self.converted_total: dict[tuple[str, str], int] = defaultdict(int)
        self.passthrough_total: dict[tuple[str, str], int] = defaultdict(int)
        self.rejected_total: dict[str, int] = defaultdict(int)
        self.batch_durations: list[BatchDuration] = []

    def add_converted(self, source: str, target: str, count: int = 1) -> None:
        if count <= 0:
            return
        self.converted_total[(source, target)] += count

    def add_passthrough(self, source: str, target: str, count: int = 1) -> None:
        if count <= 0:
            return
        self.passthrough_total[(source, target)] += count

    def increment_rejected(self, reason: str) -> None:
        self.rejected_total[reason] += 1

    def observe_batch_duration(self, source: str, target: str, duration_ms: float) -> None:
        self.batch_durations.append(BatchDuration(source=source, target=target, duration_ms=duration_ms))
