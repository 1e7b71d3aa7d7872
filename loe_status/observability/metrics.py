from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

from loe_status.core.models import ElectricityStatus


class Metrics:
    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry(auto_describe=True)
        self.evaluations_total = Counter(
            "loe_status_evaluations_total",
            "Total status evaluations by resulting power state",
            labelnames=("state",),
            registry=self.registry,
        )
        self.schedule_lookups_total = Counter(
            "loe_schedule_lookups_total",
            "Group paragraph lookups by result",
            labelnames=("result",),
            registry=self.registry,
        )
        self.fingerprints_total = Counter(
            "loe_fingerprints_total",
            "Total schedule fingerprints computed",
            registry=self.registry,
        )
        self.evaluation_duration_seconds = Histogram(
            "loe_evaluation_duration_seconds",
            "Duration of status evaluations in seconds",
            registry=self.registry,
        )

    def mark_lookup(self, found: bool) -> None:
        self.schedule_lookups_total.labels(result="found" if found else "missing").inc()

    def mark_evaluation(self, status: ElectricityStatus) -> None:
        self.evaluations_total.labels(state=status.state.value).inc()

    def mark_fingerprint(self) -> None:
        self.fingerprints_total.inc()

    def render(self) -> tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
