"""Run metrics for tag-shape aggregation."""

from dataclasses import dataclass


@dataclass
class AggregationMetrics:
    """Counters accumulated while aggregating one or more documents."""

    files_processed: int = 0
    events_consumed: int = 0
    root_occurrences: int = 0
    elements_recorded: int = 0
    processing_time_ms: float = 0.0

    @property
    def events_per_second(self) -> float:
        """Calculate markup events consumed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.events_consumed * 1000.0) / self.processing_time_ms
