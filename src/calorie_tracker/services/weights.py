"""Weight store service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.dates import ensure_iso_date
from calorie_tracker.domain.weights import WeightSample

_logger = logging.getLogger(__name__)


class WeightRepository(Protocol):
    """Persistence interface for weight samples keyed by date."""

    def upsert_weight(self, day: str, weight: float) -> WeightSample:
        """Insert the sample for a date or replace the existing one."""

    def list_weights(self) -> list[WeightSample]:
        """Return all samples ordered by date."""


@dataclass
class WeightService:
    """Application service for weight samples."""

    repository: WeightRepository

    def record(self, day: str, weight: float) -> WeightSample:
        """Store the weight for a date, replacing any earlier value for it."""
        sample = self.repository.upsert_weight(ensure_iso_date(day), weight)
        _logger.info("Weight recorded: date=%s", sample.date)
        return sample

    def list_all(self) -> list[WeightSample]:
        """Return every sample ascending by date."""
        return sorted(self.repository.list_weights(), key=lambda sample: sample.date)
