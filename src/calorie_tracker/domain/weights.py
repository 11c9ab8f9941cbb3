"""Domain models for body-weight tracking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeightSample:
    """A body-weight measurement for one calendar day."""

    id: int
    date: str
    weight: float
