"""Domain models for food and activity log entries."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class EntryKind(StrEnum):
    """Kind of a log entry."""

    FOOD = "food"
    ACTIVITY = "activity"


@dataclass(frozen=True)
class NewLogEntry:
    """User-supplied fields of a log entry before it is stored."""

    date: str
    kind: EntryKind
    description: str
    calories_in: float = 0.0
    calories_out: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    vitamin_note: str = ""
    explanation: str = ""


@dataclass(frozen=True)
class LogEntry:
    """A stored log entry."""

    id: int
    date: str
    kind: EntryKind
    description: str
    calories_in: float
    calories_out: float
    protein: float
    carbs: float
    fat: float
    vitamin_note: str
    explanation: str
    created_at: datetime | None = None
