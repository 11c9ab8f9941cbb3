"""Log entry store service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.dates import ensure_iso_date
from calorie_tracker.domain.entries import LogEntry, NewLogEntry
from calorie_tracker.domain.errors import ValidationError

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for log entries."""

    def create_entry(self, entry: NewLogEntry) -> LogEntry:
        """Store an entry and return it with its identifier."""

    def list_entries(self) -> list[LogEntry]:
        """Return all entries ordered by date, then creation."""


@dataclass
class EntryService:
    """Application service for creating and listing log entries."""

    repository: EntryRepository

    def create(self, entry: NewLogEntry) -> LogEntry:
        """Validate and store a new entry."""
        ensure_iso_date(entry.date)
        if not entry.description.strip():
            raise ValidationError("Entry description must not be empty")
        created = self.repository.create_entry(entry)
        _logger.info("Entry created: id=%s date=%s", created.id, created.date)
        return created

    def list_all(self) -> list[LogEntry]:
        """Return every stored entry."""
        return self.repository.list_entries()
