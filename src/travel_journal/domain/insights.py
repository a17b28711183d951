"""Domain models for dashboard and atlas views."""

from dataclasses import dataclass

from travel_journal.domain.models import JournalEntry


@dataclass(frozen=True)
class DashboardStats:
    """Headline counts across all trips."""

    trip_count: int
    country_count: int
    photo_count: int


@dataclass(frozen=True)
class Memory:
    """A past entry written on the same calendar day as today."""

    trip_id: str
    trip_title: str
    entry: JournalEntry


@dataclass(frozen=True)
class PinTrip:
    id: str
    title: str


@dataclass(frozen=True)
class MapPin:
    """A location pin positioned in percent of the map size."""

    location: str
    top_percent: int
    left_percent: int
    trips: list[PinTrip]
