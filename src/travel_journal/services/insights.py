"""Derived views over a user's trips."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from travel_journal.domain.insights import DashboardStats, MapPin, Memory, PinTrip
from travel_journal.domain.models import Expense, Trip

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


@dataclass
class InsightsService:
    """Service computing dashboard, memory and atlas data."""

    recent_limit: int = 3

    def dashboard(self, trips: Sequence[Trip]) -> DashboardStats:
        """Count trips, distinct countries and photos."""
        countries = {
            country
            for trip in trips
            for entry in trip.entries
            if (country := _country_of(entry.location))
        }
        photos = sum(len(entry.photos) for trip in trips for entry in trip.entries)
        return DashboardStats(
            trip_count=len(trips),
            country_count=len(countries),
            photo_count=photos,
        )

    def on_this_day(self, trips: Sequence[Trip], today: date) -> list[Memory]:
        """Return entries from any year written on today's month and day."""
        return [
            Memory(trip_id=trip.id, trip_title=trip.title, entry=entry)
            for trip in trips
            for entry in trip.entries
            if (entry.date.month, entry.date.day) == (today.month, today.day)
        ]

    def recent_trips(self, trips: Sequence[Trip]) -> list[Trip]:
        """Return the first trips in collection order."""
        return list(trips[: self.recent_limit])

    def atlas(self, trips: Sequence[Trip]) -> list[MapPin]:
        """Return one pin per visited location, in first-seen order."""
        pins: dict[str, MapPin] = {}
        for trip in trips:
            for entry in trip.entries:
                if not entry.location.strip():
                    continue
                pin = pins.get(entry.location)
                if pin is None:
                    top, left = pin_position(entry.location)
                    pin = MapPin(
                        location=entry.location,
                        top_percent=top,
                        left_percent=left,
                        trips=[],
                    )
                    pins[entry.location] = pin
                if all(visit.id != trip.id for visit in pin.trips):
                    pin.trips.append(PinTrip(id=trip.id, title=trip.title))
        return list(pins.values())


def expense_total(expenses: Sequence[Expense]) -> float:
    """Return the sum of expense amounts."""
    return math.fsum(expense.amount for expense in expenses)


def pin_position(location: str) -> tuple[int, int]:
    """Place a location on the map deterministically.

    Uses the same 32-bit string hash as the web client so pins land in the
    same spots: top within 10-89 percent, left within 5-94 percent.
    """
    value = location_hash(location)
    return abs(value * 13) % 80 + 10, abs(value * 29) % 90 + 5


def location_hash(text: str) -> int:
    """Hash ``h = unit + ((h << 5) - h)`` over UTF-16 code units.

    Only the shift wraps to a signed 32-bit integer; the subtraction and
    addition are plain integer arithmetic.
    """
    encoded = text.encode("utf-16-le")
    value = 0
    for offset in range(0, len(encoded), 2):
        unit = int.from_bytes(encoded[offset : offset + 2], "little")
        value = unit + (_to_int32(_to_int32(value) << 5) - value)
    return value


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def _country_of(location: str) -> str | None:
    parts = location.split(",")
    if len(parts) < 2:  # noqa: PLR2004
        return None
    return parts[1].strip() or None
