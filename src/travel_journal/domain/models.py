"""Domain models for the travel journal.

Models are immutable and serialize with camelCase keys so stored documents
keep the field names the web client reads (``startDate``, ``coverPhoto``...).
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class JournalModel(BaseModel):
    """Base model with the shared serialization settings."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class User(JournalModel):
    """A registered account. Passwords are kept as entered."""

    id: str
    name: str
    email: str
    password: str


class Photo(JournalModel):
    """Photo attached to a journal entry."""

    id: str
    data_url: str
    caption: str = ""


class PhotoDraft(JournalModel):
    """Photo submitted with a new entry, before it has an id."""

    data_url: str
    caption: str = ""


class JournalEntry(JournalModel):
    """Dated journal entry within a trip."""

    id: str
    date: dt.date
    title: str
    content: str = ""
    photos: list[Photo] = Field(default_factory=list)
    location: str = ""


class Expense(JournalModel):
    """Money spent during a trip."""

    id: str
    date: dt.date
    description: str
    amount: float = Field(gt=0, allow_inf_nan=False)


class Trip(JournalModel):
    """A journaled trip with its entries and expenses."""

    id: str
    title: str
    start_date: dt.date
    end_date: dt.date
    cover_photo: str = ""
    summary: str | None = None
    entries: list[JournalEntry] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)


class ItineraryItem(JournalModel):
    """Planned activity on a given day."""

    id: str
    date: dt.date
    activity: str
    notes: str | None = None


class PlannedTrip(JournalModel):
    """A future trip with an itinerary."""

    id: str
    title: str
    destination: str
    start_date: dt.date
    end_date: dt.date
    itinerary: list[ItineraryItem] = Field(default_factory=list)


_USER = TypeAdapter(User)
_USERS = TypeAdapter(list[User])
_TRIPS = TypeAdapter(list[Trip])
_PLANS = TypeAdapter(list[PlannedTrip])


def dump_user(user: User) -> bytes:
    """Serialize a single user document."""
    return _USER.dump_json(user, by_alias=True)


def load_user(raw: bytes) -> User:
    """Parse a single user document."""
    return _USER.validate_json(raw)


def dump_users(users: list[User]) -> bytes:
    """Serialize the user registry."""
    return _USERS.dump_json(users, by_alias=True)


def load_users(raw: bytes) -> list[User]:
    """Parse the user registry."""
    return _USERS.validate_json(raw)


def dump_trips(trips: list[Trip]) -> bytes:
    """Serialize a full trip collection."""
    return _TRIPS.dump_json(trips, by_alias=True, exclude_none=True)


def load_trips(raw: bytes) -> list[Trip]:
    """Parse a full trip collection."""
    return _TRIPS.validate_json(raw)


def dump_plans(plans: list[PlannedTrip]) -> bytes:
    """Serialize a full planned-trip collection."""
    return _PLANS.dump_json(plans, by_alias=True, exclude_none=True)


def load_plans(raw: bytes) -> list[PlannedTrip]:
    """Parse a full planned-trip collection."""
    return _PLANS.validate_json(raw)
