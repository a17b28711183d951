"""Pydantic models for API request payloads."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from travel_journal.domain.models import PhotoDraft


class RequestModel(BaseModel):
    """Base request model accepting camelCase or snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignupRequest(RequestModel):
    name: str = ""
    email: str = ""
    password: str = ""


class LoginRequest(RequestModel):
    email: str = ""
    password: str = ""


class NewTripRequest(RequestModel):
    title: str
    start_date: dt.date
    end_date: dt.date


class NewEntryRequest(RequestModel):
    """Journal entry payload. The date defaults to today."""

    title: str
    date: dt.date | None = None
    content: str = ""
    location: str = ""
    photos: list[PhotoDraft] = Field(default_factory=list)


class NewExpenseRequest(RequestModel):
    description: str = ""
    amount: float = Field(allow_inf_nan=False)
    date: dt.date | None = None


class NewPlanRequest(RequestModel):
    title: str
    destination: str
    start_date: dt.date
    end_date: dt.date


class NewItineraryItemRequest(RequestModel):
    """Itinerary payload. The date defaults to the plan's start date."""

    activity: str
    date: dt.date | None = None
    notes: str | None = None


class CaptionRequest(RequestModel):
    data_url: str
