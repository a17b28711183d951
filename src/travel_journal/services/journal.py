"""Pure transformations over trip and plan collections.

Every function returns new collections and never mutates its inputs.
Journal entries and expenses are kept newest first; itineraries are kept
in chronological order.
"""

import math
from collections.abc import Sequence
from datetime import date

from travel_journal.domain.ids import new_id
from travel_journal.domain.models import (
    Expense,
    ItineraryItem,
    JournalEntry,
    Photo,
    PhotoDraft,
    PlannedTrip,
    Trip,
)

NO_ENTRIES_SUMMARY = "No entries to summarize."


class JournalValidationError(ValueError):
    """Raised when submitted data is rejected before any state change."""


class NotFoundError(LookupError):
    """Raised when a trip or plan id is not in the collection."""


def sort_entries(entries: Sequence[JournalEntry]) -> list[JournalEntry]:
    """Return entries newest first, keeping the order of same-day entries."""
    return sorted(entries, key=lambda entry: entry.date, reverse=True)


def sort_expenses(expenses: Sequence[Expense]) -> list[Expense]:
    """Return expenses newest first."""
    return sorted(expenses, key=lambda expense: expense.date, reverse=True)


def sort_itinerary(items: Sequence[ItineraryItem]) -> list[ItineraryItem]:
    """Return itinerary items oldest first."""
    return sorted(items, key=lambda item: item.date)


def find_trip(trips: Sequence[Trip], trip_id: str) -> Trip:
    """Return the trip with an id or raise NotFoundError."""
    for trip in trips:
        if trip.id == trip_id:
            return trip
    raise NotFoundError(f"Trip {trip_id} not found")


def find_plan(plans: Sequence[PlannedTrip], plan_id: str) -> PlannedTrip:
    """Return the plan with an id or raise NotFoundError."""
    for plan in plans:
        if plan.id == plan_id:
            return plan
    raise NotFoundError(f"Plan {plan_id} not found")


def create_trip(
    trips: Sequence[Trip], title: str, start_date: date, end_date: date
) -> tuple[list[Trip], Trip]:
    """Prepend a new empty trip."""
    title = title.strip()
    if not title:
        raise JournalValidationError("Please enter a trip title.")
    _check_date_range(start_date, end_date)
    trip = Trip(
        id=new_id(),
        title=title,
        start_date=start_date,
        end_date=end_date,
        cover_photo=_cover_photo_url(title.split(" ")[0]),
    )
    return [trip, *trips], trip


def add_entry(  # noqa: PLR0913
    trips: Sequence[Trip],
    trip_id: str,
    *,
    entry_date: date,
    title: str,
    content: str,
    location: str,
    photos: Sequence[PhotoDraft] = (),
) -> tuple[list[Trip], JournalEntry]:
    """Add a journal entry to a trip and re-sort its entries.

    Title, content and location are all required. Draft entries made by
    `convert_plan` do not pass through here and may have empty content.
    """
    if not title.strip() or not content.strip() or not location.strip():
        raise JournalValidationError(
            "Please enter a title, location and your story for this entry."
        )
    find_trip(trips, trip_id)
    entry_id = new_id()
    entry = JournalEntry(
        id=entry_id,
        date=entry_date,
        title=title,
        content=content,
        location=location,
        photos=[
            Photo(
                id=f"{entry_id}{index}",
                data_url=draft.data_url,
                caption=draft.caption,
            )
            for index, draft in enumerate(photos)
        ],
    )
    updated = [
        trip.model_copy(update={"entries": sort_entries([entry, *trip.entries])})
        if trip.id == trip_id
        else trip
        for trip in trips
    ]
    return updated, entry


def add_expense(
    trips: Sequence[Trip],
    trip_id: str,
    *,
    expense_date: date,
    description: str,
    amount: float,
) -> tuple[list[Trip], Expense]:
    """Append an expense to a trip and re-sort its expenses."""
    if not description.strip() or not math.isfinite(amount) or amount <= 0:
        raise JournalValidationError(
            "Please enter a valid description and positive amount."
        )
    find_trip(trips, trip_id)
    expense = Expense(
        id=new_id(), date=expense_date, description=description, amount=amount
    )
    updated = [
        trip.model_copy(update={"expenses": sort_expenses([*trip.expenses, expense])})
        if trip.id == trip_id
        else trip
        for trip in trips
    ]
    return updated, expense


def set_summary(trips: Sequence[Trip], trip_id: str, summary: str) -> list[Trip]:
    """Store a generated summary on a trip."""
    find_trip(trips, trip_id)
    return [
        trip.model_copy(update={"summary": summary}) if trip.id == trip_id else trip
        for trip in trips
    ]


def summary_source_text(trip: Trip) -> str:
    """Render a trip's entries as the text given to the summarizer."""
    return "\n\n".join(
        f"Title: {entry.title}\n{entry.content}" for entry in trip.entries
    )


def create_plan(
    plans: Sequence[PlannedTrip],
    title: str,
    destination: str,
    start_date: date,
    end_date: date,
) -> tuple[list[PlannedTrip], PlannedTrip]:
    """Prepend a new plan with an empty itinerary."""
    if not title.strip() or not destination.strip():
        raise JournalValidationError("Please fill in all fields.")
    _check_date_range(start_date, end_date)
    plan = PlannedTrip(
        id=new_id("plan-"),
        title=title,
        destination=destination,
        start_date=start_date,
        end_date=end_date,
    )
    return [plan, *plans], plan


def add_itinerary_item(
    plans: Sequence[PlannedTrip],
    plan_id: str,
    *,
    item_date: date,
    activity: str,
    notes: str | None = None,
) -> tuple[list[PlannedTrip], ItineraryItem]:
    """Append an activity to a plan and re-sort its itinerary."""
    activity = activity.strip()
    if not activity:
        raise JournalValidationError("Please enter an activity.")
    find_plan(plans, plan_id)
    item = ItineraryItem(
        id=new_id("item-"), date=item_date, activity=activity, notes=notes or None
    )
    updated = [
        plan.model_copy(update={"itinerary": sort_itinerary([*plan.itinerary, item])})
        if plan.id == plan_id
        else plan
        for plan in plans
    ]
    return updated, item


def convert_plan(
    trips: Sequence[Trip], plans: Sequence[PlannedTrip], plan_id: str
) -> tuple[list[Trip], list[PlannedTrip], Trip]:
    """Turn a plan into a trip whose entries are drafts of the itinerary.

    Returns the trips with the new trip prepended and the plans without the
    converted plan.
    """
    plan = find_plan(plans, plan_id)
    drafts = [
        JournalEntry(
            id=f"draft-{item.id}",
            date=item.date,
            title=item.activity,
            content=item.notes or "",
            location=plan.destination,
        )
        for item in plan.itinerary
    ]
    trip = Trip(
        id=f"trip-{plan.id}",
        title=plan.title,
        start_date=plan.start_date,
        end_date=plan.end_date,
        cover_photo=_cover_photo_url(plan.destination.split(",")[0]),
        entries=sort_entries(drafts),
    )
    remaining = [candidate for candidate in plans if candidate.id != plan_id]
    return [trip, *trips], remaining, trip


def _check_date_range(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise JournalValidationError("End date must not be before start date.")


def _cover_photo_url(seed: str) -> str:
    return f"https://picsum.photos/seed/{seed}/800/600"
