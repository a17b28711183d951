"""Tests for journal transformations."""

from datetime import date

import pytest
from pydantic import ValidationError

from travel_journal.domain.models import Expense, PhotoDraft
from travel_journal.services import journal
from travel_journal.services.journal import JournalValidationError, NotFoundError
from tests.conftest import make_tokyo_plan, make_trip


def test_create_trip_prepends_with_cover_photo() -> None:
    existing = [make_trip()]

    trips, trip = journal.create_trip(
        existing, "Iceland Ring Road", date(2024, 9, 1), date(2024, 9, 10)
    )

    assert trips[0] == trip
    assert trips[1:] == existing
    assert trip.entries == []
    assert trip.expenses == []
    assert trip.cover_photo == "https://picsum.photos/seed/Iceland/800/600"
    assert existing == [make_trip()]


def test_create_trip_rejects_blank_title_and_reversed_dates() -> None:
    with pytest.raises(JournalValidationError):
        journal.create_trip([], "  ", date(2024, 9, 1), date(2024, 9, 2))
    with pytest.raises(JournalValidationError):
        journal.create_trip([], "Oops", date(2024, 9, 2), date(2024, 9, 1))


def test_entries_stay_sorted_newest_first() -> None:
    trips = [make_trip()]
    for day in (1, 4, 3):
        trips, _ = journal.add_entry(
            trips,
            "tripA",
            entry_date=date(2024, 5, day),
            title=f"Day {day}",
            content="Walked the hills.",
            location="Lisbon, Portugal",
        )

    dates = [entry.date.day for entry in trips[0].entries]
    assert dates == [4, 3, 2, 1]


def test_same_day_entries_put_newest_addition_first() -> None:
    trips = [make_trip()]

    trips, entry = journal.add_entry(
        trips,
        "tripA",
        entry_date=date(2024, 5, 2),
        title="Sunset",
        content="Orange skies over the river.",
        location="Lisbon, Portugal",
    )

    assert [item.id for item in trips[0].entries] == [entry.id, "a1"]


def test_add_entry_assigns_photo_ids() -> None:
    trips, entry = journal.add_entry(
        [make_trip()],
        "tripA",
        entry_date=date(2024, 5, 3),
        title="Belem",
        content="Tower and monastery.",
        location="Lisbon, Portugal",
        photos=[
            PhotoDraft(data_url="data:image/png;base64,AAAA", caption="Tower"),
            PhotoDraft(data_url="data:image/png;base64,BBBB"),
        ],
    )

    assert [photo.id for photo in entry.photos] == [f"{entry.id}0", f"{entry.id}1"]
    assert entry.photos[0].caption == "Tower"
    assert entry.photos[1].caption == ""


@pytest.mark.parametrize(
    ("title", "content", "location"),
    [
        ("", "A story.", "Lisbon, Portugal"),
        ("Belem", " ", "Lisbon, Portugal"),
        ("Belem", "A story.", ""),
    ],
)
def test_add_entry_requires_title_content_and_location(
    title, content, location
) -> None:
    original = [make_trip()]

    with pytest.raises(JournalValidationError):
        journal.add_entry(
            original,
            "tripA",
            entry_date=date(2024, 5, 3),
            title=title,
            content=content,
            location=location,
        )
    assert original == [make_trip()]


def test_add_entry_unknown_trip() -> None:
    with pytest.raises(NotFoundError):
        journal.add_entry(
            [make_trip()],
            "nope",
            entry_date=date(2024, 5, 3),
            title="Lost",
            content="Nowhere to be found.",
            location="Lisbon, Portugal",
        )


def test_expenses_sorted_newest_first() -> None:
    trips = [make_trip()]
    trips, _ = journal.add_expense(
        trips, "tripA", expense_date=date(2024, 5, 1), description="Taxi", amount=20
    )
    trips, _ = journal.add_expense(
        trips, "tripA", expense_date=date(2024, 5, 3), description="Fado", amount=35
    )

    assert [expense.description for expense in trips[0].expenses] == ["Fado", "Taxi"]


@pytest.mark.parametrize(
    ("description", "amount"),
    [
        ("", 10),
        ("Taxi", 0),
        ("Taxi", -5),
        ("Taxi", float("nan")),
        ("Taxi", float("inf")),
    ],
)
def test_add_expense_rejects_invalid_input(description, amount) -> None:
    original = [make_trip()]

    with pytest.raises(JournalValidationError):
        journal.add_expense(
            original,
            "tripA",
            expense_date=date(2024, 5, 1),
            description=description,
            amount=amount,
        )
    assert original[0].expenses == []


@pytest.mark.parametrize("amount", [float("inf"), float("nan"), 0])
def test_expense_model_rejects_unstorable_amounts(amount) -> None:
    with pytest.raises(ValidationError):
        Expense(id="x", date=date(2024, 5, 1), description="Taxi", amount=amount)


def test_set_summary_only_touches_target_trip() -> None:
    trips = [make_trip(), make_trip("tripB", "Porto")]

    updated = journal.set_summary(trips, "tripB", "Port wine and bridges.")

    assert updated[0].summary is None
    assert updated[1].summary == "Port wine and bridges."


def test_summary_source_text() -> None:
    trips, _ = journal.add_entry(
        [make_trip()],
        "tripA",
        entry_date=date(2024, 5, 3),
        title="Belem",
        content="Pasteis de nata.",
        location="Lisbon, Portugal",
    )

    assert journal.summary_source_text(trips[0]) == (
        "Title: Belem\nPasteis de nata.\n\nTitle: Tram 28\n"
        "Rode the yellow tram up to Alfama."
    )


def test_create_plan_prefixes_id() -> None:
    plans, plan = journal.create_plan(
        [], "Fjords", "Bergen, Norway", date(2025, 7, 1), date(2025, 7, 9)
    )

    assert plans == [plan]
    assert plan.id.startswith("plan-")
    assert plan.itinerary == []


def test_create_plan_requires_destination() -> None:
    with pytest.raises(JournalValidationError):
        journal.create_plan([], "Fjords", " ", date(2025, 7, 1), date(2025, 7, 9))


def test_itinerary_sorted_oldest_first() -> None:
    plans = [make_tokyo_plan()]
    plans, late = journal.add_itinerary_item(
        plans, "plan1", item_date=date(2025, 6, 15), activity="Sumo"
    )
    plans, early = journal.add_itinerary_item(
        plans, "plan1", item_date=date(2025, 6, 10), activity="Arrive", notes="NRT"
    )

    itinerary = plans[0].itinerary
    assert [item.id for item in itinerary] == [early.id, "i1", late.id]
    assert early.id.startswith("item-")
    assert early.notes == "NRT"
    assert late.notes is None


def test_add_itinerary_item_rejects_blank_activity() -> None:
    with pytest.raises(JournalValidationError):
        journal.add_itinerary_item(
            [make_tokyo_plan()], "plan1", item_date=date(2025, 6, 12), activity="  "
        )


def test_convert_plan_builds_draft_trip() -> None:
    existing = [make_trip()]

    trips, plans, trip = journal.convert_plan(existing, [make_tokyo_plan()], "plan1")

    assert plans == []
    assert trips == [trip, *existing]
    assert trip.id == "trip-plan1"
    assert trip.title == "Spring in Japan"
    assert trip.cover_photo == "https://picsum.photos/seed/Tokyo/800/600"
    assert len(trip.entries) == 1
    entry = trip.entries[0]
    assert entry.id == "draft-i1"
    assert entry.title == "Visit temple"
    assert entry.location == "Tokyo, Japan"
    assert entry.content == ""
    assert entry.photos == []


def test_convert_plan_sorts_drafts_newest_first_and_keeps_notes() -> None:
    plans, _ = journal.add_itinerary_item(
        [make_tokyo_plan()],
        "plan1",
        item_date=date(2025, 6, 14),
        activity="Tsukiji",
        notes="Go early",
    )

    _, _, trip = journal.convert_plan([], plans, "plan1")

    assert [entry.title for entry in trip.entries] == ["Tsukiji", "Visit temple"]
    assert trip.entries[0].content == "Go early"


def test_convert_unknown_plan() -> None:
    with pytest.raises(NotFoundError):
        journal.convert_plan([], [make_tokyo_plan()], "plan2")
