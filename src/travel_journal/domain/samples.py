"""Built-in sample collections given to new accounts."""

from datetime import date

from travel_journal.domain.models import (
    Expense,
    ItineraryItem,
    JournalEntry,
    Photo,
    PlannedTrip,
    Trip,
)


def sample_trips() -> list[Trip]:
    """Return a fresh copy of the sample trips."""
    return [
        Trip(
            id="1",
            title="Adventure in the Alps",
            start_date=date(2023, 8, 15),
            end_date=date(2023, 8, 25),
            cover_photo="https://picsum.photos/seed/alps/800/600",
            entries=[
                JournalEntry(
                    id="e1",
                    date=date(2023, 8, 16),
                    title="First Hike",
                    content=(
                        "The air was crisp and the views were breathtaking. "
                        "We saw a marmot!"
                    ),
                    location="Grindelwald, Switzerland",
                    photos=[
                        Photo(
                            id="p1",
                            data_url="https://picsum.photos/seed/hike1/400/300",
                            caption="On the trail.",
                        )
                    ],
                ),
                JournalEntry(
                    id="e2",
                    date=date(2023, 8, 18),
                    title="Lake Brienz",
                    content=(
                        "Took a boat trip on the turquoise waters of Lake "
                        "Brienz. Unforgettable!"
                    ),
                    location="Interlaken, Switzerland",
                    photos=[
                        Photo(
                            id="p2",
                            data_url="https://picsum.photos/seed/lake/400/300",
                            caption="Turquoise waters.",
                        )
                    ],
                ),
            ],
            expenses=[
                Expense(
                    id="ex1",
                    date=date(2023, 8, 16),
                    description="Train ticket",
                    amount=75,
                ),
                Expense(
                    id="ex2",
                    date=date(2023, 8, 18),
                    description="Boat rental",
                    amount=120,
                ),
            ],
        ),
        Trip(
            id="2",
            title="Exploring Kyoto",
            start_date=date(2024, 4, 5),
            end_date=date(2024, 4, 12),
            cover_photo="https://picsum.photos/seed/kyoto/800/600",
            entries=[
                JournalEntry(
                    id="e3",
                    date=date(2024, 4, 6),
                    title="Fushimi Inari Shrine",
                    content=(
                        "Walked through thousands of torii gates. "
                        "A truly magical experience."
                    ),
                    location="Kyoto, Japan",
                )
            ],
        ),
    ]


def sample_plans() -> list[PlannedTrip]:
    """Return a fresh copy of the sample planned trips."""
    return [
        PlannedTrip(
            id="plan1",
            title="Coastal Italy Roadtrip",
            destination="Amalfi Coast, Italy",
            start_date=date(2025, 6, 10),
            end_date=date(2025, 6, 20),
            itinerary=[
                ItineraryItem(
                    id="i1",
                    date=date(2025, 6, 11),
                    activity="Hike the Path of the Gods",
                ),
                ItineraryItem(
                    id="i2",
                    date=date(2025, 6, 13),
                    activity="Explore Positano",
                ),
            ],
        )
    ]
