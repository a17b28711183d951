"""In-memory application state kept in sync with the store.

The controller holds the signed-in user and full copies of their trips and
plans. A session change triggers a fresh load of both collections; every
mutation after that load writes the whole affected collection back. The
load itself is never written back.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date

from travel_journal.domain.models import (
    Expense,
    ItineraryItem,
    JournalEntry,
    PhotoDraft,
    PlannedTrip,
    Trip,
    User,
)
from travel_journal.services import journal
from travel_journal.services.accounts import AccountService
from travel_journal.services.advisory import AdvisoryService
from travel_journal.services.trips import TripRepository

logger = logging.getLogger(__name__)


class SessionRequiredError(RuntimeError):
    """Raised when an operation needs a signed-in, loaded session."""


@dataclass
class AppStateController:
    """Orchestrates load-on-login and save-on-mutation."""

    accounts: AccountService
    repository: TripRepository
    advisory: AdvisoryService
    current_user: User | None = None
    trips: list[Trip] = field(default_factory=list)
    plans: list[PlannedTrip] = field(default_factory=list)
    is_loading: bool = False
    initial_load_complete: bool = False
    _generation: int = field(default=0, init=False, repr=False)

    async def restore_session(self) -> User | None:
        """Resume the persisted session, loading its data if there is one."""
        user = await self.accounts.check_session()
        if user is not None:
            await self._activate(user)
        return user

    async def login(self, email: str, password: str) -> bool:
        """Sign in and load the user's data."""
        user = await self.accounts.login(email, password)
        if user is None:
            return False
        await self._activate(user)
        return True

    async def signup(self, name: str, email: str, password: str) -> bool:
        """Create an account, sign in and load its seeded data."""
        user = await self.accounts.signup(name, email, password)
        if user is None:
            return False
        await self._activate(user)
        return True

    async def logout(self) -> None:
        """End the session and drop in-memory data."""
        await self.accounts.logout()
        self._generation += 1
        self.current_user = None
        self.trips = []
        self.plans = []
        self.is_loading = False
        self.initial_load_complete = False

    async def load(self) -> None:
        """Replace in-memory collections with the stored ones.

        Both collections are fetched concurrently. If another load or a
        logout starts before this one finishes, its results are discarded.
        """
        user = self._require_user()
        self._generation += 1
        generation = self._generation
        self.initial_load_complete = False
        self.is_loading = True
        trips, plans = await asyncio.gather(
            self.repository.get_trips(user.id),
            self.repository.get_planned_trips(user.id),
        )
        if generation != self._generation:
            logger.info("Discarding superseded load", extra={"user_id": user.id})
            return
        self.trips = trips
        self.plans = plans
        self.is_loading = False
        self.initial_load_complete = True

    async def create_trip(self, title: str, start_date: date, end_date: date) -> Trip:
        self._require_loaded()
        trips, trip = journal.create_trip(self.trips, title, start_date, end_date)
        await self._commit_trips(trips)
        return trip

    async def add_entry(  # noqa: PLR0913
        self,
        trip_id: str,
        *,
        entry_date: date,
        title: str,
        content: str,
        location: str,
        photos: list[PhotoDraft] | None = None,
    ) -> JournalEntry:
        self._require_loaded()
        trips, entry = journal.add_entry(
            self.trips,
            trip_id,
            entry_date=entry_date,
            title=title,
            content=content,
            location=location,
            photos=photos or [],
        )
        await self._commit_trips(trips)
        return entry

    async def add_expense(
        self, trip_id: str, *, expense_date: date, description: str, amount: float
    ) -> Expense:
        self._require_loaded()
        trips, expense = journal.add_expense(
            self.trips,
            trip_id,
            expense_date=expense_date,
            description=description,
            amount=amount,
        )
        await self._commit_trips(trips)
        return expense

    async def generate_summary(self, trip_id: str) -> Trip:
        """Summarize a trip's entries once and store the result on the trip.

        A trip that already has a summary is returned unchanged.
        """
        self._require_loaded()
        trip = journal.find_trip(self.trips, trip_id)
        if trip.summary:
            return trip
        generation = self._generation
        if trip.entries:
            result = await self.advisory.summarize(journal.summary_source_text(trip))
            summary = result.text
        else:
            summary = journal.NO_ENTRIES_SUMMARY
        if generation != self._generation:
            raise SessionRequiredError("Session changed while generating summary")
        await self._commit_trips(journal.set_summary(self.trips, trip_id, summary))
        return journal.find_trip(self.trips, trip_id)

    async def create_plan(
        self, title: str, destination: str, start_date: date, end_date: date
    ) -> PlannedTrip:
        self._require_loaded()
        plans, plan = journal.create_plan(
            self.plans, title, destination, start_date, end_date
        )
        await self._commit_plans(plans)
        return plan

    async def add_itinerary_item(
        self,
        plan_id: str,
        *,
        item_date: date,
        activity: str,
        notes: str | None = None,
    ) -> ItineraryItem:
        self._require_loaded()
        plans, item = journal.add_itinerary_item(
            self.plans, plan_id, item_date=item_date, activity=activity, notes=notes
        )
        await self._commit_plans(plans)
        return item

    async def convert_plan_to_trip(self, plan_id: str) -> Trip:
        """Replace a plan with a trip drafted from its itinerary."""
        user = self._require_loaded()
        trips, plans, trip = journal.convert_plan(self.trips, self.plans, plan_id)
        self.trips = trips
        self.plans = plans
        await asyncio.gather(
            self.repository.save_trips(user.id, trips),
            self.repository.save_planned_trips(user.id, plans),
        )
        return trip

    async def _activate(self, user: User) -> None:
        self.current_user = user
        await self.load()

    async def _commit_trips(self, trips: list[Trip]) -> None:
        user = self._require_loaded()
        self.trips = trips
        await self.repository.save_trips(user.id, trips)

    async def _commit_plans(self, plans: list[PlannedTrip]) -> None:
        user = self._require_loaded()
        self.plans = plans
        await self.repository.save_planned_trips(user.id, plans)

    def _require_user(self) -> User:
        if self.current_user is None:
            raise SessionRequiredError("No user is signed in")
        return self.current_user

    def _require_loaded(self) -> User:
        user = self._require_user()
        if not self.initial_load_complete:
            raise SessionRequiredError("User data has not finished loading")
        return user
