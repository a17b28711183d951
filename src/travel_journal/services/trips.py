"""Per-user trip and plan collections."""

import logging
from dataclasses import dataclass, field

from travel_journal.domain.models import (
    PlannedTrip,
    Trip,
    dump_plans,
    dump_trips,
    load_plans,
    load_trips,
)
from travel_journal.domain.samples import sample_plans, sample_trips
from travel_journal.services.latency import SimulatedLatency
from travel_journal.services.store import KeyValueStore, StoreKeys

logger = logging.getLogger(__name__)

READ_DELAY_MS = 500
WRITE_DELAY_MS = 300


@dataclass
class TripRepository:
    """Whole-collection reads and writes of a user's trips and plans.

    A user whose collection key is absent gets the sample collection written
    and returned on first read. An existing empty collection is left alone.
    """

    store: KeyValueStore
    keys: StoreKeys = field(default_factory=StoreKeys)
    latency: SimulatedLatency = field(default_factory=SimulatedLatency)

    async def get_trips(self, user_id: str) -> list[Trip]:
        """Return the user's trips, seeding samples when none are stored."""
        await self.latency.wait(READ_DELAY_MS)
        raw = self.store.get(self.keys.trips(user_id))
        if raw is None:
            logger.info("Seeding sample trips", extra={"user_id": user_id})
            trips = sample_trips()
            await self.save_trips(user_id, trips)
            return trips
        return load_trips(raw)

    async def save_trips(self, user_id: str, trips: list[Trip]) -> None:
        """Replace the user's stored trips."""
        await self.latency.wait(WRITE_DELAY_MS)
        self.store.set(self.keys.trips(user_id), dump_trips(trips))

    async def get_planned_trips(self, user_id: str) -> list[PlannedTrip]:
        """Return the user's plans, seeding samples when none are stored."""
        await self.latency.wait(READ_DELAY_MS)
        raw = self.store.get(self.keys.plans(user_id))
        if raw is None:
            logger.info("Seeding sample plans", extra={"user_id": user_id})
            plans = sample_plans()
            await self.save_planned_trips(user_id, plans)
            return plans
        return load_plans(raw)

    async def save_planned_trips(self, user_id: str, plans: list[PlannedTrip]) -> None:
        """Replace the user's stored plans."""
        await self.latency.wait(WRITE_DELAY_MS)
        self.store.set(self.keys.plans(user_id), dump_plans(plans))
