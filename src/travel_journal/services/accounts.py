"""Account and session business logic."""

import logging
from dataclasses import dataclass, field

from travel_journal.domain.ids import new_id
from travel_journal.domain.models import (
    User,
    dump_user,
    dump_users,
    load_user,
    load_users,
)
from travel_journal.domain.samples import sample_plans, sample_trips
from travel_journal.services.latency import SimulatedLatency
from travel_journal.services.store import KeyValueStore, StoreKeys
from travel_journal.services.trips import TripRepository

logger = logging.getLogger(__name__)


@dataclass
class AccountService:
    """Signup, login and the persisted current-session pointer.

    Credentials are compared in plaintext against the stored registry.
    """

    store: KeyValueStore
    trip_repository: TripRepository
    keys: StoreKeys = field(default_factory=StoreKeys)
    latency: SimulatedLatency = field(default_factory=SimulatedLatency)

    async def signup(self, name: str, email: str, password: str) -> User | None:
        """Register a user and start a session, or None if the email is taken."""
        await self.latency.wait(500)
        users = self.list_users()
        if any(user.email == email for user in users):
            logger.info("Signup rejected for existing email")
            return None

        user = User(id=new_id(), name=name, email=email, password=password)
        self.store.set(self.keys.users, dump_users([*users, user]))
        self.store.set(self.keys.current_user, dump_user(user))
        await self.trip_repository.save_trips(user.id, sample_trips())
        await self.trip_repository.save_planned_trips(user.id, sample_plans())
        logger.info("Created account", extra={"user_id": user.id})
        return user

    async def login(self, email: str, password: str) -> User | None:
        """Start a session for matching credentials."""
        await self.latency.wait(500)
        user = next(
            (
                candidate
                for candidate in self.list_users()
                if candidate.email == email and candidate.password == password
            ),
            None,
        )
        if user is None:
            return None
        self.store.set(self.keys.current_user, dump_user(user))
        logger.info("Logged in", extra={"user_id": user.id})
        return user

    async def logout(self) -> None:
        """Clear the current session. Account data is kept."""
        await self.latency.wait(200)
        self.store.remove(self.keys.current_user)

    async def check_session(self) -> User | None:
        """Return the user of the persisted session, if any."""
        await self.latency.wait(100)
        raw = self.store.get(self.keys.current_user)
        return load_user(raw) if raw is not None else None

    def list_users(self) -> list[User]:
        """Return the registry in signup order."""
        raw = self.store.get(self.keys.users)
        return load_users(raw) if raw is not None else []
