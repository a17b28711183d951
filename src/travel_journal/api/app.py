"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from travel_journal.api.schemas import (
    CaptionRequest,
    LoginRequest,
    NewEntryRequest,
    NewExpenseRequest,
    NewItineraryItemRequest,
    NewPlanRequest,
    NewTripRequest,
    SignupRequest,
)
from travel_journal.app_logging import configure_logging
from travel_journal.containers import AppContainer
from travel_journal.domain.insights import MapPin, Memory
from travel_journal.domain.models import User
from travel_journal.services.insights import expense_total
from travel_journal.services.journal import (
    JournalValidationError,
    NotFoundError,
    find_plan,
    find_trip,
)
from travel_journal.services.state import AppStateController, SessionRequiredError


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            await app.state.container.state.restore_session()
        except Exception:
            logger.exception("Failed to restore the saved session")
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Travel Journal", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(JournalValidationError)
    async def validation_error(
        _request: Request, exc: JournalValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(NotFoundError)
    async def not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(SessionRequiredError)
    async def session_required(
        _request: Request, exc: SessionRequiredError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/auth/signup", status_code=status.HTTP_201_CREATED)
    async def signup(payload: SignupRequest, request: Request) -> dict[str, object]:
        """Create an account and sign in."""
        state = _container(request).state
        if not payload.name or not payload.email or not payload.password:
            raise JournalValidationError("Please fill in all fields.")
        if not await state.signup(payload.name, payload.email, payload.password):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="An account with this email already exists.",
            )
        return {"user": _user_payload(state.current_user)}

    @app.post("/auth/login")
    async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
        """Sign in with email and password."""
        state = _container(request).state
        if not payload.email or not payload.password:
            raise JournalValidationError("Please enter email and password.")
        if not await state.login(payload.email, payload.password):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password.",
            )
        return {"user": _user_payload(state.current_user)}

    @app.post("/auth/logout")
    async def logout(request: Request) -> dict[str, str]:
        """End the current session."""
        await _container(request).state.logout()
        return {"status": "ok"}

    @app.get("/auth/session")
    async def session(request: Request) -> dict[str, object]:
        """Return the signed-in user, if any."""
        state = _container(request).state
        return {
            "user": _user_payload(state.current_user) if state.current_user else None,
            "loading": state.is_loading,
        }

    @app.get("/trips")
    async def list_trips(request: Request) -> dict[str, object]:
        """Return all trips, newest first."""
        state = _loaded_state(request)
        return {"trips": [_dump(trip) for trip in state.trips]}

    @app.post("/trips", status_code=status.HTTP_201_CREATED)
    async def create_trip(
        payload: NewTripRequest, request: Request
    ) -> dict[str, object]:
        """Start a new trip."""
        trip = await _container(request).state.create_trip(
            payload.title, payload.start_date, payload.end_date
        )
        return {"trip": _dump(trip)}

    @app.get("/trips/{trip_id}")
    async def trip_detail(trip_id: str, request: Request) -> dict[str, object]:
        """Return a trip with its expense total."""
        trip = find_trip(_loaded_state(request).trips, trip_id)
        return {"trip": _dump(trip), "expenseTotal": expense_total(trip.expenses)}

    @app.post("/trips/{trip_id}/entries", status_code=status.HTTP_201_CREATED)
    async def add_entry(
        trip_id: str, payload: NewEntryRequest, request: Request
    ) -> dict[str, object]:
        """Add a journal entry to a trip."""
        entry = await _container(request).state.add_entry(
            trip_id,
            entry_date=payload.date or date.today(),
            title=payload.title,
            content=payload.content,
            location=payload.location,
            photos=payload.photos,
        )
        return {"entry": _dump(entry)}

    @app.post("/trips/{trip_id}/expenses", status_code=status.HTTP_201_CREATED)
    async def add_expense(
        trip_id: str, payload: NewExpenseRequest, request: Request
    ) -> dict[str, object]:
        """Record an expense on a trip."""
        state = _container(request).state
        expense = await state.add_expense(
            trip_id,
            expense_date=payload.date or date.today(),
            description=payload.description,
            amount=payload.amount,
        )
        trip = find_trip(state.trips, trip_id)
        return {"expense": _dump(expense), "expenseTotal": expense_total(trip.expenses)}

    @app.post("/trips/{trip_id}/summary")
    async def summarize_trip(trip_id: str, request: Request) -> dict[str, object]:
        """Generate the trip summary if it has none yet."""
        trip = await _container(request).state.generate_summary(trip_id)
        return {"trip": _dump(trip)}

    @app.get("/plans")
    async def list_plans(request: Request) -> dict[str, object]:
        """Return all planned trips."""
        state = _loaded_state(request)
        return {"plans": [_dump(plan) for plan in state.plans]}

    @app.post("/plans", status_code=status.HTTP_201_CREATED)
    async def create_plan(
        payload: NewPlanRequest, request: Request
    ) -> dict[str, object]:
        """Start a new plan."""
        plan = await _container(request).state.create_plan(
            payload.title, payload.destination, payload.start_date, payload.end_date
        )
        return {"plan": _dump(plan)}

    @app.post("/plans/{plan_id}/items", status_code=status.HTTP_201_CREATED)
    async def add_itinerary_item(
        plan_id: str, payload: NewItineraryItemRequest, request: Request
    ) -> dict[str, object]:
        """Add an activity to a plan's itinerary."""
        state = _loaded_state(request)
        item_date = payload.date or find_plan(state.plans, plan_id).start_date
        item = await state.add_itinerary_item(
            plan_id, item_date=item_date, activity=payload.activity, notes=payload.notes
        )
        return {"item": _dump(item)}

    @app.post("/plans/{plan_id}/convert")
    async def convert_plan(plan_id: str, request: Request) -> dict[str, object]:
        """Turn a plan into a trip with draft entries."""
        trip = await _container(request).state.convert_plan_to_trip(plan_id)
        return {"trip": _dump(trip)}

    @app.get("/dashboard")
    async def dashboard(request: Request) -> dict[str, object]:
        """Return headline stats, on-this-day memories and recent trips."""
        container = _container(request)
        trips = _loaded_state(request).trips
        insights = container.insights_service
        stats = insights.dashboard(trips)
        return {
            "stats": {
                "tripCount": stats.trip_count,
                "countryCount": stats.country_count,
                "photoCount": stats.photo_count,
            },
            "onThisDay": [
                _memory_payload(memory)
                for memory in insights.on_this_day(trips, date.today())
            ],
            "recentTrips": [_dump(trip) for trip in insights.recent_trips(trips)],
        }

    @app.get("/atlas")
    async def atlas(request: Request) -> dict[str, object]:
        """Return map pins for every visited location."""
        container = _container(request)
        pins = container.insights_service.atlas(_loaded_state(request).trips)
        return {"pins": [_pin_payload(pin) for pin in pins]}

    @app.post("/captions")
    async def caption(payload: CaptionRequest, request: Request) -> dict[str, str]:
        """Suggest a caption for an uploaded photo."""
        result = await _container(request).advisory_service.caption_data_url(
            payload.data_url
        )
        return {"caption": result.text, "status": result.status.value}

    return app


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _loaded_state(request: Request) -> AppStateController:
    state = _container(request).state
    if state.current_user is None or not state.initial_load_complete:
        raise SessionRequiredError("Sign in to view your journal")
    return state


def _dump(model: BaseModel) -> dict[str, object]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def _user_payload(user: User | None) -> dict[str, str] | None:
    """Return the public fields of a user. The password is never sent."""
    if user is None:
        return None
    return {"id": user.id, "name": user.name, "email": user.email}


def _memory_payload(memory: Memory) -> dict[str, object]:
    return {
        "tripId": memory.trip_id,
        "tripTitle": memory.trip_title,
        "entry": _dump(memory.entry),
    }


def _pin_payload(pin: MapPin) -> dict[str, object]:
    return {
        "location": pin.location,
        "top": f"{pin.top_percent}%",
        "left": f"{pin.left_percent}%",
        "trips": [{"id": trip.id, "title": trip.title} for trip in pin.trips],
    }
