"""
modules/memory/trip_repository.py
-----------------------------------
The explicit trip store: every TripPlan the user has, plus a load-all /
save-all lifecycle against a JSON file.

With no path configured (config.TRIP_STORE_PATH empty) the repository is
memory-only and trips last for the lifetime of the process.

File format (validated with schemas/records.py):
    {"version": 1, "trips": [TripRecord, ...]}

Legacy Flight activities whose description holds the line-prefix encoding
and no structured flight record are migrated on load: the description is
decoded into `flight` and cleared.
"""

from __future__ import annotations
import base64
import logging
import os
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from modules.agenda.flight_codec import decode, looks_encoded
from modules.agenda.day_agenda_store import DayAgendaStore
from modules.input.trip_intake import TripDraft
from modules.tool_usage.time_tool import TimeTool
from schemas.records import (
    ActivityRecord, DayAgendaRecord, FlightRecord, TripRecord, TripStoreFile,
)
from schemas.trip import (
    ActivityCategory, FlightDetails, ScheduledActivity, TripPlan,
)
import config

logger = logging.getLogger(__name__)


class TripStoreError(Exception):
    """The trip store file exists but cannot be read as a trip store."""


# ─────────────────────────────────────────────────────────────────────────────
# Record conversion
# ─────────────────────────────────────────────────────────────────────────────

def _activity_to_record(a: ScheduledActivity) -> ActivityRecord:
    return ActivityRecord(
        id=a.id,
        time=a.time,
        name=a.name,
        description=a.description,
        category=a.category,
        url=a.url,
        photo_b64=base64.b64encode(a.photo_data).decode("ascii") if a.photo_data else None,
        flight=FlightRecord(**vars(a.flight)) if a.flight is not None else None,
        cost=a.cost,
    )


def _activity_from_record(r: ActivityRecord) -> ScheduledActivity:
    flight = FlightDetails(**r.flight.model_dump()) if r.flight is not None else None
    description = r.description
    if r.category == ActivityCategory.FLIGHT and flight is None and looks_encoded(description):
        flight = decode(description)
        description = ""
    return ScheduledActivity(
        id=r.id,
        time=r.time,
        name=r.name,
        description=description,
        category=r.category,
        url=r.url,
        photo_data=base64.b64decode(r.photo_b64) if r.photo_b64 else None,
        flight=flight,
        cost=r.cost,
    )


def trip_to_record(plan: TripPlan) -> TripRecord:
    return TripRecord(
        id=plan.id,
        destination=plan.destination,
        start_time=plan.start_time,
        end_time=plan.end_time,
        budget=plan.budget,
        day_agendas=[
            DayAgendaRecord(
                id=agenda.id,
                date=agenda.date,
                activities=[_activity_to_record(a) for a in agenda.activities],
            )
            for agenda in plan.day_agendas
        ],
    )


def trip_from_record(record: TripRecord) -> TripPlan:
    """
    Rebuild a trip by filing every stored activity under its own day.

    Agendas sharing a date are merged and misfiled activities move to the
    day their time falls on. Each day keeps the id of the first stored
    agenda with that date. Empty agendas are dropped.
    """
    plan = TripPlan(
        id=record.id,
        destination=record.destination,
        start_time=record.start_time,
        end_time=record.end_time,
        budget=record.budget,
    )
    store = DayAgendaStore(plan)
    agenda_ids: dict[date, str] = {}
    for ar in record.day_agendas:
        if not ar.activities:
            continue
        agenda_ids.setdefault(ar.date, ar.id)
        for r in ar.activities:
            activity = _activity_from_record(r)
            if TimeTool.start_of_day(activity.time) != ar.date:
                logger.warning(
                    "Activity %r at %s was stored under %s; refiling it",
                    activity.name, activity.time, ar.date,
                )
            store.add_activity(activity.time, activity)

    for agenda in plan.day_agendas:
        agenda.id = agenda_ids.get(agenda.date, agenda.id)
    return plan


# ─────────────────────────────────────────────────────────────────────────────
# Repository
# ─────────────────────────────────────────────────────────────────────────────

class TripRepository:

    def __init__(self, path: Optional[str] = None):
        path = path if path is not None else config.TRIP_STORE_PATH
        self.path: Optional[Path] = Path(path) if path else None
        self._trips: list[TripPlan] = []

    # ── Collection ────────────────────────────────────────────────────────

    def all(self) -> list[TripPlan]:
        return list(self._trips)

    def sorted_trips(self) -> list[TripPlan]:
        """Trips in list order: earliest start first."""
        return sorted(self._trips, key=lambda t: t.start_time)

    def get(self, trip_id: str) -> TripPlan:
        for trip in self._trips:
            if trip.id == trip_id:
                return trip
        raise KeyError(trip_id)

    def add(self, plan: TripPlan) -> TripPlan:
        self._trips.append(plan)
        return plan

    def replace(self, plan: TripPlan) -> TripPlan:
        for i, trip in enumerate(self._trips):
            if trip.id == plan.id:
                self._trips[i] = plan
                return plan
        raise KeyError(plan.id)

    def save_trip(self, draft: TripDraft, editing_id: Optional[str] = None) -> TripPlan:
        """Save the trip form: a new trip, or an edit of `editing_id` keeping its agendas."""
        if editing_id is None:
            return self.add(draft.build())
        return self.replace(draft.build(existing=self.get(editing_id)))

    def delete(self, trip_id: str) -> None:
        trip = self.get(trip_id)
        self._trips.remove(trip)

    def delete_at_offsets(self, offsets: Iterable[int]) -> int:
        """Delete by position in sorted_trips()."""
        ordered = self.sorted_trips()
        doomed = [ordered[i] for i in sorted(set(offsets))]
        for trip in doomed:
            self._trips.remove(trip)
        return len(doomed)

    # ── Load / Save ───────────────────────────────────────────────────────

    def load_all(self) -> list[TripPlan]:
        """
        Replace the in-memory trips with the file's contents.

        A missing file (or no configured path) loads as no trips.

        Raises:
            TripStoreError: file is not UTF-8 JSON or fails validation.
        """
        if self.path is None or not self.path.exists():
            self._trips = []
            return self.all()

        try:
            store = TripStoreFile.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (ValidationError, UnicodeDecodeError) as exc:
            raise TripStoreError(f"cannot read trip store {self.path}: {exc}") from exc

        if store.version != config.TRIP_STORE_VERSION:
            raise TripStoreError(
                f"unsupported trip store version {store.version} in {self.path}"
            )

        self._trips = [trip_from_record(r) for r in store.trips]
        logger.info("Loaded %d trip(s) from %s", len(self._trips), self.path)
        return self.all()

    def save_all(self) -> None:
        """Write every trip to the store file. No-op when memory-only."""
        if self.path is None:
            return

        store = TripStoreFile(
            version=config.TRIP_STORE_VERSION,
            trips=[trip_to_record(t) for t in self._trips],
        )
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(store.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp, self.path)
        logger.info("Saved %d trip(s) to %s", len(self._trips), self.path)
