"""modules/agenda: Day-by-day activity bookkeeping for a trip."""

from modules.agenda.day_agenda_store import DayAgendaStore
from modules.agenda.ordering import SortedActivities, sorted_activities, sort_in_place
from modules.agenda.flight_codec import (
    encode, encode_details, decode, flight_details_for, looks_encoded,
)

__all__ = [
    "DayAgendaStore",
    "SortedActivities",
    "sorted_activities",
    "sort_in_place",
    "encode",
    "encode_details",
    "decode",
    "flight_details_for",
    "looks_encoded",
]
