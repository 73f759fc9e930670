from datetime import datetime

from modules.agenda.flight_codec import (
    decode, encode, encode_details, flight_details_for, looks_encoded,
)
from schemas.trip import ActivityCategory, FlightDetails, ScheduledActivity


def test_round_trip():
    d = decode(encode("JFK", "Delta", "DL100", "B4"))
    assert (d.airport, d.airline, d.flight_number, d.terminal) == ("JFK", "Delta", "DL100", "B4")

def test_encode_layout():
    assert encode("CDG", "Air France", "AF7", "2E") == (
        "Airport: CDG\nAirline: Air France\nFlight: AF7\nTerminal: 2E"
    )

def test_round_trip_with_empty_fields():
    assert decode(encode("", "", "", "")) == FlightDetails()

def test_decode_ignores_unmatched_lines_and_defaults_missing():
    text = "Gate closes early\nAirline: KLM\nairport: lower-case is not a prefix"
    assert decode(text) == FlightDetails(airline="KLM")

def test_decode_requires_exact_prefix():
    # No space after the colon: not a match.
    assert decode("Flight:KL123") == FlightDetails()

def test_decode_of_free_text_is_empty():
    assert decode("Pack sunscreen") == FlightDetails()
    assert not looks_encoded("Pack sunscreen")
    assert looks_encoded("note\nTerminal: 1")

def test_encode_details_matches_encode():
    details = FlightDetails("HND", "ANA", "NH10", "3")
    assert encode_details(details) == encode("HND", "ANA", "NH10", "3")

def test_flight_details_prefers_structured_field():
    structured = FlightDetails(airport="LHR")
    activity = ScheduledActivity(
        time=datetime(2025, 6, 2, 7, 0),
        name="Flight home",
        description=encode("JFK", "", "", ""),
        category=ActivityCategory.FLIGHT,
        flight=structured,
    )
    assert flight_details_for(activity) is structured

def test_flight_details_decodes_legacy_description():
    activity = ScheduledActivity(
        time=datetime(2025, 6, 2, 7, 0),
        name="Flight out",
        description=encode("JFK", "Delta", "DL100", "B4"),
        category=ActivityCategory.FLIGHT,
    )
    assert flight_details_for(activity).flight_number == "DL100"

def test_display_description_for_flight():
    activity = ScheduledActivity(
        time=datetime(2025, 6, 2, 7, 0),
        name="Flight out",
        category=ActivityCategory.FLIGHT,
        flight=FlightDetails("JFK", "Delta", "DL100", "B4"),
    )
    assert activity.display_description == encode("JFK", "Delta", "DL100", "B4")
