"""
modules/agenda/flight_codec.py
--------------------------------
Line-prefix encoding of flight details into a plain-text description.

Encoded form (four lines, fixed order):
    Airport: <airport>
    Airline: <airline>
    Flight: <flight number>
    Terminal: <terminal>

Decoding attributes a line to a field only when it starts with that field's
exact prefix. Other lines are ignored and missing fields decode to "".
Free text that itself starts with a reserved prefix is misread; that is a
known limitation of the format.
"""

from __future__ import annotations

from schemas.trip import FlightDetails, ScheduledActivity

AIRPORT_PREFIX  = "Airport: "
AIRLINE_PREFIX  = "Airline: "
FLIGHT_PREFIX   = "Flight: "
TERMINAL_PREFIX = "Terminal: "

# prefix -> FlightDetails attribute
_FIELDS: tuple[tuple[str, str], ...] = (
    (AIRPORT_PREFIX,  "airport"),
    (AIRLINE_PREFIX,  "airline"),
    (FLIGHT_PREFIX,   "flight_number"),
    (TERMINAL_PREFIX, "terminal"),
)


def encode(airport: str, airline: str, flight_number: str, terminal: str) -> str:
    return "\n".join([
        f"{AIRPORT_PREFIX}{airport}",
        f"{AIRLINE_PREFIX}{airline}",
        f"{FLIGHT_PREFIX}{flight_number}",
        f"{TERMINAL_PREFIX}{terminal}",
    ])


def encode_details(details: FlightDetails) -> str:
    return encode(details.airport, details.airline, details.flight_number, details.terminal)


def decode(text: str) -> FlightDetails:
    details = FlightDetails()
    for line in text.split("\n"):
        for prefix, attr in _FIELDS:
            if line.startswith(prefix):
                setattr(details, attr, line[len(prefix):])
                break
    return details


def looks_encoded(text: str) -> bool:
    """True if any line of text carries one of the reserved prefixes."""
    return any(
        line.startswith(prefix)
        for line in text.split("\n")
        for prefix, _ in _FIELDS
    )


def flight_details_for(activity: ScheduledActivity) -> FlightDetails:
    """
    Flight details of an activity: the structured field when set, otherwise
    whatever can be decoded from its description.
    """
    if activity.flight is not None:
        return activity.flight
    return decode(activity.description)
