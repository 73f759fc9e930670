import pytest

from interactive_main import PlannerShell
from modules.memory.trip_repository import TripRepository


@pytest.fixture
def shell():
    return PlannerShell(TripRepository(""))


def test_create_trip_and_schedule(shell):
    assert shell.handle("new Paris 2025-06-02 2025-06-04 800") == "Created trip to Paris."
    shell.handle("add 2025-06-02 09:00 Breakfast")
    shell.handle("add 2025-06-02 08:00 Coffee")

    lines = shell.handle("show").splitlines()

    assert lines[0] == "Paris"
    assert "2 Activities" in lines[1]
    assert lines[2].endswith("08:00 Coffee")
    assert lines[3].endswith("09:00 Breakfast")
    # Two empty days still get a header.
    assert len(lines) == 6

def test_move_and_delete(shell):
    shell.handle("new Bali 2025-07-01 2025-07-03")
    shell.handle("add 2025-07-01 10:00 Surf lesson")
    shell.handle("show")

    assert shell.handle("move 1 2025-07-02 16:30") == "Moved Surf lesson to 2025-07-02 16:30."
    agenda = shell.planner.store.agenda_for(shell.planner.days_in_trip()[1])
    assert [a.name for a in agenda.activities] == ["Surf lesson"]
    assert shell.planner.store.agenda_for(shell.planner.days_in_trip()[0]) is None

    shell.handle("del 2025-07-02 1")
    assert shell.planner.plan.day_agendas == []

def test_errors_are_reported(shell):
    assert shell.handle("show").startswith("Error: no trip open")
    assert shell.handle("new Rome 2025-06-05 2025-06-02") == "Error: End date must be after the start date"
    assert shell.handle("dance") == "Unknown command: dance"

def test_trips_listing_and_budget(shell):
    assert shell.handle("trips") == "No trips yet."
    shell.handle("new Tokyo 2025-09-10 2025-09-14 2000")
    shell.handle("new Paris 2025-06-02 2025-06-04")

    listing = shell.handle("trips").splitlines()
    assert listing[0].startswith("1. Paris")
    assert listing[1].startswith("2. Tokyo")

    shell.handle("open 2")
    assert shell.handle("budget").startswith("Budget 2000.00")
