"""
interactive_main.py
-------------------
Command loop over the trip repository: list, create and open trips, then
add, move and delete activities day by day.

Run:
  TRIP_STORE_PATH=trips.json python interactive_main.py

Commands:
  trips                               list trips, earliest first
  new <dest> <YYYY-MM-DD> <YYYY-MM-DD> [budget]
  open <n>                            select trip n from `trips`
  show                                day-by-day agenda of the open trip
  add <YYYY-MM-DD> <HH:MM> <name...>  schedule an activity
  move <n> <YYYY-MM-DD> <HH:MM>       retime activity n from `show`
  del <YYYY-MM-DD> <i>                delete the i-th activity of a day
  budget                              planned spend vs budget
  save | quit
"""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Optional

from modules.input.activity_intake import ActivityDraft
from modules.input.trip_intake import TripDraft
from modules.memory.trip_repository import TripRepository
from modules.planning.trip_planner import TripPlanner
from schemas.trip import ScheduledActivity
import config


def _parse_day(text: str) -> datetime:
    return datetime.strptime(text, config.DATE_FORMAT)


def _parse_clock(text: str) -> tuple[int, int]:
    t = datetime.strptime(text, config.TIME_FORMAT)
    return t.hour, t.minute


class PlannerShell:

    def __init__(self, repository: TripRepository):
        self.repository = repository
        self.planner: Optional[TripPlanner] = None
        # Numbered activities from the last `show`, for `move`.
        self._listed: list[ScheduledActivity] = []

    def handle(self, line: str) -> str:
        parts = line.split()
        if not parts:
            return ""
        cmd, args = parts[0].lower(), parts[1:]
        handler = getattr(self, f"_cmd_{cmd}", None)
        if handler is None:
            return f"Unknown command: {cmd}"
        try:
            return handler(args)
        except (ValueError, IndexError, KeyError) as e:
            return f"Error: {e}"

    def _require_trip(self) -> TripPlanner:
        if self.planner is None:
            raise ValueError("no trip open; use `open <n>`")
        return self.planner

    # ── Trips ─────────────────────────────────────────────────────────────

    def _cmd_trips(self, args: list[str]) -> str:
        trips = self.repository.sorted_trips()
        if not trips:
            return "No trips yet."
        return "\n".join(
            f"{i}. {t.destination}  {t.start_time:%b %d} - {t.end_time:%b %d}  "
            f"{t.budget:.2f} {config.CURRENCY_UNIT}  ({t.total_activities} activities)"
            for i, t in enumerate(trips, start=1)
        )

    def _cmd_new(self, args: list[str]) -> str:
        budget = float(args[3]) if len(args) > 3 else 0.0
        draft = TripDraft(
            destination=args[0],
            start_time=_parse_day(args[1]),
            end_time=_parse_day(args[2]),
            budget=budget,
        )
        plan = self.repository.save_trip(draft)
        self.planner = TripPlanner(plan)
        return f"Created trip to {plan.destination}."

    def _cmd_open(self, args: list[str]) -> str:
        plan = self.repository.sorted_trips()[int(args[0]) - 1]
        self.planner = TripPlanner(plan)
        return f"Opened {plan.destination}."

    # ── Agenda ────────────────────────────────────────────────────────────

    def _cmd_show(self, args: list[str]) -> str:
        planner = self._require_trip()
        self._listed = []
        lines = [planner.plan.destination]
        for section in planner.day_sections():
            lines.append(f"{section.header}  {section.count_label}".rstrip())
            for activity in section.activities:
                self._listed.append(activity)
                icon = f"[{activity.category.value}] " if activity.category else ""
                lines.append(
                    f"  {len(self._listed)}. {activity.time.strftime(config.TIME_FORMAT)} "
                    f"{icon}{activity.name}"
                )
        return "\n".join(lines)

    def _cmd_add(self, args: list[str]) -> str:
        planner = self._require_trip()
        day = _parse_day(args[0])
        hour, minute = _parse_clock(args[1])
        draft = ActivityDraft.for_day(day, hour, minute)
        draft.name = " ".join(args[2:])
        activity = planner.add_activity(day, draft)
        return f"Added {activity.name}."

    def _cmd_move(self, args: list[str]) -> str:
        planner = self._require_trip()
        original = self._listed[int(args[0]) - 1]
        hour, minute = _parse_clock(args[2])
        draft = ActivityDraft.from_activity(original)
        draft.time = _parse_day(args[1])
        draft.set_clock_time(hour, minute)
        updated = planner.save_activity_edit(original, draft)
        if updated is None:
            return "No changes."
        self._listed = []
        return f"Moved {updated.name} to {updated.time:%Y-%m-%d %H:%M}."

    def _cmd_del(self, args: list[str]) -> str:
        planner = self._require_trip()
        removed = planner.delete_activities(_parse_day(args[0]), [int(args[1]) - 1])
        self._listed = []
        return f"Deleted {removed} activity."

    def _cmd_budget(self, args: list[str]) -> str:
        summary = self._require_trip().budget_summary()
        status = "over budget" if summary.over_budget else "within budget"
        return (
            f"Budget {summary.budget:.2f} {summary.currency}, planned {summary.planned:.2f}, "
            f"remaining {summary.remaining:.2f} ({status})"
        )

    def _cmd_save(self, args: list[str]) -> str:
        self.repository.save_all()
        return "Saved." if self.repository.path else "Memory-only store; nothing written."


def main() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    repository = TripRepository()
    repository.load_all()
    shell = PlannerShell(repository)

    print("=== Vacation Planner ===")
    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if line.lower() == "quit":
            break
        output = shell.handle(line)
        if output:
            print(output)
    repository.save_all()


if __name__ == "__main__":
    main()
