"""Day/night schedule for the next batch of team battles."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

from teamfight import DEFAULT_NAME_TEMPLATE, Slot, Tournament

DAYS_AHEAD = 2

# UTC start times per slot
SLOT_START_TIMES: dict[Slot, time] = {
    "Day": time(6, 58),
    "Night": time(18, 58),
}


def build_tournament_name(day_num: int, slot: Slot, template: str = DEFAULT_NAME_TEMPLATE) -> str:
    return template.replace("{DAY_NUM}", str(day_num)).replace("{DAY_OR_NIGHT}", slot)


def build_description(name: str) -> str:
    return f"Welcome to the {name}! Have fun and fair play!"


def tournament_start(day: date, slot: Slot) -> str:
    """ISO-8601 UTC start time with millisecond precision, e.g. 2024-03-01T06:58:00.000Z."""
    dt = datetime.combine(day, SLOT_START_TIMES[slot], tzinfo=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_schedule(
    today: date,
    next_day_num: int,
    name_templates: dict[str, str] | None = None,
) -> list[Tournament]:
    """Build Day and Night tournaments for today and tomorrow.

    Day numbers are ``next_day_num`` and ``next_day_num + 1``; each gets one
    Day and one Night battle, in that order.
    """
    templates = name_templates or {}
    tournaments: list[Tournament] = []

    for offset in range(DAYS_AHEAD):
        day_num = next_day_num + offset
        target = today + timedelta(days=offset)
        for slot in ("Day", "Night"):
            template = templates.get(slot.lower(), DEFAULT_NAME_TEMPLATE)
            name = build_tournament_name(day_num, slot, template)
            tournaments.append(Tournament(
                day_num=day_num,
                slot=slot,
                name=name,
                description=build_description(name),
                start_date=tournament_start(target, slot),
            ))

    return tournaments
