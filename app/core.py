# app/core.py
# Slot availability engine: pure functions, callers validate input first (app.deps).

from datetime import datetime, date, time
from typing import Iterable, List

from app.schemas import TimeSlot

TIME_FORMAT = "%H:%M"
DATE_FORMAT = "%Y-%m-%d"


def parse_clock(value: str) -> time:
    # raises ValueError when not HH:MM
    return datetime.strptime(value, TIME_FORMAT).time()


def minutes_since_midnight(value: str) -> int:
    clock = parse_clock(value)
    return clock.hour * 60 + clock.minute


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def today() -> date:
    return date.today()


def generate_time_slots(
    open_time: str,
    close_time: str,
    duration_minutes: int,
    existing_reservations: Iterable[str],
) -> List[TimeSlot]:
    if duration_minutes <= 0:
        return []

    booked = set(existing_reservations)

    # 1) Window in minutes since midnight
    start = minutes_since_midnight(open_time)
    work_end = minutes_since_midnight(close_time)

    # 2) Step by the duration, a slot must end by close time
    slots = []
    current = start
    while current + duration_minutes <= work_end:
        # 3) Taken when a reservation starts exactly here
        label = format_minutes(current)
        slots.append(TimeSlot(time=label, available=label not in booked))
        current += duration_minutes

    return slots


def is_date_in_past(date_string: str) -> bool:
    requested = datetime.strptime(date_string, DATE_FORMAT).date()
    return requested < today()
