# app/deps.py

import re
from datetime import datetime
from functools import lru_cache

from sqlmodel import Session

from app import data
from app.config import get_settings
from app.core import DATE_FORMAT, is_date_in_past, parse_clock
from app.db import get_engine
from app.errors import InvalidConfiguration, InvalidDateFormat, PastDateRequested
from app.repository import InMemoryBarberRepository, SqlBarberRepository
from app.schemas import BarberSummary

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@lru_cache
def get_demo_repository() -> InMemoryBarberRepository:
    return InMemoryBarberRepository(data.users, data.barbers, data.reservations)


def get_repository():
    if get_settings().demo_mode:
        yield get_demo_repository()
        return

    with Session(get_engine()) as session:
        yield SqlBarberRepository(session)


def parse_date(value: str) -> str:
    if not DATE_PATTERN.match(value):
        raise InvalidDateFormat()
    # the pattern lets 2024-13-45 through
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise InvalidDateFormat()
    return value


def require_bookable_date(value: str, past_detail: str = "Cannot view schedule for past dates") -> str:
    parse_date(value)
    if is_date_in_past(value):
        raise PastDateRequested(past_detail)
    return value


def require_valid_configuration(barber: BarberSummary) -> None:
    if barber.haircut_duration <= 0:
        raise InvalidConfiguration("Barber haircut duration must be positive")
    try:
        open_time = parse_clock(barber.open_time)
        close_time = parse_clock(barber.close_time)
    except ValueError:
        raise InvalidConfiguration("Barber opening hours must use HH:MM")
    if open_time >= close_time:
        raise InvalidConfiguration("Barber open time must be before close time")
