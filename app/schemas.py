# app/schemas.py

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON uses camelCase (fullName, openTime...), python code uses snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimeSlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    time: str  # HH:MM
    available: bool


class BarberSummary(CamelModel):
    id: str
    full_name: str
    manual_location: str
    haircut_duration: int
    open_time: str
    close_time: str


class BarberPublic(BarberSummary):
    user_id: str
    email: str
    phone: Optional[str] = None


class BarbersResponse(BaseModel):
    barbers: List[BarberPublic]


class ScheduleResponse(CamelModel):
    barber: BarberSummary
    date: str
    time_slots: List[TimeSlot]


class ReservationPublic(CamelModel):
    id: str
    date: str
    time: str
    client_name: str
    client_phone: Optional[str] = None
    client_email: str


class ReservationsResponse(BaseModel):
    reservations: List[ReservationPublic]


class ReservationCreate(CamelModel):
    client_id: str
    date: str  # YYYY-MM-DD, checked by app.deps so errors match the schedule route
    time: str = Field(pattern=r"^\d{2}:\d{2}$")


class HealthResponse(BaseModel):
    status: str = "ok"
    demo_mode: bool


@dataclass(frozen=True)
class BarberQuery:
    # optional filters, combined with AND
    search: Optional[str] = None  # substring of full name, case-insensitive
    location: Optional[str] = None  # substring of manual location, case-insensitive


@dataclass(frozen=True)
class ReservationQuery:
    barber_id: str
    date: Optional[str] = None
