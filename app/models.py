# app/models.py

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    id: str = Field(primary_key=True)
    full_name: str = Field(index=True)
    email: str = Field(index=True, unique=True)
    phone: Optional[str] = None


class Barber(SQLModel, table=True):
    id: str = Field(primary_key=True)
    user_id: str = Field(foreign_key="user.id", index=True)
    manual_location: str = ""
    haircut_duration: int = 30  # minutes
    open_time: str = "09:00"  # HH:MM
    close_time: str = "18:00"  # HH:MM


class Reservation(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("barber_id", "date", "time", name="uq_barber_date_time"),
    )

    id: str = Field(primary_key=True)
    barber_id: str = Field(foreign_key="barber.id", index=True)
    client_id: str = Field(foreign_key="user.id")
    date: str = Field(index=True)  # YYYY-MM-DD
    time: str  # HH:MM
