# app/repository.py
# BarberRepository: SQL-backed, or in-memory demo fixtures when no database is configured.

import copy
import logging
import threading
import uuid
from typing import List, Optional, Protocol

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from app.errors import ClientNotFound, SlotUnavailable
from app.models import Barber, Reservation, User
from app.schemas import BarberPublic, BarberQuery, ReservationPublic, ReservationQuery

logger = logging.getLogger(__name__)


class BarberRepository(Protocol):
    def list_barbers(self, query: BarberQuery) -> List[BarberPublic]: ...

    def find_barber(self, barber_id: str) -> Optional[BarberPublic]: ...

    def list_reservations(self, query: ReservationQuery) -> List[ReservationPublic]: ...

    def reserved_times(self, barber_id: str, date: str) -> List[str]: ...

    def add_reservation(self, barber_id: str, client_id: str, date: str, time: str) -> ReservationPublic: ...


def new_reservation_id() -> str:
    return f"res-{uuid.uuid4().hex[:12]}"


def _barber_public(barber, user) -> BarberPublic:
    return BarberPublic(
        id=barber["id"],
        user_id=barber["user_id"],
        full_name=user["full_name"],
        email=user["email"],
        phone=user.get("phone"),
        manual_location=barber["manual_location"],
        haircut_duration=barber["haircut_duration"],
        open_time=barber["open_time"],
        close_time=barber["close_time"],
    )


def _reservation_public(reservation, client) -> ReservationPublic:
    return ReservationPublic(
        id=reservation["id"],
        date=reservation["date"],
        time=reservation["time"],
        client_name=client["full_name"],
        client_phone=client.get("phone"),
        client_email=client["email"],
    )


class SqlBarberRepository:
    def __init__(self, session: Session):
        self.session = session

    def list_barbers(self, query: BarberQuery) -> List[BarberPublic]:
        conditions = []
        if query.search:
            conditions.append(col(User.full_name).icontains(query.search, autoescape=True))
        if query.location:
            conditions.append(col(Barber.manual_location).icontains(query.location, autoescape=True))

        stmt = (
            select(Barber, User)
            .join(User, col(Barber.user_id) == col(User.id))
            .where(*conditions)
            .order_by(col(User.full_name).desc())
        )
        rows = self.session.exec(stmt).all()
        return [_barber_public(barber.model_dump(), user.model_dump()) for barber, user in rows]

    def find_barber(self, barber_id: str) -> Optional[BarberPublic]:
        row = self.session.exec(
            select(Barber, User)
            .join(User, col(Barber.user_id) == col(User.id))
            .where(Barber.id == barber_id)
        ).first()
        if row is None:
            return None
        barber, user = row
        return _barber_public(barber.model_dump(), user.model_dump())

    def list_reservations(self, query: ReservationQuery) -> List[ReservationPublic]:
        conditions = [Reservation.barber_id == query.barber_id]
        if query.date is not None:
            conditions.append(Reservation.date == query.date)

        stmt = (
            select(Reservation, User)
            .join(User, col(Reservation.client_id) == col(User.id))
            .where(*conditions)
            .order_by(col(Reservation.date), col(Reservation.time))
        )
        rows = self.session.exec(stmt).all()
        return [_reservation_public(res.model_dump(), client.model_dump()) for res, client in rows]

    def reserved_times(self, barber_id: str, date: str) -> List[str]:
        stmt = (
            select(Reservation.time)
            .where(Reservation.barber_id == barber_id)
            .where(Reservation.date == date)
        )
        return list(self.session.exec(stmt).all())

    def add_reservation(self, barber_id: str, client_id: str, date: str, time: str) -> ReservationPublic:
        client = self.session.get(User, client_id)
        if client is None:
            raise ClientNotFound()
        # read before commit, commit expires loaded rows
        client_row = client.model_dump()

        db_reservation = Reservation(
            id=new_reservation_id(),
            barber_id=barber_id,
            client_id=client_id,
            date=date,
            time=time,
        )
        self.session.add(db_reservation)
        try:
            self.session.commit()
        except IntegrityError:
            # uq_barber_date_time: someone else booked the slot first
            self.session.rollback()
            raise SlotUnavailable()

        self.session.refresh(db_reservation)
        return _reservation_public(db_reservation.model_dump(), client_row)


class InMemoryBarberRepository:
    def __init__(self, users, barbers, reservations):
        self._users = {u["id"]: dict(u) for u in users}
        self._barbers = [dict(b) for b in barbers]
        self._reservations = copy.deepcopy(list(reservations))
        self._lock = threading.Lock()

    def _with_user(self, barber) -> Optional[BarberPublic]:
        user = self._users.get(barber["user_id"])
        if user is None:
            logger.warning("Barber %s references unknown user %s", barber["id"], barber["user_id"])
            return None
        return _barber_public(barber, user)

    def list_barbers(self, query: BarberQuery) -> List[BarberPublic]:
        result = []
        for barber in self._barbers:
            public = self._with_user(barber)
            if public is None:
                continue
            if query.search and query.search.lower() not in public.full_name.lower():
                continue
            if query.location and query.location.lower() not in public.manual_location.lower():
                continue
            result.append(public)
        result.sort(key=lambda b: b.full_name, reverse=True)
        return result

    def find_barber(self, barber_id: str) -> Optional[BarberPublic]:
        for barber in self._barbers:
            if barber["id"] == barber_id:
                return self._with_user(barber)
        return None

    def list_reservations(self, query: ReservationQuery) -> List[ReservationPublic]:
        with self._lock:
            matching = [
                r for r in self._reservations
                if r["barber_id"] == query.barber_id and (query.date is None or r["date"] == query.date)
            ]
        matching.sort(key=lambda r: (r["date"], r["time"]))

        result = []
        for reservation in matching:
            client = self._users.get(reservation["client_id"])
            if client is None:
                # same as the inner join in SqlBarberRepository
                continue
            result.append(_reservation_public(reservation, client))
        return result

    def reserved_times(self, barber_id: str, date: str) -> List[str]:
        with self._lock:
            return [
                r["time"] for r in self._reservations
                if r["barber_id"] == barber_id and r["date"] == date
            ]

    def add_reservation(self, barber_id: str, client_id: str, date: str, time: str) -> ReservationPublic:
        client = self._users.get(client_id)
        if client is None:
            raise ClientNotFound()

        with self._lock:
            for r in self._reservations:
                if r["barber_id"] == barber_id and r["date"] == date and r["time"] == time:
                    raise SlotUnavailable()

            reservation = {
                "id": new_reservation_id(),
                "barber_id": barber_id,
                "client_id": client_id,
                "date": date,
                "time": time,
            }
            self._reservations.append(reservation)

        return _reservation_public(reservation, client)
