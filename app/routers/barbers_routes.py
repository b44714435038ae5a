# app/routers/barbers_routes.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from app.core import generate_time_slots
from app.deps import get_repository, parse_date, require_bookable_date, require_valid_configuration
from app.errors import BarberNotFound, InvalidSlotTime, SlotUnavailable
from app.repository import BarberRepository
from app.schemas import (
    BarberQuery,
    BarberSummary,
    BarbersResponse,
    ReservationCreate,
    ReservationPublic,
    ReservationQuery,
    ReservationsResponse,
    ScheduleResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/barbers",
    tags=["barbers"],
)


@router.get("", response_model=BarbersResponse)
def list_barbers(
    search: Optional[str] = None,
    location: Optional[str] = None,
    repo: BarberRepository = Depends(get_repository),
):
    barbers = repo.list_barbers(BarberQuery(search=search, location=location))
    return {"barbers": barbers}


@router.get("/{barber_id}/schedule", response_model=ScheduleResponse)
def barber_schedule(
    barber_id: str,
    date: Optional[str] = None,
    available_only: bool = False,
    repo: BarberRepository = Depends(get_repository),
):
    # 1) Validate date
    if not date:
        raise HTTPException(status_code=400, detail="Date parameter is required")
    require_bookable_date(date)

    # 2) Lookup barber and check its window
    barber = repo.find_barber(barber_id)
    if barber is None:
        raise BarberNotFound()
    require_valid_configuration(barber)

    # 3) Generate slots against the day's reservations
    time_slots = generate_time_slots(
        barber.open_time,
        barber.close_time,
        barber.haircut_duration,
        repo.reserved_times(barber_id, date),
    )
    if available_only:
        time_slots = [slot for slot in time_slots if slot.available]

    logger.debug("Computed %d slots for barber=%s date=%s", len(time_slots), barber_id, date)
    return {
        "barber": BarberSummary.model_validate(barber.model_dump()),
        "date": date,
        "time_slots": time_slots,
    }


@router.get("/{barber_id}/reservations", response_model=ReservationsResponse)
def barber_reservations(
    barber_id: str,
    date: Optional[str] = None,
    repo: BarberRepository = Depends(get_repository),
):
    # past dates are fine here, a barber may look back at old bookings
    if date:
        parse_date(date)

    reservations = repo.list_reservations(ReservationQuery(barber_id=barber_id, date=date or None))
    return {"reservations": reservations}


@router.post("/{barber_id}/reservations", response_model=ReservationPublic, status_code=201)
def create_reservation(
    barber_id: str,
    reservation: ReservationCreate,
    repo: BarberRepository = Depends(get_repository),
):
    # 1) Validate date
    require_bookable_date(reservation.date, past_detail="Cannot book a reservation in the past")

    # 2) Lookup barber
    barber = repo.find_barber(barber_id)
    if barber is None:
        raise BarberNotFound()
    require_valid_configuration(barber)

    # 3) Requested time must be a free slot of that day
    time_slots = generate_time_slots(
        barber.open_time,
        barber.close_time,
        barber.haircut_duration,
        repo.reserved_times(barber_id, reservation.date),
    )
    slot = next((s for s in time_slots if s.time == reservation.time), None)
    if slot is None:
        raise InvalidSlotTime()
    if not slot.available:
        raise SlotUnavailable()

    # 4) Persist; the repository rejects a slot taken in the meantime
    created = repo.add_reservation(barber_id, reservation.client_id, reservation.date, reservation.time)
    logger.info(
        "Reservation %s created barber=%s date=%s time=%s",
        created.id,
        barber_id,
        reservation.date,
        reservation.time,
    )
    return created
