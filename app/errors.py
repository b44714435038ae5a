# app/errors.py

from fastapi import HTTPException


class InvalidDateFormat(HTTPException):
    def __init__(self):
        super().__init__(status_code=400, detail="Invalid date format. Use YYYY-MM-DD")


class PastDateRequested(HTTPException):
    def __init__(self, detail: str = "Cannot view schedule for past dates"):
        super().__init__(status_code=400, detail=detail)


class BarberNotFound(HTTPException):
    def __init__(self):
        super().__init__(status_code=404, detail="Barber not found")


class ClientNotFound(HTTPException):
    def __init__(self):
        super().__init__(status_code=404, detail="Client not found")


class InvalidConfiguration(HTTPException):
    def __init__(self, detail: str = "Barber schedule is misconfigured"):
        super().__init__(status_code=409, detail=detail)


class InvalidSlotTime(HTTPException):
    def __init__(self):
        super().__init__(status_code=422, detail="Time is not a valid slot for this barber")


class SlotUnavailable(HTTPException):
    def __init__(self):
        super().__init__(status_code=409, detail="Time slot is already reserved")
