import pytest
from fastapi.testclient import TestClient

from app.data import DEMO_CLIENT_ID
from app.deps import get_repository
from app.main import app
from app.repository import InMemoryBarberRepository


def _names(response) -> list[str]:
    return [barber["fullName"] for barber in response.json()["barbers"]]


def test_health_reports_demo_mode(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "demo_mode": True}


def test_list_barbers_sorted_by_name_descending(client: TestClient) -> None:
    response = client.get("/barbers")

    assert response.status_code == 200
    assert _names(response) == ["Mike Johnson", "John Smith", "David Wilson"]
    first = response.json()["barbers"][0]
    assert first == {
        "id": "barber-2",
        "userId": "user-2",
        "fullName": "Mike Johnson",
        "email": "mike@barbershop.com",
        "phone": "555-0102",
        "manualLocation": "Uptown Cuts",
        "haircutDuration": 45,
        "openTime": "08:00",
        "closeTime": "19:00",
    }


@pytest.mark.parametrize(
    ("params", "expected"),
    [
        ({"search": "john"}, ["Mike Johnson", "John Smith"]),
        ({"location": "DOWNTOWN"}, ["John Smith", "David Wilson"]),
        ({"search": "john", "location": "uptown"}, ["Mike Johnson"]),
        ({"search": "nobody"}, []),
    ],
)
def test_list_barbers_filters(client: TestClient, params: dict, expected: list[str]) -> None:
    response = client.get("/barbers", params=params)

    assert response.status_code == 200
    assert _names(response) == expected


def test_schedule_marks_reserved_slots(client: TestClient) -> None:
    response = client.get("/barbers/barber-1/schedule", params={"date": "2024-01-15"})

    assert response.status_code == 200
    data = response.json()
    assert data["date"] == "2024-01-15"
    assert data["barber"] == {
        "id": "barber-1",
        "fullName": "John Smith",
        "manualLocation": "Downtown Barbershop",
        "haircutDuration": 30,
        "openTime": "09:00",
        "closeTime": "18:00",
    }
    slots = data["timeSlots"]
    assert len(slots) == 18
    assert slots[0] == {"time": "09:00", "available": True}
    assert slots[-1] == {"time": "17:30", "available": True}
    assert [slot["time"] for slot in slots if not slot["available"]] == ["10:00", "14:00"]


def test_schedule_available_only(client: TestClient) -> None:
    response = client.get(
        "/barbers/barber-1/schedule",
        params={"date": "2024-01-15", "available_only": "true"},
    )

    assert response.status_code == 200
    times = [slot["time"] for slot in response.json()["timeSlots"]]
    assert len(times) == 16
    assert "10:00" not in times
    assert "14:00" not in times


def test_schedule_drops_slot_running_past_close(client: TestClient) -> None:
    response = client.get("/barbers/barber-2/schedule", params={"date": "2024-02-01"})

    assert response.status_code == 200
    slots = response.json()["timeSlots"]
    assert len(slots) == 14
    assert slots[-1]["time"] == "17:45"
    assert all(slot["available"] for slot in slots)


@pytest.mark.parametrize(
    ("params", "detail"),
    [
        ({}, "Date parameter is required"),
        ({"date": "2024-1-15"}, "Invalid date format. Use YYYY-MM-DD"),
        ({"date": "2024-13-45"}, "Invalid date format. Use YYYY-MM-DD"),
        ({"date": "2024-01-14"}, "Cannot view schedule for past dates"),
    ],
)
def test_schedule_rejects_bad_dates(client: TestClient, params: dict, detail: str) -> None:
    response = client.get("/barbers/barber-1/schedule", params=params)

    assert response.status_code == 400
    assert response.json() == {"detail": detail}


def test_schedule_unknown_barber(client: TestClient) -> None:
    response = client.get("/barbers/barber-99/schedule", params={"date": "2024-01-15"})

    assert response.status_code == 404
    assert response.json() == {"detail": "Barber not found"}


@pytest.mark.parametrize(
    ("overrides", "detail"),
    [
        ({"haircut_duration": 0}, "Barber haircut duration must be positive"),
        ({"open_time": "18:00", "close_time": "09:00"}, "Barber open time must be before close time"),
        ({"open_time": "9am"}, "Barber opening hours must use HH:MM"),
    ],
)
def test_schedule_rejects_misconfigured_barber(client: TestClient, overrides: dict, detail: str) -> None:
    barber = {
        "id": "barber-x",
        "user_id": "user-x",
        "manual_location": "Nowhere",
        "haircut_duration": 30,
        "open_time": "09:00",
        "close_time": "18:00",
        **overrides,
    }
    user = {"id": "user-x", "full_name": "Broken Barber", "email": "broken@barbershop.com"}
    repo = InMemoryBarberRepository([user], [barber], [])
    app.dependency_overrides[get_repository] = lambda: repo

    response = client.get("/barbers/barber-x/schedule", params={"date": "2024-01-15"})

    assert response.status_code == 409
    assert response.json() == {"detail": detail}


def test_reservations_for_barber(client: TestClient) -> None:
    response = client.get("/barbers/barber-1/reservations")

    assert response.status_code == 200
    reservations = response.json()["reservations"]
    assert [r["time"] for r in reservations] == ["10:00", "14:00"]
    assert reservations[0] == {
        "id": "res-1",
        "date": "2024-01-15",
        "time": "10:00",
        "clientName": "Demo Client",
        "clientPhone": "555-0000",
        "clientEmail": "demo@example.com",
    }


def test_reservations_date_filter(client: TestClient) -> None:
    # past dates are allowed when looking at bookings
    response = client.get("/barbers/barber-1/reservations", params={"date": "2023-12-01"})
    assert response.status_code == 200
    assert response.json() == {"reservations": []}

    response = client.get("/barbers/barber-1/reservations", params={"date": "2024-01-15"})
    assert len(response.json()["reservations"]) == 2


def test_reservations_reject_bad_date(client: TestClient) -> None:
    response = client.get("/barbers/barber-1/reservations", params={"date": "15/01/2024"})

    assert response.status_code == 400


def test_reservations_unknown_barber_is_empty(client: TestClient) -> None:
    response = client.get("/barbers/barber-99/reservations")

    assert response.status_code == 200
    assert response.json() == {"reservations": []}


def _book(client: TestClient, barber_id: str = "barber-3", **body):
    payload = {"clientId": DEMO_CLIENT_ID, "date": "2024-01-16", "time": "11:00", **body}
    return client.post(f"/barbers/{barber_id}/reservations", json=payload)


def test_create_reservation_takes_the_slot(client: TestClient) -> None:
    response = _book(client)

    assert response.status_code == 201
    created = response.json()
    assert created["id"].startswith("res-")
    assert created["date"] == "2024-01-16"
    assert created["time"] == "11:00"
    assert created["clientName"] == "Demo Client"

    schedule = client.get("/barbers/barber-3/schedule", params={"date": "2024-01-16"}).json()
    taken = [slot["time"] for slot in schedule["timeSlots"] if not slot["available"]]
    assert taken == ["11:00"]

    listed = client.get("/barbers/barber-3/reservations", params={"date": "2024-01-16"}).json()
    assert [r["id"] for r in listed["reservations"]] == [created["id"]]


def test_create_reservation_twice_conflicts(client: TestClient) -> None:
    assert _book(client).status_code == 201

    response = _book(client)

    assert response.status_code == 409
    assert response.json() == {"detail": "Time slot is already reserved"}


def test_create_reservation_on_demo_booking_conflicts(client: TestClient) -> None:
    response = _book(client, barber_id="barber-1", date="2024-01-15", time="14:00")

    assert response.status_code == 409


@pytest.mark.parametrize("time", ["11:15", "17:00", "08:00"])
def test_create_reservation_off_grid(client: TestClient, time: str) -> None:
    response = _book(client, time=time)

    assert response.status_code == 422
    assert response.json() == {"detail": "Time is not a valid slot for this barber"}


def test_create_reservation_malformed_time(client: TestClient) -> None:
    response = _book(client, time="11am")

    assert response.status_code == 422


def test_create_reservation_in_the_past(client: TestClient) -> None:
    response = _book(client, date="2024-01-10")

    assert response.status_code == 400
    assert response.json() == {"detail": "Cannot book a reservation in the past"}


def test_create_reservation_unknown_client(client: TestClient) -> None:
    response = _book(client, clientId="user-nobody")

    assert response.status_code == 404
    assert response.json() == {"detail": "Client not found"}


def test_create_reservation_unknown_barber(client: TestClient) -> None:
    response = _book(client, barber_id="barber-99")

    assert response.status_code == 404
    assert response.json() == {"detail": "Barber not found"}


def _single_barber_repo(**overrides) -> InMemoryBarberRepository:
    barber = {
        "id": "barber-x",
        "user_id": "user-x",
        "manual_location": "Nowhere",
        "haircut_duration": 30,
        "open_time": "09:00",
        "close_time": "18:00",
        **overrides,
    }
    user = {"id": "user-x", "full_name": "Slow Barber", "email": "slow@barbershop.com"}
    return InMemoryBarberRepository([user], [barber], [])


def test_schedule_duration_longer_than_the_day(client: TestClient) -> None:
    repo = _single_barber_repo(haircut_duration=10**12)
    app.dependency_overrides[get_repository] = lambda: repo

    response = client.get("/barbers/barber-x/schedule", params={"date": "2024-01-15"})

    assert response.status_code == 200
    assert response.json()["timeSlots"] == []


class _BrokenRepository:
    def find_barber(self, barber_id: str):
        raise RuntimeError("connection lost")


def test_unexpected_error_returns_500() -> None:
    app.dependency_overrides[get_repository] = lambda: _BrokenRepository()
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/barbers/barber-1/schedule", params={"date": "2024-01-15"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
