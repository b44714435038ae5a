# app/data.py
# Demo fixtures, served when no DATABASE_URL is configured.

DEMO_CLIENT_ID = "user-1752373590610"

users = [
    {"id": "user-1", "full_name": "John Smith", "email": "john@barbershop.com", "phone": "555-0101"},
    {"id": "user-2", "full_name": "Mike Johnson", "email": "mike@barbershop.com", "phone": "555-0102"},
    {"id": "user-3", "full_name": "David Wilson", "email": "david@barbershop.com", "phone": "555-0103"},
    {"id": DEMO_CLIENT_ID, "full_name": "Demo Client", "email": "demo@example.com", "phone": "555-0000"},
]

barbers = [
    {
        "id": "barber-1",
        "user_id": "user-1",
        "manual_location": "Downtown Barbershop",
        "haircut_duration": 30,
        "open_time": "09:00",
        "close_time": "18:00",
    },
    {
        "id": "barber-2",
        "user_id": "user-2",
        "manual_location": "Uptown Cuts",
        "haircut_duration": 45,
        "open_time": "08:00",
        "close_time": "19:00",
    },
    {
        "id": "barber-3",
        "user_id": "user-3",
        "manual_location": "Downtown Barbershop",
        "haircut_duration": 30,
        "open_time": "10:00",
        "close_time": "17:00",
    },
]

reservations = [
    {"id": "res-1", "barber_id": "barber-1", "client_id": DEMO_CLIENT_ID, "date": "2024-01-15", "time": "10:00"},
    {"id": "res-2", "barber_id": "barber-1", "client_id": DEMO_CLIENT_ID, "date": "2024-01-15", "time": "14:00"},
]
