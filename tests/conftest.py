from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.config import get_settings
from app.db import get_engine
from app.deps import get_demo_repository
from app.main import app

# the demo reservations are booked on this day
DEMO_DAY = date(2024, 1, 15)


@pytest.fixture(autouse=True)
def demo_mode(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setattr("app.core.today", lambda: DEMO_DAY)
    get_settings.cache_clear()
    get_engine.cache_clear()
    get_demo_repository.cache_clear()
    yield
    app.dependency_overrides.clear()
    get_settings.cache_clear()
    get_engine.cache_clear()
    get_demo_repository.cache_clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
