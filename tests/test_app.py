"""Tests for application assembly and configuration."""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from config import Settings, get_settings
from Database.db import BookingDB
from main import app


@pytest.fixture()
def fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_root_returns_welcome_message() -> None:
    client = TestClient(app)

    response = client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert "Hotel Access API" in response.json()["message"]


def test_app_mounts_hotel_routes() -> None:
    assert app.url_path_for("list_hotels") == "/hotels"
    assert app.url_path_for("get_hotel", hotel_id=1) == "/hotels/1"
    assert app.url_path_for("health_check") == "/hotels/health"


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.supabase_url == "https://project.supabase.co"
    assert settings.jwt_secret == "from-env"
    assert settings.log_level == "debug"
    assert settings.jwt_algorithm == "HS256"
    assert get_settings() is settings


def test_booking_db_requires_credentials() -> None:
    with pytest.raises(ValueError, match="Database URL or Key not found"):
        BookingDB(Settings(supabase_url="https://project.supabase.co"))
