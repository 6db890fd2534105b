import json
from datetime import date, timedelta

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.main import app


def make_apod(day: date, **overrides) -> dict:
    record = {
        "date": day.isoformat(),
        "title": f"Nebula of {day.isoformat()}",
        "explanation": "Stars are born inside this glowing cloud of gas and dust.",
        "media_type": "image",
        "url": f"https://apod.nasa.gov/apod/image/{day:%y%m%d}.jpg",
        "hdurl": f"https://apod.nasa.gov/apod/image/{day:%y%m%d}_hd.jpg",
        "service_version": "v1",
    }
    record.update(overrides)
    return record


def make_range(end: date, days: int = 7) -> list[dict]:
    """Ascending, like NASA returns it."""
    start = end - timedelta(days=days - 1)
    return [make_apod(start + timedelta(days=i)) for i in range(days)]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, responder):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)

    def json_bodies(self) -> list:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        nasa_api_key="test-nasa-key",
        gemini_api_key="test-gemini-key",
    )


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
