"""
Pytest configuration for dog-breeds tests.

Isolates every test from DOG_BREEDS_* variables and from any local .env file.
"""
import os
import pytest

from core.config import AppSettings

MOCK_PAYLOAD = {
    "message": {
        "sheepdog": ["english", "shetland"],
        "beagle": [],
    },
    "status": "success",
}

TEST_URL = "https://dog.test/api/breeds/list/all"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Remove DOG_BREEDS_* env vars and run from an empty directory (no .env)."""
    for key in list(os.environ):
        if key.upper().startswith("DOG_BREEDS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(breeds_api_url=TEST_URL, request_timeout_seconds=1.0)


@pytest.fixture
def mock_payload() -> dict:
    return {"message": {k: list(v) for k, v in MOCK_PAYLOAD["message"].items()}, "status": "success"}

