"""
Tests for the breed list service (race + error classification).

Sources are faked so every error variant and the timeout race can be driven
deterministically.
"""
import asyncio

import pytest

from core.domain.errors import (
    BreedsFetchError,
    HttpStatusError,
    MalformedPayload,
    TransportError,
    TransportTimeout,
)
from core.domain.models import BreedListResponse, BreedsPayload, ErrorResponse
from core.interfaces.breeds_source import BreedsSource
from core.services.breed_list import error_response_for, fetch_breed_list


class StaticSource:
    """Returns a fixed payload."""

    def __init__(self, data):
        self.data = data
        self.calls = 0

    async def fetch_breeds(self) -> BreedsPayload:
        self.calls += 1
        return BreedsPayload.model_validate(self.data)


class FailingSource:
    """Raises the given exception."""

    def __init__(self, error: BaseException):
        self.error = error

    async def fetch_breeds(self) -> BreedsPayload:
        raise self.error


class SlowSource:
    """Succeeds only after `delay` seconds, recording whether it was cancelled."""

    def __init__(self, data, delay: float):
        self.data = data
        self.delay = delay
        self.cancelled = False
        self.completed = False

    async def fetch_breeds(self) -> BreedsPayload:
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        self.completed = True
        return BreedsPayload.model_validate(self.data)


class TestSourceProtocol:
    def test_fakes_satisfy_the_protocol(self, mock_payload):
        assert isinstance(StaticSource(mock_payload), BreedsSource)
        assert isinstance(SlowSource(mock_payload, 0.1), BreedsSource)


class TestSuccessPath:
    """Valid payloads are flattened into a 200 response."""

    @pytest.mark.asyncio
    async def test_returns_flattened_body(self, mock_payload):
        result = await fetch_breed_list(StaticSource(mock_payload))

        assert isinstance(result, BreedListResponse)
        assert result.status_code == 200
        assert result.body == ["english sheepdog", "shetland sheepdog", "beagle"]

    @pytest.mark.asyncio
    async def test_fast_source_wins_the_race(self, mock_payload):
        source = SlowSource(mock_payload, delay=0.01)

        result = await fetch_breed_list(source, timeout_seconds=1.0)

        assert isinstance(result, BreedListResponse)
        assert source.completed is True
        assert source.cancelled is False


class TestErrorClassification:
    """Each error variant maps to exactly one response."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (TransportTimeout(), (408, "Request Timeout")),
            (HttpStatusError(404, "Not Found"), (404, "Not Found")),
            (HttpStatusError(500, ""), (500, "Error Loading Dog Breeds")),
            (MalformedPayload("string body"), (500, "Something went wrong")),
            (TransportError("connection refused"), (500, "Something went wrong")),
            (BreedsFetchError("unknown"), (500, "Something went wrong")),
        ],
    )
    def test_error_response_for(self, error, expected):
        response = error_response_for(error)
        assert (response.status_code, response.message) == expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error, expected",
        [
            (TransportTimeout("reset"), (408, "Request Timeout")),
            (HttpStatusError(404, "Not Found"), (404, "Not Found")),
            (MalformedPayload("string body"), (500, "Something went wrong")),
            (TransportError("dns"), (500, "Something went wrong")),
        ],
    )
    async def test_fetch_breed_list_returns_error_response(self, error, expected):
        result = await fetch_breed_list(FailingSource(error))

        assert isinstance(result, ErrorResponse)
        assert (result.status_code, result.message) == expected

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_500(self):
        result = await fetch_breed_list(FailingSource(RuntimeError("boom")))

        assert isinstance(result, ErrorResponse)
        assert result.status_code == 500
        assert result.message == "Something went wrong"

    @pytest.mark.asyncio
    async def test_classified_errors_are_logged_as_warnings(self, caplog):
        with caplog.at_level("WARNING", logger="core.services.breed_list"):
            await fetch_breed_list(FailingSource(HttpStatusError(404, "Not Found")))

        assert any("HttpStatusError" in record.getMessage() for record in caplog.records)


class TestTimeoutRace:
    """The timer cancels a pending request and its result never wins."""

    @pytest.mark.asyncio
    async def test_timeout_returns_request_timeout(self, mock_payload):
        source = SlowSource(mock_payload, delay=5.0)

        result = await fetch_breed_list(source, timeout_seconds=0.05)

        assert isinstance(result, ErrorResponse)
        assert result.status_code == 408
        assert result.message == "Request Timeout"
        assert source.cancelled is True

    @pytest.mark.asyncio
    async def test_late_success_never_overrides_timeout(self, mock_payload):
        source = SlowSource(mock_payload, delay=0.2)

        result = await fetch_breed_list(source, timeout_seconds=0.05)
        # Give the original delay time to elapse; the cancelled call must not complete.
        await asyncio.sleep(0.3)

        assert isinstance(result, ErrorResponse)
        assert result.status_code == 408
        assert source.completed is False

    @pytest.mark.asyncio
    async def test_without_timeout_waits_for_the_source(self, mock_payload):
        source = SlowSource(mock_payload, delay=0.1)

        result = await fetch_breed_list(source, timeout_seconds=None)

        assert isinstance(result, BreedListResponse)
        assert source.completed is True
