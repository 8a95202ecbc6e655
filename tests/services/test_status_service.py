"""
Tests for the status service.
"""

import asyncio

import pytest

from spacewatch.exceptions import (
    EmptyDataError,
    ParseError,
    TimezoneError,
    TransportError,
    UpstreamStatusError,
)
from spacewatch.models.iss import Position
from spacewatch.models.status import Status
from spacewatch.services.status_service import (
    StatusService,
    build_status,
    day_part_name,
    is_visible,
)

from stubs import StubPositionProvider, StubWeatherProvider, make_condition


class TestVisibilityRule:
    """Test suite for the visibility predicate."""

    @pytest.mark.parametrize(
        "clouds, pod, expected",
        [
            (27, "d", True),
            (31, "d", False),
            (10, "n", False),
            (0, "d", True),
            (30, "d", True),
            (30, "n", False),
            (100, "d", False),
            (0, "x", False),
        ],
    )
    def test_truth_table(self, clouds, pod, expected):
        assert is_visible(clouds, pod) is expected


class TestDayPartName:
    """Test suite for mapping part-of-day codes to display names."""

    def test_known_codes(self):
        assert day_part_name("d") == "day"
        assert day_part_name("n") == "night"

    @pytest.mark.parametrize("code", ["", "x", "D", "day"])
    def test_unknown_codes_map_to_empty(self, code):
        assert day_part_name(code) == ""


class TestBuildStatus:
    def test_copies_weather_fields(self):
        status = build_status(make_condition(clouds=27, pod="d"))

        assert status == Status(
            latitude=47.2,
            longitude=-131.29,
            timezone="America/Vancouver",
            cloud_coverage=27,
            day_part="day",
            is_visible=True,
        )

    def test_unknown_day_part_has_no_display_name(self):
        status = build_status(make_condition(clouds=5, pod="?"))

        assert status.day_part == ""
        assert status.is_visible is False


class TestStatusService:
    """Test suite for the position -> weather -> status pipeline."""

    async def test_get_status(self, vancouver_position, vancouver_condition):
        """The weather query uses the fetched position and the given key."""
        position_provider = StubPositionProvider(position=vancouver_position)
        weather_provider = StubWeatherProvider(condition=vancouver_condition)
        service = StatusService(position_provider, weather_provider)

        status = await service.get_status("APIKEY123")

        assert status.latitude == 47.2
        assert status.longitude == -131.29
        assert status.timezone == "America/Vancouver"
        assert status.cloud_coverage == 27
        assert status.day_part == "day"
        assert status.is_visible is True
        assert position_provider.calls == 1
        assert weather_provider.calls == [(vancouver_position, "APIKEY123")]

    @pytest.mark.parametrize(
        "error",
        [
            TransportError("connection refused"),
            UpstreamStatusError("bad gateway", status_code=502),
            ParseError("converting latitude ''"),
        ],
    )
    async def test_position_failure_skips_weather(self, vancouver_condition, error):
        weather_provider = StubWeatherProvider(condition=vancouver_condition)
        service = StatusService(StubPositionProvider(error=error), weather_provider)

        with pytest.raises(type(error)) as exc_info:
            await service.get_status("key")

        assert exc_info.value is error
        assert weather_provider.calls == []

    @pytest.mark.parametrize(
        "error",
        [
            EmptyDataError("missing data"),
            TimezoneError("loading location"),
            UpstreamStatusError("forbidden", status_code=403),
        ],
    )
    async def test_weather_failure_propagates(self, vancouver_position, error):
        service = StatusService(
            StubPositionProvider(position=vancouver_position),
            StubWeatherProvider(error=error),
        )

        with pytest.raises(type(error)) as exc_info:
            await service.get_status("key")

        assert exc_info.value is error

    async def test_deadline_cancels_slow_lookup(self, vancouver_condition):
        """An expired deadline surfaces as a transport error."""

        class SlowPositionProvider:
            cancelled = False

            async def fetch_position(self) -> Position:
                try:
                    await asyncio.sleep(10)
                except asyncio.CancelledError:
                    SlowPositionProvider.cancelled = True
                    raise
                return Position(latitude=0.0, longitude=0.0)

        weather_provider = StubWeatherProvider(condition=vancouver_condition)
        service = StatusService(SlowPositionProvider(), weather_provider)

        with pytest.raises(TransportError):
            await service.get_status("key", deadline=0.01)

        assert SlowPositionProvider.cancelled is True
        assert weather_provider.calls == []

    async def test_deadline_not_reached(self, vancouver_position, vancouver_condition):
        service = StatusService(
            StubPositionProvider(position=vancouver_position),
            StubWeatherProvider(condition=vancouver_condition),
        )

        status = await service.get_status("key", deadline=5)

        assert status.is_visible is True
