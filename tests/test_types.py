"""Tests for custom SQLAlchemy column types."""

from datetime import datetime, timedelta, timezone

import pytest
from ulid import ULID

from todokit import ULIDType, UTCDateTime


class TestULIDType:
    """ULID values are stored as 26-character strings."""

    def test_bind_ulid(self) -> None:
        value = ULID()
        assert ULIDType().process_bind_param(value, None) == str(value)

    def test_bind_normalizes_lowercase_string(self) -> None:
        value = ULID()
        assert ULIDType().process_bind_param(str(value).lower(), None) == str(value)

    def test_bind_rejects_garbage_string(self) -> None:
        with pytest.raises(ValueError):
            ULIDType().process_bind_param("not-a-ulid", None)

    def test_result_round_trip(self) -> None:
        value = ULID()
        assert ULIDType().process_result_value(str(value), None) == value

    def test_none_passes_through(self) -> None:
        assert ULIDType().process_bind_param(None, None) is None
        assert ULIDType().process_result_value(None, None) is None


class TestUTCDateTime:
    """Timestamps are stored naive in UTC and loaded timezone-aware."""

    def test_bind_converts_offset_to_naive_utc(self) -> None:
        value = datetime(2025, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert UTCDateTime().process_bind_param(value, None) == datetime(2025, 1, 1, 10, 0)

    def test_bind_keeps_naive_value(self) -> None:
        value = datetime(2025, 1, 1, 12, 0)
        assert UTCDateTime().process_bind_param(value, None) == value

    def test_result_is_aware_utc(self) -> None:
        loaded = UTCDateTime().process_result_value(datetime(2025, 1, 1, 10, 0), None)
        assert loaded is not None
        assert loaded.tzinfo is timezone.utc
        assert loaded.hour == 10
