"""Tests for shared date, validation and security helpers"""

from datetime import datetime, timezone

import pytest

from daycare.database import build_engine
from daycare.security_utils import (
    create_access_token,
    generate_verification_token,
    hash_password,
    verify_access_token,
    verify_password,
    verify_verification_token,
)
from daycare.shared.dates import (
    day_bounds,
    normalize_to_utc_midnight,
    six_month_warning,
    to_iso_utc,
)
from daycare.shared.validators import (
    blank_to_none,
    parse_iso_datetime,
    price_to_minor_units,
    validate_email,
    validate_required_text,
)


class TestDateNormalization:
    @pytest.mark.parametrize(
        "value",
        [
            "2024-03-15T18:30:00Z",
            "2024-03-15T00:00:00Z",
            "2024-03-15",
            "2024-03-15T23:59:59.999+05:00",
        ],
    )
    def test_same_day_maps_to_utc_midnight(self, value):
        assert normalize_to_utc_midnight(value) == datetime(2024, 3, 15, tzinfo=timezone.utc)

    def test_normalization_is_idempotent(self):
        once = normalize_to_utc_midnight("2024-03-15T18:30:00Z")

        assert normalize_to_utc_midnight(to_iso_utc(once)) == once
        assert to_iso_utc(once) == "2024-03-15T00:00:00Z"

    @pytest.mark.parametrize("value", ["", "tomorrow", "2024-13-01", None])
    def test_invalid_dates_raise(self, value):
        with pytest.raises(ValueError):
            normalize_to_utc_midnight(value)

    def test_day_bounds_span_one_day(self):
        start, end = day_bounds(datetime(2024, 3, 15, tzinfo=timezone.utc))

        assert start == datetime(2024, 3, 15)
        assert end == datetime(2024, 3, 16)

    def test_to_iso_utc_handles_none(self):
        assert to_iso_utc(None) is None


class TestSixMonthWarning:
    def test_no_previous_booking_warns(self):
        assert six_month_warning(datetime(2024, 9, 1), None) is True

    def test_recent_previous_booking(self):
        assert six_month_warning(datetime(2024, 9, 1), datetime(2024, 3, 1)) is False

    def test_old_previous_booking(self):
        assert six_month_warning(datetime(2024, 9, 1), datetime(2024, 2, 29)) is True


class TestValidators:
    def test_email_is_normalized(self):
        assert validate_email("  Rex@Example.COM ") == "rex@example.com"

    def test_bad_email_raises(self):
        with pytest.raises(ValueError, match="Invalid email format"):
            validate_email("rex@")

    def test_required_text(self):
        assert validate_required_text("  Rex ", "Name") == "Rex"
        with pytest.raises(ValueError, match="Name is required"):
            validate_required_text("   ", "Name")

    def test_blank_to_none(self):
        assert blank_to_none("  ") is None
        assert blank_to_none("vet") == "vet"

    def test_parse_iso_datetime_converts_to_naive_utc(self):
        assert parse_iso_datetime("2024-03-15T10:00:00+02:00") == datetime(2024, 3, 15, 8, 0)

    @pytest.mark.parametrize(
        "price,expected", [("10", 10), ("10.5", 11), ("2.5", 3), ("0.49", 0), (".5", 1)]
    )
    def test_price_rounds_half_up(self, price, expected):
        assert price_to_minor_units(price) == expected

    @pytest.mark.parametrize("price", ["", ".", "-1", "1,50", "ten"])
    def test_invalid_price_raises(self, price):
        with pytest.raises(ValueError):
            price_to_minor_units(price)


class TestSecurityUtils:
    def test_password_hash_round_trip(self):
        hashed = hash_password("walkies1")

        assert verify_password("walkies1", hashed)
        assert not verify_password("walkies2", hashed)
        assert not verify_password("walkies1", None)

    def test_access_token_carries_user_id(self):
        payload = verify_access_token(create_access_token("user-123"))

        assert payload["sub"] == "user-123"

    def test_tampered_access_token_rejected(self):
        token = create_access_token("user-123")

        assert verify_access_token(token[:-2] + "xx") is None

    def test_verification_token(self):
        token = generate_verification_token("kim@example.com")

        assert verify_verification_token(token) == "kim@example.com"
        assert verify_verification_token(token + "x") is None


class TestBuildEngine:
    @pytest.mark.parametrize("url", ["sqlite://", "sqlite:///:memory:"])
    def test_in_memory_sqlite_rejected(self, url):
        with pytest.raises(ValueError, match="In-memory SQLite"):
            build_engine(url)

    def test_file_sqlite_allowed_across_threads(self, tmp_path):
        engine = build_engine(f"sqlite:///{tmp_path / 'daycare.db'}")

        assert engine.dialect.name == "sqlite"
        engine.dispose()
