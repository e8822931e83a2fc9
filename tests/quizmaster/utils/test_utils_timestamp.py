from datetime import datetime, timedelta

from quizmaster.utils.timestamp import now_iso, now_ms


def test_now_iso_is_utc_iso8601():
    parsed = datetime.fromisoformat(now_iso())

    assert parsed.utcoffset() == timedelta(0)


def test_now_ms_is_milliseconds_and_close_to_now_iso():
    ms = now_ms()
    iso_ms = datetime.fromisoformat(now_iso()).timestamp() * 1000

    assert ms > 1_600_000_000_000
    assert abs(iso_ms - ms) < 5_000
