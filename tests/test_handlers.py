import re
from datetime import datetime, timezone

from ratelimitapi.handlers import current_time, ping

RFC3339 = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(Z|[+-]\d{2}:\d{2})")


def _parse(stamp):
    if stamp.endswith("Z"):
        stamp = stamp[:-1] + "+00:00"
    return datetime.fromisoformat(stamp)


def test_ping():
    assert ping() == {"message": "pong"}


def test_current_time_has_only_server_time():
    assert list(current_time()) == ["server_time"]


def test_current_time_is_rfc3339():
    stamp = current_time()["server_time"]
    match = RFC3339.fullmatch(stamp)
    matched = match.group(0) if match else ""
    assert matched == stamp


def test_current_time_is_now():
    before = datetime.now(timezone.utc).replace(microsecond=0)
    stamp = _parse(current_time()["server_time"])
    after = datetime.now(timezone.utc)
    assert before <= stamp <= after