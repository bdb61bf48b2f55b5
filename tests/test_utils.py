from cineScore import settings
from cineScore.utils import log_debug, slugify, throttle


def test_slugify():
    assert slugify("Mission: Impossible – Fallout") == "mission_impossible_fallout"
    assert slugify("Mission: Impossible", "-") == "mission-impossible"


def test_log_debug_appends(isolated_settings):
    log_debug("first")
    log_debug("second")
    lines = (isolated_settings / "debug.log").read_text().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("] first")


def test_throttle_sleeps_between_calls(monkeypatch):
    slept = []
    monkeypatch.setattr("cineScore.utils.time.sleep", slept.append)
    monkeypatch.setattr(settings, "MIN_REQUEST_DELAY", 5.0)

    @throttle()
    def ping():
        return "pong"

    assert ping() == "pong"
    assert ping() == "pong"
    assert len(slept) == 1 and slept[0] > 4


def test_throttle_disabled_at_zero(monkeypatch):
    slept = []
    monkeypatch.setattr("cineScore.utils.time.sleep", slept.append)

    @throttle()
    def ping():
        return 1

    ping(); ping()
    assert slept == []
