import functools
import random
import re
import time
from datetime import datetime

from cineScore import settings


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    log_path = settings.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with log_path.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def slugify(title: str, sep: str = "_") -> str:
    """'The Dark Knight: Rises!' → 'the_dark_knight_rises_' (runs collapse to *sep*)."""
    return re.sub(r"[^a-z0-9]+", sep, title.lower())


def throttle(min_delay: float | None = None):
    """
    Decorator that sleeps `min_delay ±0.3 s` between *network* calls on the
    same function. With no argument the delay is read from
    ``settings.MIN_REQUEST_DELAY`` on every call; a delay of 0 disables it.
    """
    def wrap(fn):
        last_hit = 0.0
        @functools.wraps(fn)
        def inner(*a, **kw):
            nonlocal last_hit
            delay = settings.MIN_REQUEST_DELAY if min_delay is None else min_delay
            wait = delay - (time.time() - last_hit)
            if delay > 0 and wait > 0:
                time.sleep(wait + random.uniform(0, 0.3))
            try:
                return fn(*a, **kw)
            finally:
                last_hit = time.time()
        return inner
    return wrap
