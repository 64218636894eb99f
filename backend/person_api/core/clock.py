from datetime import datetime, timezone
from typing import Callable

# anything returning an aware utc datetime; tests swap in a fixed one
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
