"""Wall-clock helpers. Every time-dependent function takes an injectable ``now``."""

from __future__ import annotations

import math
import time
from datetime import datetime, timezone

SECONDS_PER_DAY = 86400

Instant = datetime | int | float | None


def epoch_seconds(now: Instant = None) -> int:
    """Whole seconds since the Unix epoch for ``now`` (default: current time)."""
    if now is None:
        return int(time.time())
    if isinstance(now, datetime):
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return math.floor(now.timestamp())
    return math.floor(now)


def to_datetime(now: Instant = None) -> datetime:
    return datetime.fromtimestamp(epoch_seconds(now), tz=timezone.utc)
