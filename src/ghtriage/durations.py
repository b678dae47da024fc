"""Human-readable elapsed time, e.g. "3 days 4 hours"."""

from datetime import timedelta

_UNITS = (
    ("year", 365 * 86400),
    ("week", 7 * 86400),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


def format_duration(delta: timedelta, limit: int = 2) -> str:
    """Format delta using at most `limit` units, largest first.

    Zero-valued units are skipped, so 3 days and 5 seconds renders as
    "3 days 5 seconds". Anything under a second (or negative) is "0 seconds".
    """
    remaining = int(delta.total_seconds())
    if remaining <= 0:
        return "0 seconds"

    parts: list[str] = []
    for name, seconds in _UNITS:
        if len(parts) >= limit:
            break
        count, remaining = divmod(remaining, seconds)
        if count:
            parts.append(f"{count} {name}" if count == 1 else f"{count} {name}s")

    return " ".join(parts)
