"""Duration formatting for log lines."""

_UNITS_NS = (
    ("h", 3_600_000_000_000),
    ("m", 60_000_000_000),
    ("s", 1_000_000_000),
    ("ms", 1_000_000),
    ("μs", 1_000),
    ("ns", 1),
)


def pretty_time(seconds: float) -> str:
    """
    Format a duration with its two most significant units.

    Args:
        seconds: Duration in seconds.

    Returns:
        Formatted duration, e.g. "1m 5s", "2s 300ms", "12ms".

    Example:
        >>> pretty_time(65.2)
        '1m 5s'
        >>> pretty_time(0.012)
        '12ms'
    """
    if seconds < 0:
        raise ValueError("duration must be non-negative")

    remaining = round(seconds * 1_000_000_000)
    parts: list[str] = []
    for unit, size in _UNITS_NS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count}{unit}")
        elif parts:
            break
        if len(parts) == 2:
            break

    return " ".join(parts) if parts else "0ns"
