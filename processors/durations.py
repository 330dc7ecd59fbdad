# processors/durations.py
import re
import logging

logger = logging.getLogger(__name__)

# P1DT2H30M, PT15M, PT1H, PT45S ...
ISO_DURATION_PATTERN = re.compile(
    r'^P(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?)?$',
    re.IGNORECASE
)


def _duration_parts(iso_duration):
    if not iso_duration or not isinstance(iso_duration, str):
        return None

    match = ISO_DURATION_PATTERN.match(iso_duration.strip())
    if not match:
        logger.debug(f"Not an ISO 8601 duration: {iso_duration!r}")
        return None

    days, hours, minutes, _seconds = (int(group or 0) for group in match.groups())
    return days * 24 + hours, minutes


def parse_iso_duration_minutes(iso_duration):
    """
    Parse ISO 8601 duration to minutes

    Args:
        iso_duration (str): ISO 8601 duration string, e.g. "PT1H30M"

    Returns:
        int: Duration in minutes or None
    """
    parts = _duration_parts(iso_duration)
    if parts is None:
        return None
    hours, minutes = parts
    return hours * 60 + minutes


def format_iso_duration(iso_duration):
    """
    Format an ISO 8601 duration the way French recipe sites print it

    "PT1H30M" -> "1h 30 min", "PT15M" -> "15 min", "PT2H" -> "2h".
    Seconds are dropped. Returns None when the value is not a duration.
    """
    parts = _duration_parts(iso_duration)
    if parts is None:
        return None

    hours, minutes = parts
    formatted = []
    if hours:
        formatted.append(f"{hours}h")
    if minutes or not formatted:
        formatted.append(f"{minutes} min")
    return ' '.join(formatted)
