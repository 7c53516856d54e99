import re
from datetime import datetime, timedelta, timezone
from typing import Optional

API_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
OFFSET_TOKEN = re.compile(r"[0-9]{1,2}")


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Parse an Unsplash timestamp such as ``2016-01-02T03:04:05-04:00``.

    The string is cut on ``-``. The fourth piece holds the offset; its first
    and last ``:`` tokens are read as hours and minutes west of UTC. The
    first three pieces are parsed as the local date-time.
    Returns None when the string does not have that shape.
    """
    components = value.split("-")
    if len(components) < 4:
        return None

    offset_tokens = components[3].split(":")
    hours = offset_tokens[0] or "00"
    minutes = offset_tokens[-1] or "00"
    if not (OFFSET_TOKEN.fullmatch(hours) and OFFSET_TOKEN.fullmatch(minutes)):
        return None

    offset = timedelta(hours=int(hours), minutes=int(minutes))
    if offset >= timedelta(hours=24):
        return None
    tz = timezone(-offset)

    try:
        parsed = datetime.strptime("-".join(components[:3]), API_DATE_FORMAT)
    except ValueError:
        return None

    return parsed.replace(tzinfo=tz)
