import re
from datetime import datetime, timedelta, timezone
from email.utils import formatdate, parsedate_to_datetime
from pathlib import Path

# 2024-03-10T12:00:00Z, 2024-03-10 12:00:00+02:00, 2024-03-10T12:00:00
DATETIME_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[T ](\d{2}):(\d{2}):(\d{2})"
    r"(Z|([+-])(\d{2}):(\d{2}))?$"
)
DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
# Mon, 01 Jan 2024 00:00:00 GMT
RFC2822_RE = re.compile(r"^[A-Za-z]{3}, \d{1,2} [A-Za-z]{3} \d{4} ")

WEEKDAYS = {
    # datetime.weekday(): Monday is 0
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    "es": ("lun", "mar", "mié", "jue", "vie", "sáb", "dom"),
}
MONTHS = {
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    "es": ("ene", "feb", "mar", "abr", "may", "jun",
           "jul", "ago", "sep", "oct", "nov", "dic"),
}
DEFAULT_LOCALE = "en"


def parse_timestamp(value):
    """
    Parse an ISO-8601-like timestamp into an aware UTC datetime.

    Accepted forms:

      2024-03-10                   midnight UTC
      2024-03-10T12:00:00          taken as UTC
      2024-03-10 12:00:00Z
      2024-03-10T12:00:00+02:00    local time at that offset

    An English RFC 2822 date ("Sun, 10 Mar 2024 10:00:00 GMT") is accepted too,
    so feed dates can be read back.

    Returns None for anything else, including out-of-range fields.
    """
    if not isinstance(value, str):
        return None
    s = value.strip()

    try:
        m = DATETIME_RE.match(s)
        if m:
            year, month, day, hour, minute, second = (int(g) for g in m.group(1, 2, 3, 4, 5, 6))
            dt = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
            sign = m.group(8)
            if sign:
                offset = timedelta(hours=int(m.group(9)), minutes=int(m.group(10)))
                dt = dt - offset if sign == "+" else dt + offset
            return dt

        m = DATE_RE.match(s)
        if m:
            year, month, day = (int(g) for g in m.groups())
            return datetime(year, month, day, tzinfo=timezone.utc)

        if RFC2822_RE.match(s):
            dt = parsedate_to_datetime(s)
            if dt.tzinfo is None:
                return dt.replace(tzinfo=timezone.utc)
            return dt.astimezone(timezone.utc)
    except (TypeError, ValueError, OverflowError):
        return None

    return None


def format_rfc2822(instant: datetime, locale: str = DEFAULT_LOCALE) -> str:
    """
    Render `instant` as "<Wkd>, <DD> <Mon> <YYYY> <HH>:<MM>:<SS> GMT", always in UTC.

    `en` gives "Sun, 10 Mar 2024 10:00:00 GMT"; `es` uses lower-case Spanish
    abbreviations: "dom, 10 mar 2024 10:00:00 GMT". Unknown locales fall back
    to `en`. Naive datetimes are taken as UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    instant = instant.astimezone(timezone.utc)

    if locale not in WEEKDAYS or locale == "en":
        return formatdate(int(instant.timestamp()), usegmt=True)

    wday = WEEKDAYS[locale][instant.weekday()]
    mon = MONTHS[locale][instant.month - 1]
    return f"{wday}, {instant.day:02d} {mon} {instant.year} {instant:%H:%M:%S} GMT"


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


def file_mtime(path: Path):
    """Last-modified time of `path` in whole seconds (UTC), or None if it does not exist."""
    try:
        mtime = Path(path).stat().st_mtime
    except OSError:
        return None
    return datetime.fromtimestamp(int(mtime), tz=timezone.utc)
