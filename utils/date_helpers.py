from datetime import date, datetime

# ── Display date format options ───────────────────────────────────────────────

_STRFTIME_MAP = {
    "MM/DD/YYYY": "%m/%d/%Y",
    "DD/MM/YYYY": "%d/%m/%Y",
    "YYYY-MM-DD": "%Y-%m-%d",
    "DD.MM.YYYY": "%d.%m.%Y",
    "MM-DD-YYYY": "%m-%d-%Y",
}


def parse_date(date_str: str) -> date | None:
    """Parse a date string in YYYY-MM-DD format, returning None on failure."""
    if not date_str:
        return None
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d"):
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    return None


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO 8601 timestamp as sent by the API.

    Accepts a trailing 'Z', an explicit offset, fractional seconds, or a bare
    date. Returns None on failure.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    d = parse_date(text)
    if d is None:
        return None
    return datetime(d.year, d.month, d.day)


def format_created_date(created_at: str, fmt_key: str = "MM/DD/YYYY") -> str:
    """Format a transaction's createdAt timestamp for display.

    The calendar date is taken as sent by the server (no timezone shift).
    Unparseable values are returned unchanged.
    """
    ts = parse_timestamp(created_at)
    if ts is None:
        return created_at or ""
    return ts.strftime(_STRFTIME_MAP.get(fmt_key, "%m/%d/%Y"))
