# solrexpr/query/escape.py
"""String helpers for query text and range bounds."""

from datetime import UTC, date, datetime
from decimal import Decimal

# Characters the query parser treats as syntax. Whitespace is escaped too.
RESERVED = frozenset('\\+-!():^[]"{}~*?|&;/')

# Private-use placeholders for wildcard meta characters
ASTERISK = "\ufdd0"
QUESTION = "\ufdd1"

UNBOUNDED = "*"

Bound = date | int | float | Decimal | str


def escape(text: str) -> str:
    """Backslash-escape every reserved character and whitespace in text."""
    return "".join(f"\\{c}" if c in RESERVED or c.isspace() else c for c in text)


def escape_wildcard(text: str) -> str:
    """Escape text but keep '*' and '?' as wildcards.

    Example:
        >>> escape_wildcard("hel*-")
        'hel*\\\\-'
    """
    protected = text.replace("*", ASTERISK).replace("?", QUESTION)
    return escape(protected).replace(ASTERISK, "*").replace(QUESTION, "?")


def format_date(value: date) -> str:
    """Format a date or datetime as UTC with millisecond precision.

    Naive datetimes are taken as UTC. Plain dates map to midnight UTC.

    Example:
        >>> format_date(date(2013, 2, 17))
        '2013-02-17T00:00:00.000Z'
    """
    if isinstance(value, datetime):
        dt = value.astimezone(UTC) if value.tzinfo else value
    else:
        dt = datetime(value.year, value.month, value.day)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        f".{dt.microsecond // 1000:03d}Z"
    )


def format_bound(value: Bound | None, name: str) -> str:
    """Format one side of a range. Strings pass through unmodified."""
    match value:
        case None | "":
            raise ValueError(f"The {name} is required.")
        case bool():
            raise ValueError(f"Unsupported {name} bound: {value!r}")
        case str():
            return value
        case date():
            return format_date(value)
        case int() | float() | Decimal():
            return str(value)
        case _:
            raise ValueError(f"Unsupported {name} bound: {value!r}")
