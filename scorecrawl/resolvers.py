"""Pure helpers turning header and status text into dates and match statuses."""
from __future__ import annotations

import datetime as _dt
import re
from typing import Callable, Optional, Tuple

from .models import Finished, MatchStatus, Scheduled

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Status tokens shown once a game is over: full time, after extra time, awarded.
FINISHED_TOKENS = frozenset({"FT", "AET", "AAW"})

_DATE_SPLIT_RE = re.compile(r"[ ,]")


def _parse_non_negative(token: str, default: int) -> int:
    if not token.isascii() or not token.isdigit():
        return default
    return int(token)


def _parse_year(token: str, default: int) -> int:
    try:
        return int(token)
    except ValueError:
        return default


def parse_date(text: str, default_year: int) -> Optional[_dt.date]:
    """Resolve a date header such as ``"October 11, 2022"`` or ``"February 19"``.

    The text is split on spaces and commas into positional tokens
    ``[month, day, <ignored>, year]``. The month is matched case-sensitively
    against full English month names. A missing year token falls back to
    ``default_year``, which is only right while the page lists dates from a
    single calendar year. Returns None when no valid date can be built.
    """
    month = 0
    day = 0
    year = default_year
    for index, token in enumerate(_DATE_SPLIT_RE.split(text)):
        if index == 0:
            if token in MONTHS:
                month = MONTHS.index(token) + 1
        elif index == 1:
            day = _parse_non_negative(token, 0)
        elif index == 3:
            year = _parse_year(token, default_year)
    try:
        return _dt.date(year, month, day)
    except ValueError:
        return None


def parse_clock(text: str) -> Optional[_dt.time]:
    """Parse an ``HH:MM`` kick-off time, or return None."""
    try:
        return _dt.datetime.strptime(text, "%H:%M").time()
    except ValueError:
        return None


def is_finished_token(token: str) -> bool:
    return token in FINISHED_TOKENS


def resolve_status(token: str, read_scores: Callable[[], Tuple[int, int]]) -> Optional[MatchStatus]:
    """Classify a status/time token.

    ``read_scores`` is only called for finished games and may raise. Returns
    None when the token is neither a finished marker nor a clock time.
    """
    if is_finished_token(token):
        home, away = read_scores()
        return Finished(home, away)
    kick_off = parse_clock(token)
    if kick_off is not None:
        return Scheduled(kick_off)
    return None
