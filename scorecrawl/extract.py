"""Element queries against the livescores markup.

Every selector the page parsers depend on lives here so that a markup change
on the site only needs to be tracked in one place.
"""
from __future__ import annotations

import datetime as _dt
import logging
import re
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .errors import FragmentError
from .models import Game, MatchStatus, Team
from .resolvers import parse_date, resolve_status

logger = logging.getLogger(__name__)

# Centralized selector constants
NAV_GROUP_ANCHOR = "a.ue"
LEAGUE_LIST_ANCHOR = ".se li > ul > li > a"
FIXTURE_CONTAINER = "div.xb > div.bb, div.xf"
DATE_HEADER = "span.cb"
GAME_ROW = "a.qd"
STAGE_HEADER = "span.fb"
LEAGUE_HEADER = "span.eb"
STATUS_MARKER = "span.Pg"
HOME_SCORE = "span.hh"
AWAY_SCORE = "span.ih"
TEAM_NAME = "span.eh"

_SCORE_RE = re.compile(r"[0-9]+")


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def element_text(element: Tag) -> str:
    """All text below ``element`` concatenated, comments excluded, not stripped."""
    return element.get_text()


def first_text(element: Tag, selector: str) -> Optional[str]:
    found = element.select_one(selector)
    if found is None:
        return None
    return element_text(found)


def link_target(anchor: Tag) -> Optional[str]:
    href = anchor.get("href")
    if href is None:
        return None
    return str(href)


def find_date_header(container: Tag, default_year: int) -> Tuple[bool, Optional[_dt.date]]:
    """Return ``(found, date)`` for the date headers inside ``container``.

    When several headers are present the last one wins. ``found`` is True as
    soon as one header exists, even if its text did not resolve to a date.
    """
    found = False
    resolved: Optional[_dt.date] = None
    for header in container.select(DATE_HEADER):
        found = True
        text = element_text(header)
        resolved = parse_date(text, default_year)
        if resolved is None:
            logger.debug("Unresolvable date header %r", text)
    return found, resolved


def _read_score(row: Tag, selector: str) -> int:
    text = first_text(row, selector)
    if text is None or not _SCORE_RE.fullmatch(text):
        return -1
    return int(text)


def parse_score(row: Tag) -> Tuple[int, int]:
    """Read the home and away scores of a finished game row.

    Both sides are required; an absent or non-numeric score on either side
    raises FragmentError with the row's inner markup.
    """
    home = _read_score(row, HOME_SCORE)
    away = _read_score(row, AWAY_SCORE)
    if home < 0 or away < 0:
        raise FragmentError("Parse game score", row.decode_contents())
    return home, away


def parse_teams(row: Tag) -> Tuple[str, str]:
    names: List[Tag] = row.select(TEAM_NAME)
    if not names:
        raise FragmentError("Parse game home team", row.decode_contents())
    if len(names) < 2:
        raise FragmentError("Parse game away team", row.decode_contents())
    return element_text(names[0]), element_text(names[1])


def parse_game_status(row: Tag) -> MatchStatus:
    token = first_text(row, STATUS_MARKER)
    if token is None:
        raise FragmentError("Selector status marker failed", str(row))
    status = resolve_status(token, lambda: parse_score(row))
    if status is None:
        raise FragmentError("Parsing game status", str(row))
    return status


def parse_game(row: Tag, league: str, stage: Optional[str], start_date: _dt.date) -> Game:
    """Extract one game from a game-row anchor.

    The league, stage and start date come from the headers that preceded the
    row on the page. Team countries are not published by the site and stay empty.
    """
    status = parse_game_status(row)
    host, guest = parse_teams(row)
    return Game(
        status=status,
        league=league,
        stage=stage,
        start_date=start_date,
        host=Team(name=host),
        guest=Team(name=guest),
    )
