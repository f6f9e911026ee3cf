from __future__ import annotations

import datetime as _dt
import json
import logging
from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from . import extract
from .errors import FragmentError, ParsingError
from .models import (
    CrawlResult,
    CrawlTask,
    Game,
    GamesPageResult,
    League,
    LeagueGroupPageResult,
    RowError,
)

logger = logging.getLogger(__name__)

ROW_LEAGUE = "league"
ROW_STAGE = "stage"
ROW_GAME = "game"


def _now() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


class PageParser(ABC):
    """Contract shared by every page type.

    ``parse`` is a pure function of the task and the parsed document: it never
    performs I/O. Failures are raised as TaskError subclasses.
    """

    page_type: str = "base"

    def name(self) -> str:
        return self.page_type

    @classmethod
    def new_task(cls, base_url: str, path: str) -> CrawlTask:
        return CrawlTask(base_url=base_url, path=path, page_type=cls.page_type)

    @abstractmethod
    def parse(self, task: CrawlTask, document: BeautifulSoup) -> CrawlResult:
        ...

    @staticmethod
    def _result(task: CrawlTask, payload: str, new_tasks: Optional[List[CrawlTask]] = None) -> CrawlResult:
        return CrawlResult(
            url=task.url,
            payload=payload,
            success=True,
            timestamp=_now(),
            new_tasks=list(new_tasks or []),
        )


class MainPage(PageParser):
    """Site index: follows every top navigation link that names a league group."""

    page_type = "main"
    EXCLUDED_TITLES = frozenset({"Home", "Live", "Favourites"})

    @classmethod
    def should_follow(cls, title: str) -> bool:
        return title not in cls.EXCLUDED_TITLES

    def parse(self, task: CrawlTask, document: BeautifulSoup) -> CrawlResult:
        new_tasks: List[CrawlTask] = []
        for anchor in document.select(extract.NAV_GROUP_ANCHOR):
            href = extract.link_target(anchor)
            if href is None:
                raise ParsingError(str(document), "navigation anchor without href")
            title = extract.element_text(anchor)
            if self.should_follow(title):
                new_tasks.append(LeagueGroupPage.new_task(task.base_url, href))
            else:
                logger.debug("Skipping navigation entry %r", title)
        return self._result(task, "", new_tasks)


class LeagueGroupPage(PageParser):
    """Lists the leagues of one group and schedules each league's games page."""

    page_type = "league_group"

    def parse(self, task: CrawlTask, document: BeautifulSoup) -> CrawlResult:
        data = LeagueGroupPageResult()
        new_tasks: List[CrawlTask] = []
        for anchor in document.select(extract.LEAGUE_LIST_ANCHOR):
            href = extract.link_target(anchor)
            if href is None:
                raise ParsingError(str(document), "league anchor without href")
            data.leagues.append(League(name=extract.element_text(anchor)))
            new_tasks.append(GamesPage.new_task(task.base_url, href))
        return self._result(task, json.dumps(data.to_dict(), ensure_ascii=False), new_tasks)


class ScanState(NamedTuple):
    """Grouping context carried across the flat list of fixture rows."""

    date: Optional[_dt.date] = None
    league: str = ""
    stage: Optional[str] = None


def apply_date_header(state: ScanState, date: Optional[_dt.date]) -> ScanState:
    return state._replace(date=date)


def apply_row(state: ScanState, kind: str, text: str = "") -> ScanState:
    """Transition for one row. Game rows leave the context unchanged."""
    if kind == ROW_LEAGUE:
        return state._replace(league=text, stage=None)
    if kind == ROW_STAGE:
        return state._replace(stage=text)
    if kind == ROW_GAME:
        return state
    raise ValueError(f"Unknown row kind: {kind}")


def classify_row(row: Tag) -> Tuple[str, str]:
    """A row is a league header, a stage header, or a game, checked in that order."""
    league = extract.first_text(row, extract.LEAGUE_HEADER)
    if league is not None:
        return ROW_LEAGUE, league
    stage = extract.first_text(row, extract.STAGE_HEADER)
    if stage is not None:
        return ROW_STAGE, stage
    return ROW_GAME, ""


class GamesPage(PageParser):
    """Fixture list grouped by date, league and stage as flat sibling rows.

    By default the first malformed game row aborts the whole page so that
    markup drift is noticed immediately. With ``stop_on_first_error=False``
    bad rows are collected in the result's ``errors`` instead.
    """

    page_type = "games"

    def __init__(self, default_year: Optional[int] = None, stop_on_first_error: bool = True) -> None:
        self.default_year = default_year if default_year is not None else _dt.date.today().year
        self.stop_on_first_error = stop_on_first_error

    def parse(self, task: CrawlTask, document: BeautifulSoup) -> CrawlResult:
        data = self.scan(document)
        return self._result(task, json.dumps(data.to_dict(), ensure_ascii=False))

    def scan(self, document: Tag) -> GamesPageResult:
        data = GamesPageResult()
        state = ScanState()
        for container in document.select(extract.FIXTURE_CONTAINER):
            found, date = extract.find_date_header(container, self.default_year)
            if found:
                state = apply_date_header(state, date)
            for row in container.select(extract.GAME_ROW):
                kind, text = classify_row(row)
                state = apply_row(state, kind, text)
                if kind != ROW_GAME:
                    continue
                try:
                    data.games.append(self.parse_game(row, state))
                except FragmentError as exc:
                    if self.stop_on_first_error:
                        raise
                    logger.warning("Skipping game row (%s)", exc.context)
                    data.errors.append(RowError(context=exc.context, markup=exc.markup))
        return data

    @staticmethod
    def parse_game(row: Tag, state: ScanState) -> Game:
        if state.date is None:
            raise FragmentError("game element", str(row))
        return extract.parse_game(row, state.league, state.stage, state.date)
