from __future__ import annotations

from typing import Dict, Iterable, Optional

from .errors import NoParsingFunctionError
from .models import CrawlTask
from .pages import GamesPage, LeagueGroupPage, MainPage, PageParser


class ParserRegistry:
    """Maps a task's page type to the parser that understands it.

    Parsers are stateless apart from their configuration, so one instance
    per page type is shared by every task of that type.
    """

    def __init__(self, parsers: Optional[Iterable[PageParser]] = None) -> None:
        self._parsers: Dict[str, PageParser] = {}
        for parser in parsers or ():
            self.register(parser)

    def register(self, parser: PageParser) -> None:
        self._parsers[parser.name()] = parser

    def get(self, page_type: str) -> PageParser:
        parser = self._parsers.get(page_type)
        if parser is None:
            raise NoParsingFunctionError(page_type)
        return parser

    def for_task(self, task: CrawlTask) -> PageParser:
        return self.get(task.page_type)

    def __contains__(self, page_type: object) -> bool:
        return page_type in self._parsers

    def names(self) -> list[str]:
        return list(self._parsers)


def default_registry(default_year: Optional[int] = None, stop_on_first_error: bool = True) -> ParserRegistry:
    """Registry wired with the three livescores page types."""
    return ParserRegistry(
        [
            MainPage(),
            LeagueGroupPage(),
            GamesPage(default_year=default_year, stop_on_first_error=stop_on_first_error),
        ]
    )
