from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class CrawlTask:
    """One page to fetch and the name of the parser that handles it."""

    base_url: str
    path: str
    page_type: str

    @property
    def url(self) -> str:
        # plain concatenation, no normalization
        return f"{self.base_url}{self.path}"


@dataclass(frozen=True)
class CrawlResult:
    url: str
    payload: str
    success: bool
    timestamp: _dt.datetime
    new_tasks: List[CrawlTask] = field(default_factory=list)


@dataclass(frozen=True)
class League:
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class Team:
    name: str
    country: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "country": self.country}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        return cls(name=data["name"], country=data.get("country", ""))


class MatchStatus:
    """Base of the match status variants. Exactly one variant describes a game."""

    def to_payload(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class Scheduled(MatchStatus):
    time_of_day: _dt.time

    def to_payload(self) -> Any:
        return {"Scheduled": self.time_of_day.strftime("%H:%M:%S")}


@dataclass(frozen=True)
class Postponed(MatchStatus):
    def to_payload(self) -> Any:
        return "Postponed"


@dataclass(frozen=True)
class InPlay(MatchStatus):
    home_score: int
    away_score: int

    def to_payload(self) -> Any:
        return {"InPlay": [self.home_score, self.away_score]}


@dataclass(frozen=True)
class Finished(MatchStatus):
    home_score: int
    away_score: int

    def to_payload(self) -> Any:
        return {"Finished": [self.home_score, self.away_score]}


def match_status_from_payload(data: Union[str, Dict[str, Any]]) -> MatchStatus:
    """Inverse of MatchStatus.to_payload()."""
    if data == "Postponed":
        return Postponed()
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(f"Unrecognized match status payload: {data!r}")
    tag, value = next(iter(data.items()))
    if tag == "Scheduled":
        return Scheduled(_dt.time.fromisoformat(value))
    if tag == "InPlay":
        return InPlay(int(value[0]), int(value[1]))
    if tag == "Finished":
        return Finished(int(value[0]), int(value[1]))
    raise ValueError(f"Unrecognized match status tag: {tag}")


@dataclass(frozen=True)
class Game:
    status: MatchStatus
    league: str
    stage: Optional[str]
    start_date: _dt.date
    host: Team
    guest: Team

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.to_payload(),
            "league": self.league,
            "stage": self.stage,
            "start_date": self.start_date.isoformat(),
            "host": self.host.to_dict(),
            "guest": self.guest.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Game":
        return cls(
            status=match_status_from_payload(data["status"]),
            league=data["league"],
            stage=data.get("stage"),
            start_date=_dt.date.fromisoformat(data["start_date"]),
            host=Team.from_dict(data["host"]),
            guest=Team.from_dict(data["guest"]),
        )


@dataclass(frozen=True)
class RowError:
    """A game row that failed extraction, kept when a page is parsed without stopping."""

    context: str
    markup: str

    def to_dict(self) -> Dict[str, Any]:
        return {"context": self.context, "markup": self.markup}


@dataclass
class LeagueGroupPageResult:
    leagues: List[League] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"leagues": [league.to_dict() for league in self.leagues]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeagueGroupPageResult":
        return cls(leagues=[League(name=item["name"]) for item in data.get("leagues", [])])


@dataclass
class GamesPageResult:
    games: List[Game] = field(default_factory=list)
    errors: List[RowError] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"games": [game.to_dict() for game in self.games]}
        # only present when rows were skipped instead of aborting the page
        if self.errors:
            data["errors"] = [err.to_dict() for err in self.errors]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GamesPageResult":
        return cls(
            games=[Game.from_dict(item) for item in data.get("games", [])],
            errors=[RowError(**item) for item in data.get("errors", [])],
        )


@dataclass(frozen=True)
class CrawlStatsSnapshot:
    dispatched: int
    succeeded: int
    failed: int
    failures_by_kind: Dict[str, int]
    tasks_by_page_type: Dict[str, int]
    games_found: int
    leagues_found: int
    elapsed_secs: float
