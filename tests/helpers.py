"""Shared fixture loading for the test suite."""

from pathlib import Path

FIXTURES = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


LINCOLN_ROW = (
    '<a class="qd" href="/football/europa-league-20-21/qualification-preliminary-round/'
    'lincoln-red-imps-fc-vs-fc-prishtina/326775/"><div class="Xg"><span class="Kg">'
    '<span data-testid="match_row_time-status_or_time_326775" class="Pg Lg">AAW</span></span>'
    '<span class="bh"><span class="ch"><span data-testid="football_match_row-home_team_326775" '
    'class="eh">Lincoln Red Imps FC</span></span><span class="Zg">'
    '<span data-testid="football_match_row-home_score_326775" class="hh">3</span>'
    '<span class="jh"> <!-- -->-<!-- --> </span>'
    '<span class="ih" data-testid="football_match_row-away_score_326775">0</span></span>'
    '<span class="dh"><span data-testid="football_match_row-away_team_326775" class="eh">'
    "FC Prishtina</span></span></span></div></a>"
)


def game_row(status: str, home: str = "Home FC", away: str = "Away FC", home_score=None, away_score=None) -> str:
    """Build one game-row anchor; score spans are left out when a score is None."""
    scores = ""
    if home_score is not None:
        scores += f'<span class="hh">{home_score}</span>'
    if away_score is not None:
        scores += f'<span class="ih">{away_score}</span>'
    teams = "".join(f'<span class="eh">{name}</span>' for name in (home, away) if name is not None)
    return (
        f'<a class="qd" href="/football/game/"><span class="Pg Lg">{status}</span>'
        f'<span class="bh">{teams}<span class="Zg">{scores}</span></span></a>'
    )
