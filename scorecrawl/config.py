from __future__ import annotations

import datetime as _dt
import logging
import sys
from dataclasses import dataclass, field
from typing import Optional

from . import __version__

DEFAULT_BASE_URL = "https://www.livescores.com"
DEFAULT_USER_AGENT = f"scorecrawl/{__version__}"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _current_year() -> int:
    return _dt.date.today().year


@dataclass(frozen=True)
class CrawlConfig:
    """Settings for one crawl run.

    ``default_year`` is used for date headers that omit the year. It is
    only correct while the crawled pages list dates of a single year, so
    runs around New Year may attach games to the wrong year.
    """

    base_url: str = DEFAULT_BASE_URL
    seed_path: str = ""
    seed_page_type: str = "main"
    user_agent: str = DEFAULT_USER_AGENT
    timeout_secs: float = 20.0
    delay_secs: float = 1.0
    default_year: int = field(default_factory=_current_year)
    stop_on_first_error: bool = True
    results_path: Optional[str] = "results.jsonl"
    dump_dir: str = "."
    max_tasks: Optional[int] = None
    log_level: str = "INFO"


def setup_logging(log_level: str = "INFO") -> None:
    """Send all log records to stderr with a single plain-text handler."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # keep urllib3 connection chatter out of debug runs
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))
