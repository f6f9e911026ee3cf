from __future__ import annotations

import json
import time
from collections import Counter
from typing import Dict

from .errors import TaskError
from .models import CrawlResult, CrawlStatsSnapshot, CrawlTask


class CrawlStats:
    """Counters for one crawl run.

    Records every dispatched task's outcome and produces a CrawlStatsSnapshot
    summarizing successes, failures per error kind and items extracted."""

    def __init__(self) -> None:
        self._started = time.monotonic()
        self._succeeded = 0
        self._failures: Counter[str] = Counter()
        self._page_types: Counter[str] = Counter()
        self._games = 0
        self._leagues = 0

    def record_result(self, task: CrawlTask, result: CrawlResult) -> None:
        """Count a successful task and the items its payload carries."""
        self._page_types[task.page_type] += 1
        self._succeeded += 1
        if result.payload:
            data = json.loads(result.payload)
            self._games += len(data.get("games", []))
            self._leagues += len(data.get("leagues", []))

    def record_failure(self, task: CrawlTask, error: TaskError) -> None:
        self._page_types[task.page_type] += 1
        self._failures[error.kind] += 1

    def snapshot(self) -> CrawlStatsSnapshot:
        failures: Dict[str, int] = dict(self._failures)
        failed = sum(failures.values())
        return CrawlStatsSnapshot(
            dispatched=self._succeeded + failed,
            succeeded=self._succeeded,
            failed=failed,
            failures_by_kind=failures,
            tasks_by_page_type=dict(self._page_types),
            games_found=self._games,
            leagues_found=self._leagues,
            elapsed_secs=time.monotonic() - self._started,
        )
