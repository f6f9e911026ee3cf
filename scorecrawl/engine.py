from __future__ import annotations

import logging
from typing import Optional, Protocol

from .errors import FragmentError, NoParsingFunctionError, OtherError, ParsingError, TaskError
from .extract import parse_document
from .metrics import CrawlStats
from .models import CrawlResult, CrawlStatsSnapshot, CrawlTask
from .registry import ParserRegistry
from .storage import DocumentDumper, NullStorage, StorageBase
from .task_queue import TaskStack

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    def fetch(self, url: str) -> str:
        ...


class CrawlEngine:
    """Single-worker crawl loop: pop a task, fetch, parse, push the new tasks.

    The engine is the only place that decides what happens to a failed task:
    structural failures get their document dumped, everything else is logged
    and dropped. Nothing is re-queued.
    """

    def __init__(
        self,
        registry: ParserRegistry,
        fetcher: Fetcher,
        storage: Optional[StorageBase] = None,
        dumper: Optional[DocumentDumper] = None,
        stats: Optional[CrawlStats] = None,
    ) -> None:
        self._registry = registry
        self._fetcher = fetcher
        self._storage = storage or NullStorage()
        self._dumper = dumper
        self._stats = stats or CrawlStats()

    @property
    def stats(self) -> CrawlStats:
        return self._stats

    def run_task(self, task: CrawlTask) -> CrawlResult:
        """Fetch and parse one task. Raises TaskError on any failure."""
        raw_html = self._fetcher.fetch(task.url)
        document = parse_document(raw_html)
        parser = self._registry.for_task(task)
        return parser.parse(task, document)

    def crawl(self, tasks: TaskStack, max_tasks: Optional[int] = None) -> CrawlStatsSnapshot:
        """Drain ``tasks`` (or stop after ``max_tasks`` dispatches) and return run statistics."""
        dispatched = 0
        while tasks:
            if max_tasks is not None and dispatched >= max_tasks:
                logger.info("Task cap of %d reached, %d tasks left in queue", max_tasks, len(tasks))
                break
            task = tasks.pop()
            dispatched += 1
            logger.debug("Dispatching %s task %s", task.page_type, task.url)
            try:
                result = self.run_task(task)
            except TaskError as exc:
                self.handle_error(task, exc)
                continue
            self.handle_result(task, result, tasks)

        snapshot = self._stats.snapshot()
        logger.info(
            "Crawl finished: dispatched=%d succeeded=%d failed=%d games=%d leagues=%d",
            snapshot.dispatched,
            snapshot.succeeded,
            snapshot.failed,
            snapshot.games_found,
            snapshot.leagues_found,
        )
        return snapshot

    def handle_result(self, task: CrawlTask, result: CrawlResult, tasks: TaskStack) -> None:
        logger.info(
            "Parsed %s page %s: success=%s new_tasks=%d payload_bytes=%d",
            task.page_type,
            result.url,
            result.success,
            len(result.new_tasks),
            len(result.payload),
        )
        self._stats.record_result(task, result)
        self._storage.write(task, result)
        if result.success:
            tasks.push_all(result.new_tasks)
        else:
            logger.warning("Result for %s not successful, dropping %d new tasks", result.url, len(result.new_tasks))

    def handle_error(self, task: CrawlTask, error: TaskError) -> None:
        self._stats.record_failure(task, error)
        if isinstance(error, ParsingError):
            logger.warning("Structural parse failure on %s page %s: %s", task.page_type, task.url, error.detail)
            if self._dumper is not None:
                self._dumper.dump(task.page_type, error.document)
        elif isinstance(error, FragmentError):
            logger.error("Error parsing fragment %s on %s\n%s", error.context, task.url, error.markup)
        elif isinstance(error, NoParsingFunctionError):
            logger.error("No parsing function for task %s", error.page_type)
        elif isinstance(error, OtherError):
            logger.warning("Fetching %s failed: %s", task.url, error.message)
        else:
            logger.error("Task %s failed: %s", task.url, error)
