from __future__ import annotations

from typing import Iterable, List, Optional

from .models import CrawlTask


class TaskStack:
    """Crawl frontier with last-in-first-out order.

    Tasks discovered by one page are pushed on top and therefore processed
    as a contiguous run before anything queued earlier (depth-first walk).
    """

    def __init__(self, tasks: Optional[Iterable[CrawlTask]] = None) -> None:
        self._items: List[CrawlTask] = list(tasks or [])

    def push(self, task: CrawlTask) -> None:
        self._items.append(task)

    def push_all(self, tasks: Iterable[CrawlTask]) -> None:
        self._items.extend(tasks)

    def pop(self) -> CrawlTask:
        if not self._items:
            raise IndexError("pop from empty TaskStack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def snapshot(self) -> List[CrawlTask]:
        """Pending tasks, bottom of the stack first."""
        return list(self._items)
