from __future__ import annotations

import json
import logging
import os
import queue
import threading
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .models import CrawlResult, CrawlTask

logger = logging.getLogger(__name__)


class StorageBase(ABC):
    """Abstract base class for crawl result sinks."""

    @abstractmethod
    def write(self, task: CrawlTask, result: CrawlResult) -> None:
        """Persist the result produced for ``task``."""

    @abstractmethod
    def close(self) -> None:
        """Flush pending writes and release resources."""


class NullStorage(StorageBase):
    """Discards results; used when no output file is configured."""

    def write(self, task: CrawlTask, result: CrawlResult) -> None:
        return None

    def close(self) -> None:
        return None


class JsonlStorage(StorageBase):
    """Stores crawl results as JSON Lines (.jsonl) using a background writer thread."""

    def __init__(self, path: str) -> None:
        self._path = path
        self._queue: queue.Queue[Optional[Tuple[CrawlTask, CrawlResult]]] = queue.Queue()
        self._thread = threading.Thread(target=self._writer, daemon=True)
        self._thread.start()

    @property
    def path(self) -> str:
        return self._path

    def write(self, task: CrawlTask, result: CrawlResult) -> None:
        """Enqueue a result for background writing."""
        self._queue.put((task, result))

    def close(self) -> None:
        """Signal the writer thread to flush and stop."""
        self._queue.put(None)
        self._thread.join(timeout=5)

    def _writer(self) -> None:
        with open(self._path, "a", encoding="utf-8") as f:
            while True:
                item = self._queue.get()
                if item is None:
                    break
                task, result = item
                record = {
                    "timestamp": result.timestamp.isoformat(),
                    "url": result.url,
                    "page_type": task.page_type,
                    "success": result.success,
                    "payload": json.loads(result.payload) if result.payload else None,
                    "new_tasks": len(result.new_tasks),
                }
                f.write(json.dumps(record, ensure_ascii=False) + "\n")
                f.flush()


class DocumentDumper:
    """Writes documents that failed structural parsing to ``<dump_dir>/<page_type>.html``."""

    def __init__(self, dump_dir: str = ".") -> None:
        self._dump_dir = dump_dir

    def path_for(self, page_type: str) -> str:
        return os.path.join(self._dump_dir, f"{page_type}.html")

    def dump(self, page_type: str, document: str) -> str:
        os.makedirs(self._dump_dir, exist_ok=True)
        path = self.path_for(page_type)
        logger.info("Writing %s", path)
        with open(path, "w", encoding="utf-8") as f:
            f.write(document)
        return path
