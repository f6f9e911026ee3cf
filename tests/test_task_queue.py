"""Tests for the TaskStack frontier."""

import unittest

from scorecrawl.models import CrawlTask
from scorecrawl.task_queue import TaskStack


def _task(path: str) -> CrawlTask:
    return CrawlTask(base_url="https://example.com", path=path, page_type="games")


class TestTaskStack(unittest.TestCase):
    """Verify last-in-first-out ordering."""

    def test_pop_returns_most_recent(self):
        stack = TaskStack([_task("/seed/")])
        stack.push_all([_task("/a/"), _task("/b/")])
        self.assertEqual([stack.pop().path for _ in range(3)], ["/b/", "/a/", "/seed/"])

    def test_new_batch_runs_before_older_tasks(self):
        stack = TaskStack()
        stack.push(_task("/old/"))
        stack.push_all([_task("/n1/"), _task("/n2/")])
        self.assertEqual(stack.pop().path, "/n2/")
        self.assertEqual(stack.pop().path, "/n1/")
        self.assertEqual(len(stack), 1)

    def test_empty_stack(self):
        stack = TaskStack()
        self.assertFalse(stack)
        with self.assertRaises(IndexError):
            stack.pop()

    def test_snapshot_is_a_copy(self):
        stack = TaskStack([_task("/a/")])
        snap = stack.snapshot()
        snap.clear()
        self.assertEqual(len(stack), 1)


if __name__ == "__main__":
    unittest.main()
