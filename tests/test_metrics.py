"""Tests for the CrawlStats collector."""

import datetime as dt
import json
import unittest

from scorecrawl.errors import FragmentError, OtherError
from scorecrawl.metrics import CrawlStats
from scorecrawl.models import CrawlResult, CrawlTask


def _result(payload: str = "") -> CrawlResult:
    return CrawlResult(url="https://example.com", payload=payload, success=True, timestamp=dt.datetime(2023, 1, 1))


class TestCrawlStats(unittest.TestCase):
    """Verify outcome recording and snapshot aggregation."""

    def test_empty_snapshot(self):
        snap = CrawlStats().snapshot()
        self.assertEqual(snap.dispatched, 0)
        self.assertEqual(snap.failed, 0)
        self.assertEqual(snap.failures_by_kind, {})

    def test_counts_items_from_payloads(self):
        stats = CrawlStats()
        stats.record_result(CrawlTask("b", "/g/", "league_group"), _result(json.dumps({"leagues": [{"name": "A"}]})))
        stats.record_result(CrawlTask("b", "/x/", "games"), _result(json.dumps({"games": [{}, {}]})))
        stats.record_result(CrawlTask("b", "", "main"), _result(""))
        snap = stats.snapshot()
        self.assertEqual(snap.succeeded, 3)
        self.assertEqual(snap.leagues_found, 1)
        self.assertEqual(snap.games_found, 2)

    def test_failures_grouped_by_kind(self):
        stats = CrawlStats()
        task = CrawlTask("b", "/x/", "games")
        stats.record_failure(task, FragmentError("Parse game score", "<a/>"))
        stats.record_failure(task, FragmentError("Parse game home team", "<a/>"))
        stats.record_failure(task, OtherError("timeout"))
        snap = stats.snapshot()
        self.assertEqual(snap.failed, 3)
        self.assertEqual(snap.dispatched, 3)
        self.assertEqual(snap.failures_by_kind, {"fragment": 2, "other": 1})
        self.assertEqual(snap.tasks_by_page_type, {"games": 3})
        self.assertGreaterEqual(snap.elapsed_secs, 0.0)


if __name__ == "__main__":
    unittest.main()
