from __future__ import annotations

import argparse
from typing import Optional

from scorecrawl.config import CrawlConfig, DEFAULT_BASE_URL, setup_logging
from scorecrawl.engine import CrawlEngine
from scorecrawl.fetcher import HttpFetcher
from scorecrawl.metrics import CrawlStats
from scorecrawl.models import CrawlStatsSnapshot, CrawlTask
from scorecrawl.rate_limiter import RateLimiter
from scorecrawl.registry import default_registry
from scorecrawl.storage import DocumentDumper, JsonlStorage, NullStorage, StorageBase
from scorecrawl.task_queue import TaskStack


def run_crawl(config: CrawlConfig) -> CrawlStatsSnapshot:
    registry = default_registry(
        default_year=config.default_year,
        stop_on_first_error=config.stop_on_first_error,
    )
    seed_parser = registry.get(config.seed_page_type)
    fetcher = HttpFetcher(
        user_agent=config.user_agent,
        timeout=config.timeout_secs,
        rate_limiter=RateLimiter(config.delay_secs),
    )
    storage: StorageBase = JsonlStorage(config.results_path) if config.results_path else NullStorage()
    engine = CrawlEngine(
        registry=registry,
        fetcher=fetcher,
        storage=storage,
        dumper=DocumentDumper(config.dump_dir),
        stats=CrawlStats(),
    )

    seed: CrawlTask = seed_parser.new_task(config.base_url, config.seed_path)
    tasks = TaskStack([seed])
    try:
        return engine.crawl(tasks, max_tasks=config.max_tasks)
    finally:
        storage.close()


def _config_from_args(args: argparse.Namespace) -> CrawlConfig:
    overrides = {}
    if args.default_year is not None:
        overrides["default_year"] = args.default_year
    return CrawlConfig(
        base_url=args.base_url,
        seed_path=args.seed_path,
        seed_page_type=args.seed_page_type,
        timeout_secs=args.timeout,
        delay_secs=args.delay,
        stop_on_first_error=not args.keep_going,
        results_path=args.results or None,
        dump_dir=args.dump_dir,
        max_tasks=args.max_tasks,
        log_level=args.log_level,
        **overrides,
    )


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Crawl livescores fixtures and results")
    parser.add_argument("--run", action="store_true", help="Start crawling from the seed page")

    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Site root every task path is appended to")
    parser.add_argument("--seed-path", default="", help="Path of the first page to fetch")
    parser.add_argument("--seed-page-type", default="main", help="Parser for the first page (main, league_group, games)")

    parser.add_argument("--delay", type=float, default=1.0, help="Seconds to wait between requests")
    parser.add_argument("--timeout", type=float, default=20.0, help="HTTP timeout in seconds")
    parser.add_argument("--default-year", type=int, default=None, help="Year for date headers without one (default: current year)")
    parser.add_argument("--keep-going", action="store_true", help="Skip malformed game rows instead of failing the page")

    parser.add_argument("--results", default="results.jsonl", help="Output JSONL file path (empty to disable)")
    parser.add_argument("--dump-dir", default=".", help="Directory for documents that failed structural parsing")
    parser.add_argument("--max-tasks", type=int, default=None, help="Stop after dispatching this many tasks")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    args = parser.parse_args(argv)
    config = _config_from_args(args)
    setup_logging(config.log_level)

    if args.run:
        snapshot = run_crawl(config)
        print(
            f"\nDONE: success={snapshot.succeeded} fail={snapshot.failed} total={snapshot.dispatched} "
            f"games={snapshot.games_found} leagues={snapshot.leagues_found}"
        )
        return 0

    print("Nothing to do. Use --run to start crawling.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
