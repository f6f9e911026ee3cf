"""Livescores crawl engine.

Walks the site index, league-group listings and per-league game listings,
turning each page into typed data plus follow-up crawl tasks.

Key modules:
    models      -- CrawlTask, CrawlResult, Game, MatchStatus and page result shapes
    errors      -- TaskError taxonomy raised by fetchers and parsers
    resolvers   -- date header and status token resolution
    extract     -- selector constants and element-query primitives
    pages       -- PageParser contract with MainPage, LeagueGroupPage, GamesPage
    registry    -- ParserRegistry mapping page types to parsers
    task_queue  -- TaskStack, the LIFO crawl frontier
    fetcher     -- HttpFetcher built on requests
    rate_limiter-- RateLimiter politeness throttle
    engine      -- CrawlEngine dispatch loop and per-kind error policy
    storage     -- JsonlStorage result sink and DocumentDumper
    metrics     -- CrawlStats run counters
    config      -- CrawlConfig defaults and logging setup
"""

__version__ = "0.1.0"
