from __future__ import annotations

import logging
import time as _time
from typing import Dict, Optional

import requests

from .errors import OtherError
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class HttpFetcher:
    """GET a page and return its body as text.

    A response other than 200 raises ``OtherError("Something went wrong")``;
    a transport failure raises OtherError carrying the underlying message.
    Nothing is retried.
    """

    def __init__(
        self,
        user_agent: str,
        timeout: float = 20.0,
        rate_limiter: Optional[RateLimiter] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self._timeout = timeout
        self._rate_limiter = rate_limiter
        self._headers = {"User-Agent": user_agent}
        if headers:
            self._headers.update(headers)

    def fetch(self, url: str) -> str:
        if self._rate_limiter is not None:
            self._rate_limiter.acquire()
        start = _time.time()
        try:
            resp = requests.get(url, headers=self._headers, timeout=self._timeout)
        except requests.RequestException as exc:
            raise OtherError(str(exc)) from exc
        latency_ms = int((_time.time() - start) * 1000)
        logger.debug("GET %s -> %s in %d ms", url, resp.status_code, latency_ms)
        if resp.status_code != 200:
            raise OtherError("Something went wrong")
        return resp.text
