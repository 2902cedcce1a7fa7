from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

import requests

logger = logging.getLogger(__name__)

# Statuses worth another attempt; any other non-2xx fails right away.
RETRY_STATUSES = (429, 500, 502, 503, 504)


@dataclass(frozen=True)
class HttpConfig:
    timeout_sec: float
    delay_sec: float
    max_retries: int
    backoff_base_sec: float
    backoff_max_sec: float
    user_agent: str


class HttpClient:
    """
    Fetch collaborator for the forum index:
    - Browser-like User-Agent (the forum rejects bare library agents)
    - Timeout and a short polite delay before the first request
    - Retry with capped exponential backoff on network errors and 429/5xx
    """

    def __init__(self, config: HttpConfig, session: Optional[requests.Session] = None):
        self._cfg = config
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": self._cfg.user_agent,
                "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "de-DE,de;q=0.9,en;q=0.8",
            }
        )

    def get_text(self, url: str) -> str:
        """
        GET an URL and return the decoded body.

        Raises:
            requests.HTTPError: non-2xx response (after retries for 429/5xx)
            requests.RequestException: network errors after retries
        """
        self._polite_delay()

        attempt = 0
        while True:
            try:
                resp = self._session.get(url, timeout=self._cfg.timeout_sec)
                if resp.status_code in RETRY_STATUSES:
                    raise requests.HTTPError(
                        f"Retryable status: status={resp.status_code} url={url}",
                        response=resp,
                    )
                resp.raise_for_status()
            except requests.RequestException as e:
                if not self._should_retry(e, attempt):
                    logger.error("HTTP GET failed: url=%s attempts=%s err=%s", url, attempt + 1, e)
                    raise
                sleep_sec = self._compute_backoff(attempt)
                logger.warning(
                    "HTTP GET failed (retrying): attempt=%s url=%s sleep=%.2fs err=%s",
                    attempt + 1,
                    url,
                    sleep_sec,
                    e,
                )
                time.sleep(sleep_sec)
                attempt += 1
                continue

            # Without a charset header requests assumes ISO-8859-1, which mangles umlauts.
            if not resp.encoding or resp.encoding.lower() == "iso-8859-1":
                resp.encoding = "utf-8"
            logger.debug("HTTP GET ok: url=%s bytes=%s", url, len(resp.content))
            return resp.text

    def _should_retry(self, exc: requests.RequestException, attempt: int) -> bool:
        if attempt >= self._cfg.max_retries:
            return False
        if isinstance(exc, requests.HTTPError) and exc.response is not None:
            return exc.response.status_code in RETRY_STATUSES
        return True

    def _polite_delay(self) -> None:
        jitter = random.uniform(0.0, 0.25)
        time.sleep(self._cfg.delay_sec + jitter)

    def _compute_backoff(self, attempt: int) -> float:
        base = self._cfg.backoff_base_sec * (2**attempt)
        capped = min(base, self._cfg.backoff_max_sec)
        return capped + random.uniform(0.0, 0.5)
