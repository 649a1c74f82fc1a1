"""WHOIS-based domain availability provider."""

import asyncio
import logging
import time
from typing import Optional

import whois
from whois.exceptions import WhoisDomainNotFoundError

from ..exceptions import DomainProviderError
from ..models import DomainQuote

logger = logging.getLogger(__name__)


class WhoisProvider:
    """WHOIS-based domain availability verification.

    ``timeout`` bounds each lookup. Time spent queued behind the rate limiter
    is not counted against it.
    """

    name = 'whois'
    self_timed = True

    RATE_LIMIT_PATTERNS = ['rate limit', 'too many requests', 'quota exceeded', 'try again later', 'blocked']
    AVAILABLE_PATTERNS = ['no match', 'not found', 'no entries', 'available', 'domain not found']
    REGISTERED_PATTERNS = ['registered', 'exists']

    def __init__(self, timeout: float = 10.0, rate_limit_delay: float = 1.5, backoff_delay: float = 5.0):
        self.timeout = timeout
        self.rate_limit_delay = rate_limit_delay
        self.backoff_delay = backoff_delay
        self._last_request_time = 0.0
        self._consecutive_errors = 0
        self._lock: Optional[asyncio.Lock] = None

    async def _wait_for_rate_limit(self):
        """Ensure we don't exceed rate limits."""
        if self._lock is None:
            self._lock = asyncio.Lock()

        async with self._lock:
            # Add extra delay if we've been hitting errors
            extra_delay = min(self._consecutive_errors * 2, 30)
            total_delay = self.rate_limit_delay + extra_delay

            elapsed = time.monotonic() - self._last_request_time
            if elapsed < total_delay:
                await asyncio.sleep(total_delay - elapsed)
            self._last_request_time = time.monotonic()

    async def _lookup(self, domain: str):
        loop = asyncio.get_running_loop()
        return await asyncio.wait_for(
            loop.run_in_executor(None, whois.whois, domain),
            timeout=self.timeout
        )

    async def available(self, domain: str, retry: bool = True) -> DomainQuote:
        """Query WHOIS; raises DomainProviderError when the answer is unknown."""
        await self._wait_for_rate_limit()

        try:
            w = await self._lookup(domain)
        except asyncio.TimeoutError:
            self._consecutive_errors += 1
            raise DomainProviderError(f"WHOIS timeout for {domain}")
        except WhoisDomainNotFoundError:
            self._consecutive_errors = 0
            return DomainQuote(available=True)
        except Exception as e:
            error_msg = str(e).lower()

            if any(p in error_msg for p in self.RATE_LIMIT_PATTERNS):
                self._consecutive_errors += 1
                if retry:
                    logger.warning(f"WHOIS rate limited on {domain}, backing off {self.backoff_delay}s")
                    await asyncio.sleep(self.backoff_delay)
                    return await self.available(domain, retry=False)
                raise DomainProviderError(f"WHOIS rate limited for {domain}") from e

            if any(p in error_msg for p in self.AVAILABLE_PATTERNS):
                self._consecutive_errors = 0
                return DomainQuote(available=True)

            if any(p in error_msg for p in self.REGISTERED_PATTERNS):
                self._consecutive_errors = 0
                return DomainQuote(available=False)

            self._consecutive_errors += 1
            raise DomainProviderError(f"WHOIS lookup failed for {domain}: {e}") from e

        self._consecutive_errors = 0
        # No domain_name in the record means nobody holds it
        registered = bool(w.domain_name or w.creation_date)
        return DomainQuote(available=not registered)
