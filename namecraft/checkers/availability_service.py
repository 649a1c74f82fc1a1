"""Combined availability checking service."""

import asyncio
import logging
import re
from dataclasses import replace
from typing import Awaitable, Callable, Dict, List, Optional, Sequence, Any

from ..config import EngineConfig
from ..models import DomainAvailabilityResult, DomainCheck, Recommendation
from ..utils.cache import ResultCache
from .dns_checker import DNSChecker
from .registrar_checker import RegistrarAPIProvider
from .whois_checker import WhoisProvider

logger = logging.getLogger(__name__)

MAX_LABEL_LENGTH = 63

_WHITESPACE_RE = re.compile(r"\s+")
_INVALID_RE = re.compile(r"[^a-z0-9-]")
_EDGE_HYPHENS_RE = re.compile(r"^-+|-+$")


def sanitize_domain_name(name: str) -> str:
    """Reduce arbitrary text to a valid DNS label.

    >>> sanitize_domain_name("Acme Corp!!")
    'acme-corp'
    """
    label = _WHITESPACE_RE.sub('-', name.strip().lower())
    label = _INVALID_RE.sub('', label)
    label = _EDGE_HYPHENS_RE.sub('', label)
    return label[:MAX_LABEL_LENGTH]


def generate_domain_recommendations(
    result: DomainAvailabilityResult,
    base_name: str,
    premium_threshold: float = 100.0
) -> List[Recommendation]:
    """Purchasing guidance from per-extension availability and prices."""
    recommendations = []

    if result.available.get('.com'):
        recommendations.append(Recommendation(
            priority='high',
            message='.com domain is available - highly recommended for credibility',
            action=f"Secure {base_name}.com immediately"
        ))
    else:
        available_exts = [ext for ext, free in result.available.items() if free]

        if '.ai' in available_exts:
            recommendations.append(Recommendation(
                priority='high',
                message='.ai domain fits AI and tech products - premium but brandable',
                action=f"Consider {base_name}.ai for tech credibility"
            ))

        if '.io' in available_exts:
            recommendations.append(Recommendation(
                priority='medium',
                message='.io popular with tech startups and developers',
                action=f"{base_name}.io could work for tech-focused audience"
            ))

        if not available_exts:
            recommendations.append(Recommendation(
                priority='high',
                message='Consider modifying the name - no major extensions available',
                action='Try adding prefix/suffix or using variation of the name'
            ))

    # Price warnings
    for ext, price in result.prices.items():
        if result.available.get(ext) and price > premium_threshold:
            recommendations.append(Recommendation(
                priority='low',
                message=f"{ext} domain is premium priced at ${price:,.2f}",
                action='Consider if premium pricing aligns with budget'
            ))

    return recommendations


class AvailabilityService:
    """Unified service for checking domain availability.

    Providers are tried in order; the first to answer wins and its answer is
    cached. When every provider fails the DNS probe gives a best guess.
    """

    def __init__(
        self,
        providers: Optional[Sequence[Any]] = None,
        cache: Optional[ResultCache] = None,
        dns_checker: Optional[DNSChecker] = None,
        config: Optional[EngineConfig] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        self.config = config or EngineConfig()
        if providers is None:
            providers = self.default_providers(self.config)
        self.providers = list(providers)
        self.cache = cache if cache is not None else ResultCache(ttl_seconds=self.config.cache_ttl_seconds)
        self.dns_checker = dns_checker or DNSChecker(timeout=self.config.dns_timeout)
        self.extensions = list(self.config.extensions)
        self._sleep = sleep

    @staticmethod
    def default_providers(config: EngineConfig) -> List[Any]:
        providers: List[Any] = [
            RegistrarAPIProvider(api_url=config.registrar_url, timeout=config.provider_timeout)
        ]
        if config.use_whois:
            providers.append(WhoisProvider(timeout=config.provider_timeout))
        return providers

    def _timeout_for(self, provider: Any) -> Optional[float]:
        # Rate-limited providers time the lookup itself, not their queue wait
        if getattr(provider, 'self_timed', False):
            return None
        return self.config.provider_timeout

    def _source_name(self, index: int, provider: Any) -> str:
        if index == 0:
            return 'primary'
        return getattr(provider, 'name', type(provider).__name__.lower())

    async def check_single_domain(self, domain: str) -> DomainCheck:
        """Check one fully-qualified domain; never raises for provider errors."""
        cached = self.cache.get(domain)
        if cached is not None:
            return replace(cached, cached=True)

        for index, provider in enumerate(self.providers):
            try:
                quote = await asyncio.wait_for(
                    provider.available(domain),
                    timeout=self._timeout_for(provider)
                )
            except Exception as e:
                logger.warning(f"Domain provider {self._source_name(index, provider)} failed for {domain}: {e}")
                continue

            result = DomainCheck(
                domain=domain,
                available=quote.available,
                price=quote.price,
                currency=quote.currency,
                api_source=self._source_name(index, provider)
            )
            self.cache.set(domain, result)
            return result

        return await self.dns_checker.probe(domain)

    async def check_availability(self, raw_name: str) -> DomainAvailabilityResult:
        """Check a name across every configured extension."""
        name = sanitize_domain_name(raw_name)
        result = DomainAvailabilityResult(primary_domain=f"{name}.com", base_name=name)

        try:
            domains = [f"{name}{ext}" for ext in self.extensions]
            checks = await asyncio.gather(*(self.check_single_domain(d) for d in domains))

            for ext, check in zip(self.extensions, checks):
                result.available[ext] = check.available
                result.sources[ext] = check.api_source
                if check.price:
                    result.prices[ext] = check.price

            result.recommendations = generate_domain_recommendations(
                result, name, self.config.premium_price_threshold
            )
            logger.info(f"Domain check completed for: {name}")
            return result

        except Exception as e:
            logger.error(f"Domain checking failed for {name}: {e}")
            result.error = True
            result.message = 'Domain checking temporarily unavailable'
            return result

    async def batch_check(self, names: Sequence[str]) -> List[DomainAvailabilityResult]:
        """Check many names in rate-limited groups.

        Groups run one after another with a pause in between; names inside a
        group are checked concurrently. A group that fails as a whole only
        degrades its own members.
        """
        results: List[DomainAvailabilityResult] = []
        batch_size = max(1, self.config.batch_size)

        for start in range(0, len(names), batch_size):
            batch = list(names[start:start + batch_size])
            try:
                batch_results = await asyncio.gather(*(self.check_availability(n) for n in batch))
                results.extend(batch_results)
            except Exception as e:
                logger.error(f"Batch domain check failed: {e}")
                results.extend(
                    DomainAvailabilityResult.degraded(sanitize_domain_name(n), 'Batch check failed')
                    for n in batch
                )

            if start + batch_size < len(names):
                await self._sleep(self.config.batch_delay)

        return results

    def cleanup_cache(self) -> int:
        """Clean up expired cache entries."""
        removed = self.cache.sweep()
        if removed:
            logger.debug(f"Evicted {removed} expired domain cache entries")
        return removed

    def cache_stats(self) -> Dict[str, Any]:
        return self.cache.stats()
