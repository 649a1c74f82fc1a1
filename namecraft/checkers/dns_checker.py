"""DNS-based fallback availability probe."""

import logging
from typing import Optional

import dns.resolver
import dns.asyncresolver

from ..models import DomainCheck

logger = logging.getLogger(__name__)


class DNSResolver:
    """Async A-record resolver; raises a dns.resolver exception if absent."""

    def __init__(self, timeout: float = 3.0):
        self.timeout = timeout

    async def resolve(self, domain: str):
        resolver = dns.asyncresolver.Resolver()
        resolver.timeout = self.timeout
        resolver.lifetime = self.timeout
        return await resolver.resolve(domain, 'A')


class DNSChecker:
    """Best-effort availability guess from DNS resolution.

    A resolvable name is certainly registered. An unresolvable one is only
    probably free: plenty of registered domains publish no records.
    """

    SOURCE = 'dns_fallback'

    def __init__(self, timeout: float = 3.0, resolver: Optional[DNSResolver] = None):
        self.timeout = timeout
        self.resolver = resolver or DNSResolver(timeout=timeout)

    def _taken(self, domain: str, note: str) -> DomainCheck:
        return DomainCheck(
            domain=domain,
            available=False,
            api_source=self.SOURCE,
            confidence='certain',
            note=note
        )

    def _free(self, domain: str, confidence: str, note: str) -> DomainCheck:
        return DomainCheck(
            domain=domain,
            available=True,
            api_source=self.SOURCE,
            confidence=confidence,
            note=note
        )

    async def probe(self, domain: str) -> DomainCheck:
        """Never raises."""
        try:
            await self.resolver.resolve(domain)
            return self._taken(domain, 'Verified via DNS resolution')
        except dns.resolver.NXDOMAIN:
            return self._free(domain, 'medium', 'No DNS record found - likely available')
        except dns.resolver.NoAnswer:
            # Name exists, just no A record
            return self._taken(domain, 'Domain exists without A record')
        except dns.resolver.NoNameservers:
            return self._free(domain, 'medium', 'No nameservers answered - likely available')
        except dns.resolver.Timeout:
            logger.debug(f"DNS timeout for {domain}")
            return self._free(domain, 'low', 'DNS lookup timed out')
        except Exception as e:
            logger.debug(f"DNS probe failed for {domain}: {e}")
            return self._free(domain, 'low', 'DNS lookup failed')
