"""
Shared fakes for the engine's external collaborators.

Nothing here touches the network: completion providers, domain providers and
DNS resolvers are all replaced by in-memory doubles.
"""

import pytest
import dns.resolver

from namecraft.checkers import AvailabilityService, DNSChecker
from namecraft.config import EngineConfig
from namecraft.exceptions import DomainProviderError
from namecraft.models import DomainQuote
from namecraft.utils.cache import ResultCache


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FakeDomainProvider:
    """Answers from a dict; unknown domains are available at no price."""

    name = 'fake'

    def __init__(self, answers=None, fail_on=None, always_fail=False):
        self.answers = answers or {}
        self.fail_on = set(fail_on or ())
        self.always_fail = always_fail
        self.calls = []

    async def available(self, domain):
        self.calls.append(domain)
        if self.always_fail or domain in self.fail_on:
            raise DomainProviderError(f"provider down for {domain}")
        return self.answers.get(domain, DomainQuote(available=True))


class FakeResolver:
    """Resolves only the domains listed in ``registered``."""

    def __init__(self, registered=(), error=None):
        self.registered = set(registered)
        self.error = error
        self.calls = []

    async def resolve(self, domain):
        self.calls.append(domain)
        if self.error is not None:
            raise self.error
        if domain in self.registered:
            return ["93.184.216.34"]
        raise dns.resolver.NXDOMAIN()


async def no_sleep(seconds):
    return None


class RecordingSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, seconds):
        self.delays.append(seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return EngineConfig(use_whois=False)


@pytest.fixture
def provider():
    return FakeDomainProvider()


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def make_service(config, clock, resolver):
    """Build an AvailabilityService wired to fakes."""

    def build(providers, sleep=no_sleep, dns_resolver=None):
        return AvailabilityService(
            providers=providers,
            cache=ResultCache(ttl_seconds=config.cache_ttl_seconds, clock=clock),
            dns_checker=DNSChecker(resolver=dns_resolver or resolver),
            config=config,
            sleep=sleep
        )

    return build
