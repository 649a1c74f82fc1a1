"""Registrar HTTP API availability provider."""

import logging
import os
from typing import Optional

import aiohttp

from ..exceptions import DomainProviderError, ProviderNotConfiguredError
from ..models import DomainQuote

logger = logging.getLogger(__name__)

# Registrar prices arrive in micro-units of the currency
PRICE_DIVISOR = 1_000_000


class RegistrarAPIProvider:
    """Queries a registrar's JSON availability endpoint.

    The endpoint is called as ``GET <url>?domain=<domain>`` and must answer
    ``{"available": bool, "price": int, "currency": str}``.
    """

    name = 'registrar'

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.api_url = api_url or os.environ.get('REGISTRAR_API_URL')
        self.api_key = api_key or os.environ.get('REGISTRAR_API_KEY')
        self.api_secret = api_secret or os.environ.get('REGISTRAR_API_SECRET', '')
        self.timeout = timeout
        self._session = session

    @property
    def configured(self) -> bool:
        return bool(self.api_url and self.api_key)

    def _headers(self) -> dict:
        return {
            'Authorization': f"sso-key {self.api_key}:{self.api_secret}",
            'Accept': 'application/json'
        }

    @staticmethod
    def parse_quote(data: dict) -> DomainQuote:
        if 'available' not in data:
            raise DomainProviderError("Registrar response missing 'available'")
        price = data.get('price')
        return DomainQuote(
            available=bool(data['available']),
            price=price / PRICE_DIVISOR if price else None,
            currency=data.get('currency') or 'USD'
        )

    async def _fetch(self, session: aiohttp.ClientSession, domain: str) -> dict:
        async with session.get(self.api_url, params={'domain': domain}, headers=self._headers()) as response:
            if response.status in (401, 403):
                raise DomainProviderError(f"Registrar rejected credentials ({response.status})")
            response.raise_for_status()
            return await response.json()

    async def available(self, domain: str) -> DomainQuote:
        if not self.configured:
            raise ProviderNotConfiguredError("Registrar API key not configured")

        try:
            if self._session is not None:
                data = await self._fetch(self._session, domain)
            else:
                timeout = aiohttp.ClientTimeout(total=self.timeout)
                async with aiohttp.ClientSession(timeout=timeout) as session:
                    data = await self._fetch(session, domain)
        except DomainProviderError:
            raise
        except Exception as e:
            raise DomainProviderError(f"Registrar lookup failed for {domain}: {e}") from e

        return self.parse_quote(data)
