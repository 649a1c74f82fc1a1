"""Completion provider client with timeout and retry."""

import asyncio
import logging
import os
from enum import Enum
from typing import Awaitable, Callable, Optional

from openai import AsyncOpenAI

from ..exceptions import CompletionTimeoutError, ProviderError
from .prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class OpenAIProvider:
    """Chat-completion backend built on the OpenAI SDK."""

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        temperature: float = 0.8,
        api_key: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None
    ):
        self.model = model
        self.temperature = temperature
        self._api_key = api_key or os.environ.get('OPENAI_API_KEY')
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        # Created lazily so that a missing key only fails on first use
        if self._client is None:
            if not self._api_key:
                raise ProviderError("OPENAI_API_KEY not configured")
            self._client = AsyncOpenAI(api_key=self._api_key, max_retries=0)
        return self._client

    async def send(self, prompt: str, max_tokens: int) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt}
                ],
                max_tokens=max_tokens,
                temperature=self.temperature,
                response_format={"type": "json_object"}
            )
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderError(f"Completion request failed: {e}") from e

        content = response.choices[0].message.content
        if content is None:
            raise ProviderError("Completion returned no content")
        return content


class RetryState(str, Enum):
    ATTEMPT = 'attempt'
    WAIT = 'wait'
    RETRY = 'retry'
    FAIL = 'fail'
    DONE = 'done'


class CompletionClient:
    """Sends prompts with a hard per-attempt timeout and linear back-off.

    Runs ATTEMPT -> WAIT -> RETRY -> ATTEMPT ... until an attempt succeeds
    or ``max_retries`` retries have been spent, then FAIL raises the last
    error.
    """

    def __init__(
        self,
        provider,
        timeout: float = 30.0,
        max_retries: int = 3,
        backoff_base: float = 1.0,
        max_tokens: int = 4000,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        self.provider = provider
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_base = backoff_base
        self.max_tokens = max_tokens
        self._sleep = sleep

    def backoff_delay(self, retry_count: int) -> float:
        return self.backoff_base * (retry_count + 1)

    async def _attempt(self, prompt: str) -> str:
        try:
            return await asyncio.wait_for(
                self.provider.send(prompt, self.max_tokens),
                timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            raise CompletionTimeoutError(f"Completion timed out after {self.timeout}s") from e

    async def call_provider(self, prompt: str) -> str:
        state = RetryState.ATTEMPT
        retry_count = 0
        last_error: Optional[BaseException] = None
        text = ''

        while state not in (RetryState.DONE, RetryState.FAIL):
            if state is RetryState.ATTEMPT:
                try:
                    text = await self._attempt(prompt)
                    state = RetryState.DONE
                except Exception as e:
                    last_error = e
                    state = RetryState.WAIT if retry_count < self.max_retries else RetryState.FAIL

            elif state is RetryState.WAIT:
                logger.warning(f"Completion retry {retry_count + 1}/{self.max_retries}: {last_error}")
                await self._sleep(self.backoff_delay(retry_count))
                state = RetryState.RETRY

            elif state is RetryState.RETRY:
                retry_count += 1
                state = RetryState.ATTEMPT

        if state is RetryState.FAIL:
            logger.error(f"Completion failed after {retry_count} retries: {last_error}")
            if isinstance(last_error, ProviderError):
                raise last_error
            raise ProviderError(str(last_error)) from last_error

        return text
