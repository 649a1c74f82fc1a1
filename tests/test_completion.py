import asyncio
from types import SimpleNamespace

import pytest

from namecraft.exceptions import CompletionTimeoutError, ProviderError
from namecraft.generators.completion import CompletionClient, OpenAIProvider

from conftest import RecordingSleep


class ScriptedProvider:
    """Replays a list of outcomes: strings are returned, exceptions raised."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    async def send(self, prompt, max_tokens):
        self.calls.append((prompt, max_tokens))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class HangingProvider:
    def __init__(self):
        self.calls = 0

    async def send(self, prompt, max_tokens):
        self.calls += 1
        await asyncio.sleep(10)
        return "too late"


def test_first_attempt_success():
    provider = ScriptedProvider(['{"names": []}'])
    sleep = RecordingSleep()
    client = CompletionClient(provider, max_tokens=123, sleep=sleep)

    assert asyncio.run(client.call_provider("prompt")) == '{"names": []}'
    assert provider.calls == [("prompt", 123)]
    assert sleep.delays == []


def test_retries_with_linear_backoff_then_succeeds():
    provider = ScriptedProvider([ProviderError("a"), ProviderError("b"), "ok"])
    sleep = RecordingSleep()
    client = CompletionClient(provider, sleep=sleep)

    assert asyncio.run(client.call_provider("prompt")) == "ok"
    assert len(provider.calls) == 3
    assert sleep.delays == [1.0, 2.0]


def test_exhausted_retries_raise_last_error_unchanged():
    errors = [ProviderError(str(i)) for i in range(4)]
    provider = ScriptedProvider(errors)
    sleep = RecordingSleep()
    client = CompletionClient(provider, max_retries=3, sleep=sleep)

    with pytest.raises(ProviderError) as excinfo:
        asyncio.run(client.call_provider("prompt"))

    assert excinfo.value is errors[-1]
    assert len(provider.calls) == 4
    assert sleep.delays == [1.0, 2.0, 3.0]


def test_foreign_errors_are_wrapped():
    provider = ScriptedProvider([ConnectionError("reset")])
    client = CompletionClient(provider, max_retries=0, sleep=RecordingSleep())

    with pytest.raises(ProviderError) as excinfo:
        asyncio.run(client.call_provider("prompt"))

    assert isinstance(excinfo.value.__cause__, ConnectionError)


def test_timeout_counts_as_failed_attempt():
    provider = HangingProvider()
    sleep = RecordingSleep()
    client = CompletionClient(provider, timeout=0.01, max_retries=1, sleep=sleep)

    with pytest.raises(CompletionTimeoutError):
        asyncio.run(client.call_provider("prompt"))

    assert provider.calls == 2
    assert sleep.delays == [1.0]


def test_openai_provider_sends_chat_request():
    captured = {}

    class FakeCompletions:
        async def create(self, **kwargs):
            captured.update(kwargs)
            message = SimpleNamespace(content='{"names": []}')
            return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    fake_client = SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions()))
    provider = OpenAIProvider(model="test-model", temperature=0.5, client=fake_client)

    text = asyncio.run(provider.send("make names", 256))

    assert text == '{"names": []}'
    assert captured["model"] == "test-model"
    assert captured["max_tokens"] == 256
    assert captured["temperature"] == 0.5
    assert captured["messages"][-1] == {"role": "user", "content": "make names"}


def test_openai_provider_without_key_raises_provider_error(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    provider = OpenAIProvider()

    with pytest.raises(ProviderError):
        asyncio.run(provider.send("prompt", 10))
