'''
Shared fixtures for watsonx-gateway tests.
'''

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from watsonx_gateway.auth import TokenCache
from watsonx_gateway.core import WatsonxConfig
from watsonx_gateway.models import TokenResponse
from watsonx_gateway.services import AgentGateway, WatsonxClient


class FakeClock:
    '''
    Controllable replacement for the token cache clock.
    '''

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def watsonx_config() -> WatsonxConfig:
    return WatsonxConfig(
        api_key='test-api-key',
        space_id='space-123',
        endpoint='https://wx.example.test',
        iam_url='https://iam.example.test/identity/token',
    )


@pytest.fixture
def unconfigured_config() -> WatsonxConfig:
    return WatsonxConfig(
        api_key=None,
        space_id='space-123',
        endpoint='https://wx.example.test',
        iam_url='https://iam.example.test/identity/token',
    )


@pytest.fixture
def fake_client() -> AsyncMock:
    '''
    Remote capability double: IAM returns token "T" for an hour and
    generation returns "Hello".
    '''
    client = AsyncMock(spec=WatsonxClient)
    client.fetch_token.return_value = TokenResponse(access_token='T', expires_in=3600)
    client.generate.return_value = {'results': [{'generated_text': 'Hello'}]}
    return client


@pytest.fixture
def token_cache(fake_client, watsonx_config, clock) -> TokenCache:
    return TokenCache(fake_client, config=watsonx_config, clock=clock)


@pytest.fixture
def gateway(token_cache, fake_client, watsonx_config) -> AgentGateway:
    return AgentGateway(token_cache, fake_client, config=watsonx_config)
