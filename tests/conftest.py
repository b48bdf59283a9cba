"""Shared fixtures for Cavos SDK tests."""

from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

from cavos_sdk.core.config import CavosConfig

from . import TEST_CONFIG


def build_response(status=200, payload=None, headers=None, json_error=None):
    """Mock aiohttp response."""
    response = MagicMock()
    response.status = status
    response.headers = headers or {}
    if json_error is not None:
        response.json = AsyncMock(side_effect=json_error)
    else:
        response.json = AsyncMock(return_value=payload)
    return response


def build_session(*outcomes):
    """Mock aiohttp session whose ``request`` yields the given outcomes in order.

    Each outcome is either a mock response or an exception to raise.
    """
    session = MagicMock()
    session.closed = False
    effects = []
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            effects.append(outcome)
            continue
        context = MagicMock()
        context.__aenter__ = AsyncMock(return_value=outcome)
        context.__aexit__ = AsyncMock(return_value=None)
        effects.append(context)
    session.request.side_effect = effects
    return session


def build_supabase(*outcomes):
    """Mock async Supabase client; each ``execute()`` yields the next row or exception."""
    client = MagicMock()
    query = client.table.return_value
    query.select.return_value = query
    query.eq.return_value = query
    query.maybe_single.return_value = query
    query.execute = AsyncMock(side_effect=[
        outcome if isinstance(outcome, BaseException) else Mock(data=outcome)
        for outcome in outcomes
    ])
    return client


@pytest.fixture
def config():
    """Test configuration."""
    return CavosConfig(**TEST_CONFIG)


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def make_session():
    return build_session


@pytest.fixture
def make_supabase():
    return build_supabase
