"""Shared fixtures wiring the client, cache and services to fakes."""

import pytest

from flightboard.cache import TTLCache
from flightboard.ingestion import AeroDataBoxClient
from flightboard.services import FlightDataService, FlightLocator
from flightboard.usage import UsageCounter
from tests.fakes import FakeSession, FakeClock


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def usage():
    return UsageCounter(limit=2500)


@pytest.fixture
def cache(clock):
    return TTLCache(ttl_seconds=120, clock=clock)


@pytest.fixture
def client(session, usage):
    return AeroDataBoxClient(
        api_key='test-key',
        host='aerodatabox.p.rapidapi.com',
        base_url='https://aerodatabox.p.rapidapi.com',
        timeout=15,
        usage=usage,
        session=session,
    )


@pytest.fixture
def service(client, cache):
    return FlightDataService(client=client, cache=cache)


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def locator(service, sleeps):
    return FlightLocator(service, pacing_seconds=0.3, sleep=sleeps.append)
