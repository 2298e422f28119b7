"""Fixtures for API tests."""

import pytest

from contextflow.interfaces.api.app import create_app


@pytest.fixture
def app(collector):
    """Falcon ASGI app bound to the fake-backed collector, with lifespan."""
    return create_app(collector)


@pytest.fixture
async def conductor(app):
    """ASGI conductor: runs startup before the test and the final flush after."""
    from falcon.testing import ASGIConductor

    async with ASGIConductor(app) as conductor:
        yield conductor
