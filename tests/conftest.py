"""Pytest fixtures for testing"""

import httpx
import pytest
from datetime import date
from fastapi.testclient import TestClient
from wealth_engine.api.main import create_app
from wealth_engine.api.dependencies import get_rate_provider
from wealth_engine.domain.models import Obligation, Position, PositionCategory
from wealth_engine.infrastructure.cache import RateCache
from wealth_engine.infrastructure.clients.reference_rate import ReferenceRateClient, ReferenceRateProvider


REFERENCE_RATE = 14.90


def bcb_handler(request: httpx.Request) -> httpx.Response:
    """Stand-in for the BCB SGS endpoint"""
    return httpx.Response(200, json=[{"data": "16/10/2026", "valor": "14.90"}])


@pytest.fixture
def rate_provider() -> ReferenceRateProvider:
    """Provider backed by an in-process transport with a fresh cache"""
    client = ReferenceRateClient(url="https://bcb.test/sgs", transport=httpx.MockTransport(bcb_handler))
    return ReferenceRateProvider(client=client, cache=RateCache(ttl_seconds=3600))


@pytest.fixture
def client(rate_provider: ReferenceRateProvider) -> TestClient:
    """Create FastAPI test client with an isolated rate provider"""
    app = create_app()
    app.dependency_overrides[get_rate_provider] = lambda: rate_provider
    return TestClient(app)


@pytest.fixture
def start_date() -> date:
    return date(2026, 10, 19)


@pytest.fixture
def sample_positions() -> list[Position]:
    """A taxable CDB and an exempt LCI"""
    return [
        Position(
            position_id="cdb_1",
            name="CDB Bank A",
            category=PositionCategory.CDB,
            principal=10000.0,
            rate_multiplier_percent=110.0,
            deposit_date=date(2025, 10, 19),
        ),
        Position(
            position_id="lci_1",
            name="LCI Bank B",
            category=PositionCategory.LCI,
            principal=5000.0,
            rate_multiplier_percent=90.0,
            deposit_date=date(2026, 4, 1),
            tax_exempt=True,
        ),
    ]


@pytest.fixture
def sample_obligations() -> list[Obligation]:
    """A 12x purchase and a single deferred bill"""
    return [
        Obligation(
            obligation_id="notebook",
            description="Notebook",
            total_amount=1200.0,
            installments=12,
            current_installment=1,
            start_date=date(2026, 10, 5),
            category="electronics",
        ),
        Obligation(
            obligation_id="ipva",
            description="Vehicle tax",
            total_amount=900.0,
            installments=1,
            current_installment=1,
            start_date=date(2027, 1, 10),
            category="vehicle",
            payment_date=date(2027, 1, 10),
        ),
    ]
