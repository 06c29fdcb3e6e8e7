"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from loan_gateway.api.main import create_app
from loan_gateway.api.dependencies import get_decision_engine
from loan_gateway.domain.engine import DecisionEngine
from loan_gateway.domain.policy import LoanPolicy


# Frozen "today" for age calculations
TODAY = date(2025, 1, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def policy() -> LoanPolicy:
    """Default Estonian policy: 2000-10000 EUR, 12-60 months, ages 18-75"""
    return LoanPolicy()


@pytest.fixture
def engine(policy: LoanPolicy, today: date) -> DecisionEngine:
    """Decision engine with a frozen clock"""
    return DecisionEngine(policy=policy, clock=lambda: today)


@pytest.fixture
def client(engine: DecisionEngine) -> TestClient:
    """Create FastAPI test client with a frozen-clock engine"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)
