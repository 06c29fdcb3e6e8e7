"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from loan_gateway.config import settings
from loan_gateway.domain.engine import DecisionEngine
from loan_gateway.domain.policy import LoanPolicy

# Stateless, so one engine serves every request
_engine = DecisionEngine(policy=LoanPolicy.from_settings(settings))


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_decision_engine() -> DecisionEngine:
    """Provide the shared decision engine instance"""
    return _engine
