import pytest
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient

from main import app
from tripledger.core.money import Money
from tripledger.models.ledger import CostEvent, EventKind, Participant

BASE_TIME = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def client():
    """Fixture for FastAPI test client."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def roster():
    """Three trip members: A, B and C."""
    return [
        Participant(id="A", name="Alice", budget=Money(500)),
        Participant(id="B", name="Bob", budget=Money(300)),
        Participant(id="C", name="Charlie"),
    ]


@pytest.fixture
def make_event():
    """Factory for cost events; defaults to A paying 100 split among A, B, C."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "id": f"event-{counter['n']}",
            "payer": "A",
            "amount": Money(100),
            "participants": ["A", "B", "C"],
            "timestamp": BASE_TIME + timedelta(hours=counter["n"]),
        }
        data.update(overrides)
        return CostEvent(**data)

    return _make


@pytest.fixture
def make_settlement(make_event):
    def _make(payer, recipient, amount, **overrides):
        return make_event(
            payer=payer,
            participants=[recipient],
            amount=Money(amount),
            kind=EventKind.SETTLEMENT,
            **overrides,
        )

    return _make
