import pytest
from pydantic import ValidationError

from tripledger.core.money import Money
from tripledger.models.ledger import (
    BalanceResult,
    Category,
    CostEvent,
    EventKind,
    Participant,
    ParticipantStatus,
    Transfer,
    Visibility,
)


def test_cost_event_defaults():
    event = CostEvent(payer="A", amount="12.50", participants=["A", "B"])

    assert event.amount == Money("12.50")
    assert event.kind == EventKind.EXPENSE
    assert event.visibility == Visibility.PUBLIC
    assert event.category == Category.ESSENTIALS
    assert event.shares == {}
    assert event.created_by == "A"
    assert event.has_custom_split is False
    assert event.id


def test_cost_event_rejects_negative_amount():
    with pytest.raises(ValidationError):
        CostEvent(payer="A", amount=-1, participants=["A"])


def test_cost_event_rejects_bad_amount():
    with pytest.raises(ValidationError):
        CostEvent(payer="A", amount="ten", participants=["A"])


@pytest.mark.parametrize("amount", ["10.005", "0.001", Money("99.999")])
def test_cost_event_rejects_sub_cent_amount(amount):
    with pytest.raises(ValidationError, match="whole number of cents"):
        CostEvent(payer="A", amount=amount, participants=["A", "B"])


def test_cost_event_rejects_sub_cent_share():
    with pytest.raises(ValidationError, match="Share for 'B'"):
        CostEvent(payer="A", amount=10, participants=["A", "B"], shares={"A": "4.995", "B": "5.005"})


def test_cost_event_accepts_trailing_zeros():
    event = CostEvent(payer="A", amount="10.500", participants=["A", "B"], shares={"A": "5.250", "B": "5.25"})
    assert event.amount == Money("10.50")
    assert event.charged_total() == event.amount


def test_cost_event_rejects_duplicate_participants():
    with pytest.raises(ValidationError):
        CostEvent(payer="A", amount=10, participants=["A", "A"])


@pytest.mark.parametrize("participants", [[], ["B", "C"]])
def test_settlement_needs_exactly_one_recipient(participants):
    with pytest.raises(ValidationError):
        CostEvent(payer="A", amount=10, participants=participants, kind=EventKind.SETTLEMENT)


def test_cost_event_is_frozen():
    event = CostEvent(payer="A", amount=10, participants=["A"])
    with pytest.raises(ValidationError):
        event.amount = Money(20)


def test_visibility():
    event = CostEvent(payer="A", creator="B", amount=10, participants=["A"], visibility="private")
    assert event.is_private
    assert event.visible_to("B")
    assert not event.visible_to("A")


def test_participant_defaults():
    member = Participant(id="A", name="Alice")
    assert member.status == ParticipantStatus.ACTIVE
    assert member.budget is None


def test_transfer_aliases():
    transfer = Transfer.model_validate({"from": "B", "to": "A", "amount": "40"})
    assert transfer.from_id == "B"
    assert transfer.model_dump(by_alias=True, mode="json") == {"from": "B", "to": "A", "amount": "40"}


def test_cost_event_json_round_trip():
    event = CostEvent(payer="A", amount="9.99", participants=["A", "B"], shares={"A": "4.99", "B": 5})
    restored = CostEvent.model_validate_json(event.model_dump_json())
    assert restored.model_dump() == event.model_dump()


def test_balance_result_serializes_money_as_strings():
    result = BalanceResult(
        net_balances={"A": Money(60)},
        pairwise_debt={"B": Money(30)},
        my_total_spend=Money(30),
        my_total_paid=Money(90),
        my_total_received=Money(0),
        group_total_spend=Money(90),
    )
    data = result.model_dump(mode="json")
    assert data["net_balances"] == {"A": "60"}
    assert data["my_total_paid"] == "90"
