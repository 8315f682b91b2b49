"""
Ledger models - participants, cost events and derived results.

Design principles:
- Cost events are ground truth; balances and transfers are always derived
- All amounts are Money (exact decimal), already in the trip's base currency
- Models are frozen: the calculator only ever reads them
- Shares default to empty, meaning "split equally among participants"
"""

from typing import Dict, List, Optional
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from tripledger.core.money import MINOR_UNIT_SCALE, Money


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _check_minor_units(value: Money, label: str) -> Money:
    if value != value.round(MINOR_UNIT_SCALE):
        raise ValueError(f"{label} must be a whole number of cents, got {value}")
    return value


class EventKind(str, Enum):
    EXPENSE = "expense"
    SETTLEMENT = "settlement"


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"  # only counted in the creator's personal totals


class Category(str, Enum):
    FOOD = "food"
    STAY = "stay"
    TRANSPORT = "transport"
    ACTIVITY = "activity"
    ESSENTIALS = "essentials"


class ParticipantStatus(str, Enum):
    ACTIVE = "active"
    BLOCKED = "blocked"
    PENDING = "pending"


class Participant(BaseModel):
    """Trip member. Never deleted, only blocked, so old events stay attributable."""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    name: str = ""
    status: ParticipantStatus = ParticipantStatus.ACTIVE
    budget: Optional[Money] = None  # personal trip budget


class CostEvent(BaseModel):
    """
    An expense or a settlement.

    Invariants:
    - amount >= 0
    - amount and shares are whole cents
    - participants has no duplicates
    - a settlement has exactly one participant: the recipient
    - if shares is non-empty its values should sum to amount (not enforced,
      see tripledger.utils.split_validation)
    """
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    payer: str
    amount: Money
    participants: List[str] = []
    shares: Dict[str, Money] = {}

    kind: EventKind = EventKind.EXPENSE
    visibility: Visibility = Visibility.PUBLIC
    creator: Optional[str] = None  # defaults to the payer

    # Display only; never used for balance math
    category: Category = Category.ESSENTIALS
    title: str = ""
    timestamp: datetime = Field(default_factory=_utcnow)

    @field_validator("amount")
    @classmethod
    def amount_not_negative(cls, value: Money) -> Money:
        if value < 0:
            raise ValueError(f"Amount must be non-negative, got {value}")
        return _check_minor_units(value, "Amount")

    @field_validator("shares")
    @classmethod
    def shares_in_minor_units(cls, value: Dict[str, Money]) -> Dict[str, Money]:
        for participant_id, share in value.items():
            _check_minor_units(share, f"Share for '{participant_id}'")
        return value

    @field_validator("participants")
    @classmethod
    def participants_unique(cls, value: List[str]) -> List[str]:
        if len(set(value)) != len(value):
            raise ValueError("Participants must not repeat")
        return value

    @model_validator(mode="after")
    def settlement_has_one_recipient(self) -> "CostEvent":
        if self.kind == EventKind.SETTLEMENT and len(self.participants) != 1:
            raise ValueError(
                f"A settlement needs exactly one recipient, got {len(self.participants)}"
            )
        return self

    @property
    def created_by(self) -> str:
        return self.creator or self.payer

    @property
    def is_private(self) -> bool:
        return self.visibility == Visibility.PRIVATE

    @property
    def is_settlement(self) -> bool:
        return self.kind == EventKind.SETTLEMENT

    @property
    def has_custom_split(self) -> bool:
        return bool(self.shares)

    def visible_to(self, viewer_id: str) -> bool:
        return not self.is_private or self.created_by == viewer_id

    def consumer_ids(self) -> List[str]:
        """Participants in order, then any share holders not listed as participants."""
        ids = list(self.participants)
        ids.extend(pid for pid in self.shares if pid not in self.participants)
        return ids

    def share_of(self, participant_id: str) -> Money:
        """Explicit share if given, else an equal allocation among participants."""
        if participant_id in self.shares:
            return self.shares[participant_id]
        if participant_id in self.participants:
            parts = self.amount.allocate(len(self.participants))
            return parts[self.participants.index(participant_id)]
        return Money.zero()

    def charged_total(self) -> Money:
        """What the consumers are charged in total. Equals amount when the split is consistent."""
        return Money.sum(self.share_of(pid) for pid in self.consumer_ids())


class Transfer(BaseModel):
    """Suggested payment. Derived, never stored as ground truth."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_id: str = Field(alias="from")
    to_id: str = Field(alias="to")
    amount: Money


class InconsistentSplit(BaseModel):
    """Advisory: an event whose charged shares do not add up to its amount."""
    event_id: str
    amount: Money
    shares_total: Money
    drift: Money  # shares_total - amount


class BalanceResult(BaseModel):
    """
    Output of a balance calculation for one viewer.

    net_balances: positive = net creditor, negative = net debtor
    pairwise_debt: positive = they owe the viewer, negative = the viewer owes them
    """
    net_balances: Dict[str, Money]
    pairwise_debt: Dict[str, Money]
    smart_transfers: List[Transfer] = []

    my_total_spend: Money
    my_total_paid: Money
    my_total_received: Money

    group_total_spend: Money
    category_spend: Dict[Category, Money] = {}

    split_warnings: List[InconsistentSplit] = []
