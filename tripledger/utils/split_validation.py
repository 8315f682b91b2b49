"""Split validation utilities."""
from typing import Dict, Iterable, List, Optional

from tripledger.core.config import settings
from tripledger.core.exceptions import LedgerError
from tripledger.core.money import Money, Numeric
from tripledger.models.ledger import CostEvent, InconsistentSplit


class SplitValidationError(LedgerError):
    """Custom exception for split validation errors."""
    pass


def _tolerance(tolerance: Optional[Numeric]) -> Money:
    return Money(settings.SPLIT_TOLERANCE if tolerance is None else tolerance)


def split_drift(event: CostEvent) -> Money:
    """
    What the consumers are charged minus the amount. Zero for equal splits.

    Participants without an explicit share are charged their equal allocation,
    so shares that cover only some participants still show up as drift.
    """
    if not event.shares:
        return Money.zero()
    return event.charged_total() - event.amount


def validate_custom_split(
    amount: Numeric,
    shares: Dict[str, Numeric],
    tolerance: Optional[Numeric] = None,
) -> None:
    """
    Validate custom split amounts as entered on the expense form.

    Rules:
    - at least one share
    - no share may be negative
    - shares must sum to amount within tolerance (one minor unit by default)
    """
    if not shares:
        raise SplitValidationError("Custom split needs at least one share")

    total = Money(amount)
    shares_total = Money.zero()
    for participant_id, value in shares.items():
        share = Money(value)
        if share < 0:
            raise SplitValidationError(
                f"Share for '{participant_id}' is negative: {share}"
            )
        shares_total = shares_total + share

    drift = shares_total - total
    if drift.abs() > _tolerance(tolerance):
        raise SplitValidationError(
            f"Shares sum ({shares_total}) does not equal amount ({total})"
        )


def find_inconsistent_splits(
    events: Iterable[CostEvent],
    tolerance: Optional[Numeric] = None,
) -> List[InconsistentSplit]:
    """Events whose explicit shares drift from the amount by more than tolerance."""
    limit = _tolerance(tolerance)
    found = []
    for event in events:
        drift = split_drift(event)
        if drift.abs() > limit:
            found.append(InconsistentSplit(
                event_id=event.id,
                amount=event.amount,
                shares_total=event.amount + drift,
                drift=drift,
            ))
    return found
