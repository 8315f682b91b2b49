from typing import Dict, List, Optional

from tripledger.core.money import Money, Numeric
from tripledger.utils.split_validation import SplitValidationError, validate_custom_split

class SplitService:
    @staticmethod
    def equal_split(amount: Numeric, participant_ids: List[str]) -> Dict[str, Money]:
        """
        Explicit equal shares for storing with an expense.

        Uses the allocator so no minor unit is lost: 100 among three is
        33.34 / 33.33 / 33.33, with the extra cent going to the first listed.
        """
        if not participant_ids:
            raise SplitValidationError("Cannot split an amount among zero participants")
        if len(set(participant_ids)) != len(participant_ids):
            raise SplitValidationError("Participants must not repeat")

        parts = Money(amount).allocate(len(participant_ids))
        return dict(zip(participant_ids, parts))

    @staticmethod
    def custom_split(
        amount: Numeric,
        shares: Dict[str, Numeric],
        tolerance: Optional[Numeric] = None,
    ) -> Dict[str, Money]:
        """Validate entered amounts and return them as Money."""
        validate_custom_split(amount, shares, tolerance)
        return {participant_id: Money.from_value(value) for participant_id, value in shares.items()}
