import math
from typing import Iterable, Optional
from datetime import datetime, timezone

from tripledger.core.config import settings
from tripledger.core.money import Money
from tripledger.models.ledger import CostEvent, Participant
from tripledger.schemas.balance import BudgetSummaryResponse
from tripledger.services.balance_calculator import calculate_balances


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _burn_rate(spent: Money, budget: Money) -> float:
    if budget <= 0:
        return 0.0
    return round(spent.divide(budget.to_decimal()).multiply(100).to_float(), 2)


class BudgetService:
    @staticmethod
    def summarize(
        events: Iterable[CostEvent],
        roster: Iterable[Participant],
        viewer_id: str,
        trip_end: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> BudgetSummaryResponse:
        """
        Spending overview for one viewer.

        - budget burn: the viewer's share of expenses against their budget
        - group burn: all public expenses against the sum of member budgets
        - recent transactions: newest visible events with a positive amount
        """
        events = list(events)
        roster = list(roster)
        result = calculate_balances(events, roster, viewer_id)

        viewer = next((member for member in roster if member.id == viewer_id), None)
        budget = viewer.budget if viewer and viewer.budget is not None else Money.zero()
        group_budget = Money.sum(member.budget for member in roster if member.budget is not None)

        recent = sorted(
            (event for event in events if event.visible_to(viewer_id) and event.amount > 0),
            key=lambda event: _as_utc(event.timestamp),
            reverse=True,
        )[:settings.RECENT_TRANSACTIONS_LIMIT]

        days_until_end = None
        if trip_end is not None:
            now = _as_utc(now or datetime.now(timezone.utc))
            seconds_left = (_as_utc(trip_end) - now).total_seconds()
            days_until_end = max(0, math.ceil(seconds_left / 86400))

        return BudgetSummaryResponse(
            viewer_id=viewer_id,
            my_total_spend=result.my_total_spend,
            budget=budget,
            remaining_budget=budget - result.my_total_spend,
            burn_rate=min(_burn_rate(result.my_total_spend, budget), 100.0),
            group_total_spend=result.group_total_spend,
            group_budget=group_budget,
            group_burn_rate=_burn_rate(result.group_total_spend, group_budget),
            over_group_budget=result.group_total_spend > group_budget,
            category_spend=result.category_spend,
            recent_transactions=recent,
            days_until_end=days_until_end,
        )
