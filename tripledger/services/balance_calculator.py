"""
Balance calculator - folds cost events into balances and a settlement plan.

Core algorithm:
1. Net balance per participant: paid minus consumed, over public events
2. Pairwise debt from the viewer's side, event by event (uncompressed)
3. Personal totals for the viewer (spend, paid, received, per category)
4. Smart transfers: greedy largest-first matching over net balances

Everything here is a pure function of its arguments. Nothing is cached and
no argument is mutated, so concurrent calls with separate inputs are safe.
"""

import logging
from typing import Dict, Iterable, List, Mapping

from tripledger.core.config import settings
from tripledger.core.money import Money
from tripledger.models.ledger import (
    BalanceResult,
    Category,
    CostEvent,
    EventKind,
    Participant,
    Transfer,
)
from tripledger.utils.split_validation import find_inconsistent_splits

logger = logging.getLogger(__name__)

SETTLE_THRESHOLD = Money(settings.SETTLE_THRESHOLD)


def consumers(event: CostEvent) -> List[str]:
    """Ids consuming from an event: participants, then any extra share holders."""
    return event.consumer_ids()


def member_share(event: CostEvent, participant_id: str) -> Money:
    """
    How much `participant_id` consumes from `event`.

    Explicit shares win. Otherwise participants split the amount equally via
    Money.allocate, so the per-person values add back up to the amount.
    """
    return event.share_of(participant_id)


def calculate_balances(
    events: Iterable[CostEvent],
    roster: Iterable[Participant],
    viewer_id: str,
) -> BalanceResult:
    """Calculate all balances for `viewer_id` in a single pass over `events`."""
    zero = Money.zero()
    events = list(events)
    roster_ids = [member.id for member in roster]

    net_balances: Dict[str, Money] = {pid: zero for pid in roster_ids}
    pairwise_debt: Dict[str, Money] = {pid: zero for pid in roster_ids if pid != viewer_id}
    category_spend: Dict[Category, Money] = {category: zero for category in Category}

    my_spend = zero
    my_paid = zero
    my_received = zero
    group_total = zero

    public_events = []

    for event in events:
        if not event.visible_to(viewer_id):
            continue

        # Personal totals include the viewer's own private events
        if event.kind == EventKind.EXPENSE:
            my_share = member_share(event, viewer_id)
            my_spend = my_spend + my_share
            category_spend[event.category] = category_spend[event.category] + my_share
            if event.payer == viewer_id:
                my_paid = my_paid + event.amount
        else:
            if event.payer == viewer_id:
                my_paid = my_paid + event.amount
            if viewer_id in event.participants:
                my_received = my_received + event.amount

        if event.is_private:
            continue
        public_events.append(event)

        if event.kind == EventKind.EXPENSE:
            group_total = group_total + event.amount

        # Payer is credited the full amount they fronted
        net_balances[event.payer] = net_balances.get(event.payer, zero) + event.amount

        for consumer_id in consumers(event):
            share = member_share(event, consumer_id)
            net_balances[consumer_id] = net_balances.get(consumer_id, zero) - share

            if consumer_id == event.payer:
                continue
            if event.payer == viewer_id:
                pairwise_debt[consumer_id] = pairwise_debt.get(consumer_id, zero) + share
            elif consumer_id == viewer_id:
                pairwise_debt[event.payer] = pairwise_debt.get(event.payer, zero) - share

    split_warnings = find_inconsistent_splits(public_events)
    for warning in split_warnings:
        logger.warning(
            "Event %s shares total %s but amount is %s (drift %s)",
            warning.event_id, warning.shares_total, warning.amount, warning.drift,
        )

    imbalance = Money.sum(net_balances.values())
    if imbalance:
        logger.warning("Net balances do not sum to zero (off by %s)", imbalance)

    smart_transfers = calculate_smart_transfers(net_balances)

    logger.debug(
        "Balances for %s: %d events (%d public), %d participants, %d transfers",
        viewer_id, len(events), len(public_events), len(net_balances), len(smart_transfers),
    )

    return BalanceResult(
        net_balances=net_balances,
        pairwise_debt=pairwise_debt,
        smart_transfers=smart_transfers,
        my_total_spend=my_spend,
        my_total_paid=my_paid,
        my_total_received=my_received,
        group_total_spend=group_total,
        category_spend=category_spend,
        split_warnings=split_warnings,
    )


def calculate_smart_transfers(net_balances: Mapping[str, Money]) -> List[Transfer]:
    """
    Smart split - minimise the number of transfers.

    Debtors (most negative first) are matched against creditors (most
    positive first); every step fully settles at least one of the two, so a
    balanced ledger needs at most (non-zero participants - 1) transfers.
    Balances within SETTLE_THRESHOLD of zero are treated as settled.
    """
    threshold = SETTLE_THRESHOLD

    # [id, remaining balance]; ties broken by id so the plan is deterministic
    debtors = sorted(
        ([pid, Money.from_value(amount)] for pid, amount in net_balances.items() if amount < -threshold),
        key=lambda entry: (entry[1], entry[0]),
    )
    creditors = sorted(
        ([pid, Money.from_value(amount)] for pid, amount in net_balances.items() if amount > threshold),
        key=lambda entry: (-entry[1], entry[0]),
    )

    transfers: List[Transfer] = []
    i = 0
    j = 0

    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]

        settle = min(debtor[1].abs(), creditor[1]).round(2)

        if settle > 0:
            transfers.append(Transfer(from_id=debtor[0], to_id=creditor[0], amount=settle))

        debtor[1] = debtor[1] + settle
        creditor[1] = creditor[1] - settle

        if debtor[1].abs() < threshold:
            i += 1
        if creditor[1].abs() < threshold:
            j += 1

    return transfers


def apply_transfers(
    net_balances: Mapping[str, Money],
    transfers: Iterable[Transfer],
) -> Dict[str, Money]:
    """Replay a settlement plan against net balances (returns a new dict)."""
    zero = Money.zero()
    remaining = {pid: Money.from_value(amount) for pid, amount in net_balances.items()}
    for transfer in transfers:
        remaining[transfer.from_id] = remaining.get(transfer.from_id, zero) + transfer.amount
        remaining[transfer.to_id] = remaining.get(transfer.to_id, zero) - transfer.amount
    return remaining
