"""Pure settlement logic. No I/O, no side effects."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from .models import Balance, Participant, ParticipantTotals, SettlementSummary, Transfer

CENT = Decimal("0.01")

# Residuals closer to zero than this are treated as settled
EPSILON = Decimal("0.01")


class InvalidInputError(ValueError):
    """Participant list violates the engine's preconditions."""

    kind = "validation"


def round2(amount: Decimal) -> Decimal:
    """Round to cents, half away from zero."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def validate_participants(participants: Sequence[Participant]) -> None:
    """
    Check the preconditions of the settlement engine.

    Duplicate names are not checked here; the roster enforces those.

    Args:
        participants: Participants to validate

    Raises:
        InvalidInputError: On a negative or non-finite amount, an empty name,
            or a duplicate id
    """
    seen_ids: set[int] = set()
    for p in participants:
        if not p.paid.is_finite():
            raise InvalidInputError(f"{p.name}: amount must be a finite number, got {p.paid}")
        if p.paid < 0:
            raise InvalidInputError(f"{p.name}: amount can't be negative, got {p.paid}")
        if not p.name or not p.name.strip():
            raise InvalidInputError(f"Participant {p.id} has an empty name")
        if p.id in seen_ids:
            raise InvalidInputError(f"Duplicate participant id {p.id}")
        seen_ids.add(p.id)


def total_paid(participants: Sequence[Participant]) -> Decimal:
    """Sum of everything paid into the pool."""
    return sum((p.paid for p in participants), Decimal("0"))


def fair_share(participants: Sequence[Participant]) -> Decimal:
    """Unrounded per-person share of the pool (0 for an empty list)."""
    if not participants:
        return Decimal("0")
    return total_paid(participants) / len(participants)


def compute_balances(participants: Sequence[Participant]) -> list[Balance]:
    """
    Compute each participant's signed residual (paid minus fair share).

    The fair share is kept unrounded and each residual is rounded to cents.
    Rounding can leave the residuals a few cents off zero, so the leftover
    cents are handed back one at a time to the residuals with the largest
    rounding error in that direction. The rounded residuals then sum to
    exactly zero and none is more than a cent from its unrounded value.

    Args:
        participants: Participants in insertion order

    Returns:
        One Balance per participant, in the same order
    """
    if not participants:
        return []

    if len(participants) == 1:
        p = participants[0]
        return [Balance(participant_id=p.id, name=p.name, residual=Decimal("0.00"))]

    share = fair_share(participants)
    exact = [p.paid - share for p in participants]
    rounded = [round2(r) for r in exact]

    leftover = -sum(rounded, Decimal("0"))
    cents = int((abs(leftover) / CENT).to_integral_value())
    if cents:
        # Rounding error per residual; ties go to the larger rounded value
        # when taking cents away and to the smaller one when adding
        errors = [r - q for r, q in zip(exact, rounded)]
        if leftover > 0:
            order = sorted(range(len(rounded)), key=lambda k: (-errors[k], rounded[k], k))
            step = CENT
        else:
            order = sorted(range(len(rounded)), key=lambda k: (errors[k], -rounded[k], k))
            step = -CENT
        for k in order[:cents]:
            rounded[k] += step

    return [
        Balance(participant_id=p.id, name=p.name, residual=residual)
        for p, residual in zip(participants, rounded)
    ]


def _transfer(debtor: Balance, creditor: Balance, amount: Decimal) -> Transfer:
    return Transfer(
        from_id=debtor.participant_id,
        from_name=debtor.name,
        to_id=creditor.participant_id,
        to_name=creditor.name,
        amount=amount,
    )


def match_transfers(balances: Sequence[Balance]) -> list[Transfer]:
    """
    Turn signed balances into transfers that settle everyone.

    Debtors whose debt exactly cancels a creditor's credit are paired first,
    so those relationships come out as a single transfer. The rest are
    matched greedily: the current debtor pays the current creditor the
    smaller of the two amounts, then whichever side is settled moves on.

    Not a minimum-transaction solver, but never more than n - 1 transfers.

    Args:
        balances: Balances from compute_balances

    Returns:
        List of transfers, exact matches first
    """
    # Working copies: (balance, remaining residual)
    debtors: list[tuple[Balance, Decimal]] = [
        (b, b.residual) for b in balances if b.residual < 0 and abs(b.residual) >= EPSILON
    ]
    creditors: list[tuple[Balance, Decimal]] = [
        (b, b.residual) for b in balances if b.residual > 0 and abs(b.residual) >= EPSILON
    ]

    transfers: list[Transfer] = []

    # Exact matches, scanning debtors from the end
    for d_idx in range(len(debtors) - 1, -1, -1):
        debtor, debt = debtors[d_idx]
        for c_idx, (creditor, credit) in enumerate(creditors):
            if abs(credit + debt) < EPSILON:
                amount = round2(abs(debt))
                if amount > 0:
                    transfers.append(_transfer(debtor, creditor, amount))
                debtors.pop(d_idx)
                creditors.pop(c_idx)
                break

    # Waterfall over whatever is left
    i = 0
    j = 0
    while i < len(debtors) and j < len(creditors):
        debtor, debt = debtors[i]
        creditor, credit = creditors[j]

        pay = min(-debt, credit)
        amount = round2(pay)
        if amount > 0:
            transfers.append(_transfer(debtor, creditor, amount))

        debt += pay
        credit -= pay
        debtors[i] = (debtor, debt)
        creditors[j] = (creditor, credit)

        if abs(debt) < EPSILON:
            i += 1
        if abs(credit) < EPSILON:
            j += 1

    return transfers


def settle(participants: Sequence[Participant]) -> list[Transfer]:
    """
    Compute the transfers that settle a group.

    Args:
        participants: Snapshot of participants (not mutated)

    Returns:
        List of transfers; empty when there is nothing to settle

    Raises:
        InvalidInputError: If the participants fail validation
    """
    validate_participants(participants)
    return match_transfers(compute_balances(participants))


def participant_totals(
    participants: Sequence[Participant],
    transfers: Sequence[Transfer],
) -> dict[int, ParticipantTotals]:
    """
    Sum outgoing and incoming transfer amounts per participant.

    Transfers naming an unknown participant id are ignored.

    Args:
        participants: Participants the transfers were computed for
        transfers: Transfers from settle

    Returns:
        Dict mapping participant id to totals, in participant order
    """
    totals = {
        p.id: ParticipantTotals(participant_id=p.id, name=p.name, paid=p.paid)
        for p in participants
    }

    for t in transfers:
        if t.from_id in totals:
            totals[t.from_id].outgoing += t.amount
        if t.to_id in totals:
            totals[t.to_id].incoming += t.amount

    for entry in totals.values():
        entry.outgoing = round2(entry.outgoing)
        entry.incoming = round2(entry.incoming)

    return totals


def summarize(participants: Sequence[Participant]) -> SettlementSummary:
    """
    Settle a group and collect the figures shown alongside the transfers.

    Args:
        participants: Snapshot of participants

    Returns:
        SettlementSummary with total, head count, rounded fair share,
        transfers, and per-participant totals

    Raises:
        InvalidInputError: If the participants fail validation
    """
    transfers = settle(participants)
    totals = participant_totals(participants, transfers)
    return SettlementSummary(
        total=round2(total_paid(participants)),
        count=len(participants),
        fair_share=round2(fair_share(participants)),
        transfers=transfers,
        totals=list(totals.values()),
    )
