"""Roster editing - add, rename, re-amount, remove participants.

Every operation is immutable: it returns a new Roster and leaves the input alone.
"""

from decimal import Decimal

from .ledger import InvalidInputError, validate_participants
from .models import Participant, Roster


def _check_name(roster: Roster, name: str, exclude_id: int | None = None) -> str:
    name = name.strip()
    if not name:
        raise InvalidInputError("Name can't be empty")
    for p in roster.participants:
        if p.id != exclude_id and p.name == name:
            raise InvalidInputError(f"'{name}' is already in the group")
    return name


def _index_of(roster: Roster, participant_id: int) -> int:
    for idx, p in enumerate(roster.participants):
        if p.id == participant_id:
            return idx
    raise KeyError(participant_id)


def add_participant(
    roster: Roster,
    name: str,
    paid: Decimal | int | float | str = Decimal("0"),
) -> tuple[Roster, Participant]:
    """
    Add a participant to a roster.

    The participant gets the roster's next id; ids are never handed out twice,
    even after a removal.

    Args:
        roster: Original roster
        name: Display name (surrounding whitespace is stripped)
        paid: Amount this person paid

    Returns:
        Tuple of (new Roster, created Participant)

    Raises:
        InvalidInputError: If the name is empty or taken, or the amount is invalid
    """
    name = _check_name(roster, name)
    participant = Participant(id=roster.next_id, name=name, paid=paid)
    validate_participants([participant])

    new_roster = roster.model_copy(deep=True)
    new_roster.participants.append(participant)
    new_roster.next_id = roster.next_id + 1
    return new_roster, participant


def rename_participant(roster: Roster, participant_id: int, name: str) -> Roster:
    """Rename a participant. Raises KeyError for an unknown id."""
    idx = _index_of(roster, participant_id)
    name = _check_name(roster, name, exclude_id=participant_id)

    new_roster = roster.model_copy(deep=True)
    new_roster.participants[idx] = new_roster.participants[idx].model_copy(update={"name": name})
    return new_roster


def update_paid(
    roster: Roster,
    participant_id: int,
    paid: Decimal | int | float | str,
) -> Roster:
    """Change how much a participant paid. Raises KeyError for an unknown id."""
    idx = _index_of(roster, participant_id)
    current = roster.participants[idx]
    updated = Participant(id=current.id, name=current.name, paid=paid)
    validate_participants([updated])

    new_roster = roster.model_copy(deep=True)
    new_roster.participants[idx] = updated
    return new_roster


def remove_participant(roster: Roster, participant_id: int) -> tuple[Roster, Participant | None]:
    """
    Remove a participant.

    Args:
        roster: Original roster
        participant_id: Id to remove

    Returns:
        Tuple of (new Roster, removed Participant or None if the id wasn't there)
    """
    new_roster = roster.model_copy(deep=True)
    try:
        idx = _index_of(new_roster, participant_id)
    except KeyError:
        return new_roster, None
    removed = new_roster.participants.pop(idx)
    return new_roster, removed


def reset(roster: Roster) -> Roster:
    """Clear all participants. The id counter keeps going."""
    return Roster(participants=[], next_id=roster.next_id)
