"""Built-in example groups for trying the settlement out."""

from decimal import Decimal

from .models import Participant, Roster

SAMPLES: dict[str, list[tuple[int, str, Decimal]]] = {
    # a=30, b=90, c=0 -> c owes b 40, a owes b 10
    "abc": [
        (1, "a", Decimal("30")),
        (2, "b", Decimal("90")),
        (3, "c", Decimal("0")),
    ],
    # Everyone paid the same -> nothing to settle
    "equal-three": [
        (11, "p1", Decimal("50")),
        (12, "p2", Decimal("50")),
        (13, "p3", Decimal("50")),
    ],
}


def list_samples() -> list[str]:
    """List sample names."""
    return list(SAMPLES.keys())


def load_sample(name: str) -> Roster:
    """
    Build a roster from a named sample.

    Raises:
        KeyError: If there is no sample with that name
    """
    rows = SAMPLES[name]
    participants = [Participant(id=pid, name=pname, paid=paid) for pid, pname, paid in rows]
    return Roster(participants=participants, next_id=max(pid for pid, _, _ in rows) + 1)
