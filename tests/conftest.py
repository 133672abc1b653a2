"""Shared test fixtures for evensplit tests."""

from decimal import Decimal
from pathlib import Path

import pytest

from evensplit.models import Participant


def make_group(*amounts: int | str) -> list[Participant]:
    """Build participants a, b, c, ... with ids 1, 2, 3, ..."""
    return [
        Participant(id=i + 1, name=chr(ord("a") + i), paid=Decimal(str(amount)))
        for i, amount in enumerate(amounts)
    ]


@pytest.fixture
def abc_group() -> list[Participant]:
    """a=30, b=90, c=0 - fair share 40."""
    return make_group(30, 90, 0)


@pytest.fixture
def one_big_payer() -> list[Participant]:
    """Three people paid 20, one paid 140 - fair share 50."""
    return make_group(20, 20, 20, 140)


@pytest.fixture
def exact_pairs_group() -> list[Participant]:
    """a=20, b=30, c=70, d=80 - b and c cancel, a and d cancel."""
    return make_group(20, 30, 70, 80)


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """A run log path inside a temp directory."""
    return tmp_path / "logs" / "runs.jsonl"
