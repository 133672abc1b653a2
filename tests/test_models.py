"""Tests for evensplit models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from evensplit.models import (
    Balance,
    ParseError,
    Participant,
    ParticipantTotals,
    Roster,
    SettlementSummary,
    Transfer,
)


class TestParticipant:
    """Tests for Participant model."""

    def test_create_participant(self) -> None:
        """Test creating a basic participant."""
        p = Participant(id=1, name="Dan", paid=Decimal("30.50"))
        assert p.id == 1
        assert p.name == "Dan"
        assert p.paid == Decimal("30.50")

    def test_default_paid_is_zero(self) -> None:
        """Test that paid defaults to zero."""
        assert Participant(id=1, name="Dan").paid == Decimal("0")

    def test_coerces_float(self) -> None:
        """Test that float amounts are converted to Decimal via str."""
        p = Participant(id=1, name="Dan", paid=0.1)  # type: ignore
        assert isinstance(p.paid, Decimal)
        assert p.paid == Decimal("0.1")

    def test_coerces_int_and_str(self) -> None:
        """Test that int and str amounts are accepted."""
        assert Participant(id=1, name="Dan", paid=30).paid == Decimal("30")  # type: ignore
        assert Participant(id=1, name="Dan", paid="12.34").paid == Decimal("12.34")  # type: ignore

    def test_rejects_garbage_amount(self) -> None:
        """Test that non-numeric text fails validation."""
        with pytest.raises(ValidationError):
            Participant(id=1, name="Dan", paid="lots")  # type: ignore

    def test_rejects_empty_name(self) -> None:
        """Test that an empty name fails validation."""
        with pytest.raises(ValidationError):
            Participant(id=1, name="", paid=Decimal("1"))

    def test_frozen(self) -> None:
        """Test that participants are immutable snapshots."""
        p = Participant(id=1, name="Dan", paid=Decimal("1"))
        with pytest.raises(ValidationError):
            p.paid = Decimal("2")  # type: ignore[misc]

    def test_serialization(self) -> None:
        """Test that paid serializes as a string."""
        data = Participant(id=1, name="Dan", paid=Decimal("30.00")).model_dump()
        assert data == {"id": 1, "name": "Dan", "paid": "30.00"}


class TestBalance:
    """Tests for Balance model."""

    def test_create_balance(self) -> None:
        """Test creating a balance with a negative residual."""
        b = Balance(participant_id=3, name="c", residual=Decimal("-40.00"))
        assert b.residual == Decimal("-40.00")

    def test_serialization(self) -> None:
        """Test that residual serializes as a string."""
        b = Balance(participant_id=3, name="c", residual=Decimal("-40.00"))
        assert b.model_dump()["residual"] == "-40.00"


class TestTransfer:
    """Tests for Transfer model."""

    def test_create_transfer(self) -> None:
        """Test creating a transfer."""
        t = Transfer(from_id=3, from_name="c", to_id=2, to_name="b", amount=Decimal("40.00"))
        assert t.from_name == "c"
        assert t.to_name == "b"
        assert t.amount == Decimal("40.00")

    def test_json_round_trip(self) -> None:
        """Test a transfer survives JSON serialization."""
        t = Transfer(from_id=3, from_name="c", to_id=2, to_name="b", amount=Decimal("40.00"))
        restored = Transfer.model_validate_json(t.model_dump_json())
        assert restored == t


class TestParticipantTotals:
    """Tests for ParticipantTotals model."""

    def test_defaults(self) -> None:
        """Test outgoing/incoming default to zero."""
        totals = ParticipantTotals(participant_id=1, name="a", paid=Decimal("30"))
        assert totals.outgoing == Decimal("0")
        assert totals.incoming == Decimal("0")


class TestSettlementSummary:
    """Tests for SettlementSummary model."""

    def test_serialization(self) -> None:
        """Test money fields serialize as strings."""
        summary = SettlementSummary(total=Decimal("120.00"), count=3, fair_share=Decimal("40.00"))
        data = summary.model_dump()
        assert data["total"] == "120.00"
        assert data["fair_share"] == "40.00"
        assert data["transfers"] == []


class TestRoster:
    """Tests for Roster model."""

    def test_empty_roster(self) -> None:
        """Test a new roster starts with id 1."""
        roster = Roster()
        assert roster.participants == []
        assert roster.next_id == 1

    def test_get(self) -> None:
        """Test looking up by id."""
        roster = Roster(participants=[Participant(id=5, name="a")], next_id=6)
        assert roster.get(5) is not None
        assert roster.get(6) is None

    def test_model_validate(self) -> None:
        """Test building a roster from plain data."""
        roster = Roster.model_validate(
            {"participants": [{"id": 1, "name": "a", "paid": "10"}], "next_id": 2}
        )
        assert roster.participants[0].paid == Decimal("10")


class TestParseError:
    """Tests for ParseError model."""

    def test_create_parse_error(self) -> None:
        """Test creating a parse error."""
        error = ParseError(raw_text="Dan", message="Expected name=amount")
        assert error.suggestions == []
