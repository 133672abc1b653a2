"""Pydantic models for evensplit settlement."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Literal

from pydantic import BaseModel, Field, field_serializer, field_validator


def _to_decimal(v: Any) -> Decimal:
    if isinstance(v, Decimal):
        return v
    if isinstance(v, float):
        v = str(v)
    try:
        return Decimal(v)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Not a number: {v!r}") from e


class Participant(BaseModel):
    """A person and how much they put into the shared pool."""

    model_config = {"frozen": True}

    id: int
    name: str = Field(min_length=1)
    paid: Decimal = Decimal("0")

    @field_validator("paid", mode="before")
    @classmethod
    def coerce_paid(cls, v: Any) -> Decimal:
        return _to_decimal(v)

    @field_serializer("paid")
    def serialize_paid(self, v: Decimal) -> str:
        return str(v)


class Balance(BaseModel):
    """
    Signed residual for one participant.

    Negative residual = owes money (debtor)
    Positive residual = is owed money (creditor)
    """

    participant_id: int
    name: str
    residual: Decimal

    @field_validator("residual", mode="before")
    @classmethod
    def coerce_residual(cls, v: Any) -> Decimal:
        return _to_decimal(v)

    @field_serializer("residual")
    def serialize_residual(self, v: Decimal) -> str:
        return str(v)


class Transfer(BaseModel):
    """A payment from a debtor to a creditor."""

    from_id: int
    from_name: str
    to_id: int
    to_name: str
    amount: Decimal

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> Decimal:
        return _to_decimal(v)

    @field_serializer("amount")
    def serialize_amount(self, v: Decimal) -> str:
        return str(v)


class ParticipantTotals(BaseModel):
    """How much one participant sends and receives across all transfers."""

    participant_id: int
    name: str
    paid: Decimal
    outgoing: Decimal = Decimal("0.00")
    incoming: Decimal = Decimal("0.00")

    @field_validator("paid", "outgoing", "incoming", mode="before")
    @classmethod
    def coerce_money(cls, v: Any) -> Decimal:
        return _to_decimal(v)

    @field_serializer("paid", "outgoing", "incoming")
    def serialize_money(self, v: Decimal) -> str:
        return str(v)


class SettlementSummary(BaseModel):
    """Everything a caller needs to display one settlement."""

    total: Decimal
    count: int
    fair_share: Decimal
    transfers: list[Transfer] = Field(default_factory=list)
    totals: list[ParticipantTotals] = Field(default_factory=list)

    @field_serializer("total", "fair_share")
    def serialize_money(self, v: Decimal) -> str:
        return str(v)


class Roster(BaseModel):
    """The active set of participants, owned by the caller."""

    participants: list[Participant] = Field(default_factory=list)
    next_id: int = 1

    def get(self, participant_id: int) -> Participant | None:
        """Get a participant by id."""
        for p in self.participants:
            if p.id == participant_id:
                return p
        return None


class ParseError(BaseModel):
    """Error when a participant entry can't be parsed."""

    raw_text: str
    message: str
    suggestions: list[str] = Field(default_factory=list)


class RunRecord(BaseModel):
    """One line of the settlement run log."""

    ts: datetime = Field(default_factory=datetime.now)
    status: Literal["ok", "error"]
    participants: list[Participant] = Field(default_factory=list)
    transfers: list[Transfer] = Field(default_factory=list)
    error_msg: str | None = None

    @property
    def transfer_count(self) -> int:
        return len(self.transfers)
