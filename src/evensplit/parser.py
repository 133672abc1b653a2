"""Parse participant entries from the command line and roster files."""

import json
import re
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from pathlib import Path

from .ledger import InvalidInputError, validate_participants
from .models import ParseError, Roster
from .roster import add_participant

CURRENCY_SYMBOLS = "¥$€£₪"

# name=amount or name:amount, symbol on either side of the amount
ENTRY_PATTERN = re.compile(
    rf"^\s*(?P<name>[^=:]+?)\s*[=:]\s*"
    rf"[{CURRENCY_SYMBOLS}]?\s*(?P<amount>-?[\d,]*\.?\d+)\s*[{CURRENCY_SYMBOLS}]?\s*$"
)

ENTRY_SUGGESTIONS = ["Dan=30", "Sara:90.50", "Avi=¥0"]


def parse_amount(text: str) -> Decimal | None:
    """Parse an amount like 1,200.50 or ¥30. Returns None if it isn't one."""
    text = text.strip().strip(CURRENCY_SYMBOLS).strip().replace(",", "")
    if not text:
        return None
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    return amount


def parse_entry(text: str) -> tuple[str, Decimal] | ParseError:
    """
    Parse a single "name=amount" entry.

    Handles: Dan=30, Dan:30, Dan = ¥30, Dan=1,200.50, Dan Smith=30

    Args:
        text: Raw entry

    Returns:
        Tuple of (name, amount) or ParseError
    """
    match = ENTRY_PATTERN.match(text)
    if not match:
        return ParseError(
            raw_text=text,
            message="Expected name=amount",
            suggestions=ENTRY_SUGGESTIONS,
        )

    name = match.group("name").strip()
    amount = parse_amount(match.group("amount"))
    if amount is None:
        return ParseError(
            raw_text=text,
            message=f"Couldn't read an amount for {name}",
            suggestions=ENTRY_SUGGESTIONS,
        )

    return name, amount


def parse_entries(texts: Iterable[str]) -> list[tuple[str, Decimal]] | ParseError:
    """Parse several entries, stopping at the first one that fails."""
    entries = []
    for text in texts:
        result = parse_entry(text)
        if isinstance(result, ParseError):
            return result
        entries.append(result)
    return entries


def build_roster(entries: Iterable[tuple[str, Decimal]]) -> Roster:
    """
    Build a roster from parsed entries, assigning ids in order.

    Raises:
        InvalidInputError: On duplicate names or invalid amounts
    """
    roster = Roster()
    for name, amount in entries:
        roster, _ = add_participant(roster, name, amount)
    return roster


def load_roster_file(path: str | Path) -> Roster:
    """
    Load a roster from a JSON file.

    Accepts either a list of {"name": ..., "paid": ...} objects, or a dumped
    Roster ({"participants": [...], "next_id": ...}) whose ids are kept.

    Raises:
        InvalidInputError: If the file has the wrong shape or bad values
        ValueError: If the file isn't valid JSON
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict) and "participants" in data:
        roster = Roster.model_validate(data)
        validate_participants(roster.participants)
        names = [p.name for p in roster.participants]
        if len(set(names)) != len(names):
            raise InvalidInputError(f"Duplicate names in {path}")
        # Never hand out an id that is already taken
        if roster.participants:
            roster.next_id = max(roster.next_id, max(p.id for p in roster.participants) + 1)
        return roster

    if not isinstance(data, list):
        raise InvalidInputError(f"{path}: expected a list of participants")

    entries = []
    for row in data:
        if not isinstance(row, dict) or "name" not in row:
            raise InvalidInputError(f"{path}: every participant needs a name, got {row!r}")
        amount = parse_amount(str(row.get("paid", 0)))
        if amount is None:
            raise InvalidInputError(f"{path}: bad amount for {row['name']}: {row.get('paid')!r}")
        entries.append((str(row["name"]), amount))

    return build_roster(entries)
