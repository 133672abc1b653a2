"""Append-only run log. Every settlement the CLI computes is recorded here."""

import os
from collections.abc import Sequence
from pathlib import Path

from .models import Participant, RunRecord, Transfer

DEFAULT_LOG_PATH = Path.home() / ".evensplit" / "runs.jsonl"


def get_log_path(override: str | Path | None = None) -> Path:
    """
    Resolve where runs are logged.

    An explicit override wins, then EVENSPLIT_LOG_PATH, then the default
    under the home directory.
    """
    if override:
        return Path(override)
    env_path = os.environ.get("EVENSPLIT_LOG_PATH")
    if env_path:
        return Path(env_path)
    return DEFAULT_LOG_PATH


def log_run(
    participants: Sequence[Participant],
    status: str,
    transfers: Sequence[Transfer] | None = None,
    error_msg: str | None = None,
    log_path: str | Path | None = None,
) -> RunRecord:
    """
    Append a settlement run to the log file.

    Args:
        participants: The input snapshot
        status: "ok" if the settlement was computed, "error" otherwise
        transfers: Resulting transfers, if any
        error_msg: Error message if status is "error"
        log_path: Optional custom log path

    Returns:
        The record that was written
    """
    record = RunRecord(
        status=status,  # type: ignore[arg-type]
        participants=list(participants),
        transfers=list(transfers or []),
        error_msg=error_msg,
    )

    path = get_log_path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(record.model_dump_json(exclude_none=True) + "\n")

    return record


def read_log(log_path: str | Path | None = None, limit: int | None = None) -> list[RunRecord]:
    """
    Read logged runs, oldest first.

    Args:
        log_path: Optional custom log path
        limit: Keep only this many of the most recent runs

    Returns:
        List of RunRecord; empty if nothing has been logged yet
    """
    path = get_log_path(log_path)
    if not path.exists():
        return []

    with open(path, encoding="utf-8") as f:
        records = [RunRecord.model_validate_json(line) for line in f if line.strip()]

    if limit is not None:
        return records[-limit:]
    return records
