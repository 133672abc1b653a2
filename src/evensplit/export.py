"""CSV export of a transfer list."""

import csv
import io
from collections.abc import Sequence
from pathlib import Path

from .models import Transfer

CSV_HEADER = ["From", "To", "Amount"]


def transfers_to_csv(transfers: Sequence[Transfer]) -> str:
    """
    Render transfers as CSV text.

    Every field is quoted, embedded quotes are doubled, and rows are joined
    with a bare newline (no trailing newline).
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for t in transfers:
        writer.writerow([t.from_name, t.to_name, f"{t.amount:.2f}"])
    return buf.getvalue().rstrip("\n")


def write_csv(transfers: Sequence[Transfer], path: str | Path) -> Path:
    """Write transfers to a CSV file, creating parent directories. Returns the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(transfers_to_csv(transfers))
    return path
