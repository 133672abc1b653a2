"""Response message templates - all user-facing text lives here."""

from collections.abc import Iterable
from decimal import Decimal

from .models import ParseError, ParticipantTotals, RunRecord, SettlementSummary, Transfer

DEFAULT_SYMBOL = "¥"


def format_money(amount: Decimal, symbol: str = DEFAULT_SYMBOL) -> str:
    """Format an amount with two decimals and a currency symbol."""
    return f"{symbol}{amount:.2f}"


def format_transfers_list(transfers: list[Transfer], symbol: str = DEFAULT_SYMBOL) -> str:
    """Format list of transfers for display."""
    if not transfers:
        return ALL_SETTLED

    lines = []
    for t in transfers:
        lines.append(f"• {t.from_name} → {t.to_name}: {format_money(t.amount, symbol)}")
    return "\n".join(lines)


def format_totals_table(totals: Iterable[ParticipantTotals], symbol: str = DEFAULT_SYMBOL) -> str:
    """Format per-participant paid / pays / receives columns."""
    rows = [("Name", "Paid", "Pays", "Receives")]
    for entry in totals:
        rows.append(
            (
                entry.name,
                format_money(entry.paid, symbol),
                format_money(entry.outgoing, symbol),
                format_money(entry.incoming, symbol),
            )
        )

    widths = [max(len(row[col]) for row in rows) for col in range(4)]
    lines = []
    for row in rows:
        name = row[0].ljust(widths[0])
        figures = "  ".join(cell.rjust(widths[col + 1]) for col, cell in enumerate(row[1:]))
        lines.append(f"{name}  {figures}")
    return "\n".join(lines)


def format_summary(summary: SettlementSummary, symbol: str = DEFAULT_SYMBOL) -> str:
    """Format a full settlement summary."""
    if summary.count == 0:
        return NO_PARTICIPANTS

    return SUMMARY.format(
        total=format_money(summary.total, symbol),
        count=summary.count,
        fair_share=format_money(summary.fair_share, symbol),
        totals=format_totals_table(summary.totals, symbol),
        transfers=format_transfers_list(summary.transfers, symbol),
    )


def format_run(record: RunRecord) -> str:
    """Format one logged run as a single history line."""
    names = ", ".join(p.name for p in record.participants)
    line = (
        f"{record.ts.isoformat(timespec='seconds')}  {record.status}  [{names}]  "
        f"{record.transfer_count} transfer(s)"
    )
    if record.error_msg:
        line += f"  ({record.error_msg})"
    return line


def format_parse_error(error: ParseError) -> str:
    """Format a parse error with suggestions."""
    suggestions = "\n".join(f"• {s}" for s in error.suggestions)
    return ERROR_PARSE.format(raw_text=error.raw_text, message=error.message, suggestions=suggestions)


SUMMARY = (
    "💰 Total: {total}\n"
    "👥 People: {count}\n"
    "⚖️ Each: {fair_share}\n\n"
    "{totals}\n\n"
    "🔄 Transfers:\n{transfers}"
)

ALL_SETTLED = "✨ All settled up! No transfers needed."

NO_PARTICIPANTS = "🤷 No participants yet. Add some as name=amount."

ERROR_PARSE = "❓ Didn't understand: {raw_text}\n\n{message}\n\nTry:\n{suggestions}"

ERROR_VALIDATION = "⚠️ {message}"

CSV_WRITTEN = "📄 Wrote {count} transfer(s) to {path}"

ERROR_CSV = "⚠️ Couldn't write {path}: {error}"

LOG_EMPTY = "No settlement runs logged yet."
