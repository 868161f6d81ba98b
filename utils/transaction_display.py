from typing import NamedTuple

from models.transaction import Transaction
from utils.currency import format_currency
from utils.date_helpers import format_created_date


class TransactionRow(NamedTuple):
    amount: str
    category: str
    date: str
    note: str       # "" when the transaction has none


def transaction_row(tx: Transaction, date_format: str = "MM/DD/YYYY") -> TransactionRow:
    """Display text for one listing row."""
    return TransactionRow(
        amount=format_currency(tx.amount),
        category=tx.category_name,
        date=format_created_date(tx.created_at, date_format),
        note=tx.note or "",
    )


def format_total(total: float) -> str:
    return f"Total: {format_currency(total)}"
