from dataclasses import dataclass
from typing import Optional


@dataclass
class Transaction:
    id: int
    amount: float
    category_name: str
    created_at: str          # ISO 8601 timestamp from the server
    note: Optional[str] = None
    category_id: Optional[int] = None
    updated_at: str = ""
    recently_updated: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        return cls(
            id=data["id"],
            amount=float(data["amount"]),
            category_name=data.get("categoryName") or "",
            created_at=data.get("createdAt") or "",
            note=data.get("note") or None,
            category_id=data.get("categoryId"),
            updated_at=data.get("updatedAt") or "",
            recently_updated=bool(data.get("recentlyUpdated", False)),
        )


@dataclass
class TransactionRequest:
    amount: float
    category_name: str
    note: Optional[str] = None

    @classmethod
    def from_form(cls, amount: str, category_name: str, note: str = "") -> "TransactionRequest":
        """Build a request from raw form input.

        Only presence is checked (plus that the amount is a number); anything
        else is left to the server. Raises ValueError.
        """
        amount = (amount or "").strip()
        category_name = (category_name or "").strip()
        if not amount or not category_name:
            raise ValueError("Amount and category are required!")
        try:
            value = float(amount)
        except ValueError:
            raise ValueError("Invalid amount.") from None
        return cls(amount=value, category_name=category_name, note=(note or "").strip() or None)

    def to_dict(self) -> dict:
        payload = {"amount": self.amount, "categoryName": self.category_name}
        if self.note:
            payload["note"] = self.note
        return payload
