from dataclasses import dataclass
from typing import Any, Optional

from models.transaction import Transaction


@dataclass
class AddResult:
    """Outcome of a successful add. is_new_category is True for exactly one caller
    per previously unseen category name."""
    transaction: Transaction
    is_new_category: bool


@dataclass
class LoadResult:
    value: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None
