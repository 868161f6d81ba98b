from models.category import Category
from models.transaction import Transaction, TransactionRequest
from services.api_client import ApiClient
from utils.constants import DEFAULT_SPENDING_PREFIX


class TransactionService:
    def __init__(self, client: ApiClient, prefix: str = DEFAULT_SPENDING_PREFIX):
        self._client = client
        self._prefix = prefix.rstrip("/")

    def _path(self, name: str) -> str:
        return f"{self._prefix}/{name}"

    def add_transaction(self, request: TransactionRequest) -> Transaction:
        data = self._client.post(self._path("transactions"), request.to_dict())
        return Transaction.from_dict(data)

    def get_current_week_transactions(self) -> list[Transaction]:
        data = self._client.get(self._path("current-week")) or []
        return [Transaction.from_dict(d) for d in data]

    def get_categories(self) -> list[str]:
        """Category names only; ids and descriptions are dropped."""
        data = self._client.get(self._path("categories")) or []
        return [Category.from_dict(d).name for d in data]
