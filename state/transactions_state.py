import logging
import threading

from models.results import AddResult, LoadResult
from models.transaction import Transaction, TransactionRequest
from services.transaction_service import TransactionService
from utils.constants import ADD_TRANSACTION_ERROR, LOAD_TRANSACTIONS_ERROR

log = logging.getLogger(__name__)


class TransactionsState:
    """This week's transactions and the known category names.

    Both lists are caches of server state: successful adds update them in place
    and they are only reconciled with the server on the next load.
    Safe to call from worker threads.
    """

    def __init__(self, tx_service: TransactionService):
        self._svc = tx_service
        self._lock = threading.Lock()
        self._transactions: list[Transaction] = []
        self._categories: list[str] = []
        self._pending = 0
        self._error: str | None = None

    # ── Read access ──────────────────────────────────────────────────────────
    @property
    def transactions(self) -> list[Transaction]:
        with self._lock:
            return list(self._transactions)

    @property
    def categories(self) -> list[str]:
        with self._lock:
            return list(self._categories)

    @property
    def loading(self) -> bool:
        with self._lock:
            return self._pending > 0

    @property
    def error(self) -> str | None:
        with self._lock:
            return self._error

    @property
    def total(self) -> float:
        with self._lock:
            return sum(tx.amount for tx in self._transactions)

    # ── Actions ──────────────────────────────────────────────────────────────
    def load(self) -> None:
        """Replace the list with the current week's transactions.

        On failure the previous list is kept and error is set; nothing is raised.
        """
        self._begin()
        try:
            data = self._svc.get_current_week_transactions()
        except Exception:
            log.exception("Loading current-week transactions failed")
            self._set_error(LOAD_TRANSACTIONS_ERROR)
        else:
            with self._lock:
                self._transactions = list(data)
        finally:
            self._end()

    refresh = load

    def load_categories(self) -> LoadResult:
        """Fetch category names. Failures are logged and returned, never shown."""
        try:
            names = self._svc.get_categories()
        except Exception as e:
            log.warning("Loading categories failed: %s", e)
            return LoadResult(error=e)
        with self._lock:
            self._categories = list(names)
        return LoadResult(value=list(names))

    def load_all(self) -> LoadResult:
        self.load()
        return self.load_categories()

    def add(self, request: TransactionRequest) -> AddResult:
        """Submit a transaction and prepend the server's copy to the list.

        Raises whatever the service raised after setting error.
        """
        self._begin()
        try:
            tx = self._svc.add_transaction(request)
        except Exception:
            log.exception("Adding transaction failed")
            self._set_error(ADD_TRANSACTION_ERROR)
            raise
        else:
            with self._lock:
                self._transactions.insert(0, tx)
                is_new = request.category_name not in self._categories
                if is_new:
                    self._categories.append(request.category_name)
            log.info("Added transaction %s (%s)", tx.id, tx.category_name)
            return AddResult(transaction=tx, is_new_category=is_new)
        finally:
            self._end()

    def clear_error(self) -> None:
        self._set_error(None)

    def _set_error(self, message: str | None):
        with self._lock:
            self._error = message

    # ── Loading flag ─────────────────────────────────────────────────────────
    def _begin(self):
        with self._lock:
            self._pending += 1

    def _end(self):
        with self._lock:
            self._pending -= 1
