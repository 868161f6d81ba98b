import threading

import customtkinter as ctk

from models.transaction import TransactionRequest
from state.transactions_state import TransactionsState
from ui.components.error_panel import ErrorPanel
from ui.components.transaction_form import TransactionForm
from ui.components.transaction_list import TransactionList
from utils.constants import TRANSACTIONS_LIST_TITLE


class TransactionsTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        transactions_state: TransactionsState,
        show_alert,        # callable(message: str)
        notify_refresh,    # callable(scope: str)
        date_format: str = "MM/DD/YYYY",
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._state = transactions_state
        self._show_alert = show_alert
        self._notify_refresh = notify_refresh
        self._date_format = date_format
        self._error_panel: ErrorPanel | None = None

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._form = TransactionForm(self, on_submit=self._on_submit)
        self._form.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))

        self._loading_label = ctk.CTkLabel(self, text="", text_color="gray60", anchor="w")
        self._loading_label.grid(row=1, column=0, sticky="ew", padx=12)

        self._list = TransactionList(self, title=TRANSACTIONS_LIST_TITLE, date_format=date_format)
        self._list.grid(row=2, column=0, sticky="nsew", padx=8, pady=(0, 8))

        self.after(100, self._load)

    def refresh(self):
        self._load()

    # ── Data loading ──────────────────────────────────────────────────────────

    def _run(self, work, done):
        """Run work() on a worker thread and done(result) back on the Tk thread."""
        self._loading_label.configure(text="Loading…")

        def target():
            result = work()
            self.after(0, lambda: self._finish(done, result))

        threading.Thread(target=target, daemon=True).start()

    def _finish(self, done, result):
        if not self.winfo_exists():
            return
        done(result)
        self._render()

    def _load(self):
        self._state.clear_error()
        self._run(self._state.load_all, lambda _: None)

    def _on_submit(self, request: TransactionRequest):
        def work():
            try:
                return self._state.add(request)
            except Exception as e:
                return e

        self._form.set_busy(True)
        self._run(work, self._on_added)

    def _on_added(self, outcome):
        self._form.set_busy(False)
        if isinstance(outcome, Exception):
            self._state.clear_error()
            self._show_alert("Failed to add transaction. Please try again.")
            return
        self._notify_refresh("transaction")

    # ── Rendering ─────────────────────────────────────────────────────────────

    def _render_loading(self):
        self._loading_label.configure(text="Loading…" if self._state.loading else "")

    def _render(self):
        self._render_loading()
        if self._error_panel is not None:
            self._error_panel.destroy()
            self._error_panel = None

        if self._state.error:
            self._list.grid_remove()
            self._error_panel = ErrorPanel(self, f"Error: {self._state.error}", on_retry=self._load)
            self._error_panel.grid(row=2, column=0, sticky="new", padx=8, pady=20)
            return

        self._list.grid()
        self._form.set_categories(self._state.categories)
        self._list.render(self._state.transactions, self._state.total)
