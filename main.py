import logging
import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from services.api_client import ApiClient
from services.transaction_service import TransactionService
from services.dashboard_service import DashboardService

from state.transactions_state import TransactionsState
from state.dashboard_state import DashboardState

from ui.app_window import AppWindow
from utils.app_config import get_settings
from utils.logging_config import configure_logging

log = logging.getLogger(__name__)


def main():
    # ── Bootstrap: settings and logging ──────────────────────────────────────
    settings = get_settings()
    configure_logging(settings["log_level"])
    log.info("Using API at %s", settings["api_base_url"])

    # ── HTTP client ──────────────────────────────────────────────────────────
    client = ApiClient(settings["api_base_url"], timeout=settings["timeout"])

    # ── Services ─────────────────────────────────────────────────────────────
    tx_svc = TransactionService(client, prefix=settings["spending_prefix"])
    dashboard_svc = DashboardService(client, prefix=settings["dashboard_prefix"])

    # ── State ────────────────────────────────────────────────────────────────
    tx_state = TransactionsState(tx_svc)
    dashboard_state = DashboardState(dashboard_svc)

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(settings["appearance_mode"])
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        transactions_state=tx_state,
        dashboard_state=dashboard_state,
        date_format=settings["date_format"],
    )

    def on_close():
        client.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    app.mainloop()


if __name__ == "__main__":
    main()
