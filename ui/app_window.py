import customtkinter as ctk

from state.dashboard_state import DashboardState
from state.transactions_state import TransactionsState
from ui.components.alert_banner import AlertBanner
from ui.tabs.dashboard_tab import DashboardTab
from ui.tabs.transactions_tab import TransactionsTab
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT


_REFRESH_SCOPES: dict[str, set[str]] = {
    "transaction": {"dashboard"},
    "full":        {"dashboard", "transactions"},
}


class AppWindow(ctk.CTk):
    def __init__(
        self,
        transactions_state: TransactionsState,
        dashboard_state: DashboardState,
        date_format: str = "MM/DD/YYYY",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._tx_state = transactions_state
        self._dashboard_state = dashboard_state
        self._date_format = date_format

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_title_bar()
        self._build_banner_area()
        self._build_tabs()

    # ── Layout ──────────────────────────────────────────────────────────────
    def _build_title_bar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray85", "gray15"), corner_radius=0, height=44)
        bar.grid(row=0, column=0, sticky="ew")
        bar.grid_propagate(False)

        ctk.CTkLabel(
            bar, text=APP_NAME, font=ctk.CTkFont(size=16, weight="bold"),
        ).pack(side="left", padx=(12, 4), pady=8)

        ctk.CTkButton(
            bar, text="+ Quick Add", width=110,
            command=lambda: self._tabview.set("Transactions"),
        ).pack(side="right", padx=12)

    def _build_banner_area(self):
        self._banner_frame = ctk.CTkFrame(self, fg_color="transparent", height=0)
        self._banner_frame.grid(row=1, column=0, sticky="ew", padx=8)

    def _build_tabs(self):
        self._tabview = ctk.CTkTabview(self)
        self._tabview.grid(row=2, column=0, sticky="nsew", padx=8, pady=(0, 8))

        for tab_name in ("Dashboard", "Transactions"):
            self._tabview.add(tab_name)
            self._tabview.tab(tab_name).grid_columnconfigure(0, weight=1)
            self._tabview.tab(tab_name).grid_rowconfigure(0, weight=1)

        self._dashboard_tab = DashboardTab(
            self._tabview.tab("Dashboard"),
            dashboard_state=self._dashboard_state,
        )
        self._dashboard_tab.grid(row=0, column=0, sticky="nsew")

        self._transactions_tab = TransactionsTab(
            self._tabview.tab("Transactions"),
            transactions_state=self._tx_state,
            show_alert=self.show_alert,
            notify_refresh=self.notify_tabs_refresh,
            date_format=self._date_format,
        )
        self._transactions_tab.grid(row=0, column=0, sticky="nsew")

    # ── Refresh ──────────────────────────────────────────────────────────────
    def notify_tabs_refresh(self, scope: str = "full"):
        tabs = _REFRESH_SCOPES.get(scope, _REFRESH_SCOPES["full"])
        if "dashboard"    in tabs: self._dashboard_tab.refresh()
        if "transactions" in tabs: self._transactions_tab.refresh()

    # ── Banners ──────────────────────────────────────────────────────────────
    def show_alert(self, message: str, severity: str = "error"):
        for w in self._banner_frame.winfo_children():
            w.destroy()
        AlertBanner(self._banner_frame, message=message, severity=severity).pack(fill="x", pady=2)
