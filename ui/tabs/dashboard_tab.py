import threading

import customtkinter as ctk

from state.dashboard_state import DashboardState
from ui.components.error_panel import ErrorPanel
from ui.components.stat_card import StatCard
from ui.components.weekly_chart import WeeklyChart
from utils.constants import TREND_COLORS
from utils.currency import format_percentage, format_whole_currency


class DashboardTab(ctk.CTkFrame):
    def __init__(self, master, dashboard_state: DashboardState, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._state = dashboard_state

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_header()
        self._content = ctk.CTkFrame(self, fg_color="transparent")
        self._content.grid(row=1, column=0, sticky="nsew", padx=16, pady=(0, 12))
        self._content.grid_columnconfigure(0, weight=1)
        self._content.grid_rowconfigure(2, weight=1)

        self.after(100, self._load)

    def refresh(self):
        self._load()

    # ── Layout builders ───────────────────────────────────────────────────────

    def _build_header(self):
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=16, pady=(12, 8))
        header.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            header, text="Dashboard", font=ctk.CTkFont(size=22, weight="bold"), anchor="w",
        ).grid(row=0, column=0, sticky="w")
        ctk.CTkLabel(
            header, text="Track your spending habits and patterns",
            text_color="gray60", anchor="w",
        ).grid(row=1, column=0, sticky="w")
        ctk.CTkButton(header, text="Refresh", width=90, command=self._load).grid(
            row=0, column=1, rowspan=2
        )

    def _clear_content(self):
        for w in self._content.winfo_children():
            w.destroy()

    def _show_loading(self):
        self._clear_content()
        ctk.CTkLabel(self._content, text="Loading…", text_color="gray60").grid(
            row=0, column=0, pady=40
        )

    def _show_error(self, message: str):
        self._clear_content()
        ErrorPanel(self._content, message, on_retry=self._load).grid(
            row=0, column=0, sticky="ew", pady=20
        )

    def _show_data(self):
        self._clear_content()
        summary = self._state.summary
        if summary is None:
            return

        top = ctk.CTkFrame(self._content, fg_color="transparent")
        top.grid(row=0, column=0, sticky="ew", pady=(0, 12))
        top.grid_columnconfigure(0, weight=1)
        top.grid_columnconfigure(1, weight=2)

        trend = summary.trend_data
        arrow = "▲" if trend.direction == "up" else "▼"
        StatCard(
            top, "Total Spent", format_whole_currency(summary.total_spent),
            subtitle=f"{arrow} {format_percentage(trend.percentage)} vs last week",
            subtitle_color=TREND_COLORS.get(trend.direction, "gray60"),
            value_size=26,
        ).grid(row=0, column=0, sticky="nsew", padx=(0, 8))

        stats = summary.weekly_stats
        grid = ctk.CTkFrame(top, fg_color="transparent")
        grid.grid(row=0, column=1, sticky="nsew")
        grid.grid_columnconfigure((0, 1), weight=1)
        for i, (label, value) in enumerate([
            ("This Week",    format_whole_currency(stats.spent)),
            ("Transactions", str(stats.transactions)),
            ("Categories",   str(stats.categories)),
            ("Daily Avg",    format_whole_currency(stats.daily_average)),
        ]):
            StatCard(grid, label, value).grid(
                row=i // 2, column=i % 2, sticky="ew", padx=4, pady=4
            )

        chart = WeeklyChart(self._content)
        chart.grid(row=2, column=0, sticky="nsew")
        chart.after(50, lambda: chart.draw(self._state.weekly_trend))

    # ── Data loading ──────────────────────────────────────────────────────────

    def _load(self):
        self._show_loading()

        def fetch():
            committed = self._state.fetch()
            if committed:
                self.after(0, self._on_data_ready)

        threading.Thread(target=fetch, daemon=True).start()

    def _on_data_ready(self):
        if not self.winfo_exists():
            return
        if self._state.loading:
            return  # a newer fetch is still running
        if self._state.error:
            self._show_error(self._state.error)
        else:
            self._show_data()
