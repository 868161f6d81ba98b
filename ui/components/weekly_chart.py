import customtkinter as ctk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from models.dashboard import WeeklyTrendData
from utils.currency import format_whole_currency


class WeeklyChart(ctk.CTkFrame):
    """Bar chart of total spending per week."""

    def __init__(self, master, **kwargs):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=8, **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(
            self, text="Weekly Spending Trend",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).grid(row=0, column=0, pady=(10, 0))

        self._fig = Figure(figsize=(8, 3), dpi=80, tight_layout=True)
        self._ax = self._fig.add_subplot(111)
        self._mpl = FigureCanvasTkAgg(self._fig, master=self)
        self._mpl.get_tk_widget().grid(row=1, column=0, sticky="nsew", padx=8, pady=(4, 8))

    def _style_ax(self):
        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if is_dark else "#e4e4e4"
        fg = "#aaaaaa" if is_dark else "#444444"
        self._fig.patch.set_facecolor(bg)
        self._ax.set_facecolor(bg)
        self._ax.tick_params(colors=fg, labelsize=8)
        for spine in self._ax.spines.values():
            spine.set_edgecolor(fg)

    def draw(self, data: list[WeeklyTrendData]):
        ax = self._ax
        ax.clear()
        self._style_ax()

        if not data:
            ax.text(0.5, 0.5, "No data", ha="center", va="center",
                    transform=ax.transAxes, color="gray")
            self._mpl.draw_idle()
            return

        labels = [d.week_start for d in data]
        totals = [d.total_spent for d in data]
        x = list(range(len(labels)))
        bars = ax.bar(x, totals, 0.6, color="#2196F3")
        ax.set_xticks(x)
        ax.set_xticklabels(labels, rotation=30 if len(labels) > 4 else 0, ha="right")
        ax.yaxis.set_major_formatter(
            lambda v, _: f"{v/1000:.0f}k" if abs(v) >= 1000 else f"{v:.0f}"
        )
        for bar, d in zip(bars, data):
            ax.annotate(
                format_whole_currency(d.total_spent),
                (bar.get_x() + bar.get_width() / 2, bar.get_height()),
                ha="center", va="bottom", fontsize=7, color="gray",
            )
        self._mpl.draw_idle()
