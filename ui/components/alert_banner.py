import customtkinter as ctk

from utils.constants import SEVERITY_COLORS


class AlertBanner(ctk.CTkFrame):
    """A dismissible colored banner for transient, non-blocking alerts.

    Destroys itself after auto_dismiss_ms unless that is None.
    """

    def __init__(self, master, message: str, severity: str = "error",
                 auto_dismiss_ms: int | None = 6000, **kwargs):
        color = SEVERITY_COLORS.get(severity, SEVERITY_COLORS["info"])
        super().__init__(master, fg_color=color, corner_radius=6, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self, text=message, text_color="white",
            anchor="w", padx=10, pady=6
        ).grid(row=0, column=0, sticky="ew")

        ctk.CTkButton(
            self, text="✕", width=28, height=24,
            fg_color="transparent",
            text_color="white",
            command=self.destroy,
        ).grid(row=0, column=1, padx=(0, 4))

        if auto_dismiss_ms is not None:
            self.after(auto_dismiss_ms, self._dismiss)

    def _dismiss(self):
        if self.winfo_exists():
            self.destroy()
