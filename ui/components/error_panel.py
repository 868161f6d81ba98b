import customtkinter as ctk

from utils.constants import SEVERITY_COLORS


class ErrorPanel(ctk.CTkFrame):
    """Full-area error view with an optional manual retry."""

    def __init__(self, master, message: str, on_retry=None, **kwargs):
        super().__init__(master, fg_color=("#FDECEA", "#3b1f1f"), corner_radius=10, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(self, text="⚠", font=ctk.CTkFont(size=36),
                     text_color=SEVERITY_COLORS["error"]).grid(row=0, column=0, pady=(24, 4))
        ctk.CTkLabel(
            self, text="Something went wrong",
            font=ctk.CTkFont(size=16, weight="bold"),
        ).grid(row=1, column=0, pady=(0, 4))
        ctk.CTkLabel(
            self, text=message, wraplength=420, text_color=SEVERITY_COLORS["error"],
        ).grid(row=2, column=0, padx=20, pady=(0, 12))

        if on_retry is not None:
            ctk.CTkButton(
                self, text="Try Again", width=110,
                fg_color="transparent", border_width=1,
                text_color=("gray10", "gray90"),
                command=on_retry,
            ).grid(row=3, column=0, pady=(0, 24))
