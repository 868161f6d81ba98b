import customtkinter as ctk


class StatCard(ctk.CTkFrame):
    def __init__(self, master, label: str, value: str = "",
                 subtitle: str = "", subtitle_color="gray60", value_size: int = 20, **kwargs):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=10, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self, text=label.upper(), font=ctk.CTkFont(size=11),
            text_color="gray60",
        ).grid(row=0, column=0, pady=(12, 0), padx=16, sticky="w")

        self._value_label = ctk.CTkLabel(
            self, text=value,
            font=ctk.CTkFont(size=value_size, weight="bold"),
            text_color=("gray10", "gray90"),
        )
        self._value_label.grid(row=1, column=0, pady=(4, 0), padx=16, sticky="w")

        self._subtitle_label = ctk.CTkLabel(
            self, text=subtitle, font=ctk.CTkFont(size=12), text_color=subtitle_color,
        )
        self._subtitle_label.grid(row=2, column=0, pady=(0, 12), padx=16, sticky="w")
