import customtkinter as ctk

from models.transaction import Transaction
from utils.transaction_display import format_total, transaction_row


class TransactionList(ctk.CTkFrame):
    def __init__(self, master, title: str, date_format: str = "MM/DD/YYYY", **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._date_format = date_format

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", pady=(0, 4))
        ctk.CTkLabel(
            header, text=title, font=ctk.CTkFont(size=15, weight="bold"), anchor="w",
        ).pack(side="left")
        self._total_label = ctk.CTkLabel(header, text=format_total(0.0), text_color="gray60")
        self._total_label.pack(side="right")

        self._rows = ctk.CTkScrollableFrame(self)
        self._rows.grid(row=1, column=0, sticky="nsew")
        self._rows.grid_columnconfigure(1, weight=1)

    def render(self, transactions: list[Transaction], total: float):
        self._total_label.configure(text=format_total(total))
        for w in self._rows.winfo_children():
            w.destroy()

        if not transactions:
            ctk.CTkLabel(
                self._rows, text="No transactions yet", text_color="gray60",
            ).grid(row=0, column=0, columnspan=3, pady=20)
            return

        for idx, tx in enumerate(transactions):
            self._add_row(idx, tx)

    def _add_row(self, idx: int, tx: Transaction):
        row = transaction_row(tx, self._date_format)
        bg = ("gray90", "gray20") if idx % 2 == 0 else ("gray86", "gray24")
        f = ctk.CTkFrame(self._rows, fg_color=bg, corner_radius=4)
        f.grid(row=idx, column=0, columnspan=3, sticky="ew", pady=1)
        f.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            f, text=row.amount, width=110, anchor="w",
            font=ctk.CTkFont(weight="bold"),
        ).grid(row=0, column=0, padx=6, pady=3, sticky="w")
        ctk.CTkLabel(f, text=row.category, anchor="w").grid(
            row=0, column=1, padx=4, sticky="ew"
        )
        ctk.CTkLabel(
            f, text=row.date,
            text_color="gray60", anchor="e", width=90,
        ).grid(row=0, column=2, padx=6)
        if row.note:
            ctk.CTkLabel(
                f, text=row.note, text_color="gray60", anchor="w",
                font=ctk.CTkFont(size=11),
            ).grid(row=1, column=0, columnspan=3, padx=6, pady=(0, 3), sticky="w")
