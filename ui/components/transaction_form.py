from tkinter import messagebox

import customtkinter as ctk

from models.transaction import TransactionRequest


class TransactionForm(ctk.CTkFrame):
    """Inline expense form: amount, category (pick a known one or type a new one), note.

    on_submit receives a TransactionRequest; missing fields are rejected with a
    blocking warning before anything is sent.
    """

    def __init__(self, master, on_submit, categories: list[str] | None = None, **kwargs):
        super().__init__(master, fg_color=("gray88", "gray18"), corner_radius=8, **kwargs)
        self._on_submit = on_submit

        self._amount_var = ctk.StringVar()
        self._cat_var = ctk.StringVar()
        self._note_var = ctk.StringVar()

        self.grid_columnconfigure((0, 1, 2), weight=1)

        self._label("Amount (Ksh):", 0)
        self._amount_entry = ctk.CTkEntry(self, textvariable=self._amount_var, width=140)
        self._amount_entry.grid(row=1, column=0, padx=(12, 4), pady=(0, 10), sticky="ew")

        self._label("Category:", 1)
        self._cat_combo = ctk.CTkComboBox(
            self, values=categories or [], variable=self._cat_var, width=180,
        )
        self._cat_combo.grid(row=1, column=1, padx=4, pady=(0, 10), sticky="ew")
        self._cat_combo.set("")

        self._label("Note (Optional):", 2)
        ctk.CTkEntry(self, textvariable=self._note_var, width=200).grid(
            row=1, column=2, padx=4, pady=(0, 10), sticky="ew"
        )

        self._submit_btn = ctk.CTkButton(
            self, text="Add Expense", width=120, command=self._on_save,
        )
        self._submit_btn.grid(row=1, column=3, padx=(4, 12), pady=(0, 10))

        self._amount_entry.focus_set()

    def _label(self, text, column):
        ctk.CTkLabel(self, text=text, anchor="w").grid(
            row=0, column=column, padx=(12 if column == 0 else 4, 4), pady=(8, 2), sticky="w"
        )

    def set_categories(self, categories: list[str]):
        current = self._cat_var.get()
        self._cat_combo.configure(values=categories)
        self._cat_combo.set(current)

    def set_busy(self, busy: bool):
        self._submit_btn.configure(state="disabled" if busy else "normal")

    def _on_save(self):
        try:
            request = TransactionRequest.from_form(
                self._amount_var.get(), self._cat_var.get(), self._note_var.get()
            )
        except ValueError as e:
            messagebox.showwarning("Add Expense", str(e), parent=self)
            return

        self._on_submit(request)
        self._reset()

    def _reset(self):
        self._amount_var.set("")
        self._cat_var.set("")
        self._cat_combo.set("")
        self._note_var.set("")
