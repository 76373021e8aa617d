"""
Dashboard — the monitor's single window.

  header   → blue band with title
  current  → temperature / humidity / gas / status labels
  history  → read-only Treeview, one row per tick, auto-scrolled
  footer   → refresh interval note

Created and updated EXCLUSIVELY on the Tkinter main thread.
Hardened against widget-destroyed errors with TclError guards.
"""

import tkinter as tk
from tkinter import ttk

from .constants import (
    THEME, FONT_FAMILY, WINDOW_TITLE, WINDOW_SIZE, HEADER_TITLE,
    HISTORY_TITLE, HISTORY_COLUMNS, FOOTER_TEXT,
)
from .config import log
from .state import DisplayState


class Dashboard:

    def __init__(self, root, refresh_interval):
        self._root = root
        self._refresh_interval = refresh_interval
        self._labels = {}
        self._table = None
        self._build_ui()

    # ─── UI construction ─────────────────────────────────────

    def _build_ui(self):
        root = self._root
        root.title(WINDOW_TITLE)
        root.configure(bg=THEME["body_bg"])
        root.resizable(True, True)

        w, h = WINDOW_SIZE
        root.geometry(f"{w}x{h}")
        root.update_idletasks()
        x = (root.winfo_screenwidth() - w) // 2
        y = (root.winfo_screenheight() - h) // 2
        root.geometry(f"{w}x{h}+{x}+{y}")

        # ── Header ────────────────────────────────────────
        header = tk.Frame(root, bg=THEME["header_bg"], height=56)
        header.pack(fill="x", side="top")
        header.pack_propagate(False)
        tk.Label(header, text=HEADER_TITLE,
                 font=(FONT_FAMILY, 22, "bold"), fg=THEME["header_fg"],
                 bg=THEME["header_bg"]).pack(expand=True)

        # ── Footer (packed before body so it keeps its space) ──
        footer = tk.Frame(root, bg=THEME["footer_bg"], height=32)
        footer.pack(fill="x", side="bottom")
        footer.pack_propagate(False)
        tk.Label(footer,
                 text=FOOTER_TEXT.format(interval=self._refresh_interval),
                 font=(FONT_FAMILY, 12, "italic"), fg=THEME["footer_fg"],
                 bg=THEME["footer_bg"]).pack(expand=True)

        # ── Body ──────────────────────────────────────────
        body = tk.Frame(root, bg=THEME["body_bg"], padx=20, pady=10)
        body.pack(fill="both", expand=True)

        current = tk.Frame(body, bg=THEME["body_bg"])
        current.pack(fill="x", pady=(0, 10))

        initial = DisplayState.loading()
        for key in ("temperature", "humidity", "gas_level"):
            label = tk.Label(current, text=getattr(initial, key),
                             font=(FONT_FAMILY, 16), fg=THEME["text"],
                             bg=THEME["body_bg"], anchor="w")
            label.pack(fill="x", pady=4)
            self._labels[key] = label

        status = tk.Label(current, text=initial.status,
                          font=(FONT_FAMILY, 18, "bold"), fg=initial.status_color,
                          bg=THEME["body_bg"], anchor="w")
        status.pack(fill="x", pady=4)
        self._labels["status"] = status

        history = ttk.LabelFrame(body, text=HISTORY_TITLE)
        history.pack(fill="both", expand=True)

        style = ttk.Style(root)
        style.configure("History.Treeview", font=(FONT_FAMILY, 12))
        style.configure("History.Treeview.Heading", font=(FONT_FAMILY, 12, "bold"))

        columns = [key for key, _, _ in HISTORY_COLUMNS]
        table = ttk.Treeview(history, columns=columns, show="headings",
                             selectmode="none", style="History.Treeview")
        for key, heading, width in HISTORY_COLUMNS:
            table.heading(key, text=heading)
            table.column(key, width=width, anchor="w", stretch=True)

        scrollbar = ttk.Scrollbar(history, orient="vertical", command=table.yview)
        table.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        table.pack(side="left", fill="both", expand=True)
        self._table = table

    # ─── View interface (called by Presenter) ────────────────

    def show_current(self, display):
        """Overwrite the four current-value labels and the status color."""
        try:
            self._labels["temperature"].config(text=display.temperature)
            self._labels["humidity"].config(text=display.humidity)
            self._labels["gas_level"].config(text=display.gas_level)
            self._labels["status"].config(text=display.status, fg=display.status_color)
        except tk.TclError as e:
            log.debug("show_current after window closed: %s", e)

    def append_row(self, row):
        """Append one history row and scroll it into view."""
        try:
            item = self._table.insert("", "end", values=row.values())
            self._table.see(item)
        except tk.TclError as e:
            log.debug("append_row after window closed: %s", e)
