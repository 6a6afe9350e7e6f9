"""Desktop windows for the reception desk and the dish popularity ranking."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Callable, Sequence
from functools import partial

from altokepe.menu import DEFAULT_MENU_PATH, MenuItem, load_menu
from altokepe.order import PLACEHOLDER, Reception, format_money
from altokepe.popularity import REFRESH_INTERVAL_MS, RankingRow, simulate_ranking

log = logging.getLogger(__name__)

TABLE_COLUMNS = 3

COLOR_BACKGROUND = "#ffffff"
COLOR_MAIN = "#ECAC5B"
COLOR_TEXT = "#333333"
COLOR_LIGHT_TEXT = "#ffffff"
COLOR_HIGHLIGHT = "#0066cc"
COLOR_WARNING = "#ff3333"
COLOR_LIGHT_GREY = "#f5f5f5"

COLOR_PRIMARY = "#2C3E50"
COLOR_ACCENT = "#3498db"
COLOR_RANKING_BG = "#f0f4f8"
COLOR_TOP1 = "#D4AF37"
COLOR_ROW_BG = "#ffffff"
COLOR_BORDER = "#cccccc"
COLOR_TROUGH = "#e6e6e6"

_LINE_HEADERS = ("Plato", "Precio", "Cantidad", "Total", "Descripción", "Acción")
_FONT = "TkDefaultFont"


def table_grid_position(index: int, columns: int = TABLE_COLUMNS) -> tuple[int, int]:
    """Row and column of a table button in the grid."""
    if columns <= 0:
        raise ValueError("columns must be positive")
    if index < 0:
        raise ValueError("index must not be negative")
    return divmod(index, columns)


def table_button_text(index: int) -> str:
    """Caption of the button for a table numbered from 0."""
    return f"Mesa\n\n{index + 1}"


class ReceptionWindow:
    """Tables on the left, the order being built on the right."""

    def __init__(self, master, reception: Reception, confirm: Callable[[int], bool] | None = None) -> None:
        import tkinter as tk
        from tkinter import messagebox, ttk

        self._tk = tk
        self._ttk = ttk
        self._messagebox = messagebox
        self.reception = reception
        self._confirm = confirm or self._ask_free_table
        self._line_totals: list = []

        self.frame = tk.Frame(master, bg=COLOR_BACKGROUND, padx=20, pady=20)
        self.frame.pack(fill="both", expand=True)
        self._build_tables()
        ttk.Separator(self.frame, orient="vertical").pack(side="left", fill="y", padx=15)
        self._build_order()
        self.refresh()

    def _label(self, parent, text: str = "", size: int = 14, **options):
        options.setdefault("fg", COLOR_TEXT)
        options.setdefault("bg", COLOR_BACKGROUND)
        return self._tk.Label(parent, text=text, font=(_FONT, size, "bold"), **options)

    def _banner(self, parent, size: int = 14):
        return self._label(parent, size=size, fg=COLOR_LIGHT_TEXT, bg=COLOR_MAIN, padx=10, pady=10, anchor="w")

    def _build_tables(self) -> None:
        tk = self._tk
        section = tk.Frame(self.frame, bg=COLOR_BACKGROUND)
        section.pack(side="left", fill="both", expand=True)
        self._label(section, "MESAS DEL RESTAURANTE", size=24).pack(pady=15)
        self._ttk.Separator(section, orient="horizontal").pack(fill="x")
        grid = tk.Frame(section, bg=COLOR_BACKGROUND)
        grid.pack(pady=20)
        self._table_buttons = []
        for index, _ in enumerate(self.reception.occupied):
            button = tk.Button(
                grid,
                text=table_button_text(index),
                width=12,
                height=6,
                font=(_FONT, 18, "bold"),
                fg=COLOR_LIGHT_TEXT,
                relief="flat",
                command=partial(self._on_table, index),
            )
            row, column = table_grid_position(index)
            button.grid(row=row, column=column, padx=10, pady=10)
            self._table_buttons.append(button)

    def _build_order(self) -> None:
        tk = self._tk
        section = tk.Frame(self.frame, bg=COLOR_BACKGROUND)
        section.pack(side="left", fill="both", expand=True)
        self._label(section, "PEDIDOS", size=24).pack(pady=15)
        self._ttk.Separator(section, orient="horizontal").pack(fill="x")

        self._order_label = self._banner(section)
        self._order_label.pack(fill="x", pady=5)
        self._table_label = self._banner(section)
        self._table_label.pack(fill="x", pady=5)

        self._label(section, "Seleccionar Plato:").pack(anchor="w", pady=(10, 0))
        self._dishes = self._ttk.Combobox(
            section, state="readonly", values=[PLACEHOLDER, *self.reception.menu]
        )
        self._dishes.current(0)
        self._dishes.pack(fill="x")

        self._label(section, "Descripción (opcional):").pack(anchor="w", pady=(10, 0))
        self._description = tk.Entry(section, font=(_FONT, 14))
        self._description.pack(fill="x")

        self._add_button = tk.Button(
            section, text="Agregar Plato", bg=COLOR_MAIN, fg=COLOR_LIGHT_TEXT, command=self._on_add
        )
        self._add_button.pack(fill="x", pady=10)

        table = tk.Frame(section, bg=COLOR_BACKGROUND)
        table.pack(fill="both", expand=True)
        header = tk.Frame(table, bg=COLOR_MAIN)
        header.pack(fill="x")
        for column, title in enumerate(_LINE_HEADERS):
            self._label(header, title, size=12, fg=COLOR_LIGHT_TEXT, bg=COLOR_MAIN, width=12).grid(
                row=0, column=column, padx=4, pady=8
            )
        self._lines_body = tk.Frame(table, bg=COLOR_BACKGROUND)
        self._lines_body.pack(fill="both", expand=True)

        self._total_label = self._banner(section, size=20)
        self._total_label.pack(fill="x", pady=10)

        buttons = tk.Frame(section, bg=COLOR_BACKGROUND)
        buttons.pack(fill="x")
        tk.Button(
            buttons, text="Nuevo Pedido", bg=COLOR_MAIN, fg=COLOR_LIGHT_TEXT, command=self._on_new
        ).pack(side="left", expand=True, fill="x", padx=5)
        self._send_button = tk.Button(
            buttons, text="Enviar Pedido", bg=COLOR_MAIN, fg=COLOR_LIGHT_TEXT, command=self._on_send
        )
        self._send_button.pack(side="left", expand=True, fill="x", padx=5)

    def refresh(self) -> None:
        """Bring every widget in line with the reception state."""
        reception = self.reception
        self._order_label.config(text=reception.order_label)
        self._table_label.config(text=reception.table_label)
        self._total_label.config(text=reception.total_label)
        for index, button in enumerate(self._table_buttons):
            button.config(bg=self._table_colour(index))
        self._add_button.config(state="normal" if reception.can_add else "disabled")
        self._send_button.config(state="normal" if reception.can_send else "disabled")
        self._rebuild_lines()

    def _table_colour(self, index: int) -> str:
        if self.reception.current_table == index:
            return COLOR_HIGHLIGHT
        if self.reception.occupied[index]:
            return COLOR_WARNING
        return COLOR_MAIN

    def _rebuild_lines(self) -> None:
        tk = self._tk
        for child in self._lines_body.winfo_children():
            child.destroy()
        self._line_totals = []
        for row, line in enumerate(self.reception.lines):
            cells = [
                self._label(self._lines_body, line.name, size=12, width=12),
                self._label(self._lines_body, format_money(line.price), size=12, width=12),
            ]
            quantity = tk.StringVar(value=str(line.quantity))
            spin = tk.Spinbox(
                self._lines_body,
                from_=1,
                to=20,
                width=6,
                textvariable=quantity,
                command=partial(self._on_quantity, row, quantity),
            )
            for event in ("<Return>", "<FocusOut>"):
                spin.bind(event, lambda _event, r=row, q=quantity: self._on_quantity(r, q))
            cells.append(spin)
            total = tk.StringVar(value=format_money(line.total))
            self._line_totals.append(total)
            cells.append(tk.Label(self._lines_body, textvariable=total, width=12, bg=COLOR_BACKGROUND, fg=COLOR_TEXT))
            cells.append(self._label(self._lines_body, line.description, size=12, width=20))
            cells.append(
                tk.Button(
                    self._lines_body,
                    text="Eliminar",
                    bg=COLOR_WARNING,
                    fg=COLOR_LIGHT_TEXT,
                    command=partial(self._on_remove, row),
                )
            )
            for column, cell in enumerate(cells):
                cell.grid(row=row, column=column, padx=4, pady=4)

    def _reset_inputs(self) -> None:
        self._dishes.current(0)
        self._description.delete(0, "end")

    def _ask_free_table(self, table: int) -> bool:
        return self._messagebox.askyesno(
            "Confirmar acción",
            f"¿Está seguro de que desea desocupar la Mesa {table + 1}?",
            default="no",
            parent=self.frame,
        )

    def _on_table(self, index: int) -> None:
        was_current = self.reception.current_table == index
        if self.reception.click_table(index, self._confirm) and was_current:
            self._reset_inputs()
        self.refresh()

    def _on_add(self) -> None:
        if self.reception.add_dish(self._dishes.get(), self._description.get()) is None:
            return
        self._reset_inputs()
        self.refresh()

    def _on_quantity(self, index: int, quantity) -> None:
        line = self.reception.lines[index]
        try:
            self.reception.set_quantity(index, int(quantity.get()))
        except ValueError:
            quantity.set(str(line.quantity))
            return
        self._line_totals[index].set(format_money(line.total))
        self._total_label.config(text=self.reception.total_label)

    def _on_remove(self, index: int) -> None:
        self.reception.remove_line(index)
        self.refresh()

    def _on_send(self) -> None:
        if self.reception.send_order() is not None:
            self._reset_inputs()
        self.refresh()

    def _on_new(self) -> None:
        self.reception.new_order()
        self._reset_inputs()
        self.refresh()


class RankingWindow:
    """Separate window showing the simulated dish ranking, refreshed periodically."""

    def __init__(self, master, rng: random.Random | None = None, interval_ms: int = REFRESH_INTERVAL_MS) -> None:
        import tkinter as tk
        from tkinter import ttk

        self._tk = tk
        self._ttk = ttk
        self._rng = rng
        self._interval = interval_ms
        self.rows: list[RankingRow] = []

        self.window = tk.Toplevel(master)
        self.window.title("Clasificación de Platos")
        self.window.geometry("1000x700")
        self.window.configure(bg=COLOR_RANKING_BG)

        tk.Label(
            self.window,
            text="✨ CLASIFICACIÓN FINAL ✨\nRESTAURANTE ALTA GASTRONOMÍA",
            font=("Georgia", 28, "bold"),
            fg=COLOR_PRIMARY,
            bg=COLOR_RANKING_BG,
            justify="center",
        ).pack(pady=(20, 30))
        self._container = tk.Frame(self.window, bg=COLOR_RANKING_BG)
        self._container.pack(fill="both", expand=True, padx=50, pady=(10, 30))

        style = ttk.Style(self.window)
        style.configure("Top.Horizontal.TProgressbar", background=COLOR_TOP1, troughcolor=COLOR_TROUGH)
        style.configure("Accent.Horizontal.TProgressbar", background=COLOR_ACCENT, troughcolor=COLOR_TROUGH)

        self.refresh()
        self._schedule()

    def refresh(self) -> list[RankingRow]:
        """Draw new simulated figures and redraw the ranking."""
        tk = self._tk
        self.rows = simulate_ranking(self._rng)
        for child in self._container.winfo_children():
            child.destroy()
        for row in self.rows:
            colour = COLOR_TOP1 if row.top else COLOR_PRIMARY
            frame = tk.Frame(
                self._container,
                bg=COLOR_ROW_BG,
                highlightbackground=COLOR_BORDER,
                highlightthickness=2,
                height=80,
            )
            frame.pack(fill="x", pady=10)
            frame.pack_propagate(False)
            tk.Label(
                frame, text=str(row.position), width=3, font=(_FONT, 24, "bold"), fg=colour, bg=COLOR_ROW_BG
            ).pack(side="left", padx=(20, 10))
            tk.Label(
                frame, text=row.name, font=(_FONT, 20, "bold"), fg=COLOR_PRIMARY, bg=COLOR_ROW_BG, anchor="w", width=20
            ).pack(side="left")
            tk.Label(
                frame, text=str(row.sold), width=5, font=(_FONT, 22, "bold"), fg=COLOR_PRIMARY, bg=COLOR_ROW_BG
            ).pack(side="right", padx=(10, 20))
            self._ttk.Progressbar(
                frame,
                maximum=100,
                value=row.percent,
                style="Top.Horizontal.TProgressbar" if row.top else "Accent.Horizontal.TProgressbar",
            ).pack(side="left", fill="x", expand=True, padx=10)
        return self.rows

    def _schedule(self) -> None:
        self.window.after(self._interval, self._tick)

    def _tick(self) -> None:
        self.refresh()
        self._schedule()


def _read_menu(path) -> dict[str, MenuItem]:
    try:
        return load_menu(path)
    except OSError:
        log.debug("No se pudo abrir el archivo")
        return {}


def main(argv: Sequence[str] | None = None) -> int:
    """Open the reception window and the ranking window."""
    parser = argparse.ArgumentParser(prog="altokepe", description="Reception desk for the restaurant.")
    parser.add_argument("--menu", default=str(DEFAULT_MENU_PATH), help="menu CSV file")
    args = parser.parse_args(argv)

    import tkinter as tk

    menu = _read_menu(args.menu)
    root = tk.Tk()
    root.title("Altokepe Recepcionista")
    try:
        root.state("zoomed")
    except tk.TclError:
        try:
            root.attributes("-zoomed", True)
        except tk.TclError:
            pass
    ReceptionWindow(root, Reception(menu))
    RankingWindow(root)
    root.mainloop()
    return 0