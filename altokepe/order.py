"""Order taking at the reception: tables, order lines and sending."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, replace

from altokepe.menu import MenuItem

log = logging.getLogger(__name__)

PLACEHOLDER = "Seleccione un plato..."
NUMBER_OF_TABLES = 10
MIN_QUANTITY = 1
MAX_QUANTITY = 20
NO_TABLE_TEXT = "Mesa: Ninguna seleccionada"


def format_money(value: float) -> str:
    """Format an amount with two decimals."""
    return f"{value:.2f}"


def _total_text(value: float) -> str:
    return f"Total: S/. {format_money(value)}"


@dataclass
class OrderLine:
    """One dish in the order being built."""

    name: str
    price: float
    quantity: int = 1
    description: str = "-"

    @property
    def total(self) -> float:
        return self.quantity * self.price


@dataclass(frozen=True)
class SentOrder:
    """An order that has been sent to the kitchen."""

    number: int
    table: int
    lines: tuple[OrderLine, ...]
    total: float


def _report(order: SentOrder) -> Iterator[str]:
    yield "PEDIDO ENVIADO"
    yield f"Pedido # {order.number}"
    yield f"Mesa: {order.table + 1}"
    for line in order.lines:
        yield f"  - {line.name} x {line.quantity} = S/. {format_money(line.total)}"
        if line.description != "-":
            yield f"    Descripción: {line.description}"
    yield _total_text(order.total)
    yield "======================"


class Reception:
    """State of the reception desk: table occupancy and the current order.

    Tables are numbered from 0; labels show them from 1.
    """

    def __init__(self, menu: Mapping[str, MenuItem] | None = None, tables: int = NUMBER_OF_TABLES) -> None:
        self.menu: dict[str, MenuItem] = dict(menu or {})
        self.occupied: list[bool] = [False] * tables
        self.order_number = 1
        self.current_table: int | None = None
        self.lines: list[OrderLine] = []

    @property
    def total(self) -> float:
        return sum(float(format_money(line.total)) for line in self.lines)

    @property
    def can_add(self) -> bool:
        return self.current_table is not None

    @property
    def can_send(self) -> bool:
        return self.current_table is not None and bool(self.lines)

    @property
    def order_label(self) -> str:
        return f"Pedido #{self.order_number}"

    @property
    def table_label(self) -> str:
        if self.current_table is None:
            return NO_TABLE_TEXT
        return f"Mesa: {self.current_table + 1}"

    @property
    def total_label(self) -> str:
        return _total_text(self.total)

    def _check_table(self, table: int) -> None:
        if not 0 <= table < len(self.occupied):
            raise IndexError(f"table {table} out of range")

    def select_table(self, table: int) -> None:
        """Make a table the one the order is for."""
        self._check_table(table)
        self.current_table = table
        log.debug("Mesa %d seleccionada", table + 1)

    def click_table(self, table: int, confirm: Callable[[int], bool]) -> bool:
        """Select a free table, or free an occupied one if confirm(table) agrees.

        Returns True when an occupied table was freed.
        """
        self._check_table(table)
        if not self.occupied[table]:
            self.select_table(table)
            return False
        if not confirm(table):
            return False
        self.occupied[table] = False
        if self.current_table == table:
            self.current_table = None
            self.clear_form()
        log.debug("Mesa %d desocupada", table + 1)
        return True

    def add_dish(self, name: str, description: str = "") -> OrderLine | None:
        """Add one unit of a menu dish; ignored without a table or a known dish."""
        if name == PLACEHOLDER or self.current_table is None:
            return None
        item = self.menu.get(name)
        if item is None:
            return None
        line = OrderLine(name, item.price, MIN_QUANTITY, description.strip() or "-")
        self.lines.append(line)
        return line

    def set_quantity(self, index: int, quantity: int) -> None:
        """Change the quantity of a line."""
        if not MIN_QUANTITY <= quantity <= MAX_QUANTITY:
            raise ValueError(f"quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}")
        self.lines[index].quantity = quantity

    def remove_line(self, index: int) -> OrderLine:
        """Remove a line from the order and return it."""
        removed = self.lines.pop(index)
        log.debug("Plato %s eliminado; %s", removed.name, self.total_label)
        return removed

    def send_order(self) -> SentOrder | None:
        """Send the current order, marking its table occupied.

        Returns None when there is no table or no line to send.
        """
        if self.current_table is None or not self.lines:
            return None
        table = self.current_table
        self.occupied[table] = True
        sent = SentOrder(self.order_number, table, tuple(replace(line) for line in self.lines), self.total)
        for message in _report(sent):
            log.debug(message)
        self.order_number += 1
        self.clear_form()
        self.current_table = None
        return sent

    def new_order(self) -> None:
        """Discard the current order and the table selection."""
        self.clear_form()
        self.current_table = None

    def clear_form(self) -> None:
        """Remove every line of the current order."""
        self.lines.clear()