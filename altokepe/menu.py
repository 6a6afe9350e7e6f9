"""Restaurant menu loaded from a CSV file."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

DEFAULT_MENU_PATH = Path("../../../DATA/Menu.csv")
_FIELD_COUNT = 5


@dataclass(frozen=True)
class MenuItem:
    """One dish offered by the restaurant."""

    name: str
    price: float
    preparation_time: int
    category: str


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def parse_menu(lines: Iterable[str]) -> dict[str, MenuItem]:
    """Parse menu lines (header first) into items keyed and sorted by name.

    Lines that do not hold exactly five comma separated fields are skipped;
    a later line with the same name replaces an earlier one.
    """
    items: dict[str, MenuItem] = {}
    rows = iter(lines)
    next(rows, None)
    for raw in rows:
        fields = raw.rstrip("\r\n").split(",")
        if len(fields) != _FIELD_COUNT:
            continue
        _, name, price, preparation_time, category = fields
        items[name] = MenuItem(name, _to_float(price), _to_int(preparation_time), category)
    return dict(sorted(items.items()))


def load_menu(path: str | PathLike[str] = DEFAULT_MENU_PATH) -> dict[str, MenuItem]:
    """Read and parse a menu file."""
    with open(path, encoding="utf-8") as handle:
        return parse_menu(handle)