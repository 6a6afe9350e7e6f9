"""Simulated dish popularity ranking."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from altokepe.ranking import SaleRecord

REFRESH_INTERVAL_MS = 5000

# (id, name, spread, base): sales are drawn from base .. base + spread - 1
_SIMULATED_DISHES = (
    (1, "Lomo Saltado", 120, 100),
    (2, "Pollo a la Brasa", 100, 80),
    (3, "Ceviche", 90, 60),
    (4, "Tallarines Verdes", 80, 50),
    (5, "Arroz con Pollo", 70, 40),
)


@dataclass(frozen=True)
class RankingRow:
    """One row of the ranking display."""

    position: int
    name: str
    sold: int
    percent: int

    @property
    def top(self) -> bool:
        return self.position == 1


def simulate_sales(rng: random.Random | None = None) -> list[SaleRecord]:
    """Draw random sales figures for the showcase dishes."""
    source = random if rng is None else rng
    return [
        SaleRecord(dish_id, name, source.randrange(spread) + base)
        for dish_id, name, spread, base in _SIMULATED_DISHES
    ]


def build_rows(sales: Iterable[SaleRecord]) -> list[RankingRow]:
    """Rank sales from best to worst, with each bar relative to the best."""
    ordered = sorted(sales, key=lambda record: record.quantity_sold, reverse=True)
    if not ordered:
        raise ValueError("no sales to rank")
    best = ordered[0].quantity_sold
    return [
        RankingRow(
            position,
            record.dish_name,
            record.quantity_sold,
            record.quantity_sold * 100 // best if best else 0,
        )
        for position, record in enumerate(ordered, start=1)
    ]


def simulate_ranking(rng: random.Random | None = None) -> list[RankingRow]:
    """Simulated sales turned into ranking rows."""
    return build_rows(simulate_sales(rng))