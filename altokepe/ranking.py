"""Running tally of how many times each dish has been sold."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RankedDish:
    """A dish as it appears inside an order."""

    id: int
    name: str
    preparation_time: int = 0


@dataclass
class Order:
    """An order made up of a list of dishes."""

    id: int
    dishes: list[RankedDish] = field(default_factory=list)


@dataclass
class SaleRecord:
    """How many units of one dish have been sold."""

    dish_id: int
    dish_name: str
    quantity_sold: int = 0


class SalesRanking:
    """Sales counters keyed by dish id."""

    def __init__(self) -> None:
        self._records: dict[int, SaleRecord] = {}

    def register_sale(self, order: Order) -> None:
        """Count one sale for every dish in the order."""
        for dish in order.dishes:
            record = self._records.get(dish.id)
            if record is None:
                self._records[dish.id] = SaleRecord(dish.id, dish.name, 1)
            else:
                record.quantity_sold += 1

    def records(self) -> list[SaleRecord]:
        """All records, ordered by dish id."""
        return [self._records[key] for key in sorted(self._records)]

    def __getitem__(self, dish_id: int) -> SaleRecord:
        return self._records[dish_id]

    def __contains__(self, dish_id: object) -> bool:
        return dish_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SaleRecord]:
        return iter(self.records())