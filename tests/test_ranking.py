import pytest

from altokepe.ranking import Order, RankedDish, SaleRecord, SalesRanking

LOMO = RankedDish(1, "Lomo Saltado", 20)
CEVICHE = RankedDish(3, "Ceviche", 15)
POLLO = RankedDish(2, "Pollo a la Brasa", 30)


def test_empty_ranking_has_no_records():
    ranking = SalesRanking()
    assert ranking.records() == []
    assert len(ranking) == 0


def test_first_sale_creates_record_with_one_unit():
    ranking = SalesRanking()
    ranking.register_sale(Order(1, [CEVICHE]))
    assert ranking.records() == [SaleRecord(CEVICHE.id, CEVICHE.name, 1)]


def test_repeated_dishes_accumulate():
    ranking = SalesRanking()
    ranking.register_sale(Order(1, [LOMO, LOMO]))
    ranking.register_sale(Order(2, [LOMO, CEVICHE]))
    assert ranking[LOMO.id].quantity_sold == 3
    assert ranking[CEVICHE.id].quantity_sold == 1


def test_total_units_equal_dishes_registered():
    ranking = SalesRanking()
    orders = [Order(1, [LOMO, POLLO]), Order(2, [CEVICHE, POLLO, POLLO]), Order(3, [])]
    for order in orders:
        ranking.register_sale(order)
    total = sum(record.quantity_sold for record in ranking.records())
    assert total == sum(len(order.dishes) for order in orders)


def test_records_are_ordered_by_dish_id():
    ranking = SalesRanking()
    ranking.register_sale(Order(1, [CEVICHE, LOMO, POLLO]))
    ids = [record.dish_id for record in ranking.records()]
    assert ids == sorted(ids)
    assert [record.dish_id for record in ranking] == ids


def test_name_is_kept_from_first_sale():
    ranking = SalesRanking()
    ranking.register_sale(Order(1, [LOMO]))
    ranking.register_sale(Order(2, [RankedDish(LOMO.id, "Otro nombre")]))
    assert ranking[LOMO.id].dish_name == LOMO.name


def test_unknown_dish_lookup_raises():
    ranking = SalesRanking()
    assert LOMO.id not in ranking
    with pytest.raises(KeyError):
        ranking[LOMO.id]