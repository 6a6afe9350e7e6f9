import pytest

from altokepe.menu import MenuItem
from altokepe.order import (
    MAX_QUANTITY,
    NO_TABLE_TEXT,
    PLACEHOLDER,
    Reception,
    format_money,
)


@pytest.fixture
def reception():
    menu = {
        "Ceviche": MenuItem("Ceviche", 25.5, 15, "Fondo"),
        "Lomo Saltado": MenuItem("Lomo Saltado", 32.0, 20, "Fondo"),
    }
    return Reception(menu)


def test_initial_state(reception):
    assert reception.order_label == "Pedido #1"
    assert reception.table_label == NO_TABLE_TEXT
    assert reception.total_label == "Total: S/. 0.00"
    assert reception.occupied == [False] * 10
    assert not reception.can_add
    assert not reception.can_send


def test_format_money():
    assert format_money(2.5) == "2.50"
    assert format_money(0) == "0.00"


def test_add_dish_needs_table(reception):
    assert reception.add_dish("Ceviche") is None
    assert reception.lines == []


def test_placeholder_and_unknown_dish_ignored(reception):
    reception.select_table(0)
    assert reception.add_dish(PLACEHOLDER) is None
    assert reception.add_dish("Pizza") is None
    assert reception.lines == []


def test_add_dish_uses_menu_price_and_description(reception):
    reception.select_table(2)
    assert reception.table_label == "Mesa: 3"
    line = reception.add_dish("Ceviche", "  Sin cebolla  ")
    assert line.price == 25.5
    assert line.quantity == 1
    assert line.description == "Sin cebolla"
    assert reception.add_dish("Lomo Saltado", "   ").description == "-"
    assert reception.can_send


def test_quantity_scales_total(reception):
    reception.select_table(0)
    reception.add_dish("Ceviche")
    single = reception.total
    reception.set_quantity(0, 2)
    assert reception.total == pytest.approx(2 * single)
    assert reception.total_label == "Total: S/. " + format_money(reception.total)


@pytest.mark.parametrize("quantity", [0, MAX_QUANTITY + 1])
def test_quantity_out_of_range(reception, quantity):
    reception.select_table(0)
    reception.add_dish("Ceviche")
    with pytest.raises(ValueError):
        reception.set_quantity(0, quantity)


def test_remove_last_line_disables_send(reception):
    reception.select_table(0)
    reception.add_dish("Ceviche")
    reception.remove_line(0)
    assert reception.lines == []
    assert not reception.can_send


def test_send_order(reception):
    reception.select_table(4)
    reception.add_dish("Ceviche")
    reception.add_dish("Lomo Saltado")
    expected_total = reception.total
    sent = reception.send_order()
    assert sent.number == 1
    assert sent.table == 4
    assert [line.name for line in sent.lines] == ["Ceviche", "Lomo Saltado"]
    assert sent.total == expected_total
    assert reception.occupied[4]
    assert reception.order_label == f"Pedido #{sent.number + 1}"
    assert reception.lines == []
    assert reception.current_table is None


def test_send_without_lines_does_nothing(reception):
    reception.select_table(1)
    assert reception.send_order() is None
    assert not reception.occupied[1]


def test_click_occupied_table_requires_confirmation(reception):
    reception.select_table(3)
    reception.add_dish("Ceviche")
    reception.send_order()
    assert reception.click_table(3, lambda table: False) is False
    assert reception.occupied[3]
    assert reception.click_table(3, lambda table: True) is True
    assert not reception.occupied[3]


def test_click_free_table_selects_it(reception):
    asked = []
    reception.click_table(5, asked.append)
    assert reception.current_table == 5
    assert asked == []


def test_new_order_resets(reception):
    reception.select_table(0)
    reception.add_dish("Ceviche")
    reception.new_order()
    assert reception.lines == []
    assert reception.table_label == NO_TABLE_TEXT


def test_invalid_table(reception):
    with pytest.raises(IndexError):
        reception.select_table(10)