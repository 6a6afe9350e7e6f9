import pytest

from altokepe.menu import MenuItem, load_menu, parse_menu

HEADER = "id,nombre,precio,tiempo,categoria"


def test_header_is_skipped():
    assert parse_menu([HEADER]) == {}


def test_empty_input_gives_empty_menu():
    assert parse_menu([]) == {}


def test_parses_fields():
    menu = parse_menu([HEADER, "1,Ceviche,25.5,15,Fondo\n"])
    assert menu == {"Ceviche": MenuItem("Ceviche", 25.5, 15, "Fondo")}


def test_rows_with_wrong_field_count_are_skipped():
    menu = parse_menu([HEADER, "1,Ceviche,25.5,15", "2,Lomo,30,20,Fondo,extra", "", "3,Sopa,10,5,Entrada"])
    assert list(menu) == ["Sopa"]


def test_names_are_sorted():
    menu = parse_menu([HEADER, "1,Tallarines Verdes,20,10,Fondo", "2,Arroz con Pollo,18,10,Fondo", "3,Ceviche,25,15,Fondo"])
    assert list(menu) == sorted(menu)


def test_later_duplicate_replaces_earlier():
    menu = parse_menu([HEADER, "1,Ceviche,25,15,Fondo", "2,Ceviche,27,12,Marino"])
    assert menu["Ceviche"] == MenuItem("Ceviche", 27.0, 12, "Marino")


def test_unparsable_numbers_become_zero():
    item = parse_menu([HEADER, "1,Ceviche,abc,xyz,Fondo"])["Ceviche"]
    assert item.price == 0.0
    assert item.preparation_time == 0


def test_load_menu_round_trip(tmp_path):
    path = tmp_path / "Menu.csv"
    path.write_text(HEADER + "\r\n1,Lomo Saltado,32.5,20,Fondo\r\n", encoding="utf-8")
    assert load_menu(path) == {"Lomo Saltado": MenuItem("Lomo Saltado", 32.5, 20, "Fondo")}


def test_load_menu_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_menu(tmp_path / "absent.csv")