# altokepe

A small reception desk for a restaurant. The receptionist picks one of ten
tables, builds an order from the menu, sends it, and frees the table again
when the guests leave. A second window shows a ranking of dishes by units
sold. It redraws every five seconds.

The windows use Tk (`tkinter` from the standard library). No other packages
are needed.

## Installing

```
pip install .
```

To also install what the tests need:

```
pip install .[test]
```

## Running the desk

```
altokepe
altokepe --menu path/to/Menu.csv
```

`--menu` names the menu CSV file. The default is `../../../DATA/Menu.csv`,
which is resolved against the current directory. If the file cannot be opened,
the desk still starts, but the menu is empty.

Two windows open:

- **Reception**: the tables are shown in a grid, three per row.
  - Clicking a free table selects it.
  - Once a table is selected, you can add dishes from the menu, each with an
    optional note such as "sin cebolla".
  - You can change a line's quantity (1 to 20) or remove the line before
    sending.
  - "Enviar Pedido" sends the order, marks the table as occupied and moves on
    to the next order number.
  - "Nuevo Pedido" discards the current order and the table selection.
  - Clicking an occupied table asks for confirmation before the table is freed.
- **Ranking** ("Clasificación de Platos"): five dishes are listed from most to
  least sold, and the first one is highlighted. Each row has a bar that is
  scaled to the best seller.

## The menu file

The menu is a UTF-8 CSV file. The first line is a header and is ignored. Each
following line has exactly five comma-separated fields:

```
id,nombre,precio,tiempo,categoria
1,Lomo Saltado,32.50,20,Fondo
2,Ceviche,28.00,15,Entrada
```

- Lines that do not have exactly five fields are skipped.
- A price that is not a number is read as 0.0. A preparation time that is not
  an integer is read as 0.
- Dishes are offered in alphabetical order by name.
- If a name appears more than once, the last line with that name is used.

## Using it as a library

The logic behind the windows works without a display.

- `altokepe.menu`
  - `parse_menu(lines)` parses the lines of a menu, header first, into a dict
    of `MenuItem` (`name`, `price`, `preparation_time`, `category`) sorted by
    name.
  - `load_menu(path)` reads and parses a file.
- `altokepe.order`
  - `Reception(menu, tables=10)` holds the desk state. Tables are numbered
    from 0.
  - `select_table(table)` chooses a table. `click_table(table, confirm)`
    selects a free table, or frees an occupied one when `confirm(table)`
    returns true. Both raise `IndexError` for a table that does not exist.
  - `add_dish(name, description)` adds one unit of a menu dish and returns the
    new `OrderLine`. It returns `None` when no table is selected or the dish is
    unknown.
  - `set_quantity(index, quantity)` changes a line's quantity and raises
    `ValueError` outside 1 to 20. `remove_line(index)` removes a line and
    returns it.
  - `send_order()` returns a `SentOrder` (`number`, `table`, `lines`,
    `total`), or `None` when there is no table or no line.
  - `new_order()` discards the lines and the table selection. `clear_form()`
    discards only the lines.
  - `format_money(value)` renders an amount with two decimals.
- `altokepe.ranking`
  - `SalesRanking.register_sale(order)` counts one sale for every dish in an
    `Order` made of `RankedDish` entries.
  - `SalesRanking.records()` returns the `SaleRecord` totals ordered by dish
    id. A ranking also supports `in`, `len`, indexing by dish id and iteration.
- `altokepe.popularity`
  - `simulate_sales(rng)` draws random figures for the five showcase dishes.
  - `build_rows(sales)` turns `SaleRecord`s into `RankingRow`s (`position`,
    `name`, `sold`, `percent`, `top`), with percentages relative to the best
    seller. It raises `ValueError` when there are no sales.
  - `simulate_ranking(rng)` does both steps. Pass your own `random.Random` to
    get repeatable results.
- `altokepe.gui`
  - `ReceptionWindow`, `RankingWindow` and `main(argv)` provide the windows.

## What it does not do

- Sent orders are not stored or forwarded anywhere. They are only written to
  the `altokepe.order` logger at debug level.
- Table occupancy and order numbers are lost when the program closes.
- The ranking window shows randomly simulated figures. It is not fed from the
  orders sent at the desk or from `SalesRanking`.

## Tests

```
pytest
```