"""Restaurant reception desk: menu, tables, orders, sales tally and a simulated popularity ranking."""

__version__ = "0.1.0"
__all__ = ["__version__"]