"""Small office utilities: calculator with history, invoice totals, an item register and small exercises."""

__version__ = "0.1.0"