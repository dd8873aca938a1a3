"""Point-of-sale inventory: items, sales transactions, JSON storage and an audit log."""

__version__ = "0.1.0"

__all__ = [
    "audit",
    "errors",
    "inputs",
    "inventory",
    "inventory_handlers",
    "models",
    "storage",
    "transaction_handlers",
    "transactions",
]