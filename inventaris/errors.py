"""Exceptions raised by the inventory, transaction and user layers."""


class InventoryError(Exception):
    """Base class for inventory failures."""


class ItemNotFoundError(InventoryError):
    """No item carries the requested id."""

    def __init__(self) -> None:
        super().__init__("Item tidak ditemukan")


class InventoryInputError(InventoryError):
    """Input for an inventory operation was rejected."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Input tidak valid: {message}")


class InsufficientStockError(InventoryError):
    """The item does not have enough stock."""

    def __init__(self) -> None:
        super().__init__("Stok tidak mencukupi")


class SaveError(InventoryError):
    """The inventory could not be written to disk."""

    def __init__(self) -> None:
        super().__init__("Gagal menyimpan data")


class TransactionError(Exception):
    """Base class for transaction failures."""


class TransactionNotFoundError(TransactionError):
    """There is nothing to sell or the item is missing."""

    def __init__(self) -> None:
        super().__init__("Item tidak ditemukan")


class TransactionInputError(TransactionError):
    """Input for a transaction was rejected."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Input tidak valid: {message}")


class TransactionStockError(TransactionError):
    """The item does not have enough stock for the transaction."""

    def __init__(self) -> None:
        super().__init__("Stok tidak mencukupi")


class UsersError(Exception):
    """Base class for user management failures."""


class UserNotFoundError(UsersError):
    """No such user."""

    def __init__(self) -> None:
        super().__init__("User tidak ditemukan")


class UserInputError(UsersError):
    """Input for a user operation was rejected."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Input tidak valid: {message}")


class InvalidCredentialsError(UsersError):
    """Username and password do not match."""

    def __init__(self) -> None:
        super().__init__("Username atau Password tidak valid")


class UserExistsError(UsersError):
    """A user with that name already exists."""

    def __init__(self) -> None:
        super().__init__("User sudah ada")