# inventaris

A small point-of-sale inventory library. It keeps a list of items with
stock and price, records sales transactions, stores both as JSON files and
appends actions to a plain-text audit log. Messages shown to the user are
in Indonesian.

## What it does

- **Items** (`inventaris.models.Item`) have an id, a name, a stock count and
  a price. `inventaris.inventory.InventoryService` adds (`add_item`),
  updates (`update_item`, `update_stock`), deletes (`delete_item`), looks up
  (`find`) and searches (`search`, case-insensitive substring match) them,
  takes stock out on a sale (`reduce_stock`), and saves the whole list to
  its JSON file after every change.
- **Transactions** (`inventaris.models.Transaction`) record the item sold,
  the quantity, the total price and the local time of sale.
  `inventaris.transactions.TransactionService` filters them by day
  (`by_date`), ranks items by units sold (`top_selling`) and works out
  totals (`calculate_total_price`). Sales of more than 10 units get a 10%
  discount.
- **Users** (`inventaris.models.User`) are records with an id, a username,
  a password and a role, either `Role.ADMIN` or `Role.KASIR` (cashier).
- **Storage** (`inventaris.storage`) reads and writes items
  (`load_items`, `save_items`, default `items.json`) and transactions
  (`load_transactions`, `save_transactions`, default `transaction.json`).
  Saving replaces the file's contents.
- **Audit log** (`inventaris.audit`) appends one timestamped line per
  action with `add_log`, returns the whole log with `read_logs` (or `None`
  if it cannot be read), and prints it with `show_audit_logs`.
- **Prices** are shown with a dot between each group of three digits,
  counting from the right, by `inventaris.inventory.format_price`.

## Using it

```python
from inventaris.inventory import InventoryService, format_price
from inventaris.transactions import TransactionService
from inventaris import audit

inventory = InventoryService.load("items.json")
inventory.add_item("Kopi", 20, 15000.0)

sales = TransactionService.load("transaction.json")
total = sales.calculate_total_price(15000.0, 12)   # 10% off above 10 units
print("Total: Rp" + format_price(total))           # Total: Rp162.000

audit.add_log("kasir1", "Transaksi Kopi x12", "audit.log")
print(audit.read_logs("audit.log"))
```

Loading from a file that is missing or unreadable gives an empty service
whose ids start at 1; otherwise the next id follows the last stored one.

### Console screens

`inventaris.inventory_handlers` and `inventaris.transaction_handlers` hold
interactive screens that print to the console and read answers from it:

- `view_items` lists stock, warning about items with 5 or fewer left;
  `add_items`, `handle_update_item`, `handle_update_stock`,
  `handle_delete_item` and `handle_search_item` change or search the
  stock list. The changing screens write to the audit log at `log_path`.
- `make_transaction` sells an item and returns the new `Transaction`, or
  `None` if the sale did not go through. It logs the sale under the given
  username and writes the new transaction to the service's file (replacing
  what the file held); the full history stays in `service.records`.
- `view_records`, `view_top_selling_item`, `view_total_transaction`
  (returns today's revenue and number of sales) and
  `view_transaction_by_date` show the sales history.

Answers are read with `inventaris.inputs.ask(prompt, parser)`, which
checks each line with one of the `parse_*` functions in
`inventaris.inputs` (names, stock counts above zero, prices with commas
allowed, ids, quantities, `YYYY-MM-DD` dates, usernames, passwords and
roles).

### Errors

Invalid input and failed operations raise exceptions from
`inventaris.errors`: `InventoryError`, `TransactionError` and `UsersError`,
each with subclasses for the specific case, such as
`InsufficientStockError`, `ItemNotFoundError`, `TransactionInputError` or
`UserInputError`.

## What it does not do

- There is no command to run and no main menu; the screens are functions
  to call from your own program.
- There is no login, logout or user management: `User` and `Role` are
  plain records, and nothing stores, adds, updates or checks users.
  Callers pass the acting username to `make_transaction` themselves.