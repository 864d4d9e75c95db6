# ABOUTME: Public API for the BookBank inventory database layer.
# ABOUTME: Exports connection management, inventory operations, and record types.

from bookbank.db.connection import DEFAULT_DB_PATH, open_inventory
from bookbank.db.inventory import DuplicateEntryError, LibraryInventory
from bookbank.db.mapping import InventoryRecord

__all__ = [
    "DEFAULT_DB_PATH",
    "DuplicateEntryError",
    "InventoryRecord",
    "LibraryInventory",
    "open_inventory",
]
