"""Runtime configuration defaults for persistence and logging."""

from __future__ import annotations

MENU_PATH = "menu.txt"
CUSTOMERS_PATH = "customers.txt"

LOG_PATH = "logs/cafeteria.log"
LOG_LEVEL = "INFO"
LOG_ROTATION = "1 MB"

CURRENCY_SYMBOL = "$"
