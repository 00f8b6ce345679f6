"""Entry point for the cafeteria console."""

from __future__ import annotations

from loguru import logger

from cafeteria.console import CafeteriaConsole
from cafeteria.logger import setup_logging
from cafeteria.store import RecordStore


def main() -> None:
    """Load the stored records and run the console menu until exit."""
    setup_logging()
    logger.info("Starting cafeteria console")
    store = RecordStore()
    app = CafeteriaConsole(store)
    try:
        report = store.load()
    except OSError as exc:
        logger.exception("Could not read stored records")
        app.console.print(f"Could not read stored records: {exc}", markup=False)
        return
    app.report_load(report)
    app.run()
    logger.info("Cafeteria console stopped")


if __name__ == "__main__":
    main()
