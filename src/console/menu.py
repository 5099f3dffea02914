"""Interactive menu over a built DeviceCatalog.

The loop only reads a choice and dispatches to ``list_all()`` / ``find()``;
input and output callables are injectable so the loop runs in tests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from src.console.formatter import render_device, render_devices
from src.contracts.enums import MenuChoice
from src.inventory.catalog import DeviceCatalog
from src.shared.settings import InventorySettings

log = logging.getLogger(__name__)

MENU_TEXT = (
    "\nPlease select an option:\n"
    "[1] Show all devices\n"
    "[2] Search devices by serial number\n"
    "[3] Exit"
)
SERIAL_PROMPT = "Enter serial number of the device: "
NOT_FOUND = "Device not found."
INVALID_CHOICE = "Error: Invalid input. Please choose from the above options."
TERMINATED = "Program terminated."


def show_devices(catalog: DeviceCatalog, settings: InventorySettings, write: Callable[[str], None]) -> None:
    write(render_devices(catalog.list_all(), settings.columns))


def search_device(
    catalog: DeviceCatalog,
    serial: str,
    settings: InventorySettings,
    write: Callable[[str], None],
) -> bool:
    """Print the device for *serial* or the not-found message. Returns True if found."""
    record = catalog.find(serial)
    if record is None:
        log.debug("Serial %r not in catalog", serial)
        write(NOT_FOUND)
        return False
    write(render_device(serial, record, settings.columns))
    return True


def run_menu(
    catalog: DeviceCatalog,
    settings: InventorySettings | None = None,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> None:
    """Serve menu choices until Exit or end of input.

    *read* and *write* default to the builtin input() and print().
    """
    settings = settings or InventorySettings()
    read = read or input
    write = write or print
    while True:
        write(MENU_TEXT)
        try:
            choice = read("").strip()
            if choice == MenuChoice.SHOW_ALL.value:
                show_devices(catalog, settings, write)
            elif choice == MenuChoice.SEARCH.value:
                serial = read(SERIAL_PROMPT).strip()
                search_device(catalog, serial, settings, write)
            elif choice == MenuChoice.EXIT.value:
                write(TERMINATED)
                return
            else:
                write(INVALID_CHOICE)
        except EOFError:
            write(TERMINATED)
            return
