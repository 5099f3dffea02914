"""CLI entry-point for the device inventory utility.

Usage examples
--------------
# Interactive menu:
device-util data/devices.xml

# One-shot listing / lookup:
device-util data/devices.xml --list
device-util data/devices.xml --find A1
"""

from __future__ import annotations

import argparse
import logging

from src.console.menu import run_menu, search_device, show_devices
from src.contracts.errors import LoadError
from src.inventory.pipeline import load_catalog
from src.shared.logger import setup_logging
from src.shared.settings import load_settings

log = logging.getLogger(__name__)

TERMINATE = "Terminate program."


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="device-util",
        description="Device inventory -- load an XML device list, then list or search devices",
    )
    p.add_argument(
        "xml_path",
        help="Path to the XML inventory file",
    )
    p.add_argument(
        "--config",
        default=None,
        help="YAML settings file (e.g. config/inventory.yaml). Built-in defaults if omitted.",
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--list",
        action="store_true",
        default=False,
        help="Print all devices and exit instead of starting the menu.",
    )
    mode.add_argument(
        "--find",
        metavar="SERIAL",
        default=None,
        help="Print the device with this serial number and exit.",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return p


def _fail(message: str) -> int:
    print(f"Error: {message}")
    print(TERMINATE)
    return 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = load_settings(args.config)
    except FileNotFoundError as exc:
        return _fail(str(exc))

    try:
        catalog = load_catalog(args.xml_path, settings)
    except LoadError as exc:
        log.debug("Load failed (%s)", exc.kind.value)
        return _fail(exc.message)
    except Exception as exc:
        log.debug("Unexpected load failure", exc_info=True)
        return _fail(f"An unexpected error occurred while parsing XML. {exc}")

    if catalog.rejection is not None:
        print("Error: Invalid device information. Please refer below details.")
        for line in catalog.rejection.lines():
            print(line)
        print()

    if args.list:
        show_devices(catalog, settings, print)
    elif args.find is not None:
        search_device(catalog, args.find.strip(), settings, print)
    else:
        run_menu(catalog, settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
