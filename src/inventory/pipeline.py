"""Конвеєр завантаження: XML файл -> перевірки -> парсинг -> каталог."""

from __future__ import annotations

import logging
from pathlib import Path

from src.contracts.enums import ErrorKind
from src.contracts.errors import BuildError, LoadError
from src.inventory.builder import iter_entries, parse_document
from src.inventory.catalog import DeviceCatalog
from src.shared.settings import InventorySettings

log = logging.getLogger(__name__)


def check_input_path(path: str | Path, settings: InventorySettings) -> Path:
    """Reject missing files and wrong extensions before any parsing.

    Raises:
        LoadError: FILE_NOT_FOUND or WRONG_EXTENSION.
    """
    p = Path(path)
    if not p.is_file():
        raise LoadError(
            ErrorKind.FILE_NOT_FOUND,
            "File not exist. Please provide a valid file path.",
        )
    if p.suffix.lower() not in settings.extensions:
        raise LoadError(
            ErrorKind.WRONG_EXTENSION,
            "Given file is not an XML file. The file extension is wrong.",
        )
    return p


def load_catalog(
    path: str | Path,
    settings: InventorySettings | None = None,
) -> DeviceCatalog:
    """Build the device catalog from an inventory file.

    The parsed tree lives only for the duration of this call.

    Raises:
        LoadError: on any fatal file or document error; no catalog is built.
    """
    settings = settings or InventorySettings()
    p = check_input_path(path, settings)

    log.info("Loading inventory %s", p)
    root = parse_document(p)
    if isinstance(root, BuildError):
        raise LoadError(root.kind, f"Invalid XML format. {root.message}")

    catalog = DeviceCatalog.build(iter_entries(root, settings))
    log.info("Loaded %d devices from %s", len(catalog), p.name)
    return catalog
