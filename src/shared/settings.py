"""Завантаження налаштувань інвентаря з YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)

# (field, column title) pairs for the device tables
_DEFAULT_COLUMNS: list[tuple[str, str]] = [
    ("Address", "IP Address"),
    ("DevName", "Device Name"),
    ("ModelName", "Model Name"),
    ("Type", "Type"),
    ("CommSetting_PortNo", "Port"),
    ("CommSetting_UseSSL", "SSL"),
    ("CommSetting_Password", "Password"),
]


@dataclass(slots=True)
class InventorySettings:
    """Reserved XML names and table layout."""

    serial_attribute: str = "SrNo"
    container_tags: tuple[str, ...] = ("CommSetting",)
    key_separator: str = "_"
    extensions: tuple[str, ...] = (".xml",)
    columns: list[tuple[str, str]] = field(default_factory=lambda: list(_DEFAULT_COLUMNS))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InventorySettings:
        inv = data.get("inventory", {}) or {}
        display = data.get("display", {}) or {}
        defaults = cls()

        columns = defaults.columns
        if display.get("columns"):
            columns = [(str(c["field"]), str(c.get("title", c["field"]))) for c in display["columns"]]

        return cls(
            serial_attribute=str(inv.get("serial_attribute", defaults.serial_attribute)),
            container_tags=tuple(inv.get("container_tags", defaults.container_tags)),
            key_separator=str(inv.get("key_separator", defaults.key_separator)),
            extensions=tuple(e.lower() for e in inv.get("extensions", defaults.extensions)),
            columns=columns,
        )


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Зчитує YAML файл та повертає його вміст як dict.

    Raises:
        FileNotFoundError: Якщо файл не знайдено.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")
    with p.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    log.debug("Loaded config %s (%d top-level keys)", p.name, len(data or {}))
    return data or {}


def load_settings(path: str | Path | None = None) -> InventorySettings:
    """Return settings from *path*, or the built-in defaults when *path* is None."""
    if path is None:
        return InventorySettings()
    return InventorySettings.from_dict(load_yaml(path))
