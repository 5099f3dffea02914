"""Shared fixtures for device inventory tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.contracts.device import DeviceEntry, DeviceRecord
from src.shared.settings import InventorySettings

# ── Helper: records and entries with sensible defaults ──────────────────


def make_record(
    *,
    address: str = "10.0.0.1",
    dev_name: str = "Core Switch",
    model_name: str = "CS-4800",
    type_: str = "Switch",
    port: str = "22",
    use_ssl: str = "true",
    password: str = "s3cret",
) -> DeviceRecord:
    return {
        "Address": address,
        "DevName": dev_name,
        "ModelName": model_name,
        "Type": type_,
        "CommSetting_PortNo": port,
        "CommSetting_UseSSL": use_ssl,
        "CommSetting_Password": password,
    }


def make_entry(ordinal: int = 1, serial: str = "A1", **record_kw: str) -> DeviceEntry:
    return DeviceEntry(ordinal=ordinal, serial=serial, record=make_record(**record_kw))


# ── Helper: XML documents ───────────────────────────────────────────────


def device_xml(
    serial: str | None = "A1",
    address: str = "10.0.0.1",
    dev_name: str = "Core Switch",
    port: str = "22",
    extra: str = "",
) -> str:
    """Return one <Device> element as XML text. serial=None omits SrNo."""
    attr = f' SrNo="{serial}"' if serial is not None else ""
    return (
        f"<Device{attr}>"
        f"<Address>{address}</Address>"
        f"<DevName>{dev_name}</DevName>"
        "<ModelName>CS-4800</ModelName>"
        "<Type>Switch</Type>"
        "<CommSetting>"
        f"<PortNo>{port}</PortNo>"
        "<UseSSL>true</UseSSL>"
        "<Password>s3cret</Password>"
        "</CommSetting>"
        f"{extra}"
        "</Device>"
    )


def inventory_xml(*devices: str) -> str:
    return '<?xml version="1.0" encoding="utf-8"?>\n<Devices>' + "".join(devices) + "</Devices>\n"


def write_inventory(directory: Path, *devices: str, name: str = "devices.xml") -> Path:
    path = directory / name
    path.write_text(inventory_xml(*devices), encoding="utf-8")
    return path


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture
def settings() -> InventorySettings:
    return InventorySettings()


@pytest.fixture
def two_device_file(tmp_path) -> Path:
    """A1 valid, A2 with an invalid address."""
    return write_inventory(
        tmp_path,
        device_xml("A1", "10.0.0.1"),
        device_xml("A2", "not-an-ip"),
    )


def fake_input(*answers: str):
    """Return an input() replacement that yields *answers*, then raises EOFError."""
    it = iter(answers)
    prompts: list[str] = []

    def _read(prompt: str = "") -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    _read.prompts = prompts  # type: ignore[attr-defined]
    return _read
