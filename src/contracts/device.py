"""Device record contract: the flat field mapping built from one XML element."""

from __future__ import annotations

from dataclasses import dataclass, field

# A flat mapping of field name -> text value. Children of a container tag
# (e.g. <CommSetting>) are stored as "<Container>_<child>".
DeviceRecord = dict[str, str]

# Keys every well-formed device is expected to carry. Only "Address" is
# validated; the rest are consulted by the console tables.
REQUIRED_FIELDS: list[str] = [
    "Address",
    "DevName",
    "ModelName",
    "Type",
    "CommSetting_PortNo",
    "CommSetting_UseSSL",
    "CommSetting_Password",
]


@dataclass(slots=True)
class DeviceEntry:
    """One device keyed by serial number.

    ``ordinal`` is the 1-based position in the sequence the entry came from:
    document order when built from XML, listing order from the catalog.
    """

    ordinal: int
    serial: str
    record: DeviceRecord = field(default_factory=dict)

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if name not in self.record]


@dataclass(slots=True)
class Rejection:
    """The first record that failed validation, kept for operator diagnosis."""

    ordinal: int
    serial: str
    record: DeviceRecord
    reasons: list[str]

    def lines(self) -> list[str]:
        """Return the diagnostic dump: device index, then every field."""
        out = [f"Device index: {self.ordinal}"]
        out.extend(f"{key}: {value}" for key, value in self.record.items())
        return out
