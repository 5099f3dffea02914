"""Device catalog: record validation and the serial-number keyed store.

Ingestion is first-error-wins: every record before the first invalid one is
kept, the invalid record and everything after it are dropped.
"""

from __future__ import annotations

import ipaddress
import logging
import socket
from collections.abc import Callable, Iterable, Iterator

from src.contracts.device import DeviceEntry, DeviceRecord, Rejection
from src.contracts.enums import ErrorKind
from src.contracts.errors import BuildError, LoadError

log = logging.getLogger(__name__)


# ── Validation rules ─────────────────────────────────────────────────────────

# A rule returns a reason string when the record fails, None otherwise.
Rule = Callable[[DeviceRecord], str | None]

# Fields the rules read; a record without them cannot be validated at all.
VALIDATED_FIELDS: list[str] = ["Address"]


def _is_ip_address(value: str) -> bool:
    """IPv4/IPv6 literal, including classic short IPv4 forms (``10.1``, ``1``)."""
    try:
        ipaddress.ip_address(value)
        return True
    except ValueError:
        pass
    if not value or ":" in value or any(ch.isspace() for ch in value):
        return False
    try:
        socket.inet_aton(value)
    except OSError:
        return False
    return True


def check_address(record: DeviceRecord) -> str | None:
    """Address must be a numeric IPv4 or IPv6 address."""
    value = record["Address"].strip()
    if not _is_ip_address(value):
        return f"invalid Address '{value}'"
    return None


RULES: list[Rule] = [check_address]


def validate_record(record: DeviceRecord, rules: Iterable[Rule] = RULES) -> list[str]:
    """Return a list of validation failures (empty = valid)."""
    reasons: list[str] = []
    for rule in rules:
        reason = rule(record)
        if reason:
            reasons.append(reason)
    return reasons


# ── Catalog ──────────────────────────────────────────────────────────────────


class DeviceCatalog:
    """Read-only mapping of serial number → DeviceRecord.

    Iteration follows insertion order; a duplicate serial overwrites the
    record but keeps the position of its first insertion.
    """

    def __init__(
        self,
        devices: dict[str, DeviceRecord] | None = None,
        rejection: Rejection | None = None,
    ) -> None:
        self._devices: dict[str, DeviceRecord] = dict(devices or {})
        self.rejection = rejection

    @classmethod
    def build(
        cls,
        entries: Iterable[DeviceEntry | BuildError],
        rules: Iterable[Rule] = RULES,
    ) -> DeviceCatalog:
        """Validate and store *entries* in order, stopping at the first invalid one.

        Raises:
            LoadError: when a BuildError is met before the stopping point,
                or when a record lacks a field the rules need.
        """
        rules = list(rules)
        devices: dict[str, DeviceRecord] = {}
        rejection: Rejection | None = None

        for entry in entries:
            if isinstance(entry, BuildError):
                raise LoadError.from_build_error(entry)

            missing = [name for name in VALIDATED_FIELDS if name not in entry.record]
            if missing:
                raise LoadError(
                    ErrorKind.MISSING_FIELD,
                    "An unexpected error occurred while parsing XML. "
                    f"Device #{entry.ordinal} ({entry.serial}) has no {', '.join(missing)} field",
                )

            reasons = validate_record(entry.record, rules)
            if reasons:
                rejection = Rejection(
                    ordinal=entry.ordinal,
                    serial=entry.serial,
                    record=entry.record,
                    reasons=reasons,
                )
                log.warning(
                    "Device #%d (%s) rejected: %s; ingestion stopped",
                    entry.ordinal,
                    entry.serial,
                    "; ".join(reasons),
                )
                for line in rejection.lines():
                    log.debug("  %s", line)
                break

            if entry.serial in devices:
                log.info("Duplicate serial %s at device #%d overwrites earlier record",
                         entry.serial, entry.ordinal)
            devices[entry.serial] = entry.record

        log.info("Catalog built: %d devices%s", len(devices),
                 " (partial)" if rejection else "")
        return cls(devices, rejection)

    # ── Queries ──────────────────────────────────────────────────────────

    def list_all(self) -> Iterator[DeviceEntry]:
        """Yield every device with a 1-based listing ordinal.

        Each call starts a fresh iteration.
        """
        for ordinal, (serial, record) in enumerate(self._devices.items(), 1):
            yield DeviceEntry(ordinal=ordinal, serial=serial, record=record)

    def find(self, serial: str) -> DeviceRecord | None:
        """Exact-match lookup; None means not found."""
        return self._devices.get(serial)

    def __len__(self) -> int:
        return len(self._devices)

    def __contains__(self, serial: object) -> bool:
        return serial in self._devices

    @property
    def is_partial(self) -> bool:
        return self.rejection is not None
