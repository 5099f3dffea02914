"""Device record builder: XML document → flat DeviceEntry records.

Each direct child of the document root is one device. Its child elements
become fields; children of a container tag (``CommSetting`` by default) are
flattened into ``<Container>_<child>`` keys.

Fatal outcomes are returned as :class:`BuildError` values rather than raised,
so callers decide how far to unwind.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from lxml import etree

from src.contracts.device import DeviceEntry, DeviceRecord
from src.contracts.enums import ErrorKind
from src.contracts.errors import BuildError
from src.shared.settings import InventorySettings

log = logging.getLogger(__name__)

# Inventory files never need entity expansion
_PARSER = etree.XMLParser(resolve_entities=False)


# ── Document parsing ─────────────────────────────────────────────────────────


def parse_document(source: str | Path | bytes) -> etree._Element | BuildError:
    """Parse an XML file path (or raw bytes) and return its root element.

    Returns:
        root element — on success
        BuildError(MALFORMED_DOCUMENT) — when the markup is not well-formed
    """
    try:
        if isinstance(source, bytes):
            root = etree.fromstring(source, _PARSER)
        else:
            root = etree.parse(str(source), _PARSER).getroot()
    except etree.XMLSyntaxError as exc:
        return BuildError(ErrorKind.MALFORMED_DOCUMENT, str(exc))
    log.debug("Parsed document root <%s>", _tag(root))
    return root


# ── Flattening ───────────────────────────────────────────────────────────────


def _tag(element: etree._Element) -> str:
    return etree.QName(element).localname


def _text(element: etree._Element) -> str:
    """Full text content of *element*, descendants included."""
    return "".join(element.itertext())


def _children(element: etree._Element) -> Iterator[etree._Element]:
    # comments and processing instructions are skipped
    return element.iterchildren(tag=etree.Element)


def flatten_device(
    element: etree._Element,
    container_tags: Iterable[str] = ("CommSetting",),
    separator: str = "_",
) -> DeviceRecord:
    """Flatten one device element into a field mapping. Last write wins."""
    containers = set(container_tags)
    record: DeviceRecord = {}
    for node in _children(element):
        name = _tag(node)
        if name in containers:
            for setting in _children(node):
                record[f"{name}{separator}{_tag(setting)}"] = _text(setting)
        else:
            record[name] = _text(node)
    return record


# ── Entry building ───────────────────────────────────────────────────────────


def build_entry(
    ordinal: int,
    element: etree._Element,
    settings: InventorySettings,
) -> DeviceEntry | BuildError:
    """Build one entry; a device without a serial attribute is a fatal error."""
    record = flatten_device(element, settings.container_tags, settings.key_separator)
    serial = element.get(settings.serial_attribute)
    if serial is None:
        return BuildError(
            ErrorKind.MISSING_ATTRIBUTE,
            f"Device #{ordinal} <{_tag(element)}> has no '{settings.serial_attribute}' attribute",
            ordinal=ordinal,
        )
    entry = DeviceEntry(ordinal=ordinal, serial=serial, record=record)
    missing = entry.missing_fields()
    if missing:
        log.info("Device #%d %s lacks fields: %s", ordinal, serial, ", ".join(missing))
    log.debug("Built device #%d %s (%d fields)", ordinal, serial, len(record))
    return entry


def iter_entries(
    root: etree._Element,
    settings: InventorySettings | None = None,
) -> Iterator[DeviceEntry | BuildError]:
    """Lazily yield one result per device element, in document order.

    Devices past the point where the consumer stops iterating are never built.
    """
    settings = settings or InventorySettings()
    for ordinal, element in enumerate(_children(root), 1):
        yield build_entry(ordinal, element, settings)
