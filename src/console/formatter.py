"""Console tables for device records."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from src.contracts.device import DeviceEntry, DeviceRecord

_RULE_CHAR = "-"


def _frame(rows: list[list[str]], headers: list[str]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=headers, dtype=str)


def _render(df: pd.DataFrame) -> str:
    if df.empty:
        body = "  ".join(df.columns)
    else:
        body = df.to_string(index=False, justify="left")
    width = max(len(line) for line in body.splitlines())
    rule = _RULE_CHAR * width
    return "\n".join([rule, body, rule])


def _cells(record: DeviceRecord, columns: list[tuple[str, str]]) -> list[str]:
    # fields absent from a record render as empty cells
    return [record.get(field, "") for field, _title in columns]


def render_devices(entries: Iterable[DeviceEntry], columns: list[tuple[str, str]]) -> str:
    """Render the full device listing: No, Serial Number, then *columns*."""
    headers = ["No", "Serial Number"] + [title for _field, title in columns]
    rows = [[str(e.ordinal), e.serial] + _cells(e.record, columns) for e in entries]
    return _render(_frame(rows, headers))


def render_device(serial: str, record: DeviceRecord, columns: list[tuple[str, str]]) -> str:
    """Render a single device without the No column."""
    headers = ["Serial Number"] + [title for _field, title in columns]
    return _render(_frame([[serial] + _cells(record, columns)], headers))
