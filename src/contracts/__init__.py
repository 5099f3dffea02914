"""Inventory contracts: data structures shared by all modules."""

from src.contracts.device import REQUIRED_FIELDS, DeviceEntry, DeviceRecord, Rejection
from src.contracts.enums import ErrorKind, MenuChoice
from src.contracts.errors import BuildError, LoadError

__all__ = [
    "BuildError",
    "DeviceEntry",
    "DeviceRecord",
    "ErrorKind",
    "LoadError",
    "MenuChoice",
    "REQUIRED_FIELDS",
    "Rejection",
]
