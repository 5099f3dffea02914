"""Canonical enumerations for the inventory contracts."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    FILE_NOT_FOUND = "file_not_found"
    WRONG_EXTENSION = "wrong_extension"
    MALFORMED_DOCUMENT = "malformed_document"
    MISSING_ATTRIBUTE = "missing_attribute"
    MISSING_FIELD = "missing_field"


class MenuChoice(str, Enum):
    SHOW_ALL = "1"
    SEARCH = "2"
    EXIT = "3"
