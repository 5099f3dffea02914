"""Tests for src.contracts — DeviceEntry, Rejection, error types."""

from __future__ import annotations

from src.contracts import REQUIRED_FIELDS, DeviceEntry, ErrorKind, LoadError, Rejection
from src.contracts.errors import BuildError
from tests.conftest import make_record


class TestDeviceEntry:
    def test_no_missing_fields(self):
        entry = DeviceEntry(ordinal=1, serial="A1", record=make_record())
        assert entry.missing_fields() == []

    def test_missing_fields_in_required_order(self):
        entry = DeviceEntry(ordinal=1, serial="A1", record={"DevName": "x"})
        missing = entry.missing_fields()
        assert missing[0] == "Address"
        assert "DevName" not in missing
        assert len(missing) == len(REQUIRED_FIELDS) - 1

    def test_default_record_empty(self):
        assert DeviceEntry(ordinal=1, serial="A1").record == {}


class TestRejection:
    def test_lines(self):
        rej = Rejection(ordinal=4, serial="Z", record={"Address": "x", "Type": "Cam"}, reasons=["bad"])
        assert rej.lines() == ["Device index: 4", "Address: x", "Type: Cam"]


class TestErrors:
    def test_error_kind_values(self):
        assert ErrorKind.MALFORMED_DOCUMENT.value == "malformed_document"
        assert ErrorKind("missing_attribute") is ErrorKind.MISSING_ATTRIBUTE

    def test_load_error_from_build_error(self):
        err = LoadError.from_build_error(BuildError(ErrorKind.MISSING_ATTRIBUTE, "no SrNo", ordinal=3))
        assert err.kind == ErrorKind.MISSING_ATTRIBUTE
        assert str(err) == "no SrNo"
