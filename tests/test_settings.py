"""Tests for src.shared.settings — YAML settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from src.shared.settings import InventorySettings, load_settings, load_yaml

CONFIG = Path(__file__).resolve().parent.parent / "config" / "inventory.yaml"


class TestLoadSettings:
    def test_defaults_without_path(self):
        s = load_settings(None)
        assert s.serial_attribute == "SrNo"
        assert s.container_tags == ("CommSetting",)
        assert s.extensions == (".xml",)
        assert s.columns[0] == ("Address", "IP Address")
        assert len(s.columns) == 7

    def test_shipped_config_matches_defaults(self):
        assert load_settings(CONFIG) == InventorySettings()

    def test_overrides(self, tmp_path):
        path = tmp_path / "inv.yaml"
        with open(path, "w") as f:
            yaml.dump(
                {
                    "inventory": {
                        "serial_attribute": "Serial",
                        "container_tags": ["CommSetting", "Snmp"],
                        "extensions": [".XML", ".inv"],
                    },
                    "display": {"columns": [{"field": "Address"}, {"field": "DevName", "title": "Name"}]},
                },
                f,
            )
        s = load_settings(path)
        assert s.serial_attribute == "Serial"
        assert s.container_tags == ("CommSetting", "Snmp")
        assert s.extensions == (".xml", ".inv")
        assert s.columns == [("Address", "Address"), ("DevName", "Name")]
        assert s.key_separator == "_"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == InventorySettings()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml(tmp_path / "nope.yaml")
