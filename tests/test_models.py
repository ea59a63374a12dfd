"""Tests for go_dep_report.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from go_dep_report.models import DependencyRecord, ModFile, ModuleIdentity


class TestDependencyRecord:
    def test_reads_go_list_field_names(self) -> None:
        record = DependencyRecord.model_validate(
            {
                "Path": "example.com/bar",
                "Version": "v1.0.0",
                "Update": {"Path": "example.com/bar", "Version": "v1.2.0"},
            }
        )
        assert record.import_path == "example.com/bar"
        assert record.current_version == "v1.0.0"
        assert record.update is not None
        assert record.update.new_version == "v1.2.0"

    def test_main_module_without_version(self) -> None:
        record = DependencyRecord.model_validate(
            {"Path": "example.com/service", "Main": True, "Dir": "/tmp/x"}
        )
        assert record.current_version == ""
        assert record.update is None

    def test_populate_by_field_name(self) -> None:
        record = DependencyRecord(import_path="a.io/b", current_version="v0.1.0")
        assert record.import_path == "a.io/b"

    def test_rejects_non_string_path(self) -> None:
        with pytest.raises(ValidationError):
            DependencyRecord.model_validate({"Path": ["not", "a", "string"]})


class TestModuleIdentity:
    def test_is_immutable(self) -> None:
        identity = ModuleIdentity(name="example.com/foo", toolchain_version="1.21")
        with pytest.raises(ValidationError):
            identity.name = "other"  # type: ignore[misc]


class TestModFile:
    def test_defaults(self) -> None:
        mod = ModFile()
        assert mod.module is None
        assert mod.go is None
        assert mod.requires == []
