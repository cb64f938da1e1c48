"""Tests for policy loading and result serialization."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from krsalary.config.schema import PolicyConfig
from krsalary.core.calculator import calculate_net_pay
from krsalary.io.serialize import dump_breakdown, dump_policy, load_policy
from krsalary.utils.exceptions import ConfigError


class TestLoadPolicy:
    def test_json_round_trip(self, policy: PolicyConfig, tmp_path: Path) -> None:
        path = tmp_path / "policy.json"
        path.write_text(dump_policy(policy), encoding="utf-8")
        assert load_policy(path) == policy

    def test_yaml(self, policy: PolicyConfig, tmp_path: Path) -> None:
        data = policy.model_dump(mode="json")
        data["dependents"] = 2
        path = tmp_path / "policy.yaml"
        path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
        loaded = load_policy(path)
        assert loaded.dependents == 2
        assert loaded.income_tax == policy.income_tax

    def test_invalid_policy(self, tmp_path: Path) -> None:
        path = tmp_path / "policy.yaml"
        path.write_text("tax_year: 2025\ndependents: 0\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid policy"):
            load_policy(path)

    def test_unparseable(self, tmp_path: Path) -> None:
        path = tmp_path / "policy.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Cannot parse"):
            load_policy(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "policy.yml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_policy(path)

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "policy.toml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigError, match="Unsupported"):
            load_policy(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            load_policy(tmp_path / "missing.yaml")


class TestDumpBreakdown:
    def test_contains_debug_tree(self, policy: PolicyConfig) -> None:
        data = json.loads(dump_breakdown(calculate_net_pay(36_000_000, policy)))
        assert data["net"] == {"monthly": 2_663_138, "annual": 31_957_662}
        assert data["debug"]["basic_personal_deduction"] == 1_500_000
        assert "국민연금" in data["deductions"]["monthly"]

    def test_amounts_are_integers(self, policy: PolicyConfig) -> None:
        text = dump_breakdown(calculate_net_pay(36_000_000, policy))
        data = json.loads(text)
        assert data["non_taxable"] == {"monthly": 200_000, "annual": 2_400_000}
        assert "200000.0" not in text
