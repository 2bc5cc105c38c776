"""Tests for settings loading and the default engine factory."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest

from archbudget.api.app import create_app
from archbudget.config import ENV_PREFIX, Settings, configure_logging, load_settings
from archbudget.exceptions import CostDataLoadError, InvalidInputError
from archbudget.factory import create_default_engine, create_default_repository

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings(_env_file=None)
        assert settings == Settings(_env_file=None)
        assert settings.cost_data_dir is None
        assert settings.cors_origins == ["http://localhost:3000"]
        assert settings.log_level == "INFO"
        assert settings.average_billable_rate == pytest.approx(172.17)

    def test_reads_prefixed_variables(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ARCHBUDGET_COST_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("ARCHBUDGET_CORS_ORIGINS", "http://a.example, http://b.example")
        monkeypatch.setenv("ARCHBUDGET_LOG_LEVEL", "debug")
        monkeypatch.setenv("ARCHBUDGET_DISCOUNT_RATE", "0.2")
        settings = load_settings(_env_file=None)
        assert settings.cost_data_dir == tmp_path
        assert settings.cors_origins == ["http://a.example", "http://b.example"]
        assert settings.log_level == "DEBUG"
        assert settings.discount_rate == pytest.approx(0.2)

    def test_empty_values_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARCHBUDGET_HOURS_FACTOR", "")
        settings = load_settings(_env_file=None)
        assert settings.hours_factor == pytest.approx(0.22)

    def test_invalid_value_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARCHBUDGET_DISCOUNT_RATE", "1.5")
        with pytest.raises(InvalidInputError, match="ARCHBUDGET_"):
            load_settings(_env_file=None)

    def test_unknown_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARCHBUDGET_LOG_LEVEL", "verbose")
        with pytest.raises(InvalidInputError, match="log_level"):
            load_settings(_env_file=None)

    def test_unknown_log_level_never_reaches_app(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ARCHBUDGET_LOG_LEVEL", "verbose")
        with pytest.raises(InvalidInputError):
            create_app()

    def test_keyword_overrides_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARCHBUDGET_AVERAGE_BILLABLE_RATE", "150")
        assert load_settings(_env_file=None).average_billable_rate == pytest.approx(150.0)
        settings = load_settings(_env_file=None, average_billable_rate=200)
        assert settings.average_billable_rate == pytest.approx(200.0)

    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(
            "ARCHBUDGET_HOURS_FACTOR=0.3\nARCHBUDGET_CORS_ORIGINS=http://c.example\n",
            encoding="utf-8",
        )
        settings = load_settings(_env_file=env_file)
        assert settings.hours_factor == pytest.approx(0.3)
        assert settings.cors_origins == ["http://c.example"]


class TestFactory:
    def test_default_engine_uses_seed_data(self) -> None:
        engine = create_default_engine()
        assert len(engine.repository.list_building_types()) == 4

    def test_settings_without_data_dir_use_seed(self) -> None:
        repo = create_default_repository(Settings())
        assert repo.get_cost_range("Hospitality (Hotel/Resort)", 2) is not None

    def test_loads_csv_directory(self, tmp_path: Path) -> None:
        (tmp_path / "building_cost_ranges.csv").write_text(
            "building_type,tier,all_in_min,all_in_max,arch_share,int_share,land_share\n"
            "Warehouse,1,120,180,0.8,0.1,0.1\n",
            encoding="utf-8",
        )
        (tmp_path / "engineering_costs.csv").write_text(
            "building_type,tier,category,percent_avg\n"
            "Warehouse,1,Structural,12%\n",
            encoding="utf-8",
        )
        engine = create_default_engine(Settings(cost_data_dir=tmp_path))
        assert engine.repository.list_building_types() == ["Warehouse"]
        result = engine.calculate(
            engine.validate_input(
                {"building_type": "Warehouse", "tier": 1,
                 "new_area_ft2": 1000, "existing_area_ft2": 0}
            )
        )
        assert result.engineering_budgets["Structural"] == pytest.approx(150_000 * 0.12)

    def test_engineering_file_optional(self, tmp_path: Path) -> None:
        (tmp_path / "building_cost_ranges.csv").write_text(
            "building_type,tier,all_in_min,all_in_max,arch_share,int_share,land_share\n"
            "Warehouse,1,120,180,0.8,0.1,0.1\n",
            encoding="utf-8",
        )
        repo = create_default_repository(Settings(cost_data_dir=tmp_path))
        assert repo.get_engineering_costs("Warehouse", 1) == []

    def test_missing_cost_ranges_file(self, tmp_path: Path) -> None:
        with pytest.raises(CostDataLoadError):
            create_default_repository(Settings(cost_data_dir=tmp_path))


class TestConfigureLogging:
    def test_sets_package_level(self) -> None:
        logger = logging.getLogger("archbudget")
        previous = logger.level
        try:
            configure_logging(Settings(log_level="debug"))
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
