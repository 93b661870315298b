"""Integration tests for the smartwall CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from smartwall.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestCheckCommand:
    """Tests for the check command."""

    def test_valid(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check", "5.7m", "2500"])

        assert result.exit_code == 0
        assert "Width:  5700mm (valid)" in result.output
        assert "Dimensions are valid." in result.output

    def test_too_small(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check", "999", "2500"])

        assert result.exit_code == 1
        assert "too_small" in result.output

    def test_oversize(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check", "6001", "2500"])

        assert result.exit_code == 2
        assert "Custom quotation required" in result.output

    def test_accessory_hint(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check", "5.7m", "2500", "--tv"])

        assert result.exit_code == 0
        assert "TV requires 2 x 1000mm modules" in result.output

    def test_accessory_warning(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check", "1000", "2500", "--tv", "--fire"])
        assert result.exit_code == 2


class TestPlanCommand:
    """Tests for the plan command."""

    def test_complete_plan(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["plan", "5.7m", "2500", "1200", "1200", "1200", "1200", "800"]
        )

        assert result.exit_code == 0
        assert "WALL LAYOUT" in result.output
        assert "(100mm remaining)" in result.output
        assert "Design is complete." in result.output

    def test_refused_module(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["plan", "5.7m", "2500", "1200", "1200", "1200", "1200", "1200"]
        )

        assert result.exit_code == 1
        assert "Refused: 1200mm module does not fit" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["plan", "5700", "2500", "1000", "tv", "800", "--tv", "--format", "json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["wall"]["total_width_mm"] == 3800
        assert data["wall"]["accessories"]["tv"] is True
        assert data["completion"]["is_complete"] is True

    def test_missing_pair_warns(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "5700", "2500", "1200", "--tv"])
        assert result.exit_code == 2

    def test_missing_pair_strict(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["plan", "5700", "2500", "1200", "--tv", "--strict"]
        )
        assert result.exit_code == 1

    def test_oversize_needs_quotation(self, runner: CliRunner) -> None:
        without = runner.invoke(app, ["plan", "7m", "2500", "1200"])
        with_quote = runner.invoke(app, ["plan", "7m", "2500", "1200", "--quotation"])

        assert without.exit_code == 1
        assert with_quote.exit_code == 0

    def test_invalid_module_token(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "5700", "2500", "500"])

        assert result.exit_code == 1
        assert "'500' is not a module" in result.output

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "5700", "2500", "--format", "xml"])
        assert result.exit_code == 1

    def test_empty_plan_is_incomplete(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "5700", "2500"])

        assert result.exit_code == 1
        assert "Place at least one module" in result.output


class TestRecommendCommand:
    """Tests for the recommend command."""

    def test_general(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["recommend", "5.7m"])

        assert result.exit_code == 0
        assert "RECOMMENDED CONFIGURATIONS FOR 5700mm" in result.output
        assert "(optimal)" in result.output

    def test_tv(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["recommend", "5.7m", "--tv"])

        assert result.exit_code == 0
        assert "TV Setup:" in result.output

    def test_unusable_width(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["recommend", "abc"])
        assert result.exit_code == 1


class TestValidateCommand:
    """Tests for the validate command."""

    def _write(self, tmp_path: Path, data: dict) -> Path:
        path = tmp_path / "plan.json"
        path.write_text(json.dumps(data))
        return path

    def test_valid_plan(self, runner: CliRunner, tmp_path: Path) -> None:
        path = self._write(
            tmp_path,
            {
                "wall": {"width": "5.7m", "height": 2500},
                "modules": [{"width": 1200}, {"width": 1200}],
            },
        )
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 0
        assert "Validation passed. Wall plan is valid." in result.output

    def test_plan_with_warnings(self, runner: CliRunner, tmp_path: Path) -> None:
        path = self._write(
            tmp_path,
            {
                "wall": {"width": 5700, "height": 2500},
                "accessories": {"tv": True},
                "modules": [{"width": 1200}],
            },
        )
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output

    def test_plan_with_errors(self, runner: CliRunner, tmp_path: Path) -> None:
        path = self._write(tmp_path, {"wall": {"width": "800", "height": 2500}})
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "wall.width" in result.output

    def test_schema_error(self, runner: CliRunner, tmp_path: Path) -> None:
        path = self._write(tmp_path, {"modules": [{"width": 500}]})
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "modules[0].width" in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "plan.json"
        path.write_text("{not json")
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
