"""Tests for the tessera command line."""

from click.testing import CliRunner

from tessera.interface.cli.config_cmd import config
from tessera.interface.cli.demo_cmd import demo_definition, demo_states
from tessera.interface.cli.main import main
from tessera.progress import TaskStatus
from tessera.rendering import Fixed


class TestDemoCommand:
    """Tests for 'tessera demo'."""

    def test_renders_tasks(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["demo", "-n", "3", "--width", "120"])

        assert result.exit_code == 0, result.output
        assert "ubuntu.iso" in result.output
        assert "dataset.tar" in result.output
        assert "%" in result.output

    def test_no_align(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["demo", "-n", "2", "--no-align", "--width", "120"])

        assert result.exit_code == 0, result.output
        assert "model.bin" in result.output

    def test_zero_tasks_prints_nothing(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["demo", "-n", "0"])

        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_rejects_negative_spacing(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["demo", "--spacing", "-1"])

        assert result.exit_code == 2

    def test_debug_flag(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--debug", "demo", "-n", "1", "--width", "120"])

        assert result.exit_code == 0


class TestDemoData:
    def test_states(self) -> None:
        states = demo_states(3)

        assert [s.context for s in states] == ["ubuntu.iso", "model.bin", "dataset.tar"]
        assert states[-1].status is TaskStatus.FINISHED
        assert states[0].completed < states[0].total

    def test_single_state_is_running(self) -> None:
        assert demo_states(1)[0].status is TaskStatus.RUNNING

    def test_definition_options(self) -> None:
        definition = demo_definition(spacing=1, align=False, bar_width=20)

        assert definition.spacing == 1
        assert definition.align_columns is False
        assert Fixed(20) in [cell.column_width for cell in definition.cells]


class TestConfigCommand:
    """Tests for 'tessera config'."""

    def test_show(self) -> None:
        runner = CliRunner()
        result = runner.invoke(config, ["show"])

        assert result.exit_code == 0
        assert "Spacing: 2" in result.output
        assert "not found" in result.output

    def test_get(self) -> None:
        runner = CliRunner()
        result = runner.invoke(config, ["get", "progress.spinner"])

        assert result.exit_code == 0
        assert result.output.strip() == "dots"

    def test_get_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("TESSERA_PROGRESS_SPACING", "7")
        runner = CliRunner()
        result = runner.invoke(config, ["get", "progress.spacing"])

        assert result.output.strip() == "7"

    def test_get_missing_key(self) -> None:
        runner = CliRunner()
        result = runner.invoke(config, ["get", "nonexistent.key"])

        assert result.exit_code == 1
        assert "not found" in result.output
