import json

from click.testing import CliRunner

from marsturtle.cli import main
from marsturtle.config import Config, ReportConfig


def test_run_stdin(mission_text) -> None:
    result = CliRunner().invoke(main, ["run"], input=mission_text)

    assert result.exit_code == 0
    assert result.output.splitlines() == ["1 1 E", "3 4 N LOST", "2 3 S"]


def test_run_file_with_config(tmp_path, mission_text) -> None:
    mission = tmp_path / "mission.txt"
    mission.write_text(mission_text)
    config_path = tmp_path / "config.json"
    Config(report=ReportConfig(lost_marker="GONE")).save(config_path)
    output = tmp_path / "report.txt"

    result = CliRunner().invoke(
        main, ["run", str(mission), "-c", str(config_path), "-o", str(output)]
    )

    assert result.exit_code == 0
    assert output.read_text() == "1 1 E\n3 4 N GONE\n2 3 S\n"


def test_run_bad_grid_fails() -> None:
    result = CliRunner().invoke(main, ["run"], input="big grid\n1 1 E\nF\n")

    assert result.exit_code == 1
    assert "Invalid grid size" in result.output


def test_run_bad_robot_reports_partial() -> None:
    result = CliRunner().invoke(main, ["run"], input="5 3\n1 1 N\nF\n?? ?\nF\n")

    assert result.exit_code == 0
    assert "1 2 N" in result.output


def test_check_ok(tmp_path, mission_text) -> None:
    mission = tmp_path / "mission.txt"
    mission.write_text(mission_text)

    result = CliRunner().invoke(main, ["check", str(mission), "--stats"])

    assert result.exit_code == 0
    assert "OK" in result.output
    assert "'robots': 3" in result.output


def test_check_errors(tmp_path) -> None:
    mission = tmp_path / "mission.txt"
    mission.write_text("5 3\n1 1 Z\nF\n")

    result = CliRunner().invoke(main, ["check", str(mission)])

    assert result.exit_code == 1
    assert "Errors: 1" in result.output


def test_config_roundtrip(tmp_path) -> None:
    path = tmp_path / "config.json"
    Config().save(path)
    assert json.loads(path.read_text())["report"]["lost_marker"] == "LOST"
    assert Config.load(path) == Config()
