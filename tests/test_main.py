import json

from conftest import LEVERAGED_TEXT
from typer.testing import CliRunner

from textorigin.main import app

runner = CliRunner()


def test_analyse_text_as_json():
    result = runner.invoke(app, ["analyse", LEVERAGED_TEXT, "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["aiProbability"] + payload["humanProbability"] == 100
    assert payload["isAiGenerated"] is True


def test_analyse_text_as_report():
    result = runner.invoke(app, ["analyse", LEVERAGED_TEXT])

    assert result.exit_code == 0
    assert "Likely AI-Generated Pattern" in result.stdout
    assert "Repetitive vocabulary usage" in result.stdout


def test_analyse_file(tmp_path):
    path = tmp_path / "cv.txt"
    path.write_text(LEVERAGED_TEXT)

    result = runner.invoke(app, ["analyse", "--file", str(path)])

    assert result.exit_code == 0
    assert "Flags:" in result.stdout


def test_analyse_requires_text(tmp_path):
    assert runner.invoke(app, ["analyse"]).exit_code == 1
    assert runner.invoke(app, ["analyse", "   "]).exit_code == 1

    path = tmp_path / "empty.txt"
    path.write_text("")
    assert runner.invoke(app, ["analyse", "--file", str(path)]).exit_code == 1
