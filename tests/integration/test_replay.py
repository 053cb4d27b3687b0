import json

import pytest
from click.testing import CliRunner

from src.main import cli

FEATURE_YAML = """
feature: Checkout
scenarios:
  - name: Pay by card
    location: features/checkout.feature:5
    steps:
      - keyword: Given
        name: a cart with items
        status: passed
        table:
          - [item, qty]
          - [book, 2]
      - keyword: When
        name: I pay by card
        status: passed
        output: [charged 42.00]
      - keyword: Then
        name: I get a receipt
        status: passed
  - name: Card declined
    steps:
      - keyword: When
        name: I pay with an expired card
        status: failed
        error: card expired
        error_type: PaymentError
      - keyword: Then
        name: I see an error
"""

PASSING_YAML = """
feature: Search
scenarios:
  - name: Find a book
    steps:
      - name: a catalogue
        status: passed
      - keyword: Then
        name: a result page
"""


@pytest.fixture
def runner():
    return CliRunner()


def _write(tmp_path, content, name="results.yml"):
    path = tmp_path / name
    path.write_text(content)
    return str(path)


def test_replay_pretty_and_summary(runner, tmp_path):
    result = runner.invoke(cli, ["-o", "plain", "replay", _write(tmp_path, FEATURE_YAML)])

    assert result.exit_code == 1
    assert "Feature: Checkout" in result.output
    assert "Scenario: Pay by card" in result.output
    assert "| book | 2 |" in result.output
    assert "charged 42.00" in result.output
    assert "PaymentError: card expired" in result.output
    assert "2 scenarios (1 failed, 1 passed)" in result.output
    assert "5 steps (1 failed, 1 skipped, 3 passed)" in result.output


def test_replay_json_report(runner, tmp_path):
    report = tmp_path / "report.json"

    result = runner.invoke(cli, [
        "replay", _write(tmp_path, FEATURE_YAML), "-f", "json", "--out", str(report)
    ])

    assert result.exit_code == 1
    document = json.loads(report.read_text())
    assert [element["name"] for element in document["elements"]] == ["Pay by card", "Card declined"]
    assert document["elements"][0]["location"] == "features/checkout.feature:5"
    assert document["elements"][1]["steps"][1]["result"]["status"] == "skipped"


def test_replay_from_stdin(runner):
    result = runner.invoke(cli, ["replay", "-f", "summary"], input=PASSING_YAML)

    assert result.exit_code == 0
    assert "1 scenario (1 undefined)" in result.output


def test_replay_strict_fails_on_undefined(runner, tmp_path):
    result = runner.invoke(cli, ["replay", _write(tmp_path, PASSING_YAML), "-f", "summary", "--strict"])

    assert result.exit_code == 1


def test_replay_dry_run_reports_unknown_steps_as_skipped(runner, tmp_path):
    result = runner.invoke(cli, ["replay", _write(tmp_path, PASSING_YAML), "-f", "summary", "--dry-run", "--strict"])

    assert result.exit_code == 0
    assert "2 steps (1 skipped, 1 passed)" in result.output


def test_replay_invalid_file(runner, tmp_path):
    result = runner.invoke(cli, ["-o", "plain", "replay", _write(tmp_path, "feature: Broken\n")])

    assert result.exit_code == 2
    assert "Scenario file error" in result.output
    assert "Error in field 'scenarios'" in result.output


def test_replay_rejects_unknown_formatter(runner, tmp_path):
    result = runner.invoke(cli, ["replay", _write(tmp_path, PASSING_YAML), "-f", "html"])

    assert result.exit_code == 2
    assert "Invalid value for '--format'" in result.output
