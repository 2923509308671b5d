import pytest
from click.testing import CliRunner

from lfu_simulation.cli import cli


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv('LFU_NUM_ROWS', raising=False)
    monkeypatch.delenv('LFU_MAX_NUMBERS', raising=False)
    return CliRunner()


def test_simulate(runner):
    result = runner.invoke(cli, ['simulate', '--numbers', '1 2 3 1 2 4 3 1', '--rows', '3'])

    assert result.exit_code == 0
    assert "Simulation Results:" in result.output
    assert "4\t| Page Fault (Removed: 3) (Added to Row: 3)" in result.output
    assert "Final Frequency Table:" in result.output
    assert "3\t\t| [1]" in result.output
    assert "Hits: 3  Faults: 5  Hit ratio: 37.50%" in result.output


def test_simulate_reports_invalid_numbers(runner):
    result = runner.invoke(cli, ['simulate', '--numbers', '1 abc 2'])

    assert result.exit_code == 0
    assert "Invalid number: abc" in result.output
    assert "Hits: 0  Faults: 2" in result.output


def test_simulate_prompts_for_numbers(runner):
    result = runner.invoke(cli, ['simulate'], input='5 5\n')

    assert result.exit_code == 0
    assert "Enter up to 15 numbers" in result.output
    assert "Hits: 1  Faults: 1" in result.output


def test_simulate_nothing_to_do(runner):
    result = runner.invoke(cli, ['simulate', '--numbers', 'x y'])

    assert result.exit_code == 0
    assert "No numbers to simulate." in result.output


def test_simulate_uses_env_rows(runner, monkeypatch):
    monkeypatch.setenv('LFU_NUM_ROWS', '1')

    result = runner.invoke(cli, ['simulate', '--numbers', '1 2 1'])

    assert result.exit_code == 0
    assert "Hits: 0  Faults: 3" in result.output


def test_simulate_rejects_zero_rows(runner):
    result = runner.invoke(cli, ['simulate', '--numbers', '1', '--rows', '0'])

    assert result.exit_code == 2


def test_demo(runner):
    result = runner.invoke(cli, ['demo'])

    assert result.exit_code == 0
    lines = [line for line in result.output.splitlines() if line.startswith(("get(", "put("))]
    assert lines == [
        "get(1) -> 10",
        "get(2) -> 20",
        "put(4, 40)",
        "get(3) -> -1",
        "get(1) -> 10",
        "get(2) -> 20",
        "get(4) -> 40",
    ]


def test_demo_zero_capacity(runner):
    result = runner.invoke(cli, ['demo', '--capacity', '0'])

    assert result.exit_code == 0
    assert "get(1) -> -1" in result.output
