import pytest

from lfu_simulation.config import SimulationConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv('LFU_NUM_ROWS', raising=False)
    monkeypatch.delenv('LFU_MAX_NUMBERS', raising=False)


def test_defaults():
    config = SimulationConfig.from_env()

    assert config.to_dict() == {'num_rows': 3, 'max_numbers': 15}


def test_from_env(monkeypatch):
    monkeypatch.setenv('LFU_NUM_ROWS', '5')
    monkeypatch.setenv('LFU_MAX_NUMBERS', '30')

    config = SimulationConfig.from_env()

    assert config.num_rows == 5
    assert config.max_numbers == 30


def test_blank_value_uses_default(monkeypatch):
    monkeypatch.setenv('LFU_NUM_ROWS', '  ')

    assert SimulationConfig.from_env().num_rows == 3


def test_non_integer(monkeypatch):
    monkeypatch.setenv('LFU_NUM_ROWS', 'three')

    with pytest.raises(ValueError, match="LFU_NUM_ROWS must be an integer"):
        SimulationConfig.from_env()


def test_below_minimum(monkeypatch):
    monkeypatch.setenv('LFU_MAX_NUMBERS', '0')

    with pytest.raises(ValueError, match="at least 1"):
        SimulationConfig.from_env()
