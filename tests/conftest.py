import pytest

from duallog.config.config import ConfigManager


class FakeClock:
    """Orologio manuale in nanosecondi per il cronometro"""

    def __init__(self, start=100_000_000_000):
        self.now = start

    def advance(self, seconds):
        self.now += round(seconds * 1_000_000_000)

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def clean_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    ConfigManager.reset()
    yield tmp_path
    ConfigManager.reset()
