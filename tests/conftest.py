import pytest

from py_cond_wait import config as cfg
from py_cond_wait import timegen as tg


@pytest.fixture(autouse=True)
def clean_wait_config(monkeypatch):
  for name in ('WAIT_TIMEOUT', 'WAIT_POLL_INTERVAL', 'WAIT_CONFIG'):
    monkeypatch.delenv(name, raising=False)
  cfg.reset_config()
  yield
  cfg.reset_config()


@pytest.fixture
def clock():
  return tg.ManualTimeGen()


class CountingPredicate:

  def __init__(self, results=None, default=False):
    self.results = list(results or [])
    self.default = default
    self.calls = 0

  def __call__(self):
    self.calls += 1

    return self.results.pop(0) if self.results else self.default


@pytest.fixture
def counting():
  return CountingPredicate
