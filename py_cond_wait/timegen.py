import asyncio
import threading
import time

from . import alog


class TimeGen:

  def now(self):
    return time.monotonic()

  def sleep(self, secs):
    if secs > 0:
      time.sleep(secs)

  async def async_sleep(self, secs):
    await asyncio.sleep(max(secs, 0))

  def set_time(self, current_time):
    alog.xraise(NotImplementedError, f'API not implemented: set_time()')


class ManualTimeGen(TimeGen):
  """Simulated clock for deterministic timing tests.

  Sleeping advances the clock by exactly the requested amount, and every sleep
  is recorded. The optional on_sleep hook is called with the new time after each
  sleep, which lets a test flip caller state at a given point in simulated time.
  """

  def __init__(self, start=0.0, on_sleep=None):
    self._lock = threading.Lock()
    self._now = start
    self._on_sleep = on_sleep
    self.sleeps = []

  def now(self):
    with self._lock:
      return self._now

  def set_time(self, current_time):
    with self._lock:
      self._now = current_time

  def advance(self, secs):
    with self._lock:
      self._now += secs

      return self._now

  def sleep(self, secs):
    secs = max(secs, 0)
    with self._lock:
      self.sleeps.append(secs)
    now = self.advance(secs)
    if self._on_sleep is not None:
      self._on_sleep(now)

  async def async_sleep(self, secs):
    self.sleep(secs)
    await asyncio.sleep(0)
