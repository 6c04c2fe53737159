import collections
import threading
import time


Event = collections.namedtuple('Event', 'kind, data, time')


class EventLog:

  def __init__(self, timefn=None):
    self._timefn = time.monotonic if timefn is None else timefn
    self._lock = threading.Lock()
    self._events = []

  def record(self, kind, **data):
    event = Event(kind=kind, data=data, time=self._timefn())
    with self._lock:
      self._events.append(event)

    return event

  def snapshot(self):
    with self._lock:
      return tuple(self._events)

  def clear(self):
    with self._lock:
      self._events = []

  def __len__(self):
    with self._lock:
      return len(self._events)

  def __iter__(self):
    return iter(self.snapshot())


class Counter:

  def __init__(self, limit=None):
    self._limit = limit
    self._count = 0
    self._lock = threading.Lock()

  def increment(self, n=1):
    with self._lock:
      count = self._count + n
      self._count = min(count, self._limit) if self._limit is not None else count

      return self._count

  @property
  def value(self):
    with self._lock:
      return self._count
