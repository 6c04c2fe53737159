import time


class AbsTimeout:

  def __init__(self, timeout, timefn=None):
    self._timefn = time.monotonic if timefn is None else timefn
    self._start = self._timefn()
    self._expires = self._start + timeout if timeout is not None else None

  def get(self):
    return max(0, self._expires - self._timefn()) if self._expires is not None else None

  def remaining(self):
    # Unlike get(), this can go negative once the deadline is past.
    return self._expires - self._timefn() if self._expires is not None else None

  def elapsed(self):
    return self._timefn() - self._start

  def expired(self):
    return self._expires is not None and self._timefn() >= self._expires
