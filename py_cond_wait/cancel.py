import threading

from . import alog


class CancelSignal:

  def __init__(self):
    self._event = threading.Event()
    self.reason = None

  def set(self, reason=None):
    self.reason = reason
    self._event.set()

  def clear(self):
    self._event.clear()
    self.reason = None

  def is_set(self):
    return self._event.is_set()

  def __bool__(self):
    return self.is_set()


def _never():
  return False


def as_cancel_fn(signal):
  # Accepts threading.Event, asyncio.Event, CancelSignal (is_set()), BreakCancel
  # (hit()) or a plain zero-argument callable.
  if signal is None:
    return _never

  is_set = getattr(signal, 'is_set', None)
  if callable(is_set):
    return is_set

  hit = getattr(signal, 'hit', None)
  if callable(hit):
    return hit

  if callable(signal):
    return signal

  alog.xraise(TypeError, f'Unsupported cancellation signal type: {type(signal)}')
