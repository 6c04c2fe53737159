import signal
import threading

from . import alog


_LOCK = threading.Lock()
_HANDLERS = set()
_PREV_HANDLER = None
_INSTALLED = False


def _handler(sig, frame):
  # Runs in signal context: no logging, and no _LOCK (open() may be holding it).
  for h in tuple(_HANDLERS):
    h.trigger(frame)


class BreakCancel:
  """Cancellation signal set by SIGINT.

  While at least one BreakCancel is open, Ctrl-C marks every open instance as
  hit instead of raising KeyboardInterrupt, and a wait using it as cancellation
  signal returns a Cancelled outcome at its next poll cycle. Must be opened and
  closed from the main thread, where Python runs signal handlers.
  """

  def __init__(self):
    self._hit = False
    self._frame = None

  def open(self):
    global _PREV_HANDLER, _INSTALLED

    with _LOCK:
      if not _INSTALLED:
        _PREV_HANDLER = signal.signal(signal.SIGINT, _handler)
        _INSTALLED = True
        alog.debug(f'SIGINT now cancels pending waits')
      _HANDLERS.add(self)

    return self

  def close(self):
    global _PREV_HANDLER, _INSTALLED

    with _LOCK:
      _HANDLERS.discard(self)
      if not _HANDLERS and _INSTALLED:
        # None means the previous handler was not installed from Python.
        prev = _PREV_HANDLER if _PREV_HANDLER is not None else signal.default_int_handler
        signal.signal(signal.SIGINT, prev)
        _PREV_HANDLER = None
        _INSTALLED = False

  def __enter__(self):
    return self.open()

  def __exit__(self, *exc):
    self.close()

    return False

  def trigger(self, frame):
    self._hit = True
    self._frame = frame

  def hit(self):
    return self._hit

  def frame(self):
    return self._frame
