import collections
import math
import numbers

from . import abs_timeout as abst
from . import alog
from . import cancel as cncl
from . import config as cfg
from . import timegen as tg
from . import utils as ut


class WaitError(Exception):

  def __init__(self, msg, description=None, elapsed=None):
    super().__init__(msg)
    self.description = description
    self.elapsed = elapsed


class WaitTimeoutError(WaitError, TimeoutError):
  pass


class WaitCancelledError(WaitError):
  pass


class WaitFaultError(WaitError):

  def __init__(self, msg, error, description=None, elapsed=None):
    super().__init__(msg, description=description, elapsed=elapsed)
    self.error = error


class WaitRequest(collections.namedtuple('WaitRequest',
                                         'predicate, description, timeout, poll_interval')):
  __slots__ = ()

  def __new__(cls, predicate, description, timeout, poll_interval=None):
    if not callable(predicate):
      alog.xraise(TypeError, f'Wait predicate must be callable: {predicate!r}')
    if timeout is None:
      alog.xraise(ValueError, f'Wait timeout is required: {description}')
    if not isinstance(timeout, numbers.Real) or math.isnan(timeout):
      alog.xraise(ValueError, f'Wait timeout must be a number: {timeout!r}')
    if poll_interval is None:
      poll_interval = cfg.DEFAULT_POLL_INTERVAL
    if not isinstance(poll_interval, numbers.Real) or not poll_interval > 0:
      alog.xraise(ValueError, f'Poll interval must be positive: {poll_interval}')

    return super().__new__(cls, predicate, description, timeout, poll_interval)


class WaitOutcome:

  satisfied = False

  def __init__(self, description, elapsed):
    self.description = description
    self.elapsed = elapsed

  def __bool__(self):
    return self.satisfied

  def message(self):
    return f'{self.description}'

  def get(self):
    alog.xraise(NotImplementedError, f'API not implemented: get()')

  def __str__(self):
    return self.message()

  def __repr__(self):
    return f'{type(self).__name__}({self.message()!r})'


class Satisfied(WaitOutcome):

  satisfied = True

  def __init__(self, value, description, elapsed):
    super().__init__(description, elapsed)
    self.value = value

  def message(self):
    return f'satisfied after {ut.fmt_secs(self.elapsed)} waiting for: {self.description}'

  def get(self):
    return self.value


class TimedOut(WaitOutcome):

  def message(self):
    return f'timed out after {ut.fmt_secs(self.elapsed)} waiting for: {self.description}'

  def get(self):
    raise WaitTimeoutError(self.message(), description=self.description,
                           elapsed=self.elapsed)


class Cancelled(WaitOutcome):

  def __init__(self, description, elapsed, reason=None):
    super().__init__(description, elapsed)
    self.reason = reason

  def message(self):
    msg = f'cancelled after {ut.fmt_secs(self.elapsed)} waiting for: {self.description}'

    return f'{msg} ({self.reason})' if self.reason else msg

  def get(self):
    raise WaitCancelledError(self.message(), description=self.description,
                             elapsed=self.elapsed)


class Faulted(WaitOutcome):

  def __init__(self, error, description, elapsed):
    super().__init__(description, elapsed)
    self.error = error

  def message(self):
    return f'predicate failed after {ut.fmt_secs(self.elapsed)} waiting for: ' \
      f'{self.description}: {type(self.error).__name__}: {self.error}'

  def get(self):
    raise WaitFaultError(self.message(), self.error, description=self.description,
                         elapsed=self.elapsed) from self.error


class CondWaiter:

  def __init__(self, timegen=None):
    self._timegen = tg.TimeGen() if timegen is None else timegen

  def _poll(self, request, cancel):
    # Yields the time to sleep before the next check, and returns the outcome.
    cancel_fn = cncl.as_cancel_fn(cancel)
    timeo = abst.AbsTimeout(request.timeout, timefn=self._timegen.now)
    while True:
      try:
        value = request.predicate()
      except Exception as ex:
        return Faulted(ex, request.description, timeo.elapsed())

      if value:
        return Satisfied(value, request.description, timeo.elapsed())

      if cancel_fn():
        return Cancelled(request.description, timeo.elapsed(),
                         reason=getattr(cancel, 'reason', None))

      remaining = timeo.remaining()
      if remaining <= 0:
        return TimedOut(request.description, timeo.elapsed())

      yield min(request.poll_interval, remaining)

  def wait(self, request, cancel=None):
    poller = self._poll(request, cancel)
    try:
      while True:
        self._timegen.sleep(next(poller))
    except StopIteration as stop:
      return stop.value

  async def wait_async(self, request, cancel=None):
    poller = self._poll(request, cancel)
    try:
      while True:
        await self._timegen.async_sleep(next(poller))
    except StopIteration as stop:
      return stop.value


def _make_request(predicate, description, timeout, poll_interval):
  config = cfg.get_config()

  return WaitRequest(predicate,
                     description or ut.func_name(predicate),
                     config.timeout if timeout is None else timeout,
                     poll_interval=config.poll_interval if poll_interval is None else poll_interval)


def _result(outcome):
  if not outcome:
    alog.debug(f'Condition wait failed: {outcome}')

  return outcome.get()


def wait_for(predicate, description=None, timeout=None, poll_interval=None, cancel=None,
             timegen=None):
  request = _make_request(predicate, description, timeout, poll_interval)

  return _result(CondWaiter(timegen=timegen).wait(request, cancel=cancel))


async def wait_for_async(predicate, description=None, timeout=None, poll_interval=None,
                         cancel=None, timegen=None):
  request = _make_request(predicate, description, timeout, poll_interval)

  return _result(await CondWaiter(timegen=timegen).wait_async(request, cancel=cancel))
