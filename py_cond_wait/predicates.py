import psutil

from . import utils as ut


def _event_kind(event):
  return ut.getvar(event, 'kind')


def _matcher(kind, match):
  def matches(event):
    if kind is not None and _event_kind(event) != kind:
      return False

    return match is None or match(event)

  return matches


def _snapshot(events):
  snapshot = getattr(events, 'snapshot', None)

  return snapshot() if callable(snapshot) else tuple(events)


def event_occurred(events, kind=None, match=None):
  matches = _matcher(kind, match)

  def pred():
    for event in _snapshot(events):
      if matches(event):
        return event

  return pred


def events_count(events, count, kind=None, match=None):
  matches = _matcher(kind, match)

  def pred():
    found = [event for event in _snapshot(events) if matches(event)]

    # An empty match list is falsy, so a zero count reports True instead.
    return (found or True) if len(found) >= count else None

  return pred


def count_reached(source, count):
  getter = source if callable(source) else lambda: source.value

  def pred():
    value = getter()

    # A zero count would be falsy, so report it as True rather than the value.
    return (value or True) if value >= count else None

  return pred


def value_equals(getter, expected):

  def pred():
    return getter() == expected

  return pred


def _process_alive(pid):
  try:
    proc = psutil.Process(pid)

    return proc.status() not in {psutil.STATUS_DEAD, psutil.STATUS_ZOMBIE}
  except psutil.NoSuchProcess:
    return False


def process_running(pid):

  def pred():
    return _process_alive(pid)

  return pred


def process_exited(pid):

  def pred():
    return not _process_alive(pid)

  return pred


def all_of(*preds):

  def pred():
    results = []
    for p in preds:
      result = p()
      if not result:
        return None
      results.append(result)

    return tuple(results) or True

  return pred


def any_of(*preds):

  def pred():
    for p in preds:
      result = p()
      if result:
        return result

  return pred


def negate(pred):

  def npred():
    return not pred()

  return npred
