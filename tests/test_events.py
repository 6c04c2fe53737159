import threading

from py_cond_wait import events as ev


def test_event_log_records_in_order():
  times = iter([1.0, 2.0])
  log = ev.EventLog(timefn=lambda: next(times))

  first = log.record('start', job=1)
  log.record('stop', job=1)

  assert first == ev.Event(kind='start', data=dict(job=1), time=1.0)
  assert len(log) == 2
  assert [e.kind for e in log] == ['start', 'stop']
  assert log.snapshot()[1].time == 2.0


def test_event_log_snapshot_is_stable():
  log = ev.EventLog()
  log.record('a')
  snapshot = log.snapshot()
  log.record('b')

  assert len(snapshot) == 1

  log.clear()

  assert len(log) == 0


def test_counter_concurrent_increments():
  counter = ev.Counter()

  def bump():
    for _ in range(1000):
      counter.increment()

  threads = [threading.Thread(target=bump) for _ in range(4)]
  for t in threads:
    t.start()
  for t in threads:
    t.join()

  assert counter.value == 4000


def test_counter_limit_saturates():
  counter = ev.Counter(limit=3)

  assert counter.increment(2) == 2
  assert counter.increment(5) == 3
  assert counter.value == 3
