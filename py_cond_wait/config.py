import collections
import contextlib
import math
import threading
import types

from . import alog
from . import utils as ut


DEFAULT_TIMEOUT = 5.0
DEFAULT_POLL_INTERVAL = 0.01


class WaitConfig(collections.namedtuple('WaitConfig', 'timeout, poll_interval')):
  __slots__ = ()

  def __new__(cls, timeout=DEFAULT_TIMEOUT, poll_interval=DEFAULT_POLL_INTERVAL):
    if timeout is None:
      alog.xraise(ValueError, f'Default wait timeout cannot be None')
    if math.isnan(float(timeout)):
      alog.xraise(ValueError, f'Default wait timeout cannot be NaN')
    if poll_interval is None or not poll_interval > 0:
      alog.xraise(ValueError, f'Poll interval must be positive: {poll_interval}')

    return super().__new__(cls, float(timeout), float(poll_interval))


def _check_keys(cfg, path):
  unknown = set(cfg.keys()) - set(WaitConfig._fields)
  if unknown:
    alog.xraise(ValueError, f'Unknown wait config keys in {path}: {sorted(unknown)}')

  return cfg


def load_config(path, **kwargs):
  cfg = _check_keys(ut.load_config(path, **kwargs), path)

  alog.debug(f'Loaded wait config from {path}: {cfg}')

  return WaitConfig(**cfg)


def _env_config():
  cfg_file = ut.getenv('WAIT_CONFIG')
  cfg = _check_keys(ut.load_config(cfg_file), cfg_file) if cfg_file else dict()

  return load_config(None,
                     timeout=ut.getenv('WAIT_TIMEOUT', dtype=float,
                                       defval=cfg.get('timeout', DEFAULT_TIMEOUT)),
                     poll_interval=ut.getenv('WAIT_POLL_INTERVAL', dtype=float,
                                             defval=cfg.get('poll_interval',
                                                            DEFAULT_POLL_INTERVAL)))


_LOCK = threading.Lock()
_CONFIG = None

def get_config():
  global _CONFIG

  with _LOCK:
    if _CONFIG is None:
      _CONFIG = _env_config()

    return _CONFIG


def set_config(config=None, **kwargs):
  global _CONFIG

  with _LOCK:
    prev = _CONFIG if _CONFIG is not None else _env_config()
    if config is None:
      config = WaitConfig(**{**prev._asdict(), **kwargs})
    _CONFIG = config

  return prev


def reset_config():
  global _CONFIG

  with _LOCK:
    _CONFIG = None


@contextlib.contextmanager
def overrides(**kwargs):
  prev = set_config(**kwargs)
  try:
    yield get_config()
  finally:
    set_config(prev)


def add_wait_options(parser):
  parser.add_argument('--wait_timeout', type=float,
                      help='Default timeout in seconds for condition waits')
  parser.add_argument('--wait_poll_interval', type=float,
                      help='Default interval in seconds between condition checks')
  parser.add_argument('--wait_config', type=str,
                      help='YAML file with the timeout and poll_interval wait defaults')


def setup_wait(args):
  cfg_file = getattr(args, 'wait_config', None)
  base = load_config(cfg_file) if cfg_file else get_config()
  kwargs = dict(timeout=getattr(args, 'wait_timeout', None),
                poll_interval=getattr(args, 'wait_poll_interval', None))
  kwargs = {k: v for k, v in kwargs.items() if v is not None}

  set_config(WaitConfig(**{**base._asdict(), **kwargs}))


def get_main_config():
  return types.SimpleNamespace(add_arguments=add_wait_options,
                               config_module=setup_wait)
