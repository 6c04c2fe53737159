import os
import yaml

from . import alog


def to_type(v, vtype):
  return vtype(yaml.safe_load(v)) if isinstance(v, str) else vtype(v)


def getenv(name, dtype=None, defval=None):
  # os.getenv expects the default value to be a string, so cannot be passed in there.
  env = os.getenv(name, None)
  if env is None:
    env = defval
  if env is not None:
    return to_type(env, dtype) if dtype is not None else env


def getvar(obj, name, defval=None):
  return obj.get(name, defval) if isinstance(obj, dict) else getattr(obj, name, defval)


def load_config(cfg_file=None, **kwargs):
  if cfg_file is not None:
    with open(cfg_file, mode='r') as cf:
      cfg = yaml.safe_load(cf) or dict()
    if not isinstance(cfg, dict):
      alog.xraise(ValueError, f'Config file must contain a mapping: {cfg_file}')
  else:
    cfg = dict()

  for k, v in kwargs.items():
    if v is not None:
      cfg[k] = v

  return cfg


def fmt_secs(secs):
  if secs < 1.0:
    return f'{secs * 1000:.1f}ms'

  return f'{secs:.3f}s'


def func_name(fn):
  return getattr(fn, '__qualname__', None) or getattr(fn, '__name__', None) or repr(fn)
