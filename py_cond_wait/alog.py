import logging
import os
import sys
import time
import types


DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

SPAM = DEBUG - 2
VERBOSE = DEBUG - 1

_SHORT_LEV = {
  SPAM: 'SP',
  VERBOSE: 'VB',
  DEBUG: 'DD',
  INFO: 'IN',
  WARNING: 'WA',
  ERROR: 'ER',
  CRITICAL: 'CR',
}

logging.addLevelName(SPAM, 'SPAM')
logging.addLevelName(VERBOSE, 'VERBOSE')


class Formatter(logging.Formatter):

  def __init__(self, emit_extra=None):
    super().__init__()
    self.emit_extra = emit_extra

  def format(self, r):
    hdr = self.make_header(r)
    msg = r.getMessage()
    if r.exc_info and not r.exc_text:
      r.exc_text = self.formatException(r.exc_info)
    if r.exc_text:
      msg = f'{msg}\n{r.exc_text}'

    return '\n'.join([f'{hdr}: {ln}' for ln in msg.split('\n')])

  def formatTime(self, r, datefmt=None):
    if datefmt:
      return time.strftime(datefmt, time.localtime(r.created))

    tstr = time.strftime('%Y%m%d %H:%M:%S', time.localtime(r.created))

    return f'{tstr}.{r.msecs * 1000:06.0f}'

  def make_header(self, r):
    tstr = self.formatTime(r)
    lid = _SHORT_LEV.get(r.levelno, r.levelname[:2])
    hdr = f'{lid}{tstr};{os.getpid()};{r.module}'
    if self.emit_extra:
      extras = [str(getattr(r, name, None)) for name in self.emit_extra]
      hdr = f'{hdr};{";".join(extras)}'

    return hdr


_DEFAULT_ARGS = dict(
  log_level=os.getenv('LOG_LEVEL', 'INFO'),
  log_file=os.getenv('LOG_FILE', 'STDERR'),
  log_mod_levels=[],
  log_emit_extra=[],
)

def _set_logmod_levels(mlevels):
  mlevels = list(mlevels) if mlevels else []
  env_mlevels = os.getenv('LOGMOD_LEVELS', None)
  if env_mlevels is not None:
    mlevels.extend(env_mlevels.split(':'))
  for mlev in mlevels:
    mod, level = mlev.split(',')
    logging.getLogger(mod).setLevel(logging.getLevelName(level.upper()))


def _make_handler(fname):
  if fname == 'STDOUT':
    return logging.StreamHandler(sys.stdout)
  if fname == 'STDERR':
    return logging.StreamHandler(sys.stderr)

  return logging.FileHandler(fname, mode='a')


def setup_logging(args):
  numeric_level = logging.getLevelName(args.log_level.upper())
  handlers = []
  if args.log_file:
    for fname in args.log_file.split(','):
      handler = _make_handler(fname)
      handler.setLevel(numeric_level)
      handler.setFormatter(Formatter(emit_extra=args.log_emit_extra))
      handlers.append(handler)

  logging.basicConfig(level=numeric_level, handlers=handlers, force=True)

  set_current_level(numeric_level, set_logger=False)

  _set_logmod_levels(args.log_mod_levels)


def basic_setup(**kwargs):
  args = _DEFAULT_ARGS.copy()
  args.update(kwargs)
  setup_logging(types.SimpleNamespace(**args))


_LEVEL = DEBUG

def set_current_level(level, set_logger=True):
  if set_logger:
    logger = logging.getLogger()
    logger.setLevel(level)
    for handler in logger.handlers:
      handler.setLevel(level)

  global _LEVEL

  _LEVEL = level


_LOGGING_FRAMES = 1 if sys.version_info >= (3, 11) else 2

def _nested_args(kwargs):
  # Skip this module's frames, so that the record reports the real caller.
  kwargs['stacklevel'] = kwargs.get('stacklevel', 1) + 1 + _LOGGING_FRAMES

  return kwargs


def log(level, msg, *args, **kwargs):
  logging.log(level, msg, *args, **kwargs)


def spam(msg, *args, **kwargs):
  if SPAM >= _LEVEL:
    log(SPAM, msg, *args, **_nested_args(kwargs))


def debug(msg, *args, **kwargs):
  if DEBUG >= _LEVEL:
    log(DEBUG, msg, *args, **_nested_args(kwargs))


def error(msg, *args, **kwargs):
  if ERROR >= _LEVEL:
    log(ERROR, msg, *args, **_nested_args(kwargs))


def xraise(e, msg, *args, **kwargs):
  if kwargs.pop('logit', False):
    kwargs['stacklevel'] = kwargs.get('stacklevel', 1) + 1
    error(msg, *args, **kwargs)

  raise e(msg)
