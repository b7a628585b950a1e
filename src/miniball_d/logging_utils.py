"""Logging helpers for miniball_d.

Every module obtains its logger through get_logger() so that all output goes
through the 'miniball_d' logger family; the process root logger is never
modified. Importing the package prints nothing: a handler is only attached by
configure_logging(), which the command line entry point calls.
"""
import logging
import sys
from typing import Optional, Union

_ROOT = 'miniball_d'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_root() -> logging.Logger:
    """Attach a single stdout handler to the 'miniball_d' logger (replacing the
    NullHandler set by the package) and stop propagation to the process root.
    """
    root = logging.getLogger(_ROOT)
    for h in list(root.handlers):
        if isinstance(h, logging.NullHandler):
            root.removeHandler(h)
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> None:
    """Set the level of the whole 'miniball_d' logger family."""
    _ensure_root().setLevel(_to_level(level))


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'miniball_d' namespace.

    Without an explicit level the logger inherits from the 'miniball_d' parent
    configured via configure_logging(). Until that is called the records only
    reach the package's NullHandler.
    """
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
