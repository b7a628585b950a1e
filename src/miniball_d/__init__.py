"""Smallest enclosing balls of points in arbitrary, runtime-specified dimension.

Example
-------
    from miniball_d import Miniball

    mb = Miniball(2)
    for p in [(0, 0), (4, 0), (0, 3), (2, 1)]:
        mb.check_in(p)
    mb.build()
    mb.center(), mb.squared_radius()
"""
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from miniball_d.basis import Basis
from miniball_d.config import MiniballConfig
from miniball_d.helper_classes import Ball
from miniball_d.io import estimate_dimension, format_ball, read_points, write_ball
from miniball_d.logging_utils import configure_logging, get_logger
from miniball_d.miniball import Miniball, smallest_enclosing_ball

__version__ = '0.1'

__all__ = [
    '__version__',
    'Ball',
    'Basis',
    'Miniball',
    'MiniballConfig',
    'smallest_enclosing_ball',
    'estimate_dimension',
    'read_points',
    'format_ball',
    'write_ball',
    'configure_logging',
    'get_logger',
]
