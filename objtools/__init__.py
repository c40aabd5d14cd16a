"""helpers for currying functions and decorating objects with methods"""
from .__about__ import __author__, __version__
from .core import *
from .exceptions import AssertionFailure
from .utils import CallableAsMethod
