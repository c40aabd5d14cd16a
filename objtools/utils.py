"""Miscellaneous tools, boilerplate, and shortcuts"""
import typing as t
from collections.abc import MutableMapping
from types import MethodType

# sentinel for slots which are not set at all
_MISSING = object()


def noop(*args, **kwargs):
    """placeholder function that does nothing"""


class CallableAsMethod:
    """mixin for callables to be callable as methods when bound to a class"""
    def __get__(self, obj, objtype=None):
        return self if obj is None else MethodType(self, obj)


def get_slot(target, name: str, default: t.Any = None) -> t.Any:
    """read a named slot of a mapping (by key) or any other object
    (by attribute)"""
    if isinstance(target, MutableMapping):
        return target.get(name, default)
    return getattr(target, name, default)


def own_slot(target, name: str, default: t.Any = None) -> t.Any:
    """like :func:`get_slot`, but ignore class-level attributes,
    so only values stored on the object itself are found"""
    if isinstance(target, MutableMapping):
        return target.get(name, default)
    try:
        namespace = vars(target)
    except TypeError:
        return getattr(target, name, default)
    return namespace.get(name, default)


def set_slot(target, name: str, value: t.Any) -> None:
    if isinstance(target, MutableMapping):
        target[name] = value
    else:
        setattr(target, name, value)


def clear_slot(target, name: str) -> None:
    if isinstance(target, MutableMapping):
        target.pop(name, None)
    elif hasattr(target, name):
        delattr(target, name)
