import logging
from functools import wraps
from types import MethodType

from .exceptions import AssertionFailure
from .utils import (_MISSING, CallableAsMethod, clear_slot, get_slot, noop,
                    own_slot, set_slot)

__all__ = [
    'assert_',
    'curry',
    'noop',

    'decorate_method',
    'decorate_object',
    'takes_super',

    'SUPER',
]

logger = logging.getLogger(__name__)

#: name of the slot exposing the previous implementation during a call
SUPER = '_super'

DECORATION_NOT_CALLABLE = 'decoration value must be callable'


def assert_(message, condition):
    """Raise an :class:`~objtools.exceptions.AssertionFailure`
    unless the condition is exactly ``True``

    Unlike the ``assert`` statement, this check is never optimized away,
    and truthy values other than ``True`` itself (``1``, ``'true'``)
    count as failures.

    Parameters
    ----------
    message: str
        the failure description
    condition: bool
        the condition to check

    Raises
    ------
    ~objtools.exceptions.AssertionFailure
        if ``condition is not True``
    """
    if condition is not True:
        raise AssertionFailure(message)


class curry(CallableAsMethod):
    """Partially apply a function, optionally bound to a context object

    Parameters
    ----------
    func: ~typing.Callable
        the function to curry
    context: ~typing.Any
        object to bind the function to, as if it were a method of it.
        If ``None``, the function is called unbound.
    *args
        positional arguments to prepend on each call
    **kwargs
        keyword arguments to pass on each call.
        Keywords given at call-time take precedence.

    Example
    -------

    >>> def somefunc(a, b, c, d):
    ...     return [a, b, c, d]
    ...
    >>> curried = curry(somefunc, None, 'a', 'b')
    >>> curried('c', 'd')
    ['a', 'b', 'c', 'd']
    """
    def __init__(self, func, context, *args, **kwargs):
        self.func = func
        self.context = context
        self.args = args
        self.kwargs = kwargs
        self.__wrapped__ = func

    def __call__(self, *args, **kwargs):
        func = (self.func if self.context is None
                else MethodType(self.func, self.context))
        return func(*self.args, *args, **dict(self.kwargs, **kwargs))

    def __eq__(self, other):
        if isinstance(other, curry):
            return (self.func, self.context, self.args, self.kwargs) == (
                other.func, other.context, other.args, other.kwargs)
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, curry):
            return not self == other
        return NotImplemented

    def __hash__(self):
        return hash((self.func, self.context, self.args,
                     frozenset(self.kwargs.items())))

    def __repr__(self):
        fields = [repr(self.func), repr(self.context)]
        fields.extend(map(repr, self.args))
        fields.extend('{}={!r}'.format(k, v) for k, v in self.kwargs.items())
        return 'curry({})'.format(', '.join(fields))


def takes_super(func):
    """Mark a decoration to receive the previous implementation
    as an explicit argument, instead of reading it from ``target._super``

    Example
    -------

    >>> @takes_super
    ... def greet(self, _super, name):
    ...     return _super(name).upper()
    """
    func.__takes_super__ = True
    return func


class _super_bound(object):
    """context manager exposing ``previous`` in the super slot of ``target``,
    restoring whatever was there before on exit"""
    __slots__ = ('_target', '_previous', '_saved')

    def __init__(self, target, previous):
        self._target = target
        self._previous = previous

    def __enter__(self):
        self._saved = own_slot(self._target, SUPER, _MISSING)
        set_slot(self._target, SUPER, self._previous)
        return self._previous

    def __exit__(self, exc_type, exc, tb):
        if self._saved is _MISSING:
            clear_slot(self._target, SUPER)
        else:
            set_slot(self._target, SUPER, self._saved)


def decorate_method(target, name, replacement):
    """Override a method of an object, keeping the overridden
    implementation reachable from the new one

    While the new method runs, ``target._super``
    (or ``target['_super']`` for mappings) holds the method which was
    installed before. The slot is restored when the method returns or raises,
    so nested and reentrant calls of decorated methods each see their own
    previous implementation.

    Parameters
    ----------
    target: ~typing.Any
        the object to decorate. Mappings are decorated by key,
        other objects by attribute.
    name: str
        the method name
    replacement: ~typing.Callable
        the new method. It is called with ``target`` as first argument,
        followed by the call arguments
        (and the previous implementation first, if marked
        with :func:`takes_super`).

    Example
    -------

    >>> class Counter:
    ...     def count(self):
    ...         return 1
    ...
    >>> counter = Counter()
    >>> decorate_method(counter, 'count', lambda self: self._super() + 1)
    >>> counter.count()
    2
    """
    previous = get_slot(target, name)
    if previous is None:
        previous = noop
    explicit = getattr(replacement, '__takes_super__', False)

    @wraps(replacement)
    def wrapper(*args, **kwargs):
        with _super_bound(target, previous) as _super:
            if explicit:
                return replacement(target, _super, *args, **kwargs)
            return replacement(target, *args, **kwargs)

    wrapper.__super__ = previous
    set_slot(target, name, wrapper)
    logger.debug('decorated %r on %r (previous: %r)', name, target, previous)


def decorate_object(target, decorations):
    """Decorate an object with groups of methods

    Methods with the same name as existing ones override them,
    but remain able to reach them through ``target._super``
    (see :func:`decorate_method`).
    Groups are applied in order, so a later group overrides an earlier one.

    Parameters
    ----------
    target: ~typing.Any
        the object to decorate
    decorations: ~typing.Mapping[str, ~typing.Mapping[str, ~typing.Callable]]
        decoration groups by name, each mapping method names to methods

    Raises
    ------
    ~objtools.exceptions.AssertionFailure
        if any of the decoration values is not callable.
        In this case, ``target`` is left unchanged.

    Returns
    -------
    ~typing.Any
        the decorated ``target`` itself
    """
    decoration_list = [
        (group, name, method)
        for group, methods in decorations.items()
        for name, method in methods.items()
    ]
    for _, _, method in decoration_list:
        assert_(DECORATION_NOT_CALLABLE, callable(method))

    for group, name, method in decoration_list:
        logger.debug('applying %r from decoration group %r', name, group)
        decorate_method(target, name, method)
    return target
