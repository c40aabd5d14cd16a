"""example objects to decorate"""
from objtools import takes_super


class Counter:
    """an example object with methods to override"""

    def __init__(self, start=1):
        self.start = start

    def count(self):
        return self.start

    def describe(self, prefix='count'):
        return '{}: {}'.format(prefix, self.count())


def add_one(self):
    """an example decoration"""
    return self._super() + 1


def double(self):
    """an example decoration"""
    return self._super() * 2


@takes_super
def add_ten(self, _super):
    """an example explicit decoration"""
    return _super() + 10


def list_args(*args, **kwargs):
    return list(args), kwargs
