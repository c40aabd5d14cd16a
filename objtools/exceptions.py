"""error kinds raised by objtools"""

__all__ = [
    'AssertionFailure',
]


class AssertionFailure(AssertionError):
    """raised when an :func:`~objtools.core.assert_` condition
    is not exactly ``True``

    Parameters
    ----------
    message: str
        description of the violated expectation
    """
    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return str(self.message)
