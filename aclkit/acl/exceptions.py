"""Exceptions raised by the access control list."""


class AclError(Exception):
    """Base class for all errors raised by aclkit."""


class InvalidArgumentError(AclError, ValueError):
    """Raised when a roles, resources or match argument has the wrong shape."""

    def __init__(
        self, argument: str, method: str, given: str, expected: str = "str or list of str"
    ):
        super().__init__(
            f'Argument "{argument}" passed to {method}() must be of the type '
            f'{expected}, "{given}" given'
        )
        self.argument = argument
        self.method = method
        self.given = given
        self.expected = expected
