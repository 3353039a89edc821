"""
errors.py

This file contains the errors raised while deriving state addresses. Callers
that need to tell the two failure kinds apart catch `InvalidInput` or
`HashError`; `AddressingError` catches both.
"""


class AddressingError(Exception):

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidInput(AddressingError):
    """An identifier or hex string failed a structural precondition."""

    def __str__(self):
        return 'addressing input is invalid: {}'.format(self.message)


class HashError(AddressingError):
    """The injected hash provider failed."""

    def __str__(self):
        return 'failed to produce hash: {}'.format(self.message)
