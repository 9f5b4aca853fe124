"""
Hiero Errors

Exception hierarchy shared by the fungible token facade.

- InvalidArgumentError: a caller passed a missing, empty or malformed argument
- ParseError: a textual account id, token id or private key could not be decoded
- HieroException: the protocol layer failed to execute a ledger transaction
"""


class HieroError(Exception):
    """Base exception for all token facade errors"""

    pass


class InvalidArgumentError(HieroError, ValueError):
    """Required argument missing, empty, of the wrong type or out of range"""

    pass


class ParseError(HieroError, ValueError):
    """
    Textual identifier or key could not be decoded into its typed form

    Attributes:
        kind: What was being parsed ("account id", "token id", "private key")
        value: The offending input, or None for key material
    """

    def __init__(self, kind: str, value: str | None = None, reason: str | None = None):
        self.kind = kind
        self.value = value
        self.reason = reason

        message = f"Invalid {kind}"
        if value is not None:
            message += f": '{value}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class HieroException(HieroError):
    """
    Ledger transaction could not be executed

    Raised by protocol layer clients. The underlying failure (network fault,
    receipt status, missing signature...) is kept in ``cause``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
