"""Exceptions raised while preparing Vault API requests."""


class RequestValidationError(ValueError):
    """Raised when an invocation cannot be turned into a request.

    Covers absent required arguments, missing connection settings and
    payloads that the endpoint's body builder rejects. Always raised before
    any network call is attempted.
    """

    def __init__(self, message: str, missing=None):
        super().__init__(message)
        self.missing = list(missing or [])


__all__ = ["RequestValidationError"]
