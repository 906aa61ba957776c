"""Error taxonomy shared by validation, hashing, provisioning and posting."""

from typing import Optional


class MarketError(Exception):
    """Base class for every error surfaced to command callers."""


class MissingParameterError(MarketError, ValueError):
    """Raised when a required parameter is absent."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing {name}.")


class InvalidParameterError(MarketError, ValueError):
    """Raised when a parameter is present but not acceptable."""

    def __init__(self, name: str, expected: Optional[str] = None) -> None:
        self.name = name
        self.expected = expected
        if expected:
            message = f"Invalid {name}, expected {expected}."
        else:
            message = f"Invalid {name}."
        super().__init__(message)


class ModelNotFoundError(MarketError, LookupError):
    """Raised when a referenced model does not exist."""

    def __init__(self, model_name: str) -> None:
        self.model_name = model_name
        super().__init__(f"{model_name} not found.")


class ModelNotModifiableError(MarketError):
    """Raised when an edit targets a draft that has already been frozen."""

    def __init__(self, model_name: str) -> None:
        self.model_name = model_name
        super().__init__(f"{model_name} is not modifiable.")


class MessageTooLargeError(MarketError):
    """Raised when a composed message does not fit the network size limit."""

    def __init__(self, size: int, max_size: int) -> None:
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"Message size {size} exceeds the maximum allowed size of {max_size} bytes."
        )


class EscrowNotImplementedError(MarketError, NotImplementedError):
    """Raised for escrow schemes that are recognized but not provisionable."""

    def __init__(self, scheme_name: str) -> None:
        self.scheme_name = scheme_name
        super().__init__(f"Escrow scheme {scheme_name} is not implemented.")


class TransientSendError(MarketError, RuntimeError):
    """Raised by the network capability when a send did not go through."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Message send failed: {reason}")
