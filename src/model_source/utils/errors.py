"""Exception types raised by the model source package."""

from typing import Any


class ModelSourceError(Exception):
    """Base error for model source failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidURIError(ModelSourceError):
    """The model source URI could not be parsed."""

    pass


class UnsupportedProtocolError(ModelSourceError):
    """The model source URI uses a protocol outside the supported set."""

    def __init__(self, protocol: str) -> None:
        super().__init__(
            f"Unsupported model source protocol: {protocol!r}",
            details={"protocol": protocol},
        )
        self.protocol = protocol
