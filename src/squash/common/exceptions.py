"""Error types raised by the squash package."""
from __future__ import annotations


class SquashError(Exception):
    """Base class for every error raised by this package."""


class RemoteServiceError(SquashError):
    """A remote call produced no usable structured reply.

    Carries the transport-layer diagnostic, never the raw reply body.
    """

    prefix = "Remote service error: "

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}{detail}")


class OllamaEndpointError(RemoteServiceError):
    prefix = "Failed to parse response from Ollama. Transport error: "


class WebhookEndpointError(RemoteServiceError):
    prefix = "Transport error: "


class UnknownUnitError(SquashError, ValueError):
    """Unit symbol is not part of the converter's scale."""


class InvalidOperationError(SquashError, ValueError):
    """Calculator received the wrong number of arguments or an unknown operator."""
