from __future__ import annotations
from typing import Protocol
from ticket_relay.domain.service_desk import ServiceDeskCredentials


class CredentialsError(RuntimeError):
    """Raised when a credentials source cannot be read or parsed."""

class CredentialsResolver(Protocol):
    def __call__(self) -> ServiceDeskCredentials:
        ...
