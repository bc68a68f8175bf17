from __future__ import annotations
from typing import Protocol
from ticket_relay.domain.relay_result import RelayResult
from ticket_relay.domain.service_desk import ServiceDeskCredentials, ServiceDeskPayload


class ServiceDeskDispatcher(Protocol):
    def dispatch(
        self,
        endpoint: str,
        payload: ServiceDeskPayload,
        credentials: ServiceDeskCredentials,
    ) -> RelayResult:
        ...
