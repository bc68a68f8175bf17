from __future__ import annotations
import logging
from ticket_relay.application.case_url import extract_case_id, extract_case_url
from ticket_relay.application.payload_builder import build_payload
from ticket_relay.application.ports.service_desk_dispatcher_port import ServiceDeskDispatcher
from ticket_relay.domain.relay_result import ConfigError, NetworkError, RelayResult, Success, UpstreamError
from ticket_relay.domain.service_desk import ServiceDeskCredentials
from ticket_relay.domain.ticket import TicketRequest


logger = logging.getLogger(__name__)

class TicketRelay:
    """Validates credentials, builds the service desk payload and hands it to
        the dispatcher for a single attempt. Holds no per-request state, so one
        instance can serve concurrent submissions.
        """

    def __init__(self, dispatcher: ServiceDeskDispatcher) -> None:
        self._dispatcher = dispatcher

    def submit(
        self,
        request: TicketRequest,
        credentials: ServiceDeskCredentials | None,
    ) -> RelayResult:
        if credentials is None:
            logger.error("Service desk credentials are not configured")
            return ConfigError(
                reason="Missing required fields: endpoint, username, password, identifier"
            )

        missing = credentials.missing_fields()
        if missing:
            logger.error(
                "Configuration validation failed - missing required fields: %s",
                ", ".join(missing),
            )
            return ConfigError(reason=f"Missing required fields: {', '.join(missing)}")

        payload = build_payload(request, credentials.identifier)
        logger.info(
            "Relaying ticket %r with %d message(s) to %s",
            request.title,
            len(request.messages),
            credentials.endpoint,
        )

        result = self._dispatcher.dispatch(credentials.endpoint, payload, credentials)
        _log_result(result)
        return result

def _log_result(result: RelayResult) -> None:
    if isinstance(result, Success):
        case_url = extract_case_url(result.data)
        case_id = None if case_url else extract_case_id(result.data)
        if case_url:
            logger.info("Service desk accepted ticket (status=%d) case URL: %s", result.status, case_url)
        elif case_id:
            logger.info("Service desk accepted ticket (status=%d) case ID: %s", result.status, case_id)
        else:
            logger.info("Service desk accepted ticket (status=%d)", result.status)
    elif isinstance(result, UpstreamError):
        logger.warning(
            "Service desk rejected ticket: %d %s",
            result.status,
            result.status_text,
        )
    elif isinstance(result, NetworkError):
        logger.error("Service desk unreachable: %s", result.reason)
