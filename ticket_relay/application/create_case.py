from __future__ import annotations
import logging
from typing import Any
from ticket_relay.application.caller_response import bad_request_response, to_caller_response
from ticket_relay.application.dto.create_case_body import InvalidTicketRequestError, parse_create_case_body
from ticket_relay.application.ports.credentials_port import CredentialsError, CredentialsResolver
from ticket_relay.application.ticket_relay import TicketRelay
from ticket_relay.domain.relay_result import ConfigError


logger = logging.getLogger(__name__)

def handle_create_case(
    body: Any,
    resolve_credentials: CredentialsResolver,
    relay: TicketRelay,
) -> tuple[int, Any]:
    """Serve one create-case call and return the ``(status, body)`` for the caller.
        A credentials source that fails to load is reported as a configuration
        error, the same as credentials with missing fields.
        """

    try:
        request = parse_create_case_body(body)
    except InvalidTicketRequestError as exc:
        logger.error("Rejected create-case body: %s", exc)
        return bad_request_response(str(exc))

    logger.info("Create case request received with %d message(s)", len(request.messages))

    try:
        credentials = resolve_credentials()
    except CredentialsError as exc:
        logger.error("Failed to resolve service desk credentials: %s", exc)
        return to_caller_response(ConfigError(reason=str(exc)))

    result = relay.submit(request, credentials)
    return to_caller_response(result)
