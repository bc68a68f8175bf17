from unittest.mock import Mock
from ticket_relay.application.create_case import handle_create_case
from ticket_relay.application.ports.credentials_port import CredentialsError
from ticket_relay.application.ticket_relay import TicketRelay
from ticket_relay.domain.relay_result import Success, UpstreamError
from ticket_relay.domain.service_desk import ServiceDeskCredentials


def _credentials() -> ServiceDeskCredentials:
    return ServiceDeskCredentials(
        endpoint="https://desk.example.com/api",
        username="agent",
        password="s3cret",
        identifier="teams2gonew",
    )

def test_handle_create_case_happy_path() -> None:
    dispatcher = Mock()
    dispatcher.dispatch.return_value = Success(status=201, data={"caseId": "123"})

    status, body = handle_create_case(
        {"title": "Printer down", "messages": []},
        _credentials,
        TicketRelay(dispatcher),
    )

    assert status == 201
    assert body == {"caseId": "123"}
    assert dispatcher.dispatch.call_count == 1

def test_handle_create_case_upstream_error() -> None:
    dispatcher = Mock()
    dispatcher.dispatch.return_value = UpstreamError(status=401, status_text="Unauthorized", body={"message": "no"})

    status, body = handle_create_case({}, _credentials, TicketRelay(dispatcher))

    assert status == 401
    assert body["error"] == "Service desk error"
    assert body["details"] == {"message": "no"}

def test_unreadable_credentials_are_config_error() -> None:
    dispatcher = Mock()

    def failing_resolver() -> ServiceDeskCredentials:
        raise CredentialsError("Cannot read credentials file config.json")

    status, body = handle_create_case({}, failing_resolver, TicketRelay(dispatcher))

    assert status == 500
    assert body == {"error": "Configuration error", "details": "Cannot read credentials file config.json"}
    dispatcher.dispatch.assert_not_called()

def test_malformed_body_is_bad_request() -> None:
    dispatcher = Mock()
    resolver = Mock()

    status, body = handle_create_case(["not", "an", "object"], resolver, TicketRelay(dispatcher))

    assert status == 400
    assert body["error"] == "Invalid request"
    resolver.assert_not_called()
    dispatcher.dispatch.assert_not_called()
