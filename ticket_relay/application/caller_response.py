from __future__ import annotations
from typing import Any
from ticket_relay.domain.relay_result import ConfigError, NetworkError, RelayResult, Success, UpstreamError


def to_caller_response(result: RelayResult) -> tuple[int, Any]:
    """Translate a relay outcome into the ``(status, body)`` returned to the caller.
        Success and upstream errors keep the upstream status; configuration and
        network failures become 500 with ``{error, details}``.
        """

    if isinstance(result, Success):
        return result.status, result.data

    if isinstance(result, UpstreamError):
        return result.status, {
            "error": "Service desk error",
            "details": result.body,
            "status": result.status,
            "statusText": result.status_text,
        }

    if isinstance(result, ConfigError):
        return 500, {"error": "Configuration error", "details": result.reason}

    if isinstance(result, NetworkError):
        return 500, {"error": "Network error", "details": result.reason}

    raise TypeError(f"Unsupported relay result: {type(result).__name__}")

def bad_request_response(details: str) -> tuple[int, dict[str, Any]]:
    return 400, {"error": "Invalid request", "details": details}
