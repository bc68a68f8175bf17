from __future__ import annotations
import base64
import json
import logging
from typing import Any
import requests
from requests import RequestException
from ticket_relay.config import RelayConfig
from ticket_relay.domain.relay_result import NetworkError, RelayResult, Success, UpstreamError
from ticket_relay.domain.service_desk import ServiceDeskCredentials, ServiceDeskPayload


logger = logging.getLogger(__name__)

class ServiceDeskClient:
    """HTTP client that posts ticket payloads to the service desk import API.
        Sends a single POST per call (no retries), reads the body as text,
        parses it as JSON when possible and classifies the outcome into a
        `RelayResult`. Owns a `requests.Session`; close it, or use the client as
        a context manager. Sessions are not guaranteed thread-safe, so use one
        client per thread.
        """

    def __init__(self, config: RelayConfig | None = None) -> None:
        self._config = config or RelayConfig()
        self._session = requests.Session()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> ServiceDeskClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def dispatch(
        self,
        endpoint: str,
        payload: ServiceDeskPayload,
        credentials: ServiceDeskCredentials,
    ) -> RelayResult:
        headers = {
            "Content-Type": "application/json",
            "Authorization": basic_auth_header(credentials.username, credentials.password),
        }
        body = payload.to_dict()
        logger.debug("Service desk payload: %s", json.dumps(body))

        try:
            response = self._session.post(
                endpoint,
                json=body,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )
        except RequestException as exc:
            msg = f"Error calling service desk API: {exc}"
            logger.error(msg)
            return NetworkError(reason=str(exc))

        text = response.text
        logger.debug("Service desk response status=%d length=%d", response.status_code, len(text))
        data = _parse_body(text)

        if 200 <= response.status_code < 300:
            return Success(status=response.status_code, data=data)

        return UpstreamError(
            status=response.status_code,
            status_text=response.reason or "",
            body=data,
        )

def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"

def _parse_body(text: str) -> Any:
    """Parsed JSON body, or ``{"message": text}`` when it is not JSON."""
    try:
        return json.loads(text)
    except ValueError:
        logger.debug("Service desk response is not JSON; wrapping raw text")
        return {"message": text}
