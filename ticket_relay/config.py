from dataclasses import dataclass
import os
from dotenv import load_dotenv
from ticket_relay.domain.service_desk import ServiceDeskCredentials


load_dotenv()

@dataclass(frozen=True)
class RelayConfig:
    timeout_seconds: float = 30.0

def _get_env(name: str, strip: bool = True) -> str:
    # missing values are reported by the relay as a configuration error
    value = os.getenv(name) or ""
    return value.strip() if strip else value

def load_relay_config() -> RelayConfig:
    return RelayConfig()

def load_service_desk_credentials() -> ServiceDeskCredentials:
    return ServiceDeskCredentials(
        endpoint=_get_env("SERVICE_DESK_ENDPOINT"),
        username=_get_env("SERVICE_DESK_USERNAME"),
        password=_get_env("SERVICE_DESK_PASSWORD", strip=False),
        identifier=_get_env("SERVICE_DESK_IDENTIFIER"),
    )
