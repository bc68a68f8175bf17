from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any
from ticket_relay.application.ports.credentials_port import CredentialsError
from ticket_relay.config import load_service_desk_credentials
from ticket_relay.domain.service_desk import ServiceDeskCredentials


logger = logging.getLogger(__name__)

def load_credentials_from_file(path: Path) -> ServiceDeskCredentials:
    """Read service desk credentials from a local ``config.json`` style file.
        Expected keys: ``endpoint``, ``username``, ``password``, ``identifier``.
        ``.yaml``/``.yml`` files are parsed as YAML, anything else as JSON.
        Missing keys come back as empty strings; the relay reports them.
        Raises:
            CredentialsError: if the file cannot be read or parsed, is not a mapping,
            or holds a non-string value for one of the expected keys.
        """

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read credentials file {path}: {exc}"
        logger.error(msg)
        raise CredentialsError(msg) from exc

    if path.suffix.lower() in (".yaml", ".yml"):
        data = _parse_yaml(text)
    else:
        data = _parse_json(text)

    if not isinstance(data, dict):
        msg = f"Credentials file {path} must contain an object, got {type(data).__name__}"
        logger.error(msg)
        raise CredentialsError(msg)

    credentials = ServiceDeskCredentials(
        endpoint=_credential_value(data, "endpoint", path).strip(),
        username=_credential_value(data, "username", path).strip(),
        password=_credential_value(data, "password", path),
        identifier=_credential_value(data, "identifier", path).strip(),
    )
    logger.info("Credentials loaded from %s", path.name)
    return credentials

def _credential_value(data: dict[str, Any], key: str, path: Path) -> str:
    # unquoted YAML 0123 / on / yes arrive as int / bool
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = (
            f"Credentials file {path.name}: '{key}' must be a string, "
            f"got {type(value).__name__} (quote the value)"
        )
        logger.error(msg)
        raise CredentialsError(msg)
    return value

def resolve_credentials(config_path: Path | None = None) -> ServiceDeskCredentials:
    """Credentials from ``config_path`` when given, otherwise from the environment."""
    if config_path is not None:
        return load_credentials_from_file(config_path)

    credentials = load_service_desk_credentials()
    logger.info(
        "Credentials loaded from environment (endpoint=%s, username=%s, password=%s, identifier=%s)",
        _configured(credentials.endpoint),
        _configured(credentials.username),
        _configured(credentials.password),
        _configured(credentials.identifier),
    )
    return credentials

def _configured(value: str) -> str:
    return "yes" if value else "no"

def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as exc:
        msg = "Failed to parse credentials file as JSON"
        logger.error(msg)
        raise CredentialsError(msg) from exc

def _parse_yaml(text: str) -> Any:
    try:
        import yaml
    except ImportError as exc:
        msg = "PyYAML is required to read YAML credentials files"
        logger.error(msg)
        raise CredentialsError(msg) from exc

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        msg = "Failed to parse credentials file as YAML"
        logger.error(msg)
        raise CredentialsError(msg) from exc
