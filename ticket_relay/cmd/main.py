from __future__ import annotations
import argparse
import json
import logging
import sys
from functools import partial
from pathlib import Path
from typing import Any, Sequence
from ticket_relay.application.create_case import handle_create_case
from ticket_relay.application.ticket_relay import TicketRelay
from ticket_relay.config import load_relay_config
from ticket_relay.infrastructure.credentials_file import resolve_credentials
from ticket_relay.infrastructure.service_desk_client import ServiceDeskClient


logger = logging.getLogger(__name__)

def logging_conf() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="ticket-relay",
        description="Submit selected Teams messages as a service desk ticket.",
    )
    p.add_argument(
        "--request",
        type=Path,
        default=None,
        help="JSON file with {title, description, manager, contact, messages}; stdin when omitted",
    )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="credentials file (JSON or YAML); SERVICE_DESK_* environment variables when omitted",
    )
    return p.parse_args(argv)

def _read_body(path: Path | None) -> Any:
    text = sys.stdin.read() if path is None else path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    return json.loads(text)

def main(argv: Sequence[str] | None = None) -> int:
    logging_conf()
    args = _parse_args(argv)

    try:
        body = _read_body(args.request)
    except (OSError, ValueError) as exc:
        logger.error("Cannot read create-case request: %s", exc)
        return 1

    with ServiceDeskClient(load_relay_config()) as client:
        status, response_body = handle_create_case(
            body,
            partial(resolve_credentials, args.config),
            TicketRelay(client),
        )

    print(json.dumps(response_body, indent=2))

    if 200 <= status < 300:
        return 0

    logger.error("Create case failed with status %d", status)
    return 1

if __name__ == "__main__":
    raise SystemExit(main())
