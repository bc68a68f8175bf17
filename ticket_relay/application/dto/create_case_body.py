from __future__ import annotations
from typing import Any, Mapping
from ticket_relay.domain.ticket import Message, TicketRequest
from ticket_relay.shared.normalization import normalize_str_or_none, text_or_empty


class InvalidTicketRequestError(ValueError):
    """Raised when an inbound create-case body cannot be mapped to a TicketRequest."""

def parse_create_case_body(body: Any) -> TicketRequest:
    """Map the inbound JSON body onto a TicketRequest.
        Every field is optional: missing content fields become empty strings
        and a missing ``messages`` list becomes an empty tuple.
        Raises:
            InvalidTicketRequestError: if the body or a message entry is not an object,
            or ``messages`` is not a list.
        """

    if body is None:
        body = {}
    if not isinstance(body, Mapping):
        raise InvalidTicketRequestError(
            f"Request body must be a JSON object, got {type(body).__name__}"
        )

    messages_raw = body.get("messages")
    if messages_raw is None:
        messages_raw = []
    if not isinstance(messages_raw, list):
        raise InvalidTicketRequestError("'messages' must be a list")

    messages: list[Message] = []
    for index, item in enumerate(messages_raw):
        if not isinstance(item, Mapping):
            raise InvalidTicketRequestError(f"messages[{index}] must be an object")
        messages.append(_parse_message(item, index))

    return TicketRequest(
        title=text_or_empty(body.get("title")),
        description=text_or_empty(body.get("description")),
        manager=text_or_empty(body.get("manager")),
        contact=text_or_empty(body.get("contact")),
        messages=tuple(messages),
    )

def _parse_message(item: Mapping[str, Any], index: int) -> Message:
    # Teams message ids are not always sent; fall back to the position
    message_id = normalize_str_or_none(item.get("id")) or str(index)
    return Message(
        id=message_id,
        sender=text_or_empty(item.get("sender")),
        content=text_or_empty(item.get("content")),
        timestamp=text_or_empty(item.get("timestamp")),
    )
