from __future__ import annotations
import re
from collections.abc import Sequence
from ticket_relay.domain.ticket import Message, TicketRequest


TITLE_PREVIEW_LENGTH = 80

# Teams tag notifications: "[Name ... 05-14 09:30]" together with a &nbsp;
_TAG_TIMESTAMP = re.compile(r"\[\w+.*?\d{2}-\d{2}\s+\d{2}:\d{2}\]")


def format_conversation(messages: Sequence[Message]) -> str:
    """Description text for a ticket built from the first selected message.
        Blank lines and Teams tag-notification lines are dropped.
        """

    if not messages:
        return ""

    kept: list[str] = []
    for line in messages[0].content.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        if _TAG_TIMESTAMP.search(stripped) and "&nbsp;" in stripped:
            continue
        kept.append(line)

    return "\n".join(kept).strip()

def generate_title(messages: Sequence[Message]) -> str:
    if not messages:
        return ""
    content = messages[0].content
    preview = content[:TITLE_PREVIEW_LENGTH]
    return preview + "..." if len(preview) < len(content) else preview

def draft_ticket_request(
    messages: Sequence[Message],
    manager: str = "",
    contact: str = "",
    title: str | None = None,
) -> TicketRequest:
    """Build the ticket request a support agent would submit for the selected messages."""
    return TicketRequest(
        title=title or generate_title(messages),
        description=format_conversation(messages),
        manager=manager,
        contact=contact,
        messages=tuple(messages),
    )
