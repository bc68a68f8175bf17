from __future__ import annotations
from ticket_relay.domain.service_desk import NamedProperty, ServiceDeskPayload
from ticket_relay.domain.ticket import TicketRequest
from ticket_relay.shared.normalization import text_or_empty


PROPERTY_ORDER: tuple[str, ...] = ("title", "description", "manager", "contact")
NOTES_PROPERTY = "additionalNotes"


def build_payload(request: TicketRequest, identifier: str) -> ServiceDeskPayload:
    """Reshape a ticket request into the service desk import schema.
        Properties always come out in ``PROPERTY_ORDER``; missing values are
        rendered as empty strings. A note with the message count is appended.
        """

    properties = tuple(
        NamedProperty(name=name, content=text_or_empty(getattr(request, name, None)))
        for name in PROPERTY_ORDER
    )

    messages = request.messages or ()
    note = NamedProperty(
        name=NOTES_PROPERTY,
        content=f"Exported from Teams conversation with {len(messages)} messages",
    )

    return ServiceDeskPayload(
        import_handler_identifier=identifier,
        properties=properties,
        notes=(note,),
    )
