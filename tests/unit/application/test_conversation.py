from ticket_relay.application.conversation import draft_ticket_request, format_conversation, generate_title
from ticket_relay.domain.ticket import Message


def _message(content: str) -> Message:
    return Message(id="1", sender="Nicklas", content=content, timestamp="2024-05-14T09:30:00Z")

def test_format_conversation_drops_blank_and_tag_notification_lines() -> None:
    content = (
        "The printer on floor 3 is offline.\n"
        "\n"
        "[Christer Olsson 05-14 09:31]&nbsp;tagged you\n"
        "  Please check the toner too.  \n"
    )

    assert format_conversation([_message(content)]) == (
        "The printer on floor 3 is offline.\n"
        "  Please check the toner too."
    )

def test_format_conversation_keeps_timestamp_lines_without_nbsp() -> None:
    content = "[Christer Olsson 05-14 09:31] see above"

    assert format_conversation([_message(content)]) == content

def test_format_conversation_uses_first_message_only() -> None:
    assert format_conversation([_message("first"), _message("second")]) == "first"

def test_format_conversation_without_messages() -> None:
    assert format_conversation([]) == ""

def test_generate_title_truncates_long_content() -> None:
    content = "x" * 100

    title = generate_title([_message(content)])

    assert title == "x" * 80 + "..."

def test_generate_title_keeps_short_content() -> None:
    assert generate_title([_message("Printer down")]) == "Printer down"
    assert generate_title([]) == ""

def test_draft_ticket_request_prefers_explicit_title() -> None:
    messages = [_message("Printer down")]

    drafted = draft_ticket_request(messages, manager="christer@example.com", contact="nicklas@example.com")
    titled = draft_ticket_request(messages, title="Custom")

    assert drafted.title == "Printer down"
    assert drafted.description == "Printer down"
    assert drafted.manager == "christer@example.com"
    assert drafted.contact == "nicklas@example.com"
    assert drafted.messages == tuple(messages)
    assert titled.title == "Custom"
