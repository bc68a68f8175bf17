from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Message:
    id: str
    sender: str
    content: str
    timestamp: str

@dataclass(frozen=True, slots=True)
class TicketRequest:
    title: str = ""
    description: str = ""
    manager: str = ""
    contact: str = ""
    messages: tuple[Message, ...] = field(default_factory=tuple)
