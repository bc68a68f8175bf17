from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ServiceDeskCredentials:
    endpoint: str
    username: str = field(repr=False)
    password: str = field(repr=False)
    identifier: str

    def missing_fields(self) -> list[str]:
        """Names of the fields that are absent or blank, in declaration order."""
        values = {
            "endpoint": self.endpoint,
            "username": self.username,
            "password": self.password,
            "identifier": self.identifier,
        }
        return [name for name, value in values.items() if not (value or "").strip()]

@dataclass(frozen=True, slots=True)
class NamedProperty:
    name: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "content": self.content}

@dataclass(frozen=True, slots=True)
class ServiceDeskPayload:
    import_handler_identifier: str
    properties: tuple[NamedProperty, ...]
    notes: tuple[NamedProperty, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Wire shape expected by the service desk import handler."""
        body: dict[str, Any] = {
            "importHandlerIdentifier": self.import_handler_identifier,
            "itemToImport": [
                {"property": [p.to_dict() for p in self.properties]},
            ],
        }
        if self.notes:
            body["genericRequestProperty"] = [n.to_dict() for n in self.notes]
        return body
