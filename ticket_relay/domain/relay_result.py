from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Success:
    status: int
    data: Any

@dataclass(frozen=True, slots=True)
class UpstreamError:
    status: int
    status_text: str
    body: Any

@dataclass(frozen=True, slots=True)
class ConfigError:
    reason: str

@dataclass(frozen=True, slots=True)
class NetworkError:
    reason: str


RelayResult = Union[Success, UpstreamError, ConfigError, NetworkError]
