import json
from pathlib import Path
from typing import Any
import pytest
import ticket_relay.cmd.main as cli
from ticket_relay.domain.relay_result import NetworkError, RelayResult, Success


class FakeServiceDeskClient:
    result: RelayResult = Success(status=200, data={})
    calls: list[Any] = []
    closed: int = 0

    def __init__(self, config: Any) -> None:
        self.config = config

    def __enter__(self) -> "FakeServiceDeskClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        FakeServiceDeskClient.closed += 1

    def dispatch(self, endpoint: str, payload: Any, credentials: Any) -> RelayResult:
        FakeServiceDeskClient.calls.append((endpoint, payload))
        return FakeServiceDeskClient.result

@pytest.fixture
def fake_client(monkeypatch: pytest.MonkeyPatch) -> type[FakeServiceDeskClient]:
    FakeServiceDeskClient.calls = []
    FakeServiceDeskClient.closed = 0
    monkeypatch.setattr(cli, "ServiceDeskClient", FakeServiceDeskClient)
    return FakeServiceDeskClient

def _write_config(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "endpoint": "https://desk.example.com/api",
                "username": "agent",
                "password": "s3cret",
                "identifier": "teams2gonew",
            }
        ),
        encoding="utf-8",
    )
    return path

def _write_request(tmp_path: Path) -> Path:
    path = tmp_path / "request.json"
    path.write_text(json.dumps({"title": "Printer down", "messages": [{"content": "help"}]}), encoding="utf-8")
    return path

def test_main_prints_response_and_returns_zero_on_success(
    tmp_path: Path,
    fake_client: type[FakeServiceDeskClient],
    capsys: pytest.CaptureFixture[str],
) -> None:
    fake_client.result = Success(status=201, data={"URL_Selfservice": "https://x/case/1"})

    code = cli.main(["--request", str(_write_request(tmp_path)), "--config", str(_write_config(tmp_path))])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"URL_Selfservice": "https://x/case/1"}
    assert len(fake_client.calls) == 1
    endpoint, payload = fake_client.calls[0]
    assert endpoint == "https://desk.example.com/api"
    assert payload.notes[0].content == "Exported from Teams conversation with 1 messages"
    assert fake_client.closed == 1

def test_main_returns_one_on_network_error(
    tmp_path: Path,
    fake_client: type[FakeServiceDeskClient],
    capsys: pytest.CaptureFixture[str],
) -> None:
    fake_client.result = NetworkError(reason="connection refused")

    code = cli.main(["--request", str(_write_request(tmp_path)), "--config", str(_write_config(tmp_path))])

    assert code == 1
    assert json.loads(capsys.readouterr().out) == {"error": "Network error", "details": "connection refused"}

def test_main_reports_config_error_without_dispatch(
    tmp_path: Path,
    fake_client: type[FakeServiceDeskClient],
    capsys: pytest.CaptureFixture[str],
) -> None:
    config = tmp_path / "config.json"
    config.write_text('{"endpoint": "https://desk.example.com/api"}', encoding="utf-8")

    code = cli.main(["--request", str(_write_request(tmp_path)), "--config", str(config)])

    assert code == 1
    out = json.loads(capsys.readouterr().out)
    assert out["error"] == "Configuration error"
    assert fake_client.calls == []

def test_main_rejects_unreadable_request(tmp_path: Path, fake_client: type[FakeServiceDeskClient]) -> None:
    bad = tmp_path / "request.json"
    bad.write_text("{not json", encoding="utf-8")

    assert cli.main(["--request", str(bad)]) == 1
    assert fake_client.calls == []
