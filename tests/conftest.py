"""Shared fixtures: synthetic ESPN schedule documents and mocked HTTP clients."""
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

REFERENCE_TIME = datetime(2024, 6, 1, tzinfo=timezone.utc)


def make_competitor(
    abbr: str,
    display_name: str,
    home_away: str = "home",
    score: Any = None,
    winner: Optional[bool] = None,
    record: Optional[List[Dict[str, Any]]] = None,
    logos: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    team: Dict[str, Any] = {"abbreviation": abbr, "displayName": display_name}
    if logos is not None:
        team["logos"] = logos
    competitor: Dict[str, Any] = {"homeAway": home_away, "team": team}
    if score is not None:
        competitor["score"] = score
    if winner is not None:
        competitor["winner"] = winner
    if record is not None:
        competitor["record"] = record
    return competitor


def make_event(
    date: Optional[str],
    name: str = "Green Bay Packers at Chicago Bears",
    status_name: Optional[str] = "STATUS_SCHEDULED",
    status_description: Optional[str] = None,
    venue: Optional[str] = "Soldier Field",
    competitors: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    status_type: Dict[str, Any] = {}
    if status_name is not None:
        status_type["name"] = status_name
    if status_description is not None:
        status_type["description"] = status_description
    competition: Dict[str, Any] = {
        "status": {"type": status_type},
        "competitors": competitors
        if competitors is not None
        else [
            make_competitor("CHI", "Chicago Bears", "home"),
            make_competitor("GB", "Green Bay Packers", "away"),
        ],
    }
    if venue is not None:
        competition["venue"] = {"fullName": venue}
    event: Dict[str, Any] = {"name": name, "competitions": [competition]}
    if date is not None:
        event["date"] = date
    return event


@pytest.fixture
def reference_time() -> datetime:
    return REFERENCE_TIME


@pytest.fixture
def bears_schedule() -> Dict[str, Any]:
    """One past final game (Bears 24, Packers 10) and one future game with no status."""
    return {
        "events": [
            make_event(
                "2024-01-01T18:00Z",
                status_name="STATUS_FINAL",
                status_description="Final",
                competitors=[
                    make_competitor(
                        "CHI",
                        "Chicago Bears",
                        "home",
                        score={"value": 24.0, "displayValue": "24"},
                        winner=True,
                        record=[
                            {"type": "total", "displayValue": "7-10"},
                            {"type": "home", "displayValue": "5-3"},
                        ],
                        logos=[
                            {"href": "https://a.espncdn.com/i/teamlogos/nfl/500/chi.png"},
                            {"href": "https://a.espncdn.com/i/teamlogos/nfl/500-dark/chi.png"},
                        ],
                    ),
                    make_competitor(
                        "GB",
                        "Green Bay Packers",
                        "away",
                        score={"value": 10.0, "displayValue": "10"},
                        winner=False,
                        record=[{"type": "total", "displayValue": "9-8"}],
                    ),
                ],
            ),
            make_event(
                "2099-01-01T18:00Z",
                name="Chicago Bears at Detroit Lions",
                status_name=None,
                venue=None,
                competitors=[
                    make_competitor("DET", "Detroit Lions", "home"),
                    make_competitor("CHI", "Chicago Bears", "away"),
                ],
            ),
        ]
    }


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays canned responses."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture
def mock_http():
    """Returns a factory building (httpx.Client, RecordingHandler) pairs."""
    clients: List[httpx.Client] = []

    def _factory(respond: Callable[[httpx.Request], httpx.Response]):
        handler = RecordingHandler(respond)
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client, handler

    yield _factory

    for client in clients:
        client.close()
