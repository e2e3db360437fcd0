"""
Pytest configuration and shared fixtures
"""

import os
import tempfile
from pathlib import Path

import pytest

# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("BIKES_API_URL", "https://bikes.example.test/vls/v1/stations")
os.environ.setdefault("BIKES_API_KEY", "test-key")
os.environ.setdefault("BIKES_CONTRACT", "Goteborg")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "bikeshare_assistant_test_logs"))

from bikeshare_assistant.schemas.station import Coordinate, Position, Station  # noqa: E402


def make_station(address, lat, lng, status="OPEN", bikes=5, stands=5, **extra):
    """Build a Station the way the provider would describe it"""
    return Station(
        address=address,
        position=Position(lat=lat, lng=lng),
        status=status,
        available_bikes=bikes,
        available_bike_stands=stands,
        **extra
    )


def station_record(address, lat, lng, status="OPEN", bikes=5, stands=5):
    """Raw provider JSON record"""
    return {
        "number": 1,
        "contract_name": "Goteborg",
        "name": address.upper(),
        "address": address,
        "position": {"lat": lat, "lng": lng},
        "banking": False,
        "bonus": False,
        "status": status,
        "bike_stands": bikes + stands,
        "available_bike_stands": stands,
        "available_bikes": bikes,
        "last_update": 1538378400000,
    }


def webhook_payload(
    kind=None,
    device=None,
    place=None,
    screen=False,
    intent="near.done"
):
    """Dialogflow v2 webhook body with optional device location and picked place"""
    payload = {"inputs": [], "surface": {"capabilities": [{"name": "actions.capability.AUDIO_OUTPUT"}]}}
    if screen:
        payload["surface"]["capabilities"].append({"name": "actions.capability.SCREEN_OUTPUT"})
    if device is not None:
        payload["device"] = {
            "location": {"coordinates": {"latitude": device[0], "longitude": device[1]}}
        }
    if place is not None:
        payload["inputs"].append({
            "intent": "actions.intent.PLACE",
            "arguments": [{
                "name": "PLACE",
                "placeValue": {
                    "coordinates": {"latitude": place[0], "longitude": place[1]},
                    "formattedAddress": "Picked place",
                    "name": "Picked place",
                },
            }],
        })
    parameters = {} if kind is None else {"type": kind}
    return {
        "responseId": "response-1",
        "session": "projects/bikes/agent/sessions/1",
        "queryResult": {
            "queryText": "find a bike",
            "parameters": parameters,
            "intent": {"name": "projects/bikes/agent/intents/1", "displayName": intent},
        },
        "originalDetectIntentRequest": {"source": "google", "version": "2", "payload": payload},
    }


@pytest.fixture
def origin():
    return Coordinate(latitude=0.0, longitude=0.0)


@pytest.fixture
def sample_stations():
    """Station A at the origin with bikes, station B one degree east with stands"""
    return [
        make_station("A", 0.0, 0.0, bikes=5, stands=1),
        make_station("B", 0.0, 1.0, bikes=0, stands=10),
    ]


@pytest.fixture
def gothenburg_stations():
    """A handful of stations around central Gothenburg, in provider order"""
    return [
        make_station("Järntorget", 57.69966, 11.95272, bikes=8, stands=4),
        make_station("Lilla Bommen", 57.71366, 11.96792, bikes=2, stands=14),
        make_station("Brunnsparken", 57.70676, 11.96758, status="CLOSED", bikes=12, stands=6),
        make_station("Kungsportsplatsen", 57.70420, 11.96940, bikes=3, stands=3),
        make_station("Domkyrkan", 57.70410, 11.96310, bikes=6, stands=2),
    ]
