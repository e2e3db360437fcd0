"""
Controllers for the assistant fulfillment webhook.

This module handles the business logic for:
- POST /fulfillment - nearest stations with bikes or free stands
"""

from typing import Optional

from bikeshare_assistant.core.exceptions import StationServiceError
from bikeshare_assistant.core.logger import logger, log_success, log_warning
from bikeshare_assistant.schemas.fulfillment import (
    SCREEN_OUTPUT_CAPABILITY,
    AssistantPayload,
    WebhookRequest,
    WebhookResponse
)
from bikeshare_assistant.schemas.station import Coordinate, ResourceKind
from bikeshare_assistant.services.formatter import build_reply, build_station_reply
from bikeshare_assistant.services.ranking import select_top
from bikeshare_assistant.services.stations import station_service

ENDPOINT = "/api/fulfillment"

PLACE_INTENT = "place.done"
NEAR_INTENT = "near.done"

NO_LOCATION_MESSAGE = "Sorry, I couldn't find any station."
SERVICE_UNAVAILABLE_MESSAGE = "Sorry, the service seems unavailable right now."
NO_STATIONS_MESSAGES = {
    ResourceKind.BIKES: "Sorry, I couldn't find any open station with available bikes nearby.",
    ResourceKind.STANDS: "Sorry, I couldn't find any open station with available bike stands nearby.",
}


def place_origin(payload: AssistantPayload) -> Optional[Coordinate]:
    """Coordinates of the place the user picked"""
    for assistant_input in payload.inputs:
        for argument in assistant_input.arguments:
            if argument.place_value and argument.place_value.coordinates:
                coordinate = argument.place_value.coordinates.to_coordinate()
                if coordinate is not None:
                    return coordinate
    return None


def device_origin(payload: AssistantPayload) -> Optional[Coordinate]:
    """Coordinates reported by the device"""
    if payload.device and payload.device.location and payload.device.location.coordinates:
        return payload.device.location.coordinates.to_coordinate()
    return None


def extract_origin(request: WebhookRequest) -> Optional[Coordinate]:
    """
    Coordinates to search from.

    place.done only reads the picked place and near.done only the device
    location. Other intents take a picked place first, then the device.
    """
    original = request.original_detect_intent_request
    if not original or not original.payload:
        return None
    payload = original.payload

    intent = request.intent_name
    if intent == PLACE_INTENT:
        return place_origin(payload)
    if intent == NEAR_INTENT:
        return device_origin(payload)
    return place_origin(payload) or device_origin(payload)


def has_screen(request: WebhookRequest) -> bool:
    original = request.original_detect_intent_request
    if not original or not original.payload or not original.payload.surface:
        return False
    return any(
        capability.name == SCREEN_OUTPUT_CAPABILITY
        for capability in original.payload.surface.capabilities
    )


def resource_kind(request: WebhookRequest) -> ResourceKind:
    return ResourceKind.parse(request.query_result.parameters.get("type"))


async def handle_fulfillment(request: WebhookRequest) -> WebhookResponse:
    """
    Answer with the nearest stations that have bikes or free stands.
    
    Args:
        request: Dialogflow webhook request
        
    Returns:
        WebhookResponse closing the conversation
    """
    intent = request.intent_name
    kind = resource_kind(request)
    logger.debug(f"{intent} - params: {request.query_result.parameters}")
    
    origin = extract_origin(request)
    if origin is None:
        log_warning(ENDPOINT, "No coordinates in request", intent)
        return build_reply(NO_LOCATION_MESSAGE)
    logger.debug(f"{intent} - origin: ({origin.latitude}, {origin.longitude})")
    
    try:
        stations = await station_service.fetch_stations(origin)
    except StationServiceError as e:
        log_warning(ENDPOINT, f"Station lookup failed: {e.message}", intent)
        return build_reply(SERVICE_UNAVAILABLE_MESSAGE)
    
    selected = select_top(stations, origin, kind)
    logger.info(f"{intent} - stations: {[station.address for station in selected]}")
    
    if not selected:
        log_warning(ENDPOINT, f"No suggested station among {len(stations)}", intent)
        return build_reply(NO_STATIONS_MESSAGES[kind])
    
    log_success(ENDPOINT, f"Suggested {selected[0].address} for {kind.value}", intent)
    return build_station_reply(selected, kind, has_screen(request))
