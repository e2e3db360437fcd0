"""
Builds the spoken and visual replies sent back to the assistant.
"""

from typing import List, Optional, Sequence

from bikeshare_assistant.schemas.fulfillment import (
    BasicCard,
    Button,
    GooglePayload,
    OpenUrlAction,
    ResponsePayload,
    RichResponse,
    RichResponseItem,
    SimpleResponse,
    WebhookResponse
)
from bikeshare_assistant.schemas.station import ResourceKind, Station

MAPS_URL = "https://www.google.com/maps/?q={lat},{lng}"
DIRECTIONS_TITLE = "Directions"
LINE_BREAK = "  \n"


def station_spoken(station: Station, kind: ResourceKind) -> str:
    if kind == ResourceKind.STANDS:
        return f"There are {station.available_bike_stands} available bike stands at {station.address}."
    return f"There are {station.available_bikes} available bikes at {station.address}."


def station_text(station: Station, kind: ResourceKind, include_address: bool = False) -> str:
    """One card line for a station; markdown bold address when requested"""
    if include_address:
        return f"**{station.address}**{LINE_BREAK}{station_text(station, kind)}"
    if kind == ResourceKind.STANDS:
        return f"Stands: {station.available_bike_stands}  (bikes: {station.available_bikes})"
    return f"Bikes: {station.available_bikes}  (stands: {station.available_bike_stands})"


def directions_url(station: Station) -> str:
    return MAPS_URL.format(lat=station.position.lat, lng=station.position.lng)


def build_card(stations: Sequence[Station], kind: ResourceKind) -> BasicCard:
    """
    Card titled with the nearest station.
    
    The first line skips the address since it is already the title.
    """
    top_station = stations[0]
    return BasicCard(
        title=top_station.address,
        formatted_text=LINE_BREAK.join(
            station_text(station, kind, include_address=i > 0)
            for i, station in enumerate(stations)
        ),
        buttons=[
            Button(
                title=DIRECTIONS_TITLE,
                open_url_action=OpenUrlAction(url=directions_url(top_station))
            )
        ]
    )


def build_reply(text: str, card: Optional[BasicCard] = None) -> WebhookResponse:
    """Final reply that closes the conversation"""
    items: List[RichResponseItem] = [
        RichResponseItem(simple_response=SimpleResponse(text_to_speech=text))
    ]
    if card is not None:
        items.append(RichResponseItem(basic_card=card))
    
    return WebhookResponse(
        fulfillment_text=text,
        payload=ResponsePayload(
            google=GooglePayload(
                expect_user_response=False,
                rich_response=RichResponse(items=items)
            )
        )
    )


def build_station_reply(
    stations: Sequence[Station],
    kind: ResourceKind,
    has_screen: bool
) -> WebhookResponse:
    """
    Reply naming the nearest suggested station.
    
    Args:
        stations: Selected stations, nearest first; must not be empty
        kind: Bikes or stands
        has_screen: Whether the device can show a card
        
    Returns:
        WebhookResponse with spoken text and, on screen devices, a card
    """
    if not stations:
        raise ValueError("At least one station is required to build a station reply")
    
    card = build_card(stations, kind) if has_screen else None
    return build_reply(station_spoken(stations[0], kind), card)
