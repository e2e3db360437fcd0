"""
Dialogflow v2 webhook request/response schemas.

Only the fields the fulfillment reads or writes are modelled; everything
else in the platform payload is ignored.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional

from bikeshare_assistant.schemas.station import Coordinate

SCREEN_OUTPUT_CAPABILITY = "actions.capability.SCREEN_OUTPUT"


class CamelModel(BaseModel):
    """Base model using the platform's camelCase keys on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ============ Webhook Request ============

class LatLng(CamelModel):
    """
    Coordinates as sent by the platform.

    Zero values are left out of the payload, so either component may be missing.
    """
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def to_coordinate(self) -> Optional[Coordinate]:
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class LocationValue(CamelModel):
    """A place picked by the user, or the device location"""
    coordinates: Optional[LatLng] = None


class Argument(CamelModel):
    """Argument attached to an assistant input"""
    place_value: Optional[LocationValue] = None


class AssistantInput(CamelModel):
    arguments: List[Argument] = Field(default_factory=list)


class Device(CamelModel):
    location: Optional[LocationValue] = None


class Capability(CamelModel):
    name: str


class Surface(CamelModel):
    capabilities: List[Capability] = Field(default_factory=list)


class AssistantPayload(CamelModel):
    """Assistant conversation payload forwarded by Dialogflow"""
    device: Optional[Device] = None
    surface: Optional[Surface] = None
    inputs: List[AssistantInput] = Field(default_factory=list)


class OriginalDetectIntentRequest(CamelModel):
    payload: Optional[AssistantPayload] = None


class Intent(CamelModel):
    name: Optional[str] = None
    display_name: Optional[str] = None


class QueryResult(CamelModel):
    query_text: Optional[str] = None
    parameters: Dict[str, Any] = Field(default_factory=dict)
    intent: Optional[Intent] = None


class WebhookRequest(CamelModel):
    """Request schema for the fulfillment webhook"""
    response_id: Optional[str] = None
    session: Optional[str] = None
    query_result: QueryResult = Field(default_factory=QueryResult)
    original_detect_intent_request: Optional[OriginalDetectIntentRequest] = None

    @property
    def intent_name(self) -> str:
        if self.query_result.intent and self.query_result.intent.display_name:
            return self.query_result.intent.display_name
        return "unknown"


# ============ Webhook Response ============

class SimpleResponse(CamelModel):
    text_to_speech: str


class OpenUrlAction(CamelModel):
    url: str


class Button(CamelModel):
    title: str
    open_url_action: OpenUrlAction


class BasicCard(CamelModel):
    title: str
    formatted_text: str
    buttons: List[Button] = Field(default_factory=list)


class RichResponseItem(CamelModel):
    simple_response: Optional[SimpleResponse] = None
    basic_card: Optional[BasicCard] = None


class RichResponse(CamelModel):
    items: List[RichResponseItem] = Field(default_factory=list)


class GooglePayload(CamelModel):
    expect_user_response: bool = False
    rich_response: RichResponse


class ResponsePayload(CamelModel):
    google: GooglePayload


class WebhookResponse(CamelModel):
    """Response schema for the fulfillment webhook"""
    fulfillment_text: str = Field(..., description="Plain text reply")
    payload: ResponsePayload = Field(..., description="Assistant rich response")
