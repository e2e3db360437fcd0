"""
Routes for the assistant fulfillment webhook.
"""

from fastapi import APIRouter

from bikeshare_assistant.core.logger import log_request
from bikeshare_assistant.schemas.fulfillment import WebhookRequest, WebhookResponse
from bikeshare_assistant.api.fulfillment import controllers_fulfillment

router = APIRouter(tags=["Fulfillment"])


@router.post(
    "/fulfillment",
    response_model=WebhookResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True
)
async def fulfillment(request: WebhookRequest):
    """
    Fulfillment webhook called by the conversational platform.
    
    Finds the nearest open stations around the place the user picked, or
    around the device location, and replies with the best one.
    
    **Parameters (queryResult.parameters):**
    - `type`: "bikes" (default) or "stands"
    
    **Example:**
    ```json
    {
      "queryResult": {
        "parameters": {"type": "bikes"},
        "intent": {"displayName": "near.done"}
      },
      "originalDetectIntentRequest": {
        "payload": {
          "device": {"location": {"coordinates": {"latitude": 57.7, "longitude": 11.97}}},
          "surface": {"capabilities": [{"name": "actions.capability.SCREEN_OUTPUT"}]}
        }
      }
    }
    ```
    """
    log_request(controllers_fulfillment.ENDPOINT, "POST", request.intent_name)
    return await controllers_fulfillment.handle_fulfillment(request)
