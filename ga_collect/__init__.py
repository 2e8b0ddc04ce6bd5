from .api_client import get_default_session, send_request
from .config import (
    API_ENDPOINT,
    DEFAULT_CLIENT_ID,
    DEFAULT_CLIENT_VERSION,
    DEFAULT_TRACKING_ID,
    PROTOCOL_VERSION,
)
from .event_tracker import session_event, ui_event
from .models import Event, EventHit, HitType, PageView, Payload
from .params import collect_params, encode_payload

__all__ = [
    "API_ENDPOINT",
    "DEFAULT_CLIENT_ID",
    "DEFAULT_CLIENT_VERSION",
    "DEFAULT_TRACKING_ID",
    "PROTOCOL_VERSION",
    "Event",
    "EventHit",
    "HitType",
    "PageView",
    "Payload",
    "collect_params",
    "encode_payload",
    "get_default_session",
    "send_request",
    "session_event",
    "ui_event",
]
