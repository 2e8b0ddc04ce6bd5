from .api_client import send_request
from .config import DEFAULT_CLIENT_ID, DEFAULT_TRACKING_ID


# Fired whenever the client opens a new UI session
def ui_event(http_client, payload):
    return send_request(http_client, payload)


# Fired whenever a new session is initiated
def session_event(http_client, payload):
    if not payload.tracking_id:
        payload.tracking_id = DEFAULT_TRACKING_ID
    payload.client_id = DEFAULT_CLIENT_ID
    return send_request(http_client, payload)
