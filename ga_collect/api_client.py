import logging
import threading
from typing import Optional, Tuple

import requests

from . import config
from .models import Payload
from .params import encode_payload

logger = logging.getLogger(__name__)

_default_session: Optional[requests.Session] = None
_session_lock = threading.Lock()


def get_default_session() -> requests.Session:
    """Return the process-wide session, creating it on first use."""
    global _default_session
    if _default_session is None:
        with _session_lock:
            if _default_session is None:
                _default_session = requests.Session()
    return _default_session


def build_request(
    http_client: requests.Session, payload: Payload
) -> requests.PreparedRequest:
    headers = {"Content-Type": "application/x-www-form-urlencoded"}
    if payload.user_agent:
        headers["User-Agent"] = payload.user_agent

    return http_client.prepare_request(
        requests.Request(
            "POST", config.API_ENDPOINT, data=encode_payload(payload), headers=headers
        )
    )


def send_request(
    http_client: Optional[requests.Session], payload: Payload
) -> Tuple[bool, Optional[Exception]]:
    """Send one hit to the collect endpoint.

    Any response counts as delivered, whatever its status. Only a request that
    could not be built or a transport failure yields ``(False, err)``.
    The request is prepared by ``http_client``, so its headers, auth and
    cookies apply. Timeouts are left to the client.
    """
    if http_client is None:
        logger.debug("Using default requests.Session")
        http_client = get_default_session()

    try:
        req = build_request(http_client, payload)
    except (requests.RequestException, ValueError) as exc:
        logger.error("Error constructing GA request: %s", exc)
        return False, exc

    try:
        resp = http_client.send(req)
    except requests.RequestException as exc:
        logger.error("Could not send HTTP request to GA: %s", exc)
        return False, exc

    logger.debug("Successfully sent request to GA: %s", resp.status_code)
    resp.close()
    return True, None
