from typing import List, Tuple
from urllib.parse import urlencode

from .config import PROTOCOL_VERSION
from .models import EventHit, PageView, Payload


def _always(value):
    return True


def _non_empty(value):
    return value != ""


# (attribute, wire key, emit?)
PAYLOAD_PARAMS = (
    ("client_version",    "_v",  _non_empty),
    ("tracking_id",       "tid", _non_empty),
    ("client_id",         "cid", _non_empty),
    ("screen_resolution", "sr",  _non_empty),
    ("viewport_size",     "vp",  _non_empty),
    ("screen_colors",     "sd",  _non_empty),
    ("language",          "ul",  _non_empty),
    ("hostname",          "dh",  _always),
    ("hit_type",          "t",   _always),
)

PAGEVIEW_PARAMS = (
    ("page",  "dp", _non_empty),
    ("title", "dt", _non_empty),
)

EVENT_PARAMS = (
    ("category", "ec", _always),
    ("action",   "ea", _always),
    ("label",    "el", _non_empty),
    ("value",    "ev", _non_empty),
)


def _emit(obj, table) -> List[Tuple[str, str]]:
    params = []
    for attr, key, emit in table:
        value = getattr(obj, attr)
        if emit(value):
            params.append((key, value))
    return params


def collect_params(payload: Payload) -> List[Tuple[str, str]]:
    """Assemble the ordered list of collect parameters for ``payload``."""
    params = [("v", PROTOCOL_VERSION)]
    params += _emit(payload, PAYLOAD_PARAMS)

    if isinstance(payload.hit, EventHit):
        if payload.hit.event is not None:
            params += _emit(payload.hit.event, EVENT_PARAMS)
    elif isinstance(payload.hit, PageView):
        params += _emit(payload.hit, PAGEVIEW_PARAMS)

    for dim, custom_var in payload.custom_vars.items():
        if custom_var:
            params.append((dim, custom_var))

    return params


def encode_payload(payload: Payload) -> str:
    return urlencode(collect_params(payload))
