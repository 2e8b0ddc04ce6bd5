from enum import Enum
from typing import Annotated, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class HitType(str, Enum):
    PAGEVIEW = "pageview"
    EVENT = "event"


class PageView(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hit_type: Literal["pageview"] = "pageview"
    page: str = ""
    title: str = ""


class Event(BaseModel):
    category: str
    action: str
    label: str = ""
    value: str = ""


class EventHit(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hit_type: Literal["event"] = "event"
    event: Optional[Event] = None


Hit = Annotated[Union[PageView, EventHit], Field(discriminator="hit_type")]


class Payload(BaseModel):
    """One trackable occurrence, as it is sent to the collect endpoint.

    Fields accept either their python name or the camelCase name used by the
    JSON payloads clients post (``clientId``, ``viewPortSize``, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    client_id: str = ""
    client_version: str = ""
    tracking_id: str = ""
    language: str = ""
    screen_resolution: str = ""
    viewport_size: str = Field(default="", alias="viewPortSize")
    screen_colors: str = ""
    hostname: str = ""
    hit: Optional[Hit] = None
    custom_vars: Dict[str, str] = Field(default_factory=dict)
    user_agent: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fold_hit_type(cls, data):
        # flat {"hitType": ..., "event": {...}} -> {"hit": {...}}
        if not isinstance(data, dict) or "hit" in data:
            return data
        if "hitType" not in data and "hit_type" not in data:
            return data

        data = dict(data)
        hit_type = data.pop("hitType", None) or data.pop("hit_type", None) or ""
        data.pop("hit_type", None)
        event = data.pop("event", None)

        if not hit_type:
            data["hit"] = None
        elif hit_type == HitType.EVENT.value:
            data["hit"] = {"hit_type": hit_type, "event": event}
        else:
            data["hit"] = {"hit_type": hit_type}
        return data

    @property
    def hit_type(self) -> str:
        return self.hit.hit_type if self.hit is not None else ""
