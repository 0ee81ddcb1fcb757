from __future__ import annotations
from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr


class AddPlayerRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    position: StrictStr
    number: StrictInt
    name: StrictStr
    # older clients send positionDepth
    rank: Optional[StrictInt] = Field(
        default=None,
        validation_alias=AliasChoices("rank", "positionDepth", "position_depth"),
    )


class RemovePlayerRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    position: StrictStr
    number: StrictInt
    name: StrictStr


class SeedResponse(BaseModel):
    message: str
