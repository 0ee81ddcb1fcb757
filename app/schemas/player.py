from __future__ import annotations
from pydantic import BaseModel, ConfigDict


class Player(BaseModel):
    # frozen: equal iff all four fields match, and hashable
    model_config = ConfigDict(frozen=True)

    number: int
    name: str
    sport_id: int
    team_id: int
