from __future__ import annotations

from app.schemas.player import Player

NFL, TIGERS = 1, 101


def nfl_player(number: int, name: str) -> Player:
    return Player(number=number, name=name, sport_id=NFL, team_id=TIGERS)


def add_body(position: str, number: int, name: str, rank: int | None = None) -> dict:
    body = {"position": position, "number": number, "name": name}
    if rank is not None:
        body["rank"] = rank
    return body
