# app/services/seed_data.py
from __future__ import annotations
from typing import List, Tuple

NFL_ID = 1
NBA_ID = 2
TIGERS_ID = 101
LAKERS_ID = 201

# (sport_id, team_id, position, number, name, rank)
SEED_ROSTER: List[Tuple[int, int, str, int, str, int]] = [
    (NFL_ID, TIGERS_ID, "QB", 12, "Tom Brady", 0),
    (NFL_ID, TIGERS_ID, "QB", 11, "Blaine Gabbert", 1),
    (NFL_ID, TIGERS_ID, "QB", 2, "Kyle Trask", 2),
    (NFL_ID, TIGERS_ID, "WR", 13, "Mike Evans", 0),
    (NFL_ID, TIGERS_ID, "WR", 14, "Chris Godwin", 1),
    (NFL_ID, TIGERS_ID, "RB", 7, "Leonard Fournette", 0),
    (NFL_ID, TIGERS_ID, "RB", 27, "Ronald Jones II", 1),
    (NBA_ID, LAKERS_ID, "G", 23, "LeBron James", 0),
    (NBA_ID, LAKERS_ID, "G", 3, "Anthony Davis", 1),
]
