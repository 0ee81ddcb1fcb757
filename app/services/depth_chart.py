# app/services/depth_chart.py
from __future__ import annotations

import logging
import threading
from typing import Dict, List, NamedTuple, Optional, Tuple, Union

from app.core.errors import Conflict, InvalidArgument, OutOfRange
from app.schemas.player import Player
from app.services.seed_data import SEED_ROSTER

logger = logging.getLogger(__name__)

# (sport_id, team_id, position)
ChartKey = Tuple[int, int, str]


class Removed(NamedTuple):
    player: Player


class NotFound(NamedTuple):
    key: ChartKey
    player: Player


RemoveResult = Union[Removed, NotFound]


def _validate_player(player: Player) -> None:
    if player.number <= 0:
        raise InvalidArgument(f"Player number must be positive, got {player.number}.")
    if not player.name or not player.name.strip():
        raise InvalidArgument("Player name cannot be empty.")


class DepthChartStore:
    """
    In-memory depth charts keyed by (sport_id, team_id, position).

    Each key maps to an ordered list: index 0 is the starter, every later index a backup.
    One lock guards the whole mapping and is held for each call's full
    check-then-mutate sequence, so concurrent writers to the same key cannot interleave.
    Reads hand back copies taken under the same lock.
    """

    def __init__(self) -> None:
        self._charts: Dict[ChartKey, List[Player]] = {}
        self._lock = threading.Lock()

    def add_player(
        self,
        sport_id: int,
        team_id: int,
        position: str,
        player: Player,
        rank: Optional[int] = None,
    ) -> None:
        """
        Insert `player` at `rank` (shifting everyone at rank >= r down by one),
        or append when no rank is given. Nothing is mutated unless every check passes.
        """
        if not position or not position.strip():
            raise InvalidArgument("Position cannot be empty.")
        _validate_player(player)
        if rank is not None and rank < 0:
            raise InvalidArgument(f"Rank cannot be negative, got {rank}.")

        key = (sport_id, team_id, position)
        with self._lock:
            players = self._charts.get(key, [])
            if any(p.number == player.number for p in players):
                logger.warning("Rejected duplicate #%s at %s", player.number, key)
                raise Conflict(f"A player with number {player.number} already exists in the {position} position.")
            if rank is not None and rank > len(players):
                logger.warning("Rejected rank %s past end of %s (size %d)", rank, key, len(players))
                raise OutOfRange(
                    f"Rank {rank} exceeds roster size {len(players)} for the {position} position."
                )

            at = len(players) if rank is None else rank
            players.insert(at, player)
            # created lazily, only once the insert is known to succeed
            self._charts[key] = players

        logger.info("Added #%s %s to %s at rank %s", player.number, player.name, key, at)

    def remove_player(self, sport_id: int, team_id: int, position: str, player: Player) -> RemoveResult:
        key = (sport_id, team_id, position)
        with self._lock:
            players = self._charts.get(key)
            if players is None or player not in players:
                return NotFound(key=key, player=player)
            # the key stays even if the list is now empty
            players.remove(player)

        logger.info("Removed #%s %s from %s", player.number, player.name, key)
        return Removed(player=player)

    def get_backups(self, sport_id: int, team_id: int, position: str, player: Player) -> List[Player]:
        """Everyone ranked strictly below `player`. Empty when the player is last or not listed."""
        with self._lock:
            players = self._charts.get((sport_id, team_id, position), [])
            try:
                idx = players.index(player)
            except ValueError:
                return []
            return players[idx + 1:]

    def get_full_depth_chart(self, sport_id: int, team_id: int) -> Dict[str, List[Player]]:
        with self._lock:
            return {
                position: list(players)
                for (s, t, position), players in self._charts.items()
                if s == sport_id and t == team_id
            }

    def find_player(self, sport_id: int, team_id: int, position: str, number: int) -> Optional[Player]:
        with self._lock:
            for p in self._charts.get((sport_id, team_id, position), []):
                if p.number == number:
                    return p
        return None

    def seed_data(self) -> None:
        for sport_id, team_id, position, number, name, rank in SEED_ROSTER:
            player = Player(number=number, name=name, sport_id=sport_id, team_id=team_id)
            self.add_player(sport_id, team_id, position, player, rank)
        logger.info("Seeded depth charts with %d sample players", len(SEED_ROSTER))

    def reset(self) -> None:
        with self._lock:
            self._charts.clear()


# process-wide store used by the API
store = DepthChartStore()
