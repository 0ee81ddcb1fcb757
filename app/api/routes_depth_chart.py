# app/api/routes_depth_chart.py
import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from app.core.config import settings
from app.deps import get_store
from app.schemas.depth_chart import AddPlayerRequest, RemovePlayerRequest, SeedResponse
from app.schemas.player import Player
from app.services.cache import cache_route, invalidate, key_tuple
from app.services.depth_chart import DepthChartStore, NotFound

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/depth-chart", tags=["depth-chart"])

CHART_NS = "depth_chart_full"
BACKUPS_NS = "depth_chart_backups"


def _cache_ttl() -> int:
    return settings.CACHE_TTL_SECONDS


def _invalidate_team(sport_id: int, team_id: int) -> None:
    # cache keys are ("kind", sport_id, team_id, ...)
    for ns in (CHART_NS, BACKUPS_NS):
        invalidate(ns, lambda k: k[1] == sport_id and k[2] == team_id)


# ---------------- SEED ----------------
@router.post("/seed", response_model=SeedResponse)
def seed_depth_chart(store: DepthChartStore = Depends(get_store)):
    try:
        store.seed_data()
    except ValueError as ve:
        # already seeded, or clashes with players added since
        raise HTTPException(status_code=400, detail=str(ve))
    except Exception:
        logger.exception("Unexpected failure seeding depth charts")
        raise HTTPException(status_code=500, detail="Failed to seed depth chart")
    finally:
        # seeding stops at the first clash, so earlier inserts may have landed
        for ns in (CHART_NS, BACKUPS_NS):
            invalidate(ns)
    return SeedResponse(message="Depth chart seeded successfully.")


# ---------------- ADD ----------------
@router.post("/{sport_id}/{team_id}/players")
def add_player(
    sport_id: int,
    team_id: int,
    body: AddPlayerRequest,
    store: DepthChartStore = Depends(get_store),
):
    """
    Adds a player to a position. Without `rank` the player goes to the bottom of the chart;
    with `rank` the player is inserted there and everyone at or below it moves down one.
    """
    player = Player(number=body.number, name=body.name, sport_id=sport_id, team_id=team_id)
    try:
        store.add_player(sport_id, team_id, body.position, player, body.rank)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except Exception:
        logger.exception("Unexpected failure adding #%s to %s/%s", body.number, sport_id, team_id)
        raise HTTPException(status_code=500, detail="Failed to add player")
    _invalidate_team(sport_id, team_id)
    return Response(status_code=200)


# ---------------- REMOVE ----------------
@router.delete("/{sport_id}/{team_id}/players", response_model=Player)
def remove_player(
    sport_id: int,
    team_id: int,
    body: RemovePlayerRequest,
    store: DepthChartStore = Depends(get_store),
):
    player = Player(number=body.number, name=body.name, sport_id=sport_id, team_id=team_id)
    try:
        result = store.remove_player(sport_id, team_id, body.position, player)
    except Exception:
        logger.exception("Unexpected failure removing #%s from %s/%s", body.number, sport_id, team_id)
        raise HTTPException(status_code=500, detail="Failed to remove player")
    if isinstance(result, NotFound):
        raise HTTPException(
            status_code=404,
            detail=f"Player #{body.number} {body.name} is not on the {body.position} depth chart.",
        )
    _invalidate_team(sport_id, team_id)
    return result.player


# ---------------- BACKUPS (cache 5m) ----------------
@router.get("/{sport_id}/{team_id}/backups", response_model=List[Player])
@cache_route(
    namespace=BACKUPS_NS,
    ttl_seconds=_cache_ttl,
    key_builder=lambda *args, **kwargs: key_tuple(
        "backups", kwargs["sport_id"], kwargs["team_id"], kwargs["position"], kwargs["player_number"]
    ),
)
def get_backups(
    sport_id: int,
    team_id: int,
    position: str = Query(..., description="Position name, e.g. QB"),
    player_number: int = Query(..., description="Jersey number of the reference player"),
    store: DepthChartStore = Depends(get_store),
    response: Response = None,
):
    """
    Returns everyone ranked below the given player at the position, in depth order.
    An unlisted player or the last-ranked player has no backups (empty list).
    """
    try:
        player = store.find_player(sport_id, team_id, position, player_number)
        if player is None:
            return []
        return store.get_backups(sport_id, team_id, position, player)
    except Exception:
        logger.exception("Unexpected failure reading backups for %s/%s/%s", sport_id, team_id, position)
        raise HTTPException(status_code=500, detail="Failed to fetch backups")


# ---------------- FULL CHART (cache 5m) ----------------
@router.get("/{sport_id}/{team_id}", response_model=Dict[str, List[Player]])
@cache_route(
    namespace=CHART_NS,
    ttl_seconds=_cache_ttl,
    key_builder=lambda *args, **kwargs: key_tuple("chart", kwargs["sport_id"], kwargs["team_id"]),
)
def get_full_depth_chart(
    sport_id: int,
    team_id: int,
    store: DepthChartStore = Depends(get_store),
    response: Response = None,
):
    """
    Full depth chart for one team: position -> players in depth order.
    """
    try:
        return store.get_full_depth_chart(sport_id, team_id)
    except Exception:
        logger.exception("Unexpected failure reading depth chart for %s/%s", sport_id, team_id)
        raise HTTPException(status_code=500, detail="Failed to fetch depth chart")
