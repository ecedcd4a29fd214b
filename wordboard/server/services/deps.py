"""
API Dependencies.

Provides repositories, the meter registry and the health registry to the
routers. Everything that touches MongoDB is derived from ``get_database`` so
tests can swap the database with a single dependency override.
"""

from typing import Annotated, Any

from fastapi import Depends

from wordboard.core.database import get_database
from wordboard.core.database.repositories import (
    BoardRepoBundle,
    ScrabbleBoardRepository,
    WordPlayBoardRepository,
    build_board_repos,
)
from wordboard.core.health import HealthRegistry, disk_space_indicator, mongo_indicator, ping_health
from wordboard.core.metrics import MeterRegistry, meter_registry
from wordboard.server.core.config import settings


def get_meter_registry() -> MeterRegistry:
    """Return the process wide meter registry."""
    return meter_registry


def get_board_repos(
    database: Any = Depends(get_database),
    registry: MeterRegistry = Depends(get_meter_registry),
) -> BoardRepoBundle:
    """Build the board repositories bound to the request's database."""
    return build_board_repos(database, registry)


def get_scrabble_board_repository(repos: BoardRepoBundle = Depends(get_board_repos)) -> ScrabbleBoardRepository:
    return repos.scrabble_boards


def get_word_play_board_repository(repos: BoardRepoBundle = Depends(get_board_repos)) -> WordPlayBoardRepository:
    return repos.word_play_boards



def build_health_registry(database: Any) -> HealthRegistry:
    """Build the health registry with the standard indicators and groups.

    Groups:
        liveness: ping
        readiness: ping, mongo
    """
    management = settings.management
    registry = HealthRegistry()
    registry.register("ping", ping_health)
    registry.register(
        "diskSpace",
        disk_space_indicator(management.disk_space_path, management.disk_space_threshold),
    )
    registry.register("mongo", mongo_indicator(lambda: database))
    registry.add_group("liveness", ["ping"])
    registry.add_group("readiness", ["ping", "mongo"])
    return registry


def get_health_registry(database: Any = Depends(get_database)) -> HealthRegistry:
    return build_health_registry(database)


MeterRegistryDep = Annotated[MeterRegistry, Depends(get_meter_registry)]
HealthRegistryDep = Annotated[HealthRegistry, Depends(get_health_registry)]
