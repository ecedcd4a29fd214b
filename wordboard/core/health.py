"""
Health indicators and aggregation.

Each indicator is an async callable returning a :class:`Health`. The
:class:`HealthRegistry` runs indicators concurrently and folds their statuses
into one overall status using a fixed severity order
(DOWN > OUT_OF_SERVICE > UP > UNKNOWN).
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional

import psutil

from wordboard.core.logging_config import get_logger

logger = get_logger(__name__)


class Status(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    OUT_OF_SERVICE = "OUT_OF_SERVICE"
    UNKNOWN = "UNKNOWN"


STATUS_ORDER = [Status.DOWN, Status.OUT_OF_SERVICE, Status.UP, Status.UNKNOWN]

UNAVAILABLE_STATUSES = {Status.DOWN, Status.OUT_OF_SERVICE}


@dataclass
class Health:
    status: Status
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def up(cls, **details: Any) -> "Health":
        return cls(Status.UP, details)

    @classmethod
    def down(cls, **details: Any) -> "Health":
        return cls(Status.DOWN, details)

    def to_dict(self, show_details: bool = True) -> Dict[str, Any]:
        body: Dict[str, Any] = {"status": self.status.value}
        if show_details and self.details:
            body["details"] = self.details
        return body


HealthIndicator = Callable[[], Awaitable[Health]]


def aggregate_status(statuses: Iterable[Status]) -> Status:
    """Fold component statuses into the most severe one."""
    present = set(statuses)
    for status in STATUS_ORDER:
        if status in present:
            return status
    return Status.UNKNOWN


def http_status_for(status: Status) -> int:
    return 503 if status in UNAVAILABLE_STATUSES else 200


async def ping_health() -> Health:
    return Health.up()


def disk_space_indicator(path: str, threshold: int) -> HealthIndicator:
    """Build an indicator reporting DOWN when free space drops below ``threshold`` bytes."""

    async def check() -> Health:
        target = Path(path).resolve()
        if not target.exists():
            return Health.down(path=str(target), exists=False, threshold=threshold)
        usage = psutil.disk_usage(str(target))
        details = {
            "total": usage.total,
            "free": usage.free,
            "threshold": threshold,
            "path": str(target),
            "exists": True,
        }
        if usage.free < threshold:
            logger.warning(f"Free disk space below threshold. Free: {usage.free} bytes (threshold: {threshold} bytes)")
            return Health.down(**details)
        return Health.up(**details)

    return check


def mongo_indicator(database_provider: Callable[[], Any]) -> HealthIndicator:
    """Build an indicator that runs ``hello`` against the configured database."""

    async def check() -> Health:
        database = database_provider()
        result = await database.command("hello")
        return Health.up(maxWireVersion=result.get("maxWireVersion"))

    return check


class HealthRegistry:
    """Named health indicators plus named groups of them."""

    def __init__(self) -> None:
        self._indicators: Dict[str, HealthIndicator] = {}
        self._groups: Dict[str, List[str]] = {}

    def register(self, name: str, indicator: HealthIndicator) -> None:
        self._indicators[name] = indicator

    def unregister(self, name: str) -> None:
        self._indicators.pop(name, None)

    def add_group(self, name: str, members: Iterable[str]) -> None:
        self._groups[name] = list(members)

    @property
    def indicator_names(self) -> List[str]:
        return sorted(self._indicators)

    @property
    def group_names(self) -> List[str]:
        return sorted(self._groups)

    async def _run(self, name: str, indicator: HealthIndicator) -> Health:
        try:
            return await indicator()
        except Exception as e:
            logger.warning(f"Health indicator '{name}' failed: {e}")
            return Health.down(error=f"{type(e).__name__}: {e}")

    async def check(self, show_details: bool = True, group: Optional[str] = None) -> Dict[str, Any]:
        """Run indicators (all of them, or the members of ``group``) and aggregate.

        Raises:
            KeyError: when ``group`` is not registered.
        """
        if group is None:
            names = self.indicator_names
        else:
            names = [name for name in self._groups[group] if name in self._indicators]

        results = await asyncio.gather(*(self._run(name, self._indicators[name]) for name in names))
        components = dict(zip(names, results))
        status = aggregate_status(health.status for health in components.values())

        body: Dict[str, Any] = {"status": status.value}
        if components:
            body["components"] = {name: health.to_dict(show_details) for name, health in components.items()}
        return body
