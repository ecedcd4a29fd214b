"""
In-process meter registry.

Meters are identified by a name plus a set of string tags. Reading a meter
through :meth:`MeterRegistry.describe` aggregates every meter sharing the name
whose tags match the requested filters, which is the shape served by the
``/actuator/metrics/{name}`` endpoint:

    {
        "name": "http.server.requests",
        "description": "...",
        "baseUnit": "seconds",
        "measurements": [{"statistic": "COUNT", "value": 3.0}, ...],
        "availableTags": [{"tag": "method", "values": ["GET"]}, ...]
    }
"""

from __future__ import annotations

import os
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Tuple

import psutil

from wordboard.core.logging_config import get_logger

logger = get_logger(__name__)

TagSet = FrozenSet[Tuple[str, str]]

HTTP_SERVER_REQUESTS = "http.server.requests"
BOARD_OPERATIONS = "boards.operations"


class Statistic(str, Enum):
    """Kind of value a measurement carries."""

    COUNT = "COUNT"
    TOTAL_TIME = "TOTAL_TIME"
    MAX = "MAX"
    VALUE = "VALUE"


class MeterKind(str, Enum):
    COUNTER = "counter"
    TIMER = "timer"
    GAUGE = "gauge"


def _tag_set(tags: Mapping[str, Any]) -> TagSet:
    return frozenset((str(k), str(v)) for k, v in tags.items())


@dataclass
class Counter:
    """Monotonic counter."""

    count: float = 0.0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def increment(self, amount: float = 1.0) -> None:
        if amount < 0:
            raise ValueError("Counters can only be incremented by a non-negative amount")
        with self._lock:
            self.count += amount

    def measure(self) -> Dict[Statistic, float]:
        return {Statistic.COUNT: self.count}


@dataclass
class Timer:
    """Records durations in seconds."""

    count: int = 0
    total_time: float = 0.0
    max: float = 0.0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def record(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("Durations must be non-negative")
        with self._lock:
            self.count += 1
            self.total_time += seconds
            if seconds > self.max:
                self.max = seconds

    def measure(self) -> Dict[Statistic, float]:
        return {
            Statistic.COUNT: float(self.count),
            Statistic.TOTAL_TIME: self.total_time,
            Statistic.MAX: self.max,
        }


@dataclass
class Gauge:
    """Samples a value from a callable each time it is read."""

    supplier: Callable[[], float]

    def measure(self) -> Dict[Statistic, float]:
        return {Statistic.VALUE: float(self.supplier())}


@dataclass
class _MeterFamily:
    kind: MeterKind
    description: Optional[str]
    base_unit: Optional[str]
    meters: Dict[TagSet, Any] = field(default_factory=dict)


class MeterRegistry:
    """Thread-safe registry of counters, timers and gauges."""

    def __init__(self) -> None:
        self._families: Dict[str, _MeterFamily] = {}
        self._lock = threading.Lock()

    def _meter(
        self,
        name: str,
        kind: MeterKind,
        factory: Callable[[], Any],
        tags: Mapping[str, Any],
        description: Optional[str],
        base_unit: Optional[str],
    ) -> Any:
        key = _tag_set(tags)
        with self._lock:
            family = self._families.get(name)
            if family is None:
                family = _MeterFamily(kind=kind, description=description, base_unit=base_unit)
                self._families[name] = family
            elif family.kind is not kind:
                raise ValueError(f"Meter '{name}' is already registered as a {family.kind.value}")
            meter = family.meters.get(key)
            if meter is None:
                meter = factory()
                family.meters[key] = meter
            return meter

    def counter(self, name: str, description: Optional[str] = None, base_unit: Optional[str] = None, **tags: Any) -> Counter:
        return self._meter(name, MeterKind.COUNTER, Counter, tags, description, base_unit)

    def timer(self, name: str, description: Optional[str] = None, **tags: Any) -> Timer:
        return self._meter(name, MeterKind.TIMER, Timer, tags, description, "seconds")

    def gauge(
        self,
        name: str,
        supplier: Callable[[], float],
        description: Optional[str] = None,
        base_unit: Optional[str] = None,
        **tags: Any,
    ) -> Gauge:
        return self._meter(name, MeterKind.GAUGE, lambda: Gauge(supplier), tags, description, base_unit)

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._families)

    def clear(self) -> None:
        with self._lock:
            self._families.clear()

    def describe(self, name: str, tag_filters: Optional[Mapping[str, str]] = None) -> Optional[Dict[str, Any]]:
        """Aggregate every meter named ``name`` matching ``tag_filters``.

        Counts and totals are summed, MAX takes the maximum, gauge VALUEs are
        summed. Returns None when the name is unknown or nothing matches.
        """
        filters = _tag_set(tag_filters or {})
        with self._lock:
            family = self._families.get(name)
            if family is None:
                return None
            matching = [(tags, meter) for tags, meter in family.meters.items() if filters <= tags]
            kind = family.kind
            description = family.description
            base_unit = family.base_unit

        if not matching:
            return None

        totals: Dict[Statistic, float] = {}
        available: Dict[str, set] = {}
        filtered_keys = {k for k, _ in filters}
        for tags, meter in matching:
            for statistic, value in meter.measure().items():
                if statistic is Statistic.MAX:
                    totals[statistic] = max(totals.get(statistic, 0.0), value)
                else:
                    totals[statistic] = totals.get(statistic, 0.0) + value
            for key, value in tags:
                if key not in filtered_keys:
                    available.setdefault(key, set()).add(value)

        logger.debug(f"Described meter {name} ({kind.value}) over {len(matching)} series")
        return {
            "name": name,
            "description": description,
            "baseUnit": base_unit,
            "measurements": [{"statistic": s.value, "value": v} for s, v in totals.items()],
            "availableTags": [{"tag": k, "values": sorted(v)} for k, v in sorted(available.items())],
        }


def outcome_for_status(status_code: int) -> str:
    """Classify an HTTP status code into a request outcome."""
    if 100 <= status_code < 200:
        return "INFORMATIONAL"
    if 200 <= status_code < 300:
        return "SUCCESS"
    if 300 <= status_code < 400:
        return "REDIRECTION"
    if 400 <= status_code < 500:
        return "CLIENT_ERROR"
    if 500 <= status_code < 600:
        return "SERVER_ERROR"
    return "UNKNOWN"


def register_process_metrics(registry: MeterRegistry, process: Optional[psutil.Process] = None) -> None:
    """Register the process and system gauges backed by psutil."""
    process = process or psutil.Process(os.getpid())
    started_at = process.create_time()

    registry.gauge(
        "process.uptime",
        lambda: time.time() - started_at,
        description="The uptime of the Python process",
        base_unit="seconds",
    )
    registry.gauge(
        "process.cpu.usage",
        lambda: process.cpu_percent(interval=None) / 100.0,
        description="The recent cpu usage for the Python process",
    )
    registry.gauge(
        "process.memory.rss",
        lambda: process.memory_info().rss,
        description="Resident set size of the Python process",
        base_unit="bytes",
    )
    registry.gauge(
        "process.threads",
        lambda: process.num_threads(),
        description="Number of threads of the Python process",
        base_unit="threads",
    )
    registry.gauge(
        "system.cpu.count",
        lambda: psutil.cpu_count() or 0,
        description="The number of processors available to the Python process",
    )
    registry.gauge(
        "system.cpu.usage",
        lambda: psutil.cpu_percent(interval=None) / 100.0,
        description="The recent cpu usage of the system",
    )


def record_request(registry: MeterRegistry, method: str, uri: str, status_code: int, seconds: float) -> None:
    registry.timer(
        HTTP_SERVER_REQUESTS,
        description="Duration of HTTP server request handling",
        method=method,
        uri=uri,
        status=status_code,
        outcome=outcome_for_status(status_code),
    ).record(seconds)


def record_board_operation(registry: MeterRegistry, collection: str, operation: str) -> None:
    registry.counter(
        BOARD_OPERATIONS,
        description="Repository operations against the board collections",
        base_unit="operations",
        collection=collection,
        operation=operation,
    ).increment()


meter_registry = MeterRegistry()
register_process_metrics(meter_registry)
