"""Tagged health-check registry and tag-predicate aggregation.

Checks are registered once at startup and evaluated on demand. Every health
endpoint is a predicate over the tags of the registered checks; the endpoint
status is the worst status among the checks that match.
"""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Callable, Final, Iterable

DB_STATUS_CHECK_TAG: Final[str] = "db-status-check"
MEMORY_STATUS_CHECK_TAG: Final[str] = "memory-status-check"


class HealthCheckStatus(enum.IntEnum):
    """Check outcome ordered from best to worst."""

    HEALTHY = 0
    DEGRADED = 1
    UNHEALTHY = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class HealthCheckResult:
    """Outcome of one health probe.

    Attributes:
        status: Probe status.
        description: Optional diagnostic text.
    """

    status: HealthCheckStatus
    description: str = ""

    @classmethod
    def healthy(cls, description: str = "") -> HealthCheckResult:
        return cls(status=HealthCheckStatus.HEALTHY, description=description)

    @classmethod
    def degraded(cls, description: str = "") -> HealthCheckResult:
        return cls(status=HealthCheckStatus.DEGRADED, description=description)

    @classmethod
    def unhealthy(cls, description: str = "") -> HealthCheckResult:
        return cls(status=HealthCheckStatus.UNHEALTHY, description=description)


@dataclass(frozen=True)
class HealthCheckRegistration:
    """Named probe with the tags used by endpoint predicates.

    Attributes:
        name: Unique check name reported in health payloads.
        check: Zero-argument probe returning a `HealthCheckResult`.
        tags: Tags evaluated by endpoint predicates.
    """

    name: str
    check: Callable[[], HealthCheckResult]
    tags: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class HealthReportEntry:
    """Evaluated result of one registered check."""

    name: str
    result: HealthCheckResult
    duration_ms: float
    tags: frozenset[str]


@dataclass(frozen=True)
class HealthReport:
    """Aggregated result for one predicate evaluation.

    Attributes:
        status: Worst status among evaluated entries, healthy when empty.
        entries: Evaluated entries in registration order.
        total_duration_ms: Wall-clock time spent evaluating all entries.
    """

    status: HealthCheckStatus
    entries: tuple[HealthReportEntry, ...]
    total_duration_ms: float

    def report_to_payload(self) -> dict[str, object]:
        """Render the report as a JSON-serializable payload.

        Returns:
            dict[str, object]: Health payload with per-check entries.
        """

        return {
            "status": self.status.label,
            "total_duration_ms": round(self.total_duration_ms, 3),
            "entries": {
                entry.name: {
                    "status": entry.result.status.label,
                    "description": entry.result.description,
                    "duration_ms": round(entry.duration_ms, 3),
                    "tags": sorted(entry.tags),
                }
                for entry in self.entries
            },
        }


HealthCheckPredicate = Callable[[HealthCheckRegistration], bool]


def health_predicate_all(_registration: HealthCheckRegistration) -> bool:
    """Match every registered check."""

    return True


def health_predicate_none(_registration: HealthCheckRegistration) -> bool:
    """Match no check."""

    return False


def health_predicate_has_tags(*tags: str) -> HealthCheckPredicate:
    """Build a predicate matching checks that carry every given tag.

    Args:
        tags: Required tags.

    Returns:
        HealthCheckPredicate: Predicate over registrations.

    Raises:
        ValueError: Raised when no tags are given.
    """

    if not tags:
        raise ValueError("at least one tag is required")
    required_tags = frozenset(tags)

    def _predicate(registration: HealthCheckRegistration) -> bool:
        return required_tags.issubset(registration.tags)

    return _predicate


class HealthCheckService:
    """Registry of health checks evaluated by endpoint predicates."""

    def __init__(self, registrations: Iterable[HealthCheckRegistration] = ()):
        self._registrations: list[HealthCheckRegistration] = []
        for registration in registrations:
            self.health_register(registration)

    def health_register(self, registration: HealthCheckRegistration) -> None:
        """Register one health check.

        Args:
            registration: Check registration.

        Raises:
            ValueError: Raised when a check with the same name already exists.
        """

        if any(existing.name == registration.name for existing in self._registrations):
            raise ValueError(f"health check already registered: {registration.name}")
        self._registrations.append(registration)

    def health_add_check(
        self,
        name: str,
        check: Callable[[], HealthCheckResult],
        tags: Iterable[str] = (),
    ) -> HealthCheckService:
        """Register a check from its parts and return the service for chaining."""

        self.health_register(HealthCheckRegistration(name=name, check=check, tags=frozenset(tags)))
        return self

    def health_registrations(self) -> tuple[HealthCheckRegistration, ...]:
        """Return registrations in registration order."""

        return tuple(self._registrations)

    def health_run(self, predicate: HealthCheckPredicate = health_predicate_all) -> HealthReport:
        """Evaluate every registered check matching the predicate.

        A check that raises is reported as unhealthy with the error text as
        its description.

        Args:
            predicate: Registration filter.

        Returns:
            HealthReport: Aggregated report; healthy when no check matches.
        """

        started_at = time.perf_counter()
        entries: list[HealthReportEntry] = []
        for registration in self._registrations:
            if not predicate(registration):
                continue
            check_started_at = time.perf_counter()
            try:
                result = registration.check()
            except Exception as error:  # pylint: disable=broad-exception-caught
                result = HealthCheckResult.unhealthy(description=str(error) or type(error).__name__)
            entries.append(
                HealthReportEntry(
                    name=registration.name,
                    result=result,
                    duration_ms=(time.perf_counter() - check_started_at) * 1000,
                    tags=registration.tags,
                )
            )

        aggregate_status = max(
            (entry.result.status for entry in entries),
            default=HealthCheckStatus.HEALTHY,
        )
        return HealthReport(
            status=aggregate_status,
            entries=tuple(entries),
            total_duration_ms=(time.perf_counter() - started_at) * 1000,
        )
