"""Typed domain models shared across runtime layers.

This module provides simple data contracts for cross-layer communication
between the database, API and web tiers.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class HealthStatus:
    """Connectivity probe contract used by database health services.

    Attributes:
        status: Overall status text for the probed dependency.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


@dataclass(frozen=True)
class TenantRecord:
    """Tenant contract shared by the repository, API payloads and web views.

    Attributes:
        tenant_id: Database identifier.
        tenant_guid: Stable public identifier.
        alias: Unique URL-safe tenant alias.
        name: Display name.
        created_at_utc: Optional creation timestamp.
    """

    tenant_id: int
    tenant_guid: str
    alias: str
    name: str
    created_at_utc: datetime | None = None
