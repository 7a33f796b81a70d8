"""View models rendered by the administration pages."""

from dataclasses import dataclass

from basicwebapp.domain import TenantRecord


@dataclass(frozen=True)
class TenantViewModel:
    """Tenant fields shown to users.

    Attributes:
        alias: URL-safe tenant alias.
        name: Display name.
        guid: Public tenant identifier.
        created_on: Creation date as `YYYY-MM-DD`, empty when unknown.
    """

    alias: str
    name: str
    guid: str
    created_on: str


def web_map_tenant_view_model(tenant: TenantRecord) -> TenantViewModel:
    """Map an API tenant record to the fields shown on the administration pages.

    Args:
        tenant: Tenant record returned by the API tier.

    Returns:
        TenantViewModel: Display fields, with the creation date trimmed to `YYYY-MM-DD`.
    """

    return TenantViewModel(
        alias=tenant.alias,
        name=tenant.name,
        guid=tenant.tenant_guid,
        created_on=tenant.created_at_utc.date().isoformat() if tenant.created_at_utc is not None else "",
    )
