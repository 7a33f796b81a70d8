"""Tenant API router composition for list and detail endpoints."""

from __future__ import annotations

from typing import Any, Callable

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from basicwebapp.db import TenantRepositoryPort
from basicwebapp.domain import TenantRecord


def api_create_tenants_router(
    tenant_repository: TenantRepositoryPort,
    require_bearer: Callable[..., dict[str, Any]],
) -> APIRouter:
    """Create tenant router with list and detail endpoints.

    Args:
        tenant_repository: DB-layer tenant repository.
        require_bearer: Bearer authentication dependency.

    Returns:
        APIRouter: Router exposing tenant APIs.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if tenant_repository is None:
        raise ValueError("tenant_repository must not be None")
    if require_bearer is None:
        raise ValueError("require_bearer must not be None")

    router = APIRouter(prefix="/api/tenants", tags=["tenants"], dependencies=[Depends(require_bearer)])

    @router.get("")
    def api_tenant_list() -> JSONResponse:
        """Return all tenants.

        Returns:
            JSONResponse: `{"tenants": [...]}` payload.
        """

        tenants = tenant_repository.db_tenant_list()
        payload = {"tenants": [_api_serialize_tenant(tenant) for tenant in tenants]}
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/{alias}")
    def api_tenant_get(alias: str) -> JSONResponse:
        """Return one tenant by alias.

        Args:
            alias: Tenant alias.

        Returns:
            JSONResponse: `{"tenant": {...}}` payload, HTTP 404 when missing,
            HTTP 400 when alias is blank.
        """

        try:
            tenant = tenant_repository.db_tenant_get_by_alias(alias)
        except ValueError as error:
            payload = {"status": "error", "message": str(error)}
            return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)

        if tenant is None:
            payload = {"status": "error", "message": "tenant not found"}
            return JSONResponse(content=payload, status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(content={"tenant": _api_serialize_tenant(tenant)}, status_code=status.HTTP_200_OK)

    return router


def _api_serialize_tenant(tenant: TenantRecord) -> dict[str, object]:
    return {
        "id": tenant.tenant_id,
        "guid": tenant.tenant_guid,
        "alias": tenant.alias,
        "name": tenant.name,
        "created_at_utc": tenant.created_at_utc.isoformat() if tenant.created_at_utc is not None else None,
    }
