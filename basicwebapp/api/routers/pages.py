"""Page metadata router consumed by the web tier."""

from typing import Any, Callable

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse


def api_create_pages_router(require_bearer: Callable[..., dict[str, Any]]) -> APIRouter:
    """Create router returning page names requested by the web tier.

    Args:
        require_bearer: Bearer authentication dependency.

    Returns:
        APIRouter: Router exposing `/api/pages/{page_name}`.

    Raises:
        ValueError: Raised when require_bearer is None.
    """

    if require_bearer is None:
        raise ValueError("require_bearer must not be None")

    router = APIRouter(prefix="/api/pages", tags=["pages"], dependencies=[Depends(require_bearer)])

    @router.get("/{page_name}")
    def api_page_get(page_name: str) -> JSONResponse:
        """Echo one page name in the page payload envelope.

        Args:
            page_name: Requested page name.

        Returns:
            JSONResponse: `{"page": {"name": ...}}` or HTTP 400 when blank.
        """

        normalized_page_name = page_name.strip()
        if not normalized_page_name:
            payload = {"status": "error", "message": "page_name must not be blank"}
            return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)
        return JSONResponse(content={"page": {"name": normalized_page_name}}, status_code=status.HTTP_200_OK)

    return router
