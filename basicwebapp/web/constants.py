"""View data keys, toastr request item keys and user-facing messages."""

from typing import Final

VIEW_DATA_PAGE_NAME_FROM_API: Final[str] = "PageNameFromApi"
VIEW_DATA_API_LIVE_STATUS: Final[str] = "ApiLiveStatus"
VIEW_DATA_TENANTS: Final[str] = "Tenants"
VIEW_DATA_TENANT: Final[str] = "Tenant"

TOASTR_MESSAGE_TYPE_KEY: Final[str] = "ToastrMessageType"
TOASTR_MESSAGE_KEY: Final[str] = "ToastrMessage"

TOASTR_MESSAGE_TYPE_SUCCESS: Final[str] = "success"
TOASTR_MESSAGE_TYPE_INFO: Final[str] = "info"
TOASTR_MESSAGE_TYPE_WARNING: Final[str] = "warning"
TOASTR_MESSAGE_TYPE_ERROR: Final[str] = "error"

API_CONNECTION_ERROR_MESSAGE: Final[str] = "Unable to reach the application service. Please try again later."
TENANT_NOT_FOUND_ERROR_MESSAGE: Final[str] = "The requested tenant was not found."
GENERAL_ERROR_MESSAGE: Final[str] = "Something went wrong. Please try again later."

API_LIVE_STATUS_UNKNOWN: Final[str] = "Unknown"
