"""Classification of web-tier failures into toastr notifications.

Controllers catch project exceptions raised while calling the API tier and
pass them here; the request still renders normally with an error toast.
"""

from __future__ import annotations

import logging
from typing import MutableMapping

from basicwebapp.domain import InternalApiClientError, TenantNotFoundError

from .constants import (
    API_CONNECTION_ERROR_MESSAGE,
    GENERAL_ERROR_MESSAGE,
    TENANT_NOT_FOUND_ERROR_MESSAGE,
    TOASTR_MESSAGE_KEY,
    TOASTR_MESSAGE_TYPE_ERROR,
    TOASTR_MESSAGE_TYPE_KEY,
)


def exception_classify(exception: BaseException) -> tuple[str, str]:
    """Map an exception to its toastr message type and user-facing text.

    Args:
        exception: Caught exception.

    Returns:
        tuple[str, str]: Message type and message text.
    """

    if isinstance(exception, InternalApiClientError):
        return TOASTR_MESSAGE_TYPE_ERROR, API_CONNECTION_ERROR_MESSAGE
    if isinstance(exception, TenantNotFoundError):
        return TOASTR_MESSAGE_TYPE_ERROR, TENANT_NOT_FOUND_ERROR_MESSAGE
    return TOASTR_MESSAGE_TYPE_ERROR, GENERAL_ERROR_MESSAGE


def exception_process(
    logger: logging.Logger,
    request_items: MutableMapping[str, object],
    exception: BaseException,
) -> None:
    """Log an exception with its stack trace and store the toast for the view.

    Args:
        logger: Logger of the calling controller.
        request_items: Request-scoped item bag rendered by the layout.
        exception: Caught exception.

    Returns:
        None: Writes the toast into `request_items` as side effect.
    """

    logger.error("%s", exception, exc_info=exception)

    message_type, message_text = exception_classify(exception)
    request_items[TOASTR_MESSAGE_TYPE_KEY] = message_type
    request_items[TOASTR_MESSAGE_KEY] = message_text
