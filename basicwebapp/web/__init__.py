"""Web tier package: server-rendered pages backed by the internal API client."""

from .api_client import HttpxInternalApiClient, InternalApiClientPort
from .application import create_web_application
from .controllers import AboutController, AdministrationController, HomeController, StatusController, ViewResult
from .exception_processing import exception_classify, exception_process

__all__ = [
    "AboutController",
    "AdministrationController",
    "HomeController",
    "HttpxInternalApiClient",
    "InternalApiClientPort",
    "StatusController",
    "ViewResult",
    "create_web_application",
    "exception_classify",
    "exception_process",
]
