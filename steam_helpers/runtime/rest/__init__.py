"""REST runtime abstractions."""

from .http_client import HTTPClient
from .request import RequestSpec, encode_query
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RequestSpec",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "encode_query",
]
