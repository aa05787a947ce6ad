# Transport package (HTTP access to the API)

from src.gitlab.transport.http_transport import HttpTransport
from src.gitlab.transport.interfaces import TransportInterface

__all__ = [
    "HttpTransport",
    "TransportInterface",
]
