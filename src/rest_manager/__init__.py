"""Public surface for the rest_manager package."""

from .entity import RestEntity
from .errors import RequestCreationFailed, RestManagerError
from .manager import ManagerOptions, RestManager
from .request import RequestDescriptor
from .transport import HttpTransport, Transport, TransportResult
from .types import HttpMethod, Response, Results
from .version import __version__

__all__ = [
    "__version__",
    "HttpMethod",
    "HttpTransport",
    "ManagerOptions",
    "RequestCreationFailed",
    "RequestDescriptor",
    "Response",
    "RestEntity",
    "RestManager",
    "RestManagerError",
    "Results",
    "Transport",
    "TransportResult",
]
