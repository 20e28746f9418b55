__version__ = "0.1.0"

from massive_stocks.application import stocks
from massive_stocks.application.container import get_client, reset_client, set_client
from massive_stocks.core.errors import InvalidQueryParameterError, RequestError, StocksError
from massive_stocks.domain.uri import build_uri

__all__ = [
    "InvalidQueryParameterError",
    "RequestError",
    "StocksError",
    "__version__",
    "build_uri",
    "get_client",
    "reset_client",
    "set_client",
    "stocks",
]
