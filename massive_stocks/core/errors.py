from __future__ import annotations


class StocksError(Exception):
    """Base error for the stocks REST bindings."""


class InvalidQueryParameterError(StocksError, TypeError):
    """Raised when a query parameter value cannot be put on the wire."""


class RequestError(StocksError):
    """Raised when the REST API answers with a non-2xx status or cannot be reached."""

    def __init__(
        self,
        message: str,
        *,
        uri: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.uri = uri
        self.status_code = status_code
        self.body = body
