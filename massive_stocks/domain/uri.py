from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote_plus

from massive_stocks.core.errors import InvalidQueryParameterError

QueryValue = str | int | bool | None


def encode_query_value(value: str | int | bool, *, name: str = "value") -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return quote_plus(value, safe="*")
    raise InvalidQueryParameterError(
        f"Unsupported query parameter type for {name!r}: {type(value).__name__}"
    )


def build_uri(path: str, params: Mapping[str, QueryValue] | None = None) -> str:
    """Append the non-None entries of ``params`` to ``path`` as a query string.

    Entries keep the mapping's iteration order. Names are written verbatim
    (``timestamp.gte`` stays dotted); only values are percent-encoded.
    """
    if not isinstance(path, str) or not path:
        raise InvalidQueryParameterError("URI path must be a non-empty string")
    if params is None:
        params = {}
    if not isinstance(params, Mapping):
        raise InvalidQueryParameterError(
            f"Query parameters must be a mapping, got {type(params).__name__}"
        )

    pairs: list[str] = []
    for name, value in params.items():
        if not isinstance(name, str) or not name:
            raise InvalidQueryParameterError(f"Query parameter name must be a non-empty string: {name!r}")
        if value is None:
            continue
        pairs.append(f"{name}={encode_query_value(value, name=name)}")
    if not pairs:
        return path
    return f"{path}?{'&'.join(pairs)}"
