from __future__ import annotations

from typing import Any, Protocol


class JsonHttpClient(Protocol):
    def get_json(self, uri: str) -> Any: ...
