from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from massive_stocks.core.errors import RequestError

logger = logging.getLogger(__name__)


class MassiveRestClient:
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.massive.com",
        timeout: float = 20.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("Massive API key is not configured")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=timeout,
            transport=transport,
        )

    def get_json(self, uri: str) -> Any:
        logger.debug("GET %s", uri)
        try:
            resp = self._http.get(uri)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning("Massive REST request failed with status %s", status_code, extra={"uri": uri})
            raise RequestError(
                f"GET {uri} failed with status {status_code}",
                uri=uri,
                status_code=status_code,
                body=exc.response.text,
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Massive REST request could not be completed", extra={"uri": uri})
            raise RequestError(f"GET {uri} failed: {exc}", uri=uri) from exc

        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("Massive REST response was not valid JSON", extra={"uri": uri})
            raise RequestError(
                f"GET {uri} returned a non-JSON body",
                uri=uri,
                status_code=resp.status_code,
                body=resp.text,
            ) from exc

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> MassiveRestClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
