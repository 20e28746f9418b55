from __future__ import annotations

from collections.abc import Generator

import pytest

from massive_stocks.application.container import reset_client


@pytest.fixture(autouse=True)
def _isolated_client_slot() -> Generator[None, None, None]:
    reset_client()
    yield
    reset_client()
