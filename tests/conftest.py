from __future__ import annotations

from typing import Any

import pytest

from regexcollection.config.schema import CONFIG_ENV, OUTPUT_FORMAT_ENV


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: Any) -> None:
    """Keep a developer's own config variables out of the tests."""
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.delenv(OUTPUT_FORMAT_ENV, raising=False)
