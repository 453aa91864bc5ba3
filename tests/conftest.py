from __future__ import annotations

import pytest

from esb_fireplace.core import logger


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch):
    monkeypatch.setattr(logger, "_settings", None)

