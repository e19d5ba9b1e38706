from __future__ import annotations

import pytest


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def debug_decimals(monkeypatch):
    """Turn on the core debug prints (decimals, rounding, fmt) for one test."""
    from bigdecimal.core import decimals, fmt, rounding

    monkeypatch.setattr(decimals, "DEBUG_DECIMALS", True)
    monkeypatch.setattr(rounding, "DEBUG_ROUNDING", True)
    monkeypatch.setattr(fmt, "DEBUG_FMT", True)
