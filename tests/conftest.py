"""Pytest configuration for test isolation.

Settings and logging read ``SPENDING_ANALYTICS_*`` environment variables, and
the CLI loads a ``.env`` from the working directory. A developer's shell or a
stray ``.env`` would otherwise change labels, colors and log output between
runs, so each test gets a clean environment and an empty working directory.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Make the workspace ``packages/`` dir importable without installation.
_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
if str(_PKG_DIR) not in sys.path:
    sys.path.insert(0, str(_PKG_DIR))

from spending_analytics.logging_setup import reset_logging  # noqa: E402
from spending_analytics.models import Transaction  # noqa: E402

_ENV_VARS = (
    "SPENDING_ANALYTICS_THEME",
    "SPENDING_ANALYTICS_LANGUAGE",
    "SPENDING_ANALYTICS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    reset_logging()


def make_tx(
    amount: float,
    created_at: datetime,
    *,
    type_: str | None = "spent",
    category: str = "food",
    id_: str = "t",
) -> Transaction:
    return Transaction.model_validate(
        {"id": id_, "amount": amount, "type": type_, "category": category, "createdAt": created_at}
    )


@pytest.fixture
def tx():
    """Factory for :class:`Transaction` test records."""

    return make_tx
