"""Load transaction exports from disk into validated :class:`Transaction` models.

Supported inputs
----------------
- ``.json``: an array of objects shaped like store documents
  (``id, amount, type, category, createdAt, note``; extra keys are kept).
- ``.csv``: a header row with the same column names. ``type`` may be blank
  for legacy rows, in which case the amount's sign decides the direction.

CSV amounts accept a leading ``$``, thousands separators, and surrounding
parentheses as a negative marker (``"($1,234.50)"``).
"""

from __future__ import annotations

import csv
import json
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from os import PathLike
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .logging_setup import get_logger
from .models import Transaction

_logger = get_logger("spending_analytics.loaders")

_REQUIRED_CSV_COLUMNS: frozenset[str] = frozenset({"id", "amount", "createdAt"})


def parse_amount(raw: str | None) -> float:
    """Parse a human-formatted amount into a signed float."""

    if raw is None:
        raise ValueError("amount is required")
    s = raw.strip()
    if not s:
        raise ValueError("amount is empty")

    negative = False
    # Strip sign, currency symbol and parentheses in any order until stable.
    while True:
        changed = False
        if s.startswith("+"):
            s = s[1:].lstrip()
            changed = True
        elif s.startswith("-"):
            negative = True
            s = s[1:].lstrip()
            changed = True
        if s.startswith("$"):
            s = s[1:].lstrip()
            changed = True
        if s.startswith("(") and s.endswith(")") and len(s) >= 2:
            negative = True
            s = s[1:-1].strip()
            changed = True
        if not changed:
            break

    s = s.replace(",", "").strip()
    try:
        d = Decimal(s)
    except InvalidOperation as exc:
        raise ValueError(f"invalid amount: {raw!r}") from exc
    return float(-abs(d) if negative else d)


def _csv_row_to_record(row: Mapping[str, str | None]) -> dict[str, Any]:
    record: dict[str, Any] = {k: v for k, v in row.items() if k is not None and v not in (None, "")}
    record["amount"] = parse_amount(row.get("amount"))
    return record


def _validate(records: list[Mapping[str, Any]], source: Path) -> list[Transaction]:
    out: list[Transaction] = []
    for pos, record in enumerate(records):
        try:
            out.append(Transaction.model_validate(record))
        except ValidationError as exc:
            raise ValueError(f"{source}: invalid transaction at position {pos}: {exc}") from exc
    return out


def load_transactions(path: str | PathLike[str]) -> list[Transaction]:
    """Read ``path`` (``.json`` or ``.csv``) and return validated transactions."""

    p = Path(path)
    suffix = p.suffix.lower()

    if suffix == ".json":
        with p.open(encoding="utf-8") as f:
            try:
                payload = json.load(f)
            except json.JSONDecodeError as exc:
                raise ValueError(f"{p}: invalid JSON: {exc}") from exc
        if not isinstance(payload, list):
            raise ValueError(f"{p}: expected a JSON array of transactions")
        records = payload
    elif suffix == ".csv":
        with p.open(encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            headers = set(reader.fieldnames or [])
            if not headers:
                raise ValueError(f"{p}: CSV appears to have no header row")
            missing = sorted(_REQUIRED_CSV_COLUMNS - headers)
            if missing:
                raise ValueError(f"{p}: CSV is missing columns: {', '.join(missing)}")
            records = [_csv_row_to_record(row) for row in reader]
    else:
        raise ValueError(f"Unsupported transaction file type: {p.suffix or '(none)'}")

    transactions = _validate(records, p)
    _logger.debug("loaded %d transactions from %s", len(transactions), p)
    return transactions


__all__ = ["parse_amount", "load_transactions"]
