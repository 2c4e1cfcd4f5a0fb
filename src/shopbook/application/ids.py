"""Identifier helpers shared by the catalog and roster handlers."""

from __future__ import annotations

from typing import Iterable


def next_numeric_id(existing: Iterable[str]) -> str:
    """One past the largest numeric id in use, or "1" for an empty set.

    Non-numeric ids (hand-edited data) are skipped.
    """
    numbers = [int(i) for i in existing if i.isdigit()]
    return str(max(numbers) + 1) if numbers else "1"
