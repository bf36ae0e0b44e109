"""Arrangement key resolution for plan items.

Hey future me - Planning Center returns plan items and their arrangements in ONE
response when we ask for include=arrangement: items in "data", arrangements in
"included". This module joins the two so every song item can show its key.

Rules:
1. Only included records with type "Arrangement" count (other types are skipped).
2. An item gets key_name only if its arrangement has bpm, meter AND key_name.
   Half-filled arrangements give NO key.
3. Items without an arrangement reference pass through untouched.

Pure functions, no I/O - test them with plain dicts.
"""

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from worshipboard.domain.dtos import ArrangementDTO, ItemDTO

logger = logging.getLogger(__name__)

ARRANGEMENT_TYPE = "Arrangement"


def build_arrangement_map(
    included: Iterable[dict[str, Any]],
) -> dict[str, ArrangementDTO]:
    """Map arrangement id -> arrangement, ignoring non-arrangement records."""
    arrangements: dict[str, ArrangementDTO] = {}
    for record in included:
        if record.get("type") != ARRANGEMENT_TYPE:
            continue
        arrangement = ArrangementDTO.from_api(record)
        arrangements[arrangement.id] = arrangement
    return arrangements


def resolve_item_keys(
    items: list[ItemDTO], included: Iterable[dict[str, Any]]
) -> list[ItemDTO]:
    """
    Attach arrangement keys to items.

    Args:
        items: Items in Provider order
        included: The "included" records of the same response

    Returns:
        New list in the same order; enriched items are copies
    """
    arrangements = build_arrangement_map(included)
    resolved: list[ItemDTO] = []
    for item in items:
        arrangement = arrangements.get(item.arrangement_id) if item.arrangement_id else None
        if arrangement is not None and arrangement.is_complete():
            resolved.append(replace(item, key_name=arrangement.key_name))
        else:
            resolved.append(item)

    logger.debug(
        "Resolved arrangement keys for %d/%d items",
        sum(1 for item in resolved if item.key_name),
        len(resolved),
    )
    return resolved
