"""
Edits a traveler makes to a generated packing list.
Every function returns a new list mapping and leaves its input untouched.
"""

import logging
import re
from dataclasses import replace
from typing import Dict, List, Optional

from config.travel_config import CARRY_ON_LIQUID_LIMIT_ML, DEFAULT_LIQUID_VOLUME, LIQUID_KEYWORDS
from core.models import PackingItem

PackingList = Dict[str, List[PackingItem]]

VOLUME_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*ml", re.IGNORECASE)


def detect_liquid(name: str) -> bool:
    lowered = (name or "").lower()
    return any(keyword in lowered for keyword in LIQUID_KEYWORDS)


def volume_ml(volume: Optional[str]) -> Optional[float]:
    """Parses "100ml" style volumes; None when missing or unparseable."""
    if not volume:
        return None
    match = VOLUME_PATTERN.search(volume)
    return float(match.group(1)) if match else None


def _copy(packing_list: PackingList) -> PackingList:
    return {category: [replace(item) for item in items] for category, items in packing_list.items()}


def add_custom_item(packing_list: PackingList, name: str, category: str = "essentials") -> PackingList:
    updated = _copy(packing_list)
    name = (name or "").strip()
    if not name:
        return updated

    is_liquid = detect_liquid(name)
    updated.setdefault(category, []).append(PackingItem(
        name=name,
        quantity=1,
        purpose="Custom item",
        is_liquid=is_liquid,
        volume=DEFAULT_LIQUID_VOLUME if is_liquid else None,
    ))
    return updated


def rename_item(packing_list: PackingList, category: str, index: int, new_name: str) -> PackingList:
    """Renames an item and re-checks whether it is a liquid."""
    updated = _copy(packing_list)
    new_name = (new_name or "").strip()
    if not new_name:
        return updated

    item = updated[category][index]
    is_liquid = detect_liquid(new_name)
    updated[category][index] = replace(
        item,
        name=new_name,
        is_liquid=is_liquid,
        volume=(item.volume or DEFAULT_LIQUID_VOLUME) if is_liquid else None,
    )
    return updated


def update_quantity(packing_list: PackingList, category: str, index: int, quantity: int) -> PackingList:
    updated = _copy(packing_list)
    if quantity < 1:
        logging.debug(f"Ignoring quantity {quantity} for {category}[{index}]")
        return updated
    updated[category][index].quantity = quantity
    return updated


def toggle_packed(packing_list: PackingList, category: str, index: int) -> PackingList:
    updated = _copy(packing_list)
    item = updated[category][index]
    item.packed = not item.packed
    return updated


def remove_item(packing_list: PackingList, category: str, index: int) -> PackingList:
    updated = _copy(packing_list)
    del updated[category][index]
    return updated


def packing_progress(packing_list: PackingList) -> Dict:
    items = [item for items in packing_list.values() for item in items]
    packed = sum(1 for item in items if item.packed)
    total = len(items)
    return {
        "packed": packed,
        "total": total,
        "percent": round(packed / total * 100) if total else 0,
    }


def carry_on_liquid_report(packing_list: PackingList, limit_ml: int = CARRY_ON_LIQUID_LIMIT_ML) -> Dict:
    """Lists liquids whose container exceeds the carry-on limit and totals all liquid volume."""
    oversized = []
    total_ml = 0.0
    for category, items in packing_list.items():
        for item in items:
            if not item.is_liquid:
                continue
            ml = volume_ml(item.volume)
            if ml is None:
                continue
            total_ml += ml * item.quantity
            if ml > limit_ml:
                oversized.append({"category": category, "name": item.name, "volume": item.volume})
    return {
        "limit_ml": limit_ml,
        "oversized": oversized,
        "total_ml": total_ml,
        "carry_on_ok": not oversized,
    }
