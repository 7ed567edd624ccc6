"""
Domain service: Human-facing summaries of plant count maps.
"""
from typing import Optional
import logging

from orchard_planner.domain.catalog import PLANT_SYMBOLS
from orchard_planner.domain.models import (
    CategorySummary,
    PlantCountMap,
    PlantDisplayInfo,
    PlantSymbol,
)

logger = logging.getLogger(__name__)

FALLBACK_FILL = "#888"
FALLBACK_STROKE = "#666"


# (category, label, colour, symbol ids)
PLANT_CATEGORIES: tuple[tuple[str, str, str, tuple[str, ...]], ...] = (
    ("big", "Big Trees (B)", "#ef4444", ("big",)),
    ("medium", "Medium Trees (M)", "#ec4899", ("medium",)),
    ("small", "Small Trees (S)", "#22c55e", ("small",)),
    ("banana", "Banana", "#38bdf8", ("banana",)),
    ("papaya", "Papaya", "#a78bfa", ("papaya",)),
    ("pigeonPea", "Pigeon Pea", "#4ade80", ("pigeonPea",)),
    ("groundCover", "Ground Cover Crops", "#facc15", (
        "marigold", "cotton", "fruitVeg", "milletsPulses",
        "aromaticPaddy", "groundnut", "onionGarlic",
    )),
    ("spices", "Spices (Turmeric/Ginger)", "#f97316", ("turmeric", "ginger")),
    ("vine", "Vine Vegetables", "#16a34a", ("vineVeg",)),
    ("structure", "Pavilion Poles", "#1e40af", ("pavilionPole",)),
    ("sugarcane", "Sugarcane", "#84cc16", ("sugarcane",)),
)


def get_plant_display_list(counts: PlantCountMap) -> list[PlantDisplayInfo]:
    """
    Attach symbol metadata to plant counts, largest count first.

    Symbols missing from the catalog fall back to their id and neutral
    colours.

    Args:
        counts: Plant count map

    Returns:
        List of PlantDisplayInfo sorted by descending count
    """
    items = []
    for symbol_id, count in counts.items():
        symbol: Optional[PlantSymbol] = PLANT_SYMBOLS.get(symbol_id)
        if symbol is None:
            logger.debug(f"No symbol metadata for '{symbol_id}', using fallback")
        items.append(PlantDisplayInfo(
            id=symbol_id,
            label=symbol.label if symbol else symbol_id,
            short_label=symbol.short_label if symbol else symbol_id,
            fill=symbol.fill if symbol else FALLBACK_FILL,
            stroke=symbol.stroke if symbol else FALLBACK_STROKE,
            count=count,
        ))
    items.sort(key=lambda item: item.count, reverse=True)
    return items


def get_category_summary(counts: PlantCountMap) -> list[CategorySummary]:
    """
    Group plant counts into the fixed summary categories.

    Args:
        counts: Plant count map

    Returns:
        Categories with a non-zero count, in table order
    """
    summaries = []
    for category, label, color, ids in PLANT_CATEGORIES:
        count = sum(counts.get(symbol_id, 0) for symbol_id in ids)
        if count > 0:
            summaries.append(CategorySummary(
                category=category,
                label=label,
                color=color,
                count=count,
                ids=list(ids),
            ))
    return summaries


# ============================================================
# Currency
# ============================================================

def _group_indian(digits: str) -> str:
    # 12,34,56,789: last three digits, then pairs
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_inr(amount: int) -> str:
    """Format a rupee amount with Indian digit grouping, e.g. ₹12,34,567."""
    sign = "-" if amount < 0 else ""
    return f"{sign}₹{_group_indian(str(abs(int(amount))))}"


def format_lakhs(amount: int) -> str:
    """Format a rupee amount compactly in lakhs or thousands."""
    lakhs = amount / 100_000
    if lakhs >= 100:
        return f"₹{lakhs:.0f}L"
    if lakhs >= 1:
        return f"₹{lakhs:.1f}L"
    thousands = amount / 1000
    if thousands >= 1:
        return f"₹{thousands:.0f}K"
    return format_inr(amount)
