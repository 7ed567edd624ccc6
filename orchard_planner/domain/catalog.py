"""
Static reference tables: Palekar model geometry and plant symbol metadata.

Centralizing these values keeps the generators and formatters free of
magic numbers and colour codes.
"""
from orchard_planner.domain.models import ModelDefaults, PalekarModel, PlantSymbol, Zone


SQ_FT_PER_ACRE = 43_560

# Pavilion poles stand on a 6 ft pitch regardless of the model
PAVILION_POLE_PITCH_FT = 6.0


MODEL_DEFAULTS: dict[PalekarModel, ModelDefaults] = {
    PalekarModel.MODEL_24X24: ModelDefaults(
        model=PalekarModel.MODEL_24X24,
        bed_length=24.0,
        tree_spacing_ft=6.0,
        bed_type_cycle=[1, 2, 3],
        k_size_ft=24,
        k_bed_span=3,
        layout_column_cycle=[1, 2, 3, 4],
    ),
    PalekarModel.MODEL_36X36: ModelDefaults(
        model=PalekarModel.MODEL_36X36,
        bed_length=36.0,
        tree_spacing_ft=9.0,
        bed_type_cycle=[1, 2, 4, 3],
        k_size_ft=36,
        k_bed_span=4,
        layout_column_cycle=[1, 2, 4, 3],
    ),
}


def _symbol(id, label, short_label, shape, size, radius, fill, stroke, stroke_width):
    return PlantSymbol(
        id=id,
        label=label,
        short_label=short_label,
        shape=shape,
        size=size,
        radius=radius,
        fill=fill,
        stroke=stroke,
        stroke_width=stroke_width,
    )


PLANT_SYMBOLS: dict[str, PlantSymbol] = {
    s.id: s
    for s in (
        # Centre column trees (Bed 1 & 3)
        _symbol("big", "Big Tree (Citrus/Mango)", "B", "circle", "big", 5, "#ef4444", "#dc2626", 1.5),
        _symbol("medium", "Medium Tree (Apple/Custard Apple)", "M", "square", "medium", 4, "#ec4899", "#db2777", 1.2),
        _symbol("small", "Small Tree (Pomegranate/Guava)", "S", "star", "small", 3.5, "#22c55e", "#16a34a", 1),
        _symbol("pigeonPea", "Pigeon Pea (Arhar)", "△", "triangle", "small", 2.5, "transparent", "#4ade80", 0.8),

        # Ground cover (Bed 1 & 3)
        _symbol("marigold", "Marigold", "✿", "circle", "small", 2.5, "#f59e0b", "#d97706", 0.8),
        _symbol("cotton", "Desi Cotton", "c", "dot", "small", 2, "#f8fafc", "#94a3b8", 0.6),
        _symbol("groundnut", "Groundnut", "●", "dot", "small", 2, "#1e3a5f", "#1e3a5f", 0.5),
        _symbol("onionGarlic", "Onion / Garlic", "—", "dash", "small", 3, "transparent", "#64748b", 1),
        _symbol("fruitVeg", "Fruit Vegetable (Chilli/Brinjal)", "v", "dot", "small", 2, "#dc2626", "#991b1b", 0.6),
        _symbol("milletsPulses", "Millets / Pulses", "m", "dot", "small", 2, "#a16207", "#713f12", 0.6),
        _symbol("aromaticPaddy", "Aromatic Paddy", "p", "dash", "small", 3, "transparent", "#ca8a04", 1),

        # Bed 2: edges and interior
        _symbol("banana", "Banana", "BA", "triangle", "big", 4.5, "#38bdf8", "#0284c7", 1.2),
        _symbol("papaya", "Dwarf Papaya", "PA", "diamond", "medium", 4, "#a78bfa", "#7c3aed", 1.2),
        _symbol("sugarcane", "Sugarcane", "|", "dash", "medium", 3.5, "transparent", "#84cc16", 1.2),
        _symbol("turmeric", "Turmeric", "T", "dot", "small", 2, "#eab308", "#ca8a04", 0.6),
        _symbol("ginger", "Ginger", "G", "dot", "small", 2, "#f97316", "#c2410c", 0.6),

        # Bed 4: vine / vegetable pavilion
        _symbol("vineVeg", "Vine Vegetable (Gourd/Beans/Tomato)", "★", "star", "small", 3, "#16a34a", "#15803d", 1),
        _symbol("pavilionPole", "Bamboo Pavilion Pole (10ft)", "⌂", "square", "medium", 3.5, "#1e40af", "#1d4ed8", 1.2),
    )
}


DEFAULT_ZONES: list[Zone] = [
    Zone(
        id="zone-a",
        name="Zone A",
        color="#10b981",
        acres=4,
        strategy="High Cash Flow - Banana + Guava dominant, heavy drip & fertigation",
    ),
    Zone(
        id="zone-b",
        name="Zone B",
        color="#3b82f6",
        acres=4,
        strategy="Balanced Orchard - Full B/M/S mix, medium input, stable output",
    ),
    Zone(
        id="zone-c",
        name="Zone C",
        color="#f59e0b",
        acres=2,
        strategy="Asset & Premium - Mango, Jackfruit, Avocado, Drumstick, nursery",
    ),
]
