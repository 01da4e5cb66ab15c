"""
categories.py — Treatment category colors and the label/color override rules.

The color table is closed and read-only. Overrides are plain data in
CATEGORY_RULES, applied in order before (labels) and after (colors) the
generic table lookup.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Color table
# ---------------------------------------------------------------------------

TREATMENT_CATEGORIES = (
    "Diagnostic",
    "Preventive",
    "Restorative",
    "Endodontic",
    "Periodontic",
    "Oral Surgery",
    "Prosthodontic",
    "Implant Treatment",
    "Orthodontics",
    "Cosmetic",
    "Pediatric",
)

CATEGORY_COLORS = MappingProxyType({
    "Diagnostic":        "#00E5FF",   # cyan
    "Preventive":        "#00FF87",   # neon green
    "Restorative":       "#FFD700",   # gold
    "Endodontic":        "#FF6B00",   # orange
    "Periodontic":       "#D500F9",   # purple
    "Oral Surgery":      "#FF1744",   # scarlet
    "Prosthodontic":     "#00B0FF",   # sky blue
    "Implant Treatment": "#FFAB00",   # amber
    "Orthodontics":      "#F59E0B",   # golden yellow
    "Cosmetic":          "#FF007F",   # pink
    "Pediatric":         "#00E676",   # mint
})

DEFAULT_COLOR = "#A3AED0"

# Label for rows that carry no category of their own
FALLBACK_CATEGORY = "Other"

# Long-form treatment catalog names → canonical category
TREATMENT_CATEGORY_ALIASES = MappingProxyType({
    "Diagnostics & Consultation":  "Diagnostic",
    "Diagnostics":                 "Diagnostic",
    "Preventive Care":             "Preventive",
    "Restorative Dentistry":       "Restorative",
    "Periodontal Care":            "Periodontic",
    "Periodontics":                "Periodontic",
    "Endodontics":                 "Endodontic",
    "Prosthodontics (Fixed)":      "Prosthodontic",
    "Prosthodontics (Removable)":  "Prosthodontic",
    "Prosthodontics":              "Prosthodontic",
    "Pediatric Dentistry":         "Pediatric",
    "Pediatrics":                  "Pediatric",
    "Cosmetic Dentistry":          "Cosmetic",
    "Cosmetics":                   "Cosmetic",
    "Emergency & Pain Management": "Diagnostic",
})


# ---------------------------------------------------------------------------
# Override rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CategoryRule:
    match:           str
    label:           str | None = None
    color:           str | None = None
    only_if_default: bool = False   # color applies only when the table has no entry

    def as_dict(self) -> dict:
        return {
            "match":           self.match,
            "label":           self.label,
            "color":           self.color,
            "only_if_default": self.only_if_default,
        }


CATEGORY_RULES = (
    CategoryRule("Ortho", label="Orthodontics"),
    CategoryRule("Implants", label="Implant Treatment"),
    CategoryRule("Medicine (Sales)", color="#A855F7"),
    CategoryRule("Other", color="#FBBF24", only_if_default=True),
)


def get_category_color(name: str) -> str:
    return CATEGORY_COLORS.get(name, DEFAULT_COLOR)


def canonical_label(category: str, rules: tuple[CategoryRule, ...] = CATEGORY_RULES) -> str:
    """Apply label aliases, in rule order, to a raw category label."""
    label = category
    for rule in rules:
        if rule.label is not None and label == rule.match:
            label = rule.label
    return label


def resolve_color(label: str, rules: tuple[CategoryRule, ...] = CATEGORY_RULES) -> str:
    """
    Color for an already-canonical label.
    Table lookup first, then color rules keyed on the canonical label.
    """
    color = get_category_color(label)
    for rule in rules:
        if rule.color is None or label != rule.match:
            continue
        if rule.only_if_default and color != DEFAULT_COLOR:
            continue
        color = rule.color
    return color


def normalize_treatment_category(name) -> str:
    cleaned = str(name or "").strip()
    return TREATMENT_CATEGORY_ALIASES.get(cleaned, cleaned)
