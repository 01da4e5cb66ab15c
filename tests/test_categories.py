import pytest

from clinic_revenue.categories import (
    CATEGORY_COLORS,
    CATEGORY_RULES,
    DEFAULT_COLOR,
    TREATMENT_CATEGORIES,
    CategoryRule,
    canonical_label,
    get_category_color,
    normalize_treatment_category,
    resolve_color,
)


def test_every_treatment_category_has_a_color():
    assert set(TREATMENT_CATEGORIES) == set(CATEGORY_COLORS)
    assert get_category_color("Diagnostic") == "#00E5FF"
    assert get_category_color("Orthodontics") == "#F59E0B"


def test_unknown_category_gets_default_color():
    assert get_category_color("Teeth Whitening Kit") == DEFAULT_COLOR
    assert resolve_color("Teeth Whitening Kit") == DEFAULT_COLOR


def test_color_table_is_read_only():
    with pytest.raises(TypeError):
        CATEGORY_COLORS["Diagnostic"] = "#000000"


def test_label_aliases():
    assert canonical_label("Ortho") == "Orthodontics"
    assert canonical_label("Implants") == "Implant Treatment"
    assert canonical_label("Cosmetic") == "Cosmetic"


def test_medicine_sales_color_override():
    assert resolve_color("Medicine (Sales)") == "#A855F7"


def test_other_gets_accent_only_when_unmapped():
    assert resolve_color("Other") == "#FBBF24"

    rules = (CategoryRule("Diagnostic", color="#000000", only_if_default=True),)
    assert resolve_color("Diagnostic", rules) == "#00E5FF"


def test_rules_are_ordered_data():
    matches = [rule.match for rule in CATEGORY_RULES]
    assert matches == ["Ortho", "Implants", "Medicine (Sales)", "Other"]
    assert CATEGORY_RULES[0].as_dict() == {
        "match": "Ortho",
        "label": "Orthodontics",
        "color": None,
        "only_if_default": False,
    }


def test_custom_rules_replace_the_defaults():
    rules = (CategoryRule("Perio", label="Periodontic"),)
    assert canonical_label("Perio", rules) == "Periodontic"
    assert canonical_label("Ortho", rules) == "Ortho"


@pytest.mark.parametrize("raw, expected", [
    ("Periodontal Care", "Periodontic"),
    ("  Prosthodontics (Fixed) ", "Prosthodontic"),
    ("Emergency & Pain Management", "Diagnostic"),
    ("Oral Surgery", "Oral Surgery"),
    ("Laser Therapy", "Laser Therapy"),
    (None, ""),
])
def test_normalize_treatment_category(raw, expected):
    assert normalize_treatment_category(raw) == expected
