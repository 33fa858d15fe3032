"""Keyword-based grocery categories."""

from collections.abc import Iterable

from nutrimate.domain.grocery import Ingredient

PRODUCE = "produce"
DAIRY = "dairy"
PROTEIN = "protein"
GRAINS = "grains"
PANTRY = "pantry"
OTHER = "other"

# Checked in order; the first category with a matching keyword wins.
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        PRODUCE,
        (
            "berries",
            "fruit",
            "vegetable",
            "lettuce",
            "tomato",
            "onion",
            "carrot",
            "pepper",
            "spinach",
        ),
    ),
    (DAIRY, ("milk", "cheese", "yogurt", "butter", "cream")),
    (PROTEIN, ("chicken", "beef", "fish", "egg", "tofu", "beans")),
    (GRAINS, ("rice", "pasta", "bread", "flour", "oats", "quinoa", "granola")),
    (
        PANTRY,
        ("oil", "vinegar", "salt", "pepper", "spice", "honey", "seeds", "nuts"),
    ),
)

CATEGORY_ORDER: tuple[str, ...] = (PRODUCE, DAIRY, PROTEIN, GRAINS, PANTRY, OTHER)


def categorize(name: str) -> str:
    """Return the grocery category for an ingredient name."""
    lowered = name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return OTHER


def group_by_category(items: Iterable[Ingredient]) -> dict[str, list[Ingredient]]:
    """Group items by category in display order, skipping empty categories.

    A stored category other than ``other`` is treated as a manual choice and
    kept; everything else is categorized from the item name.
    """
    groups: dict[str, list[Ingredient]] = {category: [] for category in CATEGORY_ORDER}
    for item in items:
        if item.category in groups and item.category != OTHER:
            category = item.category
        else:
            category = categorize(item.name)
        groups[category].append(item)
    return {category: grouped for category, grouped in groups.items() if grouped}
