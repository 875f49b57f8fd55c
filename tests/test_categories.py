import pytest

from storefront.catalog.categories import (
    collect_category_keys,
    extract_categories,
    matches_category,
    slugify,
)


@pytest.mark.parametrize(
    ("product_value", "requested"),
    [
        ("microfiber-cloth", "microfiber"),
        ("Microfiber Cloth", "microfiber"),
        ("car-interior", "interior"),
        ("Car Interior", "car-interior"),
        ("kits-combos", "kits"),
        ("accessories", "car accessories"),
        ("c-123", "c-123"),
        ("  Car-Exterior ", "car-exterior"),
    ],
)
def test_matching_pairs(product_value: str, requested: str) -> None:
    assert matches_category(product_value, requested)


@pytest.mark.parametrize(
    ("product_value", "requested"),
    [
        ("car-exterior", "car-interior"),
        ("microfiber-cloth", "car-interior"),
        ("kits-combos", "accessories"),
        ("", "microfiber"),
        ("", ""),
        ("  ", "  "),
        (None, "microfiber"),
        ("microfiber", None),
    ],
)
def test_non_matching_pairs(product_value: str | None, requested: str | None) -> None:
    assert not matches_category(product_value, requested)


def test_exact_match_before_normalization() -> None:
    assert matches_category(7, 7)
    assert matches_category(7, "7")


def test_slugify() -> None:
    assert slugify("Car  Interior Care") == "car-interior-care"


def test_collects_every_shape_without_duplicates() -> None:
    product = {
        "category": {"id": "c1", "slug": "microfiber", "name": "Microfiber"},
        "main_category": {"id": "c1", "slug": "microfiber"},
        "main_category_id": "c1",
        "categories": {"slug": "legacy-slug", "name": "Legacy Name"},
        "subcategories": [
            {"category": {"id": "c9", "name": "Car Exterior"}},
            {"category_id": "c10"},
            "not-a-mapping",
        ],
    }

    assert collect_category_keys(product) == [
        "microfiber",
        "c1",
        "legacy-slug",
        "legacy-name",
        "c9",
        "car-exterior",
        "c10",
    ]


def test_plain_string_category() -> None:
    assert collect_category_keys({"category": "Car Interior"}) == ["Car Interior"]


def test_no_category_data() -> None:
    assert collect_category_keys({"name": "Orphan"}) == []


def test_precomputed_keys_are_reused() -> None:
    product = {"category_keys": ["a", "b"], "category": {"slug": "ignored"}}

    assert extract_categories(product) == ["a", "b"]
