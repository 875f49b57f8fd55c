"""Category extraction and fuzzy matching between filter values and products."""
from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

# Canonical slug -> spellings seen in product data and old links
CATEGORY_ALIASES: dict[str, frozenset[str]] = {
    "microfiber": frozenset(
        {"microfiber-cloth", "microfiber cloth", "microfiber_cloth", "microfiber-cloths"}
    ),
    "car-interior": frozenset(
        {"car interior", "interior", "car_interior", "car interior care"}
    ),
    "car-exterior": frozenset(
        {"car exterior", "exterior", "car_exterior", "car exterior care"}
    ),
    "kits-combos": frozenset(
        {"kits", "combos", "kits & combos", "kits_combos", "kits and combos"}
    ),
    "accessories": frozenset({"accessory", "car accessories", "auto accessories"}),
}

ALIAS_TO_CANONICAL: dict[str, str] = {
    alias: canonical
    for canonical, aliases in CATEGORY_ALIASES.items()
    for alias in aliases
}

_WHITESPACE = re.compile(r"\s+")

# Shapes that carry a {id, slug, name} category object
_CATEGORY_OBJECT_KEYS = ("category", "main_category", "categories")


def slugify(name: str) -> str:
    return _WHITESPACE.sub("-", name.strip().lower())


def _normalize(value: Any) -> str:
    return str(value).strip().lower()


def matches_category(product_value: Any, requested_value: Any) -> bool:
    if product_value is None or requested_value is None:
        return False
    prod = _normalize(product_value)
    req = _normalize(requested_value)
    if not prod or not req:
        return False
    if product_value == requested_value or prod == req:
        return True

    aliases = CATEGORY_ALIASES.get(req)
    if aliases and any(alias in prod or prod in alias for alias in aliases):
        return True

    canonical = ALIAS_TO_CANONICAL.get(req)
    if canonical and canonical in prod:
        return True
    canonical = ALIAS_TO_CANONICAL.get(prod)
    if canonical and canonical in req:
        return True

    return prod in req or req in prod


def _from_category_object(obj: Mapping[str, Any], out: list[str]) -> None:
    if obj.get("slug"):
        out.append(str(obj["slug"]))
    if obj.get("id"):
        out.append(str(obj["id"]))
    if obj.get("name"):
        out.append(slugify(str(obj["name"])))


def collect_category_keys(product: Mapping[str, Any]) -> list[str]:
    """Sniff every category shape a product record may carry."""
    keys: list[str] = []

    for field in _CATEGORY_OBJECT_KEYS:
        value = product.get(field)
        if isinstance(value, Mapping):
            _from_category_object(value, keys)
        elif isinstance(value, str) and value.strip():
            keys.append(value.strip())

    if product.get("main_category_id"):
        keys.append(str(product["main_category_id"]))

    subcategories = product.get("subcategories")
    if isinstance(subcategories, Sequence) and not isinstance(subcategories, str):
        for sub in subcategories:
            if not isinstance(sub, Mapping):
                continue
            if isinstance(sub.get("category"), Mapping):
                _from_category_object(sub["category"], keys)
            elif sub.get("category_id"):
                keys.append(str(sub["category_id"]))

    return list(dict.fromkeys(keys))


def extract_categories(product: Mapping[str, Any]) -> list[str]:
    """Category values of a product, preferring the set computed at load time."""
    cached = product.get("category_keys")
    if isinstance(cached, Sequence) and not isinstance(cached, str):
        return [str(key) for key in cached]
    return collect_category_keys(product)


def product_in_categories(product: Mapping[str, Any], requested: Sequence[str]) -> bool:
    keys = extract_categories(product)
    return any(matches_category(key, req) for req in requested for key in keys)
