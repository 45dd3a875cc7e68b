"""
Taxonomy catalog - the fixed category -> subcategory tree.

The taxonomy drives generation coverage: every (category, subcategory) pair
a generator emits must resolve here. The catalog is a frozen value object;
it is built once from YAML and never mutated afterwards.

Usage:
    catalog = TaxonomyCatalog.default()

    catalog.all_categories()                 # ('Agriculture', 'Apparel & Fashion', ...)
    catalog.subcategories_of("Agriculture")  # ('Agriculture Equipment', ...)
    catalog.require("Agriculture", "Fresh Flowers")  # raises UnknownTaxonomyKey if absent
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

import yaml

DEFAULT_TAXONOMY_PATH = Path(__file__).parent / "data" / "taxonomy.yaml"


class UnknownTaxonomyKey(KeyError):
    """Raised when a category or subcategory is not part of the taxonomy."""

    def __init__(self, category: str, subcategory: str | None = None) -> None:
        self.category = category
        self.subcategory = subcategory
        if subcategory is None:
            message = f"Unknown taxonomy category: {category!r}"
        else:
            message = (
                f"Unknown taxonomy subcategory: {subcategory!r} "
                f"is not listed under category {category!r}"
            )
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class TaxonomyValidationError(Exception):
    """Raised when a taxonomy document fails structural validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        message = f"Taxonomy validation failed with {len(errors)} error(s):\n"
        message += "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)


class TaxonomyCatalog:
    """
    Immutable category -> ordered subcategory list.

    Categories keep document order. Subcategory names are unique within a
    category but may repeat across categories ("Office Furniture" lives
    under both Furniture & Carpentry and Office Supplies).

    Attributes:
        source: Path the catalog was loaded from, or None if built in memory
    """

    __slots__ = ("_categories", "_subcategories", "_lookup", "source")

    def __init__(
        self,
        entries: Mapping[str, list[str] | tuple[str, ...]],
        source: Path | None = None,
    ) -> None:
        """
        Build a catalog from an ordered mapping.

        Args:
            entries: Category name -> subcategory names, in display order
            source: Optional origin path, kept for error messages

        Raises:
            TaxonomyValidationError: If the mapping is structurally invalid
        """
        errors = _validate_entries(entries)
        if errors:
            raise TaxonomyValidationError(errors)

        self._categories: tuple[str, ...] = tuple(entries)
        self._subcategories: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {name: tuple(subs) for name, subs in entries.items()}
        )
        self._lookup: Mapping[str, frozenset[str]] = MappingProxyType(
            {name: frozenset(subs) for name, subs in self._subcategories.items()}
        )
        self.source = source

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_yaml(cls, path: Path) -> TaxonomyCatalog:
        """
        Load a taxonomy document.

        Expected shape::

            categories:
              - name: Agriculture
                subcategories: [Agriculture Equipment, Fresh Flowers]

        Args:
            path: YAML file to read

        Returns:
            A frozen TaxonomyCatalog

        Raises:
            TaxonomyValidationError: If the document is malformed
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict) or not isinstance(data.get("categories"), list):
            raise TaxonomyValidationError(
                [f"{path}: expected a top-level 'categories' list"]
            )

        entries: dict[str, list[str]] = {}
        errors: list[str] = []
        for i, item in enumerate(data["categories"]):
            if not isinstance(item, dict) or "name" not in item:
                errors.append(f"categories[{i}]: missing 'name'")
                continue
            name = item["name"]
            if not isinstance(name, str):
                errors.append(f"categories[{i}]: name must be a string, got {name!r}")
                continue
            if name in entries:
                errors.append(f"categories[{i}]: duplicate category {name!r}")
                continue
            subs = item.get("subcategories")
            if subs is None:
                subs = []
            if not isinstance(subs, (list, tuple)):
                errors.append(f"categories[{i}]: 'subcategories' must be a list, got {subs!r}")
                continue
            entries[name] = subs

        if errors:
            raise TaxonomyValidationError(errors)
        return cls(entries, source=Path(path))

    @classmethod
    def default(cls) -> TaxonomyCatalog:
        """Return the bundled marketplace taxonomy (loaded once per process)."""
        return _load_default()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def all_categories(self) -> tuple[str, ...]:
        """All category names in document order."""
        return self._categories

    def subcategories_of(self, category: str) -> tuple[str, ...]:
        """
        Ordered subcategories for a category.

        Raises:
            UnknownTaxonomyKey: If the category is not in the taxonomy
        """
        try:
            return self._subcategories[category]
        except KeyError:
            raise UnknownTaxonomyKey(category) from None

    def contains(self, category: str, subcategory: str | None = None) -> bool:
        """True if the category (and subcategory, when given) exists."""
        subs = self._lookup.get(category)
        if subs is None:
            return False
        return subcategory is None or subcategory in subs

    def require(self, category: str, subcategory: str | None = None) -> None:
        """
        Fail fast unless the category/subcategory pair exists.

        Raises:
            UnknownTaxonomyKey: If either key is absent
        """
        subs = self._lookup.get(category)
        if subs is None:
            raise UnknownTaxonomyKey(category)
        if subcategory is not None and subcategory not in subs:
            raise UnknownTaxonomyKey(category, subcategory)

    def pairs(self) -> Iterator[tuple[str, str]]:
        """Iterate every (category, subcategory) pair in document order."""
        for category in self._categories:
            for subcategory in self._subcategories[category]:
                yield category, subcategory

    def subcategory_count(self) -> int:
        """Total number of (category, subcategory) pairs."""
        return sum(len(subs) for subs in self._subcategories.values())

    def head(self, k: int) -> TaxonomyCatalog:
        """Catalog restricted to the first k categories."""
        if k < 1:
            raise ValueError(f"head() needs at least one category, got k={k}")
        names = self._categories[:k]
        return TaxonomyCatalog(
            {name: self._subcategories[name] for name in names}, source=self.source
        )

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category: object) -> bool:
        return category in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __repr__(self) -> str:
        return (
            f"TaxonomyCatalog({len(self._categories)} categories, "
            f"{self.subcategory_count()} subcategories)"
        )

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "source"):
            raise AttributeError("TaxonomyCatalog is immutable")
        object.__setattr__(self, name, value)


def _validate_entries(entries: Mapping[str, list[str] | tuple[str, ...]]) -> list[str]:
    """Collect structural problems in a category -> subcategories mapping."""
    errors: list[str] = []
    if not entries:
        errors.append("taxonomy has no categories")
    for name, subs in entries.items():
        if not isinstance(name, str) or not name.strip():
            errors.append(f"category name must be a non-empty string, got {name!r}")
            continue
        if not isinstance(subs, (list, tuple)):
            errors.append(f"category {name!r}: subcategories must be a list, got {subs!r}")
            continue
        if not subs:
            errors.append(f"category {name!r} has no subcategories")
            continue
        seen: set[str] = set()
        for sub in subs:
            if not isinstance(sub, str) or not sub.strip():
                errors.append(f"category {name!r}: invalid subcategory {sub!r}")
            elif sub in seen:
                errors.append(f"category {name!r}: duplicate subcategory {sub!r}")
            else:
                seen.add(sub)
    return errors


@lru_cache(maxsize=1)
def _load_default() -> TaxonomyCatalog:
    return TaxonomyCatalog.from_yaml(DEFAULT_TAXONOMY_PATH)
