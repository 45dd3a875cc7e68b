"""
TaxonomyKeyedMap - template tables keyed by taxonomy position.

Generators look up category-specific templates (quantity class,
specifications, supplier profile words). A missing entry for a *valid*
taxonomy key is not an error: it resolves to the table's named default.
Keys themselves are checked against the taxonomy by validate(), so a typo
in a table key is caught instead of silently falling back forever.

Usage:
    specs = TaxonomyKeyedMap(
        "specifications",
        {("Automobile", "Tires & Tubes"): ["DOT approved", ...]},
        default=["High quality", "Durable", ...],
    )
    specs.resolve(("Automobile", "Tires & Tubes"))   # table entry
    specs.resolve(("Automobile", "Engine Parts"))    # default entry
    specs.validate(TaxonomyCatalog.default())        # raises on stray keys
"""

from __future__ import annotations

from collections.abc import ItemsView, KeysView, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Generic, Hashable, TypeVar

from .taxonomy import UnknownTaxonomyKey

if TYPE_CHECKING:
    from .taxonomy import TaxonomyCatalog

K = TypeVar("K", bound=Hashable)  # category name or (category, subcategory)
V = TypeVar("V")


class TaxonomyKeyedMap(Generic[K, V]):
    """
    Read-only template table with an explicit default entry.

    Attributes:
        name: Table name, used in error messages
    """

    __slots__ = ("_entries", "_default", "name")

    def __init__(self, name: str, entries: Mapping[K, V], default: V) -> None:
        """
        Args:
            name: Table name for debugging
            entries: Taxonomy key -> template value
            default: Value returned for keys with no entry
        """
        self.name = name
        self._entries: Mapping[K, V] = MappingProxyType(dict(entries))
        self._default = default

    @property
    def default(self) -> V:
        """The documented fallback entry."""
        return self._default

    def resolve(self, key: K) -> V:
        """Entry for key, or the default entry when the table has none."""
        return self._entries.get(key, self._default)

    def is_default(self, key: K) -> bool:
        """True if resolve(key) falls back to the default entry."""
        return key not in self._entries

    def validate(self, catalog: TaxonomyCatalog) -> None:
        """
        Check every table key against the taxonomy.

        String keys must be categories; tuple keys must be
        (category, subcategory) pairs.

        Raises:
            UnknownTaxonomyKey: On the first key absent from the catalog
        """
        for key in self._entries:
            if isinstance(key, tuple):
                catalog.require(*key)
            elif isinstance(key, str):
                catalog.require(key)
            else:
                raise UnknownTaxonomyKey(repr(key))

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> KeysView[K]:
        return self._entries.keys()

    def items(self) -> ItemsView[K, V]:
        return self._entries.items()

    def __repr__(self) -> str:
        return f"TaxonomyKeyedMap({self.name!r}, {len(self._entries)} entries)"
