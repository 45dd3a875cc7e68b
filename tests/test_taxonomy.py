"""
Tests for the taxonomy catalog.

Covers the bundled YAML, lookups, fail-fast validation and immutability.
"""

import pytest

from marketplace_synth.taxonomy import (
    TaxonomyCatalog,
    TaxonomyValidationError,
    UnknownTaxonomyKey,
)


class TestBundledTaxonomy:
    """Tests for TaxonomyCatalog.default()."""

    def test_size(self, catalog):
        """Bundled taxonomy has 50 categories and 258 subcategories."""
        assert len(catalog) == 50
        assert catalog.subcategory_count() == 258

    def test_document_order(self, catalog):
        """Categories and subcategories keep YAML order."""
        assert catalog.all_categories()[0] == "Agriculture"
        assert catalog.subcategories_of("Agriculture")[0] == "Agriculture Equipment"

    def test_default_is_cached(self):
        """default() loads once per process."""
        assert TaxonomyCatalog.default() is TaxonomyCatalog.default()

    def test_pairs_cover_every_subcategory(self, catalog):
        """pairs() yields one entry per (category, subcategory)."""
        pairs = list(catalog.pairs())
        assert len(pairs) == catalog.subcategory_count()
        assert all(catalog.contains(cat, sub) for cat, sub in pairs)


class TestLookups:
    """Tests for contains/require/head."""

    def test_contains(self, catalog):
        """contains() checks category and optional subcategory."""
        assert catalog.contains("Agriculture")
        assert catalog.contains("Agriculture", "Fresh Flowers")
        assert not catalog.contains("Agriculture", "Sarees")
        assert not catalog.contains("Underwater Basket Weaving")
        assert "Agriculture" in catalog

    def test_require_unknown_category(self, catalog):
        """Unknown category raises UnknownTaxonomyKey."""
        with pytest.raises(UnknownTaxonomyKey) as exc_info:
            catalog.require("Underwater Basket Weaving")
        assert exc_info.value.category == "Underwater Basket Weaving"
        assert exc_info.value.subcategory is None

    def test_require_subcategory_under_wrong_category(self, catalog):
        """A real subcategory under the wrong category is still unknown."""
        with pytest.raises(UnknownTaxonomyKey) as exc_info:
            catalog.require("Agriculture", "Sarees")
        assert exc_info.value.subcategory == "Sarees"
        assert "Sarees" in str(exc_info.value)

    def test_unknown_key_is_key_error(self, catalog):
        """UnknownTaxonomyKey can be caught as KeyError."""
        with pytest.raises(KeyError):
            catalog.subcategories_of("Nope")

    def test_head(self, catalog):
        """head(k) keeps the first k categories."""
        subset = catalog.head(3)
        assert subset.all_categories() == catalog.all_categories()[:3]
        with pytest.raises(ValueError):
            catalog.head(0)

    def test_immutable(self, catalog):
        """Attributes cannot be reassigned after construction."""
        with pytest.raises(AttributeError):
            catalog.source = None


class TestFromYaml:
    """Tests for loading and validating taxonomy documents."""

    def test_load(self, tmp_path):
        """A well-formed document loads in order."""
        path = tmp_path / "taxonomy.yaml"
        path.write_text(
            "categories:\n"
            "  - name: Tools\n"
            "    subcategories: [Hand Tools, Power Tools]\n"
            "  - name: Paper\n"
            "    subcategories: [Kraft Paper]\n",
            encoding="utf-8",
        )
        catalog = TaxonomyCatalog.from_yaml(path)
        assert catalog.all_categories() == ("Tools", "Paper")
        assert catalog.subcategories_of("Tools") == ("Hand Tools", "Power Tools")
        assert catalog.source == path

    def test_duplicate_category(self, tmp_path):
        """Duplicate category names are rejected."""
        path = tmp_path / "taxonomy.yaml"
        path.write_text(
            "categories:\n"
            "  - name: Tools\n"
            "    subcategories: [Hand Tools]\n"
            "  - name: Tools\n"
            "    subcategories: [Power Tools]\n",
            encoding="utf-8",
        )
        with pytest.raises(TaxonomyValidationError) as exc_info:
            TaxonomyCatalog.from_yaml(path)
        assert any("duplicate" in e for e in exc_info.value.errors)

    def test_empty_subcategories(self, tmp_path):
        """A category without subcategories is rejected."""
        path = tmp_path / "taxonomy.yaml"
        path.write_text("categories:\n  - name: Tools\n", encoding="utf-8")
        with pytest.raises(TaxonomyValidationError):
            TaxonomyCatalog.from_yaml(path)

    def test_scalar_subcategories(self, tmp_path):
        """A bare string is not split into one-letter subcategories."""
        path = tmp_path / "taxonomy.yaml"
        path.write_text("categories:\n  - name: Tools\n    subcategories: Fab\n", encoding="utf-8")
        with pytest.raises(TaxonomyValidationError) as exc_info:
            TaxonomyCatalog.from_yaml(path)
        assert any("must be a list" in e for e in exc_info.value.errors)

    def test_non_string_name(self, tmp_path):
        """List and numeric category names are reported, not raised as TypeError."""
        path = tmp_path / "taxonomy.yaml"
        path.write_text(
            "categories:\n"
            "  - name: [Tools, Hardware]\n"
            "    subcategories: [Hand Tools]\n"
            "  - name: 42\n"
            "    subcategories: [Power Tools]\n",
            encoding="utf-8",
        )
        with pytest.raises(TaxonomyValidationError) as exc_info:
            TaxonomyCatalog.from_yaml(path)
        assert len(exc_info.value.errors) == 2

    def test_in_memory_scalar_subcategories(self):
        """The in-memory constructor rejects a string in place of a list."""
        with pytest.raises(TaxonomyValidationError):
            TaxonomyCatalog({"Tools": "Fab"})

    def test_missing_categories_key(self, tmp_path):
        """A document without a categories list is rejected."""
        path = tmp_path / "taxonomy.yaml"
        path.write_text("industries: []\n", encoding="utf-8")
        with pytest.raises(TaxonomyValidationError):
            TaxonomyCatalog.from_yaml(path)

    def test_in_memory_duplicate_subcategory(self):
        """Duplicate subcategories within a category are rejected."""
        with pytest.raises(TaxonomyValidationError) as exc_info:
            TaxonomyCatalog({"Tools": ["Hand Tools", "Hand Tools"]})
        assert len(exc_info.value.errors) == 1
