"""
Tests for QueryFacade.
"""

import pytest

from marketplace_synth import (
    CompanyType,
    QueryFacade,
    RFQStatus,
    SeededRandomSource,
    SupplierGenerator,
    Urgency,
)


@pytest.fixture
def facade(store):
    return QueryFacade(store, SeededRandomSource(seed=1))


@pytest.fixture
def rfq_corpus(store, make_rfq):
    rfqs = [
        make_rfq(title="Agriculture Equipment Bulk Order"),
        make_rfq(
            title="Catalyst Supply",
            category="Chemical",
            subcategory="Catalysts",
            location="Ahmedabad, Gujarat",
            urgency=Urgency.LOW,
            tags=("chemical", "catalysts", "pharmaceutical"),
            business_type="Pharmaceutical",
        ),
        make_rfq(
            title="Seeds for Kharif Season",
            subcategory="Seeds & Saplings",
            status=RFQStatus.CLOSED,
            location="Delhi NCR",
        ),
    ]
    store.replace_rfqs(rfqs)
    return rfqs


class TestFilterRFQs:
    """Tests for filter_rfqs()."""

    def test_keyword_case_insensitive(self, facade, rfq_corpus):
        """'agri' matches 'Agriculture Equipment Bulk Order'."""
        assert rfq_corpus[0] in facade.filter_rfqs(keyword="agri")
        assert rfq_corpus[0] in facade.filter_rfqs(keyword="AGRI")
        assert facade.search_rfqs("agri") == facade.filter_rfqs(keyword="agri")

    def test_keyword_matches_tags(self, facade, rfq_corpus):
        """Keyword search includes tags."""
        assert facade.filter_rfqs(keyword="pharma") == [rfq_corpus[1]]

    def test_no_filters_match_all(self, facade, rfq_corpus):
        """Omitting every filter returns the whole corpus."""
        assert facade.filter_rfqs() == rfq_corpus

    def test_conjunctive(self, facade, rfq_corpus):
        """Filters combine with AND."""
        assert facade.filter_rfqs(category="Agriculture") == [rfq_corpus[0], rfq_corpus[2]]
        assert facade.filter_rfqs(category="Agriculture", status="Closed") == [rfq_corpus[2]]
        assert facade.filter_rfqs(category="Chemical", urgency=Urgency.HIGH) == []

    def test_exact_filters(self, facade, rfq_corpus):
        """Subcategory, business type, location and state are exact matches."""
        assert facade.filter_rfqs(subcategory="Catalysts") == [rfq_corpus[1]]
        assert facade.filter_rfqs(business_type="Pharmaceutical") == [rfq_corpus[1]]
        assert facade.filter_rfqs(location="Delhi NCR") == [rfq_corpus[2]]
        assert facade.filter_rfqs(state="Gujarat") == [rfq_corpus[1]]
        assert facade.filter_rfqs(state="Gujar") == []

    def test_invalid_urgency(self, facade, rfq_corpus):
        """Unknown urgency values raise ValueError."""
        with pytest.raises(ValueError):
            facade.filter_rfqs(urgency="Critical")

    def test_sample_by_category(self, facade, rfq_corpus):
        """sample_rfqs_by_category caps each category."""
        sample = facade.sample_rfqs_by_category(["Agriculture", "Chemical", "Textiles"], 1)
        assert sample == {
            "Agriculture": [rfq_corpus[0]],
            "Chemical": [rfq_corpus[1]],
            "Textiles": [],
        }


class TestRFQLookup:
    """Tests for get_rfq()/update_rfq_status()."""

    def test_get_rfq(self, facade, rfq_corpus):
        """Lookup by ID, None when missing."""
        assert facade.get_rfq(rfq_corpus[1].id) is rfq_corpus[1]
        assert facade.get_rfq("rfq_missing") is None

    def test_update_status(self, facade, rfq_corpus):
        """update_rfq_status changes the stored record."""
        facade.update_rfq_status(rfq_corpus[0].id, RFQStatus.IN_PROGRESS)
        assert facade.filter_rfqs(status="In Progress") == [rfq_corpus[0]]

    def test_update_status_unknown(self, facade, rfq_corpus):
        """Unknown IDs raise KeyError."""
        with pytest.raises(KeyError):
            facade.update_rfq_status("rfq_missing", "Closed")


class TestSuppliers:
    """Tests for supplier filters and featured selection."""

    @pytest.fixture
    def suppliers(self, store, ctx):
        generator = SupplierGenerator(ctx)
        suppliers = [
            *[generator.generate_single("Agriculture", "Fresh Flowers") for _ in range(20)],
            *[generator.generate_single("Chemical", "Catalysts") for _ in range(20)],
        ]
        store.replace_suppliers(suppliers)
        return suppliers

    def test_by_category(self, facade, suppliers):
        """Category filter uses the per-category index."""
        assert facade.filter_suppliers(category="Chemical") == suppliers[20:]

    def test_by_subcategory(self, facade, suppliers):
        """Subcategory filter."""
        assert facade.filter_suppliers(subcategory="Fresh Flowers") == suppliers[:20]

    def test_by_location(self, facade, suppliers):
        """State and city filters."""
        target = suppliers[0].address
        by_state = facade.filter_suppliers(state=target.state)
        by_city = facade.filter_suppliers(state=target.state, city=target.city)
        assert suppliers[0] in by_city
        assert set(s.company_id for s in by_city) <= set(s.company_id for s in by_state)
        assert all(s.address.city == target.city for s in by_city)

    def test_by_company_type(self, facade, suppliers):
        """Company type accepts enum or value."""
        expected = [s for s in suppliers if s.company_type is CompanyType.MANUFACTURER]
        assert facade.filter_suppliers(company_type="Manufacturer") == expected

    def test_certification_and_export(self, facade, suppliers):
        """Certification and export country filters."""
        assert facade.filter_suppliers(certification="FSSAI") == [
            s for s in suppliers if "FSSAI" in s.certifications
        ]
        assert all(
            "USA" in s.export_countries for s in facade.filter_suppliers(export_country="USA")
        )

    def test_keyword(self, facade, suppliers):
        """Keyword matches company name case-insensitively."""
        name = suppliers[5].company_name
        assert suppliers[5] in facade.search_suppliers(name.upper())
        assert suppliers[5] in facade.filter_suppliers(keyword="fresh flow")

    def test_get_supplier(self, facade, suppliers):
        """Lookup by company ID."""
        assert facade.get_supplier(suppliers[3].company_id) is suppliers[3]
        assert facade.get_supplier("SUPP999999") is None

    def test_featured(self, facade, suppliers):
        """Featured suppliers are distinct and rated at least 8.0."""
        featured = facade.featured_suppliers(6)
        assert len(featured) <= 6
        assert len({s.company_id for s in featured}) == len(featured)
        assert all(s.rating >= 8.0 for s in featured)
