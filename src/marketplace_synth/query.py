"""
QueryFacade - filtering and lookup over a CorpusStore.

All filters are optional and combined with AND. Exact-match filters compare
whole values; `keyword` is a case-insensitive substring match.

Usage:
    facade = QueryFacade(store, source)
    facade.filter_rfqs(category="Agriculture", urgency="High")
    facade.filter_rfqs(keyword="agri")
    facade.filter_suppliers(state="Gujarat", certification="ISO 9001:2015")
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import GenerationConfig
from .corpus import CorpusStore
from .random_source import RandomSource, SeededRandomSource
from .records import RFQ, CompanyType, RFQStatus, SupplierProfile, Urgency


def _contains(needle: str, haystack: Iterable[str]) -> bool:
    return any(needle in value.lower() for value in haystack)


class QueryFacade:
    """
    Read access to one CorpusStore, plus RFQ status updates.

    Attributes:
        store: Corpus being queried
        source: Random source for featured_suppliers()
    """

    def __init__(
        self,
        store: CorpusStore,
        source: RandomSource | None = None,
        config: GenerationConfig | None = None,
    ) -> None:
        self.store = store
        self.source = source or SeededRandomSource()
        self.config = config or GenerationConfig()

    # ------------------------------------------------------------------
    # RFQs
    # ------------------------------------------------------------------

    def filter_rfqs(
        self,
        category: str | None = None,
        subcategory: str | None = None,
        business_type: str | None = None,
        location: str | None = None,
        state: str | None = None,
        keyword: str | None = None,
        urgency: Urgency | str | None = None,
        status: RFQStatus | str | None = None,
    ) -> list[RFQ]:
        """
        RFQs matching every given filter, in corpus order.

        Args:
            category: Exact category
            subcategory: Exact subcategory
            business_type: Exact business type
            location: Exact "City, State" location
            state: Exact state (the part of location after the last comma)
            keyword: Substring of title, description, category, subcategory or a tag
            urgency: Urgency level
            status: RFQ status

        Raises:
            ValueError: If urgency or status is not a valid value
        """
        urgency = Urgency(urgency) if urgency is not None else None
        status = RFQStatus(status) if status is not None else None
        needle = keyword.lower() if keyword else None

        results = []
        for rfq in self.store.rfqs:
            if category is not None and rfq.category != category:
                continue
            if subcategory is not None and rfq.subcategory != subcategory:
                continue
            if business_type is not None and rfq.business_type != business_type:
                continue
            if location is not None and rfq.location != location:
                continue
            if state is not None and rfq.state != state:
                continue
            if urgency is not None and rfq.urgency != urgency:
                continue
            if status is not None and rfq.status != status:
                continue
            if needle and not _contains(
                needle,
                (rfq.title, rfq.description, rfq.category, rfq.subcategory, *rfq.tags),
            ):
                continue
            results.append(rfq)
        return results

    def search_rfqs(self, keyword: str) -> list[RFQ]:
        return self.filter_rfqs(keyword=keyword)

    def get_rfq(self, rfq_id: str) -> RFQ | None:
        return self.store.get_rfq(rfq_id)

    def sample_rfqs_by_category(
        self, categories: Iterable[str], per_category: int = 5
    ) -> dict[str, list[RFQ]]:
        """First `per_category` RFQs of each requested category."""
        return {
            category: self.filter_rfqs(category=category)[:per_category]
            for category in categories
        }

    def update_rfq_status(self, rfq_id: str, status: RFQStatus | str) -> RFQ:
        """
        Set an RFQ's status. The only write the facade performs.

        Raises:
            KeyError: If no RFQ has this ID
        """
        return self.store.set_rfq_status(rfq_id, status)

    # ------------------------------------------------------------------
    # Suppliers
    # ------------------------------------------------------------------

    def filter_suppliers(
        self,
        category: str | None = None,
        subcategory: str | None = None,
        company_type: CompanyType | str | None = None,
        state: str | None = None,
        city: str | None = None,
        keyword: str | None = None,
        certification: str | None = None,
        export_country: str | None = None,
    ) -> list[SupplierProfile]:
        """
        Suppliers matching every given filter, in corpus order.

        `keyword` is matched against company name, specialization, product
        range, categories and subcategories.
        """
        company_type = CompanyType(company_type) if company_type is not None else None
        needle = keyword.lower() if keyword else None
        candidates = (
            self.store.suppliers_in_category(category)
            if category is not None
            else self.store.suppliers
        )

        results = []
        for supplier in candidates:
            if subcategory is not None and subcategory not in supplier.subcategories:
                continue
            if company_type is not None and supplier.company_type != company_type:
                continue
            if state is not None and supplier.address.state != state:
                continue
            if city is not None and supplier.address.city != city:
                continue
            if certification is not None and certification not in supplier.certifications:
                continue
            if export_country is not None and export_country not in supplier.export_countries:
                continue
            if needle and not _contains(
                needle,
                (
                    supplier.company_name,
                    *supplier.specialization,
                    *supplier.product_range,
                    *supplier.categories,
                    *supplier.subcategories,
                ),
            ):
                continue
            results.append(supplier)
        return results

    def search_suppliers(self, keyword: str) -> list[SupplierProfile]:
        return self.filter_suppliers(keyword=keyword)

    def get_supplier(self, company_id: str) -> SupplierProfile | None:
        return self.store.get_supplier(company_id)

    def featured_suppliers(self, count: int = 6) -> list[SupplierProfile]:
        """A random selection of suppliers rated at least config.featured_min_rating."""
        eligible = [
            s for s in self.store.suppliers if s.rating >= self.config.featured_min_rating
        ]
        return self.source.shuffled(eligible)[:count]
