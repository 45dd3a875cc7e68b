"""
CorpusStore - explicit in-memory home for one run's generated records.

Each store is an independent corpus; tests and callers can hold as many as
they like. Writers are the PopulationOrchestrator (replace/append) and
QueryFacade.update_rfq_status(); everything else reads.

Usage:
    store = CorpusStore()
    orchestrator = PopulationOrchestrator(store, seed=42)
    orchestrator.populate_quick_rfqs(100)
    len(store.rfqs)  # 100
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from .records import RFQ, RFQStatus, SupplierProfile


class CorpusStore:
    """
    RFQs and suppliers for one generation run.

    Attributes:
        rfqs: RFQs in insertion order
        suppliers: Suppliers in insertion order
    """

    def __init__(self) -> None:
        self.rfqs: list[RFQ] = []
        self.suppliers: list[SupplierProfile] = []
        self._rfq_by_id: dict[str, RFQ] = {}
        self._supplier_by_id: dict[str, SupplierProfile] = {}
        self._suppliers_by_category: dict[str, list[SupplierProfile]] = defaultdict(list)

    def replace_rfqs(self, rfqs: Iterable[RFQ]) -> None:
        """Discard every RFQ and install the new ones."""
        self.rfqs = list(rfqs)
        self._rfq_by_id = {rfq.id: rfq for rfq in self.rfqs}

    def replace_suppliers(self, suppliers: Iterable[SupplierProfile]) -> None:
        """Discard every supplier and install the new ones."""
        self.suppliers = []
        self._supplier_by_id = {}
        self._suppliers_by_category = defaultdict(list)
        self.append_suppliers(suppliers)

    def append_suppliers(self, suppliers: Iterable[SupplierProfile]) -> None:
        """Add suppliers after the existing ones."""
        for supplier in suppliers:
            self.suppliers.append(supplier)
            self._supplier_by_id[supplier.company_id] = supplier
            for category in supplier.categories:
                self._suppliers_by_category[category].append(supplier)

    def get_rfq(self, rfq_id: str) -> RFQ | None:
        return self._rfq_by_id.get(rfq_id)

    def get_supplier(self, company_id: str) -> SupplierProfile | None:
        return self._supplier_by_id.get(company_id)

    def suppliers_in_category(self, category: str) -> list[SupplierProfile]:
        """Suppliers listing category, in insertion order (empty if none)."""
        return list(self._suppliers_by_category.get(category, ()))

    def set_rfq_status(self, rfq_id: str, status: RFQStatus | str) -> RFQ:
        """
        Overwrite the status of one RFQ.

        Raises:
            KeyError: If no RFQ has this ID
            ValueError: If status is not an RFQStatus value
        """
        rfq = self._rfq_by_id.get(rfq_id)
        if rfq is None:
            raise KeyError(f"No RFQ with id {rfq_id!r}")
        rfq.status = RFQStatus(status)
        return rfq

    def clear(self) -> None:
        self.replace_rfqs([])
        self.replace_suppliers([])

    @property
    def is_populated(self) -> bool:
        """True once either record list is non-empty."""
        return bool(self.rfqs or self.suppliers)

    def __repr__(self) -> str:
        return f"CorpusStore(rfqs={len(self.rfqs)}, suppliers={len(self.suppliers)})"
