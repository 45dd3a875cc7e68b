"""
StatisticsAggregator - read-only summaries over a CorpusStore.

Money strings are normalised to lakh units before any arithmetic:

    "₹50 Lakh"       -> 50
    "₹2 Crore"       -> 200
    "₹2-5 Crore"     -> 200..500   (midpoint 350)
    "₹50L-1Cr"       -> 50..100    (midpoint 75)
    "₹1.5-6L"        -> 1.5..6     (an endpoint without a unit takes the next one)

Totals and rankings use the midpoint of the parsed range. Strings with no
recognisable unit contribute 0 and are counted in BudgetSummary.skipped;
aggregation never raises on them. Every percentage and average over an
empty corpus is 0.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any

from .config import GenerationConfig
from .corpus import CorpusStore
from .records import RFQ, RFQStatus, SupplierProfile, Urgency

# Multipliers to lakh units
UNIT_MULTIPLIERS = {
    "crore": 100.0,
    "cr": 100.0,
    "lakh": 1.0,
    "lakhs": 1.0,
    "lac": 1.0,
    "l": 1.0,
}

_AMOUNT = re.compile(
    r"(\d+(?:\.\d+)?)\s*(crore|cr|lakhs|lakh|lac|l)?(?![a-z])",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class MoneyRange:
    """A parsed money string in lakh units."""

    low: float
    high: float

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) / 2


@dataclass(frozen=True)
class BudgetSummary:
    """
    Aggregated RFQ budgets.

    Attributes:
        total_lakhs: Sum of parsed midpoints
        average_lakhs: total_lakhs / parsed (0 when nothing parsed)
        parsed: Budgets that contributed
        skipped: Budgets that could not be parsed
        total: total_lakhs formatted with format_lakhs()
        average: average_lakhs formatted with format_lakhs()
    """

    total_lakhs: float
    average_lakhs: float
    parsed: int
    skipped: int
    total: str
    average: str


def parse_money_lakhs(text: str) -> MoneyRange | None:
    """
    Parse an INR amount or range into lakh units.

    Args:
        text: e.g. "₹2-5 Crore", "₹50 Lakh", "₹75L-1.5Cr"

    Returns:
        MoneyRange, or None if no amount with a unit is present
    """
    matches = _AMOUNT.findall(text or "")[:2]
    if not matches:
        return None

    # Endpoints without a unit inherit the unit of the endpoint after them
    values: list[float] = []
    unit: str | None = None
    for number, raw_unit in reversed(matches):
        if raw_unit:
            unit = raw_unit.lower()
        if unit is None:
            return None
        values.append(float(number) * UNIT_MULTIPLIERS[unit])
    values.reverse()
    return MoneyRange(low=min(values), high=max(values))


def format_lakhs(value: float) -> str:
    """
    Render a lakh amount: >= 100 as Crore with one decimal, else as Lakh.

    >>> format_lakhs(250)
    '₹2.5 Crore'
    >>> format_lakhs(45)
    '₹45 Lakh'
    """
    if value >= 100:
        return f"₹{value / 100:.1f} Crore"
    if float(value).is_integer():
        return f"₹{int(value)} Lakh"
    return f"₹{value:.1f} Lakh"


def _magnitude(text: str) -> float:
    parsed = parse_money_lakhs(text)
    return parsed.midpoint if parsed else 0.0


def _percentage(part: int, whole: int) -> float:
    return round(100 * part / whole, 1) if whole else 0.0


class StatisticsAggregator:
    """
    Summaries over one CorpusStore.

    The aggregator holds no copies: every call reads the store's current
    record lists.
    """

    def __init__(
        self,
        store: CorpusStore,
        config: GenerationConfig | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.store = store
        self.config = config or GenerationConfig()
        self.clock = clock

    # ------------------------------------------------------------------
    # RFQ statistics
    # ------------------------------------------------------------------

    def budget_summary(self, rfqs: list[RFQ] | None = None) -> BudgetSummary:
        """Total and average RFQ budget in lakhs; unparseable budgets are skipped."""
        rfqs = self.store.rfqs if rfqs is None else rfqs
        total = 0.0
        parsed = skipped = 0
        for rfq in rfqs:
            money = parse_money_lakhs(rfq.budget)
            if money is None:
                skipped += 1
                continue
            total += money.midpoint
            parsed += 1
        average = total / parsed if parsed else 0.0
        return BudgetSummary(
            total_lakhs=total,
            average_lakhs=average,
            parsed=parsed,
            skipped=skipped,
            total=format_lakhs(total),
            average=format_lakhs(average),
        )

    def rfq_statistics(self) -> dict[str, Any]:
        """Headline RFQ counts, distinct-value counts and budget totals."""
        rfqs = self.store.rfqs
        by_status = Counter(rfq.status for rfq in rfqs)
        budget = self.budget_summary(rfqs)
        return {
            "total": len(rfqs),
            "active": by_status[RFQStatus.ACTIVE],
            "in_progress": by_status[RFQStatus.IN_PROGRESS],
            "closed": by_status[RFQStatus.CLOSED],
            "high_urgency": sum(1 for rfq in rfqs if rfq.urgency is Urgency.HIGH),
            "categories": len({rfq.category for rfq in rfqs}),
            "subcategories": len({(rfq.category, rfq.subcategory) for rfq in rfqs}),
            "business_types": len({rfq.business_type for rfq in rfqs}),
            "locations": len({rfq.location for rfq in rfqs}),
            "states": len({rfq.state for rfq in rfqs}),
            "total_budget_value": budget.total,
            "average_budget": budget.average,
            "skipped_budgets": budget.skipped,
            "recent_rfqs": len(self.recent_rfqs()),
            "active_percentage": _percentage(by_status[RFQStatus.ACTIVE], len(rfqs)),
        }

    def high_value_rfqs(
        self,
        n: int | None = None,
        urgency: Urgency | None = Urgency.HIGH,
        status: RFQStatus | None = RFQStatus.ACTIVE,
    ) -> list[RFQ]:
        """
        RFQs ranked by parsed budget, largest first.

        Ties keep corpus order. Pass urgency=None / status=None to drop
        that filter.
        """
        n = self.config.top_n if n is None else n
        candidates = [
            rfq
            for rfq in self.store.rfqs
            if (urgency is None or rfq.urgency == urgency)
            and (status is None or rfq.status == status)
        ]
        ranked = sorted(candidates, key=lambda rfq: _magnitude(rfq.budget), reverse=True)
        return ranked[:n]

    def recent_rfqs(self, days: int | None = None, limit: int | None = None) -> list[RFQ]:
        """
        RFQs created within the last `days` calendar days (today included), newest first.

        Args:
            days: Window length (config.recent_window_days if None)
            limit: Maximum number returned (all if None)
        """
        days = self.config.recent_window_days if days is None else days
        cutoff = self.clock().date() - timedelta(days=days - 1)
        recent = [
            rfq for rfq in self.store.rfqs if date.fromisoformat(rfq.created_date) >= cutoff
        ]
        recent.sort(key=lambda rfq: rfq.created_date, reverse=True)
        return recent if limit is None else recent[:limit]

    def rfq_category_breakdown(self) -> dict[str, int]:
        """RFQ count per category, largest first."""
        return dict(Counter(rfq.category for rfq in self.store.rfqs).most_common())

    # ------------------------------------------------------------------
    # Supplier statistics
    # ------------------------------------------------------------------

    def top_rated_suppliers(self, n: int | None = None) -> list[SupplierProfile]:
        """Suppliers by rating, highest first; ties keep corpus order."""
        n = self.config.top_n if n is None else n
        return sorted(self.store.suppliers, key=lambda s: s.rating, reverse=True)[:n]

    def category_breakdown(self) -> dict[str, int]:
        """Supplier count per category, largest first."""
        counts: Counter[str] = Counter()
        for supplier in self.store.suppliers:
            counts.update(supplier.categories)
        return dict(counts.most_common())

    def supplier_statistics(self) -> dict[str, Any]:
        """Supplier counts by type and state, coverage and ratings."""
        suppliers = self.store.suppliers
        categories = self.category_breakdown()
        total = len(suppliers)
        return {
            "total": total,
            "by_company_type": dict(Counter(s.company_type.value for s in suppliers)),
            "by_state": dict(Counter(s.address.state for s in suppliers)),
            "categories": len(categories),
            "subcategories": len(
                {(cat, sub) for s in suppliers for cat in s.categories for sub in s.subcategories}
            ),
            "average_per_category": round(total / len(categories)) if categories else 0,
            "average_rating": (
                round(sum(s.rating for s in suppliers) / total, 2) if total else 0.0
            ),
            "top_rated": self.top_rated_suppliers(),
        }
