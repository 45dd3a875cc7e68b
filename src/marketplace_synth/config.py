"""
Generation configuration.

Defaults reproduce the marketplace demo: 100 quick RFQs from the first 10
categories, one RFQ per scenario per subcategory in comprehensive mode, and
5-10 suppliers per subcategory.
"""

from dataclasses import dataclass, field

from .records import Scenario


@dataclass
class GenerationConfig:
    """Configuration for population and aggregation behaviour."""

    # Quick RFQ mode
    quick_rfq_count: int = 100
    quick_category_limit: int = 10  # Sample only the first K categories

    # Comprehensive RFQ mode
    rfqs_per_scenario: int = 1
    comprehensive_scenarios: tuple[Scenario, ...] = field(
        default=(Scenario.ENTERPRISE, Scenario.MANUFACTURING, Scenario.RETAIL)
    )

    # Supplier generation
    suppliers_per_subcategory: tuple[int, int] = (5, 10)  # Inclusive range
    demo_category_limit: int = 5
    demo_suppliers_per_category: int = 10

    # RFQ created_date lies within this many days before "today"
    recent_window_days: int = 30

    # Aggregation
    top_n: int = 10
    featured_min_rating: float = 8.0

    def __post_init__(self) -> None:
        low, high = self.suppliers_per_subcategory
        if low < 0 or high < low:
            raise ValueError(
                f"suppliers_per_subcategory must be 0 <= low <= high, got {low, high}"
            )
        if self.quick_category_limit < 1:
            raise ValueError("quick_category_limit must be >= 1")
        if self.recent_window_days < 1:
            raise ValueError("recent_window_days must be >= 1")
        if not self.comprehensive_scenarios:
            raise ValueError("comprehensive_scenarios must not be empty")
