#!/usr/bin/env python3
"""
Populate a marketplace corpus and print the platform showcase.

Modes:
- quick: N RFQs from the first 10 categories (default 100)
- comprehensive: one RFQ per subcategory per scenario over the full taxonomy

Supplier sets:
- demo: first 5 categories, up to 10 suppliers each
- all: 5-10 suppliers per subcategory across the full taxonomy
- none: skip supplier generation

Usage:
    python scripts/showcase.py
    python scripts/showcase.py --mode comprehensive --suppliers all --seed 7
"""

import argparse
import sys

from marketplace_synth import (
    CorpusStore,
    PopulationOrchestrator,
    QueryFacade,
    StatisticsAggregator,
    TaxonomyCatalog,
)
from marketplace_synth.constants import TAXONOMY_TABLES
from marketplace_synth.taxonomy import UnknownTaxonomyKey

RANDOM_SEED = 42


def check_template_tables(catalog: TaxonomyCatalog) -> list[str]:
    """Return one message per template table with keys outside the catalog."""
    errors = []
    for table in TAXONOMY_TABLES:
        try:
            table.validate(catalog)
        except UnknownTaxonomyKey as e:
            errors.append(f"{table.name}: {e}")
    return errors


def print_showcase(store: CorpusStore, orchestrator: PopulationOrchestrator) -> None:
    stats = StatisticsAggregator(store, orchestrator.config, orchestrator.ctx.clock)
    facade = QueryFacade(store, orchestrator.ctx.source, orchestrator.config)

    print()
    print("=" * 60)
    print("Marketplace Showcase")
    print("=" * 60)

    rfq_stats = stats.rfq_statistics()
    print("RFQs:")
    print(f"  Total: {rfq_stats['total']:,} ({rfq_stats['active']:,} active)")
    print(f"  High urgency: {rfq_stats['high_urgency']:,}")
    print(
        f"  Coverage: {rfq_stats['categories']} categories, "
        f"{rfq_stats['subcategories']} subcategories, {rfq_stats['states']} states"
    )
    print(f"  Total budget: {rfq_stats['total_budget_value']}")
    print(f"  Average budget: {rfq_stats['average_budget']}")
    if rfq_stats["skipped_budgets"]:
        print(f"  Unparsed budgets: {rfq_stats['skipped_budgets']}")

    print()
    print("Top high-value RFQs:")
    for i, rfq in enumerate(stats.high_value_rfqs(5), 1):
        print(f"  {i}. {rfq.title} - {rfq.budget} ({rfq.location})")

    print()
    print("Most recent RFQs:")
    for i, rfq in enumerate(stats.recent_rfqs(limit=5), 1):
        print(f"  {i}. {rfq.title} - {rfq.created_date}")

    if store.suppliers:
        supplier_stats = stats.supplier_statistics()
        print()
        print("Suppliers:")
        print(f"  Total: {supplier_stats['total']:,}")
        print(f"  Categories: {supplier_stats['categories']}")
        print(f"  Average per category: {supplier_stats['average_per_category']}")
        print(f"  Average rating: {supplier_stats['average_rating']}")
        for company_type, count in sorted(supplier_stats["by_company_type"].items()):
            print(f"    {company_type}: {count}")

        print()
        print("Top rated suppliers:")
        for i, supplier in enumerate(stats.top_rated_suppliers(5), 1):
            print(
                f"  {i}. {supplier.company_name} ({supplier.address.city}) "
                f"- {supplier.rating}/10"
            )

        print()
        print("Featured suppliers:")
        for supplier in facade.featured_suppliers(3):
            print(f"  - {supplier.company_name}, {supplier.company_type.value}")

    print("=" * 60)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a synthetic B2B marketplace corpus and print a showcase.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 100 quick RFQs + demo suppliers
  python showcase.py

  # Full taxonomy coverage
  python showcase.py --mode comprehensive --suppliers all

  # Different random seed
  python showcase.py --seed 123
""",
    )

    parser.add_argument(
        "--mode",
        choices=["quick", "comprehensive"],
        default="quick",
        help="RFQ population mode (default: quick)",
    )

    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="RFQ count for quick mode (default: 100)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help=f"Random seed for reproducibility (default: {RANDOM_SEED})",
    )

    parser.add_argument(
        "--suppliers",
        choices=["demo", "all", "none"],
        default="demo",
        help="Supplier set to generate (default: demo)",
    )

    return parser.parse_args()


def main() -> int:
    """
    Populate and print the showcase.

    Returns:
        0 on success, 1 if a template table references an unknown taxonomy key
    """
    args = parse_args()

    catalog = TaxonomyCatalog.default()
    errors = check_template_tables(catalog)
    if errors:
        print("Template tables reference unknown taxonomy keys:")
        for error in errors:
            print(f"  - {error}")
        return 1

    print("=" * 60)
    print("Synthetic B2B Marketplace - Corpus Generation")
    print("=" * 60)
    print(f"Seed: {args.seed}")
    print(f"Taxonomy: {len(catalog)} categories, {catalog.subcategory_count()} subcategories")
    print()

    store = CorpusStore()
    orchestrator = PopulationOrchestrator(store, catalog=catalog, seed=args.seed, verbose=True)

    if args.mode == "quick":
        orchestrator.populate_quick_rfqs(args.count)
    else:
        orchestrator.populate_comprehensive_rfqs()

    if args.suppliers == "demo":
        orchestrator.populate_demo_suppliers()
    elif args.suppliers == "all":
        orchestrator.populate_all_suppliers()

    print_showcase(store, orchestrator)
    return 0


if __name__ == "__main__":
    sys.exit(main())
