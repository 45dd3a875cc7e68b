"""
Constants Package - template tables for record generation.

Modules:
- reference: Geography, buyer archetypes, company-name fragments, state codes
- rfq: Budget brackets, deadline buckets, quantity classes, RFQ text templates
- supplier: Turnover brackets, category profiles, certifications, profile text

Every TaxonomyKeyedMap exported here is listed in TAXONOMY_TABLES so the
whole set can be checked against a catalog in one call.
"""

from .reference import (
    BUSINESS_TYPES,
    BUYER_DESIGNATIONS,
    LOCATIONS,
    STATE_CODES,
    SUPPLIER_CITIES,
    SUPPLIER_DESIGNATIONS,
)
from .rfq import (
    BUDGET_BRACKETS,
    DEADLINE_BUCKETS,
    GENERIC_SPECIFICATIONS,
    QUANTITY_CLASS_BY_CATEGORY,
    QUANTITY_TEMPLATES,
    SPECIFICATIONS,
    STATUS_WEIGHTS,
)
from .supplier import (
    CATEGORY_PROFILES,
    CERTIFICATIONS,
    COMPANY_NAME_WORDS,
    KEY_CLIENTS,
    METRIC_RANGES,
    PRODUCT_RANGES,
    TURNOVER_BRACKETS,
)

TAXONOMY_TABLES = (
    QUANTITY_CLASS_BY_CATEGORY,
    SPECIFICATIONS,
    CATEGORY_PROFILES,
    CERTIFICATIONS,
    COMPANY_NAME_WORDS,
    KEY_CLIENTS,
    PRODUCT_RANGES,
)

__all__ = [
    # Reference data
    "LOCATIONS",
    "BUSINESS_TYPES",
    "BUYER_DESIGNATIONS",
    "SUPPLIER_DESIGNATIONS",
    "SUPPLIER_CITIES",
    "STATE_CODES",
    # RFQ templates
    "DEADLINE_BUCKETS",
    "BUDGET_BRACKETS",
    "QUANTITY_TEMPLATES",
    "QUANTITY_CLASS_BY_CATEGORY",
    "SPECIFICATIONS",
    "GENERIC_SPECIFICATIONS",
    "STATUS_WEIGHTS",
    # Supplier templates
    "TURNOVER_BRACKETS",
    "METRIC_RANGES",
    "CATEGORY_PROFILES",
    "CERTIFICATIONS",
    "COMPANY_NAME_WORDS",
    "KEY_CLIENTS",
    "PRODUCT_RANGES",
    # Validation
    "TAXONOMY_TABLES",
]
