"""
Generators Package - record generators for the marketplace corpus.

Base Classes:
- GeneratorContext: Shared state dataclass passed to all generators
- BaseRecordGenerator: Abstract base class for record generators

Record Generators:
- RFQGenerator: Buyer requirements (budget, deadline, quantity, specs)
- SupplierGenerator: Supplier company profiles (registration, metrics, offer)
"""

from .base import BaseRecordGenerator, GeneratorContext
from .rfq import RFQGenerator, budget_bracket, deadline_bucket
from .supplier import SupplierGenerator

__all__ = [
    # Base classes
    "GeneratorContext",
    "BaseRecordGenerator",
    # Record generators
    "RFQGenerator",
    "SupplierGenerator",
    # Bracket helpers
    "budget_bracket",
    "deadline_bucket",
]
