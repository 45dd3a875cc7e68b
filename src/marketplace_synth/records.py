"""
Record types produced by the generators.

Records are plain dataclasses. Downstream consumers (export adapters, UI
tables, search indexes) take them as-is or via to_dict(); no wire schema
is owned here.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class Urgency(str, Enum):
    """RFQ urgency; constrains deadline bucket and budget bracket."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class RFQStatus(str, Enum):
    """Status assigned once at creation."""

    ACTIVE = "Active"
    IN_PROGRESS = "In Progress"
    CLOSED = "Closed"


class CompanyType(str, Enum):
    """Supplier business model; keys the turnover bracket table."""

    MANUFACTURER = "Manufacturer"
    DISTRIBUTOR = "Distributor"
    TRADER = "Trader"
    EXPORTER = "Exporter"
    SERVICE_PROVIDER = "Service Provider"


class Scenario(str, Enum):
    """Buyer archetype that biases the RFQ budget bracket."""

    ENTERPRISE = "enterprise"
    MANUFACTURING = "manufacturing"
    RETAIL = "retail"
    STARTUP = "startup"

    @classmethod
    def parse(cls, value: Scenario | str) -> Scenario:
        """Accept an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = [s.value for s in cls]
            raise ValueError(f"Unknown scenario {value!r}. Valid: {valid}") from None


def _plain(value: Any) -> Any:
    """Enum members to their values, tuples to lists, recursively."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass
class ContactPerson:
    """Buyer-side contact attached to an RFQ."""

    name: str
    designation: str
    company: str
    phone: str
    email: str


@dataclass
class RFQ:
    """A synthetic Request for Quotation."""

    id: str
    title: str
    category: str
    subcategory: str
    description: str
    quantity: str
    budget: str
    location: str
    urgency: Urgency
    deadline: str
    specifications: list[str]
    business_type: str
    contact_person: ContactPerson
    created_date: str  # ISO yyyy-mm-dd
    status: RFQStatus
    tags: tuple[str, ...] = ()
    scenario: Scenario = Scenario.ENTERPRISE

    @property
    def state(self) -> str:
        """State part of 'City, State' locations; the whole string otherwise."""
        _, sep, state = self.location.rpartition(", ")
        return state if sep else self.location

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))


@dataclass
class SupplierAddress:
    factory: str
    city: str
    state: str
    pincode: str
    country: str = "India"


@dataclass
class SupplierContact:
    name: str
    designation: str
    phone: str
    email: str
    whatsapp: str
    linkedin: str | None = None


@dataclass
class SupplierProfile:
    """
    A synthetic supplier company profile.

    The registration identifiers (gst_number, pan_number, cin_number,
    udyam_number) are SYNTHETIC: shaped like Indian regulatory IDs but
    never checksum-valid. Do not use them to test real validation code.
    """

    # Company
    company_id: str
    company_name: str
    established_year: int
    company_type: CompanyType

    # Registration (synthetic, see class docstring)
    gst_number: str
    pan_number: str
    cin_number: str | None
    udyam_number: str | None

    # Business metrics
    annual_turnover: str
    employee_count: str
    factory_size: str
    production_capacity: str

    address: SupplierAddress
    contact_person: SupplierContact
    company_email: str

    # Capabilities
    categories: list[str]
    subcategories: list[str]
    specialization: list[str]
    product_range: list[str]
    services_offered: list[str]
    target_markets: list[str]
    export_countries: list[str]

    # Quality
    certifications: list[str]
    quality_control: str
    rd_capabilities: str
    quality_management: str

    # Commercial terms
    payment_terms: list[str]
    credit_facility: str
    minimum_order_value: str
    delivery_time: str
    shipping_methods: list[str]

    # Marketplace performance
    rating: float
    total_orders: int
    response_time: str
    delivery_rating: float
    quality_rating: float
    communication_rating: float
    repeat_customers: int
    customer_satisfaction: int

    # Competitive advantages
    unique_selling_points: list[str]
    awards: list[str]
    key_clients: list[str]
    testimonials: list[str]

    # Operations
    working_hours: str
    holiday_schedule: str
    support_availability: str
    languages: list[str]

    company_description: str
    vision: str
    core_values: list[str] = field(default_factory=list)
    sustainability: list[str] = field(default_factory=list)
    social_responsibility: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))
