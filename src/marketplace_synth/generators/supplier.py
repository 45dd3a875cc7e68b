"""
Supplier Generator: synthetic supplier company profiles.

Company type is drawn uniformly and keys the turnover bracket; employee
count, factory size and capacity come from independent lists. Marketplace
metrics are each drawn from their own uniform range with no correlation
between them (a 9.4 rating can sit next to a 4.2 delivery rating).
"""

from __future__ import annotations

from ..constants import supplier as tpl
from ..constants.reference import (
    DEFAULT_REGIONAL_LANGUAGE,
    REGIONAL_LANGUAGES,
    STATE_CODES,
    SUPPLIER_CITIES,
    SUPPLIER_COMPANY_PREFIXES,
    SUPPLIER_COMPANY_SUFFIXES,
    SUPPLIER_DESIGNATIONS,
)
from ..records import CompanyType, SupplierAddress, SupplierContact, SupplierProfile
from .base import BaseRecordGenerator

COMPANY_TYPES = list(CompanyType)


class SupplierGenerator(BaseRecordGenerator):
    """Generate supplier profiles, singly or per category."""

    RECORD_KIND = "supplier"

    def generate_single(self, category: str, subcategory: str) -> SupplierProfile:
        """
        Build one supplier profile.

        Args:
            category: Taxonomy category
            subcategory: Subcategory listed under category

        Raises:
            UnknownTaxonomyKey: If the pair is not in the catalog
        """
        self.catalog.require(category, subcategory)

        site = self.source.pick(SUPPLIER_CITIES)
        company_type: CompanyType = self.source.pick(COMPANY_TYPES)
        company_name = self._company_name(category)
        profile = tpl.CATEGORY_PROFILES.resolve(category)
        gst_code, state_abbrev = STATE_CODES[site["state"]]
        metrics = self._marketplace_metrics()

        return SupplierProfile(
            company_id=self.ids.next_supplier_id(),
            company_name=company_name,
            established_year=self.source.randint(*tpl.ESTABLISHED_YEAR_RANGE),
            company_type=company_type,
            gst_number=self.ids.pseudo_gstin(gst_code),
            pan_number=self.ids.pseudo_pan(),
            cin_number=(
                self.ids.pseudo_cin() if company_type is CompanyType.MANUFACTURER else None
            ),
            udyam_number=self.ids.pseudo_udyam(state_abbrev),
            annual_turnover=self.source.pick(tpl.TURNOVER_BRACKETS[company_type]),
            employee_count=f"{self.source.pick(tpl.EMPLOYEE_COUNTS)} employees",
            factory_size=self.source.pick(tpl.FACTORY_SIZES),
            production_capacity=self.source.pick(tpl.PRODUCTION_CAPACITIES),
            address=SupplierAddress(
                factory=(
                    f"Plot {self.source.randint(1, 500)}, "
                    f"Industrial Area Phase {self.source.randint(1, 3)}"
                ),
                city=site["city"],
                state=site["state"],
                pincode=site["pincode"],
            ),
            contact_person=self._contact_person(company_name),
            company_email=self.ids.company_email(company_name),
            categories=[category],
            subcategories=[subcategory],
            specialization=list(profile["specialization"]),
            product_range=list(tpl.PRODUCT_RANGES.resolve((category, subcategory))),
            services_offered=list(profile["services"]),
            target_markets=list(profile["target_markets"]),
            export_countries=self.source.sample_prefix(tpl.EXPORT_COUNTRIES, 1, 5),
            certifications=list(tpl.CERTIFICATIONS.resolve(category)),
            quality_control=tpl.QUALITY_CONTROL,
            rd_capabilities=tpl.RD_CAPABILITIES,
            quality_management=tpl.QUALITY_MANAGEMENT,
            payment_terms=list(tpl.PAYMENT_TERMS),
            credit_facility=f"₹{self.source.randint(10, 59)} Lakh approved credit limit",
            minimum_order_value=f"₹{self.source.randint(1, 5)} Lakh",
            delivery_time=(
                f"{self.source.randint(10, 29)}-{self.source.randint(30, 39)} days"
            ),
            shipping_methods=list(tpl.SHIPPING_METHODS),
            unique_selling_points=self.source.sample_prefix(tpl.UNIQUE_SELLING_POINTS, 3, 6),
            awards=self.source.sample_prefix(tpl.AWARDS, 1, 3),
            key_clients=self.source.sample_prefix(tpl.KEY_CLIENTS.resolve(category), 2, 4),
            testimonials=list(tpl.TESTIMONIALS),
            working_hours=tpl.WORKING_HOURS,
            holiday_schedule=tpl.HOLIDAY_SCHEDULE,
            support_availability=tpl.SUPPORT_AVAILABILITY,
            languages=list(
                dict.fromkeys(
                    [
                        "English",
                        "Hindi",
                        REGIONAL_LANGUAGES.get(site["state"], DEFAULT_REGIONAL_LANGUAGE),
                    ]
                )
            ),
            company_description=tpl.COMPANY_DESCRIPTION_TEMPLATE.format(
                company_name=company_name,
                company_type_lower=company_type.value.lower(),
                category_lower=category.lower(),
            ),
            vision=tpl.VISION,
            core_values=list(tpl.CORE_VALUES),
            sustainability=list(tpl.SUSTAINABILITY_PRACTICES),
            social_responsibility=tpl.SOCIAL_RESPONSIBILITY,
            **metrics,
        )

    def generate_for_category(self, category: str) -> list[SupplierProfile]:
        """
        Suppliers for every subcategory of a category.

        The count per subcategory is uniform in config.suppliers_per_subcategory
        (5-10 by default).

        Raises:
            UnknownTaxonomyKey: If the category is not in the catalog
        """
        low, high = self.config.suppliers_per_subcategory
        suppliers: list[SupplierProfile] = []
        for subcategory in self.catalog.subcategories_of(category):
            count = self.source.randint(low, high)
            for _ in range(count):
                suppliers.append(self.generate_single(category, subcategory))
        return suppliers

    def generate_all(self) -> list[SupplierProfile]:
        """Suppliers for every category in the catalog."""
        suppliers: list[SupplierProfile] = []
        for category in self.catalog.all_categories():
            suppliers.extend(self.generate_for_category(category))
        return suppliers

    def _company_name(self, category: str) -> str:
        prefix = self.source.pick(SUPPLIER_COMPANY_PREFIXES)
        word = self.source.pick(tpl.COMPANY_NAME_WORDS.resolve(category))
        suffix = self.source.pick(SUPPLIER_COMPANY_SUFFIXES)
        return f"{prefix} {word} {suffix}"

    def _contact_person(self, company_name: str) -> SupplierContact:
        first = self.pool.first_name()
        last = self.pool.last_name()
        name = f"{first} {last}"
        return SupplierContact(
            name=name,
            designation=self.source.pick(SUPPLIER_DESIGNATIONS),
            phone=self.ids.landline_style_number(),
            email=self.ids.email(name, company_name),
            whatsapp=self.ids.whatsapp_number(),
            linkedin=self.ids.linkedin_handle(first, last),
        )

    def _marketplace_metrics(self) -> dict[str, float | int | str]:
        """Each metric from its own independent range."""
        ranges = tpl.METRIC_RANGES
        return {
            "rating": round(self.source.uniform(*ranges["rating"]), 1),
            "total_orders": self.source.randint(*ranges["total_orders"]),
            "response_time": self.source.pick(tpl.RESPONSE_TIMES),
            "delivery_rating": round(self.source.uniform(*ranges["delivery_rating"]), 1),
            "quality_rating": round(self.source.uniform(*ranges["quality_rating"]), 1),
            "communication_rating": round(
                self.source.uniform(*ranges["communication_rating"]), 1
            ),
            "repeat_customers": self.source.randint(*ranges["repeat_customers"]),
            "customer_satisfaction": self.source.randint(*ranges["customer_satisfaction"]),
        }
