"""
RFQ Generator: synthetic buyer requirements.

One RFQ is built from (category, subcategory, scenario):

1. business type, location and urgency drawn uniformly
2. urgency -> deadline bucket (High: 7-20 days, Medium: 30-90, Low: 90 days-6 months)
3. (scenario, urgency) -> budget bracket, uniform pick inside it
4. category -> quantity class (equipment/materials/...), default 'materials'
5. (category, subcategory) -> specifications, default generic list
6. status weighted 3:1:1 Active / In Progress / Closed
7. buyer contact person with derived email
"""

from __future__ import annotations

from datetime import timedelta

from ..constants.reference import (
    BUSINESS_TYPES,
    BUYER_COMPANY_PREFIXES,
    BUYER_COMPANY_SUFFIXES,
    BUYER_DESIGNATIONS,
    LOCATIONS,
)
from ..constants.rfq import (
    BUDGET_BRACKETS,
    DEADLINE_BUCKETS,
    DESCRIPTION_TEMPLATES,
    QUANTITY_CLASS_BY_CATEGORY,
    QUANTITY_TEMPLATES,
    SPECIFICATIONS,
    STATUS_WEIGHTS,
    TITLE_TEMPLATES,
)
from ..records import RFQ, ContactPerson, RFQStatus, Scenario, Urgency
from .base import BaseRecordGenerator

URGENCIES = list(Urgency)
STATUSES = list(STATUS_WEIGHTS)
STATUS_WEIGHT_VALUES = [STATUS_WEIGHTS[s] for s in STATUSES]


def deadline_bucket(urgency: Urgency) -> list[str]:
    """Candidate deadlines for an urgency level."""
    return DEADLINE_BUCKETS[Urgency(urgency)]


def budget_bracket(scenario: Scenario | str, urgency: Urgency) -> list[str]:
    """Candidate budgets for a (scenario, urgency) pair."""
    return BUDGET_BRACKETS[Scenario.parse(scenario)][Urgency(urgency)]


def quantity_class(category: str) -> str:
    """Quantity template class for a category ('materials' when unmapped)."""
    return QUANTITY_CLASS_BY_CATEGORY.resolve(category)


def specifications_for(category: str, subcategory: str) -> list[str]:
    """Specification list for a pair, or the generic default list."""
    return list(SPECIFICATIONS.resolve((category, subcategory)))


class RFQGenerator(BaseRecordGenerator):
    """
    Generate RFQ records.

    Every call to generate_single() validates the taxonomy pair first and
    raises UnknownTaxonomyKey for pairs outside the catalog.
    """

    RECORD_KIND = "rfq"

    def generate_single(
        self,
        category: str,
        subcategory: str,
        scenario: Scenario | str = Scenario.ENTERPRISE,
        urgency: Urgency | None = None,
    ) -> RFQ:
        """
        Build one RFQ.

        Args:
            category: Taxonomy category
            subcategory: Subcategory listed under category
            scenario: Buyer archetype driving the budget bracket
            urgency: Force an urgency instead of drawing one

        Returns:
            A new RFQ record

        Raises:
            UnknownTaxonomyKey: If the pair is not in the catalog
            ValueError: If scenario is not a known Scenario
        """
        self.catalog.require(category, subcategory)
        scenario = Scenario.parse(scenario)

        business_type = self.source.pick(BUSINESS_TYPES)
        location = self.source.pick(LOCATIONS)
        if urgency is None:
            urgency = self.source.pick(URGENCIES)
        else:
            urgency = Urgency(urgency)

        budget = self.source.pick(budget_bracket(scenario, urgency))
        quantity = self.source.pick(QUANTITY_TEMPLATES[quantity_class(category)])
        deadline = self.source.pick(deadline_bucket(urgency))
        status: RFQStatus = self.source.weighted_pick(STATUSES, STATUS_WEIGHT_VALUES)

        return RFQ(
            id=self.ids.new_record_id(self.RECORD_KIND),
            title=self._title(subcategory, business_type),
            category=category,
            subcategory=subcategory,
            description=self._description(category, subcategory, business_type),
            quantity=quantity,
            budget=budget,
            location=location,
            urgency=urgency,
            deadline=deadline,
            specifications=specifications_for(category, subcategory),
            business_type=business_type,
            contact_person=self._contact_person(),
            created_date=self._recent_date(),
            status=status,
            tags=self._tags(category, subcategory, business_type),
            scenario=scenario,
        )

    def _title(self, subcategory: str, business_type: str) -> str:
        template = self.source.pick(TITLE_TEMPLATES)
        return template.format(subcategory=subcategory, business_type=business_type)

    def _description(self, category: str, subcategory: str, business_type: str) -> str:
        template = self.source.pick(DESCRIPTION_TEMPLATES)
        return template.format(
            subcategory=subcategory,
            category_lower=category.lower(),
            business_type_lower=business_type.lower(),
        )

    def _contact_person(self) -> ContactPerson:
        name = self.pool.full_name()
        company = (
            f"{self.source.pick(BUYER_COMPANY_PREFIXES)} "
            f"{self.source.pick(BUYER_COMPANY_SUFFIXES)}"
        )
        return ContactPerson(
            name=name,
            designation=self.source.pick(BUYER_DESIGNATIONS),
            company=company,
            phone=self.ids.phone_number(),
            email=self.ids.email(name, company),
        )

    def _recent_date(self) -> str:
        """ISO date within the configured window ending today."""
        days_ago = self.source.randint(0, self.config.recent_window_days - 1)
        return (self.ctx.clock() - timedelta(days=days_ago)).date().isoformat()

    @staticmethod
    def _tags(category: str, subcategory: str, business_type: str) -> tuple[str, ...]:
        # dict.fromkeys keeps first-seen order while dropping duplicates
        return tuple(dict.fromkeys(t.lower() for t in (category, subcategory, business_type)))
