"""
RFQ template tables: budget brackets, deadline buckets, quantity classes,
title/description templates and per-subcategory specifications.
"""

from ..lookup import TaxonomyKeyedMap
from ..records import RFQStatus, Scenario, Urgency

# Urgency -> candidate deadlines
DEADLINE_BUCKETS: dict[Urgency, list[str]] = {
    Urgency.HIGH: ["7 days", "10 days", "15 days", "20 days"],
    Urgency.MEDIUM: ["30 days", "45 days", "60 days", "90 days"],
    Urgency.LOW: ["90 days", "120 days", "180 days", "6 months"],
}

# (scenario, urgency) -> candidate budgets. Within a scenario the upper
# bound of every High bracket entry >= Medium >= Low.
BUDGET_BRACKETS: dict[Scenario, dict[Urgency, list[str]]] = {
    Scenario.ENTERPRISE: {
        Urgency.HIGH: ["₹2-5 Crore", "₹5-10 Crore", "₹1-3 Crore", "₹3-7 Crore"],
        Urgency.MEDIUM: ["₹50L-1Cr", "₹1-2Cr", "₹25-75L", "₹75L-1.5Cr"],
        Urgency.LOW: ["₹10-25L", "₹25-50L", "₹15-40L", "₹30-60L"],
    },
    Scenario.MANUFACTURING: {
        Urgency.HIGH: ["₹1-3 Crore", "₹2-4 Crore", "₹80L-2Cr", "₹1.5-3.5Cr"],
        Urgency.MEDIUM: ["₹25-75L", "₹40-80L", "₹30-60L", "₹50-90L"],
        Urgency.LOW: ["₹5-20L", "₹10-30L", "₹8-25L", "₹12-35L"],
    },
    Scenario.RETAIL: {
        Urgency.HIGH: ["₹50-80L", "₹60-90L", "₹40-70L", "₹45-85L"],
        Urgency.MEDIUM: ["₹15-40L", "₹20-45L", "₹12-35L", "₹25-50L"],
        Urgency.LOW: ["₹3-12L", "₹5-18L", "₹4-15L", "₹6-20L"],
    },
    Scenario.STARTUP: {
        Urgency.HIGH: ["₹25-50L", "₹30-60L", "₹20-45L", "₹35-65L"],
        Urgency.MEDIUM: ["₹8-20L", "₹10-25L", "₹6-18L", "₹12-28L"],
        Urgency.LOW: ["₹2-8L", "₹3-10L", "₹1.5-6L", "₹4-12L"],
    },
}

QUANTITY_TEMPLATES: dict[str, list[str]] = {
    "equipment": ["2-5 units", "10-25 units", "50-100 units", "100-500 units"],
    "materials": ["500-2000 kg", "1-10 MT", "10-50 MT", "100-500 MT"],
    "electronics": [
        "100-1000 pieces",
        "1000-5000 pieces",
        "5000-20000 pieces",
        "20000-100000 pieces",
    ],
    "chemicals": ["200-1000 liters", "1000-5000 liters", "5-25 MT", "25-100 MT"],
    "textiles": [
        "500-2000 meters",
        "2000-10000 meters",
        "10000-50000 meters",
        "1000-5000 pieces",
    ],
    "food": ["100-500 kg", "500-2000 kg", "2-10 MT", "10-50 MT"],
    "construction": ["10-50 units", "50-200 units", "200-1000 units", "1000-5000 units"],
    "services": ["1-3 months", "3-6 months", "6-12 months", "1-2 years"],
}

# Unmapped categories order by weight/volume
QUANTITY_CLASS_BY_CATEGORY: TaxonomyKeyedMap[str, str] = TaxonomyKeyedMap(
    "quantity_class",
    {
        "Agriculture": "equipment",
        "Electronics & Electrical": "electronics",
        "Automobile": "equipment",
        "Chemical": "chemicals",
        "Textiles, Yarn & Fabrics": "textiles",
        "Food Products & Beverage": "food",
        "Real Estate & Construction": "construction",
        "Business Services": "services",
        "Industrial Machinery": "equipment",
        "Packaging & Paper": "materials",
    },
    default="materials",
)

GENERIC_SPECIFICATIONS = ["High quality", "Durable", "Cost-effective", "Quick delivery"]

SPECIFICATIONS: TaxonomyKeyedMap[tuple[str, str], list[str]] = TaxonomyKeyedMap(
    "specifications",
    {
        ("Agriculture", "Agriculture Equipment"): [
            "Heavy duty construction",
            "Fuel efficient",
            "GPS enabled",
            "Warranty 2+ years",
        ],
        ("Agriculture", "Fresh Flowers"): [
            "Grade A quality",
            "Cold chain delivery",
            "Morning delivery",
            "Proper packaging",
        ],
        ("Agriculture", "Seeds & Saplings"): [
            "High germination rate",
            "Disease resistant",
            "Certified quality",
            "Proper documentation",
        ],
        ("Agriculture", "Irrigation Systems"): [
            "Drip irrigation",
            "Water efficient",
            "Automated control",
            "Durable materials",
        ],
        ("Electronics & Electrical", "Cables & Wires"): [
            "ISI certified",
            "Copper conductor",
            "Fire retardant",
            "High voltage rating",
        ],
        ("Electronics & Electrical", "Active Devices"): [
            "SMD components",
            "RoHS compliant",
            "Extended temperature range",
            "High reliability",
        ],
        ("Electronics & Electrical", "Batteries & Energy Storage"): [
            "Maintenance free",
            "Long life",
            "Fast charging",
            "Safety certified",
        ],
        ("Automobile", "Auto Electrical Parts"): [
            "OE quality",
            "Warranty included",
            "ISO certified",
            "Bulk packaging",
        ],
        ("Automobile", "Engine Parts"): [
            "Genuine parts",
            "Performance tested",
            "Corrosion resistant",
            "Proper fitment",
        ],
        ("Automobile", "Tires & Tubes"): [
            "DOT approved",
            "Fuel efficient",
            "All weather",
            "Extended warranty",
        ],
        ("Chemical", "Specialty Chemicals"): [
            "COA with every batch",
            "REACH compliant",
            "MSDS provided",
            "Tamper-proof drums",
        ],
        ("Food Products & Beverage", "Spices & Seasonings"): [
            "FSSAI licensed",
            "No artificial colour",
            "Moisture below 10%",
            "Food grade packaging",
        ],
        ("Textiles, Yarn & Fabrics", "Cotton Fabrics"): [
            "100% cotton",
            "Pre-shrunk",
            "Colour fast",
            "GSM as per sample",
        ],
        ("Industrial Machinery", "CNC Machines"): [
            "Positioning accuracy 0.01 mm",
            "Siemens or Fanuc controller",
            "Installation and training",
            "Annual maintenance contract",
        ],
    },
    default=GENERIC_SPECIFICATIONS,
)

TITLE_TEMPLATES = [
    "Bulk Order: {subcategory} for {business_type}",
    "Regular Supply: {subcategory} for Manufacturing",
    "Urgent Requirement: {subcategory} for Project",
    "Tender: {subcategory} for Government Project",
    "Export Order: {subcategory} for International Market",
    "OEM Supply: {subcategory} for Production Line",
    "Retail Stock: {subcategory} for Distribution Network",
    "Import Requirement: {subcategory} from Global Suppliers",
]

DESCRIPTION_TEMPLATES = [
    "We are looking for reliable suppliers for {subcategory} to support our "
    "{business_type_lower} operations. Need consistent quality and timely delivery.",
    "Requirement for {subcategory} in bulk quantities for our {category_lower} "
    "business. Looking for competitive pricing and good after-sales support.",
    "Our company requires {subcategory} for ongoing projects. Interested suppliers "
    "should have good track record and industry certifications.",
    "We need {subcategory} for our {business_type_lower} requirements. Quality and "
    "reliability are our top priorities.",
    "Looking for established suppliers of {subcategory} for long-term business "
    "partnership. Bulk orders with regular requirements.",
]

# Mostly active: 3 of 5 draws Active, 1 In Progress, 1 Closed
STATUS_WEIGHTS: dict[RFQStatus, int] = {
    RFQStatus.ACTIVE: 3,
    RFQStatus.IN_PROGRESS: 1,
    RFQStatus.CLOSED: 1,
}
