"""
Supplier template tables: business-metric brackets, category profiles,
certifications, and the fixed narrative lists used for profile text.
"""

from ..lookup import TaxonomyKeyedMap
from ..records import CompanyType

# Company type -> annual turnover brackets. Manufacturer/Exporter brackets
# sit above Distributor, which sits above Trader and Service Provider.
TURNOVER_BRACKETS: dict[CompanyType, list[str]] = {
    CompanyType.MANUFACTURER: [
        "₹5-10 Crore",
        "₹10-25 Crore",
        "₹25-50 Crore",
        "₹50-100 Crore",
        "₹100-250 Crore",
    ],
    CompanyType.DISTRIBUTOR: ["₹2-5 Crore", "₹5-15 Crore", "₹15-35 Crore", "₹35-75 Crore"],
    CompanyType.TRADER: ["₹1-3 Crore", "₹3-8 Crore", "₹8-20 Crore", "₹20-50 Crore"],
    CompanyType.EXPORTER: ["₹5-15 Crore", "₹15-40 Crore", "₹40-100 Crore", "₹100-300 Crore"],
    CompanyType.SERVICE_PROVIDER: ["₹50 Lakh-2 Crore", "₹2-8 Crore", "₹8-25 Crore"],
}

EMPLOYEE_COUNTS = ["10-25", "25-50", "50-100", "100-250", "250-500", "500-1000"]

FACTORY_SIZES = [
    "2,000 sq ft",
    "5,000 sq ft",
    "10,000 sq ft",
    "25,000 sq ft",
    "50,000 sq ft",
    "1,00,000 sq ft",
]

PRODUCTION_CAPACITIES = [
    "1,000 units/month",
    "5,000 units/month",
    "10,000 units/month",
    "25,000 units/month",
    "50,000 units/month",
    "1,00,000 units/month",
    "50 MT/month",
    "100 MT/month",
    "500 MT/month",
    "1,000 MT/month",
]

RESPONSE_TIMES = ["Within 1 hour", "Within 2 hours", "Within 4 hours", "Same day"]

# Independent uniform ranges; no cross-field correlation
METRIC_RANGES = {
    "rating": (7.5, 9.5),
    "delivery_rating": (4.2, 4.9),
    "quality_rating": (4.0, 5.0),
    "communication_rating": (4.1, 4.9),
    "total_orders": (200, 1999),
    "repeat_customers": (60, 84),
    "customer_satisfaction": (85, 99),
}

ESTABLISHED_YEAR_RANGE = (1995, 2019)


GENERIC_PROFILE = {
    "specialization": ["Manufacturing", "Quality Control", "Customer Service"],
    "services": ["Technical Support", "After-sales Service", "Training"],
    "target_markets": ["Industries", "Distributors", "End Users"],
}

CATEGORY_PROFILES: TaxonomyKeyedMap[str, dict[str, list[str]]] = TaxonomyKeyedMap(
    "category_profile",
    {
        "Agriculture": {
            "specialization": ["Organic Farming", "Precision Agriculture", "Post-harvest Technology"],
            "services": ["Installation", "Training", "Maintenance", "Technical Support"],
            "target_markets": ["Farmers", "Agricultural Cooperatives", "Government Schemes"],
        },
        "Electronics & Electrical": {
            "specialization": ["PCB Design", "Embedded Systems", "IoT Solutions"],
            "services": ["Custom Design", "Prototyping", "Testing", "Certification"],
            "target_markets": ["OEMs", "System Integrators", "Distributors"],
        },
        "Automobile": {
            "specialization": ["Precision Engineering", "Quality Testing", "Just-in-Time Delivery"],
            "services": ["Design Support", "Tool Development", "Testing", "Logistics"],
            "target_markets": ["OEMs", "Tier 1 Suppliers", "Aftermarket"],
        },
        "Chemical": {
            "specialization": ["Synthesis", "Purification", "Quality Control"],
            "services": ["Custom Synthesis", "R&D Support", "Regulatory Affairs"],
            "target_markets": ["Pharmaceuticals", "Agrochemicals", "Industrial"],
        },
        "Textiles, Yarn & Fabrics": {
            "specialization": ["Yarn Manufacturing", "Fabric Weaving", "Garment Production"],
            "services": ["Design Support", "Sample Development", "Logistics"],
            "target_markets": ["Fashion Brands", "Retailers", "Exporters"],
        },
    },
    default=GENERIC_PROFILE,
)

DEFAULT_CERTIFICATIONS = ["ISO 9001:2015", "CE", "BIS", "ISI"]

CERTIFICATIONS: TaxonomyKeyedMap[str, list[str]] = TaxonomyKeyedMap(
    "certifications",
    {
        "Agriculture": ["ISO 9001:2015", "BIS", "FSSAI", "Organic India", "GlobalGAP"],
        "Electronics & Electrical": ["ISO 9001:2015", "CE", "ROHS", "FCC", "UL", "BIS", "IEC"],
        "Automobile": ["ISO 9001:2015", "TS 16949", "CE", "DOT", "ARAI", "BSVI"],
        "Chemical": ["ISO 9001:2015", "ISO 14001", "OHSAS 18001", "REACH", "GMP"],
        "Textiles, Yarn & Fabrics": ["ISO 9001:2015", "OEKO-TEX", "GOTS", "BCI", "Cradle to Cradle"],
        "Food Products & Beverage": ["ISO 22000", "HACCP", "FSSAI", "BRC", "IFS", "Halal", "Kosher"],
    },
    default=DEFAULT_CERTIFICATIONS,
)

COMPANY_NAME_WORDS: TaxonomyKeyedMap[str, list[str]] = TaxonomyKeyedMap(
    "company_name_words",
    {
        "Agriculture": ["Agro", "Farm", "Crop", "Harvest", "Green", "Organic"],
        "Electronics & Electrical": ["Electronics", "Systems", "Technologies", "Components"],
        "Automobile": ["Auto", "Motors", "Automotive", "Vehicle", "Parts"],
        "Chemical": ["Chemicals", "Pharma", "Bio", "Specialty", "Fine"],
        "Textiles, Yarn & Fabrics": ["Textiles", "Fabrics", "Garments", "Weaving", "Spinning"],
        "Food Products & Beverage": ["Foods", "Nutrition", "Beverages", "Processing", "Fresh"],
    },
    default=["Industries", "Manufacturing", "Production", "Engineering"],
)

KEY_CLIENTS: TaxonomyKeyedMap[str, list[str]] = TaxonomyKeyedMap(
    "key_clients",
    {
        "Agriculture": ["Mahindra Tractors", "TAFE", "Escorts", "Sonalika", "John Deere India"],
        "Electronics & Electrical": ["Tata Electronics", "Wipro", "HCL", "Infosys", "Samsung India"],
        "Automobile": ["Tata Motors", "Mahindra", "Maruti Suzuki", "Hyundai", "Honda"],
        "Chemical": ["Reliance Industries", "ONGC", "IOCL", "Tata Chemicals", "UPL"],
    },
    default=["L&T", "Godrej", "ITC", "Wipro", "Infosys"],
)

PRODUCT_RANGES: TaxonomyKeyedMap[tuple[str, str], list[str]] = TaxonomyKeyedMap(
    "product_range",
    {
        ("Agriculture", "Agriculture Equipment"): ["Tractors", "Harvesters", "Tillers", "Seeders", "Sprayers"],
        ("Electronics & Electrical", "Active Devices"): ["Resistors", "Capacitors", "ICs", "PCBs", "Connectors"],
        ("Automobile", "Engine Parts"): ["Engine Parts", "Brake Systems", "Transmission", "Electrical", "Body Parts"],
        ("Chemical", "Specialty Chemicals"): ["Basic Chemicals", "Specialty Chemicals", "Intermediates", "Additives"],
    },
    default=["Standard Products", "Custom Solutions", "Spare Parts", "Accessories"],
)

EXPORT_COUNTRIES = [
    "USA", "Germany", "UK", "France", "Italy",
    "Japan", "Australia", "Canada", "UAE", "Saudi Arabia",
]

UNIQUE_SELLING_POINTS = [
    "25+ years of industry experience",
    "State-of-the-art manufacturing facility",
    "In-house R&D and quality testing",
    "99% on-time delivery record",
    "ISO certified quality management",
    "Competitive pricing with best quality",
    "Dedicated technical support team",
    "Pan-India service network",
    "Export to 15+ countries",
    "Zero-defect manufacturing process",
]

AWARDS = [
    "Best Supplier Award 2023",
    "Quality Excellence Award",
    "Export Excellence Certificate",
    "Innovation in Manufacturing",
    "Customer Satisfaction Award",
    "Green Manufacturing Award",
]

TESTIMONIALS = [
    "Excellent quality products and timely delivery. Highly recommended supplier.",
    "Professional service and technical support. Been working with them for 5+ years.",
    "Consistent quality and competitive pricing. Reliable business partner.",
]

PAYMENT_TERMS = [
    "30% Advance, 70% before delivery",
    "50% Advance, 50% against documents",
    "LC at sight",
]

SHIPPING_METHODS = ["Road Transport", "Rail Transport", "Air Cargo", "Sea Freight"]

CORE_VALUES = ["Quality", "Innovation", "Customer Satisfaction", "Integrity", "Excellence"]

SUSTAINABILITY_PRACTICES = ["Eco-friendly manufacturing", "Waste reduction", "Energy efficiency"]

QUALITY_CONTROL = "In-house quality testing laboratory with latest equipment"
RD_CAPABILITIES = "Dedicated R&D team with modern testing facilities"
QUALITY_MANAGEMENT = "ISO 9001:2015 certified quality management system"
WORKING_HOURS = "Monday to Saturday: 9:00 AM to 6:00 PM"
HOLIDAY_SCHEDULE = "Closed on Sundays and national holidays"
SUPPORT_AVAILABILITY = "24/7 technical support via phone and email"
VISION = "To be the leading provider of quality products and services in our industry"
SOCIAL_RESPONSIBILITY = "Committed to community development and environmental protection"

COMPANY_DESCRIPTION_TEMPLATE = (
    "{company_name} is a leading {company_type_lower} specializing in "
    "{category_lower} products and solutions. With state-of-the-art manufacturing "
    "facilities and a dedicated team of professionals, we deliver high-quality "
    "products to customers across India and internationally. Our commitment to "
    "innovation, quality, and customer satisfaction has made us a trusted partner "
    "in the industry."
)
